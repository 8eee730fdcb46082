"""Tests for spritecast.logging module."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from spritecast.logging import (
    DEFAULT_FORMAT,
    VERBOSE_FORMAT,
    JsonFormatter,
    get_logger,
    setup_logging,
)


class TestGetLogger:
    """Tests for the get_logger factory function."""

    def test_returns_correct_namespace(self) -> None:
        """get_logger('quantizer') returns 'spritecast.quantizer'."""
        assert get_logger("quantizer").name == "spritecast.quantizer"

    def test_qualified_name_unchanged(self) -> None:
        """Names already under 'spritecast' are not prefixed twice."""
        assert get_logger("spritecast.pipeline").name == "spritecast.pipeline"
        assert get_logger("spritecast").name == "spritecast"

    def test_child_of_spritecast(self) -> None:
        """Returned logger is a child of the 'spritecast' root logger."""
        logging.getLogger("spritecast")
        lg = get_logger("views")
        assert lg.parent is not None
        assert lg.parent.name == "spritecast"


class TestSetupLogging:
    """Tests for the setup_logging configuration function."""

    def _stderr_handlers(self) -> list[logging.Handler]:
        return [
            h
            for h in logging.getLogger("spritecast").handlers
            if getattr(h, "stream", None) is sys.stderr
        ]

    def test_sets_level(self) -> None:
        """setup_logging applies the requested level to the root logger."""
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger("spritecast").level == logging.DEBUG

    def test_default_format(self) -> None:
        """Non-verbose console output uses DEFAULT_FORMAT."""
        setup_logging()
        (handler,) = self._stderr_handlers()
        assert handler.formatter is not None
        assert handler.formatter._fmt == DEFAULT_FORMAT

    def test_verbose_format(self) -> None:
        """verbose=True switches the console to VERBOSE_FORMAT."""
        setup_logging(verbose=True)
        (handler,) = self._stderr_handlers()
        assert handler.formatter is not None
        assert handler.formatter._fmt == VERBOSE_FORMAT

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        """Calling setup_logging again reuses the stderr handler."""
        setup_logging()
        setup_logging(verbose=True)
        setup_logging(json_logs=True)
        handlers = self._stderr_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JsonFormatter)

    def test_log_file(self, tmp_path: Path) -> None:
        """log_file adds exactly one file handler that receives records."""
        log_path = tmp_path / "run.log"
        setup_logging(log_file=str(log_path))
        setup_logging(log_file=str(log_path))
        file_handlers = [
            h
            for h in logging.getLogger("spritecast").handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1

        get_logger("test").info("written to file")
        file_handlers[0].flush()
        assert "written to file" in log_path.read_text(encoding="utf-8")


class TestJsonFormatter:
    """Tests for structured JSON log lines."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord(
            "spritecast.pipeline", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self) -> None:
        """Every JSON line carries level, logger, message and timestamp."""
        payload = json.loads(JsonFormatter().format(self._record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "spritecast.pipeline"
        assert payload["message"] == "hello world"
        assert "timestamp" in payload
        assert "stage" not in payload

    def test_stage_fields(self) -> None:
        """stage, elapsed_ms and archetype extras become JSON fields."""
        line = JsonFormatter().format(
            self._record(stage="quantize", elapsed_ms=1.5, archetype="tall_object")
        )
        payload = json.loads(line)
        assert payload["stage"] == "quantize"
        assert payload["elapsed_ms"] == 1.5
        assert payload["archetype"] == "tall_object"
