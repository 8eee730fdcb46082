"""Logging configuration for SpriteCast.

Provides a setup function and a module-level logger factory built on
Python's standard ``logging`` module.  Pipeline stages attach ``stage``
and ``elapsed_ms`` attributes through ``extra=`` so the JSON formatter
can surface them as structured fields.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "spritecast"
DEFAULT_FORMAT = "%(levelname)-5s | %(name)-20s | %(message)s"
VERBOSE_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)-20s | %(message)s"
_STRUCTURED_FIELDS = ("stage", "elapsed_ms", "archetype")
_SETUP_LOCK = threading.Lock()


class JsonFormatter(logging.Formatter):
    """One JSON object per line, carrying stage metadata when present."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _STRUCTURED_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _formatter(json_logs: bool, fmt: str) -> logging.Formatter:
    return JsonFormatter() if json_logs else logging.Formatter(fmt)


def setup_logging(
    level: int = logging.INFO,
    verbose: bool = False,
    log_file: str | None = None,
    json_logs: bool = False,
) -> None:
    """Configure handlers on the ``spritecast`` root logger.

    Repeated calls reuse the existing stderr handler (and any file handler
    pointing at the same path) instead of stacking duplicates.

    Args:
        level: Logging level (default: INFO).
        verbose: If True, include timestamps in console output.
        log_file: Optional file path to also write logs to.
        json_logs: Emit structured JSON log lines when True.
    """
    with _SETUP_LOCK:
        logger = logging.getLogger(ROOT_LOGGER)
        logger.setLevel(level)

        console = None
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                continue
            if getattr(handler, "stream", None) is not sys.stderr:
                continue
            if console is None:
                console = handler
            else:
                logger.removeHandler(handler)
        if console is None:
            console = logging.StreamHandler(sys.stderr)
            logger.addHandler(console)
        console.setFormatter(
            _formatter(json_logs, VERBOSE_FORMAT if verbose else DEFAULT_FORMAT)
        )

        if not log_file:
            return

        target = os.path.abspath(str(log_file))
        file_handler = next(
            (
                h
                for h in logger.handlers
                if isinstance(h, logging.FileHandler)
                and getattr(h, "baseFilename", None) == target
            ),
            None,
        )
        if file_handler is None:
            file_handler = logging.FileHandler(target)
            logger.addHandler(file_handler)
        file_handler.setFormatter(_formatter(json_logs, VERBOSE_FORMAT))


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a SpriteCast module.

    Args:
        name: Module name (e.g., ``"pipeline"``, ``"quantizer"``).  A fully
            qualified ``spritecast.*`` name is accepted unchanged.

    Returns:
        A logger instance under the ``spritecast`` namespace.
    """
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
