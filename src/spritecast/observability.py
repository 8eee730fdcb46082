"""Per-conversion observability helpers for SpriteCast.

Provides lightweight, in-process timing and color-count aggregation that
can be surfaced in CLI output and exported as JSON after a conversion.
"""

from __future__ import annotations

import json
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from spritecast.logging import get_logger

logger = get_logger("observability")


@dataclass
class ConversionMetrics:
    """Collect stage timings and palette statistics for one conversion."""

    started_at_epoch: float = field(default_factory=time.time)
    finished_at_epoch: float | None = None
    archetype: str | None = None
    colors_before_quantize: int | None = None
    colors_after_quantize: int | None = None

    _stage_seconds: dict[str, float] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under *name*."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            with self._lock:
                self._stage_seconds[name] = self._stage_seconds.get(name, 0.0) + elapsed
            logger.debug(
                "Stage %s took %.2f ms",
                name,
                elapsed * 1000,
                extra={"stage": name, "elapsed_ms": round(elapsed * 1000, 3)},
            )

    def record_palette(self, before: int, after: int) -> None:
        with self._lock:
            self.colors_before_quantize = before
            self.colors_after_quantize = after

    def finish(self, archetype: str | None = None) -> None:
        """Mark the conversion as finished."""
        with self._lock:
            if archetype is not None:
                self.archetype = archetype
            if self.finished_at_epoch is None:
                self.finished_at_epoch = time.time()

    @property
    def stage_seconds(self) -> dict[str, float]:
        with self._lock:
            return dict(self._stage_seconds)

    def snapshot(self) -> dict[str, Any]:
        """Build a JSON-serializable snapshot of collected metrics."""
        with self._lock:
            end = self.finished_at_epoch
            duration = max(
                0.0, (end if end is not None else time.time()) - self.started_at_epoch
            )
            return {
                "started_at_epoch": self.started_at_epoch,
                "finished_at_epoch": end,
                "duration_seconds": duration,
                "archetype": self.archetype,
                "colors_before_quantize": self.colors_before_quantize,
                "colors_after_quantize": self.colors_after_quantize,
                "stage_seconds": dict(self._stage_seconds),
            }


def write_run_summary(path: Path, payload: dict[str, Any]) -> None:
    """Write a summary payload to disk as UTF-8 JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
