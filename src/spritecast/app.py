"""Programmatic API entry point for SpriteCast."""

from __future__ import annotations

from spritecast.errors import SpriteCastError
from spritecast.logging import get_logger
from spritecast.models import (
    ProcessingState,
    ProcessingStatus,
    SpriteResult,
    TranslationConfig,
)
from spritecast.observability import ConversionMetrics
from spritecast.pipeline import generate_sprite_from_image

logger = get_logger("app")


class SpriteTranslator:
    """Stateful front door for UI callers.

    Tracks the Idle → Processing → Complete | Error lifecycle of the most
    recent conversion and keeps its result.  A translator handles one
    conversion at a time; use separate instances for parallel work.
    """

    def __init__(self, config: TranslationConfig | None = None) -> None:
        self.config = config or TranslationConfig()
        self._state = ProcessingState()
        self._result: SpriteResult | None = None
        self._metrics: ConversionMetrics | None = None

    @property
    def state(self) -> ProcessingState:
        return self._state

    @property
    def result(self) -> SpriteResult | None:
        """Result of the last successful conversion, if any."""
        return self._result

    @property
    def metrics(self) -> ConversionMetrics | None:
        return self._metrics

    async def convert(
        self, payload: bytes | str, orig_width: int, orig_height: int
    ) -> SpriteResult:
        """Convert an image, updating :attr:`state` along the way.

        Raises:
            SpriteCastError: If a conversion is already running, or the
                conversion itself fails (the state then holds the message).
            asyncio.CancelledError: If the awaiting task is cancelled; the
                state moves to ERROR so the translator can be reused.
        """
        if self._state.status is ProcessingStatus.PROCESSING:
            raise SpriteCastError("A conversion is already in progress")

        self._state = ProcessingState(status=ProcessingStatus.PROCESSING)
        self._result = None
        self._metrics = ConversionMetrics()
        try:
            result = await generate_sprite_from_image(
                payload, orig_width, orig_height, self.config, self._metrics
            )
        except SpriteCastError as exc:
            logger.error("Conversion failed: %s", exc)
            self._state = ProcessingState(status=ProcessingStatus.ERROR, error=str(exc))
            raise
        except BaseException as exc:
            # Cancellation or an unexpected failure must not leave the
            # translator stuck in PROCESSING.
            message = str(exc) or type(exc).__name__
            logger.error("Conversion aborted: %s", message)
            self._state = ProcessingState(status=ProcessingStatus.ERROR, error=message)
            raise

        self._result = result
        self._state = ProcessingState(status=ProcessingStatus.COMPLETE)
        return result

    def reset(self) -> None:
        """Return to IDLE and forget the last result."""
        if self._state.status is ProcessingStatus.PROCESSING:
            raise SpriteCastError("Cannot reset while a conversion is in progress")
        self._state = ProcessingState()
        self._result = None
        self._metrics = None
