"""Shared fixtures for spritecast tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from sprite_helpers import make_block_image, png_bytes


@pytest.fixture(autouse=True)
def _reset_spritecast_logger() -> Iterator[None]:
    """Keep handlers installed by CLI tests from leaking between tests."""
    yield
    logger = logging.getLogger("spritecast")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def tall_block_png() -> bytes:
    """64×128 transparent image with a centered 32×96 solid blue block."""
    return png_bytes(make_block_image((64, 128), (16, 16, 48, 112), (0, 0, 255, 255)))


@pytest.fixture()
def wide_block_png() -> bytes:
    """128×128 opaque white image with a centered 96×32 solid red block."""
    return png_bytes(
        make_block_image(
            (128, 128), (16, 48, 112, 80), (200, 0, 0, 255), (255, 255, 255, 255)
        )
    )


@pytest.fixture()
def square_block_png() -> bytes:
    """96×96 transparent image with a centered 48×48 green block."""
    return png_bytes(make_block_image((96, 96), (24, 24, 72, 72), (0, 200, 0, 255)))
