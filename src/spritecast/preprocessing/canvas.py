"""Payload decoding, working-canvas letterboxing and contrast boost."""

from __future__ import annotations

import io

from PIL import Image

from spritecast.buffer import PixelBuffer
from spritecast.errors import CanvasError, DecodeError
from spritecast.logging import get_logger

logger = get_logger("preprocessing.canvas")


def decode_image(data: bytes) -> Image.Image:
    """Decode an encoded raster payload into an RGBA image.

    Raises:
        DecodeError: If Pillow cannot interpret the bytes as an image.
    """
    if not data:
        raise DecodeError("Failed to load image for processing: empty payload")
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except Exception as exc:
        raise DecodeError(f"Failed to load image for processing: {exc}") from exc

    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return img


def draw_on_canvas(
    image: Image.Image,
    orig_width: int,
    orig_height: int,
    canvas_size: int = 128,
) -> PixelBuffer:
    """Letterbox *image* onto a transparent square canvas.

    The image is scaled to fit while keeping the ``orig_width`` /
    ``orig_height`` aspect ratio, centered, and resampled with nearest
    neighbour so no new colors are invented.

    Raises:
        CanvasError: If the drawing size is degenerate or Pillow fails.
    """
    if orig_width <= 0 or orig_height <= 0:
        raise CanvasError(
            f"Canvas context failed: invalid source size {orig_width}x{orig_height}"
        )

    scale = min(canvas_size / orig_width, canvas_size / orig_height)
    draw_w = round(orig_width * scale)
    draw_h = round(orig_height * scale)
    if draw_w <= 0 or draw_h <= 0:
        raise CanvasError(
            f"Canvas context failed: {orig_width}x{orig_height} collapses "
            f"to {draw_w}x{draw_h} on a {canvas_size}px canvas"
        )
    offset = ((canvas_size - draw_w) // 2, (canvas_size - draw_h) // 2)

    try:
        canvas = Image.new("RGBA", (canvas_size, canvas_size), (0, 0, 0, 0))
        resized = image.resize((draw_w, draw_h), resample=Image.Resampling.NEAREST)
        canvas.paste(resized, offset)
    except Exception as exc:
        raise CanvasError(f"Canvas context failed: {exc}") from exc

    logger.debug(
        "Drew %dx%d source at %dx%d offset %s", orig_width, orig_height, draw_w, draw_h, offset
    )
    return PixelBuffer.from_image(canvas)


def boost_contrast(buffer: PixelBuffer, factor: float) -> PixelBuffer:
    """Stretch RGB channels around mid-grey by *factor*; alpha is untouched."""
    lut = bytes(max(0, min(255, round(factor * (v - 128) + 128))) for v in range(256))
    out = buffer.copy()
    data = out.data
    for i in range(0, len(data), 4):
        data[i] = lut[data[i]]
        data[i + 1] = lut[data[i + 1]]
        data[i + 2] = lut[data[i + 2]]
    return out
