"""Bounding box of the opaque content left after background removal."""

from __future__ import annotations

from spritecast.buffer import PixelBuffer
from spritecast.models import Rect


def content_bounds(buffer: PixelBuffer, transparent_alpha: int = 50) -> Rect:
    """Return the tight inclusive rectangle of pixels with alpha > *transparent_alpha*.

    A fully transparent buffer yields the whole canvas.
    """
    width, height = buffer.width, buffer.height
    data = buffer.data
    min_x, min_y = width, height
    max_x = max_y = -1

    for y in range(height):
        row = y * width * 4
        for x in range(width):
            if data[row + x * 4 + 3] > transparent_alpha:
                if x < min_x:
                    min_x = x
                if x > max_x:
                    max_x = x
                if y < min_y:
                    min_y = y
                if y > max_y:
                    max_y = y

    if max_x < 0:
        return Rect(x=0, y=0, width=width, height=height)
    return Rect(x=min_x, y=min_y, width=max_x - min_x + 1, height=max_y - min_y + 1)
