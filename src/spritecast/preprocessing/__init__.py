"""Pixel-buffer stages that run before the image becomes a grid."""

from spritecast.preprocessing.background import remove_background
from spritecast.preprocessing.bounds import content_bounds
from spritecast.preprocessing.canvas import (
    boost_contrast,
    decode_image,
    draw_on_canvas,
)

__all__ = [
    "boost_contrast",
    "content_bounds",
    "decode_image",
    "draw_on_canvas",
    "remove_background",
]
