"""Edge-weighted downsampling of cropped content into a color grid."""

from __future__ import annotations

import math

from spritecast.buffer import PixelBuffer
from spritecast.colors import RGB, Cell, Grid
from spritecast.logging import get_logger
from spritecast.models import Rect

logger = get_logger("downsampler")


def _dominant_color(histogram: dict[RGB, float]) -> Cell:
    # Strict ">" keeps the first-seen color on exact ties.
    best: Cell = None
    best_weight = 0.0
    for color, weight in histogram.items():
        if weight > best_weight:
            best, best_weight = color, weight
    return best


def smart_downsample(
    buffer: PixelBuffer,
    bounds: Rect,
    target_width: int,
    target_height: int,
    *,
    opaque_alpha: int = 128,
    transparent_ratio: float = 0.6,
    edge_weight: float = 2.5,
    top_bias_weight: float = 1.75,
    top_bias_band: float = 0.25,
) -> Grid:
    """Reduce the *bounds* region of *buffer* to ``target_width`` × ``target_height``.

    Each cell covers a truncated block of source pixels.  Opaque pixels
    vote for their color; votes on the block boundary are multiplied by
    *edge_weight* and votes from the top *top_bias_band* of the content
    by *top_bias_weight*.  A cell whose transparent share exceeds
    *transparent_ratio* (or that covers no pixels) is transparent.

    Args:
        buffer: Working canvas after background removal.
        bounds: Content rectangle to sample from.
        target_width: Output grid width in cells.
        target_height: Output grid height in cells.

    Returns:
        A ``target_height`` × ``target_width`` grid of ``RGB`` or ``None``.
    """
    source = buffer.crop(bounds)
    src_w, src_h = source.width, source.height
    data = source.data
    cell_w = src_w / target_width
    cell_h = src_h / target_height

    grid: Grid = []
    for ty in range(target_height):
        start_y = math.floor(ty * cell_h)
        end_y = min(math.floor((ty + 1) * cell_h), src_h)
        row: list[Cell] = []
        for tx in range(target_width):
            start_x = math.floor(tx * cell_w)
            end_x = min(math.floor((tx + 1) * cell_w), src_w)

            histogram: dict[RGB, float] = {}
            transparent = 0
            sampled = 0
            for sy in range(start_y, end_y):
                top_bias = top_bias_weight if sy / src_h < top_bias_band else 1.0
                edge_row = sy == start_y or sy == end_y - 1
                for sx in range(start_x, end_x):
                    i = (sy * src_w + sx) * 4
                    sampled += 1
                    if data[i + 3] < opaque_alpha:
                        transparent += 1
                        continue
                    color = RGB(data[i], data[i + 1], data[i + 2])
                    is_edge = edge_row or sx == start_x or sx == end_x - 1
                    weight = (edge_weight if is_edge else 1.0) * top_bias
                    histogram[color] = histogram.get(color, 0.0) + weight

            if transparent > sampled * transparent_ratio:
                row.append(None)
            else:
                row.append(_dominant_color(histogram))
        grid.append(row)

    logger.debug(
        "Downsampled %dx%d content to %dx%d grid",
        src_w,
        src_h,
        target_width,
        target_height,
    )
    return grid
