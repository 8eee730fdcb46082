"""Corner-seeded flood fill that clears the background of the working canvas."""

from __future__ import annotations

import math

from spritecast.buffer import PixelBuffer
from spritecast.logging import get_logger

logger = get_logger("preprocessing.background")


def remove_background(
    buffer: PixelBuffer,
    tolerance: float = 40.0,
    transparent_alpha: int = 50,
) -> PixelBuffer:
    """Return a copy of *buffer* with corner-connected background made transparent.

    The fill starts at all four corners and spreads 4-connected.  A
    neighbour joins the fill when it is already transparent
    (alpha < *transparent_alpha*) or when its RGB distance to the pixel it
    is reached from is below *tolerance*, so gentle gradients are followed.
    Only alpha is written; RGB channels are preserved.
    """
    out = buffer.copy()
    width, height = out.width, out.height
    data = out.data
    visited = bytearray(width * height)
    stack = [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)]
    cleared = 0

    while stack:
        cx, cy = stack.pop()
        pos = cy * width + cx
        if visited[pos]:
            continue
        visited[pos] = 1

        ci = pos * 4
        r, g, b = data[ci], data[ci + 1], data[ci + 2]
        data[ci + 3] = 0
        cleared += 1

        for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            npos = ny * width + nx
            if visited[npos]:
                continue
            ni = npos * 4
            if data[ni + 3] < transparent_alpha:
                stack.append((nx, ny))
                continue
            dist = math.sqrt(
                (r - data[ni]) ** 2 + (g - data[ni + 1]) ** 2 + (b - data[ni + 2]) ** 2
            )
            if dist < tolerance:
                stack.append((nx, ny))

    logger.debug("Flood fill cleared %d of %d pixels", cleared, width * height)
    return out
