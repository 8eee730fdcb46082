"""Removal of isolated edge noise that spares lines and interior markings."""

from __future__ import annotations

from spritecast.colors import Cell, Grid, copy_grid
from spritecast.features import (
    FEATURE_MAX_SAME,
    FEATURE_MIN_OPAQUE,
    is_edge_pixel,
    is_interior_feature,
)
from spritecast.logging import get_logger

logger = get_logger("cleaner")


def _at(grid: Grid, x: int, y: int) -> Cell:
    if 0 <= y < len(grid) and 0 <= x < len(grid[0]):
        return grid[y][x]
    return None


def cleanup_islands(
    grid: Grid,
    min_opaque: int = FEATURE_MIN_OPAQUE,
    max_same: int = FEATURE_MAX_SAME,
) -> Grid:
    """Clear opaque cells with no opaque orthogonal neighbour on the shape's edge.

    A cell is always kept when it is an interior feature or sits in the
    middle of a straight same-color vertical or horizontal run.  Only
    cells with zero opaque orthogonal neighbours that also touch
    transparency or the border are treated as noise.
    """
    height, width = len(grid), len(grid[0])
    out = copy_grid(grid)
    removed = 0

    for y in range(height):
        for x in range(width):
            color = grid[y][x]
            if color is None:
                continue
            if is_interior_feature(grid, x, y, min_opaque, max_same):
                continue

            left, right = _at(grid, x - 1, y), _at(grid, x + 1, y)
            up, down = _at(grid, x, y - 1), _at(grid, x, y + 1)
            if up == color and down == color:
                continue
            if left == color and right == color:
                continue

            neighbours = sum(c is not None for c in (left, right, up, down))
            if neighbours == 0 and is_edge_pixel(grid, x, y):
                out[y][x] = None
                removed += 1

    logger.debug("Island cleanup removed %d cells", removed)
    return out
