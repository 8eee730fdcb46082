"""Controlled dilation that keeps thin silhouettes and tiny markings legible."""

from __future__ import annotations

from spritecast.colors import Grid, copy_grid
from spritecast.features import (
    FEATURE_MAX_SAME,
    FEATURE_MIN_OPAQUE,
    ORTHOGONAL,
    is_interior_feature,
)
from spritecast.logging import get_logger

logger = get_logger("inflator")


def heal_gaps(grid: Grid) -> Grid:
    """Fill interior transparent cells that have two or more opaque orthogonal neighbours.

    The fill color is the first opaque neighbour in left, right, up, down
    order.  Neighbours are read from *grid* so fills never cascade.
    """
    height, width = len(grid), len(grid[0])
    out = copy_grid(grid)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[y][x] is not None:
                continue
            neighbours = [
                c
                for c in (grid[y][x - 1], grid[y][x + 1], grid[y - 1][x], grid[y + 1][x])
                if c is not None
            ]
            if len(neighbours) >= 2:
                out[y][x] = neighbours[0]
    return out


def grow_features(
    grid: Grid,
    min_opaque: int = FEATURE_MIN_OPAQUE,
    max_same: int = FEATURE_MAX_SAME,
) -> Grid:
    """Extend every interior feature into its transparent orthogonal neighbours."""
    height, width = len(grid), len(grid[0])
    out = copy_grid(grid)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if not is_interior_feature(grid, x, y, min_opaque, max_same):
                continue
            color = grid[y][x]
            for dx, dy in ORTHOGONAL:
                if out[y + dy][x + dx] is None:
                    out[y + dy][x + dx] = color
    return out


def inflate_shape(
    grid: Grid,
    min_opaque: int = FEATURE_MIN_OPAQUE,
    max_same: int = FEATURE_MAX_SAME,
) -> Grid:
    """Run gap healing, then feature growth on its result; *grid* is left untouched."""
    healed = heal_gaps(grid)
    inflated = grow_features(healed, min_opaque, max_same)
    logger.debug("Inflated %dx%d grid", len(grid[0]), len(grid))
    return inflated
