"""Shared cell predicates used by the inflator, cleaner and quantizer."""

from __future__ import annotations

from spritecast.colors import Grid

_NEIGHBOURS_8 = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)
ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))

FEATURE_MIN_OPAQUE: int = 6
FEATURE_MAX_SAME: int = 2


def is_interior_feature(
    grid: Grid,
    x: int,
    y: int,
    min_opaque: int = FEATURE_MIN_OPAQUE,
    max_same: int = FEATURE_MAX_SAME,
) -> bool:
    """Whether the cell at ``(x, y)`` is a small enclosed marking.

    Eyes, buttons and logos show up as a color that is surrounded by
    opaque cells of *other* colors.  The cell qualifies when none of its
    8 neighbours falls outside the grid, at least *min_opaque* of them
    are opaque, and at most *max_same* of those share its color.
    """
    color = grid[y][x]
    if color is None:
        return False
    height, width = len(grid), len(grid[0])
    if x < 1 or y < 1 or x >= width - 1 or y >= height - 1:
        return False

    opaque = same = 0
    for dx, dy in _NEIGHBOURS_8:
        neighbour = grid[y + dy][x + dx]
        if neighbour is None:
            continue
        opaque += 1
        if neighbour == color:
            same += 1
    return opaque >= min_opaque and same <= max_same


def is_edge_pixel(grid: Grid, x: int, y: int) -> bool:
    """Whether ``(x, y)`` touches the grid border or an orthogonal transparent cell."""
    height, width = len(grid), len(grid[0])
    for dx, dy in ORTHOGONAL:
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            return True
        if grid[ny][nx] is None:
            return True
    return False
