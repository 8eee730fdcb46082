"""Ground anchoring and derivation of the back and side views."""

from __future__ import annotations

import math

from spritecast.colors import Cell, Grid, copy_grid

MIN_SIDE_WIDTH: int = 4


def anchor_to_ground(grid: Grid) -> Grid:
    """Copy each column's lowest opaque cell into the bottom row.

    Columns that are empty, or already reach the bottom row, are left
    alone.  Cells between the original base and the bottom stay as they
    were.
    """
    out = copy_grid(grid)
    height = len(grid)
    for x in range(len(grid[0])):
        for y in range(height - 1, -1, -1):
            if grid[y][x] is not None:
                if y < height - 1:
                    out[height - 1][x] = grid[y][x]
                break
    return out


def mirror_grid(grid: Grid) -> Grid:
    """Reverse every row."""
    return [row[::-1] for row in grid]


def resample_row(row: list[Cell], target_width: int) -> list[Cell]:
    """Nearest-neighbour resample of a row to *target_width* cells."""
    step = len(row) / target_width
    return [row[math.floor(i * step)] for i in range(target_width)]


def side_width(front_width: int, side_compression: float) -> int:
    return max(MIN_SIDE_WIDTH, math.ceil(front_width * side_compression))


def synthesize_views(front: Grid, side_compression: float) -> tuple[Grid, Grid, Grid]:
    """Derive ``(back, left, right)`` from the finished front grid.

    The back view is the horizontal mirror of the front.  The left view
    squeezes each row to ``max(4, ceil(width * side_compression))`` cells
    and the right view mirrors the left.  No depth is modelled.
    """
    width = side_width(len(front[0]), side_compression)
    back = mirror_grid(front)
    left = [resample_row(row, width) for row in front]
    right = mirror_grid(left)
    return back, left, right
