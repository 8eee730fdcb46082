"""Palette reconciliation and palette/grid consistency checks."""

from __future__ import annotations

from collections.abc import Iterable

from spritecast.colors import RGB, Grid, grid_colors


def reconcile_palette(grid: Grid) -> list[RGB]:
    """Re-derive the palette as exactly the opaque colors present in *grid*.

    Returns:
        The distinct colors, sorted (equivalently, sorted by hex string).
    """
    return sorted(grid_colors(grid))


def palette_to_hex(palette: Iterable[RGB]) -> list[str]:
    return [color.hex for color in palette]


def validate_grid_colors(grid: Grid, palette: Iterable[RGB]) -> list[str]:
    """List colors used in *grid* but absent from *palette*.

    Args:
        grid: Color grid to check.
        palette: Allowed colors.

    Returns:
        Unique offending colors as hex, in first-seen order (empty if the
        grid is consistent with the palette).
    """
    allowed = set(palette)
    invalid: list[str] = []
    seen: set[RGB] = set()
    for row in grid:
        for cell in row:
            if cell is None or cell in allowed or cell in seen:
                continue
            seen.add(cell)
            invalid.append(cell.hex)
    return invalid
