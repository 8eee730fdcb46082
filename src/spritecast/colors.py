"""Color primitives shared by every pipeline stage.

A grid cell is either an opaque ``RGB`` triple or ``None`` for a
transparent cell.  Hex strings only appear at the edges of the system
(palette output, JSON export, CLI).
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

TRANSPARENT = None
TRANSPARENT_HEX = "transparent"

# Alpha below this is "transparent" when converting RGBA to a hex color.
HEX_ALPHA_THRESHOLD: int = 50


class RGB(NamedTuple):
    """An opaque 8-bit color."""

    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        """Return the color as a lowercase ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Cell = Optional[RGB]
Grid = list[list[Cell]]


def _clamp_channel(value: float) -> int:
    return max(0, min(255, round(value)))


def rgba_to_hex(r: float, g: float, b: float, a: float = 255) -> str:
    """Format channels as ``#rrggbb``, or ``"transparent"`` when ``a < 50``.

    Channels are rounded and clamped to 0..255 before formatting.
    """
    if a < HEX_ALPHA_THRESHOLD:
        return TRANSPARENT_HEX
    return RGB(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b)).hex


def hex_to_rgb(text: str | None) -> RGB | None:
    """Parse a ``#rrggbb`` string.

    Returns ``None`` for empty input, ``"transparent"`` and fully
    transparent ``#00000000`` values.

    Raises:
        ValueError: If *text* is not a six-digit hex color.
    """
    if not text or text == TRANSPARENT_HEX or text.startswith("#00000000"):
        return None
    if len(text) != 7 or not text.startswith("#"):
        raise ValueError(f"Invalid hex color: {text!r}")
    try:
        return RGB(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
    except ValueError as exc:
        raise ValueError(f"Invalid hex color: {text!r}") from exc


def cell_to_hex(cell: Cell) -> str:
    """Return the wire representation of a grid cell."""
    return TRANSPARENT_HEX if cell is None else cell.hex


def color_distance(c1: tuple[int, int, int], c2: tuple[int, int, int]) -> float:
    """Euclidean distance over R, G and B."""
    return math.sqrt(
        (c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2
    )


def hue_angle(color: tuple[int, int, int]) -> float:
    """Cheap hue proxy in radians: ``atan2(g - b, r - b)``."""
    r, g, b = color
    return math.atan2(g - b, r - b)


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def grid_colors(grid: Grid) -> set[RGB]:
    """Distinct opaque colors present in *grid*."""
    return {cell for row in grid for cell in row if cell is not None}
