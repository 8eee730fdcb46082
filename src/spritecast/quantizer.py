"""Spatially biased palette reduction by greedy nearest-pair merging."""

from __future__ import annotations

from dataclasses import dataclass, field

from spritecast.colors import RGB, Grid, color_distance, hue_angle
from spritecast.features import FEATURE_MAX_SAME, FEATURE_MIN_OPAQUE, is_interior_feature
from spritecast.logging import get_logger

logger = get_logger("quantizer")

SPAN_WEIGHT: int = 1000
INTERIOR_WEIGHT: int = 2000


@dataclass
class ColorStats:
    """Per-color tallies that decide which color survives a merge.

    Attributes:
        count: Number of cells painted with the color.
        columns: Distinct grid columns the color occupies.
        interior: Number of its cells that are interior features.
    """

    count: int = 0
    columns: set[int] = field(default_factory=set)
    interior: int = 0

    @property
    def score(self) -> int:
        return len(self.columns) * SPAN_WEIGHT + self.interior * INTERIOR_WEIGHT + self.count


@dataclass
class QuantizeResult:
    """Reduced grid and its sorted palette."""

    grid: Grid
    palette: list[RGB]


def tally_colors(
    grid: Grid,
    min_opaque: int = FEATURE_MIN_OPAQUE,
    max_same: int = FEATURE_MAX_SAME,
) -> dict[RGB, ColorStats]:
    """Collect :class:`ColorStats` for every color, in first-seen order."""
    stats: dict[RGB, ColorStats] = {}
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell is None:
                continue
            entry = stats.setdefault(cell, ColorStats())
            entry.count += 1
            entry.columns.add(x)
            if is_interior_feature(grid, x, y, min_opaque, max_same):
                entry.interior += 1
    return stats


def closest_pair(
    colors: list[RGB], hue_guard: float | None
) -> tuple[RGB, RGB] | None:
    """Return the nearest pair by RGB distance, skipping pairs whose hue
    angles differ by more than *hue_guard* (``None`` disables the guard)."""
    best: tuple[RGB, RGB] | None = None
    best_dist = float("inf")
    hues = [hue_angle(c) for c in colors]
    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            if hue_guard is not None and abs(hues[i] - hues[j]) > hue_guard:
                continue
            dist = color_distance(colors[i], colors[j])
            if dist < best_dist:
                best_dist = dist
                best = (colors[i], colors[j])
    return best


def nearest_pair(colors: list[RGB]) -> tuple[RGB, RGB]:
    """Return the nearest pair by RGB distance, ignoring hue.

    Raises:
        ValueError: If fewer than two colors are given.
    """
    pair = closest_pair(colors, None)
    if pair is None:
        raise ValueError(f"Need at least two colors to pair, got {len(colors)}")
    return pair


def quantize_colors(
    grid: Grid,
    max_colors: int = 6,
    *,
    hue_guard: float = 1.2,
    strict_hue_guard: bool = False,
    min_opaque: int = FEATURE_MIN_OPAQUE,
    max_same: int = FEATURE_MAX_SAME,
) -> QuantizeResult:
    """Merge colors until at most *max_colors* remain.

    Each round merges the closest hue-compatible pair.  Of the two, the
    color with the higher score (column span ×1000, interior-feature
    cells ×2000, plus raw count) survives and absorbs the other's cells
    and columns.  If every remaining pair crosses the hue guard, the
    guard is dropped for that round unless *strict_hue_guard* is set, in
    which case merging stops above the cap.

    The input grid is never modified.
    """
    stats = tally_colors(grid, min_opaque, max_same)
    palette = list(stats)
    if len(palette) <= max_colors:
        return QuantizeResult(grid=[list(row) for row in grid], palette=sorted(palette))

    initial = len(palette)
    remap: dict[RGB, RGB] = {}
    while len(palette) > max_colors:
        pair = closest_pair(palette, hue_guard)
        if pair is None:
            if strict_hue_guard:
                logger.warning(
                    "Hue guard blocks every merge; keeping %d colors (cap %d)",
                    len(palette),
                    max_colors,
                )
                break
            logger.warning(
                "Hue guard blocks every merge at %d colors; relaxing it for one merge",
                len(palette),
            )
            pair = nearest_pair(palette)

        a, b = pair
        survivor, victim = (a, b) if stats[a].score >= stats[b].score else (b, a)
        stats[survivor].count += stats[victim].count
        stats[survivor].columns |= stats[victim].columns
        palette.remove(victim)

        remap[victim] = survivor
        for source, target in remap.items():
            if target == victim:
                remap[source] = survivor
        logger.debug("Merged %s into %s", victim.hex, survivor.hex)

    reduced = [
        [remap.get(cell, cell) if cell is not None else None for cell in row]
        for row in grid
    ]
    logger.debug("Quantized %d colors down to %d", initial, len(palette))
    return QuantizeResult(grid=reduced, palette=sorted(palette))
