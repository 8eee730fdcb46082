"""Pydantic data models for configuration, archetypes and sprite results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from spritecast.colors import Cell, Grid, cell_to_hex


class Rect(BaseModel):
    """Inclusive bounding box of opaque content, in canvas pixels."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @property
    def aspect_ratio(self) -> float:
        """Return ``width / height``."""
        return self.width / self.height


class Archetype(str, Enum):
    """Coarse shape classification driving grid size and side compression."""

    WIDE_OBJECT = "wide_object"
    TALL_OBJECT = "tall_object"
    SQUARE_OBJECT = "square_object"
    # Reserved for future classifiers; never produced by aspect ratio alone.
    HUMANOID = "humanoid"
    OBJECT = "object"


class ArchetypeProfile(BaseModel):
    """Target front-grid size and side-view compression for an archetype.

    Attributes:
        archetype: The archetype this profile describes.
        width: Front grid width in cells.
        height: Front grid height in cells.
        side_compression: Fraction of the front width used by side views.
    """

    model_config = ConfigDict(frozen=True)

    archetype: Archetype
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    side_compression: float = Field(..., gt=0.0, le=1.0)


WIDE_PROFILE = ArchetypeProfile(
    archetype=Archetype.WIDE_OBJECT, width=16, height=12, side_compression=0.35
)
TALL_PROFILE = ArchetypeProfile(
    archetype=Archetype.TALL_OBJECT, width=8, height=16, side_compression=0.65
)
SQUARE_PROFILE = ArchetypeProfile(
    archetype=Archetype.SQUARE_OBJECT, width=12, height=12, side_compression=0.5
)


class TranslationConfig(BaseModel):
    """Tunable constants of the image-to-sprite pipeline.

    Attributes:
        canvas_size: Side of the square working canvas in pixels.
        background_tolerance: Max RGB distance between neighbouring pixels
            for the background flood fill to keep spreading.
        contrast: Contrast constant fed to the contrast-factor formula.
        transparent_alpha: Alpha below which a canvas pixel counts as
            transparent (flood fill, bounds extraction).
        opaque_alpha: Alpha at or above which a pixel is sampled as opaque
            by the downsampler.
        transparent_cell_ratio: Share of transparent pixels above which a
            downsampled cell becomes transparent.
        max_colors: Palette cap applied by the quantizer.
        feature_min_opaque: Minimum opaque 8-neighbours for an interior
            feature.
        feature_max_same: Maximum 8-neighbours sharing the feature color.
        edge_weight: Histogram weight multiplier for cell-boundary pixels.
        top_bias_weight: Extra multiplier for pixels in the top band.
        top_bias_band: Height fraction of the content treated as top band.
        hue_guard: Max hue-angle difference (radians) for a merge pair.
        strict_hue_guard: When True, never merge across the hue guard even
            if the palette stays above ``max_colors``.
    """

    model_config = ConfigDict(extra="forbid")

    canvas_size: int = Field(default=128, ge=16, le=1024)
    background_tolerance: float = Field(default=40.0, ge=0.0, le=442.0)
    contrast: float = Field(default=1.25, gt=-255.0, lt=255.0)
    transparent_alpha: int = Field(default=50, ge=0, le=255)
    opaque_alpha: int = Field(default=128, ge=0, le=255)
    transparent_cell_ratio: float = Field(default=0.6, ge=0.0, le=1.0)
    max_colors: int = Field(default=6, ge=1, le=64)
    feature_min_opaque: int = Field(default=6, ge=0, le=8)
    feature_max_same: int = Field(default=2, ge=0, le=8)
    edge_weight: float = Field(default=2.5, gt=0.0)
    top_bias_weight: float = Field(default=1.75, gt=0.0)
    top_bias_band: float = Field(default=0.25, ge=0.0, le=1.0)
    hue_guard: float = Field(default=1.2, ge=0.0)
    strict_hue_guard: bool = False

    @property
    def contrast_factor(self) -> float:
        """Return ``259(C + 255) / (255(259 - C))`` for the configured C."""
        c = self.contrast
        return (259 * (c + 255)) / (255 * (259 - c))


class SpriteDimensions(BaseModel):
    """Front grid size in cells."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


FrozenGrid = tuple[tuple[Cell, ...], ...]


def freeze_grid(grid: Grid) -> FrozenGrid:
    return tuple(tuple(row) for row in grid)


class SpriteViews(BaseModel):
    """The four directional grids of a sprite."""

    model_config = ConfigDict(frozen=True)

    front: FrozenGrid
    back: FrozenGrid
    left: FrozenGrid
    right: FrozenGrid

    def to_matrix(self) -> dict[str, list[list[str]]]:
        """Return each view as rows of ``#rrggbb`` / ``"transparent"``."""
        return {
            name: [[cell_to_hex(cell) for cell in row] for row in grid]
            for name, grid in (
                ("front", self.front),
                ("back", self.back),
                ("left", self.left),
                ("right", self.right),
            )
        }


class SpriteResult(BaseModel):
    """Final artifact of one conversion; immutable once returned.

    Attributes:
        views: Front, back, left and right grids.
        archetype: Shape classification chosen from the content aspect ratio.
        dimensions: Front grid width and height.
        palette: Sorted hex colors present in the front grid.
    """

    model_config = ConfigDict(frozen=True)

    views: SpriteViews
    archetype: Archetype
    dimensions: SpriteDimensions
    palette: tuple[str, ...]

    @model_validator(mode="after")
    def _front_matches_dimensions(self) -> "SpriteResult":
        front = self.views.front
        if len(front) != self.dimensions.height or any(
            len(row) != self.dimensions.width for row in front
        ):
            raise ValueError(
                f"front grid does not match dimensions "
                f"{self.dimensions.width}x{self.dimensions.height}"
            )
        return self

    def to_matrix(self) -> dict[str, list[list[str]]]:
        return self.views.to_matrix()


class ProcessingStatus(str, Enum):
    """Lifecycle of a conversion as seen by the caller."""

    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


class ProcessingState(BaseModel):
    """Current status plus the error message of a failed conversion."""

    model_config = ConfigDict(frozen=True)

    status: ProcessingStatus = ProcessingStatus.IDLE
    error: str | None = None
