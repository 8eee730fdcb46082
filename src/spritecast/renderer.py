"""Grid-to-PNG rendering and JSON export of sprite results."""

from __future__ import annotations

import io
import json
from collections.abc import Sequence
from typing import Any

from PIL import Image

from spritecast.colors import Cell, hex_to_rgb
from spritecast.errors import RenderError
from spritecast.models import SpriteResult
from spritecast.palette import validate_grid_colors

VIEW_ORDER = ("front", "back", "left", "right")


def render_grid(
    grid: Sequence[Sequence[Cell]],
    scale: int = 1,
    palette: Sequence[str] | None = None,
) -> Image.Image:
    """Render a color grid to an RGBA image.

    ``grid[y][x]`` maps to pixel ``(x, y)``; transparent cells become
    ``(0, 0, 0, 0)``.  The image is scaled up by *scale* with nearest
    neighbour so cells stay crisp.

    Args:
        grid: Rectangular grid of ``RGB`` or ``None`` cells.
        scale: Integer magnification (>= 1).
        palette: Optional hex palette; when given every opaque cell must
            belong to it.

    Raises:
        RenderError: On an empty or ragged grid, a bad scale, or a cell
            outside *palette*.
    """
    if scale < 1:
        raise RenderError(f"Scale must be >= 1, got {scale}")
    if not grid or not grid[0]:
        raise RenderError("Cannot render an empty grid")
    width, height = len(grid[0]), len(grid)
    for i, row in enumerate(grid):
        if len(row) != width:
            raise RenderError(f"Row {i} has {len(row)} cells, expected {width}")

    if palette is not None:
        allowed = [c for c in (hex_to_rgb(h) for h in palette) if c is not None]
        invalid = validate_grid_colors([list(row) for row in grid], allowed)
        if invalid:
            raise RenderError(f"Grid uses colors outside the palette: {invalid}")

    pixels = [
        (0, 0, 0, 0) if cell is None else (cell.r, cell.g, cell.b, 255)
        for row in grid
        for cell in row
    ]
    img = Image.new("RGBA", (width, height))
    img.putdata(pixels)
    if scale > 1:
        img = img.resize((width * scale, height * scale), Image.Resampling.NEAREST)
    return img


def render_views_sheet(result: SpriteResult, scale: int = 1, gap: int = 1) -> Image.Image:
    """Lay out front, back, left and right views left-to-right.

    Views are top-aligned on a transparent strip with *gap* scaled
    pixels between them.
    """
    if gap < 0:
        raise RenderError(f"Gap must be >= 0, got {gap}")
    images = [
        render_grid(getattr(result.views, name), scale, result.palette)
        for name in VIEW_ORDER
    ]
    width = sum(img.width for img in images) + gap * scale * (len(images) - 1)
    height = max(img.height for img in images)
    sheet = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    x_offset = 0
    for img in images:
        sheet.paste(img, (x_offset, 0))
        x_offset += img.width + gap * scale
    return sheet


def frame_to_png_bytes(image: Image.Image) -> bytes:
    """Serialize a PIL Image to PNG bytes."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def result_to_dict(result: SpriteResult) -> dict[str, Any]:
    """Plain-data form of a result, shaped for a JS/UI consumer."""
    return {
        "type": result.archetype.value,
        "dimensions": {
            "width": result.dimensions.width,
            "height": result.dimensions.height,
        },
        "palette": list(result.palette),
        "matrix": result.to_matrix(),
    }


def result_to_json(result: SpriteResult, indent: int | None = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent)
