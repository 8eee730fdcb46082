"""Tests for spritecast.renderer — PNG rendering and JSON export."""

from __future__ import annotations

import io
import json

import pytest
from PIL import Image

from spritecast.errors import RenderError
from spritecast.models import (
    Archetype,
    SpriteDimensions,
    SpriteResult,
    SpriteViews,
    freeze_grid,
)
from spritecast.renderer import (
    frame_to_png_bytes,
    render_grid,
    render_views_sheet,
    result_to_dict,
    result_to_json,
)

from sprite_helpers import BLUE, RED, _


def _result() -> SpriteResult:
    front = [[BLUE, _, _, _], [BLUE, RED, RED, BLUE]]
    side = [[BLUE, _], [BLUE, RED]]
    return SpriteResult(
        views=SpriteViews(
            front=freeze_grid(front),
            back=freeze_grid([row[::-1] for row in front]),
            left=freeze_grid(side),
            right=freeze_grid([row[::-1] for row in side]),
        ),
        archetype=Archetype.WIDE_OBJECT,
        dimensions=SpriteDimensions(width=4, height=2),
        palette=("#0000ff", "#c80000"),
    )


# ---------------------------------------------------------------------------
# render_grid
# ---------------------------------------------------------------------------


class TestRenderGrid:
    """Tests for rendering a single grid."""

    def test_pixel_mapping(self) -> None:
        img = render_grid([[BLUE, _], [_, RED]])
        assert img.size == (2, 2)
        assert img.getpixel((0, 0)) == (0, 0, 255, 255)
        assert img.getpixel((1, 0)) == (0, 0, 0, 0)
        assert img.getpixel((1, 1)) == (200, 0, 0, 255)

    def test_scale(self) -> None:
        img = render_grid([[BLUE, _]], scale=4)
        assert img.size == (8, 4)
        assert img.getpixel((3, 3)) == (0, 0, 255, 255)
        assert img.getpixel((4, 0)) == (0, 0, 0, 0)

    def test_bad_scale(self) -> None:
        with pytest.raises(RenderError, match="Scale"):
            render_grid([[BLUE]], scale=0)

    def test_empty_grid(self) -> None:
        with pytest.raises(RenderError, match="empty"):
            render_grid([])

    def test_ragged_grid(self) -> None:
        with pytest.raises(RenderError, match="Row 1"):
            render_grid([[BLUE, BLUE], [BLUE]])

    def test_color_outside_palette(self) -> None:
        with pytest.raises(RenderError, match="#c80000"):
            render_grid([[BLUE, RED]], palette=["#0000ff"])

    def test_palette_may_hold_transparent(self) -> None:
        img = render_grid([[BLUE, _]], palette=["#0000ff", "transparent"])
        assert img.size == (2, 1)


# ---------------------------------------------------------------------------
# render_views_sheet
# ---------------------------------------------------------------------------


class TestRenderViewsSheet:
    """Tests for the four-view sheet layout."""

    def test_layout(self) -> None:
        sheet = render_views_sheet(_result(), scale=2, gap=1)
        # 4 + 4 + 2 + 2 cells wide plus three one-cell gaps, all doubled.
        assert sheet.size == ((4 + 4 + 2 + 2 + 3) * 2, 4)
        # Front view at the left edge.
        assert sheet.getpixel((0, 0)) == (0, 0, 255, 255)
        # Gap after the front view is transparent.
        assert sheet.getpixel((8, 3)) == (0, 0, 0, 0)
        # Back view starts after the gap; its top-left cell is transparent.
        assert sheet.getpixel((10, 0)) == (0, 0, 0, 0)
        assert sheet.getpixel((16, 0)) == (0, 0, 255, 255)

    def test_no_gap(self) -> None:
        sheet = render_views_sheet(_result(), gap=0)
        assert sheet.size == (12, 2)

    def test_negative_gap(self) -> None:
        with pytest.raises(RenderError, match="Gap"):
            render_views_sheet(_result(), gap=-1)

    def test_png_bytes(self) -> None:
        data = frame_to_png_bytes(render_views_sheet(_result()))
        assert data.startswith(b"\x89PNG")
        assert Image.open(io.BytesIO(data)).size == (15, 2)


# ---------------------------------------------------------------------------
# JSON export
# ---------------------------------------------------------------------------


class TestResultExport:
    """Tests for the plain-data result shape."""

    def test_result_to_dict(self) -> None:
        data = result_to_dict(_result())
        assert data["type"] == "wide_object"
        assert data["dimensions"] == {"width": 4, "height": 2}
        assert data["palette"] == ["#0000ff", "#c80000"]
        assert data["matrix"]["front"][0] == [
            "#0000ff",
            "transparent",
            "transparent",
            "transparent",
        ]
        assert data["matrix"]["right"][1] == ["#c80000", "#0000ff"]

    def test_result_to_json(self) -> None:
        assert json.loads(result_to_json(_result())) == result_to_dict(_result())

    def test_compact_json(self) -> None:
        assert "\n" not in result_to_json(_result(), indent=None)
