"""End-to-end image-to-sprite translation.

Stages, in order:

1. decode the payload and letterbox it onto the working canvas
2. contrast boost
3. flood-fill background removal from the corners
4. content bounds and archetype selection from the aspect ratio
5. edge-weighted downsampling to the archetype's grid
6. shape inflation, then island cleanup
7. palette quantization and reconciliation
8. ground anchoring (tall sprites only)
9. back/left/right view synthesis
"""

from __future__ import annotations

import asyncio
from contextlib import AbstractContextManager, nullcontext

from spritecast.buffer import PixelBuffer
from spritecast.cleaner import cleanup_islands
from spritecast.colors import grid_colors
from spritecast.downsampler import smart_downsample
from spritecast.inflator import inflate_shape
from spritecast.logging import get_logger
from spritecast.models import (
    SQUARE_PROFILE,
    TALL_PROFILE,
    WIDE_PROFILE,
    Archetype,
    ArchetypeProfile,
    Rect,
    SpriteDimensions,
    SpriteResult,
    SpriteViews,
    TranslationConfig,
    freeze_grid,
)
from spritecast.observability import ConversionMetrics
from spritecast.palette import palette_to_hex, reconcile_palette
from spritecast.preprocessing import (
    boost_contrast,
    content_bounds,
    decode_image,
    draw_on_canvas,
    remove_background,
)
from spritecast.quantizer import quantize_colors
from spritecast.utils import payload_to_bytes
from spritecast.views import anchor_to_ground, synthesize_views

logger = get_logger("pipeline")

WIDE_RATIO: float = 1.3
TALL_RATIO: float = 0.75


def select_profile(bounds: Rect) -> ArchetypeProfile:
    """Pick the archetype profile for a content rectangle."""
    ratio = bounds.aspect_ratio
    if ratio > WIDE_RATIO:
        return WIDE_PROFILE
    if ratio < TALL_RATIO:
        return TALL_PROFILE
    return SQUARE_PROFILE


def _stage(metrics: ConversionMetrics | None, name: str) -> AbstractContextManager[None]:
    return metrics.stage(name) if metrics is not None else nullcontext()


def translate_canvas(
    canvas: PixelBuffer,
    config: TranslationConfig | None = None,
    metrics: ConversionMetrics | None = None,
) -> SpriteResult:
    """Run every stage after canvas creation on an already letterboxed buffer.

    *canvas* is not modified.
    """
    cfg = config or TranslationConfig()

    with _stage(metrics, "contrast"):
        boosted = boost_contrast(canvas, cfg.contrast_factor)
    with _stage(metrics, "background"):
        cleared = remove_background(
            boosted, cfg.background_tolerance, cfg.transparent_alpha
        )
    with _stage(metrics, "bounds"):
        bounds = content_bounds(cleared, cfg.transparent_alpha)

    profile = select_profile(bounds)
    logger.debug(
        "Content %dx%d at (%d, %d) -> %s",
        bounds.width,
        bounds.height,
        bounds.x,
        bounds.y,
        profile.archetype.value,
    )

    with _stage(metrics, "downsample"):
        grid = smart_downsample(
            cleared,
            bounds,
            profile.width,
            profile.height,
            opaque_alpha=cfg.opaque_alpha,
            transparent_ratio=cfg.transparent_cell_ratio,
            edge_weight=cfg.edge_weight,
            top_bias_weight=cfg.top_bias_weight,
            top_bias_band=cfg.top_bias_band,
        )
    with _stage(metrics, "inflate"):
        grid = inflate_shape(grid, cfg.feature_min_opaque, cfg.feature_max_same)
    with _stage(metrics, "cleanup"):
        grid = cleanup_islands(grid, cfg.feature_min_opaque, cfg.feature_max_same)

    colors_before = len(grid_colors(grid))
    with _stage(metrics, "quantize"):
        quantized = quantize_colors(
            grid,
            cfg.max_colors,
            hue_guard=cfg.hue_guard,
            strict_hue_guard=cfg.strict_hue_guard,
            min_opaque=cfg.feature_min_opaque,
            max_same=cfg.feature_max_same,
        )
        front = quantized.grid
        palette = reconcile_palette(front)

    if profile.archetype is Archetype.TALL_OBJECT:
        with _stage(metrics, "ground"):
            front = anchor_to_ground(front)

    with _stage(metrics, "views"):
        back, left, right = synthesize_views(front, profile.side_compression)

    if metrics is not None:
        metrics.record_palette(colors_before, len(palette))
        metrics.finish(profile.archetype.value)

    logger.info(
        "Translated sprite: %s %dx%d, %d colors",
        profile.archetype.value,
        profile.width,
        profile.height,
        len(palette),
        extra={"archetype": profile.archetype.value},
    )

    return SpriteResult(
        views=SpriteViews(
            front=freeze_grid(front),
            back=freeze_grid(back),
            left=freeze_grid(left),
            right=freeze_grid(right),
        ),
        archetype=profile.archetype,
        dimensions=SpriteDimensions(width=profile.width, height=profile.height),
        palette=tuple(palette_to_hex(palette)),
    )


def translate_image(
    payload: bytes | str,
    orig_width: int | None = None,
    orig_height: int | None = None,
    config: TranslationConfig | None = None,
    metrics: ConversionMetrics | None = None,
) -> SpriteResult:
    """Convert an encoded image into a four-view pixel-art sprite.

    Args:
        payload: Encoded image bytes, a base64 string, or a data URL.
        orig_width: Original pixel width, used for aspect-preserving fit.
            Defaults to the decoded image width.
        orig_height: Original pixel height; defaults to the decoded height.
        config: Pipeline constants; defaults apply when omitted.
        metrics: Optional collector for stage timings.

    Returns:
        The immutable :class:`SpriteResult`.

    Raises:
        DecodeError: If the payload is not a decodable image.
        CanvasError: If the working canvas cannot be produced.
    """
    cfg = config or TranslationConfig()
    with _stage(metrics, "decode"):
        image = decode_image(payload_to_bytes(payload))
    with _stage(metrics, "canvas"):
        width = image.width if orig_width is None else orig_width
        height = image.height if orig_height is None else orig_height
        canvas = draw_on_canvas(image, width, height, cfg.canvas_size)
    return translate_canvas(canvas, cfg, metrics)


async def generate_sprite_from_image(
    payload: bytes | str,
    orig_width: int | None = None,
    orig_height: int | None = None,
    config: TranslationConfig | None = None,
    metrics: ConversionMetrics | None = None,
) -> SpriteResult:
    """Async wrapper around :func:`translate_image` running in a worker thread.

    Every call works on its own buffers, so concurrent conversions share
    no mutable state.
    """
    return await asyncio.to_thread(
        translate_image, payload, orig_width, orig_height, config, metrics
    )
