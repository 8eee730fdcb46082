"""SpriteCast — image-to-sprite translation for tiny pixel-art characters."""

from spritecast.app import SpriteTranslator
from spritecast.colors import (
    RGB,
    TRANSPARENT,
    TRANSPARENT_HEX,
    Cell,
    Grid,
    color_distance,
    hex_to_rgb,
    hue_angle,
    rgba_to_hex,
)
from spritecast.config import load_config
from spritecast.errors import (
    CanvasError,
    ConfigError,
    DecodeError,
    RenderError,
    SpriteCastError,
)
from spritecast.logging import get_logger, setup_logging
from spritecast.models import (
    Archetype,
    ArchetypeProfile,
    ProcessingState,
    ProcessingStatus,
    Rect,
    SpriteDimensions,
    SpriteResult,
    SpriteViews,
    TranslationConfig,
)
from spritecast.observability import ConversionMetrics
from spritecast.pipeline import (
    generate_sprite_from_image,
    select_profile,
    translate_canvas,
    translate_image,
)
from spritecast.renderer import (
    frame_to_png_bytes,
    render_grid,
    render_views_sheet,
    result_to_json,
)

__all__ = [
    "Archetype",
    "ArchetypeProfile",
    "CanvasError",
    "Cell",
    "ConfigError",
    "ConversionMetrics",
    "DecodeError",
    "Grid",
    "ProcessingState",
    "ProcessingStatus",
    "RGB",
    "Rect",
    "RenderError",
    "SpriteCastError",
    "SpriteDimensions",
    "SpriteResult",
    "SpriteTranslator",
    "SpriteViews",
    "TRANSPARENT",
    "TRANSPARENT_HEX",
    "TranslationConfig",
    "color_distance",
    "frame_to_png_bytes",
    "generate_sprite_from_image",
    "get_logger",
    "hex_to_rgb",
    "hue_angle",
    "load_config",
    "render_grid",
    "render_views_sheet",
    "result_to_json",
    "rgba_to_hex",
    "select_profile",
    "setup_logging",
    "translate_canvas",
    "translate_image",
]
