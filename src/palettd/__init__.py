from .contrast import (
    compute_text_color,
    get_contrast_ratio,
    get_relative_luminance,
    meets_wcag_aa,
    meets_wcag_aaa,
)
from .convert import (
    color_distance,
    normalize_color,
    oklab_to_oklch,
    oklab_to_rgba,
    oklch_to_oklab,
    rgba_to_hsla,
    rgba_to_oklab,
)
from .models import (
    HSLA,
    OKLCH,
    RGBA,
    NamingStrategy,
    NormalizedColor,
    OKLab,
    OrderStrategy,
    PaletteColor,
)
from .naming import ColorNamer, name_color, name_colors
from .palette import PaletteValidationError, ReferenceDataset, load_reference_palette
from .parse import (
    InvalidColorFormat,
    parse_color,
    parse_color_strict,
    parse_hex,
    parse_hsl,
    parse_rgb,
    rgba_to_hex,
)
from .pipeline import PalettePipeline, PaletteResult, PipelineOptions, pack_colors

__all__ = [
    "ColorNamer",
    "HSLA",
    "InvalidColorFormat",
    "NamingStrategy",
    "NormalizedColor",
    "OKLCH",
    "OKLab",
    "OrderStrategy",
    "PaletteColor",
    "PalettePipeline",
    "PaletteResult",
    "PaletteValidationError",
    "PipelineOptions",
    "RGBA",
    "ReferenceDataset",
    "color_distance",
    "compute_text_color",
    "get_contrast_ratio",
    "get_relative_luminance",
    "load_reference_palette",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "name_color",
    "name_colors",
    "normalize_color",
    "oklab_to_oklch",
    "oklab_to_rgba",
    "oklch_to_oklab",
    "pack_colors",
    "parse_color",
    "parse_color_strict",
    "parse_hex",
    "parse_hsl",
    "parse_rgb",
    "rgba_to_hex",
    "rgba_to_oklab",
    "rgba_to_hsla",
]
