from __future__ import annotations

from .models import RGBA
from .parse import parse_color

DARK_TEXT = "#111111"
LIGHT_TEXT = "#FFFFFF"

_DARK_TEXT_RGBA = RGBA(r=17, g=17, b=17, a=1.0)
_LIGHT_TEXT_RGBA = RGBA(r=255, g=255, b=255, a=1.0)


def _luminance_channel(value: int) -> float:
    srgb = value / 255
    if srgb <= 0.03928:
        return srgb / 12.92
    return ((srgb + 0.055) / 1.055) ** 2.4


def get_relative_luminance(rgba: RGBA) -> float:
    return (
        0.2126 * _luminance_channel(rgba.r)
        + 0.7152 * _luminance_channel(rgba.g)
        + 0.0722 * _luminance_channel(rgba.b)
    )


def get_contrast_ratio(first: RGBA, second: RGBA) -> float:
    """Contrast ratio in [1, 21]; argument order does not matter."""
    l1 = get_relative_luminance(first)
    l2 = get_relative_luminance(second)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def compute_text_color(background: str) -> str:
    """Pick ``#111111`` or ``#FFFFFF``, whichever reads better on ``background``.

    Unparseable backgrounds get dark text.
    """
    rgba = parse_color(background)
    if rgba is None:
        return DARK_TEXT

    dark_contrast = get_contrast_ratio(rgba, _DARK_TEXT_RGBA)
    light_contrast = get_contrast_ratio(rgba, _LIGHT_TEXT_RGBA)
    return LIGHT_TEXT if light_contrast > dark_contrast else DARK_TEXT


def meets_wcag_aa(ratio: float, large_text: bool = False) -> bool:
    return ratio >= (3.0 if large_text else 4.5)


def meets_wcag_aaa(ratio: float, large_text: bool = False) -> bool:
    return ratio >= (4.5 if large_text else 7.0)
