from __future__ import annotations

import math

import numpy as np

from .models import HSLA, OKLCH, RGBA, NormalizedColor, OKLab
from .parse import InvalidColorFormat, parse_color, rgba_to_hex, round_half_up

# Linear sRGB -> LMS and cube-rooted LMS -> OKLab (Ottosson, 2020).
_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
_LMS_TO_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


def rgba_to_hsla(rgba: RGBA) -> HSLA:
    """Convert to HSLA with hue, saturation and lightness rounded to integers."""
    r = rgba.r / 255
    g = rgba.g / 255
    b = rgba.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    hue = 0.0
    saturation = 0.0
    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return HSLA(
        h=round_half_up(hue * 360) % 360,
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
        a=rgba.a,
    )


def _srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    scaled = channels / 255.0
    return np.where(
        scaled <= 0.04045, scaled / 12.92, np.power((scaled + 0.055) / 1.055, 2.4)
    )


def _linear_to_srgb(channels: np.ndarray) -> np.ndarray:
    clamped = np.clip(channels, 0.0, 1.0)
    encoded = np.where(
        clamped <= 0.0031308,
        clamped * 12.92,
        1.055 * np.power(clamped, 1 / 2.4) - 0.055,
    )
    return np.floor(encoded * 255.0 + 0.5)


def rgba_to_oklab(rgba: RGBA) -> OKLab:
    linear = _srgb_to_linear(np.array([rgba.r, rgba.g, rgba.b], dtype=np.float64))
    lms = np.cbrt(_RGB_TO_LMS @ linear)
    lab = _LMS_TO_OKLAB @ lms
    return OKLab(L=float(lab[0]), a=float(lab[1]), b=float(lab[2]))


def oklab_to_rgba(oklab: OKLab, alpha: float = 1.0) -> RGBA:
    """Convert back to RGBA; out-of-gamut values are clamped channel-wise."""
    lms = _OKLAB_TO_LMS @ np.array([oklab.L, oklab.a, oklab.b], dtype=np.float64)
    linear = _LMS_TO_RGB @ (lms**3)
    rgb = _linear_to_srgb(linear).astype(int)
    return RGBA(r=int(rgb[0]), g=int(rgb[1]), b=int(rgb[2]), a=alpha)


def oklab_to_oklch(oklab: OKLab) -> OKLCH:
    chroma = math.sqrt(oklab.a * oklab.a + oklab.b * oklab.b)
    hue = math.degrees(math.atan2(oklab.b, oklab.a))
    if hue < 0:
        hue += 360
    return OKLCH(L=oklab.L, C=chroma, h=hue)


def oklch_to_oklab(oklch: OKLCH) -> OKLab:
    radians = math.radians(oklch.h)
    return OKLab(
        L=oklch.L,
        a=oklch.C * math.cos(radians),
        b=oklch.C * math.sin(radians),
    )


def color_distance(first: OKLab, second: OKLab) -> float:
    """Euclidean distance in OKLab; the metric used for nearest-name search."""
    d_l = first.L - second.L
    d_a = first.a - second.a
    d_b = first.b - second.b
    return math.sqrt(d_l * d_l + d_a * d_a + d_b * d_b)


def normalize_color(value: str) -> NormalizedColor:
    rgba = parse_color(value)
    if rgba is None:
        raise InvalidColorFormat(value)

    oklab = rgba_to_oklab(rgba)
    return NormalizedColor(
        input=value,
        rgba=rgba,
        hex=rgba_to_hex(rgba),
        hsla=rgba_to_hsla(rgba),
        oklab=oklab,
        oklch=oklab_to_oklch(oklab),
    )
