from __future__ import annotations

import math
import re

from .models import RGBA

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")
_BARE_HEX = re.compile(r"[0-9A-Fa-f]{3,8}")

_NUMBER = r"[0-9]{1,3}(?:\.[0-9]+)?"
_ALPHA = r"(?:[,/]\s*([0-9]*\.?[0-9]+%?))?"

_RGB_PATTERN = re.compile(
    rf"rgba?\(\s*({_NUMBER}%?)\s*[,\s]\s*({_NUMBER}%?)\s*[,\s]\s*({_NUMBER}%?)\s*{_ALPHA}\s*\)",
    re.IGNORECASE,
)
_HSL_PATTERN = re.compile(
    rf"hsla?\(\s*({_NUMBER})(deg|rad|turn)?\s*[,\s]\s*({_NUMBER})%?\s*[,\s]\s*({_NUMBER})%?\s*{_ALPHA}\s*\)",
    re.IGNORECASE,
)


class InvalidColorFormat(ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid color format: {value!r}")
        self.value = value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def parse_hex(value: str) -> RGBA | None:
    """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` (``#`` optional)."""
    digits = value[1:] if value.startswith("#") else value
    if len(digits) not in (3, 4, 6, 8) or not _HEX_DIGITS.fullmatch(digits):
        return None

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return RGBA(r=r, g=g, b=b, a=a)


def _parse_alpha(raw: str | None) -> float:
    if raw is None:
        return 1.0
    if raw.endswith("%"):
        alpha = float(raw[:-1]) / 100
    else:
        alpha = float(raw)
    return _clamp(alpha, 0.0, 1.0)


def _parse_channel(raw: str) -> int:
    if raw.endswith("%"):
        value = float(raw[:-1]) / 100 * 255
    else:
        value = float(raw)
    return int(_clamp(round_half_up(value), 0, 255))


def parse_rgb(value: str) -> RGBA | None:
    """Parse ``rgb()``/``rgba()`` in comma, space or slash-alpha syntax."""
    match = _RGB_PATTERN.fullmatch(value)
    if match is None:
        return None

    red, green, blue, alpha = match.groups()
    return RGBA(
        r=_parse_channel(red),
        g=_parse_channel(green),
        b=_parse_channel(blue),
        a=_parse_alpha(alpha),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def parse_hsl(value: str) -> RGBA | None:
    """Parse ``hsl()``/``hsla()``; hue may carry a ``deg``, ``rad`` or ``turn`` unit."""
    match = _HSL_PATTERN.fullmatch(value)
    if match is None:
        return None

    hue_raw, unit, saturation_raw, lightness_raw, alpha_raw = match.groups()
    hue = float(hue_raw)
    unit = (unit or "deg").lower()
    if unit == "rad":
        hue = hue * 180 / math.pi
    elif unit == "turn":
        hue = hue * 360
    hue = (hue % 360) / 360

    s = _clamp(float(saturation_raw), 0.0, 100.0) / 100
    l = _clamp(float(lightness_raw), 0.0, 100.0) / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, hue + 1 / 3)
        g = _hue_to_rgb(p, q, hue)
        b = _hue_to_rgb(p, q, hue - 1 / 3)

    return RGBA(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
        a=_parse_alpha(alpha_raw),
    )


def parse_color(value: str) -> RGBA | None:
    """Parse any supported color literal, or return ``None``."""
    text = value.strip()
    lowered = text.lower()

    if text.startswith("#"):
        return parse_hex(text)
    if lowered.startswith("rgb"):
        return parse_rgb(text)
    if lowered.startswith("hsl"):
        return parse_hsl(text)
    if _BARE_HEX.fullmatch(text):
        return parse_hex("#" + text)
    return None


def parse_color_strict(value: str) -> RGBA:
    rgba = parse_color(value)
    if rgba is None:
        raise InvalidColorFormat(value)
    return rgba


def rgba_to_hex(rgba: RGBA) -> str:
    """Serialize to ``#RRGGBB``, or ``#RRGGBBAA`` when alpha is below 1."""
    r, g, b = (round_half_up(channel) for channel in (rgba.r, rgba.g, rgba.b))
    text = f"#{r:02X}{g:02X}{b:02X}"
    if rgba.a < 1:
        text += f"{round_half_up(rgba.a * 255):02X}"
    return text
