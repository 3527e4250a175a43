from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NamingStrategy(str, Enum):
    AUTO = "auto"
    NONE = "none"
    PROVIDED = "provided"


class OrderStrategy(str, Enum):
    INPUT = "input"
    LCH = "lch"


@dataclass(frozen=True)
class RGBA:
    r: int
    g: int
    b: int
    a: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": float(self.a)}


@dataclass(frozen=True)
class HSLA:
    h: int
    s: int
    l: int
    a: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {"h": self.h, "s": self.s, "l": self.l, "a": float(self.a)}


@dataclass(frozen=True)
class OKLab:
    L: float
    a: float
    b: float

    def to_dict(self) -> dict[str, Any]:
        return {"L": float(self.L), "a": float(self.a), "b": float(self.b)}


@dataclass(frozen=True)
class OKLCH:
    L: float
    C: float
    h: float

    def to_dict(self) -> dict[str, Any]:
        return {"L": float(self.L), "C": float(self.C), "h": float(self.h)}


@dataclass(frozen=True)
class NormalizedColor:
    input: str
    rgba: RGBA
    hex: str
    hsla: HSLA
    oklab: OKLab
    oklch: OKLCH

    def to_dict(self) -> dict[str, Any]:
        return {
            "input": self.input,
            "hex": self.hex,
            "rgba": self.rgba.to_dict(),
            "hsla": self.hsla.to_dict(),
            "oklab": self.oklab.to_dict(),
            "oklch": self.oklch.to_dict(),
        }


@dataclass(frozen=True)
class PaletteColor(NormalizedColor):
    name: str = ""
    text_color: str = "#111111"
    index: int = 0

    @classmethod
    def from_color(
        cls, color: NormalizedColor, name: str, text_color: str, index: int
    ) -> PaletteColor:
        return cls(
            input=color.input,
            rgba=color.rgba,
            hex=color.hex,
            hsla=color.hsla,
            oklab=color.oklab,
            oklch=color.oklch,
            name=name,
            text_color=text_color,
            index=index,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {"name": self.name, "text_color": self.text_color, "index": self.index}
        )
        return payload


@dataclass(frozen=True)
class ReferenceEntry:
    hex: str
    name: str
    color: NormalizedColor
