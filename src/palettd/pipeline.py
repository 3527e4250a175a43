from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from pathlib import Path
from typing import Any

from .contrast import compute_text_color
from .convert import normalize_color
from .models import NamingStrategy, NormalizedColor, OrderStrategy, PaletteColor
from .naming import ColorNamer
from .palette import load_reference_palette

logger = logging.getLogger(__name__)

# Hues closer than this are treated as equal and ordered by lightness instead.
HUE_TOLERANCE = 10.0


@dataclass(frozen=True)
class PipelineOptions:
    names: NamingStrategy = NamingStrategy.AUTO
    order: OrderStrategy = OrderStrategy.INPUT
    provided_names: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", NamingStrategy(self.names))
        object.__setattr__(self, "order", OrderStrategy(self.order))

    def to_dict(self) -> dict[str, Any]:
        return {
            "names": self.names.value,
            "order": self.order.value,
            "provided_names": (
                None if self.provided_names is None else dict(self.provided_names)
            ),
        }


@dataclass(frozen=True)
class PaletteResult:
    colors: list[str]
    palette: list[PaletteColor]
    options: PipelineOptions = field(default_factory=PipelineOptions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "colors": list(self.colors),
            "palette": [color.to_dict() for color in self.palette],
            "options": self.options.to_dict(),
        }


def _compare_lch(first: NormalizedColor, second: NormalizedColor) -> float:
    hue_diff = first.oklch.h - second.oklch.h
    if abs(hue_diff) > HUE_TOLERANCE:
        return hue_diff
    return second.oklch.L - first.oklch.L


def order_colors(
    colors: Sequence[NormalizedColor], strategy: OrderStrategy | str
) -> list[NormalizedColor]:
    strategy = OrderStrategy(strategy)
    if strategy is OrderStrategy.LCH:
        return sorted(colors, key=cmp_to_key(_compare_lch))
    return list(colors)


def pack_colors(
    colors: Sequence[NormalizedColor],
    options: PipelineOptions | None = None,
    namer: ColorNamer | None = None,
) -> list[PaletteColor]:
    """Order, name and attach text colors; ``index`` is the display order."""
    options = options or PipelineOptions()
    namer = namer or ColorNamer()

    ordered = order_colors(colors, options.order)
    names = namer.name_colors(ordered, options.names, options.provided_names)
    return [
        PaletteColor.from_color(
            color,
            name=name,
            text_color=compute_text_color(color.hex),
            index=index,
        )
        for index, (color, name) in enumerate(zip(ordered, names))
    ]


class PalettePipeline:
    def __init__(
        self,
        namer: ColorNamer | None = None,
        palette_path: str | Path | None = None,
    ) -> None:
        if namer is None:
            dataset = (
                load_reference_palette(palette_path) if palette_path is not None else None
            )
            namer = ColorNamer(dataset)
        self.namer = namer

    def run(
        self,
        colors: Sequence[str],
        options: PipelineOptions | None = None,
    ) -> PaletteResult:
        options = options or PipelineOptions()
        normalized = [normalize_color(value) for value in colors]
        palette = pack_colors(normalized, options, namer=self.namer)
        logger.debug(
            "packed %d colors (names=%s, order=%s)",
            len(palette),
            options.names.value,
            options.order.value,
        )
        return PaletteResult(colors=list(colors), palette=palette, options=options)
