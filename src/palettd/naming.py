from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import numpy as np

from .modifiers import CHROMA_MODIFIERS, HUE_FAMILIES, LIGHTNESS_MODIFIERS
from .models import NamingStrategy, NormalizedColor
from .palette import ReferenceDataset, default_reference_palette

# Above this OKLab distance the dataset name is not trusted.
MATCH_THRESHOLD = 0.15


class ColorNamer:
    """Names colors against a reference dataset.

    When no dataset is given, the packaged one is loaded on first use and
    shared by every namer in the process.
    """

    def __init__(
        self,
        dataset: ReferenceDataset | None = None,
        match_threshold: float = MATCH_THRESHOLD,
    ) -> None:
        self._dataset = dataset
        self.match_threshold = match_threshold

    @property
    def dataset(self) -> ReferenceDataset:
        if self._dataset is None:
            return default_reference_palette()
        return self._dataset

    def nearest(self, color: NormalizedColor) -> tuple[str, float]:
        dataset = self.dataset
        if not len(dataset):
            return "", float("inf")

        source_lab = np.asarray(
            [color.oklab.L, color.oklab.a, color.oklab.b], dtype=np.float64
        )
        distances = np.sqrt(np.sum(np.square(dataset.lab - source_lab), axis=1))
        # argmin keeps the earliest entry among equal distances.
        best_idx = int(np.argmin(distances))
        return dataset.entries[best_idx].name, float(distances[best_idx])

    def name_color(
        self,
        color: NormalizedColor,
        strategy: NamingStrategy | str = NamingStrategy.AUTO,
        provided_names: Mapping[str, str] | None = None,
    ) -> str:
        strategy = NamingStrategy(strategy)
        if strategy is NamingStrategy.NONE:
            return ""

        if strategy is NamingStrategy.PROVIDED and provided_names:
            provided = _lookup_provided(color.hex, provided_names)
            if provided is not None:
                return provided

        name, distance = self.nearest(color)
        if distance < self.match_threshold:
            return name
        return fallback_name(color)

    def name_colors(
        self,
        colors: Iterable[NormalizedColor],
        strategy: NamingStrategy | str = NamingStrategy.AUTO,
        provided_names: Mapping[str, str] | None = None,
    ) -> list[str]:
        strategy = NamingStrategy(strategy)
        names = [
            self.name_color(color, strategy, provided_names) for color in colors
        ]
        return make_unique(names)


def _lookup_provided(hex_value: str, provided_names: Mapping[str, str]) -> str | None:
    key = hex_value.upper()
    if key in provided_names:
        return provided_names[key]
    for candidate, name in provided_names.items():
        if candidate.upper() == key:
            return name
    return None


def make_unique(names: Sequence[str]) -> list[str]:
    """Suffix repeated names with their occurrence count: Red, Red 2, Red 3."""
    counts: dict[str, int] = {}
    unique: list[str] = []
    for name in names:
        if not name:
            unique.append("")
            continue
        count = counts.get(name, 0) + 1
        counts[name] = count
        unique.append(name if count == 1 else f"{name} {count}")
    return unique


def _bucket(value: float, table: Sequence[tuple[float, float, str]]) -> str:
    for start, end, label in table:
        if start <= value < end:
            return label
    return ""


def _hue_family(hue: float) -> str:
    for start, end, family in HUE_FAMILIES:
        if start <= hue < end:
            return family
    return HUE_FAMILIES[0][2]


def fallback_name(color: NormalizedColor) -> str:
    """Describe a color from its OKLCH lightness, chroma and hue."""
    lightness, chroma, hue = color.oklch.L, color.oklch.C, color.oklch.h

    if chroma < 0.02:
        if lightness < 0.15:
            return "Black"
        if lightness > 0.95:
            return "White"
        modifier = _bucket(lightness, LIGHTNESS_MODIFIERS)
        return f"{modifier} Gray" if modifier else "Gray"

    parts: list[str] = []
    lightness_modifier = _bucket(lightness, LIGHTNESS_MODIFIERS)
    if lightness_modifier:
        parts.append(lightness_modifier)
    chroma_modifier = _bucket(chroma, CHROMA_MODIFIERS)
    if chroma_modifier and chroma_modifier != "Gray":
        parts.append(chroma_modifier)
    parts.append(_hue_family(hue))
    return " ".join(parts)


_default_namer = ColorNamer()


def name_color(
    color: NormalizedColor,
    strategy: NamingStrategy | str = NamingStrategy.AUTO,
    provided_names: Mapping[str, str] | None = None,
) -> str:
    return _default_namer.name_color(color, strategy, provided_names)


def name_colors(
    colors: Iterable[NormalizedColor],
    strategy: NamingStrategy | str = NamingStrategy.AUTO,
    provided_names: Mapping[str, str] | None = None,
) -> list[str]:
    return _default_namer.name_colors(colors, strategy, provided_names)
