from __future__ import annotations

# Ordered (start, end, label) ranges matched with start <= value < end in
# table order. Empty labels mean no modifier.

# OKLCH hue in degrees. The first family is the default when nothing matches.
HUE_FAMILIES: tuple[tuple[float, float, str], ...] = (
    (0.0, 45.0, "Red"),
    (45.0, 75.0, "Orange"),
    (75.0, 100.0, "Amber"),
    (100.0, 125.0, "Yellow"),
    (125.0, 165.0, "Green"),
    (165.0, 210.0, "Cyan"),
    (210.0, 245.0, "Azure"),
    (245.0, 285.0, "Blue"),
    (285.0, 315.0, "Violet"),
    (315.0, 345.0, "Magenta"),
    (345.0, 360.0, "Red"),
)

# OKLab / OKLCH lightness.
LIGHTNESS_MODIFIERS: tuple[tuple[float, float, str], ...] = (
    (0.0, 0.3, "Deep"),
    (0.3, 0.45, "Dark"),
    (0.45, 0.7, ""),
    (0.7, 0.85, "Light"),
    (0.85, 1.01, "Pale"),
)

# OKLCH chroma. "Gray" is never emitted next to a hue family.
CHROMA_MODIFIERS: tuple[tuple[float, float, str], ...] = (
    (0.0, 0.05, "Gray"),
    (0.05, 0.1, "Muted"),
    (0.1, 0.2, ""),
    (0.2, 0.3, "Vivid"),
    (0.3, 1.0, "Electric"),
)
