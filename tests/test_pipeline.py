from __future__ import annotations

import re

import pytest

from palettd.convert import normalize_color
from palettd.models import NamingStrategy, OrderStrategy
from palettd.naming import name_color
from palettd.parse import InvalidColorFormat
from palettd.pipeline import PalettePipeline, PipelineOptions, order_colors, pack_colors

TEST_COLORS = ["#FF0000", "#00FF00", "#0000FF", "#FFFF00"]


def test_pack_colors_attaches_names_text_colors_and_indices():
    colors = [normalize_color(value) for value in TEST_COLORS]
    palette = pack_colors(colors)

    assert len(palette) == 4
    for index, color in enumerate(palette):
        assert color.name
        assert re.fullmatch(r"#[0-9A-F]{6}", color.text_color)
        assert color.index == index
        assert color.hex == TEST_COLORS[index]


def test_pack_colors_preserves_input_order_by_default():
    colors = [normalize_color(value) for value in TEST_COLORS]
    palette = pack_colors(colors, PipelineOptions(order=OrderStrategy.INPUT))

    assert [color.hex for color in palette] == TEST_COLORS


def test_pack_colors_lch_order_sorts_by_hue_and_reindexes():
    colors = [normalize_color(value) for value in TEST_COLORS]
    palette = pack_colors(colors, PipelineOptions(order="lch"))

    assert [color.hex for color in palette] == ["#FF0000", "#FFFF00", "#00FF00", "#0000FF"]
    assert [color.index for color in palette] == [0, 1, 2, 3]
    assert [color.input for color in palette] == ["#FF0000", "#FFFF00", "#00FF00", "#0000FF"]


def test_lch_order_puts_lighter_color_first_within_hue_tolerance():
    light = normalize_color("#FF0000")
    dark = normalize_color("#800000")
    assert abs(light.oklch.h - dark.oklch.h) <= 10

    ordered = order_colors([dark, light], OrderStrategy.LCH)
    assert [color.hex for color in ordered] == ["#FF0000", "#800000"]


def test_pack_colors_names_duplicates_in_display_order():
    colors = [normalize_color("#FF0000"), normalize_color("#0000FF"), normalize_color("#FF0000")]
    palette = pack_colors(colors)

    assert [color.name for color in palette] == ["Red", "Blue", "Red 2"]


def test_pack_colors_none_strategy():
    colors = [normalize_color(value) for value in TEST_COLORS]
    palette = pack_colors(colors, PipelineOptions(names=NamingStrategy.NONE))

    assert [color.name for color in palette] == ["", "", "", ""]


def test_pipeline_run_with_provided_names():
    options = PipelineOptions(
        names="provided", provided_names={"#FF6600": "Safety Orange"}
    )
    result = PalettePipeline().run(["#ff6600", "#0b1320"], options)

    assert result.colors == ["#ff6600", "#0b1320"]
    assert result.palette[0].name == "Safety Orange"
    assert result.palette[0].input == "#ff6600"
    assert result.palette[1].name == name_color(normalize_color("#0b1320"))


def test_pipeline_end_to_end_orange():
    first = PalettePipeline().run(["#FF6600"])
    second = PalettePipeline().run(["#FF6600"])
    color = first.palette[0]

    assert color.hex == "#FF6600"
    assert (color.hsla.h, color.hsla.s, color.hsla.l) == (24, 100, 50)
    assert color.oklch.C > 0
    assert color.name
    assert color.name == second.palette[0].name
    assert color.text_color == "#111111"


def test_pipeline_raises_for_invalid_colors():
    with pytest.raises(InvalidColorFormat):
        PalettePipeline().run(["#FF0000", "not-a-color"])
    with pytest.raises(InvalidColorFormat):
        PalettePipeline().run(["#GGG"])


def test_pipeline_handles_empty_and_single_inputs():
    assert PalettePipeline().run([]).palette == []

    result = PalettePipeline().run(["#FF6600"])
    assert len(result.palette) == 1


def test_pipeline_with_custom_palette_file(tmp_path):
    palette_file = tmp_path / "palette.csv"
    palette_file.write_text("name,hex\nBrand Orange,#FF6600\n", encoding="utf-8")

    result = PalettePipeline(palette_path=palette_file).run(["#FF6600", "#FF6601"])

    assert [color.name for color in result.palette] == ["Brand Orange", "Brand Orange 2"]


def test_pipeline_options_reject_unknown_strategies():
    with pytest.raises(ValueError):
        PipelineOptions(names="fancy")
    with pytest.raises(ValueError):
        PipelineOptions(order="random")


def test_palette_result_to_dict():
    result = PalettePipeline().run(["#FAF5E9", "#392525"], PipelineOptions(order="lch"))
    payload = result.to_dict()

    assert payload["colors"] == ["#FAF5E9", "#392525"]
    assert payload["options"] == {"names": "auto", "order": "lch", "provided_names": None}
    assert {item["index"] for item in payload["palette"]} == {0, 1}
    assert payload["palette"][0]["text_color"] in {"#111111", "#FFFFFF"}
    assert payload["palette"][0]["rgba"]["a"] == 1.0
