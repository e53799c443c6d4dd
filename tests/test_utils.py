"""Tests for segmenting, type inference, value helpers and root finding."""

import pytest

from tailwind_ast.plugins import DEFAULT_REGISTRY, find_root
from tailwind_ast.schema import FunctionalPlugin
from tailwind_ast.utils import (
    build_modifier,
    decode_arbitrary_value,
    get_value,
    infer_data_type,
    segment,
)


class TestSegment:
    """Bracket-aware splitting."""

    def test_simple_split(self):
        assert segment("md:hover:mt-4", ":") == ["md", "hover", "mt-4"]

    def test_no_separator(self):
        assert segment("mt-4", ":") == ["mt-4"]

    def test_empty_string(self):
        assert segment("", "/") == [""]

    def test_nested_brackets_kept(self):
        assert segment("hover:bg-[url(a:b)]", ":") == ["hover", "bg-[url(a:b)]"]
        assert segment("[&:hover]:flex", ":") == ["[&:hover]", "flex"]

    def test_slash_inside_brackets(self):
        assert segment("[calc(1/2)]/50", "/") == ["[calc(1/2)]", "50"]

    def test_quotes_and_escapes(self):
        assert segment("content-['a:b']:x", ":") == ["content-['a:b']", "x"]
        assert segment("a\\:b:c", ":") == ["a\\:b", "c"]

    def test_trailing_separator(self):
        assert segment("hover:", ":") == ["hover", ""]


class TestFindRoot:
    """Longest hyphen-delimited root."""

    def test_exact_root(self):
        assert find_root("border", DEFAULT_REGISTRY.functional) == ("border", None)

    def test_value_split(self):
        assert find_root("mt-4", DEFAULT_REGISTRY.functional) == ("mt", "4")

    def test_longest_root(self):
        assert find_root("translate-x-4", DEFAULT_REGISTRY.functional) == ("translate-x", "4")
        assert find_root("max-w-screen-md", DEFAULT_REGISTRY.functional) == ("max-w", "screen-md")

    def test_hyphen_inside_arbitrary(self):
        assert find_root("w-[calc(100%-1px)]", DEFAULT_REGISTRY.functional) == (
            "w", "[calc(100%-1px)]"
        )

    def test_no_root(self):
        assert find_root("nope-4", DEFAULT_REGISTRY.functional) == ("", None)
        assert find_root("", DEFAULT_REGISTRY.functional) == ("", None)


class TestInferDataType:
    """Arbitrary value kind inference."""

    @pytest.mark.parametrize("value,types,expected", [
        ("2px", ["length"], "length"),
        ("#fff", ["color", "length"], "color"),
        ("rgb(1 2 3)", ["color", "length"], "color"),
        ("red", ["color", "length"], "color"),
        ("oklch(0.6 0.2 240)", ["color", "image"], "color"),
        ("hwb(0 0% 0%)", ["color"], "color"),
        ("1.5rem", ["color", "length"], "length"),
        ("50%", ["length", "percentage"], "percentage"),
        ("0", ["length"], "length"),
        ("calc(100%-1px)", ["length"], "length"),
        ("1.25", ["length", "number"], "number"),
        ("10", ["integer"], "integer"),
        ("url(/a.png)", ["color", "image"], "image"),
        ("linear-gradient(red,blue)", ["color", "image"], "image"),
        ("45deg", ["angle"], "angle"),
        ("thick", ["line-width"], "line-width"),
        ("'Inter',sans-serif", ["number", "family-name"], "family-name"),
        ("center_top", ["position"], "position"),
        ("cover", ["bg-size"], "bg-size"),
    ])
    def test_inference(self, value, types, expected):
        assert infer_data_type(value, types) == expected

    def test_declaration_order_wins(self):
        assert infer_data_type("0", ["number", "length"]) == "number"
        assert infer_data_type("0", ["length", "number"]) == "length"

    def test_var_is_never_inferred(self):
        assert infer_data_type("var(--x)", ["color", "length", "any"]) is None

    def test_no_match(self):
        assert infer_data_type("banana", ["color", "length"]) is None

    def test_unconvertible_color_functions_not_inferred(self):
        assert infer_data_type("color-mix(in srgb,red,blue)", ["color"]) is None
        assert infer_data_type("light-dark(white,black)", ["color"]) is None

    def test_unknown_kind_ignored(self):
        assert infer_data_type("2px", ["made-up", "length"]) == "length"


class TestDecodeArbitraryValue:
    """Decoding of bracket contents."""

    def test_underscores_become_spaces(self):
        assert decode_arbitrary_value("1fr_2fr") == "1fr 2fr"

    def test_escaped_underscore(self):
        assert decode_arbitrary_value("a\\_b") == "a_b"

    def test_url_kept(self):
        assert decode_arbitrary_value("url(/my_image.png)") == "url(/my_image.png)"

    def test_math_operators_spaced(self):
        assert decode_arbitrary_value("calc(100%-2px)") == "calc(100% - 2px)"
        assert decode_arbitrary_value("calc(1rem+2px)") == "calc(1rem + 2px)"

    def test_plain_value_unchanged(self):
        assert decode_arbitrary_value("2px") == "2px"


class TestBuildModifier:
    """Opacity modifier construction."""

    def setup_method(self):
        self.opacity = {"50": "0.5", "75": "0.75"}

    def test_scale_value(self):
        assert build_modifier("50", self.opacity) == "0.5"

    def test_arbitrary_value(self):
        assert build_modifier("[0.35]", self.opacity) == "0.35"

    def test_number_outside_scale(self):
        assert build_modifier("33", self.opacity) == "0.33"

    def test_other_text_passed_through(self):
        assert build_modifier("half", self.opacity) == "half"


class TestGetValue:
    """Coercion of theme scale entries."""

    def setup_method(self):
        self.color_plugin = FunctionalPlugin(scale_key="colors", ns="textColor",
                                             class_=["color"], type="color")
        self.length_plugin = FunctionalPlugin(scale_key="fontSize", ns="fontSize",
                                              class_=["font-size"], type="length")

    def test_nested_color(self):
        scale = {"red": {"500": "#ef4444"}}
        value = get_value("red-500", self.color_plugin, scale)
        assert value.value == "#ef4444"
        assert value.raw == "red-500"
        assert value.kind == "color"
        assert value.class_ == ["color"]

    def test_color_default_shade(self):
        scale = {"brand": {"DEFAULT": "#123456", "light": "#abcdef"}}
        assert get_value("brand", self.color_plugin, scale).value == "#123456"
        assert get_value("brand-light", self.color_plugin, scale).value == "#abcdef"

    def test_hyphenated_color_name(self):
        scale = {"light-blue": {"500": "#0ea5e9"}}
        assert get_value("light-blue-500", self.color_plugin, scale).value == "#0ea5e9"

    def test_font_size_tuple(self):
        scale = {"sm": ["0.875rem", {"lineHeight": "1.25rem"}]}
        assert get_value("sm", self.length_plugin, scale).value == "0.875rem"

    def test_missing_entry_falls_back_to_raw(self):
        scale = {"red": {"500": "#ef4444"}}
        assert get_value("red-999", self.color_plugin, scale).value == "red-999"
