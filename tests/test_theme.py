"""Tests for theme resolution and color helpers."""

import pytest

from tailwind_ast import parse
from tailwind_ast.config import ConfigError
from tailwind_ast.theme_engine.defaults import DEFAULT_THEME
from tailwind_ast.theme_engine import (
    ParsedColor,
    ResolvedTheme,
    ThemeResolver,
    calculate_hex_from_string,
    deep_merge_dict,
    find_color_from_hex,
    get_default_theme,
    hex_to_rgb,
    is_color,
    resolve_scale_value,
    resolve_theme,
    rgb_to_hex,
)


class TestThemeResolver:
    """Merging user configuration into default scales."""

    def setup_method(self):
        self.defaults = {
            "colors": {"red": "#ff0000", "blue": "#0000ff"},
            "spacing": {"1": "0.25rem"},
            "margin": lambda theme: {"auto": "auto", **theme("spacing")},
        }
        self.resolver = ThemeResolver(self.defaults)

    def test_defaults_only(self):
        theme = self.resolver.resolve()
        assert theme.scale("colors") == {"red": "#ff0000", "blue": "#0000ff"}
        assert theme.scale("margin") == {"auto": "auto", "1": "0.25rem"}

    def test_override_replaces_scale(self):
        theme = self.resolver.resolve({"theme": {"colors": {"brand": "#123456"}}})
        assert theme.scale("colors") == {"brand": "#123456"}

    def test_extend_merges_scale(self):
        theme = self.resolver.resolve({"theme": {"extend": {"colors": {"brand": "#123456"}}}})
        assert theme.lookup("colors", "red") == "#ff0000"
        assert theme.lookup("colors", "brand") == "#123456"

    def test_derived_scale_sees_extension(self):
        theme = self.resolver.resolve({"theme": {"extend": {"spacing": {"2": "0.5rem"}}}})
        assert theme.lookup("margin", "2") == "0.5rem"
        assert theme.lookup("margin", "auto") == "auto"

    def test_extend_adds_new_scale(self):
        theme = self.resolver.resolve({"theme": {"extend": {"aspectRatio": {"video": "16 / 9"}}}})
        assert theme.lookup("aspectRatio", "video") == "16 / 9"

    def test_callable_override(self):
        config = {"theme": {"padding": lambda theme: dict(theme("spacing"))}}
        theme = self.resolver.resolve(config)
        assert theme.scale("padding") == {"1": "0.25rem"}

    def test_non_mapping_scale_rejected(self):
        with pytest.raises(ConfigError):
            self.resolver.resolve({"theme": {"colors": "red"}})

    def test_non_mapping_theme_rejected(self):
        with pytest.raises(ConfigError):
            self.resolver.resolve({"theme": ["colors"]})

    def test_non_mapping_extend_rejected(self):
        with pytest.raises(ConfigError):
            self.resolver.resolve({"theme": {"extend": "colors"}})

    def test_circular_reference_rejected(self):
        resolver = ThemeResolver({
            "a": lambda theme: dict(theme("b")),
            "b": lambda theme: dict(theme("a")),
        })
        with pytest.raises(ConfigError, match="Circular"):
            resolver.resolve()


class TestResolvedTheme:
    """Checked scale lookups."""

    def setup_method(self):
        self.theme = ResolvedTheme(scales={"spacing": {"4": "1rem"}, "broken": "x"})

    def test_lookup(self):
        assert self.theme.lookup("spacing", "4") == "1rem"
        assert self.theme.lookup("spacing", "5") is None
        assert self.theme.lookup("missing", "4") is None

    def test_unknown_or_non_mapping_scale_is_empty(self):
        assert self.theme.scale("missing") == {}
        assert self.theme.scale("broken") == {}
        assert self.theme.scale(None) == {}

    def test_has_key(self):
        assert self.theme.has_key("spacing", "4")
        assert not self.theme.has_key("spacing", "px")


class TestDefaultTheme:
    """Built-in scales."""

    def test_cached(self):
        assert get_default_theme() is get_default_theme()
        assert resolve_theme() is get_default_theme()
        assert resolve_theme({}) is get_default_theme()
        assert resolve_theme({"theme": {}}) is get_default_theme()

    def test_common_scales(self):
        theme = get_default_theme()
        assert theme.screens["md"] == "768px"
        assert theme.opacity["50"] == "0.5"
        assert theme.lookup("spacing", "4") == "1rem"
        assert theme.lookup("spacing", "px") == "1px"
        assert theme.colors["red"]["500"] == "#ef4444"
        assert theme.lookup("width", "1/2") == "50%"

    def test_scales_are_read_only(self):
        theme = get_default_theme()
        with pytest.raises(TypeError):
            theme.scale("colors")["red"]["500"] = "#000001"
        with pytest.raises(TypeError):
            theme.scale("colors")["brand"] = "#000001"
        assert DEFAULT_THEME["colors"]["red"]["500"] == "#ef4444"
        assert parse("bg-red-500").value == "#ef4444"
        assert isinstance(theme.lookup("fontFamily", "sans"), tuple)

    def test_scales_copied_from_input(self):
        scales = {"spacing": {"4": "1rem"}}
        theme = ResolvedTheme(scales=scales)
        scales["spacing"]["4"] = "2rem"
        assert theme.lookup("spacing", "4") == "1rem"

    def test_derived_color_scales(self):
        theme = get_default_theme()
        assert theme.scale("backgroundColor")["blue"]["500"] == "#3b82f6"
        assert "DEFAULT" in theme.scale("borderColor")


class TestColorHelpers:
    """Color conversion and matching."""

    def test_hex_rgb_round_trip(self):
        assert hex_to_rgb("#ef4444") == (239, 68, 68)
        assert rgb_to_hex(239, 68, 68) == "#ef4444"

    def test_hex_to_rgb_rejects_bad_length(self):
        with pytest.raises(ValueError):
            hex_to_rgb("#fff")

    @pytest.mark.parametrize("text,expected", [
        ("#EF4444", ParsedColor("#ef4444")),
        ("#f00", ParsedColor("#ff0000")),
        ("#ff000080", ParsedColor("#ff0000", 0.502)),
        ("red", ParsedColor("#ff0000")),
        ("transparent", ParsedColor("#000000", 0.0)),
        ("rgb(239, 68, 68)", ParsedColor("#ef4444")),
        ("rgb(239 68 68 / 50%)", ParsedColor("#ef4444", 0.5)),
        ("rgba(0,0,0,0.25)", ParsedColor("#000000", 0.25)),
        ("hsl(0, 100%, 50%)", ParsedColor("#ff0000")),
        ("hsl(120deg 100% 25%)", ParsedColor("#008000")),
        ("hsl(0.5turn 100% 50%)", ParsedColor("#00ffff")),
        ("hwb(0 0% 0%)", ParsedColor("#ff0000")),
        ("hwb(0 100% 100%)", ParsedColor("#808080")),
        ("lab(100 0 0)", ParsedColor("#ffffff")),
        ("lab(0 0 0)", ParsedColor("#000000")),
        ("lch(100% 0 0)", ParsedColor("#ffffff")),
        ("oklab(1 0 0)", ParsedColor("#ffffff")),
        ("oklch(0 0 0)", ParsedColor("#000000")),
        ("oklch(100% 0 0 / 50%)", ParsedColor("#ffffff", 0.5)),
    ])
    def test_calculate_hex_from_string(self, text, expected):
        assert calculate_hex_from_string(text) == expected

    @pytest.mark.parametrize("text", ["", "#zzzzzz", "#12345", "rgb(foo)", "hsl(1, 2, 3)",
                                      "banana", "2px", "lab(50% 10deg 0)", "oklch(0.5 0.1 10%)",
                                      "rgb(1deg 2 3)", "rgba(0 0 0 / 5deg)",
                                      "color-mix(in srgb, red, blue)"])
    def test_calculate_hex_from_string_invalid(self, text):
        assert calculate_hex_from_string(text) is None

    def test_css_hex(self):
        assert ParsedColor("#ff0000").css_hex() == "#ff0000"
        assert ParsedColor("#ff0000", 0.5).css_hex() == "#ff000080"
        assert calculate_hex_from_string("#ff000080").css_hex() == "#ff000080"

    def test_find_color_from_hex(self):
        scale = {
            "DEFAULT": "#ef4444",
            "white": "#ffffff",
            "red": {"500": "#ef4444"},
            "brand": {"DEFAULT": "#123456"},
        }
        assert find_color_from_hex("#ef4444", scale) == "red-500"
        assert find_color_from_hex("#FFFFFF", scale) == "white"
        assert find_color_from_hex("#123456", scale) == "brand"
        assert find_color_from_hex("#abcdef", scale) is None

    def test_find_color_respects_alpha(self):
        scale = {"transparent": "transparent", "black": "#000000"}
        assert find_color_from_hex("#000000", scale) == "black"
        assert find_color_from_hex("#000000", scale, alpha=0.0) == "transparent"

    def test_is_color(self):
        theme = get_default_theme()
        assert is_color("red-500", theme)
        assert is_color("white", theme)
        assert is_color("#abc", theme)
        assert not is_color("4", theme)
        assert not is_color("", theme)

    def test_resolve_scale_value(self):
        scale = {"red": {"500": "#ef4444"}, "1/2": "50%"}
        assert resolve_scale_value(scale, "1/2") == "50%"
        assert resolve_scale_value(scale, "red-500") == "#ef4444"
        assert resolve_scale_value(scale, "red") == {"500": "#ef4444"}
        assert resolve_scale_value(scale, "blue-500") is None
        assert resolve_scale_value(scale, "") is None

    def test_deep_merge_dict(self):
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        merged = deep_merge_dict(base, {"a": {"y": 3}, "c": 4})
        assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
        assert base == {"a": {"x": 1, "y": 2}, "b": 1}
