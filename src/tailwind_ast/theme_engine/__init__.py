"""Theme resolution package.

Provides the built-in default theme, the resolver that merges user
configuration into it, and the color helpers used while matching values
against theme scales.
"""

from .engine import ThemeResolver, get_default_theme, resolve_theme
from .schema import ResolvedTheme
from .utils import (
    ParsedColor,
    calculate_hex_from_string,
    deep_merge_dict,
    find_color_from_hex,
    hex_to_rgb,
    is_color,
    resolve_scale_value,
    rgb_to_hex,
)

__all__ = [
    "ThemeResolver",
    "ResolvedTheme",
    "get_default_theme",
    "resolve_theme",

    # Utilities
    "ParsedColor",
    "calculate_hex_from_string",
    "deep_merge_dict",
    "find_color_from_hex",
    "hex_to_rgb",
    "is_color",
    "resolve_scale_value",
    "rgb_to_hex",
]
