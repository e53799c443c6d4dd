"""Utility functions for theme operations.

This module provides dictionary merging, checked scale lookups and color
conversion: computing a canonical hex value from CSS color text and snapping a
hex value back to a named theme color.
"""

import colorsys
import math
import re
from functools import lru_cache
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from rich.color import Color, ColorParseError

from .schema import ResolvedTheme


class ParsedColor(NamedTuple):
    """Canonical form of a CSS color."""
    hex: str
    alpha: float = 1.0

    def css_hex(self) -> str:
        """Hex notation, with an alpha byte when the color is not opaque."""
        if self.alpha >= 1.0:
            return self.hex
        return f"{self.hex}{round(self.alpha * 255):02x}"


CSS_NAMED_COLORS: Dict[str, str] = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc", "bisque": "#ffe4c4",
    "black": "#000000", "blanchedalmond": "#ffebcd", "blue": "#0000ff",
    "blueviolet": "#8a2be2", "brown": "#a52a2a", "burlywood": "#deb887",
    "cadetblue": "#5f9ea0", "chartreuse": "#7fff00", "chocolate": "#d2691e",
    "coral": "#ff7f50", "cornflowerblue": "#6495ed", "cornsilk": "#fff8dc",
    "crimson": "#dc143c", "cyan": "#00ffff", "darkblue": "#00008b", "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b", "darkgray": "#a9a9a9", "darkgreen": "#006400",
    "darkgrey": "#a9a9a9", "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f", "darkorange": "#ff8c00", "darkorchid": "#9932cc",
    "darkred": "#8b0000", "darksalmon": "#e9967a", "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b", "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1", "darkviolet": "#9400d3", "deeppink": "#ff1493",
    "deepskyblue": "#00bfff", "dimgray": "#696969", "dimgrey": "#696969",
    "dodgerblue": "#1e90ff", "firebrick": "#b22222", "floralwhite": "#fffaf0",
    "forestgreen": "#228b22", "fuchsia": "#ff00ff", "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff", "gold": "#ffd700", "goldenrod": "#daa520", "gray": "#808080",
    "green": "#008000", "greenyellow": "#adff2f", "grey": "#808080", "honeydew": "#f0fff0",
    "hotpink": "#ff69b4", "indianred": "#cd5c5c", "indigo": "#4b0082", "ivory": "#fffff0",
    "khaki": "#f0e68c", "lavender": "#e6e6fa", "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00", "lemonchiffon": "#fffacd", "lightblue": "#add8e6",
    "lightcoral": "#f08080", "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3", "lightgreen": "#90ee90", "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1", "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa", "lightslategray": "#778899", "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de", "lightyellow": "#ffffe0", "lime": "#00ff00",
    "limegreen": "#32cd32", "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd", "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db", "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585", "midnightblue": "#191970", "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1", "moccasin": "#ffe4b5", "navajowhite": "#ffdead",
    "navy": "#000080", "oldlace": "#fdf5e6", "olive": "#808000", "olivedrab": "#6b8e23",
    "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd", "powderblue": "#b0e0e6",
    "purple": "#800080", "rebeccapurple": "#663399", "red": "#ff0000",
    "rosybrown": "#bc8f8f", "royalblue": "#4169e1", "saddlebrown": "#8b4513",
    "salmon": "#fa8072", "sandybrown": "#f4a460", "seagreen": "#2e8b57",
    "seashell": "#fff5ee", "sienna": "#a0522d", "silver": "#c0c0c0", "skyblue": "#87ceeb",
    "slateblue": "#6a5acd", "slategray": "#708090", "slategrey": "#708090",
    "snow": "#fffafa", "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "teal": "#008080", "thistle": "#d8bfd8", "tomato": "#ff6347", "turquoise": "#40e0d0",
    "violet": "#ee82ee", "wheat": "#f5deb3", "white": "#ffffff", "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00", "yellowgreen": "#9acd32",
}

_HEX_COLOR = re.compile(r'^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$')
_COLOR_FUNCTION = re.compile(r'^(rgba?|hsla?|hwb|lab|lch|oklab|oklch)\((.*)\)$')
_NUMBER = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)(%|deg|grad|rad|turn)?$')

# Color functions calculate_hex_from_string can convert
COLOR_FUNCTIONS = ("rgb", "rgba", "hsl", "hsla", "hwb", "lab", "lch", "oklab", "oklch")

_HUE_UNITS = {"deg": 1.0, "grad": 0.9, "rad": 180 / math.pi, "turn": 360.0}

# CIE Lab reference white (D50) and the D50 -> D65 -> linear sRGB matrices
_D50_WHITE = (0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585)
_D50_TO_D65 = (
    (0.9554734527042182, -0.023098536874261423, 0.0632593086610217),
    (-0.028369706963208136, 1.0099954580058226, 0.021041398966943008),
    (0.012314001688319899, -0.020507696433477912, 1.3303659366080753),
)
_XYZ_TO_LINEAR_SRGB = (
    (3.2409699419045226, -1.537383177570094, -0.4986107602930034),
    (-0.9692436362808796, 1.8759675015077202, 0.04155505740717559),
    (0.05563007969699366, -0.20397695888897652, 1.0569715142428786),
)
_LAB_KAPPA = 24389 / 27
_LAB_EPSILON = 216 / 24389


def deep_merge_dict(base: Dict[Any, Any], overlay: Dict[Any, Any]) -> Dict[Any, Any]:
    """Deep merge two dictionaries, with overlay taking precedence.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_dict(result[key], value)
        else:
            result[key] = value

    return result


def resolve_scale_value(scale: Mapping[str, Any], key: str) -> Optional[Any]:
    """Look up ``key`` in a theme scale.

    Tries the key as written, then splits it on each hyphen from the right so
    that nested palettes resolve: ``red-500`` finds ``scale["red"]["500"]``
    and ``light-blue-500`` finds ``scale["light-blue"]["500"]``.

    Returns:
        The scale entry (which may itself be a mapping) or None
    """
    if not key:
        return None
    if key in scale:
        return scale[key]

    index = key.rfind('-')
    while index > 0:
        head, tail = key[:index], key[index + 1:]
        group = scale.get(head)
        if isinstance(group, Mapping) and tail in group:
            return group[tail]
        index = key.rfind('-', 0, index)
    return None


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000' or 'FF0000')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        ValueError: If hex_color is not a valid hex color
    """
    hex_color = hex_color.lstrip('#')

    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: {hex_color}")

    try:
        triplet = Color.parse(f"#{hex_color}").get_truecolor()
    except ColorParseError as e:
        raise ValueError(f"Invalid hex color: {hex_color}") from e
    return (triplet.red, triplet.green, triplet.blue)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to hex color string.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        Hex color string with # prefix
    """
    return f"#{r:02x}{g:02x}{b:02x}"


def _parse_hex(digits: str) -> Optional[ParsedColor]:
    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    alpha = 1.0
    if len(digits) == 8:
        alpha = round(int(digits[6:], 16) / 255, 3)
        digits = digits[:6]
    try:
        r, g, b = hex_to_rgb(digits)
    except ValueError:
        return None
    return ParsedColor(rgb_to_hex(r, g, b), alpha)


def _split_arguments(body: str) -> Optional[Tuple[list, Optional[str]]]:
    # Accepts "r, g, b[, a]" and "r g b[ / a]"
    alpha = None
    if '/' in body:
        body, alpha = body.split('/', 1)
        alpha = alpha.strip()
    if ',' in body:
        parts = [part.strip() for part in body.split(',')]
    else:
        parts = body.split()
    if len(parts) == 4 and alpha is None:
        alpha = parts.pop()
    if len(parts) != 3 or not all(_NUMBER.match(part) for part in parts):
        return None
    if alpha is not None and not _NUMBER.match(alpha):
        return None
    return parts, alpha


def _number(part: str) -> Tuple[float, str]:
    unit = _NUMBER.match(part).group(2) or ''
    return float(part[:len(part) - len(unit)]), unit


def _component(part: str, percent_reference: float) -> Optional[float]:
    # Plain number, or a percentage of ``percent_reference``
    value, unit = _number(part)
    if unit == '%':
        return value / 100 * percent_reference
    if unit:
        return None
    return value


def _hue(part: str) -> Optional[float]:
    value, unit = _number(part)
    if unit == '%':
        return None
    return (value * _HUE_UNITS[unit or 'deg']) % 360


def _alpha(part: Optional[str]) -> Optional[float]:
    if part is None:
        return 1.0
    value = _component(part, 1.0)
    if value is None:
        return None
    return round(max(0.0, min(1.0, value)), 3)


def _multiply(matrix, vector) -> Tuple[float, float, float]:
    return tuple(sum(m * v for m, v in zip(row, vector)) for row in matrix)


def _gamma_encode(channel: float) -> float:
    channel = max(0.0, min(1.0, channel))
    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * channel ** (1 / 2.4) - 0.055


def _lab_to_srgb(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    fy = (lightness + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    x = fx ** 3 if fx ** 3 > _LAB_EPSILON else (116 * fx - 16) / _LAB_KAPPA
    y = fy ** 3 if lightness > _LAB_KAPPA * _LAB_EPSILON else lightness / _LAB_KAPPA
    z = fz ** 3 if fz ** 3 > _LAB_EPSILON else (116 * fz - 16) / _LAB_KAPPA
    xyz_d50 = (x * _D50_WHITE[0], y * _D50_WHITE[1], z * _D50_WHITE[2])
    linear = _multiply(_XYZ_TO_LINEAR_SRGB, _multiply(_D50_TO_D65, xyz_d50))
    return tuple(_gamma_encode(channel) for channel in linear)


def _oklab_to_srgb(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    l_ = (lightness + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m_ = (lightness - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s_ = (lightness - 0.0894841775 * a - 1.2914855480 * b) ** 3
    linear = (
        4.0767416621 * l_ - 3.3077115913 * m_ + 0.2309699292 * s_,
        -1.2684380046 * l_ + 2.6097574011 * m_ - 0.3413193965 * s_,
        -0.0041960863 * l_ - 0.7034186147 * m_ + 1.7076147010 * s_,
    )
    return tuple(_gamma_encode(channel) for channel in linear)


def _hwb_to_srgb(hue: float, whiteness: float, blackness: float) -> Tuple[float, float, float]:
    if whiteness + blackness >= 1:
        gray = whiteness / (whiteness + blackness)
        return gray, gray, gray
    rgb = colorsys.hls_to_rgb(hue / 360, 0.5, 1.0)
    return tuple(channel * (1 - whiteness - blackness) + whiteness for channel in rgb)


def _polar(chroma: float, hue: float) -> Tuple[float, float]:
    return chroma * math.cos(math.radians(hue)), chroma * math.sin(math.radians(hue))


def _to_hex(rgb: Tuple[float, float, float]) -> str:
    r, g, b = (max(0, min(255, round(channel * 255))) for channel in rgb)
    return rgb_to_hex(r, g, b)


def _convert(name: str, parts: list) -> Optional[Tuple[float, float, float]]:
    """Convert function arguments to sRGB channels in 0-1, None if invalid."""
    first, second, third = parts

    if name.startswith('rgb'):
        channels = []
        for part in parts:
            value, unit = _number(part)
            if unit == '%':
                value = value * 255 / 100
            elif unit:
                return None
            channels.append(max(0.0, min(255.0, value)) / 255)
        return tuple(channels)

    if name.startswith('hsl'):
        hue = _hue(first)
        if hue is None or not second.endswith('%') or not third.endswith('%'):
            return None
        saturation = max(0.0, min(1.0, _number(second)[0] / 100))
        lightness = max(0.0, min(1.0, _number(third)[0] / 100))
        return colorsys.hls_to_rgb(hue / 360, lightness, saturation)

    if name == 'hwb':
        hue, whiteness, blackness = _hue(first), _component(second, 100), _component(third, 100)
        if hue is None or whiteness is None or blackness is None:
            return None
        return _hwb_to_srgb(hue, max(0.0, min(1.0, whiteness / 100)),
                            max(0.0, min(1.0, blackness / 100)))

    if name in ('lab', 'oklab'):
        reference = (100, 125) if name == 'lab' else (1, 0.4)
        lightness, a, b = (_component(first, reference[0]), _component(second, reference[1]),
                           _component(third, reference[1]))
        if lightness is None or a is None or b is None:
            return None
        lightness = max(0.0, min(float(reference[0]), lightness))
        return _lab_to_srgb(lightness, a, b) if name == 'lab' else _oklab_to_srgb(lightness, a, b)

    # lch / oklch
    reference = (100, 150) if name == 'lch' else (1, 0.4)
    lightness, chroma, hue = (_component(first, reference[0]), _component(second, reference[1]),
                              _hue(third))
    if lightness is None or chroma is None or hue is None:
        return None
    lightness = max(0.0, min(float(reference[0]), lightness))
    a, b = _polar(max(0.0, chroma), hue)
    return _lab_to_srgb(lightness, a, b) if name == 'lch' else _oklab_to_srgb(lightness, a, b)


def _parse_function(name: str, body: str) -> Optional[ParsedColor]:
    split = _split_arguments(body)
    if split is None:
        return None
    parts, alpha_part = split

    rgb = _convert(name, parts)
    alpha = _alpha(alpha_part)
    if rgb is None or alpha is None:
        return None
    return ParsedColor(_to_hex(rgb), alpha)


@lru_cache(maxsize=1024)
def calculate_hex_from_string(value: str) -> Optional[ParsedColor]:
    """Compute the canonical hex form of a CSS color.

    Supports hex notation (3, 4, 6 and 8 digits), ``rgb()``/``rgba()``,
    ``hsl()``/``hsla()``, ``hwb()``, ``lab()``/``lch()`` and
    ``oklab()``/``oklch()`` in comma and space syntax, CSS named colors and
    ``transparent``. Colors outside sRGB are clamped.

    Returns:
        ParsedColor, or None when the text is not a valid color
    """
    text = value.strip().lower()
    if not text:
        return None

    if text == 'transparent':
        return ParsedColor("#000000", 0.0)

    if text in CSS_NAMED_COLORS:
        return ParsedColor(CSS_NAMED_COLORS[text])

    hex_match = _HEX_COLOR.match(text)
    if hex_match:
        return _parse_hex(hex_match.group(1))
    if text.startswith('#'):
        return None

    function_match = _COLOR_FUNCTION.match(text)
    if function_match:
        return _parse_function(function_match.group(1), function_match.group(2))

    return None


def find_color_from_hex(hex_color: str, scale: Mapping[str, Any],
                        alpha: float = 1.0) -> Optional[str]:
    """Find the theme color name whose value equals ``hex_color``.

    Args:
        hex_color: Canonical hex color ("#rrggbb")
        scale: Theme color scale, flat or nested one level by shade
        alpha: Alpha of the color being matched

    Returns:
        Color name such as ``red-500`` (or ``white``), None when no entry matches
    """
    target = ParsedColor(hex_color.lower(), alpha)

    for name, entry in scale.items():
        if isinstance(entry, str):
            if name != 'DEFAULT' and calculate_hex_from_string(entry) == target:
                return name
        elif isinstance(entry, Mapping):
            for shade, shade_value in entry.items():
                if isinstance(shade_value, str) and calculate_hex_from_string(shade_value) == target:
                    return name if shade == 'DEFAULT' else f"{name}-{shade}"
    return None


def is_color(value: str, theme: ResolvedTheme) -> bool:
    """Check whether ``value`` names a theme color or is a valid CSS color."""
    if not value:
        return False
    if resolve_scale_value(theme.colors, value) is not None:
        return True
    return calculate_hex_from_string(value) is not None
