"""Data type inference for arbitrary values.

Given the text inside an arbitrary value (``[...]``) and the value kinds the
candidate plugins accept, pick the first kind the text satisfies.
"""

import re
from typing import Callable, Dict, Iterable, Optional

from ..theme_engine.utils import COLOR_FUNCTIONS, CSS_NAMED_COLORS

_UNITS = (
    "cm", "mm", "q", "in", "pc", "pt", "px", "em", "ex", "ch", "rem", "lh", "rlh",
    "vw", "vh", "vmin", "vmax", "vb", "vi", "svw", "svh", "lvw", "lvh", "dvw", "dvh",
    "cqw", "cqh", "cqi", "cqb", "cqmin", "cqmax",
)

_NUMBER = r'[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?'
_NUMBER_RE = re.compile(rf'^{_NUMBER}$', re.IGNORECASE)
_INTEGER_RE = re.compile(r'^[+-]?\d+$')
_PERCENTAGE_RE = re.compile(rf'^{_NUMBER}%$', re.IGNORECASE)
_LENGTH_RE = re.compile(rf'^{_NUMBER}(?:{"|".join(_UNITS)})$', re.IGNORECASE)
_ANGLE_RE = re.compile(rf'^{_NUMBER}(?:deg|rad|grad|turn)$', re.IGNORECASE)
_MATH_FN_RE = re.compile(r'^(?:calc|min|max|clamp|round|abs|mod|rem)\(', re.IGNORECASE)
_COLOR_FN_RE = re.compile(rf'^(?:{"|".join(COLOR_FUNCTIONS)})\(', re.IGNORECASE)
_URL_RE = re.compile(r'^url\(.*\)$', re.IGNORECASE)
_IMAGE_FN_RE = re.compile(
    r'^(?:(?:repeating-)?(?:linear|radial|conic)-gradient|image-set|cross-fade|element)\(',
    re.IGNORECASE,
)

_NAMED_COLOR_KEYWORDS = set(CSS_NAMED_COLORS) | {"transparent"}
_LINE_WIDTHS = {"thin", "medium", "thick"}
_ABSOLUTE_SIZES = {"xx-small", "x-small", "small", "medium", "large", "x-large",
                   "xx-large", "xxx-large"}
_RELATIVE_SIZES = {"larger", "smaller"}
_GENERIC_FAMILIES = {"serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui",
                     "ui-serif", "ui-sans-serif", "ui-monospace", "ui-rounded", "math",
                     "emoji", "fangsong"}
_POSITIONS = {"center", "top", "right", "bottom", "left"}
_BG_SIZES = {"auto", "cover", "contain"}


def is_color_like(value: str) -> bool:
    """Syntax check for color forms calculate_hex_from_string converts.

    Does not validate the color itself.
    """
    return (
        value.startswith('#')
        or bool(_COLOR_FN_RE.match(value))
        or value.lower() in _NAMED_COLOR_KEYWORDS
    )


def is_length(value: str) -> bool:
    return value == '0' or bool(_LENGTH_RE.match(value)) or bool(_MATH_FN_RE.match(value))


def is_percentage(value: str) -> bool:
    return bool(_PERCENTAGE_RE.match(value)) or bool(_MATH_FN_RE.match(value))


def is_number(value: str) -> bool:
    return bool(_NUMBER_RE.match(value)) or bool(_MATH_FN_RE.match(value))


def is_integer(value: str) -> bool:
    return bool(_INTEGER_RE.match(value))


def is_url(value: str) -> bool:
    return bool(_URL_RE.match(value))


def is_image(value: str) -> bool:
    return is_url(value) or bool(_IMAGE_FN_RE.match(value))


def is_angle(value: str) -> bool:
    return bool(_ANGLE_RE.match(value))


def is_family_name(value: str) -> bool:
    # A quoted family, or a comma separated font stack
    return value[:1] in ('"', "'") or ',' in value


def is_position(value: str) -> bool:
    words = value.replace('_', ' ').split()
    return bool(words) and all(
        word in _POSITIONS or is_length(word) or is_percentage(word) for word in words
    )


def is_bg_size(value: str) -> bool:
    words = value.replace('_', ' ').split()
    if len(words) == 1 and words[0] in _BG_SIZES:
        return True
    return 0 < len(words) <= 2 and all(
        word == 'auto' or is_length(word) or is_percentage(word) for word in words
    )


CHECKS: Dict[str, Callable[[str], bool]] = {
    "color": is_color_like,
    "length": is_length,
    "percentage": is_percentage,
    "number": is_number,
    "integer": is_integer,
    "url": is_url,
    "image": is_image,
    "angle": is_angle,
    "line-width": lambda value: value in _LINE_WIDTHS or is_length(value),
    "absolute-size": lambda value: value in _ABSOLUTE_SIZES,
    "relative-size": lambda value: value in _RELATIVE_SIZES,
    "generic-name": lambda value: value in _GENERIC_FAMILIES,
    "family-name": is_family_name,
    "position": is_position,
    "bg-size": is_bg_size,
    "any": lambda value: True,
}


def infer_data_type(value: str, types: Iterable[str]) -> Optional[str]:
    """Return the first kind in ``types`` that ``value`` satisfies.

    Values that are CSS custom property references (``var(...)``) carry no
    type information and are never inferred.
    """
    if value.startswith('var('):
        return None

    for kind in types:
        check = CHECKS.get(kind)
        if check is not None and check(value):
            return kind
    return None
