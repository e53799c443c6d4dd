"""Value helpers: coercion of scale values, modifiers and arbitrary values."""

import re
from typing import Any, Mapping, Optional

from ..schema import FunctionalPlugin, Value
from ..theme_engine.utils import resolve_scale_value

_MATH_FUNCTION = re.compile(r'(calc|min|max|clamp)\(.+\)')
_MATH_OPERATOR = re.compile(r'(-?\d*\.?\d(?!\b-\d.+[,)](?![^+\-/*])\D)(?:%|[a-z]+)?|\))([+\-/*])')
_PERCENT = re.compile(r'^\d+(\.\d+)?$')


def coerce_scale_value(entry: Any) -> Optional[str]:
    """Reduce a theme scale entry to a single CSS value string.

    ``["0.875rem", {"lineHeight": ...}]`` gives ``"0.875rem"``, a font stack
    list is joined with commas and a nested palette gives its ``DEFAULT``.
    """
    if entry is None:
        return None
    if isinstance(entry, Mapping):
        return coerce_scale_value(entry.get("DEFAULT"))
    if isinstance(entry, (list, tuple)):
        if not entry:
            return None
        if len(entry) > 1 and isinstance(entry[1], Mapping):
            return coerce_scale_value(entry[0])
        return ", ".join(str(item) for item in entry)
    return str(entry)


def get_value(value: str, plugin: FunctionalPlugin, scale: Mapping[str, Any]) -> Value:
    """Resolve ``value`` against ``scale`` for ``plugin``.

    Falls back to the raw text when the scale has no usable entry.
    """
    resolved = coerce_scale_value(resolve_scale_value(scale, value))
    return Value(
        value=resolved if resolved is not None else value,
        class_=list(plugin.class_),
        raw=value,
        kind=plugin.type,
    )


def build_modifier(modifier: str, opacity_scale: Mapping[str, Any]) -> str:
    """Turn a ``/`` modifier into an alpha value.

    ``[0.35]`` gives ``0.35``, a key in the opacity scale gives its value and a
    bare number is treated as a percentage.
    """
    if modifier.startswith('[') and modifier.endswith(']'):
        return decode_arbitrary_value(modifier[1:-1])

    if modifier in opacity_scale:
        return str(opacity_scale[modifier])

    if _PERCENT.match(modifier):
        return f"{float(modifier) / 100:g}"

    return modifier


def _convert_underscores(value: str) -> str:
    result = []
    idx = 0
    while idx < len(value):
        char = value[idx]
        if char == '\\' and value[idx + 1:idx + 2] == '_':
            result.append('_')
            idx += 2
            continue
        result.append(' ' if char == '_' else char)
        idx += 1
    return ''.join(result)


def _normalize_math(match: re.Match) -> str:
    return _MATH_OPERATOR.sub(r'\1 \2 ', match.group(0))


def decode_arbitrary_value(value: str) -> str:
    """Decode the text inside ``[...]`` into a CSS value.

    Underscores become spaces (``\\_`` keeps a literal underscore), ``url()``
    values are kept verbatim and math functions get spaces around operators.
    """
    if value.startswith('url('):
        return value

    value = _convert_underscores(value)
    value = _MATH_FUNCTION.sub(_normalize_math, value)
    return value
