"""Parsing helpers shared by the parser and the variant/plugin tables."""

from .datatypes import infer_data_type
from .segment import segment
from .value import build_modifier, decode_arbitrary_value, get_value

__all__ = [
    "build_modifier",
    "decode_arbitrary_value",
    "get_value",
    "infer_data_type",
    "segment",
]
