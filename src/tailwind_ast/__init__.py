"""tailwind-ast - parse utility class tokens into a structured AST."""

__version__ = "0.1.0"

from .parser import UtilityParser, parse, parse_many
from .plugins import PluginRegistry, find_root
from .schema import (
    AST,
    FunctionalPlugin,
    NamedPlugin,
    ParseError,
    ParseResult,
    State,
    Value,
    Variant,
    VariantKind,
)
from .theme_engine import ResolvedTheme, resolve_theme

__all__ = [
    "parse",
    "parse_many",
    "UtilityParser",
    "PluginRegistry",
    "find_root",
    "resolve_theme",
    "ResolvedTheme",

    # Schema models
    "AST",
    "ParseError",
    "ParseResult",
    "State",
    "Value",
    "Variant",
    "VariantKind",
    "NamedPlugin",
    "FunctionalPlugin",
]
