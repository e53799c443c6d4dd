"""Utility class parser.

Parses one utility class token such as ``md:hover:!-mt-[2px]`` into an AST:
variants, important/negative flags, the matched plugin, the resolved value and
an optional opacity modifier. Failures are returned as ParseError values, so
callers processing many tokens never have to catch exceptions.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from fuzzywuzzy import fuzz, process

from .plugins import PluginRegistry
from .schema import AST, FunctionalPlugin, ParseError, ParseResult, State, Value, Variant
from .theme_engine import ResolvedTheme, resolve_theme
from .theme_engine.utils import calculate_hex_from_string, find_color_from_hex, is_color
from .utils import build_modifier, decode_arbitrary_value, get_value, infer_data_type, segment
from .variants import parse_variant

logger = logging.getLogger(__name__)

DEFAULT_VALUE = "DEFAULT"


class UtilityParser:
    """Parser bound to one resolved theme and one set of plugin tables."""

    def __init__(self, theme: ResolvedTheme, plugins: Optional[PluginRegistry] = None):
        self.theme = theme
        self.plugins = plugins or PluginRegistry.default()

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None,
                    plugins: Optional[PluginRegistry] = None) -> "UtilityParser":
        """Create a parser for a framework configuration dict."""
        return cls(resolve_theme(config), plugins)

    def parse(self, input_text: str) -> ParseResult:
        """Parse a utility class token into an AST or a ParseError."""
        if not input_text:
            return ParseError(root="", message="Empty input")

        try:
            return self._parse(input_text)
        except Exception as e:
            # Return error instead of crashing
            logger.error(f"Unexpected failure parsing '{input_text}': {e}")
            return ParseError(root=input_text, message=f"Parsing failed: {e}")

    def _parse(self, input_text: str) -> ParseResult:
        candidates = segment(input_text, ':')
        base = candidates.pop()
        variants = self._parse_variants(candidates)
        state, base = self._extract_state(base)

        named_plugin = self.plugins.get_named(base)
        if named_plugin is not None:
            return AST(
                root=base,
                kind="named",
                property=named_plugin.ns,
                value=named_plugin.value,
                value_def=Value(
                    class_=list(named_plugin.class_),
                    raw=base,
                    kind="named",
                    value=named_plugin.value,
                ),
                variants=variants,
                modifier=None,
                important=state.important,
                negative=state.negative,
                arbitrary=False,
            )

        root, value = self.plugins.find_root(base)
        if not root:
            logger.debug(f"No plugin found for '{base}'")
            return ParseError(
                root=base,
                message="Tailwindcss core plugin not found",
                suggestions=self.suggest_roots(base),
            )

        available_plugins = self.plugins.get_functional(root)

        modifier = None
        value_without_modifier, *rest = segment(value or "", '/')
        modifier_segment = rest[0] if rest else None
        if modifier_segment and is_color(self._unbracket(value_without_modifier), self.theme):
            modifier = build_modifier(modifier_segment, self.theme.opacity)

        if (value_without_modifier and value_without_modifier[0] == '['
                and value_without_modifier[-1] == ']'):
            return self._parse_arbitrary(base, root, value_without_modifier, available_plugins,
                                         variants, modifier, state)

        return self._parse_scale_value(base, root, value or DEFAULT_VALUE, value_without_modifier,
                                       available_plugins, variants, modifier, state)

    def _parse_variants(self, candidates: Sequence[str]) -> List[Variant]:
        # Rightmost variant is closest to the utility and comes first
        variants = []
        for candidate in reversed(candidates):
            variant = parse_variant(candidate, self.theme.screens)
            if variant is not None:
                variants.append(variant)
        return variants

    @staticmethod
    def _unbracket(value: str) -> str:
        # Arbitrary values are compared in decoded form, ``rgb(1_2_3)`` as ``rgb(1 2 3)``
        if value[:1] == '[' and value[-1:] == ']':
            return decode_arbitrary_value(value[1:-1])
        return value.replace('[', '').replace(']', '')

    @staticmethod
    def _extract_state(base: str) -> Tuple[State, str]:
        state = State()
        if base[:1] == '!':
            state.important = True
            base = base[1:]
        if base[:1] == '-':
            state.negative = True
            base = base[1:]
        return state, base

    def _parse_arbitrary(self, base: str, root: str, value_without_modifier: str,
                         available_plugins: Sequence[FunctionalPlugin], variants: List[Variant],
                         modifier: Optional[str], state: State) -> ParseResult:
        arbitrary_value = value_without_modifier[1:-1]
        unit_type = infer_data_type(arbitrary_value, [plugin.type for plugin in available_plugins])
        plugin = next((p for p in available_plugins if p.type == unit_type), None)

        if unit_type == "color":
            color = calculate_hex_from_string(decode_arbitrary_value(arbitrary_value))
            if not color:
                logger.debug(f"Invalid arbitrary color in '{base}'")
                return ParseError(root=base, message="Color is not correct")
            scale = self.theme.scale(plugin.scale_key if plugin and plugin.scale_key else "colors")
            value_without_modifier = (find_color_from_hex(color.hex, scale, color.alpha)
                                      or color.css_hex())
        elif available_plugins:
            # Not a color but still arbitrary: prefer any non-color reading, as the framework does
            plugin = plugin or next((p for p in available_plugins if p.type != "color"), None)

        if plugin is None:
            return ParseError(
                root=base,
                message=f'Unable to determine plugin for arbitrary value "{arbitrary_value}"',
            )

        arbitrary_value = decode_arbitrary_value(arbitrary_value)

        return AST(
            root=root,
            kind="functional",
            property=plugin.ns,
            value=arbitrary_value,
            value_def=Value(
                value=arbitrary_value,
                class_=list(plugin.class_),
                raw=value_without_modifier,
                kind=unit_type or "named",
            ),
            variants=variants,
            modifier=modifier,
            arbitrary=True,
            important=state.important,
            negative=state.negative,
        )

    def _parse_scale_value(self, base: str, root: str, value: str, value_without_modifier: str,
                           available_plugins: Sequence[FunctionalPlugin], variants: List[Variant],
                           modifier: Optional[str], state: State) -> ParseResult:
        head = value.split('-')[0]
        matched_plugin = next(
            (plugin for plugin in available_plugins
             if self.theme.has_key(plugin.scale_key, head)
             or self.theme.has_key(plugin.scale_key, value_without_modifier)),
            None,
        )
        if matched_plugin is None:
            namespaces = ', '.join(plugin.ns for plugin in available_plugins)
            return ParseError(
                root=base,
                message=(f'found "{namespaces}" plugins but unable to determine which one '
                         f'is matched to given value "{value}".'),
            )

        lookup = value_without_modifier if matched_plugin.type == "color" else value
        resolved = get_value(lookup, matched_plugin, self.theme.scale(matched_plugin.scale_key))

        return AST(
            root=root,
            kind="functional",
            property=matched_plugin.ns,
            value=resolved.value,
            value_def=resolved,
            variants=variants,
            modifier=modifier,
            important=state.important,
            negative=state.negative,
            arbitrary=False,
        )

    def suggest_roots(self, base: str, limit: int = 3) -> List[str]:
        """Suggest known classes or roots close to an unknown base."""
        head = base.split('-[')[0]
        matches = process.extractBests(head, self.plugins.known_tokens(),
                                       scorer=fuzz.ratio, score_cutoff=70, limit=limit)
        return [match[0] for match in matches]


def parse(input_text: str, config: Optional[Mapping[str, Any]] = None,
          plugins: Optional[PluginRegistry] = None) -> ParseResult:
    """Parse one utility class token.

    Args:
        input_text: Token such as ``hover:bg-red-500/50``
        config: Optional framework configuration (``{"theme": {...}}``)
        plugins: Optional plugin tables, the built-in core plugins by default

    Returns:
        AST on success, ParseError otherwise; never raises
    """
    if not input_text:
        return ParseError(root="", message="Empty input")
    try:
        parser = UtilityParser.from_config(config, plugins)
    except Exception as e:
        logger.error(f"Failed to resolve theme: {e}")
        return ParseError(root=input_text, message=f"Invalid configuration: {e}")
    return parser.parse(input_text)


def parse_many(tokens: Iterable[str], config: Optional[Mapping[str, Any]] = None,
               plugins: Optional[PluginRegistry] = None) -> List[Tuple[str, ParseResult]]:
    """Parse several tokens against one resolved theme."""
    tokens = list(tokens)
    try:
        parser = UtilityParser.from_config(config, plugins)
    except Exception as e:
        logger.error(f"Failed to resolve theme: {e}")
        return [(token, ParseError(root=token, message=f"Invalid configuration: {e}"))
                for token in tokens]
    return [(token, parser.parse(token)) for token in tokens]
