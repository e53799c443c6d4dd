"""Theme resolution.

This module merges the built-in default theme with a user configuration and
produces an immutable ResolvedTheme. The configuration follows the framework's
shape: keys under ``theme`` replace a default scale wholesale, keys under
``theme.extend`` are deep-merged into it. Derived scales (callables taking a
``theme`` accessor) are evaluated after merging.
"""

import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Optional, Set

from ..config import ConfigError
from .defaults import DEFAULT_THEME
from .schema import ResolvedTheme
from .utils import deep_merge_dict

logger = logging.getLogger(__name__)


class ThemeResolver:
    """Resolves one configuration against a set of default scales."""

    def __init__(self, defaults: Optional[Mapping[str, Any]] = None):
        self.defaults = dict(DEFAULT_THEME if defaults is None else defaults)

    def resolve(self, config: Optional[Mapping[str, Any]] = None) -> ResolvedTheme:
        """Resolve ``config`` into a theme.

        Args:
            config: Framework configuration, e.g. ``{"theme": {"extend": {...}}}``

        Returns:
            ResolvedTheme with every scale evaluated

        Raises:
            ConfigError: If the configuration is malformed
        """
        theme_config = self._theme_section(config)
        extend = theme_config.get("extend") or {}
        if not isinstance(extend, Mapping):
            raise ConfigError("theme.extend must be a mapping")

        merged: Dict[str, Any] = dict(self.defaults)
        for key, value in theme_config.items():
            if key != "extend":
                merged[key] = value

        resolved: Dict[str, Dict[str, Any]] = {}
        in_progress: Set[str] = set()

        def theme(key: str) -> Dict[str, Any]:
            if key in resolved:
                return resolved[key]
            if key in in_progress:
                raise ConfigError(f"Circular theme reference through '{key}'")
            in_progress.add(key)
            try:
                value = self._evaluate(merged.get(key, {}), theme)
                if key in extend:
                    value = deep_merge_dict(value, self._evaluate(extend[key], theme))
            finally:
                in_progress.discard(key)
            if not isinstance(value, dict):
                raise ConfigError(f"Theme scale '{key}' must be a mapping, got {type(value).__name__}")
            resolved[key] = value
            return value

        for key in list(merged) + [key for key in extend if key not in merged]:
            theme(key)

        logger.debug(f"Resolved theme with {len(resolved)} scales")
        return ResolvedTheme(scales=resolved)

    @staticmethod
    def _theme_section(config: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
        if not config:
            return {}
        if not isinstance(config, Mapping):
            raise ConfigError(f"Configuration must be a mapping, got {type(config).__name__}")
        section = config.get("theme") or {}
        if not isinstance(section, Mapping):
            raise ConfigError("'theme' must be a mapping")
        return section

    @staticmethod
    def _evaluate(value: Any, theme: Callable[[str], Dict[str, Any]]) -> Any:
        if callable(value):
            value = value(theme)
        if isinstance(value, Mapping):
            return dict(value)
        return value


@lru_cache(maxsize=1)
def get_default_theme() -> ResolvedTheme:
    """Return the default theme, resolved once per process."""
    return ThemeResolver().resolve()


def resolve_theme(config: Optional[Mapping[str, Any]] = None) -> ResolvedTheme:
    """Resolve a configuration, reusing the cached default theme when empty."""
    if not config or (isinstance(config, Mapping) and not config.get("theme")):
        return get_default_theme()
    return ThemeResolver().resolve(config)
