"""Resolved theme model.

A resolved theme is a mapping from scale name (``colors``, ``spacing``,
``opacity``, ...) to a mapping of keys to values. Scales are copied into
read-only views when the model is built, so a theme can be shared freely.
Scale lookups are checked: unknown scales and keys come back empty rather
than raising.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def freeze_scale(value: Any) -> Any:
    """Deep-copy ``value`` into read-only mappings and tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_scale(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_scale(item) for item in value)
    return value


class ResolvedTheme(BaseModel):
    """Fully merged theme ready for the parser"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    scales: MappingProxyType = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("scales", mode="before")
    @classmethod
    def _freeze_scales(cls, value: Any) -> Any:
        return freeze_scale(value)

    def scale(self, key: Optional[str]) -> Mapping[str, Any]:
        """Return the scale mapping for ``key`` or an empty mapping."""
        if not key:
            return MappingProxyType({})
        scale = self.scales.get(key)
        if isinstance(scale, Mapping):
            return scale
        return MappingProxyType({})

    def lookup(self, scale_key: str, key: str) -> Optional[Any]:
        """Return a single scale entry, or None when absent."""
        return self.scale(scale_key).get(key)

    def has_key(self, scale_key: str, key: str) -> bool:
        return key in self.scale(scale_key)

    @property
    def screens(self) -> Mapping[str, Any]:
        return self.scale("screens")

    @property
    def opacity(self) -> Mapping[str, Any]:
        return self.scale("opacity")

    @property
    def colors(self) -> Mapping[str, Any]:
        return self.scale("colors")
