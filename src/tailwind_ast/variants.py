"""Variant parsing.

Turns the ``:``-separated prefixes of a utility class (``hover``, ``md``,
``group-focus``, ``[&:nth-child(3)]``) into Variant models. Unknown variants
come back as None and are dropped by the caller.
"""

import logging
import re
from typing import Any, Mapping, Optional

from .schema import Variant, VariantKind
from .utils.value import decode_arbitrary_value

logger = logging.getLogger(__name__)

PSEUDO_CLASSES = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "only-of-type": ":only-of-type",
    "empty": ":empty",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "default": ":default",
    "required": ":required",
    "valid": ":valid",
    "invalid": ":invalid",
    "in-range": ":in-range",
    "out-of-range": ":out-of-range",
    "placeholder-shown": ":placeholder-shown",
    "autofill": ":autofill",
    "read-only": ":read-only",
    "open": "[open]",
}

PSEUDO_ELEMENTS = {
    "before": "::before",
    "after": "::after",
    "first-letter": "::first-letter",
    "first-line": "::first-line",
    "marker": "::marker",
    "selection": "::selection",
    "file": "::file-selector-button",
    "backdrop": "::backdrop",
    "placeholder": "::placeholder",
}

MEDIA_FEATURES = {
    "motion-safe": "(prefers-reduced-motion: no-preference)",
    "motion-reduce": "(prefers-reduced-motion: reduce)",
    "contrast-more": "(prefers-contrast: more)",
    "contrast-less": "(prefers-contrast: less)",
    "portrait": "(orientation: portrait)",
    "landscape": "(orientation: landscape)",
    "print": "print",
}

_ARBITRARY = re.compile(r'^\[(.+)\]$')


def _screen_query(screen: Any) -> Optional[str]:
    # "768px" | {"min": ..} | {"max": ..} | {"min": .., "max": ..} | {"raw": ..}
    if isinstance(screen, str):
        return f"(min-width: {screen})"
    if isinstance(screen, Mapping):
        if "raw" in screen:
            return str(screen["raw"])
        conditions = []
        if "min" in screen:
            conditions.append(f"(min-width: {screen['min']})")
        if "max" in screen:
            conditions.append(f"(max-width: {screen['max']})")
        if conditions:
            return " and ".join(conditions)
    return None


def _parse_state(name: str) -> Optional[str]:
    """Selector for a state usable after ``group-``/``peer-``."""
    if name in PSEUDO_CLASSES:
        return PSEUDO_CLASSES[name]
    arbitrary = _ARBITRARY.match(name)
    if arbitrary:
        return decode_arbitrary_value(arbitrary.group(1))
    return None


def parse_variant(variant: str, screens: Mapping[str, Any]) -> Optional[Variant]:
    """Parse one variant string.

    Args:
        variant: Variant text, e.g. ``hover`` or ``max-md``
        screens: Breakpoints table of the resolved theme

    Returns:
        Variant, or None when the variant is not recognized
    """
    if not variant:
        return None

    if variant in PSEUDO_CLASSES:
        return Variant(kind=VariantKind.PSEUDO_CLASS, name=variant, value=PSEUDO_CLASSES[variant])

    if variant in PSEUDO_ELEMENTS:
        return Variant(kind=VariantKind.PSEUDO_ELEMENT, name=variant, value=PSEUDO_ELEMENTS[variant])

    if variant == "dark":
        return Variant(kind=VariantKind.DARK, name=variant, value="(prefers-color-scheme: dark)")

    if variant in MEDIA_FEATURES:
        return Variant(kind=VariantKind.MEDIA, name=variant, value=MEDIA_FEATURES[variant])

    if variant in screens:
        query = _screen_query(screens[variant])
        if query is not None:
            return Variant(kind=VariantKind.MEDIA, name=variant, value=query)

    if variant.startswith("max-") and variant[4:] in screens:
        screen = screens[variant[4:]]
        if isinstance(screen, str):
            return Variant(kind=VariantKind.MEDIA, name=variant,
                           value=f"not all and (min-width: {screen})")

    for prefix, feature in (("min-", "min-width"), ("max-", "max-width")):
        if variant.startswith(prefix):
            arbitrary = _ARBITRARY.match(variant[len(prefix):])
            if arbitrary:
                return Variant(kind=VariantKind.MEDIA, name=variant,
                               value=f"({feature}: {arbitrary.group(1)})")

    for prefix, kind in (("group-", VariantKind.GROUP), ("peer-", VariantKind.PEER)):
        if variant.startswith(prefix):
            selector = _parse_state(variant[len(prefix):])
            if selector is not None:
                return Variant(kind=kind, name=variant, value=selector)

    if variant.startswith("aria-"):
        name = variant[5:]
        arbitrary = _ARBITRARY.match(name)
        attribute = arbitrary.group(1) if arbitrary else f'{name}="true"'
        return Variant(kind=VariantKind.ATTRIBUTE, name=variant, value=f"[aria-{attribute}]")

    if variant.startswith("data-"):
        arbitrary = _ARBITRARY.match(variant[5:])
        if arbitrary:
            return Variant(kind=VariantKind.ATTRIBUTE, name=variant,
                           value=f"[data-{arbitrary.group(1)}]")

    if variant.startswith("supports-"):
        arbitrary = _ARBITRARY.match(variant[9:])
        if arbitrary:
            condition = decode_arbitrary_value(arbitrary.group(1))
            if ':' not in condition and '(' not in condition:
                condition = f"{condition}: var(--tw)"
            return Variant(kind=VariantKind.SUPPORTS, name=variant, value=f"({condition})")

    arbitrary = _ARBITRARY.match(variant)
    if arbitrary:
        selector = decode_arbitrary_value(arbitrary.group(1))
        kind = VariantKind.MEDIA if selector.startswith('@media') else VariantKind.ARBITRARY
        return Variant(kind=kind, name=variant, value=selector)

    logger.debug(f"Unrecognized variant: {variant}")
    return None
