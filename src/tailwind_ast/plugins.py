"""Plugin tables for utility classes.

Named plugins map a complete class (``block``, ``text-center``) to a fixed
property value. Functional plugins are registered under a root (``mt``,
``bg``) and take a value; several functional plugins may share a root and are
told apart by the kind of value they accept.

Tables are built once and are immutable; they are passed to the parser
explicitly through a PluginRegistry.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .schema import FunctionalPlugin, NamedPlugin

NamedTable = Mapping[str, NamedPlugin]
FunctionalTable = Mapping[str, Tuple[FunctionalPlugin, ...]]


def _named(ns: str, css: Sequence[str], values: Mapping[str, str]) -> Dict[str, NamedPlugin]:
    return {
        token: NamedPlugin(ns=ns, value=value, class_=list(css))
        for token, value in values.items()
    }


def _functional(scale_key: str, ns: str, css: Sequence[str], kind: str) -> FunctionalPlugin:
    return FunctionalPlugin(scale_key=scale_key, ns=ns, class_=list(css), type=kind)


def _build_named_plugins() -> Dict[str, NamedPlugin]:
    table: Dict[str, NamedPlugin] = {}
    table.update(_named("container", ["width"], {"container": "100%"}))
    table.update(_named("display", ["display"], {
        "block": "block", "inline-block": "inline-block", "inline": "inline",
        "flex": "flex", "inline-flex": "inline-flex", "grid": "grid",
        "inline-grid": "inline-grid", "table": "table", "contents": "contents",
        "flow-root": "flow-root", "list-item": "list-item", "hidden": "none",
    }))
    table.update(_named("position", ["position"], {
        "static": "static", "fixed": "fixed", "absolute": "absolute",
        "relative": "relative", "sticky": "sticky",
    }))
    table.update(_named("visibility", ["visibility"], {
        "visible": "visible", "invisible": "hidden", "collapse": "collapse",
    }))
    table.update(_named("textAlign", ["text-align"], {
        "text-left": "left", "text-center": "center", "text-right": "right",
        "text-justify": "justify", "text-start": "start", "text-end": "end",
    }))
    table.update(_named("fontStyle", ["font-style"], {
        "italic": "italic", "not-italic": "normal",
    }))
    table.update(_named("textTransform", ["text-transform"], {
        "uppercase": "uppercase", "lowercase": "lowercase", "capitalize": "capitalize",
        "normal-case": "none",
    }))
    table.update(_named("textDecoration", ["text-decoration-line"], {
        "underline": "underline", "overline": "overline", "line-through": "line-through",
        "no-underline": "none",
    }))
    table.update(_named("flexDirection", ["flex-direction"], {
        "flex-row": "row", "flex-row-reverse": "row-reverse", "flex-col": "column",
        "flex-col-reverse": "column-reverse",
    }))
    table.update(_named("flexWrap", ["flex-wrap"], {
        "flex-wrap": "wrap", "flex-wrap-reverse": "wrap-reverse", "flex-nowrap": "nowrap",
    }))
    table.update(_named("alignItems", ["align-items"], {
        "items-start": "flex-start", "items-end": "flex-end", "items-center": "center",
        "items-baseline": "baseline", "items-stretch": "stretch",
    }))
    table.update(_named("justifyContent", ["justify-content"], {
        "justify-normal": "normal", "justify-start": "flex-start", "justify-end": "flex-end",
        "justify-center": "center", "justify-between": "space-between",
        "justify-around": "space-around", "justify-evenly": "space-evenly",
    }))
    table.update(_named("overflow", ["overflow"], {
        "overflow-auto": "auto", "overflow-hidden": "hidden", "overflow-clip": "clip",
        "overflow-visible": "visible", "overflow-scroll": "scroll",
    }))
    table.update(_named("borderStyle", ["border-style"], {
        "border-solid": "solid", "border-dashed": "dashed", "border-dotted": "dotted",
        "border-double": "double", "border-hidden": "hidden", "border-none": "none",
    }))
    table.update(_named("cursor", ["cursor"], {
        "cursor-auto": "auto", "cursor-default": "default", "cursor-pointer": "pointer",
        "cursor-wait": "wait", "cursor-text": "text", "cursor-move": "move",
        "cursor-not-allowed": "not-allowed",
    }))
    return table


_SIDES = {
    "": [""], "x": ["-left", "-right"], "y": ["-top", "-bottom"], "t": ["-top"],
    "r": ["-right"], "b": ["-bottom"], "l": ["-left"], "s": ["-inline-start"],
    "e": ["-inline-end"],
}
_SIDE_NAMES = {"": "", "x": "X", "y": "Y", "t": "Top", "r": "Right", "b": "Bottom",
               "l": "Left", "s": "Start", "e": "End"}


def _build_functional_plugins() -> Dict[str, List[FunctionalPlugin]]:
    table: Dict[str, List[FunctionalPlugin]] = {}

    def add(root: str, *plugins: FunctionalPlugin) -> None:
        table.setdefault(root, []).extend(plugins)

    for side, suffixes in _SIDES.items():
        add(f"m{side}", _functional("margin", f"margin{_SIDE_NAMES[side]}",
                                    [f"margin{suffix}" for suffix in suffixes], "length"))
        add(f"p{side}", _functional("padding", f"padding{_SIDE_NAMES[side]}",
                                    [f"padding{suffix}" for suffix in suffixes], "length"))

    add("inset", _functional("inset", "inset", ["inset"], "length"))
    add("inset-x", _functional("inset", "insetX", ["left", "right"], "length"))
    add("inset-y", _functional("inset", "insetY", ["top", "bottom"], "length"))
    for side in ("top", "right", "bottom", "left"):
        add(side, _functional("inset", side, [side], "length"))

    add("w", _functional("width", "width", ["width"], "length"))
    add("h", _functional("height", "height", ["height"], "length"))
    add("min-w", _functional("minWidth", "minWidth", ["min-width"], "length"))
    add("max-w", _functional("maxWidth", "maxWidth", ["max-width"], "length"))
    add("min-h", _functional("minHeight", "minHeight", ["min-height"], "length"))
    add("max-h", _functional("maxHeight", "maxHeight", ["max-height"], "length"))
    add("gap", _functional("gap", "gap", ["gap"], "length"))
    add("gap-x", _functional("gap", "columnGap", ["column-gap"], "length"))
    add("gap-y", _functional("gap", "rowGap", ["row-gap"], "length"))
    add("basis", _functional("flexBasis", "flexBasis", ["flex-basis"], "length"))
    add("grow", _functional("flexGrow", "flexGrow", ["flex-grow"], "number"))
    add("shrink", _functional("flexShrink", "flexShrink", ["flex-shrink"], "number"))
    add("order", _functional("order", "order", ["order"], "integer"))
    add("z", _functional("zIndex", "zIndex", ["z-index"], "integer"))
    add("opacity", _functional("opacity", "opacity", ["opacity"], "number"))

    add("text",
        _functional("textColor", "textColor", ["color"], "color"),
        _functional("fontSize", "fontSize", ["font-size"], "length"))
    add("font",
        _functional("fontWeight", "fontWeight", ["font-weight"], "number"),
        _functional("fontFamily", "fontFamily", ["font-family"], "family-name"))
    add("leading", _functional("lineHeight", "lineHeight", ["line-height"], "length"))
    add("tracking", _functional("letterSpacing", "letterSpacing", ["letter-spacing"], "length"))
    add("decoration",
        _functional("textDecorationColor", "textDecorationColor",
                    ["text-decoration-color"], "color"),
        _functional("textDecorationThickness", "textDecorationThickness",
                    ["text-decoration-thickness"], "length"))

    add("bg",
        _functional("backgroundColor", "backgroundColor", ["background-color"], "color"),
        _functional("backgroundImage", "backgroundImage", ["background-image"], "image"),
        _functional("backgroundSize", "backgroundSize", ["background-size"], "bg-size"),
        _functional("backgroundPosition", "backgroundPosition",
                    ["background-position"], "position"))
    add("from", _functional("gradientColorStops", "gradientColorStops",
                            ["--tw-gradient-from"], "color"))
    add("via", _functional("gradientColorStops", "gradientColorStops",
                           ["--tw-gradient-via"], "color"))
    add("to", _functional("gradientColorStops", "gradientColorStops",
                          ["--tw-gradient-to"], "color"))

    add("border",
        _functional("borderWidth", "borderWidth", ["border-width"], "line-width"),
        _functional("borderColor", "borderColor", ["border-color"], "color"))
    for side, suffixes in _SIDES.items():
        if not side:
            continue
        add(f"border-{side}",
            _functional("borderWidth", f"borderWidth{_SIDE_NAMES[side]}",
                        [f"border{suffix}-width" for suffix in suffixes], "line-width"),
            _functional("borderColor", f"borderColor{_SIDE_NAMES[side]}",
                        [f"border{suffix}-color" for suffix in suffixes], "color"))

    add("rounded", _functional("borderRadius", "borderRadius", ["border-radius"], "length"))
    for side, corners in (("t", ["top-left", "top-right"]), ("r", ["top-right", "bottom-right"]),
                          ("b", ["bottom-right", "bottom-left"]), ("l", ["top-left", "bottom-left"])):
        add(f"rounded-{side}",
            _functional("borderRadius", f"borderRadius{_SIDE_NAMES[side]}",
                        [f"border-{corner}-radius" for corner in corners], "length"))

    add("outline",
        _functional("outlineWidth", "outlineWidth", ["outline-width"], "length"),
        _functional("outlineColor", "outlineColor", ["outline-color"], "color"))
    add("accent", _functional("accentColor", "accentColor", ["accent-color"], "color"))
    add("caret", _functional("caretColor", "caretColor", ["caret-color"], "color"))
    add("fill", _functional("fill", "fill", ["fill"], "color"))
    add("stroke",
        _functional("stroke", "stroke", ["stroke"], "color"),
        _functional("strokeWidth", "strokeWidth", ["stroke-width"], "number"))

    add("translate-x", _functional("translate", "translateX", ["--tw-translate-x"], "length"))
    add("translate-y", _functional("translate", "translateY", ["--tw-translate-y"], "length"))
    add("rotate", _functional("rotate", "rotate", ["--tw-rotate"], "angle"))
    add("scale", _functional("scale", "scale", ["--tw-scale-x", "--tw-scale-y"], "number"))
    add("duration", _functional("transitionDuration", "transitionDuration",
                                ["transition-duration"], "any"))
    return table


class PluginRegistry:
    """Immutable pair of named and functional plugin tables."""

    def __init__(self, named: Mapping[str, NamedPlugin],
                 functional: Mapping[str, Iterable[FunctionalPlugin]]):
        self.named: NamedTable = MappingProxyType(dict(named))
        self.functional: FunctionalTable = MappingProxyType(
            {root: tuple(plugins) for root, plugins in functional.items()}
        )

    @classmethod
    def default(cls) -> "PluginRegistry":
        """Registry with the built-in core plugins."""
        return DEFAULT_REGISTRY

    def get_named(self, token: str) -> Optional[NamedPlugin]:
        return self.named.get(token)

    def get_functional(self, root: str) -> Tuple[FunctionalPlugin, ...]:
        return self.functional.get(root, ())

    def find_root(self, base: str) -> Tuple[str, Optional[str]]:
        return find_root(base, self.functional)

    def known_tokens(self) -> List[str]:
        """Named classes and functional roots, for suggestions."""
        return sorted(set(self.named) | set(self.functional))


def find_root(base: str, functional: Mapping[str, object]) -> Tuple[str, Optional[str]]:
    """Split ``base`` into the longest registered root and its value.

    Candidate roots end at a hyphen, tried from the rightmost hyphen leftwards
    so that the longest registered root wins (``border-t-2`` resolves to
    ``border-t`` rather than ``border``).

    Returns:
        ``(root, value)``; ``value`` is None when ``base`` is a bare root and
        ``("", None)`` is returned when no root matches
    """
    if base in functional:
        return base, None

    idx = base.rfind('-')
    while idx > 0:
        candidate = base[:idx]
        if candidate in functional:
            return candidate, base[idx + 1:]
        idx = base.rfind('-', 0, idx)

    return "", None


DEFAULT_REGISTRY = PluginRegistry(_build_named_plugins(), _build_functional_plugins())
