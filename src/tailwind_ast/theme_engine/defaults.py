"""Built-in default theme.

Values follow the framework's default configuration. Scales whose value is a
callable are derived from other scales; the callable receives a ``theme``
accessor and is evaluated after user overrides have been merged, so that
e.g. overriding ``colors`` also changes ``backgroundColor``.
"""

from typing import Any, Callable, Dict


def _palette(hexes: str) -> Dict[str, str]:
    shades = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
    return {shade: f"#{value}" for shade, value in zip(shades, hexes.split())}


def _spacing() -> Dict[str, str]:
    steps = [0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16, 20,
             24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96]
    scale = {"px": "1px", "0": "0px"}
    for step in steps:
        key = f"{step:g}"
        scale[key] = f"{step * 0.25:g}rem"
    return scale


def _fractions(*denominators: int) -> Dict[str, str]:
    result = {}
    for denominator in denominators:
        for numerator in range(1, denominator):
            result[f"{numerator}/{denominator}"] = f"{numerator / denominator * 100:.6g}%"
    return result


def _shade(colors: Dict[str, Any], name: str, shade: str) -> str:
    palette = colors.get(name)
    if isinstance(palette, dict) and isinstance(palette.get(shade), str):
        return palette[shade]
    return "currentColor"


COLORS: Dict[str, Any] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
    "slate": _palette("f8fafc f1f5f9 e2e8f0 cbd5e1 94a3b8 64748b 475569 334155 1e293b 0f172a 020617"),
    "gray": _palette("f9fafb f3f4f6 e5e7eb d1d5db 9ca3af 6b7280 4b5563 374151 1f2937 111827 030712"),
    "zinc": _palette("fafafa f4f4f5 e4e4e7 d4d4d8 a1a1aa 71717a 52525b 3f3f46 27272a 18181b 09090b"),
    "neutral": _palette("fafafa f5f5f5 e5e5e5 d4d4d4 a3a3a3 737373 525252 404040 262626 171717 0a0a0a"),
    "stone": _palette("fafaf9 f5f5f4 e7e5e4 d6d3d1 a8a29e 78716c 57534e 44403c 292524 1c1917 0c0a09"),
    "red": _palette("fef2f2 fee2e2 fecaca fca5a5 f87171 ef4444 dc2626 b91c1c 991b1b 7f1d1d 450a0a"),
    "orange": _palette("fff7ed ffedd5 fed7aa fdba74 fb923c f97316 ea580c c2410c 9a3412 7c2d12 431407"),
    "amber": _palette("fffbeb fef3c7 fde68a fcd34d fbbf24 f59e0b d97706 b45309 92400e 78350f 451a03"),
    "yellow": _palette("fefce8 fef9c3 fef08a fde047 facc15 eab308 ca8a04 a16207 854d0e 713f12 422006"),
    "lime": _palette("f7fee7 ecfccb d9f99d bef264 a3e635 84cc16 65a30d 4d7c0f 3f6212 365314 1a2e05"),
    "green": _palette("f0fdf4 dcfce7 bbf7d0 86efac 4ade80 22c55e 16a34a 15803d 166534 14532d 052e16"),
    "emerald": _palette("ecfdf5 d1fae5 a7f3d0 6ee7b7 34d399 10b981 059669 047857 065f46 064e3b 022c22"),
    "teal": _palette("f0fdfa ccfbf1 99f6e4 5eead4 2dd4bf 14b8a6 0d9488 0f766e 115e59 134e4a 042f2e"),
    "cyan": _palette("ecfeff cffafe a5f3fc 67e8f9 22d3ee 06b6d4 0891b2 0e7490 155e75 164e63 083344"),
    "sky": _palette("f0f9ff e0f2fe bae6fd 7dd3fc 38bdf8 0ea5e9 0284c7 0369a1 075985 0c4a6e 082f49"),
    "blue": _palette("eff6ff dbeafe bfdbfe 93c5fd 60a5fa 3b82f6 2563eb 1d4ed8 1e40af 1e3a8a 172554"),
    "indigo": _palette("eef2ff e0e7ff c7d2fe a5b4fc 818cf8 6366f1 4f46e5 4338ca 3730a3 312e81 1e1b4b"),
    "violet": _palette("f5f3ff ede9fe ddd6fe c4b5fd a78bfa 8b5cf6 7c3aed 6d28d9 5b21b6 4c1d95 2e1065"),
    "purple": _palette("faf5ff f3e8ff e9d5ff d8b4fe c084fc a855f7 9333ea 7e22ce 6b21a8 581c87 3b0764"),
    "fuchsia": _palette("fdf4ff fae8ff f5d0fe f0abfc e879f9 d946ef c026d3 a21caf 86198f 701a75 4a044e"),
    "pink": _palette("fdf2f8 fce7f3 fbcfe8 f9a8d4 f472b6 ec4899 db2777 be185d 9d174d 831843 500724"),
    "rose": _palette("fff1f2 ffe4e6 fecdd3 fda4af fb7185 f43f5e e11d48 be123c 9f1239 881337 4c0519"),
}

ThemeAccessor = Callable[[str], Dict[str, Any]]

DEFAULT_THEME: Dict[str, Any] = {
    "screens": {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
        "2xl": "1536px",
    },
    "colors": COLORS,
    "spacing": _spacing(),
    "opacity": {f"{step}": f"{step / 100:g}" for step in range(0, 101, 5)},

    # Derived from spacing
    "margin": lambda theme: {"auto": "auto", **theme("spacing")},
    "padding": lambda theme: dict(theme("spacing")),
    "gap": lambda theme: dict(theme("spacing")),
    "inset": lambda theme: {
        "auto": "auto", **theme("spacing"), **_fractions(2, 3, 4), "full": "100%",
    },
    "translate": lambda theme: {**theme("spacing"), **_fractions(2, 3, 4), "full": "100%"},
    "flexBasis": lambda theme: {
        "auto": "auto", **theme("spacing"), **_fractions(2, 3, 4, 5, 6, 12), "full": "100%",
    },
    "width": lambda theme: {
        "auto": "auto", **theme("spacing"), **_fractions(2, 3, 4, 5, 6, 12),
        "full": "100%", "screen": "100vw", "min": "min-content", "max": "max-content",
        "fit": "fit-content",
    },
    "height": lambda theme: {
        "auto": "auto", **theme("spacing"), **_fractions(2, 3, 4, 5, 6),
        "full": "100%", "screen": "100vh", "min": "min-content", "max": "max-content",
        "fit": "fit-content",
    },
    "minWidth": {
        "0": "0px", "full": "100%", "min": "min-content", "max": "max-content",
        "fit": "fit-content",
    },
    "maxWidth": lambda theme: {
        "none": "none", "0": "0rem", "xs": "20rem", "sm": "24rem", "md": "28rem",
        "lg": "32rem", "xl": "36rem", "2xl": "42rem", "3xl": "48rem", "4xl": "56rem",
        "5xl": "64rem", "6xl": "72rem", "7xl": "80rem", "full": "100%",
        "min": "min-content", "max": "max-content", "fit": "fit-content", "prose": "65ch",
        **{f"screen-{name}": value for name, value in theme("screens").items()
           if isinstance(value, str)},
    },
    "minHeight": {"0": "0px", "full": "100%", "screen": "100vh", "min": "min-content",
                  "max": "max-content", "fit": "fit-content"},
    "maxHeight": lambda theme: {
        **theme("spacing"), "none": "none", "full": "100%", "screen": "100vh",
        "min": "min-content", "max": "max-content", "fit": "fit-content",
    },

    # Derived from colors
    "backgroundColor": lambda theme: dict(theme("colors")),
    "textColor": lambda theme: dict(theme("colors")),
    "borderColor": lambda theme: {
        **theme("colors"), "DEFAULT": _shade(theme("colors"), "gray", "200"),
    },
    "outlineColor": lambda theme: dict(theme("colors")),
    "textDecorationColor": lambda theme: dict(theme("colors")),
    "gradientColorStops": lambda theme: dict(theme("colors")),
    "accentColor": lambda theme: {**theme("colors"), "auto": "auto"},
    "caretColor": lambda theme: dict(theme("colors")),
    "fill": lambda theme: {"none": "none", **theme("colors")},
    "stroke": lambda theme: {"none": "none", **theme("colors")},

    "fontSize": {
        "xs": ["0.75rem", {"lineHeight": "1rem"}],
        "sm": ["0.875rem", {"lineHeight": "1.25rem"}],
        "base": ["1rem", {"lineHeight": "1.5rem"}],
        "lg": ["1.125rem", {"lineHeight": "1.75rem"}],
        "xl": ["1.25rem", {"lineHeight": "1.75rem"}],
        "2xl": ["1.5rem", {"lineHeight": "2rem"}],
        "3xl": ["1.875rem", {"lineHeight": "2.25rem"}],
        "4xl": ["2.25rem", {"lineHeight": "2.5rem"}],
        "5xl": ["3rem", {"lineHeight": "1"}],
        "6xl": ["3.75rem", {"lineHeight": "1"}],
        "7xl": ["4.5rem", {"lineHeight": "1"}],
        "8xl": ["6rem", {"lineHeight": "1"}],
        "9xl": ["8rem", {"lineHeight": "1"}],
    },
    "fontWeight": {
        "thin": "100", "extralight": "200", "light": "300", "normal": "400",
        "medium": "500", "semibold": "600", "bold": "700", "extrabold": "800",
        "black": "900",
    },
    "fontFamily": {
        "sans": ["ui-sans-serif", "system-ui", "sans-serif"],
        "serif": ["ui-serif", "Georgia", "serif"],
        "mono": ["ui-monospace", "SFMono-Regular", "monospace"],
    },
    "lineHeight": {
        "none": "1", "tight": "1.25", "snug": "1.375", "normal": "1.5",
        "relaxed": "1.625", "loose": "2", "3": ".75rem", "4": "1rem", "5": "1.25rem",
        "6": "1.5rem", "7": "1.75rem", "8": "2rem", "9": "2.25rem", "10": "2.5rem",
    },
    "letterSpacing": {
        "tighter": "-0.05em", "tight": "-0.025em", "normal": "0em", "wide": "0.025em",
        "wider": "0.05em", "widest": "0.1em",
    },
    "borderRadius": {
        "none": "0px", "sm": "0.125rem", "DEFAULT": "0.25rem", "md": "0.375rem",
        "lg": "0.5rem", "xl": "0.75rem", "2xl": "1rem", "3xl": "1.5rem", "full": "9999px",
    },
    "borderWidth": {"DEFAULT": "1px", "0": "0px", "2": "2px", "4": "4px", "8": "8px"},
    "outlineWidth": {"0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px"},
    "textDecorationThickness": {
        "auto": "auto", "from-font": "from-font", "0": "0px", "1": "1px", "2": "2px",
        "4": "4px", "8": "8px",
    },
    "strokeWidth": {"0": "0", "1": "1", "2": "2"},
    "zIndex": {"auto": "auto", "0": "0", "10": "10", "20": "20", "30": "30", "40": "40",
               "50": "50"},
    "order": {"first": "-9999", "last": "9999", "none": "0",
              **{str(step): str(step) for step in range(1, 13)}},
    "flexGrow": {"0": "0", "DEFAULT": "1"},
    "flexShrink": {"0": "0", "DEFAULT": "1"},
    "rotate": {"0": "0deg", "1": "1deg", "2": "2deg", "3": "3deg", "6": "6deg",
               "12": "12deg", "45": "45deg", "90": "90deg", "180": "180deg"},
    "scale": {"0": "0", "50": ".5", "75": ".75", "90": ".9", "95": ".95", "100": "1",
              "105": "1.05", "110": "1.1", "125": "1.25", "150": "1.5"},
    "transitionDuration": {"DEFAULT": "150ms", "0": "0s", "75": "75ms", "100": "100ms",
                           "150": "150ms", "200": "200ms", "300": "300ms", "500": "500ms",
                           "700": "700ms", "1000": "1000ms"},
    "backgroundImage": {
        "none": "none",
        "gradient-to-t": "linear-gradient(to top, var(--tw-gradient-stops))",
        "gradient-to-r": "linear-gradient(to right, var(--tw-gradient-stops))",
        "gradient-to-b": "linear-gradient(to bottom, var(--tw-gradient-stops))",
        "gradient-to-l": "linear-gradient(to left, var(--tw-gradient-stops))",
    },
    "backgroundSize": {"auto": "auto", "cover": "cover", "contain": "contain"},
    "backgroundPosition": {
        "bottom": "bottom", "center": "center", "left": "left", "left-bottom": "left bottom",
        "left-top": "left top", "right": "right", "right-bottom": "right bottom",
        "right-top": "right top", "top": "top",
    },
}
