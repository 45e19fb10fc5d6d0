#!/usr/bin/env python3
"""
Color handling for pie chart cells: painting a single symbol in a color
token, and generating palettes for data that arrives without colors.
"""

from functools import lru_cache
from typing import Any, List, Optional, Tuple

from rich.color import Color, ColorParseError, ColorSystem
from rich.console import Console
from rich.style import Style

_warnings = Console(stderr=True)
_reported = set()


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    """Convert RGB tuple to a #rrggbb string."""
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def _warn_invalid(color: Any, reason: str):
    key = repr(color)
    if key in _reported:
        return
    _reported.add(key)
    _warnings.print(f"Warning: invalid color {key} ({reason}), drawing uncolored",
                    style="yellow", markup=False, highlight=False)


def parse_color(color: Any) -> Optional[Color]:
    """Turn a color token into a rich Color.

    Accepts rich color names, "#rrggbb", "rgb(r,g,b)", 0-255 integers
    (or digit strings), and (r, g, b) tuples. Returns None for an empty
    token or one that cannot be parsed.
    """
    if color is None or (isinstance(color, str) and color == ""):
        return None
    if isinstance(color, list):
        color = tuple(color)
    if not isinstance(color, (str, int, tuple)):
        _warn_invalid(color, f"unsupported token type {type(color).__name__}")
        return None
    try:
        hash(color)
    except TypeError as e:
        _warn_invalid(color, str(e))
        return None
    return _parse_color(color)


@lru_cache(maxsize=256)
def _parse_color(color: Any) -> Optional[Color]:
    try:
        if isinstance(color, tuple) and len(color) == 3:
            r, g, b = (int(c) for c in color)
            return Color.from_rgb(r, g, b)
        if isinstance(color, int) or (isinstance(color, str) and color.strip().isdigit()):
            code = int(color)
            if 0 <= code <= 255:
                return Color.from_ansi(code)
            raise ColorParseError(f"color code must be 0-255, got {code}")
        return Color.parse(str(color))
    except (ColorParseError, ValueError, TypeError) as e:
        _warn_invalid(color, str(e))
        return None


def paint(symbol: str, color: Any) -> str:
    """Render one symbol in the given color as a true-color ANSI string."""
    parsed = parse_color(color)
    if parsed is None:
        return symbol
    return Style(color=parsed).render(symbol, color_system=ColorSystem.TRUECOLOR)


def generate_colors(n: int, scheme: str = "distinct") -> List[str]:
    """Generate n color tokens for slices that were given no color."""
    if n <= 0:
        return []

    if scheme == "distinct":
        # Distinct colors that work well together
        palette = [
            (26, 188, 156),   # Turquoise
            (52, 152, 219),   # Blue
            (155, 89, 182),   # Purple
            (231, 76, 60),    # Red
            (230, 126, 34),   # Orange
            (241, 196, 15),   # Yellow
            (46, 204, 113),   # Green
            (149, 165, 166),  # Gray
            (52, 73, 94),     # Dark blue
            (192, 57, 43),    # Dark red
        ]
        return [rgb_to_hex(palette[i % len(palette)]) for i in range(n)]

    elif scheme == "gradient":
        # Rainbow gradient
        colors = []
        for i in range(n):
            r, g, b = hsv_to_rgb(i / n, 1.0, 1.0)
            colors.append(rgb_to_hex((int(r * 255), int(g * 255), int(b * 255))))
        return colors

    elif scheme == "pastel":
        colors = []
        for i in range(n):
            r, g, b = hsv_to_rgb(i / n, 0.5, 0.95)
            colors.append(rgb_to_hex((int(r * 255), int(g * 255), int(b * 255))))
        return colors

    else:
        return generate_colors(n, "distinct")


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to RGB color space."""
    i = int(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    i = i % 6
    if i == 0:
        return v, t, p
    elif i == 1:
        return q, v, p
    elif i == 2:
        return p, v, t
    elif i == 3:
        return p, q, v
    elif i == 4:
        return t, p, v
    else:
        return v, p, q
