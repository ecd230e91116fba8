"""Colour helpers: hex parsing, RGB blending, RGB <-> HSL. No engine imports.

Every function that takes a hex string fails closed: an unparseable colour
comes back unchanged instead of raising.
"""

from __future__ import annotations

import math
import re

_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


def parse_hex(color: str) -> tuple[int, int, int] | None:
    """Parse ``#rrggbb`` (leading ``#`` optional) to (r, g, b)."""
    if not color:
        return None
    m = _HEX_RE.match(color.strip())
    if not m:
        return None
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Lower-case ``#rrggbb``. Channels are clamped to 0-255."""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def is_hex_color(color: str) -> bool:
    return parse_hex(color) is not None and color.startswith("#")


def blend(color1: str, color2: str, factor: float) -> str:
    """Linear RGB interpolation from color1 (factor 0) to color2 (factor 1)."""
    rgb1 = parse_hex(color1)
    rgb2 = parse_hex(color2)
    if rgb1 is None or rgb2 is None:
        return color1
    mixed = [
        _round_half_up(c1 * (1 - factor) + c2 * factor)
        for c1, c2 in zip(rgb1, rgb2)
    ]
    return rgb_to_hex(*mixed)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """(r, g, b) in 0-255 to (h, s, l) each in [0, 1]."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2
    if hi == lo:
        return (0.0, 0.0, lightness)

    d = hi - lo
    sat = d / (2 - hi - lo) if lightness > 0.5 else d / (hi + lo)
    if hi == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    return (hue / 6, sat, lightness)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[float, float, float]:
    """(h, s, l) in [0, 1] to unrounded (r, g, b) in 0-255."""
    if s == 0:
        v = lightness * 255
        return (v, v, v)
    q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
    p = 2 * lightness - q
    return (
        _hue_to_channel(p, q, h + 1 / 3) * 255,
        _hue_to_channel(p, q, h) * 255,
        _hue_to_channel(p, q, h - 1 / 3) * 255,
    )


def adjust_saturation(color: str, factor: float) -> str:
    """Scale HSL saturation by ``factor``, clamped to [0, 1]."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    h, s, lightness = rgb_to_hsl(*rgb)
    s = min(1.0, max(0.0, s * factor))
    return rgb_to_hex(*(_round_half_up(c) for c in hsl_to_rgb(h, s, lightness)))


def adjust_hsl(color: str, hue_shift: float, saturation_shift: float, lightness_shift: float) -> str:
    """Shift hue (degrees), saturation and lightness (fractions) of a hex colour."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    h, s, lightness = rgb_to_hsl(*rgb)
    h = (h + hue_shift / 360.0) % 1.0
    s = min(1.0, max(0.0, s + saturation_shift))
    lightness = min(1.0, max(0.0, lightness + lightness_shift))
    return rgb_to_hex(*(_round_half_up(c) for c in hsl_to_rgb(h, s, lightness)))


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; palette blends round .5 upwards.
    return math.floor(value + 0.5)
