"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def format_number(value: float, precision: int = 3) -> str:
    """Compact decimal for SVG output: 12.500 -> "12.5", 3.0 -> "3"."""
    text = f"{float(value):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def regular_polygon(
    cx: float, cy: float, radius: float, sides: int, closed: bool = True
) -> NDArray[np.float64]:
    """Vertices of a regular polygon starting at angle 0.

    With ``closed`` the first vertex is repeated at the end (sides + 1 rows).
    """
    count = sides + 1 if closed else sides
    angles = np.arange(count) * 2 * np.pi / sides
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def polyline_path(points: NDArray[np.float64] | list[tuple[float, float]]) -> str:
    """``M x y L x y ...`` path data through the given points."""
    pts = np.asarray(points, dtype=np.float64)
    if len(pts) == 0:
        return ""
    parts = [f"M {format_number(pts[0, 0])} {format_number(pts[0, 1])}"]
    for x, y in pts[1:]:
        parts.append(f"L {format_number(x)} {format_number(y)}")
    return " ".join(parts)

