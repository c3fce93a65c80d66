"""An SVG rendering of the 3-D surface sin(r)/r."""

from __future__ import annotations

import math
import sys

from .tempconv import _format_g

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4
ANGLE = math.pi / 6

SIN30, COS30 = math.sin(ANGLE), math.cos(ANGLE)


def f(x: float, y: float) -> float:
    """Return the surface height at ``(x, y)``; NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell ``(i, j)`` onto the SVG canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def svg() -> str:
    """Return the whole SVG document."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            corners = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
            points = " ".join(f"{_format_g(sx)},{_format_g(sy)}" for sx, sy in corners)
            parts.append(f"<polygon points='{points}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Write the SVG document to standard output."""
    sys.stdout.write(svg())
    return 0