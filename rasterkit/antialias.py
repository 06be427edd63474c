"""Anti-aliased line drawing with intensity-weighted pixels."""

from __future__ import annotations

from .raster import draw_line
from .tga import TGAColor, TGAImage

_INTENSITY = 255


def sign(a: int) -> int:
    """Return 1, -1 or 0 according to the sign of a."""
    return (a > 0) - (a < 0)


def line_bresenham_mod(image: TGAImage, x1: int, y1: int, x2: int, y2: int,
                       color: TGAColor) -> None:
    """Bresenham line with an intensity-based error term and shaded pixels."""
    if (x1 - x2) * (y1 - y2) == 0:
        draw_line(image, x1, y1, x2, y2, color)
        return
    x, y = float(x1), float(y1)
    px, py = abs(x2 - x1), abs(y2 - y1)
    step_x, step_y = sign(x2 - x1), sign(y2 - y1)
    t = float(_INTENSITY * py // px)
    error = float(_INTENSITY // 2)
    error_max = _INTENSITY - t
    shade = color * (t / 2)
    x_major = px > py
    image.set(int(x), int(y), shade)
    for _ in range(px if x_major else py):
        if error >= error_max:
            if x_major:
                y += step_y
            else:
                x += step_x
            error -= error_max
        else:
            error += t
        if x_major:
            x += step_x
        else:
            y += step_y
        image.set(int(x), int(y), shade)


def line_wu(image: TGAImage, x1: int, y1: int, x2: int, y2: int,
            color: TGAColor) -> None:
    """Xiaolin Wu style line: each step shades two neighbouring pixels."""
    if x1 == x2 or y1 == y2:
        draw_line(image, x1, y1, x2, y2, color)
        return
    dx, dy = abs(x2 - x1), abs(y2 - y1)
    step_x, step_y = sign(x2 - x1), sign(y2 - y1)
    longest = max(dx, dy)
    if dx > dy:
        x, y = x1, float(y1)
        slope = dy / longest * step_y
        while x != x2:
            upper = abs(int(y) - y)
            image.set(x, int(y), color * upper)
            image.set(x, int(y - 1), color * (1 - upper))
            x += step_x
            y += slope
    else:
        x, y = float(x1), y1
        slope = dx / longest * step_x
        while y != y2:
            right = abs(int(x) - x)
            image.set(int(x), y, color * right)
            image.set(int(x - 1), y, color * (1 - right))
            x += slope
            y += step_y