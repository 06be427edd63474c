"""Line, circle and triangle rasterisation onto TGA images."""

from __future__ import annotations

import math
from typing import Sequence, Union

from .geometry import Vec2
from .tga import TGAColor, TGAImage

_PI = 3.1415
_QUADRANTS = ((1, 1), (-1, 1), (-1, -1), (1, -1))

Point = Union[Vec2, Sequence[int]]


def _round(value: float) -> int:
    """Round half away from zero."""
    magnitude = int(math.floor(abs(value) + 0.5))
    return magnitude if value >= 0 else -magnitude


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _as_vec(point: Point) -> Vec2:
    if isinstance(point, Vec2):
        return point
    x, y = point
    return Vec2(int(x), int(y))


def draw_line_bresenham(image: TGAImage, x1: int, y1: int, x2: int, y2: int,
                        color: TGAColor) -> None:
    """Integer Bresenham line including both endpoints."""
    delta_x = abs(x2 - x1)
    delta_y = abs(y2 - y1)
    sign_x = 1 if x1 < x2 else -1
    sign_y = 1 if y1 < y2 else -1
    error = delta_x - delta_y
    image.set(x2, y2, color)
    while x1 != x2 or y1 != y2:
        image.set(x1, y1, color)
        doubled = error * 2
        if doubled > -delta_y:
            error -= delta_y
            x1 += sign_x
        if doubled < delta_x:
            error += delta_x
            y1 += sign_y


def draw_line_dda(image: TGAImage, x1: int, y1: int, x2: int, y2: int,
                  color: TGAColor) -> None:
    """DDA line whose per-step increments are truncated to integers."""
    length = max(abs(x2 - x1), abs(y2 - y1))
    if length == 0:
        image.set(x1, y1, color)
        return
    step_x = _trunc_div(x2 - x1, length)
    step_y = _trunc_div(y2 - y1, length)
    x, y = float(x1), float(y1)
    for _ in range(length + 1):
        image.set(_round(x), _round(y), color)
        x += step_x
        y += step_y


def circle_bresenham(image: TGAImage, x0: int, y0: int, radius: int,
                     color: TGAColor) -> None:
    """Bresenham circle drawn four quadrants at a time."""
    x = 0
    y = radius
    delta = 1 - 2 * radius
    while y >= 0:
        for sx, sy in _QUADRANTS:
            image.set(x0 + sx * x, y0 + sy * y, color)
        error = 2 * (delta + y) - 1
        if delta < 0 and error <= 0:
            x += 1
            delta += 2 * x + 1
            continue
        if delta > 0 and error > 0:
            y -= 1
            delta -= 2 * y + 1
            continue
        x += 1
        y -= 1
        delta += 2 * (x - y)


def circle_arg(image: TGAImage, x0: int, y0: int, radius: int,
               color: TGAColor) -> None:
    """Polygonal circle through points at angles 1..360 taken as radians."""
    x2, y2 = x0 + radius, y0
    for angle in range(1, 361):
        x1, y1 = x2, y2
        x2 = _round(radius * math.cos(angle)) + x0
        y2 = _round(radius * math.sin(angle)) + y0
        draw_line_dda(image, x1, y1, x2, y2, color)


def draw_line(image: TGAImage, x0: int, y0: int, x1: int, y1: int,
              color: TGAColor) -> None:
    """Line drawn along its major axis with a floating-point error term."""
    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0
    dx = x1 - x0
    dy = y1 - y0
    derror = abs(dy / dx) if dx else 0.0
    error = 0.0
    y = y0
    step = 1 if y1 > y0 else -1
    for x in range(x0, x1 + 1):
        if steep:
            image.set(y, x, color)
        else:
            image.set(x, y, color)
        error += derror
        if error > 0.5:
            y += step
            error -= 1.0


def draw_line_dda_step(image: TGAImage, x1: int, y1: int, x2: int, y2: int,
                       color: TGAColor) -> None:
    """Fractional DDA line; the final endpoint is not drawn."""
    dx = float(x2 - x1)
    dy = float(y2 - y1)
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return
    increment = 1 / steps
    x, y = float(x1), float(y1)
    for _ in range(int(steps)):
        image.set(int(x + 0.5), int(y + 0.5), color)
        x += dx * increment
        y += dy * increment


def circle_dda(image: TGAImage, x0: int, y0: int, radius: int,
               color: TGAColor) -> None:
    """Incremental circle drawn one octant at a time and mirrored eight ways."""
    y = float(radius)
    stop = radius / math.sqrt(2.0) + 1
    x = 0
    while x < stop:
        for px, py in ((x, y), (y, x)):
            for sx, sy in _QUADRANTS:
                image.set(int(x0 + sx * px + 0.5), int(y0 + sy * py + 0.5), color)
        remaining = radius * radius - x * x
        if remaining <= 0:
            break
        y -= x / math.sqrt(remaining)
        x += 1


def circle_parametric(image: TGAImage, x0: int, y0: int, radius: int,
                      color: TGAColor) -> None:
    """Circle of short chords between points one degree apart."""
    x, y = radius, 0
    for degree in range(1, 45):
        prev_x, prev_y = x, y
        angle = degree / 180.0 * _PI
        x = int(radius * math.cos(angle))
        y = int(radius * math.sin(angle))
        for sx, sy in _QUADRANTS:
            draw_line(image, x0 + sx * x, y0 + sy * y,
                      x0 + sx * prev_x, y0 + sy * prev_y, color)
        for sx, sy in _QUADRANTS:
            draw_line(image, x0 + sx * y, y0 + sy * x,
                      x0 + sx * prev_y, y0 + sy * prev_x, color)


def line(image: TGAImage, p0: Point, p1: Point, color: TGAColor) -> None:
    """Line between two points by linear interpolation along the major axis."""
    a, b = _as_vec(p0), _as_vec(p1)
    x0, y0, x1, y1 = a.x, a.y, b.x, b.y
    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0
    for x in range(x0, x1 + 1):
        t = (x - x0) / (x1 - x0) if x1 != x0 else 0.0
        y = int(y0 * (1.0 - t) + y1 * t)
        if steep:
            image.set(y, x, color)
        else:
            image.set(x, y, color)


def triangle(image: TGAImage, t0: Point, t1: Point, t2: Point,
             color: TGAColor) -> None:
    """Fill a triangle scanline by scanline; the topmost row is left out."""
    t0, t1, t2 = _as_vec(t0), _as_vec(t1), _as_vec(t2)
    if t0.y == t1.y and t0.y == t2.y:
        return
    if t0.y > t1.y:
        t0, t1 = t1, t0
    if t0.y > t2.y:
        t0, t2 = t2, t0
    if t1.y > t2.y:
        t1, t2 = t2, t1
    total_height = t2.y - t0.y
    lower_height = t1.y - t0.y
    for i in range(total_height):
        second_half = i > lower_height or t1.y == t0.y
        segment_height = t2.y - t1.y if second_half else lower_height
        alpha = i / total_height
        beta = (i - (lower_height if second_half else 0)) / segment_height
        a = t0 + (t2 - t0) * alpha
        b = t1 + (t2 - t1) * beta if second_half else t0 + (t1 - t0) * beta
        if a.x > b.x:
            a, b = b, a
        for j in range(a.x, b.x + 1):
            image.set(j, t0.y + i, color)