import math

import pytest

from rasterkit.geometry import Vec2
from rasterkit.raster import (
    circle_arg,
    circle_bresenham,
    circle_dda,
    circle_parametric,
    draw_line,
    draw_line_bresenham,
    draw_line_dda,
    draw_line_dda_step,
    line,
    triangle,
)
from rasterkit.tga import Format, TGAColor, TGAImage

WHITE = TGAColor.from_rgba(255, 255, 255, 255)


def blank(size=40):
    return TGAImage(size, size, Format.RGB)


def lit(image):
    return {
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if any(image.get(x, y).raw[:3])
    }


def test_bresenham_horizontal():
    image = blank()
    draw_line_bresenham(image, 0, 0, 5, 0, WHITE)
    assert lit(image) == {(x, 0) for x in range(6)}


def test_bresenham_diagonal():
    image = blank()
    draw_line_bresenham(image, 5, 5, 0, 0, WHITE)
    assert lit(image) == {(i, i) for i in range(6)}


@pytest.mark.parametrize("x1,y1,x2,y2", [(2, 3, 17, 9), (30, 1, 4, 20), (10, 10, 12, 35)])
def test_bresenham_one_pixel_per_major_step(x1, y1, x2, y2):
    image = blank()
    draw_line_bresenham(image, x1, y1, x2, y2, WHITE)
    pixels = lit(image)
    assert len(pixels) == max(abs(x2 - x1), abs(y2 - y1)) + 1
    assert (x1, y1) in pixels and (x2, y2) in pixels


def test_bresenham_clips_outside():
    image = blank(20)
    draw_line_bresenham(image, -5, -5, 30, 30, WHITE)
    assert lit(image) == {(i, i) for i in range(20)}


def test_dda_truncated_increment_stays_on_row():
    image = blank()
    draw_line_dda(image, 0, 0, 10, 5, WHITE)
    assert lit(image) == {(x, 0) for x in range(11)}


def test_dda_single_point():
    image = blank()
    draw_line_dda(image, 7, 8, 7, 8, WHITE)
    assert lit(image) == {(7, 8)}


def test_draw_line_is_direction_independent():
    forward, backward = blank(), blank()
    draw_line(forward, 3, 4, 25, 13, WHITE)
    draw_line(backward, 25, 13, 3, 4, WHITE)
    assert forward.data == backward.data


@pytest.mark.parametrize("x0,y0,x1,y1", [(1, 2, 30, 11), (5, 3, 9, 33)])
def test_draw_line_covers_major_axis(x0, y0, x1, y1):
    image = blank()
    draw_line(image, x0, y0, x1, y1, WHITE)
    pixels = lit(image)
    assert len(pixels) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    assert (x0, y0) in pixels and (x1, y1) in pixels


def test_draw_line_zero_length():
    image = blank()
    draw_line(image, 4, 4, 4, 4, WHITE)
    assert lit(image) == {(4, 4)}


def test_dda_step_omits_endpoint():
    image = blank()
    draw_line_dda_step(image, 0, 0, 4, 0, WHITE)
    assert lit(image) == {(x, 0) for x in range(4)}


def test_dda_step_zero_length_draws_nothing():
    image = blank()
    draw_line_dda_step(image, 3, 3, 3, 3, WHITE)
    assert lit(image) == set()


def test_circle_bresenham_shape():
    image = blank()
    cx, cy, r = 20, 20, 10
    circle_bresenham(image, cx, cy, r, WHITE)
    pixels = lit(image)
    assert (cx, cy + r) in pixels and (cx, cy - r) in pixels
    assert all(abs(math.hypot(x - cx, y - cy) - r) <= 1 for x, y in pixels)
    assert pixels == {(2 * cx - x, y) for x, y in pixels}
    assert pixels == {(x, 2 * cy - y) for x, y in pixels}


def test_circle_dda_symmetry():
    image = blank()
    cx, cy, r = 20, 20, 10
    circle_dda(image, cx, cy, r, WHITE)
    pixels = lit(image)
    assert (cx, cy + r) in pixels and (cx + r, cy) in pixels
    assert pixels == {(2 * cx - x, y) for x, y in pixels}
    assert pixels == {(cx + (y - cy), cy + (x - cx)) for x, y in pixels}
    assert (cx, cy) not in pixels


def test_circle_parametric_stays_near_radius():
    image = blank(60)
    cx, cy, r = 30, 30, 20
    circle_parametric(image, cx, cy, r, WHITE)
    pixels = lit(image)
    assert (cx + r, cy) in pixels
    assert all(r - 3 <= math.hypot(x - cx, y - cy) <= r + 1 for x, y in pixels)


def test_circle_arg_starts_at_rightmost_point():
    image = blank(60)
    cx, cy, r = 30, 30, 15
    circle_arg(image, cx, cy, r, WHITE)
    pixels = lit(image)
    assert (cx + r, cy) in pixels
    assert (cx, cy) not in pixels
    assert all(math.hypot(x - cx, y - cy) <= r * math.sqrt(2) + 1 for x, y in pixels)


def test_line_accepts_tuples_and_vectors():
    a, b = blank(), blank()
    line(a, (2, 3), (20, 11), WHITE)
    line(b, Vec2(20, 11), Vec2(2, 3), WHITE)
    assert a.data == b.data
    assert {(2, 3), (20, 11)} <= lit(a)


def test_line_vertical():
    image = blank()
    line(image, (5, 2), (5, 9), WHITE)
    assert lit(image) == {(5, y) for y in range(2, 10)}


def test_triangle_fill():
    image = blank()
    triangle(image, Vec2(0, 0), Vec2(10, 0), Vec2(0, 10), WHITE)
    assert lit(image) == {(x, y) for y in range(10) for x in range(11 - y)}


def test_triangle_flat_draws_nothing():
    image = blank()
    triangle(image, (0, 5), (10, 5), (20, 5), WHITE)
    assert lit(image) == set()


def test_triangle_order_independent():
    a, b = blank(), blank()
    triangle(a, (3, 2), (30, 15), (12, 35), WHITE)
    triangle(b, (12, 35), (3, 2), (30, 15), WHITE)
    assert a.data == b.data
    ys = {y for _, y in lit(a)}
    assert ys == set(range(2, 35))