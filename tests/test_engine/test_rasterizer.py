"""Tests for primitive-shape rasterization."""

import math

import pytest

from rasterkit.engine.rasterizer import (
    circle_points,
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
    line_points,
)
from rasterkit.errors import InvalidGeometry, InvalidPixelValue, OutOfBounds
from rasterkit.models.canvas import Canvas, PixelKind, Point
from tests.conftest import RED, lit


def test_vertical_line(blank):
    draw_line(blank, Point(2, 1), Point(2, 4), RED)
    assert lit(blank) == {(2, 1), (2, 2), (2, 3), (2, 4)}
    assert blank.get(2, 3) == RED


def test_vertical_line_upwards(blank):
    draw_line(blank, (2, 4), (2, 1), RED)
    assert lit(blank) == {(2, 1), (2, 2), (2, 3), (2, 4)}


def test_shallow_diagonal(blank):
    draw_line(blank, Point(0, 0), Point(4, 2), RED)
    assert lit(blank) == {(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)}


def test_line_endpoint_order_does_not_matter():
    assert line_points((4, 2), (0, 0)) == line_points((0, 0), (4, 2))


def test_line_truncates_toward_zero():
    # dy·dx ratio -1/2: floor division would give -1 at x=1
    assert line_points((0, 0), (2, -1)) == [Point(0, 0), Point(1, 0), Point(2, -1)]


def test_steep_line_has_gaps():
    pts = line_points((0, 0), (2, 6))
    assert pts == [Point(0, 0), Point(1, 3), Point(2, 6)]


def test_single_point_line(blank):
    draw_line(blank, (3, 3), (3, 3), RED)
    assert lit(blank) == {(3, 3)}


def test_line_out_of_bounds_raises_after_partial_draw(blank):
    with pytest.raises(OutOfBounds):
        draw_line(blank, (3, 0), (6, 0), RED)
    assert lit(blank) == {(3, 0), (4, 0)}


def test_invalid_color_draws_nothing(blank):
    with pytest.raises(InvalidPixelValue):
        draw_line(blank, (0, 0), (4, 0), 7)
    assert lit(blank) == set()


def test_rectangle_outline(blank):
    draw_rectangle(blank, (1, 1), 3, 2, RED)
    expected = {(x, 1) for x in range(1, 5)} | {(x, 3) for x in range(1, 5)} | {(1, 2), (4, 2)}
    assert lit(blank) == expected


def test_filled_rectangle(blank):
    draw_filled_rectangle(blank, Point(1, 1), 2, 2, RED)
    assert lit(blank) == {(x, y) for x in range(1, 4) for y in (1, 2)}


def test_negative_rectangle_rejected(blank):
    with pytest.raises(InvalidGeometry):
        draw_filled_rectangle(blank, (1, 1), -2, 2, RED)


def test_circle_is_eight_way_symmetric():
    cx, cy, r = 10, 10, 6
    pts = set(circle_points((cx, cy), r))
    for x, y in pts:
        dx, dy = x - cx, y - cy
        for mx, my in [(dx, -dy), (-dx, dy), (-dx, -dy), (dy, dx), (dy, -dx), (-dy, dx), (-dy, -dx)]:
            assert (cx + mx, cy + my) in pts
        assert abs(math.hypot(dx, dy) - r) < 1.0


def test_draw_circle_plots_outline_only():
    canvas = Canvas(11, 11, PixelKind.GRAY)
    draw_circle(canvas, (5, 5), 4, 200)
    assert canvas.get(5, 1) == 200
    assert canvas.get(9, 5) == 200
    assert canvas.get(5, 5) == 0
    assert lit(canvas) == set(circle_points((5, 5), 4))


def test_filled_circle_covers_outline_and_centre():
    canvas = Canvas(11, 11, PixelKind.MONO)
    draw_filled_circle(canvas, (5, 5), 4, True)
    filled = lit(canvas)
    assert set(circle_points((5, 5), 4)) <= filled
    assert (5, 5) in filled
    assert (0, 0) not in filled
    for x, y in filled:
        assert math.hypot(x - 5, y - 5) < 5


def test_circle_rejects_zero_radius(blank):
    with pytest.raises(InvalidGeometry):
        draw_circle(blank, (2, 2), 0, RED)
    with pytest.raises(InvalidGeometry):
        draw_filled_circle(blank, (2, 2), -1, RED)


def test_circle_off_canvas_raises(blank):
    with pytest.raises(OutOfBounds):
        draw_circle(blank, (0, 0), 2, RED)


def test_triangle_outline(blank):
    draw_triangle(blank, (0, 0), (4, 0), (0, 4), RED)
    assert {(0, 0), (4, 0), (0, 4), (2, 0), (0, 2)} <= lit(blank)


def test_filled_flat_bottom_triangle():
    canvas = Canvas(7, 5, PixelKind.GRAY)
    draw_filled_triangle(canvas, (3, 0), (0, 3), (6, 3), 9)
    filled = lit(canvas)
    assert (3, 0) in filled
    assert {(x, 3) for x in range(7)} <= filled
    assert (0, 0) not in filled
    assert all(y <= 3 for _, y in filled)


def test_filled_flat_top_triangle_skips_top_row():
    canvas = Canvas(7, 5, PixelKind.GRAY)
    draw_filled_triangle(canvas, (0, 0), (6, 0), (3, 4), 9)
    filled = lit(canvas)
    assert (3, 4) in filled
    assert {(x, 1) for x in range(1, 6)} <= filled
    assert all(y > 0 for _, y in filled)


def test_filled_general_triangle_is_split():
    canvas = Canvas(10, 10, PixelKind.MONO)
    draw_filled_triangle(canvas, (0, 0), (8, 4), (2, 8), True)
    filled = lit(canvas)
    for p in [(0, 0), (8, 4), (2, 8), (3, 4)]:
        assert p in filled
    assert (9, 9) not in filled
    assert (0, 8) not in filled


def test_vertex_order_does_not_matter():
    a = Canvas(10, 10, PixelKind.MONO)
    b = Canvas(10, 10, PixelKind.MONO)
    draw_filled_triangle(a, (0, 0), (8, 4), (2, 8), True)
    draw_filled_triangle(b, (2, 8), (0, 0), (8, 4), True)
    assert a == b


def test_zero_height_triangle_rejected(blank):
    with pytest.raises(InvalidGeometry):
        draw_filled_triangle(blank, (0, 2), (3, 2), (4, 2), RED)
    assert lit(blank) == set()


def test_polygon_outline_closes(blank):
    draw_polygon(blank, [(0, 0), (4, 0), (4, 4)], RED)
    pts = lit(blank)
    assert (2, 0) in pts
    assert (4, 2) in pts
    # closing edge back to the first vertex
    assert (2, 2) in pts


def test_polygon_needs_points(blank):
    with pytest.raises(InvalidGeometry):
        draw_polygon(blank, [(1, 1)], RED)
    with pytest.raises(InvalidGeometry):
        draw_filled_polygon(blank, [(1, 1), (2, 2)], RED)


def test_filled_convex_polygon():
    canvas = Canvas(8, 8, PixelKind.MONO)
    square = [(1, 1), (6, 1), (6, 6), (1, 6)]
    draw_filled_polygon(canvas, square, True)
    filled = lit(canvas)
    assert (3, 3) in filled
    assert (5, 5) in filled
    assert (0, 0) not in filled
    assert (7, 7) not in filled


def test_filled_polygon_collinear_fan_triangle():
    canvas = Canvas(8, 4, PixelKind.MONO)
    draw_filled_polygon(canvas, [(0, 1), (3, 1), (6, 1), (3, 3)], True)
    assert {(x, 1) for x in range(7)} <= lit(canvas)
