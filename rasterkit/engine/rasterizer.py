"""Primitive-shape rasterization — lines, rectangles, circles, triangles, polygons.

Every primitive is a sequence of bounds-checked ``Canvas.set`` calls. A
shape that leaves the canvas raises ``OutOfBounds`` at the first offending
pixel; pixels already written stay written.
"""

from __future__ import annotations

from typing import Any, Sequence

from rasterkit.errors import InvalidGeometry
from rasterkit.models.canvas import Canvas, Point
from rasterkit.utils.math_helpers import lerp_x, trunc_div


def _point(p: Sequence[int]) -> Point:
    return p if isinstance(p, Point) else Point(*p)


# ---------------------------------------------------------------------------
# Lines and rectangles
# ---------------------------------------------------------------------------


def line_points(p1: Sequence[int], p2: Sequence[int]) -> list[Point]:
    """Pixels of the segment p1→p2, one per column.

    Vertical segments cover every row between the endpoints. Any other
    segment samples y = y1 + dy·(x-x1)/dx at each integer x, the division
    truncating toward zero, so lines steeper than 45° show gaps.
    """
    a, b = _point(p1), _point(p2)
    if a.x == b.x:
        step = 1 if b.y >= a.y else -1
        return [Point(a.x, y) for y in range(a.y, b.y + step, step)]

    if a.x > b.x:
        a, b = b, a
    dx = b.x - a.x
    dy = b.y - a.y
    return [Point(x, a.y + trunc_div(dy * (x - a.x), dx)) for x in range(a.x, b.x + 1)]


def draw_line(canvas: Canvas, p1: Sequence[int], p2: Sequence[int], color: Any) -> None:
    value = canvas.coerce(color)
    for x, y in line_points(p1, p2):
        canvas.set(x, y, value)


def _check_extent(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise InvalidGeometry(f"Rectangle extent must be non-negative, got {width}×{height}")


def draw_rectangle(canvas: Canvas, corner: Sequence[int], width: int, height: int, color: Any) -> None:
    """Outline with corners at corner and corner + (width, height), both inclusive."""
    _check_extent(width, height)
    p = _point(corner)
    top_right = Point(p.x + width, p.y)
    bottom_left = Point(p.x, p.y + height)
    bottom_right = Point(p.x + width, p.y + height)
    draw_line(canvas, p, top_right, color)
    draw_line(canvas, p, bottom_left, color)
    draw_line(canvas, top_right, bottom_right, color)
    draw_line(canvas, bottom_left, bottom_right, color)


def draw_filled_rectangle(canvas: Canvas, corner: Sequence[int], width: int, height: int, color: Any) -> None:
    """`height` rows, each a line from x to x + width inclusive."""
    _check_extent(width, height)
    p = _point(corner)
    for i in range(height):
        draw_line(canvas, Point(p.x, p.y + i), Point(p.x + width, p.y + i), color)


# ---------------------------------------------------------------------------
# Circles (midpoint algorithm)
# ---------------------------------------------------------------------------


def _check_radius(radius: int) -> None:
    if radius <= 0:
        raise InvalidGeometry(f"Circle radius must be positive, got {radius}")


def _midpoint_steps(radius: int) -> list[tuple[int, int]]:
    """(x, y) octant offsets visited by the midpoint decision variable."""
    steps = []
    x, y = 0, radius
    d = 1 - radius
    while x <= y:
        steps.append((x, y))
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1
    return steps


def circle_points(center: Sequence[int], radius: int) -> list[Point]:
    """Outline pixels of the circle, eight symmetric points per step (duplicates kept)."""
    _check_radius(radius)
    c = _point(center)
    points = []
    for x, y in _midpoint_steps(radius):
        points.extend(
            [
                Point(c.x + x, c.y + y),
                Point(c.x + x, c.y - y),
                Point(c.x - x, c.y + y),
                Point(c.x - x, c.y - y),
                Point(c.x + y, c.y + x),
                Point(c.x + y, c.y - x),
                Point(c.x - y, c.y + x),
                Point(c.x - y, c.y - x),
            ]
        )
    return points


def draw_circle(canvas: Canvas, center: Sequence[int], radius: int, color: Any) -> None:
    value = canvas.coerce(color)
    for x, y in circle_points(center, radius):
        canvas.set(x, y, value)


def draw_filled_circle(canvas: Canvas, center: Sequence[int], radius: int, color: Any) -> None:
    """Four horizontal spans per midpoint step, then the horizontal diameter."""
    _check_radius(radius)
    c = _point(center)
    for x, y in _midpoint_steps(radius):
        draw_line(canvas, Point(c.x - x, c.y + y), Point(c.x + x, c.y + y), color)
        draw_line(canvas, Point(c.x - x, c.y - y), Point(c.x + x, c.y - y), color)
        draw_line(canvas, Point(c.x - y, c.y + x), Point(c.x + y, c.y + x), color)
        draw_line(canvas, Point(c.x - y, c.y - x), Point(c.x + y, c.y - x), color)
    for i in range(radius):
        draw_line(canvas, Point(c.x - i, c.y), Point(c.x + i, c.y), color)


# ---------------------------------------------------------------------------
# Triangles
# ---------------------------------------------------------------------------


def draw_triangle(
    canvas: Canvas, p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], color: Any
) -> None:
    draw_line(canvas, p1, p2, color)
    draw_line(canvas, p1, p3, color)
    draw_line(canvas, p2, p3, color)


def _fill_flat_top(canvas: Canvas, p1: Point, p2: Point, p3: Point, color: Any) -> None:
    """p1, p2 share the top row; p3 is the apex below. Rows p3.y down to p1.y (exclusive)."""
    s1 = (p3.x - p1.x) / (p3.y - p1.y)
    s2 = (p3.x - p2.x) / (p3.y - p2.y)
    x1 = x2 = float(p3.x)
    for y in range(p3.y, p1.y, -1):
        draw_line(canvas, Point(int(x1), y), Point(int(x2), y), color)
        x1 -= s1
        x2 -= s2


def _fill_flat_bottom(canvas: Canvas, p1: Point, p2: Point, p3: Point, color: Any) -> None:
    """p1 is the apex; p2, p3 share the bottom row. Rows p1.y to p2.y inclusive."""
    s1 = (p2.x - p1.x) / (p2.y - p1.y)
    s2 = (p3.x - p1.x) / (p3.y - p1.y)
    x1 = x2 = float(p1.x)
    for y in range(p1.y, p2.y + 1):
        draw_line(canvas, Point(int(x1), y), Point(int(x2), y), color)
        x1 += s1
        x2 += s2


def draw_filled_triangle(
    canvas: Canvas, p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], color: Any
) -> None:
    """Scanline fill by flat-top / flat-bottom decomposition.

    Vertices are sorted by Y. A triangle with a horizontal edge is filled
    directly; otherwise it is split at p4, where the long edge p1→p3 crosses
    p2's row, into a flat-bottom upper half and a flat-top lower half.
    """
    a, b, c = sorted((_point(p1), _point(p2), _point(p3)), key=lambda p: p.y)
    if a.y == c.y:
        raise InvalidGeometry(f"Triangle {a}, {b}, {c} has zero height")
    canvas.coerce(color)

    if a.y == b.y:
        _fill_flat_top(canvas, a, b, c, color)
    elif b.y == c.y:
        _fill_flat_bottom(canvas, a, b, c, color)
    else:
        d = Point(lerp_x(a.x, a.y, c.x, c.y, b.y), b.y)
        _fill_flat_bottom(canvas, a, b, d, color)
        _fill_flat_top(canvas, b, d, c, color)


# ---------------------------------------------------------------------------
# Polygons
# ---------------------------------------------------------------------------


def draw_polygon(canvas: Canvas, points: Sequence[Sequence[int]], color: Any) -> None:
    """Consecutive edges plus the closing edge from the last vertex to the first."""
    if len(points) < 2:
        raise InvalidGeometry(f"A polygon outline needs at least 2 points, got {len(points)}")
    for i in range(len(points) - 1):
        draw_line(canvas, points[i], points[i + 1], color)
    draw_line(canvas, points[-1], points[0], color)


def draw_filled_polygon(canvas: Canvas, points: Sequence[Sequence[int]], color: Any) -> None:
    """Fan triangulation from the first vertex.

    Exact for convex polygons only; concave outlines may fill across reflex
    vertices. A fan triangle lying on a single row is drawn as its
    horizontal extent.
    """
    if len(points) < 3:
        raise InvalidGeometry(f"A filled polygon needs at least 3 points, got {len(points)}")
    verts = [_point(p) for p in points]
    origin = verts[0]
    for i in range(1, len(verts) - 1):
        tri = (origin, verts[i], verts[i + 1])
        if tri[0].y == tri[1].y == tri[2].y:
            xs = [p.x for p in tri]
            draw_line(canvas, Point(min(xs), origin.y), Point(max(xs), origin.y), color)
        else:
            draw_filled_triangle(canvas, *tri, color)
