"""Recursive fractal curves built on the rasterizer's line primitive.

Both curves are simplified self-similar zig-zags rather than the textbook
figures: the Koch curve keeps all four sub-segments on the baseline (no
raised peak) and the Sierpinski curve recurses on segments, not triangles.

    koch(n, start, w)        -> koch(n-1, start + (k·w//3, 0), w//3)  for k in 0..3
    sierpinski(n, start, w)  -> sierpinski(n-1, start, w//2)
                                sierpinski(n-1, start + (w//2, 0), w//2)
                                sierpinski(n-1, start + (w//4, w·sin60/2), w//2)

Depth and width are validated before the first pixel is written.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from rasterkit.engine.config import ENGINE_CONFIG
from rasterkit.engine.rasterizer import draw_line
from rasterkit.errors import InvalidGeometry
from rasterkit.models.canvas import Canvas, Point, is_integer

logger = logging.getLogger(__name__)

_KOCH_DIVISOR = 3
_SIERPINSKI_DIVISOR = 2

CurveFn = Callable[[Canvas, int, Point, int, Any], None]


def _validate(n: int, width: int, divisor: int) -> None:
    if not is_integer(n) or n < 0:
        raise InvalidGeometry(f"Recursion depth must be a non-negative integer, got {n!r}")
    if not is_integer(width) or width < 1:
        raise InvalidGeometry(f"Curve width must be at least one pixel, got {width}")
    if width // divisor**n < 1:
        raise InvalidGeometry(
            f"Depth {n} shrinks a {width}px segment below one pixel (divisor {divisor})"
        )


def _koch(canvas: Canvas, n: int, start: Point, width: int, color: Any) -> None:
    if n == 0:
        draw_line(canvas, start, Point(start.x + width, start.y), color)
        return
    third = width // _KOCH_DIVISOR
    _koch(canvas, n - 1, start, third, color)
    _koch(canvas, n - 1, Point(start.x + third, start.y), third, color)
    _koch(canvas, n - 1, Point(start.x + third * 2, start.y), third, color)
    _koch(canvas, n - 1, Point(start.x + width, start.y), third, color)


def _sierpinski(canvas: Canvas, n: int, start: Point, width: int, color: Any) -> None:
    if n == 0:
        draw_line(canvas, start, Point(start.x + width, start.y), color)
        return
    half = width // _SIERPINSKI_DIVISOR
    _sierpinski(canvas, n - 1, start, half, color)
    _sierpinski(canvas, n - 1, Point(start.x + half, start.y), half, color)
    _sierpinski(
        canvas,
        n - 1,
        Point(start.x + width // 4, start.y + int(width * ENGINE_CONFIG.sin60 / 2)),
        half,
        color,
    )


def draw_koch_curve(canvas: Canvas, n: int, start: Sequence[int], width: int, color: Any) -> None:
    _validate(n, width, _KOCH_DIVISOR)
    canvas.coerce(color)
    _koch(canvas, n, Point(*start), width, color)


def draw_sierpinski_curve(canvas: Canvas, n: int, start: Sequence[int], width: int, color: Any) -> None:
    _validate(n, width, _SIERPINSKI_DIVISOR)
    canvas.coerce(color)
    _sierpinski(canvas, n, Point(*start), width, color)


def _triangle_starts(start: Point, width: int) -> list[Point]:
    """Vertices of the equilateral triangle the three curves start from."""
    return [
        start,
        Point(start.x + width // 2, start.y + int(width * ENGINE_CONFIG.sin60)),
        Point(start.x + width, start.y),
    ]


def _draw_three(curve: CurveFn, canvas: Canvas, n: int, start: Point, width: int, color: Any) -> None:
    for vertex in _triangle_starts(start, width):
        curve(canvas, n, vertex, width, color)


def draw_koch_snowflake(canvas: Canvas, n: int, start: Sequence[int], width: int, color: Any) -> None:
    """Three Koch curves anchored at the vertices of an equilateral triangle."""
    _validate(n, width, _KOCH_DIVISOR)
    canvas.coerce(color)
    logger.debug("Koch snowflake depth=%d width=%d at %s", n, width, tuple(start))
    _draw_three(_koch, canvas, n, Point(*start), width, color)


def draw_sierpinski_triangle(canvas: Canvas, n: int, start: Sequence[int], width: int, color: Any) -> None:
    """Three Sierpinski curves anchored at the vertices of an equilateral triangle."""
    _validate(n, width, _SIERPINSKI_DIVISOR)
    canvas.coerce(color)
    logger.debug("Sierpinski triangle depth=%d width=%d at %s", n, width, tuple(start))
    _draw_three(_sierpinski, canvas, n, Point(*start), width, color)
