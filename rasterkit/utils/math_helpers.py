"""Integer helpers — truncating arithmetic used by the rasterizer. No engine imports."""

from __future__ import annotations


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (Python's ``//`` floors).

    ``trunc_div(-3, 2) == -1`` whereas ``-3 // 2 == -2``.
    """
    if denominator == 0:
        raise ZeroDivisionError("trunc_div by zero")
    q = abs(numerator) // abs(denominator)
    return q if (numerator >= 0) == (denominator > 0) else -q


def lerp_x(x0: int, y0: int, x1: int, y1: int, y: int) -> int:
    """X of the segment (x0, y0)→(x1, y1) at row ``y``, truncated toward zero.

    The segment must not be horizontal.
    """
    ratio = (y - y0) / (y1 - y0)
    return x0 + int(ratio * (x1 - x0))
