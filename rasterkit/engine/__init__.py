"""Raster engine — transforms, rasterizer, fractals, resampling, conversion.

Functions take the Canvas they operate on as their first argument.
"""

from rasterkit.engine.convert import convert, set_format_tag, to_color, to_grayscale, to_monochrome
from rasterkit.engine.fractal import (
    draw_koch_curve,
    draw_koch_snowflake,
    draw_sierpinski_curve,
    draw_sierpinski_triangle,
)
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
from rasterkit.engine.resample import resize, resize_in_place
from rasterkit.engine.transform import flip, flop, invert, rotate90cw

__all__ = [
    "circle_points",
    "convert",
    "draw_circle",
    "draw_filled_circle",
    "draw_filled_polygon",
    "draw_filled_rectangle",
    "draw_filled_triangle",
    "draw_koch_curve",
    "draw_koch_snowflake",
    "draw_line",
    "draw_polygon",
    "draw_rectangle",
    "draw_sierpinski_curve",
    "draw_sierpinski_triangle",
    "draw_triangle",
    "flip",
    "flop",
    "invert",
    "line_points",
    "resize",
    "resize_in_place",
    "rotate90cw",
    "set_format_tag",
    "to_color",
    "to_grayscale",
    "to_monochrome",
]
