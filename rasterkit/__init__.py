"""rasterkit — in-memory raster drawing, transforms and Netpbm I/O."""

from rasterkit.errors import FormatError, InvalidGeometry, InvalidPixelValue, OutOfBounds, RasterError
from rasterkit.models.canvas import Canvas, FormatTag, Pixel, PixelKind, Point

__version__ = "0.1.0"

__all__ = [
    "Canvas",
    "FormatError",
    "FormatTag",
    "InvalidGeometry",
    "InvalidPixelValue",
    "OutOfBounds",
    "Pixel",
    "PixelKind",
    "Point",
    "RasterError",
]
