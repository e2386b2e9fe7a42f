"""Error taxonomy shared by the canvas, the engine and the Netpbm codec."""

from __future__ import annotations


class RasterError(Exception):
    """Base class for every error raised by rasterkit."""


class OutOfBounds(RasterError, IndexError):
    """A pixel coordinate fell outside the canvas grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Pixel ({x}, {y}) outside {width}×{height} canvas")


class FormatError(RasterError, ValueError):
    """Malformed or unsupported Netpbm content, or an illegal format-tag switch."""


class InvalidGeometry(RasterError, ValueError):
    """Degenerate geometric input (zero radius, flat triangle, empty resize target...)."""


class InvalidPixelValue(RasterError, ValueError):
    """A pixel value of the wrong kind, or outside [0, max_value]."""
