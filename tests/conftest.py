"""Shared test fixtures."""

from __future__ import annotations

import pytest

from rasterkit.models.canvas import Canvas, Pixel, PixelKind

RED = Pixel(255, 0, 0)
WHITE = Pixel(255, 255, 255)

# Sample Netpbm files, one per magic number

PBM_ASCII = b"""P1
# 4x3 checker
4 3
1 0 1 0
0 1 0 1
1 1 0 0
"""

PGM_ASCII = b"""P2
3 2
# max
15
0 5 10
15 7 1
"""

PPM_ASCII = b"""P3
2 2
255
255 0 0   0 255 0
0 0 255   30 60 90
"""

# 10 pixels wide: two packed bytes per row, the second padded
PBM_BINARY = b"P4\n10 2\n" + bytes([0b10110000, 0b01000000, 0b00000000, 0b11000000])

PGM_BINARY = b"P5\n3 1\n200\n" + bytes([0, 100, 200])

PPM_BINARY = b"P6\n2 1\n255\n" + bytes([1, 2, 3, 250, 251, 252])


def numbered_canvas(width: int = 4, height: int = 3) -> Canvas:
    """Color canvas whose red channel encodes the pixel position (x + 10·y)."""
    canvas = Canvas(width, height, PixelKind.COLOR)
    for y in range(height):
        for x in range(width):
            canvas.set(x, y, Pixel(x + 10 * y, x, y))
    return canvas


def lit(canvas: Canvas) -> set[tuple[int, int]]:
    """Coordinates of every non-zero pixel."""
    data = canvas.pixels
    if data.ndim == 3:
        data = data.any(axis=2)
    ys, xs = data.nonzero()
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


@pytest.fixture
def blank() -> Canvas:
    return Canvas(5, 5, PixelKind.COLOR)


@pytest.fixture
def numbered() -> Canvas:
    return numbered_canvas()


@pytest.fixture
def gray() -> Canvas:
    canvas = Canvas(3, 2, PixelKind.GRAY, max_value=15)
    for y in range(2):
        for x in range(3):
            canvas.set(x, y, x * 5 + y)
    return canvas


@pytest.fixture
def mono() -> Canvas:
    canvas = Canvas(3, 2, PixelKind.MONO)
    canvas.set(0, 0, True)
    canvas.set(2, 1, True)
    return canvas
