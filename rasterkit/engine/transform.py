"""Whole-image transforms: invert, flip, flop, rotate.

Every transform builds its result grid completely, then swaps it into the
canvas with ``Canvas.replace_grid``; no intermediate state is observable.
"""

from __future__ import annotations

import logging

import numpy as np

from rasterkit.models.canvas import Canvas, PixelKind

logger = logging.getLogger(__name__)


def invert(canvas: Canvas) -> None:
    """Replace every channel value v with max_value - v (monochrome: NOT).

    Values above max_value (left behind by a lowering ``set_max_value``) are
    clamped to max_value first, so the result always lies in [0, max_value].
    """
    data = canvas.pixels
    if canvas.kind is PixelKind.MONO:
        inverted = np.logical_not(data)
    else:
        wide = np.minimum(data.astype(np.int16), canvas.max_value)
        inverted = canvas.max_value - wide
    canvas.replace_grid(inverted)
    logger.debug("Inverted %d×%d %s canvas", canvas.width, canvas.height, canvas.kind.value)


def flip(canvas: Canvas) -> None:
    """Horizontal mirror: column j swaps with column width-1-j."""
    canvas.replace_grid(canvas.pixels[:, ::-1])


def flop(canvas: Canvas) -> None:
    """Vertical mirror: row i swaps with row height-1-i."""
    canvas.replace_grid(canvas.pixels[::-1, :])


def rotate90cw(canvas: Canvas) -> None:
    """Rotate a quarter turn clockwise; width and height swap.

    new[i][j] = old[old_height-1-j][i]
    """
    # k=-1 over the spatial axes only; color channels stay last
    canvas.replace_grid(np.rot90(canvas.pixels, k=-1, axes=(0, 1)))
    logger.debug("Rotated canvas to %d×%d", canvas.width, canvas.height)
