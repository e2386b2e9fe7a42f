"""Nearest-neighbor resampling."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from rasterkit.errors import InvalidGeometry
from rasterkit.models.canvas import Canvas, is_integer

logger = logging.getLogger(__name__)


def _sample(canvas: Canvas, new_width: int, new_height: int) -> NDArray:
    """Output (i, j) takes source (i·old_h // new_h, j·old_w // new_w); no rounding."""
    if not is_integer(new_width) or not is_integer(new_height) or new_width <= 0 or new_height <= 0:
        raise InvalidGeometry(f"Resize target must be positive, got {new_width}×{new_height}")
    rows = np.arange(new_height) * canvas.height // new_height
    cols = np.arange(new_width) * canvas.width // new_width
    return canvas.pixels[rows[:, None], cols[None, :]]


def resize(canvas: Canvas, new_width: int, new_height: int) -> Canvas:
    """Return a resampled copy; the source canvas is left untouched."""
    result = canvas.copy()
    result.replace_grid(_sample(canvas, new_width, new_height))
    logger.debug("Resized %d×%d -> %d×%d", canvas.width, canvas.height, new_width, new_height)
    return result


def resize_in_place(canvas: Canvas, new_width: int, new_height: int) -> None:
    """Resample and swap the new grid into ``canvas``; validation happens first."""
    canvas.replace_grid(_sample(canvas, new_width, new_height))
