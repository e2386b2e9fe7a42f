"""Color-depth conversion between canvas kinds.

Reductions follow color → grayscale → monochrome:

    gray = (R + G + B) // 3                   max_value preserved
    mono = gray > max_value // 2              strict threshold

Promotions (grayscale/monochrome → color) replicate the gray level into all
three channels. Every conversion returns a new canvas; the source is never
reinterpreted in place. Changing a canvas's format tag to another kind goes
through ``convert``; ``set_format_tag`` only switches between the ASCII and
binary layouts of the same kind.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from rasterkit.config import settings
from rasterkit.models.canvas import Canvas, FormatTag, PixelKind

logger = logging.getLogger(__name__)


def _gray_levels(canvas: Canvas) -> NDArray[np.int32]:
    """Per-pixel gray intensity in the canvas's own max_value scale."""
    data = canvas.pixels
    if canvas.kind is PixelKind.COLOR:
        return data.astype(np.int32).sum(axis=2) // 3
    return data.astype(np.int32)


def _target_tag(source: Canvas, kind: PixelKind) -> FormatTag:
    """Keep the ASCII/binary flavor of the source's tag."""
    if source.format_tag.is_binary:
        return FormatTag.binary_for(kind)
    return FormatTag.ascii_for(kind)


def to_grayscale(canvas: Canvas) -> Canvas:
    if canvas.kind is PixelKind.GRAY:
        return canvas.copy()
    if canvas.kind is PixelKind.MONO:
        max_value = settings.default_max_value
        levels = np.where(canvas.pixels, max_value, 0)
    else:
        max_value = canvas.max_value
        levels = _gray_levels(canvas)
    result = Canvas(canvas.width, canvas.height, PixelKind.GRAY, max_value, _target_tag(canvas, PixelKind.GRAY))
    result.replace_grid(levels)
    return result


def to_monochrome(canvas: Canvas) -> Canvas:
    if canvas.kind is PixelKind.MONO:
        return canvas.copy()
    result = Canvas(canvas.width, canvas.height, PixelKind.MONO, None, _target_tag(canvas, PixelKind.MONO))
    result.replace_grid(_gray_levels(canvas) > canvas.max_value // 2)
    return result


def to_color(canvas: Canvas) -> Canvas:
    if canvas.kind is PixelKind.COLOR:
        return canvas.copy()
    gray = to_grayscale(canvas)
    result = Canvas(canvas.width, canvas.height, PixelKind.COLOR, gray.max_value, _target_tag(canvas, PixelKind.COLOR))
    result.replace_grid(np.repeat(gray.pixels[:, :, None], 3, axis=2))
    return result


_CONVERTERS = {
    PixelKind.MONO: to_monochrome,
    PixelKind.GRAY: to_grayscale,
    PixelKind.COLOR: to_color,
}


def convert(canvas: Canvas, tag: FormatTag | str) -> Canvas:
    """New canvas holding the pixel kind of ``tag``, labelled with ``tag``."""
    target = FormatTag.parse(tag)
    result = _CONVERTERS[target.kind](canvas)
    result.format_tag = target
    logger.debug("Converted %s canvas to %s", canvas.format_tag.value, target.value)
    return result


def set_format_tag(canvas: Canvas, tag: FormatTag | str) -> None:
    """Metadata-only switch between same-kind layouts (e.g. P3 <-> P6).

    Raises FormatError for a tag of another kind.
    """
    canvas.format_tag = tag
