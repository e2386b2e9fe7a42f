"""Write Netpbm bytes (P1..P6) from a Canvas."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from rasterkit.config import settings
from rasterkit.errors import FormatError
from rasterkit.models.canvas import Canvas, FormatTag, PixelKind

logger = logging.getLogger(__name__)


def _wrap(tokens: list[str], width: int) -> list[str]:
    """Join tokens with single spaces, breaking lines before ``width`` characters."""
    lines: list[str] = []
    current: list[str] = []
    length = 0
    for token in tokens:
        extra = len(token) + (1 if current else 0)
        if current and length + extra > width:
            lines.append(" ".join(current))
            current, length = [], 0
            extra = len(token)
        current.append(token)
        length += extra
    if current:
        lines.append(" ".join(current))
    return lines


def _ascii_raster(canvas: Canvas, data: np.ndarray) -> bytes:
    if canvas.kind is PixelKind.MONO:
        rows = [["1" if bit else "0" for bit in row] for row in data]
    else:
        rows = [[str(int(v)) for v in row.ravel()] for row in data]
    lines: list[str] = []
    for row in rows:
        lines.extend(_wrap(row, settings.ascii_line_width))
    return ("\n".join(lines) + "\n").encode("ascii")


def _binary_raster(canvas: Canvas, data: np.ndarray) -> bytes:
    if canvas.kind is PixelKind.MONO:
        return np.packbits(data, axis=1).tobytes()
    return data.astype(np.uint8).tobytes()


def encode(canvas: Canvas, tag: FormatTag | str | None = None) -> bytes:
    """Serialize ``canvas`` in the layout of ``tag`` (default: its own tag).

    Samples above the declared max value (left behind by a lowered
    max value) are clamped to it. Raises FormatError when the tag cannot
    hold the canvas's pixel kind.
    """
    target = canvas.format_tag if tag is None else FormatTag.parse(tag)
    if target.kind is not canvas.kind:
        raise FormatError(f"{target.value} cannot encode a {canvas.kind.value} canvas")
    data = canvas.pixels
    if canvas.kind is not PixelKind.MONO:
        data = np.minimum(data, canvas.max_value)

    header = f"{target.value}\n{canvas.width} {canvas.height}\n"
    if canvas.kind is not PixelKind.MONO:
        header += f"{canvas.max_value}\n"

    raster = _binary_raster(canvas, data) if target.is_binary else _ascii_raster(canvas, data)
    logger.debug("Encoded %s image %d×%d (%d raster bytes)", target.value, canvas.width, canvas.height, len(raster))
    return header.encode("ascii") + raster


def save(canvas: Canvas, path: str | Path, tag: FormatTag | str | None = None) -> None:
    """Encode ``canvas`` and write it to ``path``."""
    path = Path(path)
    path.write_bytes(encode(canvas, tag))
    logger.info("Saved %s: %s", path, canvas)
