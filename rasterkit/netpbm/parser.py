"""Netpbm parser — bytes (P1..P6) → Canvas.

Header tokens are separated by whitespace; ``#`` starts a comment running to
the end of the line. Binary rasters begin after exactly one whitespace byte
following the last header token (or a comment right after it).
PBM bit 1 decodes as pixel on.
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from rasterkit.errors import FormatError
from rasterkit.models.canvas import CHANNEL_LIMIT, Canvas, FormatTag, PixelKind

logger = logging.getLogger(__name__)

_WHITESPACE = b" \t\n\r\x0b\x0c"
_COMMENT_RE = re.compile(rb"#[^\r\n]*")


class _HeaderReader:
    """Cursor over the header part of a Netpbm byte string."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def token(self, what: str) -> bytes:
        data = self.data
        while self.pos < len(data):
            ch = data[self.pos : self.pos + 1]
            if ch in _WHITESPACE:
                self.pos += 1
            elif ch == b"#":
                while self.pos < len(data) and data[self.pos : self.pos + 1] not in (b"\n", b"\r"):
                    self.pos += 1
            else:
                break
        start = self.pos
        while self.pos < len(data) and data[self.pos : self.pos + 1] not in _WHITESPACE + b"#":
            self.pos += 1
        if start == self.pos:
            raise FormatError(f"Invalid Netpbm header: missing {what}")
        return data[start : self.pos]

    def integer(self, what: str, low: int, high: int | None = None) -> int:
        raw = self.token(what)
        if not raw.isdigit():
            raise FormatError(f"Invalid Netpbm header: {what} {raw!r} is not a number")
        value = int(raw)
        if value < low or (high is not None and value > high):
            bound = f"[{low}, {high}]" if high is not None else f">= {low}"
            raise FormatError(f"Invalid Netpbm header: {what} {value} not in {bound}")
        return value

    def raster_start(self) -> int:
        """Offset of the binary raster: one whitespace byte after the header.

        A comment may sit between the last header token and that byte.
        """
        if self.data[self.pos : self.pos + 1] == b"#":
            while self.pos < len(self.data) and self.data[self.pos : self.pos + 1] not in (b"\n", b"\r"):
                self.pos += 1
        if self.pos >= len(self.data) or self.data[self.pos : self.pos + 1] not in _WHITESPACE:
            raise FormatError("Invalid Netpbm header: no whitespace before binary raster")
        return self.pos + 1


def _ascii_tokens(body: bytes) -> list[bytes]:
    return _COMMENT_RE.sub(b" ", body).split()


def _take_ints(tokens: list[bytes], count: int, max_value: int) -> NDArray[np.int64]:
    if len(tokens) < count:
        raise FormatError(f"Truncated raster: expected {count} samples, found {len(tokens)}")
    try:
        values = np.array([int(t) for t in tokens[:count]], dtype=np.int64)
    except ValueError as exc:
        raise FormatError(f"Invalid raster sample: {exc}") from exc
    if values.size and (values.min() < 0 or values.max() > max_value):
        raise FormatError(f"Raster sample outside [0, {max_value}]")
    return values


def _take_bytes(data: bytes, start: int, count: int) -> NDArray[np.uint8]:
    raw = data[start : start + count]
    if len(raw) < count:
        raise FormatError(f"Truncated raster: expected {count} bytes, found {len(raw)}")
    return np.frombuffer(raw, dtype=np.uint8)


def _decode_pbm(tag: FormatTag, data: bytes, reader: _HeaderReader, width: int, height: int) -> NDArray:
    if tag is FormatTag.P1:
        # Samples may be packed ("0110") or whitespace separated
        digits = b"".join(_ascii_tokens(data[reader.pos :]))
        if len(digits) < width * height:
            raise FormatError(f"Truncated raster: expected {width * height} bits, found {len(digits)}")
        bits = np.frombuffer(digits[: width * height], dtype=np.uint8) - ord("0")
        if bits.size and bits.max() > 1:
            raise FormatError("Invalid PBM raster: samples must be 0 or 1")
        return bits.reshape(height, width).astype(bool)

    row_bytes = (width + 7) // 8
    packed = _take_bytes(data, reader.raster_start(), row_bytes * height).reshape(height, row_bytes)
    return np.unpackbits(packed, axis=1)[:, :width].astype(bool)


def _decode_graymap(tag: FormatTag, data: bytes, reader: _HeaderReader, shape: tuple[int, ...], max_value: int) -> NDArray:
    count = math.prod(shape)
    if tag.is_binary:
        samples = _take_bytes(data, reader.raster_start(), count)
        if samples.size and samples.max() > max_value:
            raise FormatError(f"Raster sample outside [0, {max_value}]")
    else:
        samples = _take_ints(_ascii_tokens(data[reader.pos :]), count, max_value)
    return samples.reshape(shape)


def decode(data: bytes) -> Canvas:
    """Parse a Netpbm byte string into a Canvas carrying its format tag."""
    reader = _HeaderReader(data)
    magic = reader.token("magic number").decode("ascii", errors="replace")
    try:
        tag = FormatTag(magic)
    except ValueError:
        raise FormatError(f"Invalid Netpbm file: unknown magic number {magic!r}") from None

    width = reader.integer("width", 1)
    height = reader.integer("height", 1)

    if tag.kind is PixelKind.MONO:
        grid = _decode_pbm(tag, data, reader, width, height)
        canvas = Canvas.from_array(grid, PixelKind.MONO, None, tag)
    else:
        max_value = reader.integer("max value", 1, CHANNEL_LIMIT)
        shape: tuple[int, ...] = (height, width, 3) if tag.kind is PixelKind.COLOR else (height, width)
        grid = _decode_graymap(tag, data, reader, shape, max_value)
        canvas = Canvas.from_array(grid, tag.kind, max_value, tag)

    logger.debug("Decoded %s image %d×%d", tag.value, width, height)
    return canvas


def read(path: str | Path) -> Canvas:
    """Read and decode a Netpbm file from disk."""
    path = Path(path)
    canvas = decode(path.read_bytes())
    logger.info("Loaded %s: %s", path, canvas)
    return canvas
