"""Canvas — the pixel grid every engine operation reads and writes.

The grid is a numpy array in row-major order (origin top-left, X to the
right, Y downwards):

    monochrome  bool   (height, width)
    grayscale   uint8  (height, width)
    color       uint8  (height, width, 3)

Width and height are read off the array shape, so they can never disagree
with the grid. Every accessor bounds-checks before touching the array;
negative coordinates are errors, never numpy's wrap-around indexing.
"""

from __future__ import annotations

import enum
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray

from rasterkit.config import settings
from rasterkit.errors import FormatError, InvalidGeometry, InvalidPixelValue, OutOfBounds

# Pixels are 8-bit range
CHANNEL_LIMIT = 255


class Point(NamedTuple):
    x: int
    y: int


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


class PixelKind(enum.Enum):
    MONO = "mono"
    GRAY = "gray"
    COLOR = "color"


class FormatTag(str, enum.Enum):
    """Netpbm magic numbers. Each tag belongs to exactly one pixel kind."""

    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"
    P5 = "P5"
    P6 = "P6"

    @property
    def kind(self) -> PixelKind:
        return _TAG_KIND[self]

    @property
    def is_binary(self) -> bool:
        return self in (FormatTag.P4, FormatTag.P5, FormatTag.P6)

    @classmethod
    def ascii_for(cls, kind: PixelKind) -> FormatTag:
        return {PixelKind.MONO: cls.P1, PixelKind.GRAY: cls.P2, PixelKind.COLOR: cls.P3}[kind]

    @classmethod
    def binary_for(cls, kind: PixelKind) -> FormatTag:
        return {PixelKind.MONO: cls.P4, PixelKind.GRAY: cls.P5, PixelKind.COLOR: cls.P6}[kind]

    @classmethod
    def parse(cls, value: str | FormatTag) -> FormatTag:
        try:
            return cls(value)
        except ValueError:
            raise FormatError(f"Unknown format tag: {value!r}") from None


_TAG_KIND = {
    FormatTag.P1: PixelKind.MONO,
    FormatTag.P4: PixelKind.MONO,
    FormatTag.P2: PixelKind.GRAY,
    FormatTag.P5: PixelKind.GRAY,
    FormatTag.P3: PixelKind.COLOR,
    FormatTag.P6: PixelKind.COLOR,
}


def is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _check_max_value(max_value: Any) -> int:
    if not is_integer(max_value) or not 1 <= max_value <= CHANNEL_LIMIT:
        raise InvalidPixelValue(f"max_value must be an integer in [1, {CHANNEL_LIMIT}], got {max_value!r}")
    return int(max_value)


def _grid_shape(kind: PixelKind, width: int, height: int) -> tuple[int, ...]:
    if kind is PixelKind.COLOR:
        return (height, width, 3)
    return (height, width)


def _grid_dtype(kind: PixelKind) -> type:
    return np.bool_ if kind is PixelKind.MONO else np.uint8


class Canvas:
    """A rectangular pixel grid of one pixel kind, plus its Netpbm metadata."""

    def __init__(
        self,
        width: int,
        height: int,
        kind: PixelKind = PixelKind.COLOR,
        max_value: int | None = None,
        format_tag: FormatTag | str | None = None,
    ) -> None:
        if not is_integer(width) or not is_integer(height) or width <= 0 or height <= 0:
            raise InvalidGeometry(f"Canvas dimensions must be positive integers, got {width}×{height}")
        self._kind = kind
        self._max_value = self._initial_max_value(kind, max_value)
        self._format_tag = self._initial_tag(kind, format_tag)
        self._data: NDArray[Any] = np.zeros(_grid_shape(kind, int(width), int(height)), dtype=_grid_dtype(kind))

    @classmethod
    def from_array(
        cls,
        data: NDArray[Any],
        kind: PixelKind,
        max_value: int | None = None,
        format_tag: FormatTag | str | None = None,
    ) -> Canvas:
        """Wrap an existing grid. The array is copied and validated."""
        data = np.asarray(data)
        if data.ndim < 2:
            raise InvalidGeometry(f"Expected a 2-D grid, got shape {data.shape}")
        height, width = data.shape[:2]
        canvas = cls(width, height, kind, max_value, format_tag)
        if kind is PixelKind.MONO:
            if data.dtype != np.bool_ and data.size and not np.isin(data, (0, 1)).all():
                raise InvalidPixelValue("Monochrome grid values must be 0/1 or bool")
        elif data.size and (data.min() < 0 or data.max() > canvas.max_value):
            raise InvalidPixelValue(f"Grid values outside [0, {canvas.max_value}]")
        canvas.replace_grid(data)
        return canvas

    @staticmethod
    def _initial_max_value(kind: PixelKind, max_value: int | None) -> int:
        if kind is PixelKind.MONO:
            if max_value not in (None, 1):
                raise InvalidPixelValue("Monochrome canvases have an implicit max value of 1")
            return 1
        if max_value is None:
            max_value = settings.default_max_value
        return _check_max_value(max_value)

    @staticmethod
    def _initial_tag(kind: PixelKind, format_tag: FormatTag | str | None) -> FormatTag:
        if format_tag is None:
            return FormatTag.ascii_for(kind)
        tag = FormatTag.parse(format_tag)
        if tag.kind is not kind:
            raise FormatError(f"Format tag {tag.value} does not hold {kind.value} pixels")
        return tag

    # ── Metadata ──

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def kind(self) -> PixelKind:
        return self._kind

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def format_tag(self) -> FormatTag:
        return self._format_tag

    @format_tag.setter
    def format_tag(self, value: FormatTag | str) -> None:
        tag = FormatTag.parse(value)
        if tag.kind is not self._kind:
            raise FormatError(
                f"Cannot relabel a {self._kind.value} canvas as {tag.value}; convert it instead"
            )
        self._format_tag = tag

    @property
    def pixels(self) -> NDArray[Any]:
        """Read-only view of the backing grid."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def set_max_value(self, max_value: int) -> None:
        """Change the declared channel range. Existing pixels are not rescaled."""
        if self._kind is PixelKind.MONO:
            raise InvalidPixelValue("Monochrome canvases have no adjustable max value")
        self._max_value = _check_max_value(max_value)

    # ── Pixel access ──

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> bool | int | Pixel:
        self._check_bounds(x, y)
        value = self._data[y, x]
        if self._kind is PixelKind.MONO:
            return bool(value)
        if self._kind is PixelKind.GRAY:
            return int(value)
        return Pixel(int(value[0]), int(value[1]), int(value[2]))

    def set(self, x: int, y: int, value: Any) -> None:
        self._check_bounds(x, y)
        self._data[y, x] = self.coerce(value)

    def coerce(self, value: Any) -> Any:
        """Validate a pixel value for this canvas and return its storable form."""
        if self._kind is PixelKind.MONO:
            if isinstance(value, (bool, np.bool_)) or (is_integer(value) and value in (0, 1)):
                return bool(value)
            raise InvalidPixelValue(f"Monochrome pixel must be a bool, got {value!r}")

        if self._kind is PixelKind.GRAY:
            if not is_integer(value):
                raise InvalidPixelValue(f"Grayscale pixel must be an int, got {value!r}")
            self._check_channel(value)
            return int(value)

        try:
            channels = tuple(value)
        except TypeError:
            raise InvalidPixelValue(f"Color pixel must be an (r, g, b) triple, got {value!r}") from None
        if len(channels) != 3 or not all(is_integer(c) for c in channels):
            raise InvalidPixelValue(f"Color pixel must be an (r, g, b) triple, got {value!r}")
        for c in channels:
            self._check_channel(c)
        return Pixel(*(int(c) for c in channels))

    def _check_channel(self, value: int) -> None:
        if not 0 <= value <= self._max_value:
            raise InvalidPixelValue(f"Channel value {value} outside [0, {self._max_value}]")

    # ── Whole-grid operations ──

    def replace_grid(self, data: NDArray[Any]) -> None:
        """Swap in a fully built grid (possibly of new dimensions) in one step.

        Only the shape and the 8-bit storage range are checked: grids derived
        from this canvas may legitimately carry values above a lowered
        max_value. Nothing is replaced if validation fails.
        """
        data = np.asarray(data)
        expected_ndim = 3 if self._kind is PixelKind.COLOR else 2
        if data.ndim != expected_ndim or (self._kind is PixelKind.COLOR and data.shape[2] != 3):
            raise InvalidGeometry(f"Grid shape {data.shape} does not hold {self._kind.value} pixels")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise InvalidGeometry(f"Grid shape {data.shape} has an empty dimension")
        if self._kind is not PixelKind.MONO and (data.min() < 0 or data.max() > CHANNEL_LIMIT):
            raise InvalidPixelValue(f"Grid values outside [0, {CHANNEL_LIMIT}]")
        self._data = np.array(data, dtype=_grid_dtype(self._kind), copy=True)

    def copy(self) -> Canvas:
        clone = Canvas(self.width, self.height, self._kind, self._max_value, self._format_tag)
        clone._data = self._data.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self._kind is other._kind
            and self._max_value == other._max_value
            and self._format_tag is other._format_tag
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Canvas({self.width}×{self.height}, kind={self._kind.value}, "
            f"max_value={self._max_value}, format_tag={self._format_tag.value})"
        )
