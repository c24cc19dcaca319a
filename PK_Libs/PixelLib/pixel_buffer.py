"""
PixelBuffer - the owned RGBA raster every transform reads and writes.

Pixels are stored in a numpy uint8 array of shape (height, width, 4), so a
coordinate (x, y) addresses row y, column x.

Classes:
    PixelBuffer: Mutable width x height grid of RGBA pixels
"""

from typing import Any, Iterator, Tuple, Union

import numpy as np

from PK_Libs.constants import (
    CHANNEL_COUNT,
    DEFAULT_FILL_COLOR,
    MAX_CHANNEL_VALUE,
    MIN_CHANNEL_VALUE,
    OPAQUE_ALPHA,
)
from PK_Libs.errors import IndexOutOfRangeError, InvalidArgumentError
from PK_Libs.PixelLib.color_ops import Color, RgbaColor

ColorLike = Union[Color, RgbaColor, Tuple[int, int, int]]


def _to_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_rgba(tuple(value))


class PixelBuffer:
    """
    A mutable 2D grid of RGBA pixels.

    Two buffers never share backing storage: the constructor, `from_array`,
    `to_array` and `deep_copy` all copy.

    Example:
        >>> buffer = PixelBuffer(4, 2, fill=(255, 0, 0, 255))
        >>> buffer.get(3, 1)
        Color(red=255, green=0, blue=0, alpha=255)
        >>> buffer.set(0, 0, Color(0, 0, 0))
    """

    def __init__(self, width: int, height: int, fill: ColorLike = DEFAULT_FILL_COLOR):
        """
        Allocate a buffer filled with a single color.

        Args:
            width: Number of columns (> 0)
            height: Number of rows (> 0)
            fill: Initial color of every pixel (default transparent black)

        Raises:
            InvalidArgumentError: If width or height is not a positive integer
        """
        self._validate_dimensions(width, height)
        fill_color = _to_color(fill)
        self._pixels = np.empty((height, width, CHANNEL_COUNT), dtype=np.uint8)
        self._pixels[:, :] = fill_color.rgba

    @staticmethod
    def _validate_dimensions(width: Any, height: Any) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidArgumentError(f"{name} must be an integer, got {type(value)}")
            if value <= 0:
                raise InvalidArgumentError(f"{name} must be positive, got {value}")

    @classmethod
    def from_array(cls, array: Any) -> "PixelBuffer":
        """
        Build a buffer from pixel data, copying it.

        Args:
            array: Array-like of shape (h, w, 4) RGBA, (h, w, 3) RGB
                   (made opaque) or (h, w) grayscale (made opaque)

        Returns:
            A new PixelBuffer owning a copy of the data

        Raises:
            InvalidArgumentError: If the shape is not one of the above, the
                dtype is not an integer type, or a value is outside 0-255
        """
        data = np.asarray(array)

        if data.dtype == np.bool_ or not np.issubdtype(data.dtype, np.integer):
            raise InvalidArgumentError(f"Expected an integer array, got dtype {data.dtype}")

        if data.size and (data.min() < MIN_CHANNEL_VALUE or data.max() > MAX_CHANNEL_VALUE):
            raise InvalidArgumentError(
                f"Channel values must be within [{MIN_CHANNEL_VALUE}, {MAX_CHANNEL_VALUE}], "
                f"got [{data.min()}, {data.max()}]"
            )

        if data.ndim == 2:
            data = np.stack([data, data, data], axis=2)

        if data.ndim != 3 or data.shape[2] not in (3, CHANNEL_COUNT):
            raise InvalidArgumentError(
                f"Expected array of shape (h, w), (h, w, 3) or (h, w, 4), got {data.shape}"
            )

        if data.shape[2] == 3:
            alpha = np.full(data.shape[:2] + (1,), OPAQUE_ALPHA, dtype=np.uint8)
            data = np.concatenate([data.astype(np.uint8), alpha], axis=2)

        height, width = data.shape[:2]
        cls._validate_dimensions(int(width), int(height))

        buffer = cls.__new__(cls)
        buffer._pixels = np.array(data, dtype=np.uint8, copy=True)
        return buffer

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise IndexOutOfRangeError(f"Pixel coordinates must be integers, got ({x!r}, {y!r})")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfRangeError(
                f"Pixel ({x}, {y}) outside buffer of size {self.width}x{self.height}"
            )

    def get(self, x: int, y: int) -> Color:
        """Return the color at (x, y)."""
        self._check_bounds(x, y)
        return Color(*self._pixels[y, x].tolist())

    def set(self, x: int, y: int, color: ColorLike) -> None:
        """Write a color (Color or RGB/RGBA tuple) at (x, y)."""
        self._check_bounds(x, y)
        self._pixels[y, x] = _to_color(color).rgba

    def deep_copy(self) -> "PixelBuffer":
        """Return a buffer with identical pixels and no shared storage."""
        return PixelBuffer.from_array(self._pixels)

    def to_array(self) -> np.ndarray:
        """Return a copy of the pixel data as a (height, width, 4) uint8 array."""
        return self._pixels.copy()

    def view(self) -> np.ndarray:
        """Return a read-only view of the pixel data, for transforms."""
        pixels = self._pixels.view()
        pixels.flags.writeable = False
        return pixels

    def iter_pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (x, y, color) for every pixel in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, Color(*self._pixels[y, x].tolist())

    def shares_storage_with(self, other: "PixelBuffer") -> bool:
        return np.shares_memory(self._pixels, other._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._pixels, other._pixels))

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
