from __future__ import annotations

import numpy as np

from pixelplot.errors import InvalidDimension
from pixelplot.series import BLACK, RGBA, validate_color


DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512


def new_buffer(width: int, height: int, color: RGBA = BLACK) -> np.ndarray:
    buffer = np.zeros((height, width, 4), dtype=np.uint8)
    buffer[:, :, :] = np.asarray(color, dtype=np.uint8)
    return buffer


class Canvas:
    """Fixed-size RGBA pixel buffer, stored row-major as ``(height, width, 4)`` uint8.

    Pixel ``(x, y)`` lives at row ``y``, column ``x``. Writes outside the
    buffer are dropped, which is how line segments get clipped.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, background: RGBA = BLACK) -> None:
        if isinstance(width, bool) or isinstance(height, bool) or not isinstance(width, int) or not isinstance(height, int):
            raise InvalidDimension(f"canvas width/height must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"canvas width/height must be > 0, got {width}x{height}")
        self._width = width
        self._height = height
        self._background = validate_color(background, "background")
        self._pixels = new_buffer(width, height, self._background)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def background(self) -> RGBA:
        return self._background

    def clear(self, color: RGBA | None = None) -> None:
        fill = self._background if color is None else validate_color(color)
        self._pixels[:, :, :] = np.asarray(fill, dtype=np.uint8)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        if not self.contains(x, y):
            return
        self._pixels[y, x] = validate_color(color)

    def get_pixel(self, x: int, y: int) -> RGBA:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} canvas")
        r, g, b, a = self._pixels[y, x].tolist()
        return (r, g, b, a)

    def snapshot(self) -> np.ndarray:
        """Copy of the current pixels; later mutations do not show through."""
        return self._pixels.copy()

    def to_rgba_bytes(self) -> bytes:
        return np.ascontiguousarray(self._pixels).tobytes()
