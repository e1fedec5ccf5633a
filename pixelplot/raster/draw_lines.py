from __future__ import annotations

from collections.abc import Iterator, Sequence
import math

from pixelplot.raster.canvas import Canvas
from pixelplot.series import RGBA, PixelPoint, validate_color


def round_half_even(value: float) -> int:
    """Round to the nearest integer pixel, ties to even (same as ``np.rint``)."""
    if not math.isfinite(value):
        raise ValueError(f"cannot round non-finite coordinate: {value!r}")
    return int(round(value))


def to_pixel_point(point: PixelPoint | tuple[float, float]) -> PixelPoint:
    if isinstance(point, PixelPoint):
        return point
    x, y = point
    return PixelPoint(round_half_even(float(x)), round_half_even(float(y)))


def line_pixels(
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    bounds: tuple[int, int] | None = None,
) -> Iterator[tuple[int, int]]:
    """Yield the Bresenham cells from ``(x0, y0)`` to ``(x1, y1)``, both endpoints included.

    The walk steps one cell along the major axis at a time and carries an
    integer error term for the minor axis. With ``bounds=(width, height)`` the
    walk starts at the first major-axis step inside ``[0, extent)`` and stops at
    the last one, so its cost depends on the canvas size, not the segment length.
    Cells it yields are the same ones the unbounded walk yields there.
    """
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = abs(y1 - y0)
    sy = 1 if y0 < y1 else -1

    if dx >= dy:
        lo, hi = _major_range(x0, sx, dx, None if bounds is None else bounds[0])
        for major, minor in _walk(dx, dy, lo, hi):
            yield x0 + sx * major, y0 + sy * minor
    else:
        lo, hi = _major_range(y0, sy, dy, None if bounds is None else bounds[1])
        for major, minor in _walk(dy, dx, lo, hi):
            yield x0 + sx * minor, y0 + sy * major


def _major_range(start: int, step: int, length: int, extent: int | None) -> tuple[int, int]:
    if extent is None:
        return 0, length
    if step > 0:
        return max(0, -start), min(length, extent - 1 - start)
    return max(0, start - (extent - 1)), min(length, start)


def _walk(major_len: int, minor_len: int, lo: int, hi: int) -> Iterator[tuple[int, int]]:
    # minor(k) = floor((2 * k * minor_len + major_len) / (2 * major_len)); err is the remainder.
    if lo > hi:
        return
    if major_len == 0:
        yield 0, 0
        return
    two_major = 2 * major_len
    two_minor = 2 * minor_len
    minor, err = divmod(lo * two_minor + major_len, two_major)
    for k in range(lo, hi + 1):
        yield k, minor
        err += two_minor
        if err >= two_major:
            err -= two_major
            minor += 1


def draw_line(canvas: Canvas, p0: PixelPoint, p1: PixelPoint, color: RGBA) -> None:
    # Segments whose bounding box misses the canvas cannot write anything.
    if max(p0.x, p1.x) < 0 or min(p0.x, p1.x) >= canvas.width:
        return
    if max(p0.y, p1.y) < 0 or min(p0.y, p1.y) >= canvas.height:
        return
    for x, y in line_pixels(p0.x, p0.y, p1.x, p1.y, bounds=(canvas.width, canvas.height)):
        canvas.set_pixel(x, y, color)


def draw_polyline(canvas: Canvas, points: Sequence[PixelPoint | tuple[float, float]], color: RGBA) -> None:
    """Connect consecutive points with 1-pixel segments.

    Float coordinates are rounded half-to-even before drawing. Fewer than two
    points draws nothing.
    """
    if len(points) < 2:
        return
    color = validate_color(color)
    pixels = [to_pixel_point(p) for p in points]
    for i in range(1, len(pixels)):
        draw_line(canvas, pixels[i - 1], pixels[i], color)
