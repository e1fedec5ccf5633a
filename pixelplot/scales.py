from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from pixelplot.series import Point2D


@dataclass(frozen=True)
class DataBounds:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def x_degenerate(self) -> bool:
        return self.xmin == self.xmax

    @property
    def y_degenerate(self) -> bool:
        return self.ymin == self.ymax


def compute_bounds(points: Sequence[Point2D]) -> DataBounds:
    if not points:
        raise ValueError("cannot compute bounds of an empty point sequence")
    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))
    return DataBounds(
        xmin=float(np.min(xs)),
        xmax=float(np.max(xs)),
        ymin=float(np.min(ys)),
        ymax=float(np.max(ys)),
    )


def normalize_axis(values: np.ndarray, vmin: float, vmax: float, extent: int) -> np.ndarray:
    """Linearly map ``[vmin, vmax]`` onto pixel range ``[0, extent - 1]``.

    A zero-width range maps every value to ``extent / 2``.
    """
    # Halved operands keep the span finite for any pair of finite doubles.
    span = vmax * 0.5 - vmin * 0.5
    if vmin == vmax or span == 0.0:
        return np.full(values.shape, extent / 2.0, dtype=np.float64)
    t = (values * 0.5 - vmin * 0.5) / span
    np.clip(t, 0.0, 1.0, out=t)
    return t * float(extent - 1)


def normalize_points(
    points: Sequence[Point2D],
    width: int,
    height: int,
    bounds: DataBounds | None = None,
) -> list[tuple[float, float]]:
    """Map user-space points into pixel space, keeping insertion order."""
    if width <= 0 or height <= 0:
        raise ValueError("pixel extent width/height must be > 0")
    if not points:
        return []
    if bounds is None:
        bounds = compute_bounds(points)
    xs = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))
    px = normalize_axis(xs, bounds.xmin, bounds.xmax, width)
    py = normalize_axis(ys, bounds.ymin, bounds.ymax, height)
    return list(zip(px.tolist(), py.tolist(), strict=True))
