from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

import numpy as np

from pixelplot.errors import InvalidPoint
from pixelplot.raster import Canvas, draw_polyline
from pixelplot.scales import normalize_points
from pixelplot.series import GREEN, RGBA, Point2D, validate_color

if TYPE_CHECKING:
    from pixelplot.config import PlotConfig

LOGGER = logging.getLogger(__name__)


class PlotModel:
    """Ordered user-space points plus the canvas that always mirrors them.

    Every mutation recomputes the whole frame: the canvas is cleared, the
    points are rescaled to fill it and the polyline is drawn again. With
    fewer than two points the canvas is left cleared.
    """

    def __init__(self, canvas: Canvas | None = None, foreground: RGBA = GREEN) -> None:
        self._canvas = canvas if canvas is not None else Canvas()
        self._foreground = validate_color(foreground, "foreground")
        self._points: list[Point2D] = []
        self._lock = threading.RLock()
        self._canvas.clear()

    @classmethod
    def from_config(cls, config: "PlotConfig") -> "PlotModel":
        canvas = Canvas(config.width, config.height, background=config.background)
        return cls(canvas=canvas, foreground=config.foreground)

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def foreground(self) -> RGBA:
        return self._foreground

    @property
    def points(self) -> tuple[Point2D, ...]:
        with self._lock:
            return tuple(self._points)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def add_point(self, x: float, y: float) -> Point2D:
        if isinstance(x, (str, bytes)) or isinstance(y, (str, bytes)):
            raise InvalidPoint(f"point coordinates must be numbers, not text: ({x!r}, {y!r})")
        try:
            fx = float(x)
            fy = float(y)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidPoint(f"point coordinates must be numbers: ({x!r}, {y!r})") from exc
        point = Point2D(fx, fy)
        if not point.is_finite():
            raise InvalidPoint(f"point coordinates must be finite: ({fx!r}, {fy!r})")
        with self._lock:
            self._points.append(point)
            self.redraw()
        return point

    def remove_last(self) -> Point2D | None:
        with self._lock:
            if not self._points:
                return None
            point = self._points.pop()
            self.redraw()
            return point

    def clear(self) -> None:
        with self._lock:
            self._points.clear()
            self._canvas.clear()

    def redraw(self) -> None:
        with self._lock:
            if len(self._points) < 2:
                self._canvas.clear()
                return
            normalized = normalize_points(self._points, self._canvas.width, self._canvas.height)
            self._canvas.clear()
            draw_polyline(self._canvas, normalized, self._foreground)
            LOGGER.debug(
                "redrew %d points onto %dx%d canvas",
                len(self._points),
                self._canvas.width,
                self._canvas.height,
            )

    def normalized_points(self) -> list[tuple[float, float]]:
        with self._lock:
            return normalize_points(self._points, self._canvas.width, self._canvas.height)

    def snapshot(self) -> np.ndarray:
        with self._lock:
            return self._canvas.snapshot()
