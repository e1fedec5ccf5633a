from __future__ import annotations

from dataclasses import dataclass
import math


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
GREEN: RGBA = (0, 255, 0, 255)


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class PixelPoint:
    x: int
    y: int


def validate_color(color: RGBA, label: str = "color") -> RGBA:
    if len(color) != 4:
        raise ValueError(f"{label} must have 4 channels (RGBA)")
    out = tuple(int(c) for c in color)
    for channel in out:
        if channel < 0 or channel > 255:
            raise ValueError(f"{label} channels must be in [0, 255]: {tuple(color)!r}")
    return out  # type: ignore[return-value]
