from __future__ import annotations


class PixelPlotError(Exception):
    """Base error for pixelplot."""


class InvalidDimension(PixelPlotError, ValueError):
    pass


class InvalidPoint(PixelPlotError, ValueError):
    pass


class ConfigError(PixelPlotError, ValueError):
    pass
