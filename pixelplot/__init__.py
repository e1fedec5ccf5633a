from pixelplot.config import PlotConfig, load_config
from pixelplot.errors import ConfigError, InvalidDimension, InvalidPoint, PixelPlotError
from pixelplot.model import PlotModel
from pixelplot.raster import Canvas, draw_polyline
from pixelplot.series import PixelPoint, Point2D

__all__ = [
    "Canvas",
    "ConfigError",
    "InvalidDimension",
    "InvalidPoint",
    "PixelPlotError",
    "PixelPoint",
    "PlotConfig",
    "PlotModel",
    "Point2D",
    "draw_polyline",
    "load_config",
]
