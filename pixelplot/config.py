from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib
from typing import Any

from pixelplot.errors import ConfigError, InvalidDimension
from pixelplot.raster.canvas import DEFAULT_HEIGHT, DEFAULT_WIDTH
from pixelplot.series import BLACK, GREEN, RGBA, validate_color


ORIGIN_BOTTOM_LEFT = "bottom_left"
ORIGIN_TOP_LEFT = "top_left"
_ORIGINS = {ORIGIN_BOTTOM_LEFT, ORIGIN_TOP_LEFT}
_KNOWN_KEYS = {"width", "height", "background", "foreground", "origin"}


@dataclass(frozen=True)
class PlotConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background: RGBA = BLACK
    foreground: RGBA = GREEN
    origin: str = ORIGIN_BOTTOM_LEFT

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or isinstance(self.height, bool):
            raise InvalidDimension("width/height must be integers")
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise InvalidDimension("width/height must be integers")
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(f"width/height must be > 0, got {self.width}x{self.height}")
        try:
            object.__setattr__(self, "background", validate_color(tuple(self.background), "background"))
            object.__setattr__(self, "foreground", validate_color(tuple(self.foreground), "foreground"))
        except (TypeError, ValueError) as exc:
            raise ConfigError(str(exc)) from exc
        if self.origin not in _ORIGINS:
            raise ConfigError(f"origin must be one of {sorted(_ORIGINS)}, got {self.origin!r}")

    def with_size(self, width: int | None = None, height: int | None = None) -> "PlotConfig":
        return replace(
            self,
            width=self.width if width is None else width,
            height=self.height if height is None else height,
        )


def load_config(path: str | Path) -> PlotConfig:
    """Read a ``[plot]`` table from a TOML file; absent keys keep their defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    table = raw.get("plot", {})
    if not isinstance(table, dict):
        raise ConfigError("`plot` must be a table")
    return config_from_mapping(table)


def config_from_mapping(table: dict[str, Any]) -> PlotConfig:
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown plot config keys: {', '.join(unknown)}")
    kwargs: dict[str, Any] = {}
    for key in ("width", "height"):
        if key in table:
            kwargs[key] = table[key]
    for key in ("background", "foreground"):
        if key in table:
            kwargs[key] = _coerce_color(table[key], key)
    if "origin" in table:
        kwargs["origin"] = str(table["origin"])
    return PlotConfig(**kwargs)


def _coerce_color(value: Any, label: str) -> RGBA:
    if not isinstance(value, list) or len(value) not in (3, 4):
        raise ConfigError(f"{label} must be a list of 3 or 4 integers")
    if not all(isinstance(c, int) and not isinstance(c, bool) for c in value):
        raise ConfigError(f"{label} must contain only integers")
    channels = list(value) + [255] * (4 - len(value))
    return (channels[0], channels[1], channels[2], channels[3])
