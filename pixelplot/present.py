from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from pathlib import Path

import numpy as np
from PIL import Image
import torch

from pixelplot.config import ORIGIN_BOTTOM_LEFT, ORIGIN_TOP_LEFT
from pixelplot.model import PlotModel

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayFrame:
    revision: int
    width: int
    height: int
    rgba: torch.Tensor

    def to_numpy(self) -> np.ndarray:
        return self.rgba.numpy()


class RenderTarget(ABC):
    @abstractmethod
    def start(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def present_frame(self, frame: DisplayFrame) -> None:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError


class HeadlessTarget(RenderTarget):
    """Keeps the newest frame in memory; used by tests and the CLI without an output file."""

    def __init__(self) -> None:
        self.started = False
        self.frames_presented = 0
        self.last_frame: DisplayFrame | None = None

    def start(self) -> None:
        self.started = True

    def present_frame(self, frame: DisplayFrame) -> None:
        if not self.started:
            raise RuntimeError("headless target not started")
        self.frames_presented += 1
        self.last_frame = frame

    def stop(self) -> None:
        self.started = False


class PngTarget(RenderTarget):
    """Writes every presented frame to one PNG path, replacing the previous image."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.started = False
        self.frames_presented = 0

    def start(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.started = True

    def present_frame(self, frame: DisplayFrame) -> None:
        if not self.started:
            raise RuntimeError("png target not started")
        save_png(frame, self.path)
        self.frames_presented += 1

    def stop(self) -> None:
        self.started = False


def save_png(frame: DisplayFrame, path: str | Path) -> Path:
    out = Path(path)
    image = Image.fromarray(np.ascontiguousarray(frame.to_numpy()))
    image.save(out, format="PNG")
    return out


def orient_rows(rgba: np.ndarray, origin: str) -> np.ndarray:
    """Reorder canvas rows for display; ``bottom_left`` puts pixel row 0 at the bottom."""
    if origin == ORIGIN_TOP_LEFT:
        return rgba
    if origin == ORIGIN_BOTTOM_LEFT:
        return rgba[::-1]
    raise ValueError(f"unsupported origin: {origin!r}")


class FramePublisher:
    """Hands consistent model snapshots to a render target, one revision per publish."""

    def __init__(self, model: PlotModel, target: RenderTarget, origin: str = ORIGIN_BOTTOM_LEFT) -> None:
        if origin not in (ORIGIN_BOTTOM_LEFT, ORIGIN_TOP_LEFT):
            raise ValueError(f"unsupported origin: {origin!r}")
        self._model = model
        self._target = target
        self._origin = origin
        self._revision = 0
        self._started = False

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def target(self) -> RenderTarget:
        return self._target

    def start(self) -> None:
        if self._started:
            return
        self._target.start()
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        self._target.stop()
        self._started = False

    def publish(self) -> DisplayFrame:
        if not self._started:
            self.start()
        with self._model.lock:
            snapshot = self._model.snapshot()
            point_count = len(self._model)
        oriented = np.ascontiguousarray(orient_rows(snapshot, self._origin))
        self._revision += 1
        frame = DisplayFrame(
            revision=self._revision,
            width=self._model.canvas.width,
            height=self._model.canvas.height,
            rgba=torch.from_numpy(oriented),
        )
        self._target.present_frame(frame)
        LOGGER.debug("published frame revision=%d points=%d", frame.revision, point_count)
        return frame
