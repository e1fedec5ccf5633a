from __future__ import annotations

from collections.abc import Iterable
import logging
import math
from typing import TextIO

from pixelplot.errors import InvalidPoint
from pixelplot.model import PlotModel
from pixelplot.present import FramePublisher, HeadlessTarget, PngTarget, save_png

LOGGER = logging.getLogger(__name__)

HELP_TEXT = "commands: add X Y | remove | clear | points | save PATH | help | quit"


def parse_coordinate(text: str) -> float:
    raw = text.strip()
    if not raw:
        raise InvalidPoint("empty coordinate")
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidPoint(f"invalid numeric format: {text!r}") from exc
    if not math.isfinite(value):
        raise InvalidPoint(f"coordinate must be finite: {text!r}")
    return value


class PlotControls:
    """Button-style adapter: parses text fields, mutates the model, republishes the frame."""

    def __init__(self, model: PlotModel, publisher: FramePublisher | None = None) -> None:
        self.model = model
        self.publisher = publisher or FramePublisher(model, HeadlessTarget())

    def start(self) -> None:
        self.publisher.start()
        self.publisher.publish()

    def stop(self) -> None:
        self.publisher.stop()

    def add_from_text(self, x_text: str, y_text: str) -> bool:
        try:
            x = parse_coordinate(x_text)
            y = parse_coordinate(y_text)
            self.model.add_point(x, y)
        except InvalidPoint as exc:
            LOGGER.warning("invalid numeric format: %s", exc)
            return False
        self.publisher.publish()
        return True

    def remove_last(self) -> None:
        self.model.remove_last()
        self.publisher.publish()

    def clear(self) -> None:
        self.model.clear()
        self.publisher.publish()


def run_session(controls: PlotControls, lines: Iterable[str], out: TextIO) -> int:
    """Drive ``controls`` from text commands; returns the number of commands handled."""
    handled = 0
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]
        handled += 1
        if command in ("quit", "exit"):
            break
        if command == "add":
            if len(args) != 2:
                print("usage: add X Y", file=out)
                continue
            if controls.add_from_text(args[0], args[1]):
                print(f"points={len(controls.model)}", file=out)
            else:
                print("invalid numeric format", file=out)
        elif command == "remove":
            controls.remove_last()
            print(f"points={len(controls.model)}", file=out)
        elif command == "clear":
            controls.clear()
            print("points=0", file=out)
        elif command == "points":
            for point in controls.model.points:
                print(f"{point.x:g} {point.y:g}", file=out)
        elif command == "save":
            if len(args) != 1:
                print("usage: save PATH", file=out)
                continue
            frame = controls.publisher.publish()
            path = save_png(frame, args[0])
            print(f"saved {path}", file=out)
        elif command == "help":
            print(HELP_TEXT, file=out)
        else:
            print(f"unknown command: {command}", file=out)
    return handled


def build_controls(model: PlotModel, out_path: str | None, origin: str) -> PlotControls:
    target = PngTarget(out_path) if out_path else HeadlessTarget()
    return PlotControls(model, FramePublisher(model, target, origin=origin))
