from __future__ import annotations

import math
from pathlib import Path

from pixelplot import PlotModel
from pixelplot.config import PlotConfig
from pixelplot.present import FramePublisher, PngTarget


def main() -> None:
    config = PlotConfig(width=256, height=128)
    model = PlotModel.from_config(config)
    for i in range(33):
        x = i / 4.0
        model.add_point(x, math.sin(x))

    out = Path(__file__).with_name("sine_polyline.png")
    publisher = FramePublisher(model, PngTarget(out), origin=config.origin)
    frame = publisher.publish()
    publisher.stop()
    print(f"wrote {out} ({frame.width}x{frame.height}, points={len(model)})")


if __name__ == "__main__":
    main()
