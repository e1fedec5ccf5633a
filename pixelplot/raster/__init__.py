from .canvas import DEFAULT_HEIGHT, DEFAULT_WIDTH, Canvas, new_buffer
from .draw_lines import draw_line, draw_polyline, line_pixels, round_half_even, to_pixel_point

__all__ = [
    "Canvas",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "draw_line",
    "draw_polyline",
    "line_pixels",
    "new_buffer",
    "round_half_even",
    "to_pixel_point",
]
