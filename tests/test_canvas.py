from __future__ import annotations

import unittest

import numpy as np

from pixelplot.errors import InvalidDimension
from pixelplot.raster.canvas import Canvas


GREEN = (0, 255, 0, 255)


class CanvasTests(unittest.TestCase):
    def test_new_canvas_is_opaque_black(self) -> None:
        canvas = Canvas(4, 3)
        snap = canvas.snapshot()
        self.assertEqual(snap.shape, (3, 4, 4))
        self.assertEqual(snap.dtype, np.uint8)
        self.assertTrue(np.all(snap[:, :, :3] == 0))
        self.assertTrue(np.all(snap[:, :, 3] == 255))

    def test_default_size_is_512_square(self) -> None:
        canvas = Canvas()
        self.assertEqual((canvas.width, canvas.height), (512, 512))

    def test_non_positive_dimensions_rejected(self) -> None:
        for width, height in ((0, 10), (10, 0), (-1, 5), (5, -3)):
            with self.assertRaises(InvalidDimension):
                Canvas(width, height)

    def test_non_integer_dimensions_rejected(self) -> None:
        with self.assertRaises(InvalidDimension):
            Canvas(10.5, 10)  # type: ignore[arg-type]

    def test_set_pixel_writes_row_major(self) -> None:
        canvas = Canvas(5, 4)
        canvas.set_pixel(3, 1, GREEN)
        snap = canvas.snapshot()
        self.assertEqual(snap[1, 3].tolist(), list(GREEN))
        self.assertEqual(canvas.get_pixel(3, 1), GREEN)
        self.assertEqual(int(np.count_nonzero(snap[:, :, 1])), 1)

    def test_out_of_bounds_writes_are_dropped(self) -> None:
        canvas = Canvas(5, 4)
        before = canvas.snapshot()
        for x, y in ((-1, 0), (0, -1), (5, 0), (0, 4), (100, 100), (-50, 2)):
            canvas.set_pixel(x, y, GREEN)
        after = canvas.snapshot()
        self.assertEqual(after.shape, (4, 5, 4))
        self.assertTrue(np.array_equal(before, after))

    def test_clear_is_idempotent(self) -> None:
        canvas = Canvas(6, 6)
        canvas.set_pixel(2, 2, GREEN)
        canvas.clear()
        once = canvas.snapshot()
        canvas.clear()
        twice = canvas.snapshot()
        self.assertTrue(np.array_equal(once, twice))
        self.assertTrue(np.array_equal(once, Canvas(6, 6).snapshot()))

    def test_clear_with_explicit_color(self) -> None:
        canvas = Canvas(3, 2)
        canvas.clear((10, 20, 30, 255))
        self.assertTrue(np.all(canvas.snapshot() == np.asarray([10, 20, 30, 255], dtype=np.uint8)))

    def test_custom_background_is_used_by_clear(self) -> None:
        canvas = Canvas(3, 3, background=(255, 255, 255, 255))
        canvas.set_pixel(1, 1, GREEN)
        canvas.clear()
        self.assertTrue(np.all(canvas.snapshot() == 255))

    def test_snapshot_is_detached_copy(self) -> None:
        canvas = Canvas(3, 3)
        snap = canvas.snapshot()
        canvas.set_pixel(0, 0, GREEN)
        self.assertEqual(snap[0, 0].tolist(), [0, 0, 0, 255])
        snap[1, 1] = 7
        self.assertEqual(canvas.get_pixel(1, 1), (0, 0, 0, 255))

    def test_rgba_bytes_layout(self) -> None:
        canvas = Canvas(4, 2)
        canvas.set_pixel(1, 0, GREEN)
        raw = canvas.to_rgba_bytes()
        self.assertEqual(len(raw), 4 * 2 * 4)
        self.assertEqual(tuple(raw[4:8]), GREEN)
        self.assertTrue(all(raw[i] == 255 for i in range(3, len(raw), 4)))

    def test_malformed_colors_rejected(self) -> None:
        canvas = Canvas(2, 2)
        with self.assertRaises(ValueError):
            canvas.clear((0, 0, 0))  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            canvas.clear((0, 0, 256, 255))

    def test_set_pixel_rejects_malformed_colors(self) -> None:
        canvas = Canvas(2, 2)
        with self.assertRaises(ValueError):
            canvas.set_pixel(0, 0, (300, 0, 0, 255))
        with self.assertRaises(ValueError):
            canvas.set_pixel(1, 1, (0, 0, 0))  # type: ignore[arg-type]
        self.assertTrue(np.array_equal(canvas.snapshot(), Canvas(2, 2).snapshot()))

    def test_get_pixel_outside_raises(self) -> None:
        with self.assertRaises(IndexError):
            Canvas(2, 2).get_pixel(2, 0)


if __name__ == "__main__":
    unittest.main()
