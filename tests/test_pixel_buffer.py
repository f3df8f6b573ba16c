from __future__ import annotations

import unittest

import torch

from rasterkit.core.pixel_buffer import PixelBuffer


class PixelBufferTests(unittest.TestCase):
    def test_new_buffer_is_zeroed(self) -> None:
        buf = PixelBuffer(4, 3)
        self.assertEqual(len(buf), 12)
        self.assertEqual(tuple(buf.pixels.shape), (12,))
        self.assertEqual(int(buf.pixels.sum().item()), 0)

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            PixelBuffer(0, 3)
        with self.assertRaises(ValueError):
            PixelBuffer(3, -1)

    def test_fill_sets_every_pixel(self) -> None:
        buf = PixelBuffer(3, 2)
        buf.fill(0x123456)
        self.assertTrue(torch.all(buf.pixels == 0x123456))

    def test_index_is_row_major(self) -> None:
        buf = PixelBuffer(5, 4)
        self.assertEqual(buf.index(2, 3), 17)
        buf.write(torch.tensor([17]), 0xABCDEF)
        self.assertEqual(buf.get(2, 3), 0xABCDEF)
        self.assertEqual(int(buf.as_grid()[3, 2].item()), 0xABCDEF)

    def test_get_out_of_range_raises(self) -> None:
        buf = PixelBuffer(2, 2)
        self.assertFalse(buf.contains(2, 0))
        with self.assertRaises(IndexError):
            buf.get(2, 0)
        with self.assertRaises(IndexError):
            buf.get(0, -1)

    def test_write_reports_count_and_rejects_bad_color(self) -> None:
        buf = PixelBuffer(4, 4)
        self.assertEqual(buf.write(torch.tensor([0, 5, 15]), 7), 3)
        self.assertEqual(buf.write(torch.empty(0, dtype=torch.int64), 7), 0)
        with self.assertRaises(ValueError):
            buf.write(torch.tensor([1]), 0x1000000)

    def test_snapshot_is_detached_copy(self) -> None:
        buf = PixelBuffer(2, 2)
        snap = buf.snapshot()
        buf.fill(9)
        self.assertEqual(int(snap.sum().item()), 0)

    def test_from_grid_preserves_layout(self) -> None:
        grid = torch.arange(6, dtype=torch.int32).view(2, 3)
        buf = PixelBuffer.from_grid(grid)
        self.assertEqual((buf.width, buf.height), (3, 2))
        self.assertEqual(buf.get(2, 1), 5)
        with self.assertRaises(ValueError):
            PixelBuffer.from_grid(torch.zeros(6, dtype=torch.int32))


if __name__ == "__main__":
    unittest.main()
