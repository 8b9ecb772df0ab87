import tempfile
import unittest
from pathlib import Path

import numpy as np

from pcmpaint.errors import ContainerFormatError, OffPaletteColourError
from pcmpaint.masks import build_masks, round_trip_masks

PALETTE = [(0, 0, 0), (0, 0, 255), (0, 255, 0), (255, 0, 0)]


def pixels_from(indices) -> np.ndarray:
    return np.asarray(PALETTE, dtype=np.uint8)[np.asarray(indices)]


class TestBuildMasks(unittest.TestCase):
    def test_partition(self) -> None:
        rng = np.random.default_rng(1)
        idx = rng.integers(0, 4, size=(6, 8))
        masks = build_masks(pixels_from(idx), PALETTE)
        self.assertEqual(masks.shape, (4, 48))
        self.assertTrue((masks.sum(axis=0) == 1).all())
        self.assertTrue(np.array_equal(masks.argmax(axis=0), idx.ravel()))

    def test_row_major_order(self) -> None:
        masks = build_masks(pixels_from([[0, 0, 0, 1], [2, 0, 0, 3]]), PALETTE)
        self.assertEqual(masks[1].tolist(), [0, 0, 0, 1, 0, 0, 0, 0])
        self.assertEqual(masks[2].tolist(), [0, 0, 0, 0, 1, 0, 0, 0])
        self.assertEqual(masks[3].tolist(), [0, 0, 0, 0, 0, 0, 0, 1])

    def test_off_palette_colour(self) -> None:
        pixels = pixels_from([[0, 1, 2, 3], [3, 2, 1, 0]])
        pixels[1, 2] = (7, 7, 7)
        with self.assertRaises(OffPaletteColourError) as cm:
            build_masks(pixels, PALETTE)
        self.assertEqual(cm.exception.position, (2, 1))
        self.assertEqual(cm.exception.colour, (7, 7, 7))


class TestRoundTrip(unittest.TestCase):
    def test_physical_order_is_bottom_up(self) -> None:
        idx = np.array([[0, 1, 2, 3], [1, 1, 1, 1], [3, 3, 0, 0]])
        masks = build_masks(pixels_from(idx), PALETTE)
        with tempfile.TemporaryDirectory() as td:
            paths = [Path(td) / f"mask-{i:02b}.bmp" for i in range(4)]
            physical = round_trip_masks(masks, 4, 3, paths)
            self.assertTrue(all(p.exists() for p in paths))

        expected = np.flipud(idx).ravel()
        for m, data in enumerate(physical):
            self.assertEqual(len(data), 12)
            self.assertEqual([b > 0 for b in data], (expected == m).tolist())

    def test_padded_rows_rejected(self) -> None:
        idx = np.array([[0, 1, 2, 3, 0, 1]])
        masks = build_masks(pixels_from(idx), PALETTE)
        with tempfile.TemporaryDirectory() as td:
            paths = [Path(td) / f"mask-{i:02b}.bmp" for i in range(4)]
            with self.assertRaises(ContainerFormatError):
                round_trip_masks(masks, 6, 1, paths)

    def test_log_called_per_mask(self) -> None:
        masks = build_masks(pixels_from([[0, 1, 2, 3]]), PALETTE)
        lines = []
        with tempfile.TemporaryDirectory() as td:
            paths = [Path(td) / f"m{i}.bmp" for i in range(4)]
            round_trip_masks(masks, 4, 1, paths, log=lines.append)
        self.assertEqual(len(lines), 4)


if __name__ == "__main__":
    unittest.main()
