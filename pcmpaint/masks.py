"""
Per-colour masks, first in logical row-major order, then re-read from disk
so they come back in the BMP's physical pixel order.
"""

import numpy as np

from .bmp import read_pixel_data, save_indexed
from .errors import ContainerFormatError, OffPaletteColourError

MASK_PALETTE = [(0, 0, 0), (255, 255, 255)]


def build_masks(pixels: np.ndarray, palette) -> np.ndarray:
    """
    Returns a (len(palette), height * width) uint8 array; masks[i][y * width + x]
    is 1 where pixel (x, y) has palette colour i.
    """
    height, width = pixels.shape[:2]
    flat = pixels.reshape(-1, 3)
    masks = np.zeros((len(palette), height * width), dtype=np.uint8)
    for i, colour in enumerate(palette):
        masks[i] = np.all(flat == np.asarray(colour, dtype=flat.dtype), axis=1)

    covered = masks.any(axis=0)
    if not covered.all():
        idx = int(np.argmin(covered))
        y, x = divmod(idx, width)
        raise OffPaletteColourError((x, y), tuple(int(c) for c in flat[idx]))
    return masks


def round_trip_masks(masks, width: int, height: int, paths, log=None):
    """
    Save each mask as a 2-colour 8bpp BMP and read the pixel data back, so the
    bytes come out in the order the format stores them.
    """
    if len(paths) != len(masks):
        raise ValueError(f"{len(masks)} masks but {len(paths)} output paths")

    for mask, path in zip(masks, paths):
        save_indexed(path, mask.tobytes(), width, height, MASK_PALETTE)
        if log:
            log(f"Wrote mask {path}")

    physical = []
    for path in paths:
        data = read_pixel_data(path)
        if len(data) != width * height:
            raise ContainerFormatError(
                f"{path}: pixel data is {len(data)} bytes, expected {width * height} (row padding?)"
            )
        physical.append(data)
    return physical
