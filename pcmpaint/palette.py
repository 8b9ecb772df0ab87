"""
Colour handling for the source image: decoding to RGB, collecting the four
palette colours, the width check, and tiling the palette into a 256-entry
colour table.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from .errors import PaletteSizeError, UnalignedWidthError

PALETTE_SIZE = 4
PADDING = 4  # BMP rows are padded to 4 bytes; at 8bpp this is 4 pixels
TABLE_SIZE = 256


def load_rgb(path) -> np.ndarray:
    """Decode an image file into a (height, width, 3) uint8 array."""
    img = Image.open(Path(path))
    if img.mode != "RGB":
        img = img.convert("RGB")
    return np.asarray(img, dtype=np.uint8)


def extract_palette(pixels: np.ndarray):
    """
    Collapse every colour in the image into a list of exactly four (R, G, B)
    tuples, sorted by channel so the mask order is the same on every run.
    """
    unique = np.unique(pixels.reshape(-1, 3), axis=0)
    if len(unique) != PALETTE_SIZE:
        raise PaletteSizeError(len(unique), PALETTE_SIZE)
    return [tuple(int(c) for c in colour) for colour in unique]


def check_width(width: int):
    if width % PADDING != 0:
        raise UnalignedWidthError(width, PADDING)


def tile_palette(palette, size: int = TABLE_SIZE):
    """Repeat the palette so that table[i] == palette[i % len(palette)]."""
    return [tuple(palette[i % len(palette)]) for i in range(size)]


def flatten_palette(colours):
    """Flat [r, g, b, r, g, b, ...] list as Image.putpalette() wants it."""
    flat = []
    for (r, g, b) in colours:
        flat.extend([r, g, b])
    return flat
