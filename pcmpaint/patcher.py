"""
Write the final artifact: an 8bpp BMP whose colour table is the 4-colour
palette repeated 64 times and whose pixel data is the painted buffer.

Pillow has no way to write raw indices against a table in the on-disk
order we already computed, so we save an all-zero placeholder to get a valid
header and then overwrite its pixel-data region in place.
"""

from pathlib import Path

from .bmp import parse_header, save_indexed
from .errors import ContainerFormatError
from .palette import TABLE_SIZE, tile_palette


def patch_pixel_data(bmp_bytes: bytearray, painted: bytes):
    """Overwrite the pixel-data region of `bmp_bytes`. Returns (start, length)."""
    header = parse_header(bytes(bmp_bytes))
    start = header.image_data_start
    expected = header.image_data_len

    # both must hold or the painted order no longer matches the file
    if len(painted) != expected:
        raise ContainerFormatError(
            f"painted buffer is {len(painted)} bytes but the bitmap holds {expected} bytes of pixel data"
        )
    if len(bmp_bytes) - start != expected:
        raise ContainerFormatError(
            f"{len(bmp_bytes) - start} bytes follow the pixel-data offset 0x{start:X}, expected {expected}"
        )

    bmp_bytes[start : start + expected] = painted
    return start, expected


def save_painted_bitmap(painted: bytes, palette, path, width: int, height: int):
    path = Path(path)
    table = tile_palette(palette, TABLE_SIZE)

    # save & reload an empty bitmap to give us a valid header to work with
    save_indexed(path, bytes(width * height), width, height, table)
    bmp_bytes = bytearray(path.read_bytes())

    start, count = patch_pixel_data(bmp_bytes, painted)
    path.write_bytes(bmp_bytes)
    return start, count
