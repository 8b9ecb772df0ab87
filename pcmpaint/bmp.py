"""
Minimal BMP container support.

Writing goes through Pillow's BMP encoder so headers and colour tables are
whatever a real encoder produces. Reading only parses the header far
enough to find the pixel-data region, which is returned byte for byte in
the order it sits on disk (bottom-up rows for a positive height).
"""

import struct
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .errors import ContainerFormatError
from .palette import flatten_palette

SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
MIN_INFO_HEADER_SIZE = 40


@dataclass(frozen=True)
class BmpHeader:
    file_size: int
    image_data_start: int
    width: int
    height: int
    bits_per_pixel: int
    compression: int
    image_data_len: int
    colors_used: int

    @property
    def top_down(self) -> bool:
        return self.height < 0


def row_stride(width: int, bits_per_pixel: int) -> int:
    """Bytes per stored row, padded to a multiple of four."""
    return ((width * bits_per_pixel + 7) // 8 + 3) & ~3


def save_indexed(path, indices, width: int, height: int, palette):
    """
    Encode `indices` (row-major, one byte per pixel) as an 8bpp BMP with the
    given colour table. `palette` is a sequence of (R, G, B) with at most 256
    entries.
    """
    if len(palette) > 256:
        raise ContainerFormatError(f"colour table has {len(palette)} entries, max is 256")
    try:
        img = Image.frombytes("P", (width, height), bytes(indices))
        img.putpalette(flatten_palette(palette), rawmode="RGB")
        img.save(Path(path), format="BMP")
    except ValueError as e:
        raise ContainerFormatError(f"failed to encode {path}: {e}") from e


def parse_header(data: bytes) -> BmpHeader:
    if len(data) < FILE_HEADER_SIZE + MIN_INFO_HEADER_SIZE:
        raise ContainerFormatError(f"file too small to be a BMP ({len(data)} bytes)")

    signature, file_size, _, _, data_start = struct.unpack_from("<2sIHHI", data, 0)
    if signature != SIGNATURE:
        raise ContainerFormatError(f"invalid BMP signature {signature!r}")

    (info_size, width, height, planes, bpp, compression,
     image_size, _, _, colors_used) = struct.unpack_from("<IiiHHIIiiI", data, FILE_HEADER_SIZE)
    if info_size < MIN_INFO_HEADER_SIZE:
        raise ContainerFormatError(f"unsupported DIB header size {info_size}")
    if planes != 1:
        raise ContainerFormatError(f"invalid BMP: planes = {planes} (must be 1)")
    if compression != 0:
        raise ContainerFormatError(f"compressed BMP not supported (compression = {compression})")
    if width <= 0 or height == 0:
        raise ContainerFormatError(f"invalid BMP dimensions {width}x{height}")

    if image_size == 0:
        image_size = row_stride(width, bpp) * abs(height)
    if data_start + image_size > len(data):
        raise ContainerFormatError(
            f"pixel data at 0x{data_start:X} (+{image_size} bytes) runs past end of file ({len(data)} bytes)"
        )

    return BmpHeader(
        file_size=file_size,
        image_data_start=data_start,
        width=width,
        height=height,
        bits_per_pixel=bpp,
        compression=compression,
        image_data_len=image_size,
        colors_used=colors_used,
    )


def read_pixel_data(path) -> bytes:
    """Return the pixel-data region of a BMP file exactly as stored."""
    data = Path(path).read_bytes()
    header = parse_header(data)
    start = header.image_data_start
    return data[start : start + header.image_data_len]
