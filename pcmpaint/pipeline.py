"""
End-to-end encode: 4-colour image + raw audio -> output/final.bmp

    palette -> width check -> masks -> BMP round trip -> audio -> paint -> patch
"""

from dataclasses import dataclass
from pathlib import Path

from . import audio, masks, painter, palette, patcher

DEFAULT_OUT_DIR = "output"
MASK_NAME = "mask-{:02b}.bmp"
FINAL_NAME = "final.bmp"


@dataclass(frozen=True)
class OutputLayout:
    out_dir: Path = Path(DEFAULT_OUT_DIR)

    def mask_path(self, i: int) -> Path:
        return Path(self.out_dir) / MASK_NAME.format(i)

    @property
    def mask_paths(self):
        return [self.mask_path(i) for i in range(palette.PALETTE_SIZE)]

    @property
    def final_path(self) -> Path:
        return Path(self.out_dir) / FINAL_NAME

    def create(self):
        Path(self.out_dir).mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class Result:
    final_path: Path
    palette: list
    width: int
    height: int
    audio_len: int
    data_start: int
    data_len: int


def run(image_path, audio_path, out_dir=DEFAULT_OUT_DIR, verbose: bool = False) -> Result:
    log = print if verbose else None
    layout = OutputLayout(Path(out_dir))

    pixels = palette.load_rgb(image_path)
    height, width = pixels.shape[:2]
    colours = palette.extract_palette(pixels)
    palette.check_width(width)
    if log:
        log(f"Image {width}x{height}, palette {colours}")

    capacity = width * height
    payload = audio.load_payload(audio_path, capacity)
    audio_len = Path(audio_path).stat().st_size

    logical = masks.build_masks(pixels, colours)
    layout.create()
    # reload the masks from disk so we get the bytes in the order the BMP stores them
    physical = masks.round_trip_masks(logical, width, height, layout.mask_paths, log=log)

    painted = painter.paint(payload, physical)
    if log:
        log(f"Painted {audio_len} audio bytes into {capacity} pixels ({capacity - audio_len} bytes of silence)")

    start, count = patcher.save_painted_bitmap(painted, colours, layout.final_path, width, height)
    if log:
        log(f"Patched {count} bytes at offset 0x{start:X} -> {layout.final_path}")

    return Result(
        final_path=layout.final_path,
        palette=colours,
        width=width,
        height=height,
        audio_len=audio_len,
        data_start=start,
        data_len=count,
    )
