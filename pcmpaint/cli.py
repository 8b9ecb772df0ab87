#!/usr/bin/env python3
"""
python -m pcmpaint \
  images/four_colours.png \
  audio/clip_u8.raw \
  --out-dir output
"""

import argparse
import sys

from .errors import PcmPaintError
from .pipeline import DEFAULT_OUT_DIR, run


def build_parser():
    p = argparse.ArgumentParser(
        prog="pcmpaint",
        description="Hide raw 8-bit audio in the palette indices of a 4-colour 8bpp BMP.",
    )
    p.add_argument("image_path", help="Source image using exactly 4 colours (width a multiple of 4)")
    p.add_argument("audio_path", help="Raw audio file, at most width*height bytes")
    p.add_argument("--out-dir", default=DEFAULT_OUT_DIR, help="Directory for mask-*.bmp and final.bmp")
    p.add_argument("--quiet", action="store_true", help="Only print the final line")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        result = run(args.image_path, args.audio_path, out_dir=args.out_dir, verbose=not args.quiet)
    except (PcmPaintError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"done! check {result.final_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
