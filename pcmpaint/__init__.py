"""Pack raw audio into the palette indices of a 4-colour bitmap."""

from .errors import (
    ContainerFormatError,
    MaskCoverageError,
    OffPaletteColourError,
    PaletteSizeError,
    PayloadTooLargeError,
    PcmPaintError,
    UnalignedWidthError,
)
from .pipeline import OutputLayout, Result, run

__version__ = "0.1.0"
