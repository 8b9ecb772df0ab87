"""Errors raised by the pcmpaint pipeline. All of them are fatal."""


class PcmPaintError(Exception):
    """Base class for pipeline errors."""


class PaletteSizeError(PcmPaintError):
    """Source image does not use exactly four colours."""
    def __init__(self, count: int, expected: int = 4):
        self.count = count
        self.expected = expected
        super().__init__(f"image must use exactly {expected} colours (found {count})")


class UnalignedWidthError(PcmPaintError):
    """Image width is not a multiple of the row padding unit."""
    def __init__(self, width: int, padding: int = 4):
        self.width = width
        self.padding = padding
        self.trim = width % padding
        super().__init__(
            f"image width must be a multiple of {padding} (got {width}). "
            f"try removing {self.trim} pixels from the vertical edge(s)"
        )


class OffPaletteColourError(PcmPaintError):
    def __init__(self, position, colour):
        self.position = position
        self.colour = colour
        x, y = position
        super().__init__(f"off-palette colour {colour} in source image at ({x}, {y})")


class PayloadTooLargeError(PcmPaintError):
    """Audio file holds more bytes than the image has pixels."""
    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        self.overflow = size - capacity
        super().__init__(
            f"audio file is too large ({size} bytes, {self.overflow} over). "
            f"ensure audio has no more than {capacity} samples/bytes"
        )


class MaskCoverageError(PcmPaintError):
    """No mask is active at a pixel position, or the masks do not line up with the audio."""
    def __init__(self, index: int, message: str = ""):
        self.index = index
        super().__init__(message or f"no mask covers byte at index {index}")


class ContainerFormatError(PcmPaintError):
    """Encoding or parsing a bitmap failed."""
    pass
