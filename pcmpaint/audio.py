from pathlib import Path

from .errors import PayloadTooLargeError


def load_payload(path, capacity: int) -> bytes:
    """
    Read the audio file as raw bytes into a zero-filled buffer of `capacity`
    bytes. Nothing about the audio format is interpreted.
    """
    data = Path(path).read_bytes()
    if len(data) > capacity:
        raise PayloadTooLargeError(len(data), capacity)

    buf = bytearray(capacity)
    buf[: len(data)] = data
    return bytes(buf)
