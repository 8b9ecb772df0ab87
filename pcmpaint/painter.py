"""Merge mask ids into the low two bits of the audio bytes."""

import numpy as np

from .errors import MaskCoverageError

AUDIO_KEEP_MASK = 0xFC


def paint(audio: bytes, masks) -> bytes:
    """
    Output byte i = (audio[i] & 0xFC) | m, where m is the id of the mask that
    is non-zero at i. When several masks are set the lowest id wins.
    """
    samples = np.frombuffer(bytes(audio), dtype=np.uint8)
    planes = [np.frombuffer(bytes(m), dtype=np.uint8) for m in masks]
    for m, plane in enumerate(planes):
        if len(plane) != len(samples):
            raise MaskCoverageError(
                min(len(plane), len(samples)),
                f"mask {m} has {len(plane)} bytes but audio buffer has {len(samples)}",
            )

    active = np.stack(planes) > 0
    covered = active.any(axis=0)
    if not covered.all():
        raise MaskCoverageError(int(np.argmin(covered)))

    mask_idx = active.argmax(axis=0).astype(np.uint8)
    return ((samples & AUDIO_KEEP_MASK) | mask_idx).astype(np.uint8).tobytes()
