import tempfile
import unittest
from pathlib import Path

from pcmpaint.audio import load_payload
from pcmpaint.errors import PayloadTooLargeError


class TestLoadPayload(unittest.TestCase):
    def _write(self, td, data: bytes) -> Path:
        path = Path(td) / "clip.raw"
        path.write_bytes(data)
        return path

    def test_zero_padded(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            buf = load_payload(self._write(td, b"\x10\x20\x30"), 8)
        self.assertEqual(buf, b"\x10\x20\x30" + bytes(5))

    def test_exact_capacity(self) -> None:
        data = bytes(range(16))
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(load_payload(self._write(td, data), 16), data)

    def test_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(load_payload(self._write(td, b""), 4), bytes(4))

    def test_too_large(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(PayloadTooLargeError) as cm:
                load_payload(self._write(td, bytes(19)), 16)
        err = cm.exception
        self.assertEqual((err.size, err.capacity, err.overflow), (19, 16, 3))
        self.assertIn("19 bytes", str(err))
        self.assertIn("16", str(err))

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                load_payload(Path(td) / "nope.raw", 16)


if __name__ == "__main__":
    unittest.main()
