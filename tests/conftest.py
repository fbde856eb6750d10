"""
Pytest configuration and fixtures for orientkit tests.
"""
import io
import struct
import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image

SOI = b"\xff\xd8"
EOI = b"\xff\xd9"
ORIENTATION_TAG = 0x0112
SHORT = 3


def segment(marker: int, payload: bytes) -> bytes:
    """Build a JPEG marker segment; length covers itself and the payload."""
    return struct.pack(">HH", marker, len(payload) + 2) + payload


def app0_jfif() -> bytes:
    return segment(0xFFE0, b"JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00")


def tiff_block(entries, byte_order: bytes = b"II", ifd_offset: int = 8) -> bytes:
    """
    Build a TIFF header plus IFD0 holding ``entries``.

    ``entries`` are ``(tag, type, count, value)`` tuples with SHORT values
    left-justified in the value field.
    """
    fmt = "<" if byte_order == b"II" else ">"
    header = byte_order + struct.pack(f"{fmt}HI", 0x002A, ifd_offset)
    padding = b"\x00" * (ifd_offset - len(header))
    ifd = struct.pack(f"{fmt}H", len(entries))
    for tag, type_, count, value in entries:
        ifd += struct.pack(f"{fmt}HHIHH", tag, type_, count, value, 0)
    ifd += struct.pack(f"{fmt}I", 0)
    return header + padding + ifd


def app1_exif(tiff: bytes, exif_id: bytes = b"Exif") -> bytes:
    return segment(0xFFE1, exif_id + b"\x00\x00" + tiff)


def build_jpeg(
    orientation=None,
    byte_order: bytes = b"II",
    extra_tags=(),
    with_app0: bool = True,
) -> bytes:
    """Build a minimal JPEG stream with an Exif APP1 segment."""
    entries = [(tag, SHORT, 1, value) for tag, value in extra_tags]
    if orientation is not None:
        entries.append((ORIENTATION_TAG, SHORT, 1, orientation))
    data = SOI
    if with_app0:
        data += app0_jfif()
    data += app1_exif(tiff_block(entries, byte_order))
    return data + EOI


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="orientkit_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def jpeg_factory():
    """Builder for synthetic Exif JPEG buffers."""
    return build_jpeg


@pytest.fixture
def rotated_jpeg_bytes() -> bytes:
    """A real 200x100 JPEG encoded by Pillow with orientation 6."""
    img = Image.new("RGB", (200, 100), color="blue")
    exif = Image.Exif()
    exif[ORIENTATION_TAG] = 6
    buffer = io.BytesIO()
    img.save(buffer, "JPEG", quality=90, exif=exif)
    return buffer.getvalue()


@pytest.fixture
def sample_image(temp_dir, rotated_jpeg_bytes) -> Path:
    """A JPEG file on disk with orientation 6."""
    image_path = temp_dir / "rotated.jpg"
    image_path.write_bytes(rotated_jpeg_bytes)
    return image_path
