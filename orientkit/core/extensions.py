"""
JPEG file extensions.
"""
from pathlib import Path

JPEG_EXTENSIONS = {'.jpg', '.jpeg', '.jpe', '.jfif'}


def is_jpeg(path) -> bool:
    """Check if path has a JPEG file extension."""
    return Path(path).suffix.lower() in JPEG_EXTENSIONS
