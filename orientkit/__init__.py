"""
orientkit - Exif orientation reader for JPEG byte streams.

Locates the Exif block of a JPEG, parses its TIFF header and first IFD,
and returns the orientation code so clients can correct display
rotation and mirroring without re-encoding pixels.

Example usage:
    from orientkit import get_orientation, get_orientation_info
    
    orientation = get_orientation(Path("photo.jpg").read_bytes())
    info = get_orientation_info(orientation)
    if info:
        print(f"Rotate {info.rotation}, flipped: {info.flipped}")
    
    # Cooperative variant for event-loop hosts
    orientation = await get_orientation_async(data)
"""

from .core.interfaces import (
    Orientation,
    OrientationInfo,
    OrientationResult,
    ExifLayout,
    ByteOrder,
    DEFAULT_LAYOUT,
)
from .core.errors import InvalidJpegError
from .core.extensions import JPEG_EXTENSIONS, is_jpeg
from .image import (
    ByteReader,
    OrientationReader,
    OrientationFixer,
    get_orientation,
    get_orientation_async,
    get_orientation_info,
)
from .analyzer import read_orientation_file, analyze_photo, sha256_file

__version__ = "1.0.0"

__all__ = [
    # Main API
    "get_orientation",
    "get_orientation_async",
    "get_orientation_info",
    "OrientationReader",
    
    # Core types
    "Orientation",
    "OrientationInfo",
    "OrientationResult",
    "ExifLayout",
    "ByteOrder",
    "DEFAULT_LAYOUT",
    "InvalidJpegError",
    
    # Helpers
    "ByteReader",
    "OrientationFixer",
    "read_orientation_file",
    "analyze_photo",
    "sha256_file",
    
    # Extensions
    "JPEG_EXTENSIONS",
    "is_jpeg",
]
