"""
Core module - Interfaces, data types and errors for orientkit.
"""
from .interfaces import (
    # Enums
    Orientation,
    ByteOrder,
    
    # Data classes
    OrientationInfo,
    ExifLayout,
    ScanResult,
    TiffHeader,
    OrientationResult,
    
    # Constants
    DEFAULT_LAYOUT,
    ORIENTATION_INFO,
    
    # Abstract interfaces
    IOrientationReader,
)
from .errors import InvalidJpegError
from .extensions import JPEG_EXTENSIONS, is_jpeg

__all__ = [
    # Enums
    "Orientation",
    "ByteOrder",
    
    # Data classes
    "OrientationInfo",
    "ExifLayout",
    "ScanResult",
    "TiffHeader",
    "OrientationResult",
    
    # Constants
    "DEFAULT_LAYOUT",
    "ORIENTATION_INFO",
    
    # Abstract interfaces
    "IOrientationReader",
    
    # Errors
    "InvalidJpegError",
    
    # Extensions
    "JPEG_EXTENSIONS",
    "is_jpeg",
]
