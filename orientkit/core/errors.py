"""
Exceptions raised for structurally invalid JPEG/TIFF input.
"""


class InvalidJpegError(ValueError):
    """Raised when the buffer is not a structurally valid JPEG/Exif stream."""
