"""
JPEG/Exif parsing and orientation module for orientkit.
"""
from .reader import ByteReader
from .segments import SegmentScan, is_valid_jpeg, iter_segments, find_tiff_header_offset
from .tiff import (
    detect_byte_order,
    find_ifd_position,
    parse_tiff_header,
    iter_tags,
    find_orientation_offset,
    read_orientation_at,
    resolve_orientation,
)
from .orientation import (
    OrientationReader,
    get_orientation,
    get_orientation_async,
    get_orientation_info,
)
from .transform import OrientationFixer

__all__ = [
    'ByteReader',
    'SegmentScan',
    'is_valid_jpeg',
    'iter_segments',
    'find_tiff_header_offset',
    'detect_byte_order',
    'find_ifd_position',
    'parse_tiff_header',
    'iter_tags',
    'find_orientation_offset',
    'read_orientation_at',
    'resolve_orientation',
    'OrientationReader',
    'get_orientation',
    'get_orientation_async',
    'get_orientation_info',
    'OrientationFixer',
]
