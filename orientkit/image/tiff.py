"""
TIFF header parsing and IFD0 traversal for the orientation tag.
"""
from typing import Iterator, Optional, Tuple

from ..core.errors import InvalidJpegError
from ..core.interfaces import (
    DEFAULT_LAYOUT,
    ByteOrder,
    ExifLayout,
    Orientation,
    TiffHeader,
)
from .reader import ByteReader


def detect_byte_order(
    reader: ByteReader,
    header_offset: int,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> ByteOrder:
    """Little-endian for ``II``, big-endian for anything else."""
    endian = reader.uint16(header_offset + layout.tiff_header.byte_order)
    if endian == layout.order_little_endian:
        return ByteOrder.LITTLE
    return ByteOrder.BIG


def find_ifd_position(
    reader: ByteReader,
    header_offset: int,
    byte_order: ByteOrder,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> int:
    """
    Validate the TIFF header and return the absolute position of IFD0.

    TIFF Header p.17:
    - byte order (short). ``0x4949`` = little, ``0x4d4d`` = big
    - 42 (``0x002a``) (short)
    - offset of IFD (long), relative to the header. Minimum is 8.

    Raises:
        InvalidJpegError: If the 42 assertion does not decode with ``byte_order``.
    """
    header = layout.tiff_header
    assertion = reader.uint16(header_offset + header.endian_assertion, byte_order)
    if assertion != layout.endian_assertion:
        raise InvalidJpegError(
            f"Invalid JPEG format: littleEndian {byte_order.is_little}, "
            f"assertion: 0x{assertion:x}"
        )

    ifd_distance = reader.uint32(header_offset + header.ifd_offset, byte_order)
    return header_offset + ifd_distance


def parse_tiff_header(
    reader: ByteReader,
    header_offset: int,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> TiffHeader:
    byte_order = detect_byte_order(reader, header_offset, layout)
    ifd_position = find_ifd_position(reader, header_offset, byte_order, layout)
    return TiffHeader(offset=header_offset, byte_order=byte_order, ifd_position=ifd_position)


def iter_tags(
    reader: ByteReader,
    ifd_position: int,
    byte_order: ByteOrder,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(tag, entry_offset)`` for every IFD entry, in file order.

    IFD p.23:
    - number of fields (short)
    - fields, 12 bytes each: tag (short), type (short), count (long),
      value or offset (long)

    ``entry_offset`` is relative to the first field, i.e. ``ifd_position + 2``.
    """
    ifd = layout.ifd
    count = reader.uint16(ifd_position, byte_order)
    values_position = ifd_position + ifd.count_size
    for i in range(count):
        entry_offset = i * ifd.entry_size
        tag = reader.uint16(values_position + entry_offset + ifd.tag, byte_order)
        yield tag, entry_offset


def find_orientation_offset(
    reader: ByteReader,
    ifd_position: int,
    byte_order: ByteOrder,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> Optional[int]:
    for tag, entry_offset in iter_tags(reader, ifd_position, byte_order, layout):
        if tag == layout.orientation_tag:
            return entry_offset
    return None


def read_orientation_at(
    reader: ByteReader,
    entry_offset: int,
    values_position: int,
    byte_order: ByteOrder,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> int:
    # SHORT value stored left-justified in the value field
    return reader.uint16(values_position + entry_offset + layout.ifd.value, byte_order)


def resolve_orientation(
    reader: ByteReader,
    header: TiffHeader,
    layout: ExifLayout = DEFAULT_LAYOUT,
) -> Tuple[int, Optional[str]]:
    """
    Find the orientation tag in IFD0 and return its raw value.

    The value is not checked against the 1-8 range.

    Returns:
        ``(code, None)`` when found, ``(Orientation.UNKNOWN, reason)`` otherwise
    """
    entry_offset = find_orientation_offset(
        reader, header.ifd_position, header.byte_order, layout
    )
    if entry_offset is None:
        return Orientation.UNKNOWN, "Rotation information was not found"

    values_position = header.ifd_position + layout.ifd.count_size
    code = read_orientation_at(reader, entry_offset, values_position, header.byte_order, layout)
    return code, None
