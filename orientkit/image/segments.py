"""
JPEG signature check and APP1/Exif segment scan.
"""
from typing import Iterator

from ..core.interfaces import DEFAULT_LAYOUT, ExifLayout, ScanResult
from .reader import ByteReader


def is_valid_jpeg(reader: ByteReader, layout: ExifLayout = DEFAULT_LAYOUT) -> bool:
    """Check the buffer starts with the SOI marker."""
    if len(reader) < 2:
        return False
    return reader.uint16(0) == layout.jpeg


class SegmentScan:
    """
    Walks marker segments after SOI looking for the Exif APP1 segment.

    APPx/Exif p.18, 19:
    - marker (short) ``0xffe1`` = APP1
    - length (short) of segment, excluding the marker
    - padding (short) ``0x0000`` if exif
    - "Exif" (char[4]) if exif

    The spec places APP1 right after SOI, but Photoshop writes APP0 first,
    so every segment is walked until the first APP1.

    Iterating yields each visited segment position; ``result`` holds the
    outcome once iteration is exhausted.
    """

    def __init__(self, reader: ByteReader, layout: ExifLayout = DEFAULT_LAYOUT):
        self.reader = reader
        self.layout = layout
        self.result = ScanResult(diagnostic="scan not run")

    def __iter__(self) -> Iterator[int]:
        layout = self.layout
        seg = layout.segment
        position = layout.first_marker

        while True:
            yield position

            marker = self.reader.uint16(position + seg.marker)
            if marker == layout.exif_marker:
                exif_id = self.reader.uint32(position + seg.exif_id)
                if exif_id == layout.exif_id:
                    self.result = ScanResult(offset=position + layout.tiff_header.from_segment)
                else:
                    self.result = ScanResult(
                        diagnostic=f"APP1 is not exif format: 0x{marker:x}, 0x{exif_id:x}"
                    )
                return

            length = seg.length + self.reader.uint16(position + seg.length)
            next_position = position + length
            if next_position <= position:
                self.result = ScanResult(
                    diagnostic=f"Segment at {position} does not advance the scan"
                )
                return
            position = next_position

            if position >= len(self.reader):
                self.result = ScanResult(diagnostic="APP1 not found")
                return


def iter_segments(reader: ByteReader, layout: ExifLayout = DEFAULT_LAYOUT) -> Iterator[int]:
    """Yield the position of every segment visited by the scan."""
    return iter(SegmentScan(reader, layout))


def find_tiff_header_offset(reader: ByteReader, layout: ExifLayout = DEFAULT_LAYOUT) -> ScanResult:
    """Scan for the Exif segment and return the TIFF header offset, if any."""
    scan = SegmentScan(reader, layout)
    for _ in scan:
        pass
    return scan.result
