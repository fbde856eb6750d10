"""
Image orientation detection from JPEG Exif data.
Follows Single Responsibility Principle - only reads orientation, never rewrites it.

See http://www.cipa.jp/std/documents/j/DC-008-2012_J.pdf
"""
import asyncio
from typing import Callable, Optional
import logging

from ..core.errors import InvalidJpegError
from ..core.interfaces import (
    DEFAULT_LAYOUT,
    ORIENTATION_INFO,
    ExifLayout,
    IOrientationReader,
    Orientation,
    OrientationInfo,
    OrientationResult,
    ScanResult,
)
from .reader import ByteReader, BytesLike
from .segments import SegmentScan, is_valid_jpeg
from .tiff import parse_tiff_header, resolve_orientation

logger = logging.getLogger(__name__)

DiagnosticObserver = Callable[[str], None]


def get_orientation_info(orientation: int) -> Optional[OrientationInfo]:
    """Return rotation/flip for a known orientation code, None otherwise."""
    return ORIENTATION_INFO.get(orientation)


class OrientationReader(IOrientationReader):
    """
    Reads the Exif orientation code from a JPEG byte buffer.

    Structural violations (missing SOI, bad TIFF header) raise
    ``InvalidJpegError``. A missing Exif segment or orientation tag yields
    ``Orientation.UNKNOWN`` with a diagnostic, reported to ``observer``.

    Example:
        reader = OrientationReader()
        result = reader.read(data)
        if result.is_known:
            print(result.info.rotation, result.info.flipped)
    """

    def __init__(
        self,
        layout: Optional[ExifLayout] = None,
        observer: Optional[DiagnosticObserver] = None,
    ):
        self.layout = layout or DEFAULT_LAYOUT
        self.observer = observer

    def read(self, data: BytesLike) -> OrientationResult:
        """Resolve the orientation of a JPEG buffer."""
        reader = self._open(data)

        scan = SegmentScan(reader, self.layout)
        for _ in scan:
            pass

        return self._finish(reader, scan.result)

    async def read_async(self, data: BytesLike) -> OrientationResult:
        """Resolve the orientation, yielding to the event loop between segments."""
        reader = self._open(data)

        scan = SegmentScan(reader, self.layout)
        for _ in scan:
            await asyncio.sleep(0)

        return self._finish(reader, scan.result)

    def _open(self, data: BytesLike) -> ByteReader:
        reader = ByteReader(data)
        if not is_valid_jpeg(reader, self.layout):
            raise InvalidJpegError("Invalid JPEG format: first 2 bytes")
        return reader

    def _finish(self, reader: ByteReader, scan: ScanResult) -> OrientationResult:
        if not scan.found:
            return self._unknown(scan.diagnostic)

        header = parse_tiff_header(reader, scan.offset, self.layout)
        orientation, diagnostic = resolve_orientation(reader, header, self.layout)
        if diagnostic is not None:
            return self._unknown(diagnostic)

        return OrientationResult(orientation=orientation)

    def _unknown(self, diagnostic: str) -> OrientationResult:
        logger.debug(diagnostic)
        if self.observer is not None:
            self.observer(diagnostic)
        return OrientationResult(orientation=Orientation.UNKNOWN, diagnostic=diagnostic)


_default_reader = OrientationReader()


def get_orientation(data: BytesLike) -> int:
    """
    Read the orientation code of a JPEG buffer.

    Returns:
        Raw orientation code, or ``Orientation.UNKNOWN`` (-1) if absent

    Raises:
        InvalidJpegError: If the buffer is not a valid JPEG/Exif stream
    """
    return _default_reader.read(data).orientation


async def get_orientation_async(data: BytesLike) -> int:
    """Async variant of ``get_orientation``."""
    result = await _default_reader.read_async(data)
    return result.orientation
