"""
Abstract interfaces and data types for orientkit.
Defines the Exif layout constants and the contracts of the orientation pipeline.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Optional


class Orientation(IntEnum):
    """Exif/TIFF orientation codes."""
    ORIGINAL = 1
    FLIPPED = 2
    DEG180 = 3
    DEG180_FLIPPED = 4
    DEG90_FLIPPED = 5
    DEG90 = 6
    DEG270_FLIPPED = 7
    DEG270 = 8
    UNKNOWN = -1


class ByteOrder(Enum):
    """Byte order of multi-byte integers."""
    BIG = ">"
    LITTLE = "<"

    @property
    def is_little(self) -> bool:
        return self is ByteOrder.LITTLE


@dataclass(frozen=True)
class OrientationInfo:
    """Display correction for an orientation code."""
    rotation: int
    flipped: bool


ORIENTATION_INFO = MappingProxyType({
    Orientation.ORIGINAL: OrientationInfo(rotation=0, flipped=False),
    Orientation.DEG90: OrientationInfo(rotation=90, flipped=False),
    Orientation.DEG180: OrientationInfo(rotation=180, flipped=False),
    Orientation.DEG270: OrientationInfo(rotation=270, flipped=False),
    Orientation.FLIPPED: OrientationInfo(rotation=0, flipped=True),
    Orientation.DEG90_FLIPPED: OrientationInfo(rotation=90, flipped=True),
    Orientation.DEG180_FLIPPED: OrientationInfo(rotation=180, flipped=True),
    Orientation.DEG270_FLIPPED: OrientationInfo(rotation=270, flipped=True),
})


@dataclass(frozen=True)
class SegmentOffsets:
    marker: int = 0
    length: int = 2
    exif_id: int = 4


@dataclass(frozen=True)
class TiffHeaderOffsets:
    from_segment: int = 10
    byte_order: int = 0
    endian_assertion: int = 2
    ifd_offset: int = 4


@dataclass(frozen=True)
class IfdOffsets:
    entry_size: int = 12
    count_size: int = 2
    tag: int = 0
    type: int = 2
    count: int = 4
    value: int = 8


@dataclass(frozen=True)
class ExifLayout:
    """
    Magic values and byte offsets of the JPEG/Exif structures.

    See CIPA DC-008 (Exif) p.17-23 for the TIFF header and IFD layouts.
    """
    jpeg: int = 0xFFD8
    exif_marker: int = 0xFFE1
    exif_id: int = 0x45786966  # "Exif"
    order_little_endian: int = 0x4949
    endian_assertion: int = 0x002A
    orientation_tag: int = 0x0112
    first_marker: int = 2
    segment: SegmentOffsets = field(default_factory=SegmentOffsets)
    tiff_header: TiffHeaderOffsets = field(default_factory=TiffHeaderOffsets)
    ifd: IfdOffsets = field(default_factory=IfdOffsets)


DEFAULT_LAYOUT = ExifLayout()


@dataclass(frozen=True)
class ScanResult:
    """Outcome of the segment scan."""
    offset: Optional[int] = None
    diagnostic: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.offset is not None


@dataclass(frozen=True)
class TiffHeader:
    """Parsed TIFF header of an Exif block."""
    offset: int
    byte_order: ByteOrder
    ifd_position: int


@dataclass(frozen=True)
class OrientationResult:
    """Resolved orientation plus the reason when it is unknown."""
    orientation: int
    diagnostic: Optional[str] = None

    @property
    def is_known(self) -> bool:
        return self.orientation != Orientation.UNKNOWN

    @property
    def info(self) -> Optional[OrientationInfo]:
        return ORIENTATION_INFO.get(self.orientation)


class IOrientationReader(ABC):
    """Interface for reading the orientation of a JPEG byte stream."""

    @abstractmethod
    def read(self, data: bytes) -> OrientationResult:
        """Resolve the orientation synchronously."""
        pass

    @abstractmethod
    async def read_async(self, data: bytes) -> OrientationResult:
        """Resolve the orientation, yielding to the event loop while scanning."""
        pass
