"""
Random-access integer reads over an immutable byte buffer.
"""
import struct
from typing import Union

from ..core.interfaces import ByteOrder

BytesLike = Union[bytes, bytearray, memoryview]


class ByteReader:
    """
    Reads unsigned 8/16/32-bit integers at absolute offsets.

    Reads past the end of the buffer raise ``struct.error`` and are left
    to propagate to the caller.
    """

    def __init__(self, data: BytesLike):
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def _unpack(self, fmt: str, offset: int) -> int:
        if offset < 0:
            raise IndexError(f"Negative offset: {offset}")
        return struct.unpack_from(fmt, self._data, offset)[0]

    def uint8(self, offset: int) -> int:
        return self._unpack("B", offset)

    def uint16(self, offset: int, byte_order: ByteOrder = ByteOrder.BIG) -> int:
        return self._unpack(f"{byte_order.value}H", offset)

    def uint32(self, offset: int, byte_order: ByteOrder = ByteOrder.BIG) -> int:
        return self._unpack(f"{byte_order.value}I", offset)
