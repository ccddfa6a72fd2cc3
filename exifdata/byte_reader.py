# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Endianness-aware reads over an immutable EXIF buffer.

Copyright 2025 DNAi inc.
"""

import struct
from enum import IntEnum
from typing import Tuple

from exifdata.exceptions import OutOfRangeReadError


class ByteOrder(IntEnum):
    """Byte order markers found at offset 10 of an EXIF segment"""
    BIG_ENDIAN = 0x4D4D  # 'MM' (Motorola)
    LITTLE_ENDIAN = 0x4949  # 'II' (Intel)

    @property
    def prefix(self) -> str:
        """struct format prefix for this byte order"""
        return '>' if self is ByteOrder.BIG_ENDIAN else '<'


class ByteReader:
    """
    Bounds-checked reader over a fixed byte buffer.

    The buffer is never modified. Every read checks that the requested
    range lies inside the buffer and raises OutOfRangeReadError if not.
    """

    def __init__(self, data: bytes, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN):
        self._data = bytes(data)
        self._byte_order = byte_order

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def with_byte_order(self, byte_order: ByteOrder) -> 'ByteReader':
        """Return a reader over the same buffer using another byte order."""
        return ByteReader(self._data, byte_order)

    def check_range(self, offset: int, length: int, what: str = "") -> None:
        if offset < 0 or length < 0 or offset + length > len(self._data):
            raise OutOfRangeReadError(offset, length, len(self._data), what or None)

    def read_bytes(self, offset: int, length: int) -> bytes:
        self.check_range(offset, length)
        return self._data[offset:offset + length]

    def read_string(self, offset: int, length: int) -> str:
        """Read a fixed-length Latin-1 string (NUL bytes are kept)."""
        return self.read_bytes(offset, length).decode('latin-1')

    def unpack(self, fmt: str, offset: int, count: int = 1) -> Tuple:
        """
        Unpack `count` consecutive values of struct code `fmt` at `offset`.

        Args:
            fmt: Single struct format character (e.g. 'H', 'I', 'd')
            offset: Byte offset into the buffer
            count: Number of values to read

        Returns:
            Tuple of unpacked values
        """
        code = f'{self._byte_order.prefix}{count}{fmt}'
        size = struct.calcsize(code)
        self.check_range(offset, size)
        return struct.unpack_from(code, self._data, offset)

    def read_uint16(self, offset: int) -> int:
        return self.unpack('H', offset)[0]

    def read_uint32(self, offset: int) -> int:
        return self.unpack('I', offset)[0]
