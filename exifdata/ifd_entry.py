# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
IFD entry decoder

Each directory entry is a 12-byte record:

    tag (uint16) | format (uint16) | count (uint32) | value (4 bytes)

When the value needs 4 bytes or fewer it is stored inline in the value
field, otherwise the value field holds the offset of the data, relative
to the start of the TIFF header.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Optional

from exifdata.byte_reader import ByteReader
from exifdata.exceptions import UnsupportedFormatError

logger = logging.getLogger(__name__)

ENTRY_SIZE = 12
INLINE_VALUE_SIZE = 4


class ExifTagType(IntEnum):
    """EXIF tag data types"""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12


# EXIF tag sizes in bytes
TAG_SIZES = {
    ExifTagType.BYTE: 1,
    ExifTagType.ASCII: 1,
    ExifTagType.SHORT: 2,
    ExifTagType.LONG: 4,
    ExifTagType.RATIONAL: 8,
    ExifTagType.SBYTE: 1,
    ExifTagType.UNDEFINED: 1,
    ExifTagType.SSHORT: 2,
    ExifTagType.SLONG: 4,
    ExifTagType.SRATIONAL: 8,
    ExifTagType.FLOAT: 4,
    ExifTagType.DOUBLE: 8,
}

# struct codes for the plain numeric types
_STRUCT_CODES = {
    ExifTagType.BYTE: 'B',
    ExifTagType.SHORT: 'H',
    ExifTagType.LONG: 'I',
    ExifTagType.SBYTE: 'b',
    ExifTagType.SSHORT: 'h',
    ExifTagType.SLONG: 'i',
    ExifTagType.FLOAT: 'f',
    ExifTagType.DOUBLE: 'd',
}


@dataclass(frozen=True)
class IFDEntry:
    """
    One decoded directory entry.

    `data` holds a scalar when count is 1 and a list otherwise, a str
    for ASCII, bytes for UNDEFINED, and the raw 4-byte value field when
    the format code is not a known TIFF type.
    """
    tag: int
    format_code: int
    count: int
    data: Any

    @property
    def format(self) -> Optional[ExifTagType]:
        try:
            return ExifTagType(self.format_code)
        except ValueError:
            return None

    @property
    def is_supported(self) -> bool:
        return self.format is not None

    def require_format(self) -> ExifTagType:
        """Return the entry format, raising UnsupportedFormatError for unknown codes."""
        tag_type = self.format
        if tag_type is None:
            raise UnsupportedFormatError(self.tag, self.format_code)
        return tag_type


def _combine_rationals(values: tuple) -> List[Optional[float]]:
    rationals = []
    for i in range(0, len(values), 2):
        num, den = values[i], values[i + 1]
        rationals.append(num / den if den != 0 else None)
    return rationals


def decode_value(reader: ByteReader, tag_type: ExifTagType, count: int, data_offset: int) -> Any:
    """
    Decode `count` values of `tag_type` starting at `data_offset`.

    Args:
        reader: Reader over the TIFF buffer
        tag_type: Entry data format
        count: Number of components
        data_offset: Absolute offset of the first component

    Returns:
        Decoded value (scalar, list, str or bytes)
    """
    if tag_type == ExifTagType.ASCII:
        # Trailing NULs are the terminator (and padding), not content
        return reader.read_string(data_offset, count).rstrip('\x00')

    if tag_type == ExifTagType.UNDEFINED:
        return reader.read_bytes(data_offset, count)

    if tag_type in (ExifTagType.RATIONAL, ExifTagType.SRATIONAL):
        code = 'I' if tag_type == ExifTagType.RATIONAL else 'i'
        values = _combine_rationals(reader.unpack(code, data_offset, count * 2))
    else:
        values = list(reader.unpack(_STRUCT_CODES[tag_type], data_offset, count))

    if count == 1:
        return values[0]
    return values


def read_ifd_entry(reader: ByteReader, offset: int) -> IFDEntry:
    """
    Decode the 12-byte directory entry at `offset`.

    Raises:
        OutOfRangeReadError: If the record or its out-of-line value lies
            outside the buffer
    """
    reader.check_range(offset, ENTRY_SIZE, "IFD entry")
    tag = reader.read_uint16(offset)
    format_code = reader.read_uint16(offset + 2)
    count = reader.read_uint32(offset + 4)
    value_field = offset + 8

    try:
        tag_type = ExifTagType(format_code)
    except ValueError:
        logger.debug("Tag 0x%04X uses unknown format %d, keeping raw value", tag, format_code)
        return IFDEntry(tag, format_code, count, reader.read_bytes(value_field, INLINE_VALUE_SIZE))

    if count == 0:
        data: Any = []
        if tag_type == ExifTagType.ASCII:
            data = ''
        elif tag_type == ExifTagType.UNDEFINED:
            data = b''
        return IFDEntry(tag, format_code, count, data)

    total_size = TAG_SIZES[tag_type] * count

    # If value fits in 4 bytes, it's stored inline
    if total_size <= INLINE_VALUE_SIZE:
        data_offset = value_field
    else:
        data_offset = reader.read_uint32(value_field)
        reader.check_range(data_offset, total_size, f"Value of tag 0x{tag:04X}")

    return IFDEntry(tag, format_code, count, decode_value(reader, tag_type, count, data_offset))
