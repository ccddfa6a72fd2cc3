# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF document

ExifData decodes an EXIF segment in one pass: it validates the header,
decodes the root directory (IFD0), then the thumbnail directory (IFD1)
and the EXIF and GPS sub-directories when IFD0 links to them. The four
summaries map tag names to values and are rebuilt on every access.

Segment layout (offsets relative to the start of the segment):

    0-3    APP1 marker and length (not read)
    4-9    b"Exif\\x00\\x00"
    10-11  byte order, "MM" or "II"
    12-13  42, in the detected byte order
    14-17  offset of IFD0, relative to byte 10

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from exifdata.byte_reader import ByteOrder, ByteReader
from exifdata.exceptions import (
    ExifReadError,
    InvalidByteOrderError,
    InvalidHeaderError,
    InvalidTagMarkError,
    OutOfRangeReadError,
)
from exifdata.exif_tags import EXIF_TAG_NAMES, GPS_TAG_NAMES, TIFF_TAG_NAMES, GPSTag
from exifdata.gps_formatter import OMIT, format_gps_value
from exifdata.ifd import IFD0, ImageFileDirectory
from exifdata.jpeg_segment import find_exif_segment

logger = logging.getLogger(__name__)

EXIF_HEADER = b'Exif\x00\x00'
TIFF_MAGIC = 42

HEADER_OFFSET = 4
BYTE_ORDER_OFFSET = 10
TAG_MARK_OFFSET = 12
IFD0_POINTER_OFFSET = 14

Summary = Dict[str, Any]


def _check_exif_header(reader: ByteReader) -> ByteReader:
    header = reader.read_bytes(HEADER_OFFSET, len(EXIF_HEADER))
    if header != EXIF_HEADER:
        raise InvalidHeaderError(header)
    return reader


def _check_byte_order(reader: ByteReader) -> ByteReader:
    # The marker is a palindrome, so a fixed big-endian read is enough
    marker = reader.with_byte_order(ByteOrder.BIG_ENDIAN).read_uint16(BYTE_ORDER_OFFSET)
    try:
        byte_order = ByteOrder(marker)
    except ValueError:
        raise InvalidByteOrderError(marker) from None
    return reader.with_byte_order(byte_order)


def _check_tag_mark(reader: ByteReader) -> ByteReader:
    tag_mark = reader.read_uint16(TAG_MARK_OFFSET)
    if tag_mark != TIFF_MAGIC:
        raise InvalidTagMarkError(TIFF_MAGIC, tag_mark)
    return reader


def _validate_header(reader: ByteReader) -> ByteReader:
    """
    Run the header checks in order and return a reader set to the
    segment's byte order. Each step depends on the previous one, so the
    first failure stops the pipeline.
    """
    for check in (_check_exif_header, _check_byte_order, _check_tag_mark):
        reader = check(reader)
    return reader


class ExifData:
    """
    Decoded EXIF segment.

    Example:
        >>> exif = ExifData(jpeg_bytes, offset, length)
        >>> exif.ifd0['Make']
        'Canon'
        >>> exif.gps['GPSLatitude']
        37.5665

    Header errors and errors in IFD0 abort construction. Errors in IFD1,
    the EXIF IFD or the GPS IFD are recorded in `errors` and leave that
    directory undecoded, unless `strict` is set, in which case they are
    raised as well.
    """

    def __init__(
        self,
        buffer: bytes,
        offset: int = 0,
        length: Optional[int] = None,
        *,
        strict: bool = False,
    ):
        """
        Decode the EXIF segment at buffer[offset:offset + length].

        Args:
            buffer: Bytes containing the segment (typically a whole JPEG file)
            offset: Start of the segment within `buffer`
            length: Segment length; None means up to the end of `buffer`
            strict: If True, errors in IFD1/EXIF/GPS directories are raised

        Raises:
            InvalidHeaderError: Signature is not b"Exif\\x00\\x00"
            InvalidByteOrderError: Byte order marker is not "MM" or "II"
            InvalidTagMarkError: TIFF magic number is not 42
            OutOfRangeReadError: Segment range or IFD0 lies outside the buffer
        """
        if length is None:
            length = len(buffer) - offset
        if offset < 0 or length < 0 or offset + length > len(buffer):
            raise OutOfRangeReadError(offset, length, len(buffer), "EXIF segment")

        self.strict = strict
        self.errors: Dict[str, ExifReadError] = {}
        self._ifd0: Optional[IFD0] = None
        self._ifd1: Optional[ImageFileDirectory] = None
        self._exif: Optional[ImageFileDirectory] = None
        self._gps: Optional[ImageFileDirectory] = None

        reader = _validate_header(ByteReader(buffer[offset:offset + length]))
        self._byte_order = reader.byte_order

        # Directory offsets count from the TIFF header, not the segment start
        tiff = ByteReader(reader.data[BYTE_ORDER_OFFSET:], reader.byte_order)
        offset_to_ifd0 = reader.read_uint32(IFD0_POINTER_OFFSET)
        self._ifd0 = IFD0(tiff, offset_to_ifd0)

        self._ifd1 = self._read_sub_directory('IFD1', tiff, self._ifd0.offset_to_ifd1)
        self._exif = self._read_sub_directory('EXIF', tiff, self._ifd0.offset_to_exif)
        self._gps = self._read_sub_directory('GPS', tiff, self._ifd0.offset_to_gps)

    @classmethod
    def from_jpeg(cls, data: bytes, *, strict: bool = False) -> 'ExifData':
        """Locate the EXIF APP1 segment in a JPEG file and decode it."""
        offset, length = find_exif_segment(data)
        return cls(data, offset, length, strict=strict)

    def _read_sub_directory(
        self, name: str, reader: ByteReader, offset: Optional[int]
    ) -> Optional[ImageFileDirectory]:
        if not offset:
            return None
        try:
            return ImageFileDirectory(reader, offset)
        except ExifReadError as e:
            if self.strict:
                raise
            logger.warning("Skipping %s directory at offset %d: %s", name, offset, e)
            self.errors[name] = e
            return None

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    @property
    def is_little_endian(self) -> bool:
        return self._byte_order == ByteOrder.LITTLE_ENDIAN

    @property
    def ifd0(self) -> Optional[Summary]:
        """Primary image (IFD0) tags."""
        return _summarize(self._ifd0, TIFF_TAG_NAMES)

    @property
    def ifd1(self) -> Optional[Summary]:
        """Thumbnail (IFD1) tags."""
        return _summarize(self._ifd1, TIFF_TAG_NAMES)

    @property
    def exif(self) -> Optional[Summary]:
        return _summarize(self._exif, EXIF_TAG_NAMES)

    @property
    def gps(self) -> Optional[Summary]:
        """GPS tags with coordinates in decimal degrees and a "HH:MM:SS" timestamp."""
        if not self._gps:
            return None
        summary: Summary = {}
        for entry in self._gps:
            if entry.tag not in GPS_TAG_NAMES:
                continue
            tag = GPSTag(entry.tag)
            value = format_gps_value(tag, entry.data)
            if value is OMIT:
                logger.debug("Omitting %s with unexpected value %r", tag.name, entry.data)
                continue
            summary[tag.name] = value
        return summary

    def to_dict(self) -> Dict[str, Summary]:
        """All present summaries keyed by directory name."""
        summaries = {
            'IFD0': self.ifd0,
            'IFD1': self.ifd1,
            'EXIF': self.exif,
            'GPS': self.gps,
        }
        return {name: summary for name, summary in summaries.items() if summary is not None}

    def __repr__(self) -> str:
        present = ', '.join(self.to_dict()) or 'empty'
        return f"<ExifData {self._byte_order.name} {present}>"


def _summarize(directory: Optional[ImageFileDirectory], names: Mapping[int, str]) -> Optional[Summary]:
    # Values pass through unchanged; unknown tags are skipped
    if not directory:
        return None
    summary: Summary = {}
    for entry in directory:
        name = names.get(entry.tag)
        if name is not None:
            summary[name] = entry.data
    return summary
