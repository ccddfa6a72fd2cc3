# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image File Directory (IFD) structures

An IFD is a uint16 entry count followed by that many 12-byte entries.
The root directory (IFD0) is also followed by a uint32 offset to the
next directory (IFD1, the thumbnail) and links to the EXIF and GPS
sub-directories through the ExifOffset and GPSInfo tags.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Iterator, Optional, Tuple

from exifdata.byte_reader import ByteReader
from exifdata.exif_tags import EXIF_OFFSET_TAG, GPS_INFO_TAG
from exifdata.ifd_entry import ENTRY_SIZE, IFDEntry, read_ifd_entry

logger = logging.getLogger(__name__)


class ImageFileDirectory:
    """
    Decoded directory at a given offset.

    Entries keep file order, and entries with unknown tags or formats are
    kept as well; name lookup happens later, in ExifData.
    """

    def __init__(self, reader: ByteReader, offset: int):
        """
        Decode the directory at `offset`.

        Args:
            reader: Reader over the TIFF buffer
            offset: Offset of the entry count

        Raises:
            OutOfRangeReadError: If the entry table or any value lies
                outside the buffer
        """
        self.offset = offset
        num_entries = reader.read_uint16(offset)
        reader.check_range(offset + 2, num_entries * ENTRY_SIZE, f"IFD at offset {offset}")

        self._entries: Tuple[IFDEntry, ...] = tuple(
            read_ifd_entry(reader, offset + 2 + i * ENTRY_SIZE)
            for i in range(num_entries)
        )
        logger.debug("Decoded IFD at offset %d with %d entries", offset, num_entries)

    @property
    def entries(self) -> Tuple[IFDEntry, ...]:
        return self._entries

    @property
    def next_ifd_offset_position(self) -> int:
        """Offset of the uint32 that follows the entry table."""
        return self.offset + 2 + len(self._entries) * ENTRY_SIZE

    def find(self, tag: int) -> Optional[IFDEntry]:
        for entry in self._entries:
            if entry.tag == tag:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IFDEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} offset={self.offset} entries={len(self._entries)}>"


def _pointer(entry: Optional[IFDEntry]) -> Optional[int]:
    # Pointer tags are LONG; anything else (or zero) means no directory
    if entry is None:
        return None
    value = entry.data
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return None


class IFD0(ImageFileDirectory):
    """Root directory: an IFD plus offsets to IFD1 and the EXIF/GPS sub-IFDs."""

    def __init__(self, reader: ByteReader, offset: int):
        super().__init__(reader, offset)
        next_ifd = reader.read_uint32(self.next_ifd_offset_position)
        self.offset_to_ifd1: Optional[int] = next_ifd if next_ifd > 0 else None
        self.offset_to_exif = _pointer(self.find(EXIF_OFFSET_TAG))
        self.offset_to_gps = _pointer(self.find(GPS_INFO_TAG))
        logger.debug(
            "IFD0 links: IFD1=%s EXIF=%s GPS=%s",
            self.offset_to_ifd1, self.offset_to_exif, self.offset_to_gps,
        )
