# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
exifdata - EXIF segment decoder

Decodes the TIFF directories of an EXIF segment (IFD0, the IFD1
thumbnail directory, the EXIF IFD and the GPS IFD) into dictionaries
keyed by tag name. Pure Python, no external dependencies.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from exifdata.byte_reader import ByteOrder, ByteReader
from exifdata.exceptions import (
    ExifError,
    ExifReadError,
    InvalidByteOrderError,
    InvalidHeaderError,
    InvalidTagMarkError,
    OutOfRangeReadError,
    UnsupportedFormatError,
)
from exifdata.exif_data import ExifData
from exifdata.exif_tags import EXIF_TAG_NAMES, GPS_TAG_NAMES, TIFF_TAG_NAMES, GPSTag
from exifdata.gps_formatter import format_gps_value
from exifdata.ifd import IFD0, ImageFileDirectory
from exifdata.ifd_entry import ExifTagType, IFDEntry, read_ifd_entry
from exifdata.jpeg_segment import find_exif_segment

__all__ = [
    "ExifData",
    "ByteOrder",
    "ByteReader",
    "ExifError",
    "ExifReadError",
    "InvalidByteOrderError",
    "InvalidHeaderError",
    "InvalidTagMarkError",
    "OutOfRangeReadError",
    "UnsupportedFormatError",
    "EXIF_TAG_NAMES",
    "GPS_TAG_NAMES",
    "TIFF_TAG_NAMES",
    "GPSTag",
    "format_gps_value",
    "IFD0",
    "ImageFileDirectory",
    "ExifTagType",
    "IFDEntry",
    "read_ifd_entry",
    "find_exif_segment",
]
