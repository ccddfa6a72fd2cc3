# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Locate the EXIF APP1 segment in a JPEG file.

Copyright 2025 DNAi inc.
"""

import struct
from typing import Tuple

from exifdata.exceptions import ExifReadError

SOI = b'\xff\xd8'
APP1 = 0xE1
SOS = 0xDA
EOI = 0xD9
EXIF_SIGNATURE = b'Exif\x00\x00'


def find_exif_segment(data: bytes) -> Tuple[int, int]:
    """
    Find the APP1 segment holding EXIF data.

    The returned range starts at the APP1 marker itself, so the Exif
    signature sits at offset 4 and the TIFF header at offset 10 of the
    slice, which is the layout ExifData expects.

    Args:
        data: Complete JPEG file contents

    Returns:
        (offset, length) of the segment within `data`

    Raises:
        ExifReadError: If `data` is not a JPEG or has no EXIF segment
    """
    if data[:2] != SOI:
        raise ExifReadError("Not a JPEG file (missing SOI marker)")

    offset = 2  # Skip JPEG SOI marker
    while offset + 4 <= len(data):
        if data[offset] != 0xFF:
            break

        marker = data[offset + 1]
        # Fill bytes before a marker
        if marker == 0xFF:
            offset += 1
            continue
        if marker in (SOS, EOI):
            break

        length = struct.unpack('>H', data[offset + 2:offset + 4])[0]
        if marker == APP1 and data[offset + 4:offset + 10] == EXIF_SIGNATURE:
            return offset, min(2 + length, len(data) - offset)

        offset += 2 + length

    raise ExifReadError("No EXIF APP1 segment found")
