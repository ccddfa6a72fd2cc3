# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""Unit tests for locating the EXIF APP1 segment in a JPEG."""

import struct

import pytest

from exifdata.exceptions import ExifReadError
from exifdata.jpeg_segment import find_exif_segment


def _segment(marker: int, payload: bytes) -> bytes:
    return bytes([0xFF, marker]) + struct.pack('>H', 2 + len(payload)) + payload


@pytest.mark.unit
class TestFindExifSegment:

    def test_finds_segment_after_app0(self, camera_builder):
        jpeg = camera_builder.build_jpeg()
        offset, length = find_exif_segment(jpeg)

        assert offset == 2 + 18
        assert jpeg[offset:offset + 2] == b'\xff\xe1'
        assert jpeg[offset + 4:offset + 10] == b'Exif\x00\x00'
        assert jpeg[offset:offset + length] == camera_builder.build()

    def test_skips_xmp_app1(self, camera_builder):
        """Test that an APP1 segment holding XMP is not mistaken for EXIF."""
        xmp = _segment(0xE1, b'http://ns.adobe.com/xap/1.0/\x00<x:xmpmeta/>')
        exif = camera_builder.build()
        jpeg = b'\xff\xd8' + xmp + exif + b'\xff\xd9'

        offset, length = find_exif_segment(jpeg)
        assert offset == 2 + len(xmp)
        assert length == len(exif)

    def test_not_a_jpeg(self):
        with pytest.raises(ExifReadError, match="Not a JPEG"):
            find_exif_segment(b'\x89PNG\r\n\x1a\n')

    def test_no_exif_segment(self):
        jpeg = b'\xff\xd8' + _segment(0xE0, b'JFIF\x00\x01\x01') + b'\xff\xda\x00\x02' + b'\xff\xd9'
        with pytest.raises(ExifReadError, match="No EXIF"):
            find_exif_segment(jpeg)

    def test_truncated_segment_length_is_clamped(self, camera_builder):
        jpeg = b'\xff\xd8' + camera_builder.build()[:40]
        offset, length = find_exif_segment(jpeg)

        assert offset == 2
        assert length == 40
