# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pytest configuration and shared fixtures for the exifdata test suite.

Segments are generated with ExifSegmentBuilder; `byte_order` is
parametrized so fixtures depending on it run in both byte orders.
"""

import pytest

from exifdata.byte_reader import ByteOrder
from exifdata.ifd_entry import ExifTagType
from tests.fixtures.exif_factory import ExifSegmentBuilder


@pytest.fixture(params=[ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN], ids=['MM', 'II'])
def byte_order(request):
    """Both EXIF byte orders."""
    return request.param


@pytest.fixture
def builder(byte_order):
    """Empty segment builder in the parametrized byte order."""
    return ExifSegmentBuilder(byte_order)


@pytest.fixture
def camera_builder(builder):
    """Builder populated like a typical camera JPEG with all four directories."""
    builder.ifd0.add(0x010F, ExifTagType.ASCII, "Canon")
    builder.ifd0.add(0x0110, ExifTagType.ASCII, "Canon EOS 5D Mark IV")
    builder.ifd0.add(0x0112, ExifTagType.SHORT, 1)
    builder.ifd0.add(0x011A, ExifTagType.RATIONAL, [(72, 1)])
    builder.ifd0.add(0x0132, ExifTagType.ASCII, "2024:05:01 12:30:45")

    builder.exif.add(0x829A, ExifTagType.RATIONAL, [(1, 250)])
    builder.exif.add(0x8827, ExifTagType.SHORT, 400)
    builder.exif.add(0x9000, ExifTagType.UNDEFINED, b'0232')
    builder.exif.add(0x9003, ExifTagType.ASCII, "2024:05:01 12:30:45")

    builder.gps.add(0x0000, ExifTagType.BYTE, [2, 3, 0, 0])
    builder.gps.add(0x0001, ExifTagType.ASCII, "N")
    builder.gps.add(0x0002, ExifTagType.RATIONAL, [(37, 1), (30, 1), (0, 1)])
    builder.gps.add(0x0003, ExifTagType.ASCII, "E")
    builder.gps.add(0x0004, ExifTagType.RATIONAL, [(127, 1), (0, 1), (36, 1)])
    builder.gps.add(0x0007, ExifTagType.RATIONAL, [(5, 1), (9, 1), (45, 1)])

    builder.ifd1.add(0x0103, ExifTagType.SHORT, 6)
    builder.ifd1.add(0x0201, ExifTagType.LONG, 1024)
    builder.ifd1.add(0x0202, ExifTagType.LONG, 2048)
    return builder


@pytest.fixture
def camera_segment(camera_builder):
    return camera_builder.build()
