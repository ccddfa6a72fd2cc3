# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""Unit tests for ImageFileDirectory and IFD0."""

import struct

import pytest

from exifdata.byte_reader import ByteReader
from exifdata.exceptions import OutOfRangeReadError
from exifdata.ifd import IFD0, ImageFileDirectory
from exifdata.ifd_entry import ExifTagType


def _tiff_reader(builder):
    """Reader positioned at the TIFF header of a built segment."""
    return ByteReader(builder.build_tiff(), builder.byte_order)


@pytest.mark.unit
class TestImageFileDirectory:
    """Test decoding of plain directories."""

    def test_entries_keep_file_order(self, builder):
        builder.ifd0.add(0x0110, ExifTagType.ASCII, "Model X")
        builder.ifd0.add(0x010F, ExifTagType.ASCII, "Maker")
        builder.ifd0.add(0x0112, ExifTagType.SHORT, 3)
        ifd = ImageFileDirectory(_tiff_reader(builder), 8)

        assert [e.tag for e in ifd.entries] == [0x0110, 0x010F, 0x0112]
        assert [e.data for e in ifd] == ["Model X", "Maker", 3]
        assert len(ifd) == 3

    def test_unknown_tags_are_kept(self, builder):
        """Test that the directory layer drops nothing."""
        builder.ifd0.add(0xFFF0, ExifTagType.LONG, 7)
        builder.ifd0.add(0x0112, ExifTagType.SHORT, 1)
        builder.ifd0.add_raw(0xFFF1, 42, 1, b'\x00\x00\x00\x01')
        ifd = ImageFileDirectory(_tiff_reader(builder), 8)

        assert [e.tag for e in ifd] == [0xFFF0, 0x0112, 0xFFF1]
        assert ifd.entries[2].data == b'\x00\x00\x00\x01'

    def test_empty_directory(self, builder):
        builder.ifd0.force = True
        ifd = ImageFileDirectory(_tiff_reader(builder), 8)

        assert ifd.entries == ()
        assert not ifd

    def test_find(self, builder):
        builder.ifd0.add(0x0112, ExifTagType.SHORT, 8)
        ifd = ImageFileDirectory(_tiff_reader(builder), 8)

        assert ifd.find(0x0112).data == 8
        assert ifd.find(0x0100) is None

    def test_next_ifd_offset_position(self, builder):
        builder.ifd0.add(0x0112, ExifTagType.SHORT, 8)
        builder.ifd0.add(0x0128, ExifTagType.SHORT, 2)
        ifd = ImageFileDirectory(_tiff_reader(builder), 8)

        assert ifd.next_ifd_offset_position == 8 + 2 + 2 * 12

    def test_entry_table_past_end_raises(self, byte_order):
        """Test that an entry count larger than the buffer allows is rejected."""
        p = byte_order.prefix
        data = struct.pack(f'{p}H', 500) + b'\x00' * 24
        with pytest.raises(OutOfRangeReadError):
            ImageFileDirectory(ByteReader(data, byte_order), 0)

    def test_offset_past_end_raises(self, builder):
        builder.ifd0.add(0x0112, ExifTagType.SHORT, 8)
        reader = _tiff_reader(builder)
        with pytest.raises(OutOfRangeReadError):
            ImageFileDirectory(reader, len(reader) + 10)


@pytest.mark.unit
class TestIFD0:
    """Test the root directory's links to other directories."""

    def test_links_to_all_directories(self, camera_builder):
        reader = _tiff_reader(camera_builder)
        ifd0 = IFD0(reader, 8)

        exif = ImageFileDirectory(reader, ifd0.offset_to_exif)
        gps = ImageFileDirectory(reader, ifd0.offset_to_gps)
        ifd1 = ImageFileDirectory(reader, ifd0.offset_to_ifd1)

        assert exif.find(0x8827).data == 400
        assert gps.find(0x0001).data == "N"
        assert ifd1.find(0x0201).data == 1024

    def test_no_links(self, builder):
        builder.ifd0.add(0x0112, ExifTagType.SHORT, 1)
        ifd0 = IFD0(_tiff_reader(builder), 8)

        assert ifd0.offset_to_ifd1 is None
        assert ifd0.offset_to_exif is None
        assert ifd0.offset_to_gps is None

    def test_zero_pointer_is_absent(self, builder):
        p = builder.prefix
        builder.ifd0.add_raw(0x8769, int(ExifTagType.LONG), 1, struct.pack(f'{p}I', 0))
        ifd0 = IFD0(_tiff_reader(builder), 8)

        assert ifd0.offset_to_exif is None

    def test_non_integer_pointer_is_absent(self, builder):
        builder.ifd0.add(0x8825, ExifTagType.ASCII, "oops")
        ifd0 = IFD0(_tiff_reader(builder), 8)

        assert ifd0.offset_to_gps is None

    def test_missing_next_offset_raises(self, byte_order):
        """Test that IFD0 needs the 4 bytes after its entry table."""
        p = byte_order.prefix
        data = struct.pack(f'{p}HHHI', 1, 0x0112, 3, 1) + b'\x00\x01\x00\x00'
        with pytest.raises(OutOfRangeReadError):
            IFD0(ByteReader(data, byte_order), 0)
