"""Test fixtures: synthetic EXIF segment builder."""

from tests.fixtures.exif_factory import DirectorySpec, ExifSegmentBuilder

__all__ = ["DirectorySpec", "ExifSegmentBuilder"]
