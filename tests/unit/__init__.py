"""Unit tests for exifdata modules."""
