# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for exifdata

This module defines the exceptions raised while decoding an EXIF segment.
Header and root directory failures abort decoding of the whole document;
sub-directory failures may be scoped (see ExifData).

Copyright 2025 DNAi inc.
"""

from typing import Optional


class ExifError(Exception):
    """
    Base exception for all exifdata errors.

    All exifdata exceptions inherit from this class, allowing
    catch-all error handling for any decoding-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class ExifReadError(ExifError):
    """
    Raised when an EXIF segment cannot be decoded.

    This exception is raised when:
    - The segment cannot be located in the container
    - The segment header is malformed
    - A directory structure points outside the segment
    """
    pass


class InvalidHeaderError(ExifReadError):
    """Raised when the segment does not start with the Exif signature."""

    def __init__(self, actual: bytes):
        self.actual = actual
        super().__init__(f"Invalid EXIF header: expected b'Exif\\x00\\x00', got {actual!r}")


class InvalidByteOrderError(ExifReadError):
    """Raised when the byte order marker is neither 'MM' nor 'II'."""

    def __init__(self, actual: int):
        self.actual = actual
        super().__init__(f"Invalid byte order: expected 0x4D4D or 0x4949, got 0x{actual:04X}")


class InvalidTagMarkError(ExifReadError):
    """Raised when the TIFF magic number does not match."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid tag mark: expected {expected}, got {actual}")


class OutOfRangeReadError(ExifReadError):
    """
    Raised when a read would go past the end of the buffer.

    Offsets and counts inside a directory are taken from the file, so
    every read is checked before the buffer is sliced.
    """

    def __init__(self, offset: int, length: int, size: int, what: Optional[str] = None):
        self.offset = offset
        self.length = length
        self.size = size
        message = f"Read of {length} bytes at offset {offset} exceeds buffer of {size} bytes"
        if what:
            message = f"{what}: {message}"
        super().__init__(message)


class UnsupportedFormatError(ExifError):
    """
    Raised when an entry uses a data format code outside the TIFF set.

    The decoder itself never raises this; unknown formats are kept as
    opaque entries. It is available to callers that want to reject them
    (see IFDEntry.require_format).
    """

    def __init__(self, tag: int, format_code: int):
        self.tag = tag
        self.format_code = format_code
        super().__init__(f"Unsupported format {format_code} for tag 0x{tag:04X}")
