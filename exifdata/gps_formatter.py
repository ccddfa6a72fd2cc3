# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
GPS value formatting

Converts decoded GPS IFD values into their summary form: coordinate
triplets become decimal degrees and the timestamp becomes "HH:MM:SS".
Values that do not have the expected shape are omitted from the summary.

Copyright 2025 DNAi inc.
"""

from numbers import Real
from typing import Any, Sequence

from exifdata.exif_tags import GPSTag

# Returned instead of a value when the field should be left out
OMIT = object()

COORDINATE_TAGS = frozenset({
    GPSTag.GPSLatitude,
    GPSTag.GPSLongitude,
    GPSTag.GPSDestLatitude,
    GPSTag.GPSDestLongitude,
})


def is_number_sequence(value: Any) -> bool:
    """True for a list/tuple whose items are all real numbers (bool excluded)."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(v, Real) and not isinstance(v, bool) for v in value)


def dms_to_decimal(dms: Sequence[float]) -> float:
    """
    Convert [degrees, minutes, seconds] to decimal degrees.

    No range check is applied: [0, 0, 3600] gives 1.0.
    """
    degrees, minutes, seconds = dms
    return degrees + minutes / 60 + seconds / 3600


def _two_digits(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value)
    return f"0{text}" if value < 10 else text


def format_timestamp(parts: Sequence[float]) -> str:
    """[5, 9, 45] -> "05:09:45" """
    return ":".join(_two_digits(part) for part in parts)


def format_gps_value(tag: GPSTag, value: Any) -> Any:
    """
    Format a decoded GPS value for the summary.

    Args:
        tag: GPS tag of the entry
        value: Decoded entry value

    Returns:
        The formatted value, the value unchanged for tags without special
        formatting, or OMIT when the value has the wrong shape
    """
    if tag in COORDINATE_TAGS:
        if not is_number_sequence(value) or len(value) != 3:
            return OMIT
        return dms_to_decimal(value)

    if tag == GPSTag.GPSTimeStamp:
        if not is_number_sequence(value):
            return OMIT
        return format_timestamp(value)

    return value
