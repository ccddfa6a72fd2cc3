# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for exifdata

Prints the IFD0, IFD1, EXIF and GPS summaries of one or more JPEG files.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from exifdata import __version__
from exifdata.exceptions import ExifError
from exifdata.exif_data import ExifData

logger = logging.getLogger(__name__)


def setup_logger(log_file: Optional[str] = None, level: int = logging.WARNING) -> logging.Logger:
    """
    Set up and configure the root logger.

    Args:
        log_file: Optional path of a log file (overwritten on each run)
        level: The logging level

    Returns:
        The configured root logger instance
    """
    root = logging.getLogger()
    root.setLevel(level)

    if root.hasHandlers():
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        root.addHandler(file_handler)

    return root


def _jsonable(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.hex().upper()
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def format_output(summaries: Dict[str, Dict[str, Any]], format_type: str = "text") -> str:
    """
    Format decoded summaries.

    Args:
        summaries: Mapping of directory name to tag summary (ExifData.to_dict())
        format_type: Output format ('text', 'json', 'csv')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        data = {
            group: {tag: _jsonable(value) for tag, value in tags.items()}
            for group, tags in summaries.items()
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
    elif format_type == "csv":
        lines = ["Group,Tag,Value"]
        for group, tags in summaries.items():
            for tag, value in tags.items():
                # Escape quotes in CSV
                value_str = str(_jsonable(value)).replace('"', '""')
                lines.append(f'"{group}","{tag}","{value_str}"')
        return "\n".join(lines)
    else:  # text format (default)
        lines = []
        for group, tags in summaries.items():
            for tag, value in tags.items():
                lines.append(f"{group}:{tag}: {_jsonable(value)}")
        return "\n".join(lines)


def read_exif(file_path: Path, strict: bool = False) -> ExifData:
    """Decode the EXIF segment of a JPEG file."""
    data = file_path.read_bytes()
    exif = ExifData.from_jpeg(data, strict=strict)
    for name, error in exif.errors.items():
        logger.warning("%s: %s directory skipped (%s)", file_path, name, error)
    return exif


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='exifdata',
        description='Decode EXIF metadata (IFD0, IFD1, EXIF, GPS) from JPEG files.',
    )
    parser.add_argument('files', nargs='+', type=Path, help='JPEG files to read')
    parser.add_argument(
        '-f', '--format', dest='format_type', choices=('text', 'json', 'csv'),
        default='text', help='Output format (default: text)',
    )
    parser.add_argument(
        '--strict', action='store_true',
        help='Fail when the thumbnail, EXIF or GPS directory is corrupt',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Also write log messages to this file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.log_file, logging.DEBUG if args.verbose else logging.WARNING)

    status = 0
    for file_path in args.files:
        try:
            exif = read_exif(file_path, strict=args.strict)
        except (OSError, ExifError) as e:
            logger.error("%s: %s", file_path, e)
            status = 1
            continue

        if len(args.files) > 1:
            print(f"======== {file_path}")
        print(format_output(exif.to_dict(), args.format_type))

    return status


if __name__ == "__main__":
    sys.exit(main())
