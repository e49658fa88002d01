"""
Command line entry point.

Usage:
    python -m kempo <directory> [effective_date]
"""

import argparse
from typing import Optional, Sequence

from .processor import convert_directory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kempo",
        description="Convert premium table CSVs into JSON and YAML documents.",
    )
    parser.add_argument("directory", help="directory holding one CSV per area")
    parser.add_argument(
        "effective_date",
        nargs="?",
        default=None,
        help='effective date of the tables, e.g. "2024.4" or "2024年4月"',
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        convert_directory(args.directory, args.effective_date)
    except (ValueError, NotADirectoryError):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
