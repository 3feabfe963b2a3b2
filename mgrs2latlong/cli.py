"""
Command-line entry point.

**Usage**:
    # Write to a file
    mgrs2latlong reports.csv -o reports_latlong.csv

    # Write to stdout (the summary line then goes to stderr)
    mgrs2latlong reports.csv > reports_latlong.csv

**Exit codes**:
    0  success (even if some rows could not be converted)
    1  fatal error (unreadable input, no MGRS column, output failure, bad settings)
    2  invalid command-line arguments (argparse)
"""

import argparse
import sys
from typing import List, Optional

from mgrs2latlong.config.settings import get_settings
from mgrs2latlong.errors import Mgrs2LatLongError
from mgrs2latlong.orchestration.convert_csv import process_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mgrs2latlong",
        description="Convert MGRS coordinates to latitude/longitude in CSV files",
    )
    parser.add_argument(
        "input",
        help="Input CSV file path",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output CSV file path (defaults to stdout)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run the conversion and report.

    The summary line goes to stdout when the CSV is written to a file, and to
    stderr when the CSV itself is written to stdout. This differs from the
    original mgrs2latlong tool, which always printed the summary to stdout
    after the CSV; here `mgrs2latlong in.csv > out.csv` stays a clean CSV.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        summary = process_csv(args.input, args.output, settings=settings)
    except (Mgrs2LatLongError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report_stream = sys.stdout if args.output else sys.stderr
    print(summary.message(), file=report_stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
