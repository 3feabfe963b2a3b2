"""
mgrs2latlong - Main entry point.

Thin wrapper so the converter can be run from a checkout without installing:

    python main.py reports.csv -o reports_latlong.csv
"""

import sys

from mgrs2latlong.cli import main


if __name__ == "__main__":
    sys.exit(main())
