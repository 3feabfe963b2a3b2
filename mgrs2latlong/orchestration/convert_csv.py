"""
CSV conversion pipeline: detect the MGRS column, convert each row, stream output.

**Conceptual**: A run is one sequential pass with a look-ahead:
  1. Read every row (detection needs to see the data's shape first).
  2. Score the first N rows and pick the MGRS column (fatal if none).
  3. Open the output and write the header.
  4. For each row: take the detected column's value, trim it, check it with
     the classifier, normalize it and convert it. Append Latitude/Longitude
     (or two blanks) and write the row immediately.
  5. Flush and report.

**Row-local failures**: An empty value, a value the classifier rejects, or a
value the converter rejects all produce two empty output fields for that row.
They are not reported individually and never abort the run.

**Fatal failures**: Everything in mgrs2latlong.errors. Detection failure is
raised before the output is opened, so a failed run does not leave an empty
output file behind.
"""

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from mgrs2latlong.config.settings import Settings, get_settings
from mgrs2latlong.data.io import open_output, read_tabular_csv, write_rows
from mgrs2latlong.data.schemas import build_output_headers
from mgrs2latlong.detection.classifier import looks_like_mgrs, normalize_mgrs
from mgrs2latlong.detection.detector import detect_mgrs_column
from mgrs2latlong.errors import NoMgrsColumnError
from mgrs2latlong.geo.base import CoordinateConverter, GeoPair, MgrsConversionError
from mgrs2latlong.geo.converter import MgrsConverter

BLANK_COORDINATES = ["", ""]


@dataclass(frozen=True)
class ConversionSummary:
    """
    Outcome of a successful run.

    Attributes:
        records_processed: Data rows written (header excluded).
        column_index: 0-based index of the detected MGRS column.
        column_name: Header name of the detected column.
        converted_count: Rows that received coordinates.
        blank_count: Rows left with blank coordinates.
    """
    records_processed: int
    column_index: int
    column_name: str
    converted_count: int
    blank_count: int

    def message(self) -> str:
        """One-line human-readable summary."""
        return (
            f"Processed {self.records_processed} records. "
            f"MGRS column detected at index {self.column_index}."
        )


def format_coordinate(value: float) -> str:
    """
    Shortest decimal string that round-trips the float exactly.

    Always positional: values near zero print as "0.0000090..." rather than
    in exponent form.
    """
    return format(Decimal(repr(value)), "f")


def convert_value(value: str, converter: CoordinateConverter) -> Optional[GeoPair]:
    """
    Convert one cell to (latitude, longitude), or None on a row-local failure.

    Args:
        value: Raw cell text from the detected column.
        converter: Grid-reference converter.

    Returns:
        (latitude, longitude), or None if the value is empty, implausible or
        rejected by the converter.
    """
    candidate = value.strip()
    if not candidate or not looks_like_mgrs(candidate):
        return None

    try:
        return converter.to_latlon(normalize_mgrs(candidate))
    except MgrsConversionError:
        return None


def convert_row(
    row: Sequence[str],
    column_index: int,
    converter: CoordinateConverter,
) -> List[str]:
    """
    Return `row` with Latitude and Longitude fields appended.

    A column index past the end of the row is treated as an empty value.
    """
    value = row[column_index] if column_index < len(row) else ""
    geo = convert_value(value, converter)

    if geo is None:
        return list(row) + BLANK_COORDINATES

    latitude, longitude = geo
    return list(row) + [format_coordinate(latitude), format_coordinate(longitude)]


def convert_rows(
    rows: Sequence[Sequence[str]],
    column_index: int,
    converter: CoordinateConverter,
) -> Iterator[List[str]]:
    """Lazily yield converted rows in input order."""
    for row in rows:
        yield convert_row(row, column_index, converter)


def process_csv(
    input_path: Path | str,
    output_path: Path | str | None = None,
    converter: Optional[CoordinateConverter] = None,
    settings: Optional[Settings] = None,
) -> ConversionSummary:
    """
    Convert the MGRS column of a CSV file into Latitude/Longitude columns.

    **Functionally**:
      - Reads the whole input as strings.
      - Detects the MGRS column over the first settings.detection_sample_rows rows.
      - Writes input columns + Latitude, Longitude to output_path (or stdout).

    Args:
        input_path: Input CSV path.
        output_path: Output CSV path to create/overwrite; None for stdout.
        converter: Grid-reference converter; defaults to MgrsConverter().
        settings: Run settings; defaults to get_settings().

    Returns:
        ConversionSummary for the run.

    Raises:
        CsvReadError: Input missing, empty or malformed.
        NoMgrsColumnError: No column looks like MGRS (including zero data rows).
        CsvWriteError: Output cannot be created, written or flushed.
    """
    if settings is None:
        settings = get_settings()
    if converter is None:
        converter = MgrsConverter()

    table = read_tabular_csv(input_path, encoding=settings.encoding)

    column_index = detect_mgrs_column(table.rows, sample_size=settings.detection_sample_rows)
    if column_index is None:
        raise NoMgrsColumnError(
            f"No MGRS-like column detected in the CSV file: {table.source}"
        )

    converted_count = 0

    def _counted(rows: Iterator[List[str]]) -> Iterator[List[str]]:
        nonlocal converted_count
        for out_row in rows:
            if out_row[-1] != "":
                converted_count += 1
            yield out_row

    with open_output(output_path, encoding=settings.encoding) as handle:
        written = write_rows(
            handle,
            build_output_headers(table.headers),
            _counted(convert_rows(table.rows, column_index, converter)),
        )

    return ConversionSummary(
        records_processed=written,
        column_index=column_index,
        column_name=table.headers[column_index] if column_index < table.width else "",
        converted_count=converted_count,
        blank_count=written - converted_count,
    )
