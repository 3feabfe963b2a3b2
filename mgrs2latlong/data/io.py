"""
CSV reader and streaming writer.

**Conceptual**: This module is the only I/O boundary for tabular data. The
reader loads the whole input (column detection needs look-ahead); the writer
emits one row at a time so the augmented dataset is never held in memory as a
second copy.

**Reading rules**:
  - Every field is read as a string, verbatim. No NA inference: "NA", "null"
    and "" all stay as written.
  - The first line is the header, kept exactly as written (pandas would
    otherwise rename duplicate column names).
  - Rows shorter than the header are padded with empty strings.
  - Rows longer than the header, broken quoting or undecodable bytes are
    malformed records and abort the run with CsvReadError.

**Writing rules**:
  - Comma-delimited, minimal quoting, "\\n" line terminator.
  - Header row first, then data rows in the order they are produced.
"""

import csv
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Sequence, TextIO

import pandas as pd

from mgrs2latlong.data.schemas import TabularData, pad_row
from mgrs2latlong.errors import CsvReadError, CsvWriteError


def read_tabular_csv(
    path: Path | str,
    encoding: str = "utf-8",
) -> TabularData:
    """
    Read a CSV file fully into memory as strings.

    **Functionally**:
      - Reads with pandas, header=None so the header line is returned verbatim.
      - dtype=str + keep_default_na=False keeps every value as written.
      - Pads short rows to the header width.

    Args:
        path: Path to the input CSV. Can be string or pathlib.Path.
        encoding: Text encoding of the file.

    Returns:
        TabularData with headers and padded rows.

    Raises:
        CsvReadError: If the file is missing/unreadable, has no header line,
                      or contains a malformed record.

    Example:
        >>> table = read_tabular_csv("reports.csv")
        >>> table.headers
        ['id', 'pos', 'name']
    """
    path = Path(path)

    if not path.is_file():
        raise CsvReadError(
            f"Failed to open input file: {path}. "
            f"Ensure the file exists and the path is correct."
        )

    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError:
        raise CsvReadError(f"Failed to read CSV header from {path}: file is empty")
    except pd.errors.ParserError as e:
        raise CsvReadError(f"Failed to read CSV record from {path}. Error: {e}")
    except UnicodeDecodeError as e:
        raise CsvReadError(
            f"Failed to decode {path} as {encoding}. "
            f"Set MGRS2LATLONG_ENCODING to the file's encoding. Error: {e}"
        )
    except OSError as e:
        raise CsvReadError(f"Failed to open input file: {path}. Error: {e}")

    # Short rows come back with NaN in the missing trailing fields
    values = df.fillna("").values.tolist()

    headers = [str(name) for name in values[0]]
    rows = [pad_row([str(field) for field in row], len(headers)) for row in values[1:]]

    return TabularData(headers=headers, rows=rows, source=str(path))


@contextmanager
def open_output(
    path: Path | str | None,
    encoding: str = "utf-8",
) -> Iterator[TextIO]:
    """
    Open the output destination for writing.

    Args:
        path: File to create/overwrite, or None for standard output.
        encoding: Text encoding for a file destination.

    Yields:
        A text handle. Standard output is flushed but never closed.

    Raises:
        CsvWriteError: If the output file cannot be created.
    """
    if path is None:
        yield sys.stdout
        return

    try:
        handle = open(path, "w", encoding=encoding, newline="")
    except OSError as e:
        raise CsvWriteError(f"Failed to create output file: {path}. Error: {e}")

    with handle:
        yield handle


def write_rows(
    handle: TextIO,
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
) -> int:
    """
    Write a header row followed by data rows, one at a time, then flush.

    `rows` may be a generator; each row is written as soon as it is produced.

    Args:
        handle: Open text handle (see open_output).
        headers: Output header row.
        rows: Output data rows.

    Returns:
        Number of data rows written.

    Raises:
        CsvWriteError: If writing or flushing fails.
    """
    writer = csv.writer(handle, lineterminator="\n")

    try:
        writer.writerow(headers)
    except OSError as e:
        raise CsvWriteError(f"Failed to write headers. Error: {e}")

    count = 0
    for row in rows:
        try:
            writer.writerow(row)
        except OSError as e:
            raise CsvWriteError(f"Failed to write record {count + 1}. Error: {e}")
        count += 1

    try:
        handle.flush()
    except OSError as e:
        raise CsvWriteError(f"Failed to flush output. Error: {e}")

    return count
