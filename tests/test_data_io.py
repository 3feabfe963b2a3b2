"""
Tests for tabular CSV reading and streaming writing.

This module tests:
  - Values are read verbatim as strings (no NA inference, no numeric coercion).
  - Header names are preserved, duplicates included.
  - Short rows are padded; long rows are fatal.
  - Empty and missing files raise CsvReadError.
  - The writer emits header first, minimal quoting, "\\n" terminators.

All tests use temporary directories (via tmp_path fixture).
"""

import io

import pytest

from mgrs2latlong.data.io import open_output, read_tabular_csv, write_rows
from mgrs2latlong.data.schemas import (
    OUTPUT_COORDINATE_COLUMNS,
    TabularData,
    build_output_headers,
    pad_row,
)
from mgrs2latlong.errors import CsvReadError, CsvWriteError


# ============================================================================
# Schemas
# ============================================================================

def test_build_output_headers_appends_coordinates():
    assert build_output_headers(["id", "pos"]) == ["id", "pos", "Latitude", "Longitude"]
    assert OUTPUT_COORDINATE_COLUMNS == ["Latitude", "Longitude"]


def test_pad_row():
    assert pad_row(["a"], 3) == ["a", "", ""]
    assert pad_row(["a", "b", "c"], 3) == ["a", "b", "c"]


def test_tabular_data_width():
    assert TabularData(headers=["a", "b"]).width == 2


# ============================================================================
# read_tabular_csv
# ============================================================================

def test_read_keeps_values_as_strings(write_csv):
    path = write_csv('id,pos,name\n007,"33T WN 12345 67890",NA\n2,,null\n')
    table = read_tabular_csv(path)

    assert table.headers == ["id", "pos", "name"]
    assert table.rows == [
        ["007", "33T WN 12345 67890", "NA"],
        ["2", "", "null"],
    ]
    assert table.source == str(path)


def test_read_preserves_duplicate_headers(write_csv):
    path = write_csv("pos,pos,1\na,b,c\n")
    assert read_tabular_csv(path).headers == ["pos", "pos", "1"]


def test_read_header_only(write_csv):
    table = read_tabular_csv(write_csv("id,pos\n"))
    assert table.headers == ["id", "pos"]
    assert table.rows == []


def test_read_pads_short_rows(write_csv):
    path = write_csv("a,b,c\n1,2,3\n4\n")
    assert read_tabular_csv(path).rows == [["1", "2", "3"], ["4", "", ""]]


def test_read_rejects_long_rows(write_csv):
    path = write_csv("a,b\n1,2\n3,4,5\n")
    with pytest.raises(CsvReadError) as exc_info:
        read_tabular_csv(path)
    assert "Failed to read CSV record" in str(exc_info.value)


def test_read_empty_file(write_csv):
    with pytest.raises(CsvReadError) as exc_info:
        read_tabular_csv(write_csv(""))
    assert "header" in str(exc_info.value)


def test_read_missing_file(tmp_path):
    with pytest.raises(CsvReadError) as exc_info:
        read_tabular_csv(tmp_path / "missing.csv")
    assert "Failed to open input file" in str(exc_info.value)


def test_read_quoted_fields_with_commas_and_newlines(write_csv):
    path = write_csv('id,note\n1,"a, b"\n2,"line1\nline2"\n')
    assert read_tabular_csv(path).rows == [["1", "a, b"], ["2", "line1\nline2"]]


def test_read_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("name\nJos\xe9\n".encode("latin-1"))
    with pytest.raises(CsvReadError):
        read_tabular_csv(path, encoding="utf-8")
    assert read_tabular_csv(path, encoding="latin-1").rows == [["Jos\xe9"]]


# ============================================================================
# write_rows / open_output
# ============================================================================

def test_write_rows_header_first_and_minimal_quoting():
    buffer = io.StringIO()
    count = write_rows(
        buffer,
        ["id", "pos", "Latitude", "Longitude"],
        [["1", "33T WN 12345 67890", "47.5", "15.25"], ["2", "a,b", "", ""]],
    )

    assert count == 2
    assert buffer.getvalue() == (
        "id,pos,Latitude,Longitude\n"
        "1,33T WN 12345 67890,47.5,15.25\n"
        '2,"a,b",,\n'
    )


def test_write_rows_consumes_generator_lazily():
    buffer = io.StringIO()
    seen = []

    def rows():
        for i in range(3):
            # Header plus all earlier rows are already written when a row is produced
            seen.append(buffer.getvalue().count("\n"))
            yield [str(i)]

    write_rows(buffer, ["n"], rows())
    assert seen == [1, 2, 3]


def test_write_rows_wraps_os_errors():
    class BrokenHandle(io.StringIO):
        def write(self, s):
            raise OSError("disk full")

    with pytest.raises(CsvWriteError) as exc_info:
        write_rows(BrokenHandle(), ["a"], [["1"]])
    assert "Failed to write headers" in str(exc_info.value)


def test_open_output_file_is_created_and_closed(tmp_path):
    path = tmp_path / "out.csv"
    with open_output(path) as handle:
        write_rows(handle, ["a"], [["1"]])
    assert handle.closed
    assert path.read_text(encoding="utf-8") == "a\n1\n"


def test_open_output_defaults_to_stdout(capsys):
    with open_output(None) as handle:
        write_rows(handle, ["a"], [["1"]])
    assert capsys.readouterr().out == "a\n1\n"


def test_open_output_bad_path(tmp_path):
    with pytest.raises(CsvWriteError) as exc_info:
        with open_output(tmp_path / "no_such_dir" / "out.csv"):
            pass
    assert "Failed to create output file" in str(exc_info.value)
