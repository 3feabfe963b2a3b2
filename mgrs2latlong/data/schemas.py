"""
In-memory table shape and output schema.

**Schema philosophy**:
  - Every value is a string; nothing is parsed or coerced on the way through.
  - Header names are kept verbatim, duplicates included.
  - Output = input columns in their original order + Latitude, Longitude.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

OUTPUT_COORDINATE_COLUMNS = ["Latitude", "Longitude"]


@dataclass(frozen=True)
class TabularData:
    """
    A fully loaded CSV.

    Attributes:
        headers: Column names from the first line, in order.
        rows: Data rows; each row has exactly len(headers) string fields.
        source: Description of where the data came from (used in error messages).
    """
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)
    source: str = "<memory>"

    @property
    def width(self) -> int:
        return len(self.headers)


def build_output_headers(headers: Sequence[str]) -> List[str]:
    """Return the output header row: input headers + Latitude, Longitude."""
    return list(headers) + OUTPUT_COORDINATE_COLUMNS


def pad_row(row: Sequence[str], width: int) -> List[str]:
    """Pad a short row with empty strings up to `width` fields."""
    padded = list(row)
    if len(padded) < width:
        padded.extend([""] * (width - len(padded)))
    return padded
