"""
MGRS column detection over a bounded row sample.

**Conceptual**: The input CSV has an unknown schema, so we find the coordinate
column by voting: every sampled row gives one point to each column whose value
passes the plausibility classifier. The column with the most points wins.

**Why only a prefix sample?**
  - Detection must finish before the first output row is written.
  - 100 rows is plenty to separate a coordinate column from free text.
  - Scanning a million-row file twice just to pick a column is wasted work.

**Tie-breaking**: Equal maximal scores resolve to the lowest column index, so
detection is deterministic for a given input.
"""

from typing import Dict, Optional, Sequence

from mgrs2latlong.detection.classifier import looks_like_mgrs

DETECTION_SAMPLE_ROWS = 100


def score_columns(
    rows: Sequence[Sequence[str]],
    sample_size: int = DETECTION_SAMPLE_ROWS,
) -> Dict[int, int]:
    """
    Count, per column, how many sampled rows hold an MGRS-like value.

    Args:
        rows: Data rows (header excluded). Rows may differ in length.
        sample_size: Maximum number of leading rows to examine.

    Returns:
        Dict mapping every column index seen in the sample (0-based, dense)
        to its score. Empty dict if there are no rows.
    """
    sample = rows[:sample_size]
    width = max((len(row) for row in sample), default=0)
    scores: Dict[int, int] = {index: 0 for index in range(width)}

    for row in sample:
        for index, field in enumerate(row):
            if looks_like_mgrs(field.strip()):
                scores[index] += 1

    return scores


def best_column(scores: Dict[int, int]) -> Optional[int]:
    """Return the lowest-index column with the highest nonzero score, or None."""
    best_index: Optional[int] = None
    best_score = 0
    for index in sorted(scores):
        # Strict comparison keeps the first (lowest) index on ties
        if scores[index] > best_score:
            best_index = index
            best_score = scores[index]
    return best_index


def detect_mgrs_column(
    rows: Sequence[Sequence[str]],
    sample_size: int = DETECTION_SAMPLE_ROWS,
) -> Optional[int]:
    """
    Pick the column most likely to hold MGRS grid references.

    **Functionally**:
      - No rows -> None.
      - Scores at most the first `sample_size` rows.
      - Returns the argmax column; lowest index on ties.
      - All scores zero -> None (callers treat this as fatal, there is no
        fallback to column 0).

    Args:
        rows: Data rows (header excluded).
        sample_size: Maximum number of leading rows to examine.

    Returns:
        0-based column index, or None if no column looks like MGRS.

    Example:
        >>> detect_mgrs_column([["1", "33TWN1234567890", "Alice"]])
        1
    """
    if not rows:
        return None
    return best_column(score_columns(rows, sample_size=sample_size))
