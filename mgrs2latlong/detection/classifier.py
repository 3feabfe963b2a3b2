"""
Plausibility classifier for MGRS-like values.

**Conceptual**: Before we know which column holds the coordinates, we need a
cheap yes/no answer to "does this cell look like a grid reference?" for
every cell in the sample. This is a pre-filter, not a validator:
  - False positives are fine: the converter re-validates every value, and a
    stray match in some other column rarely outscores the real column.
  - False negatives hurt: they lower the real column's score.

**Pattern** (case-insensitive, word-bounded, anywhere in the value):
    1-2 digits      zone number
    optional space
    1 letter        latitude band, C..X without I and O
    optional space
    2 letters       100 km square
    optional space
    2-10 digits     easting + northing (evenness is NOT checked here)

Values shorter than MIN_CANDIDATE_LENGTH after trimming are rejected outright.
"""

import re

# Compact references shorter than this (e.g. "4QFJ12") are ignored
MIN_CANDIDATE_LENGTH = 7

MGRS_CANDIDATE_PATTERN = re.compile(
    r"\b\d{1,2}\s*[C-HJ-NP-X]\s*[A-Z]{2}\s*\d{2,10}\b",
    re.IGNORECASE,
)


def looks_like_mgrs(value: str) -> bool:
    """
    Return True if value plausibly contains an MGRS grid reference.

    Args:
        value: Raw cell text; surrounding whitespace is ignored for the length
               check, internal whitespace is allowed by the pattern.

    Returns:
        True if the trimmed value is long enough and the pattern matches.

    Example:
        >>> looks_like_mgrs("33T WN 12345 67890")
        True
        >>> looks_like_mgrs("Alice")
        False
    """
    if len(value.strip()) < MIN_CANDIDATE_LENGTH:
        return False
    return MGRS_CANDIDATE_PATTERN.search(value) is not None


def normalize_mgrs(value: str) -> str:
    """
    Remove all whitespace from a candidate reference.

    Grid references are often written in groups ("33T WN 12345 67890");
    the converter expects the compact form ("33TWN1234567890").
    """
    return "".join(value.split())
