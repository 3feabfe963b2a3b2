"""
Configuration settings for CSV conversion runs.

**Conceptual**: This module provides a strongly-typed configuration object
that loads from environment variables (via .env files). Settings are validated
at startup, so a bad value fails the run before any file is touched.

**Why centralized config?**
  - Single source of truth for encoding and detection parameters.
  - Easy to test (inject a Settings object instead of reading the environment).
  - Fail-fast validation (MGRS2LATLONG_SAMPLE_ROWS=abc -> clear error at startup).

**What is NOT configurable**: which column holds the coordinates. Detection
is always automatic.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from mgrs2latlong.detection.detector import DETECTION_SAMPLE_ROWS

# Load .env from project root (dev/local environments); no-op if absent
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / ".env")


@dataclass(frozen=True)
class Settings:
    """
    Settings for a conversion run.

    Attributes:
        encoding: Text encoding for both the input and output CSV (default "utf-8").
        detection_sample_rows: How many leading data rows the column detector
                               examines (default 100). Must be positive.
    """
    encoding: str = "utf-8"
    detection_sample_rows: int = DETECTION_SAMPLE_ROWS

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.encoding:
            raise ValueError(
                "MGRS2LATLONG_ENCODING must not be empty. "
                "Unset it to use the default (utf-8)."
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(
                f"MGRS2LATLONG_ENCODING is not a known text encoding, got: {self.encoding}"
            )
        if self.detection_sample_rows <= 0:
            raise ValueError(
                f"detection_sample_rows must be positive, got: {self.detection_sample_rows}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - MGRS2LATLONG_ENCODING (optional): Input/output encoding.
            Defaults to "utf-8" if not set.
          - MGRS2LATLONG_SAMPLE_ROWS (optional): Detection sample size.
            Defaults to 100 if not set.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If a value is present but invalid.
        """
        encoding = os.getenv("MGRS2LATLONG_ENCODING", "utf-8")
        sample_rows_str = os.getenv("MGRS2LATLONG_SAMPLE_ROWS", str(DETECTION_SAMPLE_ROWS))

        try:
            detection_sample_rows = int(sample_rows_str)
        except ValueError:
            raise ValueError(
                f"MGRS2LATLONG_SAMPLE_ROWS must be an integer, got: {sample_rows_str}"
            )

        return cls(
            encoding=encoding,
            detection_sample_rows=detection_sample_rows,
        )


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.
    Tests should build their own Settings objects or call reset_settings().
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """Reset the global settings singleton (for testing)."""
    global _default_settings
    _default_settings = None
