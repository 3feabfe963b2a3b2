"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import mgrs2latlong...' works
from a plain checkout, and provides shared fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from mgrs2latlong.config.settings import Settings, reset_settings  # noqa: E402
from mgrs2latlong.geo.base import MgrsConversionError  # noqa: E402


class FakeConverter:
    """
    Stand-in for MgrsConverter with canned answers.

    Any value listed in `results` converts to that pair; everything else is
    rejected with MgrsConversionError. Every call is recorded in `calls`.
    """

    def __init__(self, results=None):
        self.results = dict(results or {})
        self.calls = []

    def to_latlon(self, mgrs):
        self.calls.append(mgrs)
        if mgrs not in self.results:
            raise MgrsConversionError(f"fake rejects {mgrs!r}")
        return self.results[mgrs]


@pytest.fixture
def fake_converter():
    return FakeConverter({"33TWN1234567890": (47.5, 15.25)})


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Keep the settings singleton and MGRS2LATLONG_* variables isolated per test."""
    monkeypatch.delenv("MGRS2LATLONG_ENCODING", raising=False)
    monkeypatch.delenv("MGRS2LATLONG_SAMPLE_ROWS", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""
    def _write(text, name="input.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write

