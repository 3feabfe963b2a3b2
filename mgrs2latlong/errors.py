"""
Fatal error types for a conversion run.

**Conceptual**: Every condition that aborts a run raises a subclass of
Mgrs2LatLongError. The CLI catches the base class once, prints the message and
exits non-zero, so each message must say what was being attempted and on which
file or record.

Row-local failures (a value that is not a valid grid reference) are NOT in this
hierarchy: they blank the output fields for that row and the run continues.
See mgrs2latlong.geo.base.MgrsConversionError.
"""


class Mgrs2LatLongError(RuntimeError):
    """Base class for errors that abort a conversion run."""
    pass


class CsvReadError(Mgrs2LatLongError):
    """
    Raised when the input CSV cannot be opened or parsed.

    Covers a missing/unreadable file, an empty file with no header line, and
    any malformed record (more fields than the header, broken quoting,
    undecodable bytes).
    """
    pass


class CsvWriteError(Mgrs2LatLongError):
    """Raised when the output cannot be created, written or flushed."""
    pass


class NoMgrsColumnError(Mgrs2LatLongError):
    """
    Raised when no column in the sampled rows looks like an MGRS column.

    This includes inputs with a header but zero data rows. It is raised before
    the output is opened, so no output file is created.
    """
    pass
