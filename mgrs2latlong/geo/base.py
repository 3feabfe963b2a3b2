"""
Base abstractions for grid-reference converters.

**Conceptual**: The CSV pipeline needs exactly one capability from the grid
math: "turn this normalized MGRS string into latitude/longitude, or tell me it
can't". This module defines that capability as a Protocol so the pipeline can
be tested with a fake converter, independent of projection correctness.

**Why a Protocol?**
  - Structural typing: any object with a matching to_latlon() is a converter.
  - Test fakes are two-line classes, no inheritance needed.
  - The pipeline never imports pyproj directly.

**Failure contract**: A converter signals "not a valid grid reference" by
raising MgrsConversionError, and nothing else. The pipeline treats that error
as row-local (blank output fields) and lets anything else propagate.
"""

from typing import Protocol, Tuple

# (latitude, longitude) in decimal degrees, WGS84
GeoPair = Tuple[float, float]


class MgrsConversionError(ValueError):
    """
    Raised when a string cannot be converted as an MGRS grid reference.

    **Conceptual**: This is a row-local failure. A CSV of field reports will
    routinely contain typos, truncated references and placeholder text; none of
    these should abort the run, they should just leave Latitude/Longitude blank.
    """
    pass


class CoordinateConverter(Protocol):
    """
    Protocol for converting normalized MGRS strings to geographic coordinates.

    **Example usage**:
        >>> from mgrs2latlong.geo.converter import MgrsConverter
        >>> converter = MgrsConverter()
        >>> lat, lon = converter.to_latlon("33TWN1234567890")

    **Testing strategy**:
        >>> class FakeConverter:
        ...     def to_latlon(self, mgrs):
        ...         if mgrs == "BAD":
        ...             raise MgrsConversionError(mgrs)
        ...         return (1.0, 2.0)
    """

    def to_latlon(self, mgrs: str) -> GeoPair:
        """
        Convert a normalized MGRS string (no whitespace) to (latitude, longitude).

        Args:
            mgrs: Grid reference such as "33TWN1234567890".

        Returns:
            (latitude, longitude) in decimal degrees.

        Raises:
            MgrsConversionError: If the string is not a valid grid reference.
        """
        ...
