"""
pyproj-backed MGRS converter.

**Conceptual**: MGRS is UTM with a lettered grid laid on top. Once
mgrs_grid.py has expanded the letters into a UTM zone/easting/northing, the
remaining step is an ordinary map projection, which we hand to pyproj (PROJ)
rather than re-implementing the transverse Mercator series.

**Transformer caching**: Building a pyproj Transformer involves a database
lookup. A CSV typically has thousands of rows in a handful of zones, so
transformers are cached per (zone, hemisphere, direction).
"""

import math
from functools import lru_cache

from pyproj import Transformer

from mgrs2latlong.geo.base import GeoPair, MgrsConversionError
from mgrs2latlong.geo.mgrs_grid import (
    MAX_PRECISION,
    band_for,
    encode_mgrs,
    parse_mgrs,
    zone_for,
)

WGS84_EPSG = 4326


def utm_epsg(zone: int, northern: bool) -> int:
    """EPSG code of the WGS84 UTM CRS for a zone/hemisphere (326zz or 327zz)."""
    return (32600 if northern else 32700) + zone


@lru_cache(maxsize=None)
def _utm_to_geographic(zone: int, northern: bool) -> Transformer:
    return Transformer.from_crs(
        f"EPSG:{utm_epsg(zone, northern)}", f"EPSG:{WGS84_EPSG}", always_xy=True
    )


@lru_cache(maxsize=None)
def _geographic_to_utm(zone: int, northern: bool) -> Transformer:
    return Transformer.from_crs(
        f"EPSG:{WGS84_EPSG}", f"EPSG:{utm_epsg(zone, northern)}", always_xy=True
    )


class MgrsConverter:
    """
    Convert MGRS grid references to WGS84 latitude/longitude and back.

    Satisfies the CoordinateConverter protocol via to_latlon().

    Example:
        >>> converter = MgrsConverter()
        >>> lat, lon = converter.to_latlon("33TWN1234567890")
        >>> converter.from_latlon(47.5, 15.0, precision=2)[:5]
        '33TWN'
    """

    def to_latlon(self, mgrs: str) -> GeoPair:
        """
        Convert a normalized MGRS string to (latitude, longitude).

        Args:
            mgrs: Grid reference without whitespace.

        Returns:
            (latitude, longitude) in decimal degrees of the square's
            south-west corner at the string's precision.

        Raises:
            MgrsConversionError: If the string does not parse or projects to a
                non-finite position.
        """
        utm = parse_mgrs(mgrs).to_utm()
        transformer = _utm_to_geographic(utm.zone, utm.northern)
        longitude, latitude = transformer.transform(utm.easting, utm.northing)

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise MgrsConversionError(f"Grid reference {mgrs!r} does not project to a valid position")

        return float(latitude), float(longitude)

    def from_latlon(self, latitude: float, longitude: float, precision: int = MAX_PRECISION) -> str:
        """
        Encode a WGS84 position as a compact MGRS string.

        Args:
            latitude: Degrees, -80 to 84.
            longitude: Degrees, -180 to 180.
            precision: Digits per axis (5 = 1 m).

        Raises:
            MgrsConversionError: If the position is outside the UTM bands.
        """
        band = band_for(latitude)
        zone = zone_for(latitude, longitude)
        northern = band >= "N"

        transformer = _geographic_to_utm(zone, northern)
        easting, northing = transformer.transform(longitude, latitude)

        if not (math.isfinite(easting) and math.isfinite(northing)):
            raise MgrsConversionError(
                f"Position ({latitude}, {longitude}) does not project into UTM zone {zone}"
            )

        return encode_mgrs(zone, band, easting, northing, precision=precision)
