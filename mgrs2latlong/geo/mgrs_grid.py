"""
MGRS letter arithmetic: grid reference <-> UTM zone/easting/northing.

**Conceptual**: An MGRS reference such as "33TWN1234567890" is a compressed
UTM position:
  - "33"          UTM zone number (1-60, 6 degrees of longitude each).
  - "T"           latitude band (8 degrees each, C..X without I and O).
  - "WN"          100 km square: column letter (easting) + row letter (northing).
  - "12345 67890" easting and northing inside the square, same digit count each.

The column letter only tells us the easting modulo the zone width, and the row
letter only tells us the northing modulo 2 000 km. The band letter resolves the
northing ambiguity: we lift the 100 km row value in 2 000 km steps until it
reaches the band's minimum northing.

Projection between UTM and latitude/longitude is not done here (see
converter.py); this module is pure string and integer work.

**Scope**: UTM bands only. Polar UPS references (bands A, B, Y, Z) are rejected.
"""

import math
import re
from dataclasses import dataclass

from mgrs2latlong.geo.base import MgrsConversionError


# Latitude bands south to north, 8 degrees each starting at -80 (X spans 72-84)
LATITUDE_BANDS = "CDEFGHJKLMNPQRSTUVWX"

# 100 km column letters, cycling every three zones
COLUMN_LETTER_SETS = ("ABCDEFGH", "JKLMNPQR", "STUVWXYZ")

# 100 km row letters, cycling every 2 000 km of northing
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

# Even-numbered zones start their row lettering at "F"
EVEN_ZONE_ROW_OFFSET = 5

ROW_CYCLE_METRES = 2_000_000

# Smallest northing (metres) reached anywhere inside each band, rounded down to 100 km.
# Southern bands include the 10 000 km false northing.
BAND_MIN_NORTHING = {
    "C": 1_100_000,
    "D": 2_000_000,
    "E": 2_800_000,
    "F": 3_700_000,
    "G": 4_600_000,
    "H": 5_500_000,
    "J": 6_400_000,
    "K": 7_300_000,
    "L": 8_200_000,
    "M": 9_100_000,
    "N": 0,
    "P": 800_000,
    "Q": 1_700_000,
    "R": 2_600_000,
    "S": 3_500_000,
    "T": 4_400_000,
    "U": 5_300_000,
    "V": 6_200_000,
    "W": 7_000_000,
    "X": 7_900_000,
}

MAX_PRECISION = 5

_MGRS_RE = re.compile(r"^(\d{1,2})([A-Z])([A-Z])([A-Z])(\d*)$")


@dataclass(frozen=True)
class UtmPosition:
    """A UTM coordinate: zone, hemisphere and metric easting/northing."""
    zone: int
    northern: bool
    easting: float
    northing: float


@dataclass(frozen=True)
class MgrsReference:
    """
    A parsed, validated MGRS grid reference.

    Attributes:
        zone: UTM zone number, 1-60.
        band: Latitude band letter (uppercase).
        column: 100 km column letter (uppercase).
        row: 100 km row letter (uppercase).
        easting: Metres east inside the 100 km square (already scaled).
        northing: Metres north inside the 100 km square (already scaled).
        precision: Digits per axis in the original string (0-5).
    """
    zone: int
    band: str
    column: str
    row: str
    easting: int
    northing: int
    precision: int

    @property
    def northern(self) -> bool:
        return self.band >= "N"

    def to_utm(self) -> UtmPosition:
        """
        Expand the reference to a full UTM position.

        The result is the south-west corner of the referenced square at the
        string's precision (e.g. a 1 km reference resolves to its corner).
        """
        letters = _column_letters(self.zone)
        east_100k = (letters.index(self.column) + 1) * 100_000

        row_index = ROW_LETTERS.index(self.row) - _row_offset(self.zone)
        north_100k = (row_index % len(ROW_LETTERS)) * 100_000
        while north_100k < BAND_MIN_NORTHING[self.band]:
            north_100k += ROW_CYCLE_METRES

        return UtmPosition(
            zone=self.zone,
            northern=self.northern,
            easting=float(east_100k + self.easting),
            northing=float(north_100k + self.northing),
        )


def _column_letters(zone: int) -> str:
    return COLUMN_LETTER_SETS[(zone - 1) % 3]


def _row_offset(zone: int) -> int:
    return EVEN_ZONE_ROW_OFFSET if zone % 2 == 0 else 0


def parse_mgrs(text: str) -> MgrsReference:
    """
    Parse and validate a normalized MGRS string.

    **Functionally**:
      - Case-insensitive; the input must contain no whitespace.
      - Zone must be 1-60, band must be a UTM band letter.
      - Column letter must belong to the zone's column set; row letter must be
        one of the 20 row letters.
      - The numeric tail must have an even number of digits, at most 10; it
        is split in half and each half scaled to metres.

    Args:
        text: Normalized grid reference, e.g. "33TWN1234567890" or "4QFJ1234".

    Returns:
        MgrsReference with all fields validated.

    Raises:
        MgrsConversionError: On any structural or range violation.
    """
    match = _MGRS_RE.match(text.upper())
    if match is None:
        raise MgrsConversionError(f"Not an MGRS grid reference: {text!r}")

    zone_str, band, column, row, digits = match.groups()
    zone = int(zone_str)

    if not 1 <= zone <= 60:
        raise MgrsConversionError(f"UTM zone out of range (1-60) in {text!r}: {zone}")
    if band not in LATITUDE_BANDS:
        raise MgrsConversionError(f"Invalid latitude band {band!r} in {text!r}")
    if column not in _column_letters(zone):
        raise MgrsConversionError(
            f"Invalid 100 km column letter {column!r} for zone {zone} in {text!r}"
        )
    if row not in ROW_LETTERS:
        raise MgrsConversionError(f"Invalid 100 km row letter {row!r} in {text!r}")
    if len(digits) % 2 != 0 or len(digits) > 2 * MAX_PRECISION:
        raise MgrsConversionError(
            f"Easting/northing must have an even number of digits (at most "
            f"{2 * MAX_PRECISION}) in {text!r}, got {len(digits)}"
        )

    precision = len(digits) // 2
    scale = 10 ** (MAX_PRECISION - precision)
    easting = int(digits[:precision]) * scale if precision else 0
    northing = int(digits[precision:]) * scale if precision else 0

    return MgrsReference(
        zone=zone,
        band=band,
        column=column,
        row=row,
        easting=easting,
        northing=northing,
        precision=precision,
    )


def band_for(latitude: float) -> str:
    """
    Return the latitude band letter for a latitude in degrees.

    Raises:
        MgrsConversionError: If latitude is outside -80..84 (UPS territory).
    """
    if not -80.0 <= latitude <= 84.0:
        raise MgrsConversionError(
            f"Latitude {latitude} is outside the UTM/MGRS range (-80 to 84)"
        )
    index = int((latitude + 80.0) // 8)
    # Band X is 12 degrees tall, so 80-84 still maps to it
    return LATITUDE_BANDS[min(index, len(LATITUDE_BANDS) - 1)]


def zone_for(latitude: float, longitude: float) -> int:
    """
    Return the UTM zone number for a position, honouring the Norway and
    Svalbard exceptions.
    """
    if not -180.0 <= longitude <= 180.0:
        raise MgrsConversionError(f"Longitude {longitude} is outside -180 to 180")

    zone = int((longitude + 180.0) // 6) + 1
    if zone > 60:
        zone = 60

    # South-west Norway
    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        return 32

    # Svalbard
    if 72.0 <= latitude <= 84.0 and 0.0 <= longitude < 42.0:
        if longitude < 9.0:
            return 31
        if longitude < 21.0:
            return 33
        if longitude < 33.0:
            return 35
        return 37

    return zone


def encode_mgrs(
    zone: int,
    band: str,
    easting: float,
    northing: float,
    precision: int = MAX_PRECISION,
) -> str:
    """
    Encode a UTM position as an MGRS string.

    Digits are truncated (not rounded) to the requested precision, which is
    the MGRS convention: a reference names the square that contains the point.

    Args:
        zone: UTM zone number (1-60).
        band: Latitude band letter.
        easting: UTM easting in metres.
        northing: UTM northing in metres (southern hemisphere includes false northing).
        precision: Digits per axis, 0-5 (5 = 1 m, 4 = 10 m, ... 0 = 100 km).

    Returns:
        Compact MGRS string, e.g. "33TWN1234567890".

    Raises:
        MgrsConversionError: If precision is out of range or the easting falls
            outside the eight 100 km columns of a zone.
    """
    if not 0 <= precision <= MAX_PRECISION:
        raise MgrsConversionError(f"Precision must be 0-{MAX_PRECISION}, got {precision}")

    column_index = int(math.floor(easting / 100_000)) - 1
    letters = _column_letters(zone)
    if not 0 <= column_index < len(letters):
        raise MgrsConversionError(
            f"Easting {easting} is outside the MGRS columns of zone {zone}"
        )

    row_index = (int(math.floor(northing / 100_000)) + _row_offset(zone)) % len(ROW_LETTERS)

    if precision == 0:
        digits = ""
    else:
        divisor = 10 ** (MAX_PRECISION - precision)
        east_digits = int(math.floor(easting % 100_000)) // divisor
        north_digits = int(math.floor(northing % 100_000)) // divisor
        digits = f"{east_digits:0{precision}d}{north_digits:0{precision}d}"

    return f"{zone:02d}{band}{letters[column_index]}{ROW_LETTERS[row_index]}{digits}"
