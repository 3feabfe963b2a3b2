"""
mgrs2latlong - append latitude/longitude columns to CSV files holding MGRS grid references.

The MGRS column is detected automatically from a prefix sample of the rows, so
callers never have to say which column holds the coordinates.
"""

__version__ = "0.1.0"
