"""
Grid-reference conversion: MGRS letter arithmetic and UTM/WGS84 projection.

Defines the narrow converter interface the CSV pipeline depends on, plus the
concrete pyproj-backed implementation.
"""
