"""
MGRS column detection.

Includes the cheap plausibility classifier for single values and the column
scorer that picks the most coordinate-like column from a bounded row sample.
"""
