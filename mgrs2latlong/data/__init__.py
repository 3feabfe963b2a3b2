"""
Tabular I/O and output schema.

Handles reading the input CSV verbatim as strings and streaming augmented
rows back out with Latitude/Longitude columns appended.
"""
