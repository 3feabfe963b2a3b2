"""
End-to-end CSV conversion pipeline.

Coordinates reading, column detection, per-row conversion and streamed output
in a single sequential pass.
"""
