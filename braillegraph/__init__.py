"""Terminal graphs drawn with braille, block and quadrant characters, plus character helpers."""

__version__ = "0.23.0"