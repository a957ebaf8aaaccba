"""Quadrant block characters: 2 x 2 dots per character cell."""

from __future__ import annotations

from typing import Sequence

# Indexed by top-left, top-right, bottom-left, bottom-right as bits, high to low.
_QUADRANTS = " ▗▖▄▝▐▞▟▘▚▌▙▀▜▛█"


def quadrant_char(dots: Sequence[Sequence[bool]]) -> str:
    """The quadrant block for two rows of (left, right) dots, top row first."""
    if len(dots) != 2 or any(len(row) != 2 for row in dots):
        raise ValueError("quadrant cell needs 2 rows of 2 dots")
    (top_left, top_right), (bottom_left, bottom_right) = dots
    index = (
        bool(top_left) << 3
        | bool(top_right) << 2
        | bool(bottom_left) << 1
        | bool(bottom_right)
    )
    return _QUADRANTS[index]