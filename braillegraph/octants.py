"""Octant block characters: 4 x 2 dots per character cell."""

from __future__ import annotations

from typing import Sequence

# Patterns already encoded outside the octant block, keyed by dot mask.
# Bit order: row 0 left, row 0 right, row 1 left, row 1 right, ... row 3 right.
_SPECIAL = {
    0: " ",
    1: "𜺨",
    2: "𜺫",
    3: "🮂",
    5: "▘",
    10: "▝",
    15: "▀",
    20: "🯦",
    40: "🯧",
    63: "🮅",
    64: "𜺣",
    80: "▖",
    85: "▌",
    90: "▞",
    95: "▛",
    128: "𜺠",
    160: "▗",
    165: "▚",
    170: "▐",
    175: "▜",
    192: "▂",
    240: "▄",
    245: "▙",
    250: "▟",
    252: "▆",
    255: "█",
}

# The remaining masks take consecutive code points of the octant block, in mask order.
_OCTANT_START = 0x1CD00


def _build_table() -> tuple[str, ...]:
    table = []
    next_code = _OCTANT_START
    for mask in range(256):
        if mask in _SPECIAL:
            table.append(_SPECIAL[mask])
        else:
            table.append(chr(next_code))
            next_code += 1
    return tuple(table)


_OCTANTS = _build_table()


def octant_char(dots: Sequence[Sequence[bool]]) -> str:
    """The octant block for four rows of (left, right) dots, top row first."""
    if len(dots) != 4 or any(len(row) != 2 for row in dots):
        raise ValueError("octant cell needs 4 rows of 2 dots")
    mask = 0
    for row_index, (left, right) in enumerate(dots):
        if left:
            mask |= 1 << (2 * row_index)
        if right:
            mask |= 1 << (2 * row_index + 1)
    return _OCTANTS[mask]