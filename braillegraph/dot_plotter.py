"""Dot plots built from raw dot positions and ASCII dot sketches."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Iterator

from braillegraph.braille_char import BrailleChar
from braillegraph.core import Group, assemble_row

_PAIRS = {
    "--": (False, False),
    "-*": (False, True),
    "*-": (True, False),
    "**": (True, True),
}
_KEEP = frozenset(" -*")


class Plot:
    """A column of dots with the given positions set, grouped ``size`` at a time.

    The dot count is the largest position rounded up to a multiple of ``size``;
    a position at or past that count is rejected.
    """

    def __init__(self, values: Iterable[int], size: int) -> None:
        if size < 1:
            raise ValueError(f"group size must be at least 1, got {size}")
        positions = sorted(values)
        if not positions:
            raise ValueError("cannot plot an empty set of values")
        if positions[0] < 0:
            raise ValueError(f"dot position must not be negative, got {positions[0]}")

        highest = positions[-1]
        base = highest // size * size
        length = base + size if base < highest else base
        if highest >= length:
            raise ValueError(f"dot position {highest} out of range for {length} dots")

        bits = [False] * length
        for position in positions:
            bits[position] = True
        self._groups: list[Group] = list(zip(*[iter(bits)] * size))

    def __iter__(self) -> Iterator[Group]:
        return iter(self._groups)


def _parse_row(row: str) -> list[tuple[bool, bool]]:
    cleaned = "".join(char for char in row if char in _KEEP)
    pairs = []
    for token in cleaned.split():
        try:
            pairs.append(_PAIRS[token])
        except KeyError:
            raise ValueError(f"Invalid braille pair: {token!r}") from None
    return pairs


def render_dot_string(text: str) -> str:
    """Render an ASCII dot sketch as braille.

    The first line is a header and is ignored, as are blank lines. Every four
    remaining lines form one line of braille; each line holds dot pairs written
    as ``--``, ``-*``, ``*-`` or ``**``. Other characters are ignored.
    """
    lines = [line for line in text.splitlines()[1:] if line]
    if len(lines) % 4:
        raise ValueError(f"dot rows must come in groups of 4, got {len(lines)}")

    output = []
    for block in zip_longest(*[iter(lines)] * 4):
        rows = [_parse_row(row) for row in block]
        characters = (
            BrailleChar.from_dot_pairs(cell).as_char() for cell in assemble_row(rows)
        )
        output.append("".join(characters) + "\n")
    return "".join(output)