"""Vertical column graphs drawn with braille characters, 2 values per cell."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Iterator, Optional, Sequence, TextIO, TypeVar

from braillegraph.braille_char import BrailleChar
from braillegraph.core import (
    GraphConfig,
    GraphStyle,
    Group,
    dot_array_groups,
    dot_groups,
    scale,
    zero_position,
)

_DOTS_PER_CELL = 4
_T = TypeVar("_T")
_MISSING = object()

ColumnQuads = Sequence[Sequence[Sequence[Sequence[bool]]]]


def _chunk(bits: Sequence[bool], size: int) -> list[Group]:
    return list(zip_longest(*[iter(bits)] * size, fillvalue=False))


def _pairs(values: Iterable[_T]) -> Iterator[tuple[_T, object]]:
    """Yield consecutive pairs; the right side is ``_MISSING`` past the end."""
    iterator = iter(values)
    for left in iterator:
        yield left, next(iterator, _MISSING)


def _cell_dot(column: Sequence[Sequence[bool]], row_index: int, dot: int) -> bool:
    if row_index >= len(column):
        return False
    quad = column[row_index]
    return bool(quad[dot]) if dot < len(quad) else False


def braille_rows(column_quads: ColumnQuads, height: int) -> str:
    """Render columns of dot quads as ``height`` lines of braille, top line first.

    Each column holds a left and a right list of quads, bottom quad first; each
    quad lists its dots from the bottom up.
    """
    lines = []
    for row_index in reversed(range(height)):
        characters = []
        for column in column_quads:
            left_side, right_side = column[0], column[-1]
            cell = [(False, False)] * _DOTS_PER_CELL
            for character_row in range(_DOTS_PER_CELL):
                cell[_DOTS_PER_CELL - 1 - character_row] = (
                    _cell_dot(left_side, row_index, character_row),
                    _cell_dot(right_side, row_index, character_row),
                )
            characters.append(BrailleChar.from_dot_pairs(cell).as_char())
        lines.append("".join(characters) + "\n")
    return "".join(lines)


def pair_dot_quads(line_set: Sequence[int], style: GraphStyle) -> list[Group]:
    """Lay out the dots spanning a pair of positions in quads."""
    if len(line_set) != 2:
        raise ValueError("Not yet supported")
    return dot_array_groups(line_set, style, _DOTS_PER_CELL)


def multi_dot_quads(line_set: Sequence[int], zero: int, style: GraphStyle) -> list[Group]:
    """Lay out the dots for any number of positions in quads.

    Positions are taken two at a time as spans; an odd one left over is drawn
    on its own, measured from ``zero``.
    """
    if not line_set:
        return []
    if min(line_set) < 1:
        raise ValueError(f"dot position must be at least 1, got {min(line_set)}")

    auto = style is GraphStyle.AUTO
    filled = style is GraphStyle.FILLED
    bits = [False] * max(line_set)

    paired = len(line_set) - len(line_set) % 2
    for start, end in zip(line_set[:paired:2], line_set[1:paired:2]):
        start, end = sorted((start, end))
        for i in range(end):
            if i in (start - 1, end - 1):
                bits[i] = True
            if i >= zero:
                bits[i] |= auto
            if start <= i < end:
                bits[i] |= filled

    for value in line_set[paired:]:
        bits[value - 1] = True
        for i in range(zero, value):
            bits[i] |= auto

    return _chunk(bits, _DOTS_PER_CELL)


class BrailleColumns:
    """Vertical braille columns, ``config.size`` characters tall."""

    def __init__(self, config: GraphConfig) -> None:
        self.config = config

    @property
    def _high(self) -> int:
        return self.config.size * _DOTS_PER_CELL

    def _scale(self, value: float) -> int:
        return scale(value, self.config.minimum, self.config.maximum, 1, self._high)

    def _zero(self) -> int:
        return zero_position(self.config.minimum, self.config.maximum, 1, self._high)

    def _write(self, columns: list[list[list[Group]]], writer: TextIO) -> None:
        writer.write(braille_rows(columns, self.config.size))

    def print_graph(self, values: Iterable[Optional[float]], writer: TextIO) -> None:
        """Draw one series; missing values leave a blank column."""
        zero = self._zero()
        style = self.config.style
        columns = []
        for pair in _pairs(values):
            column: list[list[Group]] = [[], []]
            for side, value in enumerate(pair):
                if value is not _MISSING and value is not None:
                    column[side] = dot_groups(self._scale(value), zero, style, _DOTS_PER_CELL)
            columns.append(column)
        self._write(columns, writer)

    def print_pairs(
        self, values: Iterable[Sequence[Optional[float]]], writer: TextIO
    ) -> None:
        """Draw the span between two series per input line."""
        style = self.config.style
        columns = []
        for pair in _pairs(values):
            column: list[list[Group]] = [[], []]
            for side, line in enumerate(pair):
                if line is not _MISSING:
                    positions = [0 if x is None else self._scale(x) for x in line]
                    column[side] = pair_dot_quads(positions, style)
            columns.append(column)
        self._write(columns, writer)

    def print_multi(
        self, values: Iterable[Sequence[Optional[float]]], writer: TextIO
    ) -> None:
        """Draw any number of series per input line; missing values are skipped."""
        zero = self._zero()
        style = self.config.style
        columns = []
        for pair in _pairs(values):
            column: list[list[Group]] = [[], []]
            for side, line in enumerate(pair):
                if line is not _MISSING:
                    positions = [self._scale(x) for x in line if x is not None]
                    column[side] = multi_dot_quads(positions, zero, style)
            columns.append(column)
        self._write(columns, writer)