"""Horizontal line graphs drawn with braille characters, 4 values per line."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

from braillegraph.braille_char import BrailleChar
from braillegraph.core import (
    GraphConfig,
    Group,
    assemble_row,
    dot_array_groups,
    dot_groups,
    scale,
    zero_position,
)

_DOTS_PER_VALUE = 2
_VALUES_PER_LINE = 4
_MISSING = object()


def _row_buffers(
    values: Iterable[object], rows: int, convert: Callable[[object], list[Group]]
) -> Iterator[list[list[Group]]]:
    """Group converted input values ``rows`` at a time.

    A group is yielded while input remains, and for the final partial group
    only when it holds any dots.
    """
    iterator = iter(values)
    more = True
    while more:
        buffer: list[list[Group]] = []
        for _ in range(rows):
            item = next(iterator, _MISSING)
            if item is _MISSING:
                more = False
                buffer.append([])
            else:
                buffer.append(convert(item))
        if more or any(buffer):
            yield buffer


def _render(buffer: Sequence[Sequence[Group]]) -> str:
    cells = assemble_row(buffer)
    return "".join(BrailleChar.from_dot_pairs(cell).as_char() for cell in cells) + "\n"


def _pair_positions(
    line: Sequence[Optional[float]], to_position: Callable[[float], int]
) -> Optional[list[int]]:
    """Scale a line of values; None when every value is missing."""
    if all(value is None for value in line):
        return None
    if any(value is None for value in line):
        raise ValueError("cannot plot a line with only some values missing")
    return [to_position(value) for value in line]


class BrailleLines:
    """Horizontal braille bars, ``config.size`` characters wide."""

    def __init__(self, config: GraphConfig) -> None:
        self.config = config

    def _scale(self, value: float) -> int:
        high = self.config.size * _DOTS_PER_VALUE
        return scale(value, self.config.minimum, self.config.maximum, 1, high)

    def print_graph(self, values: Iterable[Optional[float]], writer: TextIO) -> None:
        """Draw one series; missing values leave a blank dot row."""
        high = self.config.size * _DOTS_PER_VALUE
        zero = zero_position(self.config.minimum, self.config.maximum, 1, high)
        style = self.config.style

        def convert(value: object) -> list[Group]:
            if value is None:
                return []
            return dot_groups(self._scale(value), zero, style, _DOTS_PER_VALUE)

        for buffer in _row_buffers(values, _VALUES_PER_LINE, convert):
            writer.write(_render(buffer))

    def print_pairs(
        self, values: Iterable[Sequence[Optional[float]]], writer: TextIO
    ) -> None:
        """Draw the span between two series per input line."""
        style = self.config.style

        def convert(line: object) -> list[Group]:
            positions = _pair_positions(line, self._scale)
            if positions is None:
                return []
            return dot_array_groups(positions, style, _DOTS_PER_VALUE)

        for buffer in _row_buffers(values, _VALUES_PER_LINE, convert):
            writer.write(_render(buffer))