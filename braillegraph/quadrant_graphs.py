"""Line and column graphs drawn with quadrant blocks, 2 x 2 dots per cell."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

from braillegraph.core import (
    GraphConfig,
    GraphStyle,
    Group,
    assemble_row,
    dot_array_groups,
    dot_groups,
    scale,
    zero_position,
)
from braillegraph.quadrants import quadrant_char

_DOTS = 2
_MISSING = object()

ColumnPairs = Sequence[Sequence[Sequence[Sequence[bool]]]]


def _row_buffers(
    values: Iterable[object], convert: Callable[[object], list[Group]]
) -> Iterator[list[list[Group]]]:
    """Group converted values two at a time; a final empty group is skipped."""
    iterator = iter(values)
    more = True
    while more:
        buffer: list[list[Group]] = []
        for _ in range(_DOTS):
            item = next(iterator, _MISSING)
            if item is _MISSING:
                more = False
                buffer.append([])
            else:
                buffer.append(convert(item))
        if more or any(buffer):
            yield buffer


def _render_row(buffer: Sequence[Sequence[Group]]) -> str:
    return "".join(quadrant_char(cell) for cell in assemble_row(buffer)) + "\n"


def _input_pairs(values: Iterable[object]) -> Iterator[tuple[object, object]]:
    iterator = iter(values)
    for left in iterator:
        yield left, next(iterator, _MISSING)


def _pair_positions(
    line: Sequence[Optional[float]], to_position: Callable[[float], int]
) -> Optional[list[int]]:
    if all(value is None for value in line):
        return None
    if any(value is None for value in line):
        raise ValueError("cannot plot a line with only some values missing")
    return [to_position(value) for value in line]


def _cell_dot(side: Sequence[Sequence[bool]], row_index: int, dot: int) -> bool:
    if row_index >= len(side):
        return False
    pair = side[row_index]
    return bool(pair[dot]) if dot < len(pair) else False


def quadrant_rows(column_pairs: ColumnPairs, height: int) -> str:
    """Render columns of dot pairs as ``height`` lines of blocks, top line first.

    Each column holds a left and a right list of pairs, bottom pair first; each
    pair lists its dots from the bottom up.
    """
    lines = []
    for row_index in reversed(range(height)):
        blocks = []
        for column in column_pairs:
            left_side, right_side = column[0], column[-1]
            block = [(False, False)] * _DOTS
            for block_row in range(_DOTS):
                block[_DOTS - 1 - block_row] = (
                    _cell_dot(left_side, row_index, block_row),
                    _cell_dot(right_side, row_index, block_row),
                )
            blocks.append(quadrant_char(block))
        lines.append("".join(blocks) + "\n")
    return "".join(lines)


def pair_dot_pairs(line_set: Sequence[int], style: GraphStyle) -> list[Group]:
    """Lay out the dots spanning a pair of positions in pairs."""
    if len(line_set) != 2:
        raise ValueError("Not yet supported")
    return dot_array_groups(line_set, style, _DOTS)


class _QuadrantGraph:
    config: GraphConfig

    @property
    def _high(self) -> int:
        return self.config.size * _DOTS

    def _scale(self, value: float) -> int:
        return scale(value, self.config.minimum, self.config.maximum, 1, self._high)

    def _zero(self) -> int:
        return zero_position(self.config.minimum, self.config.maximum, 1, self._high)


class QuadrantLines(_QuadrantGraph):
    """Horizontal quadrant-block bars, ``config.size`` cells wide."""

    def __init__(self, config: GraphConfig) -> None:
        self.config = config

    def print_graph(self, values: Iterable[Optional[float]], writer: TextIO) -> None:
        """Draw one series; missing values leave a blank dot row."""
        zero = self._zero()
        style = self.config.style

        def convert(value: object) -> list[Group]:
            if value is None:
                return []
            return dot_groups(self._scale(value), zero, style, _DOTS)

        for buffer in _row_buffers(values, convert):
            writer.write(_render_row(buffer))

    def print_pairs(
        self, values: Iterable[Sequence[Optional[float]]], writer: TextIO
    ) -> None:
        """Draw the span between two series per input line."""
        style = self.config.style

        def convert(line: object) -> list[Group]:
            positions = _pair_positions(line, self._scale)
            if positions is None:
                return []
            return dot_array_groups(positions, style, _DOTS)

        for buffer in _row_buffers(values, convert):
            writer.write(_render_row(buffer))


class QuadrantColumns(_QuadrantGraph):
    """Vertical quadrant-block columns, ``config.size`` cells tall."""

    def __init__(self, config: GraphConfig) -> None:
        self.config = config

    def print_graph(self, values: Iterable[Optional[float]], writer: TextIO) -> None:
        """Draw one series, two values per cell; missing values stay blank."""
        zero = self._zero()
        style = self.config.style
        columns = []
        for pair in _input_pairs(values):
            column: list[list[Group]] = [[], []]
            for side, value in enumerate(pair):
                if value is not _MISSING and value is not None:
                    column[side] = dot_groups(self._scale(value), zero, style, _DOTS)
            columns.append(column)
        writer.write(quadrant_rows(columns, self.config.size))

    def print_pairs(
        self, values: Iterable[Sequence[Optional[float]]], writer: TextIO
    ) -> None:
        """Draw the span between two series per input line."""
        style = self.config.style
        columns = []
        for pair in _input_pairs(values):
            column: list[list[Group]] = [[], []]
            for side, line in enumerate(pair):
                if line is not _MISSING:
                    positions = [0 if x is None else self._scale(x) for x in line]
                    column[side] = pair_dot_pairs(positions, style)
            columns.append(column)
        writer.write(quadrant_rows(columns, self.config.size))