"""Shared dot-layout primitives used by every graph renderer."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Sequence

Group = tuple[bool, ...]


class GraphStyle(enum.Enum):
    """How the space between a value and its baseline is drawn."""

    AUTO = "auto"
    FILLED = "filled"
    LINE = "line"


@dataclass(frozen=True)
class GraphConfig:
    """Settings shared by all graph renderers."""

    minimum: float
    maximum: float
    size: int
    style: GraphStyle = GraphStyle.FILLED


def _chunk(bits: Sequence[bool], size: int) -> list[Group]:
    """Split bits into groups of ``size``, padding the last group with False."""
    return list(zip_longest(*[iter(bits)] * size, fillvalue=False))


def _check_position(position: int) -> None:
    if position < 1:
        raise ValueError(f"dot position must be at least 1, got {position}")


def assemble_row(input_row: Sequence[Iterable[Sequence[bool]]]) -> list[tuple[Group, ...]]:
    """Turn M rows of N-wide dot groups into a list of N x M characters.

    Missing cells are blank. The last character is dropped when it has no dots.
    """
    rows = [[tuple(group) for group in row] for row in input_row]
    if not rows:
        raise ValueError("cannot assemble a row from no input rows")

    longest = max(len(row) for row in rows)
    width = next((len(row[0]) for row in rows if row), 0)
    blank = (False,) * width

    output = []
    for column in range(longest):
        character = tuple(row[column] if column < len(row) else blank for row in rows)
        if column < longest - 1 or any(any(group) for group in character):
            output.append(character)
    return output


def dot_groups(value: int, zero: int, style: GraphStyle, size: int) -> list[Group]:
    """Lay out the dots for one value measured from the ``zero`` position.

    The result is a prefix of blank dots, then a stem between the value and
    zero, chunked into groups of ``size`` dots.
    """
    _check_position(min(value, zero))
    filled = {
        GraphStyle.AUTO: value >= zero,
        GraphStyle.FILLED: True,
        GraphStyle.LINE: False,
    }[style]

    bits = [False] * (min(value, zero) - 1)
    stem_length = abs(value - zero)
    for i in range(stem_length + 1):
        if (value < zero and i == 0) or (value >= zero and i == stem_length):
            bits.append(True)
        else:
            bits.append(filled)
    return _chunk(bits, size)


def dot_array_groups(line_set: Sequence[int], style: GraphStyle, size: int) -> list[Group]:
    """Lay out the dots spanning a pair of values, chunked into groups of ``size``."""
    if len(line_set) != 2:
        raise ValueError("Plotting more than 2 series at a time is not supported")
    start, end = line_set
    filled = {
        GraphStyle.AUTO: start <= end,
        GraphStyle.FILLED: True,
        GraphStyle.LINE: False,
    }[style]
    start, end = sorted((start, end))
    _check_position(start)

    bits = [False] * (start - 1)
    stem_length = end - start
    bits.extend(i in (0, stem_length) or filled for i in range(stem_length + 1))
    return _chunk(bits, size)


def scale(value: float, minimum: float, maximum: float, low: int, high: int) -> int:
    """Map ``value`` from [minimum, maximum] onto the dot range [low, high]."""
    if not minimum <= value <= maximum:
        raise ValueError(f"value out of bounds: {value} [{minimum}, {maximum}]")
    slope = (high - low) / (maximum - minimum)
    # Round half away from zero; the offset is never negative here.
    return low + max(0, math.floor(slope * (value - minimum) + 0.5))


def zero_position(minimum: float, maximum: float, low: int, high: int) -> int:
    """Where zero falls in the dot range, clamped to stay inside it."""
    if minimum > 0:
        return low
    if maximum < 0:
        return high
    return scale(0.0, minimum, maximum, low, high)