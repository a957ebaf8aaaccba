"""Horizontal bar and vertical column graphs drawn with eighth blocks."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional, TextIO

from braillegraph.core import GraphConfig

_BAR_BLOCKS = ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")
_COLUMN_BLOCKS = (" ", "▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
_STEPS = 8


def _linear_scale(config: GraphConfig, cells: int) -> Callable[[float], float]:
    """Map values in the config's range onto [1, cells * 8] eighths of a block."""
    low = 1.0  # an empty cell is reserved for missing values
    high = float(cells * _STEPS)
    minimum, maximum = config.minimum, config.maximum
    slope = (high - low) / (maximum - minimum)

    def scale(value: float) -> float:
        if not minimum <= value <= maximum:
            raise ValueError(f"value out of bounds: {value} [{minimum}, {maximum}]")
        return low + slope * (value - minimum)

    return scale


def _split(value: float) -> tuple[int, int]:
    """Whole blocks and the remaining eighths of a scaled value."""
    stem = max(0, math.trunc(value / _STEPS))
    tip = max(0, math.trunc(math.fmod(value, _STEPS)))
    return stem, tip


def bar_line(value: Optional[float]) -> str:
    """A horizontal bar ``value`` eighths of a block long; empty for None."""
    if value is None:
        return ""
    stem, tip = _split(value)
    return _BAR_BLOCKS[-1] * stem + _BAR_BLOCKS[tip]


def column_cells(value: Optional[float]) -> list[str]:
    """The cells of a vertical column ``value`` eighths tall, bottom first."""
    if value is None:
        return [" "]
    stem, tip = _split(value)
    cells = [_COLUMN_BLOCKS[-1]] * stem
    if tip > 0:
        cells.append(_COLUMN_BLOCKS[tip])
    return cells


class Bars:
    """One horizontal bar per input value, ``config.size`` cells wide at most."""

    def __init__(self, config: GraphConfig) -> None:
        self.config = config

    def print_graph(self, values: Iterable[Optional[float]], writer: TextIO) -> None:
        scale = _linear_scale(self.config, self.config.size)
        for value in values:
            writer.write(bar_line(None if value is None else scale(value)) + "\n")


class Columns:
    """One vertical column per input value, ``config.size`` rows tall."""

    def __init__(self, config: GraphConfig) -> None:
        self.config = config

    def print_graph(self, values: Iterable[Optional[float]], writer: TextIO) -> None:
        height = self.config.size
        scale = _linear_scale(self.config, height)
        columns = [column_cells(None if value is None else scale(value)) for value in values]

        for row in reversed(range(height)):
            line = "".join(column[row] if row < len(column) else " " for column in columns)
            writer.write(line + "\n")