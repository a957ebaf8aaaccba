"""Draw an animated rose curve across the whole terminal in braille."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from typing import AbstractSet, Optional, Sequence

from braillegraph.braille_char import BrailleChar

Dot = tuple[int, int]

_DEFAULT_COLUMNS = 80
_DEFAULT_LINES = 24
_PETAL_RATIO = 2.0 / 5.0
_SWEEP = 10.0 * math.pi
_SPEED = 0.25
_CELL_WIDTH = 2
_CELL_HEIGHT = 4


def terminal_size() -> tuple[int, int]:
    """The terminal's (columns, lines).

    Falls back to the COLUMNS and LINES environment variables, then to 80 x 24.
    A variable that is set but not a whole number raises ValueError.
    """
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass
    else:
        return size.columns, size.lines

    def from_environment(name: str, fallback: int) -> int:
        value = os.environ.get(name)
        if value is None:
            return fallback
        return int(value)

    return (
        from_environment("COLUMNS", _DEFAULT_COLUMNS),
        from_environment("LINES", _DEFAULT_LINES),
    )


def scale_point(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Map ``value`` linearly from [in_min, in_max] onto [out_min, out_max]."""
    if not in_min < in_max:
        raise ValueError(f"empty input range [{in_min}, {in_max}]")
    if not out_min < out_max:
        raise ValueError(f"empty output range [{out_min}, {out_max}]")
    if not in_min <= value <= in_max:
        raise ValueError(f"value out of bounds: {value} [{in_min}, {in_max}]")
    slope = (out_max - out_min) / (in_max - in_min)
    return out_min + slope * (value - in_min)


def rose(t: float, k: float, now: float) -> tuple[float, float]:
    """The (x, y) point of the rose curve at angle ``t``, phase-shifted by ``now``."""
    x = math.sin(k * t + now) * math.cos(t)
    y = math.sin(k * t) * math.sin(t)
    return x, y


def _to_dot(point: tuple[float, float], width: float, height: float) -> Dot:
    x, y = point
    column = math.floor(scale_point(x, -1.0, 1.0, 0.0, width - 1.0) + 0.5)
    row = math.floor(scale_point(y, -1.0, 1.0, 0.0, height - 1.0) + 0.5)
    return max(0, column), max(0, row)


def rose_dots(width: float, height: float, now: float) -> set[Dot]:
    """The dots of the rose on a ``width`` x ``height`` dot grid at time ``now`` seconds.

    Dots are (x, y) with y counted from the bottom.
    """
    if width < 2 or height < 2:
        raise ValueError(f"dot grid too small: {width} x {height}")
    phase = now * _SPEED
    step = 1.0 / min(width, height)
    dots: set[Dot] = set()
    t = 0.0
    while t < _SWEEP:
        dots.add(_to_dot(rose(t, _PETAL_RATIO, phase), width, height))
        t += step
    return dots


def render_dots(dots: AbstractSet[Dot], width: int, height: int) -> str:
    """Render (x, y) dots, y counted from the bottom, as lines of braille.

    Dots outside the ``width`` x ``height`` grid are ignored; a grid that does
    not fill whole characters is padded with blank dots.
    """
    if width < 0 or height < 0:
        raise ValueError(f"grid size must not be negative: {width} x {height}")
    rows = [[(x, y) in dots for x in range(width)] for y in reversed(range(height))]

    def dot(row: int, column: int) -> bool:
        return row < height and column < width and rows[row][column]

    lines = []
    for top in range(0, height, _CELL_HEIGHT):
        characters = []
        for left in range(0, width, _CELL_WIDTH):
            cell = [
                (dot(top + offset, left), dot(top + offset, left + 1))
                for offset in range(_CELL_HEIGHT)
            ]
            characters.append(BrailleChar.from_dot_pairs(cell).as_char())
        lines.append("".join(characters) + "\n")
    return "".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the rose at the current time, filling the terminal."""
    parser = argparse.ArgumentParser(
        prog="braillegraph-rose",
        description="Draw a rose curve across the terminal in braille.",
    )
    parser.parse_args(argv)

    columns, lines = terminal_size()
    width = columns * _CELL_WIDTH
    height = lines * _CELL_HEIGHT
    dots = rose_dots(float(width), float(height), time.time())
    sys.stdout.write(render_dots(dots, width, height))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())