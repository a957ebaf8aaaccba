from itertools import product

import pytest

from braillegraph.octants import octant_char
from braillegraph.quadrants import quadrant_char

F, T = False, True


def _all_cells():
    for bits in product((False, True), repeat=8):
        yield [list(bits[i : i + 2]) for i in range(0, 8, 2)]


@pytest.mark.parametrize(
    "dots, expected",
    [
        ([[F, F], [F, F], [F, F], [F, F]], " "),
        ([[T, T], [T, T], [T, T], [T, T]], "█"),
        ([[T, F], [F, F], [F, F], [F, F]], "𜺨"),
        ([[T, T], [F, F], [F, F], [F, F]], "🮂"),
        ([[F, F], [T, F], [F, F], [F, F]], "𜴀"),
        ([[F, T], [T, F], [F, F], [F, F]], "𜴁"),
        ([[T, F], [T, F], [T, F], [T, F]], "▌"),
        ([[F, F], [F, F], [F, F], [T, T]], "▂"),
        ([[F, F], [T, T], [T, T], [T, T]], "▆"),
        ([[T, F], [T, T], [T, T], [T, T]], "𜷤"),
        ([[F, T], [T, T], [T, T], [T, T]], "𜷥"),
        ([[T, T], [T, T], [T, T], [T, F]], "𜵰"),
        ([[F, F], [F, F], [F, F], [F, T]], "𜺠"),
    ],
)
def test_known_patterns(dots, expected):
    assert octant_char(dots) == expected


def test_every_pattern_is_a_distinct_single_character():
    chars = [octant_char(cell) for cell in _all_cells()]
    assert all(len(char) == 1 for char in chars)
    assert len(set(chars)) == 256


@pytest.mark.parametrize("quad", [[list(a), list(b)] for a, b in product(product((F, T), repeat=2), repeat=2)])
def test_doubled_rows_match_quadrants(quad):
    top, bottom = quad
    doubled = [top, top, bottom, bottom]
    assert octant_char(doubled) == quadrant_char(quad)


def test_accepts_truthy_values():
    assert octant_char([[1, 1], [1, 1], [1, 1], [1, 1]]) == octant_char([[T, T]] * 4)


@pytest.mark.parametrize(
    "dots",
    [
        [[F, F], [F, F], [F, F]],
        [[F, F], [F, F], [F, F], [F, F], [F, F]],
        [[F, F, F], [F, F], [F, F], [F, F]],
        [[F], [F, F], [F, F], [F, F]],
    ],
)
def test_rejects_wrong_shape(dots):
    with pytest.raises(ValueError):
        octant_char(dots)