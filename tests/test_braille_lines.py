import io

import pytest

from braillegraph.braille_lines import BrailleLines
from braillegraph.core import GraphConfig, GraphStyle


def _graph(config, values):
    out = io.StringIO()
    BrailleLines(config).print_graph(values, out)
    return out.getvalue()


def _pairs(config, values):
    out = io.StringIO()
    BrailleLines(config).print_pairs(values, out)
    return out.getvalue()


SEQ_CONFIG = GraphConfig(-4.0, 3.0, 7, GraphStyle.FILLED)


def test_number_sequence_example():
    assert _graph(SEQ_CONFIG, range(-4, 4)) == "⠉⠛⠿⣿\n⠀⠀⠀⢸⣶⣤⣀\n"


def test_lines_fit_width():
    lines = _graph(SEQ_CONFIG, range(-4, 4)).splitlines()
    assert all(len(line) <= 7 for line in lines)


def test_trailing_missing_values_are_dropped():
    assert _graph(SEQ_CONFIG, [-4, -3, -2, -1, None]) == "⠉⠛⠿⣿\n"


def test_all_missing_group_gives_blank_line():
    lines = _graph(SEQ_CONFIG, [None, None, None, None, 3]).split("\n")
    assert lines[0] == ""
    assert lines[1] + "\n" == _graph(SEQ_CONFIG, [3])


def test_empty_input_prints_nothing():
    assert _graph(SEQ_CONFIG, []) == ""


def test_line_count_is_values_over_four():
    config = GraphConfig(0.0, 10.0, 5, GraphStyle.AUTO)
    assert len(_graph(config, range(10)).splitlines()) == 3


def test_out_of_range_value_raises():
    with pytest.raises(ValueError):
        _graph(SEQ_CONFIG, [10])


def test_equal_pairs_match_single_line_style():
    config = GraphConfig(1.0, 8.0, 4, GraphStyle.LINE)
    values = [1, 3, 5, 8, 2, 7]
    assert _pairs(config, [(v, v) for v in values]) == _graph(config, values)


def test_all_missing_pair_matches_missing_value():
    config = GraphConfig(1.0, 8.0, 4, GraphStyle.LINE)
    assert _pairs(config, [(None, None)] * 4 + [(2, 2)]) == _graph(
        config, [None] * 4 + [2]
    )


def test_partial_pair_raises():
    with pytest.raises(ValueError):
        _pairs(SEQ_CONFIG, [(1.0, None)])


def test_three_series_raise():
    with pytest.raises(ValueError):
        _pairs(SEQ_CONFIG, [(1.0, 2.0, 3.0)])