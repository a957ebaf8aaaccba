import io

import pytest

from braillegraph.blocks import Bars, Columns, bar_line, column_cells
from braillegraph.core import GraphConfig


def _failing_values():
    yield 1.0
    raise ValueError("bad input")


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (0.0, ""),
        (1.0, "▏"),
        (2.0, "▎"),
        (3.0, "▍"),
        (4.0, "▌"),
        (5.0, "▋"),
        (6.0, "▊"),
        (7.0, "▉"),
        (8.0, "█"),
    ],
)
def test_bar_line(value, expected):
    assert bar_line(value) == expected


def test_bar_line_long_value_repeats_full_blocks():
    assert bar_line(19.0) == "██▍"


def test_column_cells_missing_value():
    assert column_cells(None) == [" "]


def test_column_cells_full_and_partial():
    assert column_cells(8.0) == ["█"]
    assert column_cells(1.0) == ["▁"]
    assert column_cells(17.0) == ["█", "█", "▁"]


def test_column_cells_zero_is_empty():
    assert column_cells(0.0) == []


def test_bars_print_graph():
    out = io.StringIO()
    Bars(GraphConfig(minimum=0.0, maximum=1.0, size=1)).print_graph([0.0, 1.0, None], out)
    assert out.getvalue() == "▏\n█\n\n"


def test_bars_widest_value_fills_width():
    out = io.StringIO()
    Bars(GraphConfig(minimum=-2.0, maximum=2.0, size=3)).print_graph([2.0], out)
    assert out.getvalue() == "███\n"


def test_bars_rejects_out_of_range_value():
    with pytest.raises(ValueError, match="out of bounds"):
        Bars(GraphConfig(minimum=0.0, maximum=1.0, size=1)).print_graph([2.0], io.StringIO())


def test_bars_stops_on_input_error():
    out = io.StringIO()
    with pytest.raises(ValueError, match="bad input"):
        Bars(GraphConfig(minimum=0.0, maximum=1.0, size=1)).print_graph(
            _failing_values(), out
        )
    assert out.getvalue() == "█\n"


def test_columns_print_graph_single_row():
    out = io.StringIO()
    Columns(GraphConfig(minimum=0.0, maximum=1.0, size=1)).print_graph([0.0, 1.0, None], out)
    assert out.getvalue() == "▁█ \n"


def test_columns_print_graph_two_rows():
    out = io.StringIO()
    Columns(GraphConfig(minimum=0.0, maximum=1.0, size=2)).print_graph([0.0, 1.0], out)
    assert out.getvalue() == " █\n▁█\n"


def test_columns_output_has_height_rows():
    out = io.StringIO()
    Columns(GraphConfig(minimum=0.0, maximum=10.0, size=4)).print_graph([1.0, 5.0, 9.0], out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 4
    assert all(len(line) == 3 for line in lines)


def test_columns_rejects_out_of_range_value():
    with pytest.raises(ValueError, match="out of bounds"):
        Columns(GraphConfig(minimum=0.0, maximum=1.0, size=1)).print_graph([-1.0], io.StringIO())