# braillegraph

Draw graphs of numeric series in the terminal with Unicode braille
patterns, block elements and quadrant blocks. Octant block characters are
also provided as a character helper.

Each terminal cell holds several "dots". A braille character is 2 dots wide
and 4 dots tall. A quadrant block is 2 by 2. The classic block characters
give eight steps per cell. This lets line and column graphs in plain text
show a lot of detail.

## Installing

```console
pip install .
```

To run the test suite:

```console
pip install ".[test]"
pytest
```

The package has no runtime dependencies.

## Configuring a graph

Every graph renderer takes a `braillegraph.core.GraphConfig`:

- `minimum`, `maximum`: the range of input values. A value outside this
  range raises `ValueError`.
- `size`: the width in characters for horizontal graphs, or the height in
  character rows for vertical graphs.
- `style`: a `GraphStyle`, which defaults to `GraphStyle.FILLED`.

`GraphStyle` decides how the space between the zero position and a value is
drawn:

- `AUTO` fills it for values at or above zero and draws only the end point
  for values below zero.
- `FILLED` always fills it.
- `LINE` draws only the end points.

Zero is clamped to the edge of the graph when the range does not include it.

## Graph kinds

| Class                                     | Characters      | Layout                               |
|-------------------------------------------|-----------------|--------------------------------------|
| `braillegraph.blocks.Bars`                | `▏▎▍▌▋▊▉█`      | one horizontal bar per value         |
| `braillegraph.blocks.Columns`             | `▁▂▃▄▅▆▇█`      | one vertical column per value        |
| `braillegraph.braille_lines.BrailleLines` | braille         | horizontal, four values per text row |
| `braillegraph.braille_columns.BrailleColumns` | braille     | vertical, two values per character   |
| `braillegraph.quadrant_graphs.QuadrantLines`  | quadrant blocks | horizontal, two values per text row |
| `braillegraph.quadrant_graphs.QuadrantColumns`| quadrant blocks | vertical, two values per character  |

Every class has `print_graph(values, writer)`. It takes an iterable of
floats and writes the graph to a text stream. `None` stands for a missing
value and leaves an empty slot.

```python
import sys

from braillegraph.core import GraphConfig, GraphStyle
from braillegraph.braille_lines import BrailleLines

config = GraphConfig(minimum=-4, maximum=3, size=4, style=GraphStyle.AUTO)
BrailleLines(config).print_graph([-4, -3, -2, -1, 0, 1, 2, 3], sys.stdout)
```

The braille and quadrant graphs also have `print_pairs(values, writer)`.
Each input item is a pair of values, and the graph draws the span between
them. `BrailleColumns.print_multi(values, writer)` takes any number of values
per item. It draws them two at a time as spans, and draws any odd value left
over on its own from zero.

## Building characters yourself

You can use the character helpers on their own:

```python
from braillegraph.braille_char import BrailleChar
from braillegraph.blocks import bar_line

char = BrailleChar.from_dot_pairs([
    [True, True],
    [False, True],
    [True, False],
    [True, True],
])
print(char.as_char())   # ⣝

print(bar_line(8.0))    # █
```

- `BrailleChar`:
  - `BrailleChar.from_char` parses a braille pattern character.
  - Values can be combined with `|`, `&` and `^`.
  - `dot_pairs()` and `dot_quads()` turn a value back into its dot layout.
  - `format(char, "#")` gives the 8-bit dot mask in binary.
- `braillegraph.braille_char.render_rows` renders rows of `BrailleChar`.
- `braillegraph.quadrants.quadrant_char` maps 2×2 dots to a quadrant block.
- `braillegraph.octants.octant_char` maps 4×2 dots to an octant block.
- `braillegraph.dot_plotter.render_dot_string` turns an ASCII sketch into
  braille. The sketch uses dot pairs written as `--`, `-*`, `*-` or `**`, in
  groups of four lines. The first line is a header and is ignored.
- `braillegraph.dot_plotter.Plot` groups a set of dot positions into fixed-size
  groups.
- The lower-level layout functions live in `braillegraph.core`:
  - `assemble_row`
  - `dot_groups`
  - `dot_array_groups`
  - `scale`
  - `zero_position`

## A demonstration

The package ships a small command that draws a rose curve sized to fill your
terminal. The curve's phase depends on the current time, so each run draws a
slightly different picture:

```console
braillegraph-rose
```

The command gets the terminal size from the terminal itself. If that fails, it
uses the `COLUMNS` and `LINES` environment variables, and then 80 by 24.

## What it does not do

- There is no command that reads numbers from standard input or a file and
  graphs them. Reading and parsing input is left to the calling code, which
  passes the values to a graph's `print_graph`.
- Octant characters are only available through `octant_char`. No graph class
  draws with them.