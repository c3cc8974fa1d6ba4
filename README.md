# dotlayout

Building blocks for laying out and drawing directed graphs described in the
GraphViz DOT language.

The package contains:

- `dotlayout.lexer` and `dotlayout.parser`: a tokenizer (`Lexer`, `Token`,
  `TokenKind`) and a recursive-descent parser (`DotParser`, raising
  `ParseError`) for DOT files, producing the syntax tree in `dotlayout.ast`.
- `dotlayout.printer`: `format_ast` and `dump_ast`, a readable dump of a
  parsed syntax tree.
- `dotlayout.dag`: `DAG`, a ranked directed acyclic graph with topological
  sorting and level assignment; inconsistencies raise `DAGError`.
- `dotlayout.scoped_map`: `ScopedMap`, a stack of nested key/value scopes.
- `dotlayout.geometry`: `Point`, `Position` and helpers for connection points,
  box and segment intersection and text size estimates.
- `dotlayout.color`: `Color`, parsing of named colors and `#rrggbb` /
  `#rrggbbaa` web colors.
- `dotlayout.style`: `StyleAttr` and `LineStyleKind`.
- `dotlayout.base`: the `Direction` and `Orientation` enums.
- `dotlayout.backend`: the drawing interfaces (`RenderBackend`, `Renderable`,
  `Visible`), the `SVGWriter` backend and `save_to_file`.

## Installation

```
pip install .
```

## Parsing a DOT file

```python
from dotlayout.parser import DotParser, ParseError
from dotlayout.printer import format_ast

source = 'digraph G { a -> b -> c [label="x"]; b [shape=box]; }'
parser = DotParser(source)
try:
    graph = parser.process()
except ParseError:
    parser.print_error()
    raise
print(format_ast(graph))
```

## Ranking a graph

```python
from dotlayout.dag import DAG

dag = DAG()
a, b, c = dag.new_node(), dag.new_node(), dag.new_node()
dag.add_edge(a, b)
dag.add_edge(b, c)
dag.recompute_node_ranks()
assert dag.level(c) == 2
```

## Drawing SVG

```python
from dotlayout.backend import SVGWriter, save_to_file
from dotlayout.geometry import Point
from dotlayout.style import StyleAttr

svg = SVGWriter()
look = StyleAttr.simple()
svg.draw_rect(Point(10, 10), Point(100, 50), look, None, None)
svg.draw_text(Point(60, 35), "hello", look)
save_to_file("out.svg", svg.finalize())
```

## Colors

```python
from dotlayout.color import Color

Color.from_name("coral").to_web_color()    # '#ff7f50ff'
Color.fast("no-such-color").to_web_color() # '#000000ff'
```

## What this package does not do

- It has no command-line tool and no layout engine: it does not turn a parsed
  DOT graph into positioned shapes or an SVG picture by itself. The parser,
  the ranked DAG, the geometry helpers and the SVG writer are separate pieces
  for a caller to combine.
- It does not parse record-shape labels such as `"<f0> left|{right}"`; such
  labels are kept as plain attribute strings in the syntax tree.

## Running the tests

```
pip install .[test]
pytest
```