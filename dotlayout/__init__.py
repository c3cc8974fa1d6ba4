"""Graph layout building blocks: DOT parsing, ranked DAGs, geometry and SVG output."""

__version__ = "0.1.3"

__all__ = [
    "ast",
    "backend",
    "base",
    "color",
    "dag",
    "geometry",
    "lexer",
    "parser",
    "printer",
    "scoped_map",
    "style",
]