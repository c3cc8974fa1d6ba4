"""Human-readable dumps of a parsed dot syntax tree."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from dotlayout.ast import (
    ArrowKind,
    AttributeList,
    AttrStmt,
    AttrStmtTarget,
    EdgeStmt,
    Graph,
    NodeId,
    NodeStmt,
    Stmt,
)

_TARGET_TITLES = {
    AttrStmtTarget.GRAPH: "Attribute Graph:",
    AttrStmtTarget.NODE: "Attribute Node:",
    AttrStmtTarget.EDGE: "Attribute Edge:",
}


def _pad(indent: int) -> str:
    return " " * indent


def _node_id(node: NodeId, indent: int) -> str:
    name = f"{node.name}:{node.port}" if node.port is not None else node.name
    return f"{_pad(indent)}{name}\n"


def _arrow(kind: ArrowKind, indent: int) -> str:
    return f"{_pad(indent)}{kind.value}\n"


def _attributes(attrs: AttributeList, indent: int) -> str:
    return "".join(
        f'{_pad(indent)}{i})"{key}" = "{value}"\n'
        for i, (key, value) in enumerate(attrs)
    )


def _edge(edge: EdgeStmt, indent: int) -> str:
    parts = [_node_id(edge.from_node, indent + 1)]
    for dest, kind in edge.to:
        parts.append(_arrow(kind, indent + 1))
        parts.append(_node_id(dest, indent + 1))
    parts.append(_attributes(edge.attrs, indent + 1))
    return "".join(parts)


def _node(node: NodeStmt, indent: int) -> str:
    return (
        f"Node {_pad(indent)}"
        + _node_id(node.id, indent + 1)
        + _attributes(node.attrs, indent + 1)
    )


def _attr_stmt(stmt: AttrStmt, indent: int) -> str:
    return (
        f"{_pad(indent)}{_TARGET_TITLES[stmt.target]}\n"
        + _attributes(stmt.attrs, indent + 1)
    )


def _stmt(stmt: Stmt, indent: int) -> str:
    if isinstance(stmt, EdgeStmt):
        return _edge(stmt, indent)
    if isinstance(stmt, NodeStmt):
        return _node(stmt, indent)
    if isinstance(stmt, AttrStmt):
        return _attr_stmt(stmt, indent)
    if isinstance(stmt, Graph):
        return _graph(stmt, indent)
    raise TypeError(f"unknown statement: {stmt!r}")


def _graph(graph: Graph, indent: int) -> str:
    parts: List[str] = [f"{_pad(indent)}Graph: {graph.name}\n"]
    parts.extend(_stmt(stmt, indent + 1) for stmt in graph.stmts)
    return "".join(parts)


def format_ast(graph: Graph) -> str:
    """Return an indented, line-per-item description of the syntax tree."""
    return _graph(graph, 0)


def dump_ast(graph: Graph, file: Optional[TextIO] = None) -> None:
    """Write the description of the syntax tree to file (stdout by default)."""
    out = file if file is not None else sys.stdout
    out.write(format_ast(graph))