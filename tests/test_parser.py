import re

import pytest

from dotlayout.ast import (
    ArrowKind,
    AttrStmt,
    AttrStmtTarget,
    EdgeStmt,
    Graph,
    NodeId,
    NodeStmt,
)
from dotlayout.parser import DotParser, ParseError


def parse(text):
    return DotParser(text).process()


def test_simple_digraph_edge_chain():
    graph = parse("digraph G { a -> b -> c [label=x]; }")
    assert graph.name == "G"
    assert len(graph.stmts) == 1
    edge = graph.stmts[0]
    assert isinstance(edge, EdgeStmt)
    assert edge.from_node == NodeId("a")
    assert edge.to == [(NodeId("b"), ArrowKind.ARROW), (NodeId("c"), ArrowKind.ARROW)]
    assert list(edge.attrs) == [("label", "x")]


def test_undirected_edges():
    graph = parse("graph { a -- b }")
    edge = graph.stmts[0]
    assert edge.to == [(NodeId("b"), ArrowKind.LINE)]
    assert graph.name == ""


def test_node_statements():
    graph = parse('graph { a [shape=box, color="red"]; b c }')
    assert graph.stmts == [
        NodeStmt(NodeId("a"), graph.stmts[0].attrs),
        NodeStmt(NodeId("b")),
        NodeStmt(NodeId("c")),
    ]
    assert list(graph.stmts[0].attrs) == [("shape", "box"), ("color", "red")]


def test_attribute_statements():
    graph = parse(
        "digraph { node [shape=box] edge [color=red; style=dashed] "
        "graph [rankdir=LR] rankdir = LR }"
    )
    assert all(isinstance(s, AttrStmt) for s in graph.stmts)
    assert [s.target for s in graph.stmts] == [
        AttrStmtTarget.NODE,
        AttrStmtTarget.EDGE,
        AttrStmtTarget.GRAPH,
        AttrStmtTarget.GRAPH,
    ]
    assert list(graph.stmts[1].attrs) == [("color", "red"), ("style", "dashed")]
    assert list(graph.stmts[3].attrs) == [("rankdir", "LR")]


def test_ports():
    edge = parse("digraph { a:f0 -> b:f1 }").stmts[0]
    assert edge.from_node == NodeId("a", "f0")
    assert edge.to[0][0] == NodeId("b", "f1")


def test_subgraphs():
    graph = parse("strict digraph { subgraph cluster { a } { b } }")
    named, anonymous = graph.stmts
    assert isinstance(named, Graph)
    assert named.name == "cluster"
    assert named.stmts == [NodeStmt(NodeId("a"))]
    assert anonymous.name == "anonymous"
    assert anonymous.stmts == [NodeStmt(NodeId("b"))]


def test_empty_attribute_list_and_comments():
    graph = parse("digraph { /* c */ a [] // x\n }")
    assert graph.stmts == [NodeStmt(NodeId("a"))]


def test_parse_graph_directly():
    parser = DotParser("subgraph s { x }")
    parser.lex()
    graph = parser.parse_graph(True)
    assert graph.name == "s"
    assert graph.stmts == [NodeStmt(NodeId("x"))]


@pytest.mark.parametrize(
    "text, message",
    [
        ("digraph { a:p = b }", "Can't assign into a port"),
        ("foo {}", "Expected (graph|digraph)"),
        ("digraph { a } extra", "Unexpected content at the end of the file."),
        ("digraph a b", "Expected '{'"),
        ("digraph { a [x y] }", "Expected '='"),
        ("digraph { a [=y] }", "Expected property name"),
        ("digraph { a [x=] }", "Expected value after assignment"),
        ("digraph { a = ; }", "Expected identifier."),
        ("digraph { a: }", "Expected a port name"),
        ("digraph { a = b = }", "Unknown token"),
        ("digraph { a , }", "Unsupported token"),
        ("digraph {", "Unknown token"),
        ("digraph { node shape }", "Expected '['"),
    ],
)
def test_errors(text, message):
    with pytest.raises(ParseError, match=re.escape(message)):
        parse(text)


def test_lexer_error_is_parse_error():
    with pytest.raises(ParseError):
        parse("digraph { a -> @ }")


def test_lex_after_eof_raises():
    parser = DotParser("graph {}")
    graph = parser.process()
    assert graph.stmts == []
    with pytest.raises(ParseError, match="after EOF"):
        parser.lex()


def test_print_error_shows_marker(capsys):
    parser = DotParser("digraph {\n a -> @\n}\n")
    with pytest.raises(ParseError):
        parser.process()
    parser.print_error()
    out = capsys.readouterr().out
    assert out.startswith("digraph {\n")
    assert out.rstrip("\n").endswith("^")