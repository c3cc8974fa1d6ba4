import io

from dotlayout.ast import (
    ArrowKind,
    AttributeList,
    AttrStmt,
    AttrStmtTarget,
    EdgeStmt,
    Graph,
    NodeId,
    NodeStmt,
)
from dotlayout.parser import DotParser
from dotlayout.printer import dump_ast, format_ast


def test_empty_graph_header():
    assert format_ast(Graph("G")) == "Graph: G\n"


def test_edge_with_attribute():
    graph = DotParser("digraph G { a -> b [color=red]; }").process()
    text = format_ast(graph)
    assert text == 'Graph: G\n  a\n  ->\n  b\n  0)"color" = "red"\n'


def test_undirected_edge_and_port():
    edge = EdgeStmt(NodeId("x", "p"))
    edge.insert(NodeId("y"), ArrowKind.LINE)
    lines = format_ast(Graph("g", [edge])).splitlines()
    assert lines[1].strip() == "x:p"
    assert lines[2].strip() == "--"
    assert lines[3].strip() == "y"


def test_node_statement_prefix():
    node = NodeStmt(NodeId("a"), AttributeList([("shape", "box")]))
    lines = format_ast(Graph("g", [node])).splitlines()
    assert lines[1].startswith("Node ")
    assert lines[1].endswith("a")
    assert lines[2].strip() == '0)"shape" = "box"'


def test_attribute_statement_titles():
    stmts = [
        AttrStmt(AttrStmtTarget.GRAPH, AttributeList([("rankdir", "LR")])),
        AttrStmt(AttrStmtTarget.NODE),
        AttrStmt(AttrStmtTarget.EDGE),
    ]
    lines = [line.strip() for line in format_ast(Graph("g", stmts)).splitlines()]
    assert "Attribute Graph:" in lines
    assert "Attribute Node:" in lines
    assert "Attribute Edge:" in lines
    assert '0)"rankdir" = "LR"' in lines


def test_attribute_indices_count_up():
    attrs = AttributeList([("a", "1"), ("b", "2"), ("c", "3")])
    lines = format_ast(Graph("g", [AttrStmt(AttrStmtTarget.NODE, attrs)])).splitlines()
    assert [line.strip()[:2] for line in lines[2:]] == ["0)", "1)", "2)"]


def test_subgraph_is_indented_further():
    inner = Graph("inner", [NodeStmt(NodeId("n"))])
    lines = format_ast(Graph("outer", [inner])).splitlines()
    assert lines[0] == "Graph: outer"
    assert lines[1] == " Graph: inner"


def test_dump_ast_writes_same_text():
    graph = DotParser("graph { a -- b -- c; d [label=x] }").process()
    buf = io.StringIO()
    dump_ast(graph, buf)
    assert buf.getvalue() == format_ast(graph)


def test_dump_ast_defaults_to_stdout(capsys):
    graph = Graph("S")
    dump_ast(graph)
    assert capsys.readouterr().out == format_ast(graph)