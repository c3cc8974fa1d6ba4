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


def test_node_id_default_port():
    node = NodeId("first")
    assert node.name == "first"
    assert node.port is None


def test_node_id_with_port_equality():
    assert NodeId("a", "p") == NodeId("a", "p")
    assert NodeId("a", "p") != NodeId("a")


def test_attribute_list_keeps_order():
    attrs = AttributeList()
    attrs.add_attr("a", "b")
    attrs.add_attr("c", "d")
    attrs.add_attr("a", "e")
    assert len(attrs) == 3
    assert list(attrs) == [("a", "b"), ("c", "d"), ("a", "e")]


def test_attribute_list_empty():
    attrs = AttributeList()
    assert len(attrs) == 0
    assert list(attrs) == []


def test_node_stmt_default_attrs_are_independent():
    one = NodeStmt(NodeId("x"))
    two = NodeStmt(NodeId("y"))
    one.attrs.add_attr("k", "v")
    assert len(two.attrs) == 0
    assert list(one.attrs) == [("k", "v")]


def test_edge_stmt_insert():
    edge = EdgeStmt(NodeId("a"))
    edge.insert(NodeId("b"), ArrowKind.ARROW)
    edge.insert(NodeId("c", "p"), ArrowKind.LINE)
    assert edge.to == [
        (NodeId("b"), ArrowKind.ARROW),
        (NodeId("c", "p"), ArrowKind.LINE),
    ]
    assert edge.from_node == NodeId("a")


def test_attr_stmt_target():
    stmt = AttrStmt(AttrStmtTarget.EDGE, AttributeList([("color", "red")]))
    assert stmt.target is AttrStmtTarget.EDGE
    assert list(stmt.attrs) == [("color", "red")]


def test_graph_holds_statements():
    inner = Graph("inner")
    graph = Graph("outer", [NodeStmt(NodeId("a")), inner])
    assert graph.name == "outer"
    assert graph.stmts[1] is inner
    assert Graph().stmts == []