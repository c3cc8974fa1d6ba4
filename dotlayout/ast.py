"""Syntax tree for the GraphViz dot language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class NodeId:
    """A node name with an optional port, as in ``first:f0``."""

    name: str
    port: Optional[str] = None


@dataclass
class AttributeList:
    """An ordered list of ``key=value`` pairs, as in ``[a=b; c=d]``."""

    items: List[Tuple[str, str]] = field(default_factory=list)

    def add_attr(self, key: str, value: str) -> None:
        self.items.append((key, value))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class AttrStmtTarget(Enum):
    """What an attribute statement applies to."""

    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"


@dataclass
class AttrStmt:
    """``(graph | node | edge) [ ... ]`` or ``ID = ID``."""

    target: AttrStmtTarget
    attrs: AttributeList = field(default_factory=AttributeList)


@dataclass
class NodeStmt:
    """``node-name [ ... ]``."""

    id: NodeId
    attrs: AttributeList = field(default_factory=AttributeList)


class ArrowKind(Enum):
    """``->`` (directed) or ``--`` (undirected)."""

    ARROW = "->"
    LINE = "--"


@dataclass
class EdgeStmt:
    """``a -> b -> c [ ... ]``."""

    from_node: NodeId
    to: List[Tuple[NodeId, ArrowKind]] = field(default_factory=list)
    attrs: AttributeList = field(default_factory=AttributeList)

    def insert(self, node: NodeId, kind: ArrowKind) -> None:
        """Append a destination reached through an arrow of the given kind."""
        self.to.append((node, kind))


@dataclass
class Graph:
    """A graph or subgraph: a name and a list of statements."""

    name: str = ""
    stmts: List[Stmt] = field(default_factory=list)


Stmt = Union[EdgeStmt, NodeStmt, AttrStmt, Graph]