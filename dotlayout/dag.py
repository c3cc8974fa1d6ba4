"""A ranked DAG: edges between nodes plus an assignment of nodes to levels.

A rank is the ordering of some nodes along one axis. Users may change the
leveling of nodes; the only guarantee is that every node is in some level.
Nodes are identified by integer handles, handed out in creation order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

NodeHandle = int
RankType = List[List[NodeHandle]]


class DAGError(Exception):
    """Raised when the graph or its ranking is inconsistent."""


@dataclass
class _Node:
    successors: List[NodeHandle] = field(default_factory=list)
    predecessors: List[NodeHandle] = field(default_factory=list)


class DAG:
    """A directed acyclic graph whose nodes are placed in levels (ranks)."""

    def __init__(self, validate: bool = True) -> None:
        self._nodes: List[_Node] = []
        self._ranks: RankType = []
        self.validate = validate

    def __repr__(self) -> str:
        return f"DAG(nodes={len(self._nodes)}, levels={len(self._ranks)})"

    def _node(self, handle: NodeHandle) -> _Node:
        if not 0 <= handle < len(self._nodes):
            raise IndexError(f"node {handle} is not in the dag")
        return self._nodes[handle]

    def clear(self) -> None:
        """Remove all nodes and ranks."""
        self._nodes.clear()
        self._ranks.clear()

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(range(len(self._nodes)))

    def __len__(self) -> int:
        return len(self._nodes)

    def add_edge(self, src: NodeHandle, dst: NodeHandle) -> None:
        src_node = self._node(src)
        dst_node = self._node(dst)
        src_node.successors.append(dst)
        dst_node.predecessors.append(src)

    def remove_edge(self, src: NodeHandle, dst: NodeHandle) -> bool:
        """Remove one edge from src to dst. Return True if an edge was removed."""
        succ = self._node(src).successors
        pred = self._node(dst).predecessors
        removed_succ = dst in succ
        if removed_succ:
            succ.remove(dst)
        removed_pred = src in pred
        if removed_pred:
            pred.remove(src)
        if removed_pred != removed_succ:
            raise DAGError("predecessor and successor lists are out of sync")
        return removed_pred

    def new_node(self) -> NodeHandle:
        """Create a node, placed in level zero, and return its handle."""
        self._nodes.append(_Node())
        handle = len(self._nodes) - 1
        self._add_element_to_rank(handle, 0, prepend=False)
        return handle

    def new_nodes(self, n: int) -> None:
        """Create n new nodes."""
        for _ in range(n):
            self._nodes.append(_Node())
            self._add_element_to_rank(len(self._nodes) - 1, 0, prepend=False)
        self.verify()

    def successors(self, node: NodeHandle) -> List[NodeHandle]:
        return self._node(node).successors

    def predecessors(self, node: NodeHandle) -> List[NodeHandle]:
        return self._node(node).predecessors

    def single_pred(self, node: NodeHandle) -> Optional[NodeHandle]:
        """The only predecessor of node, or None if it has zero or several."""
        preds = self._node(node).predecessors
        return preds[0] if len(preds) == 1 else None

    def single_succ(self, node: NodeHandle) -> Optional[NodeHandle]:
        """The only successor of node, or None if it has zero or several."""
        succs = self._node(node).successors
        return succs[0] if len(succs) == 1 else None

    def verify(self) -> None:
        """Check edge indices, acyclicity and that every node is ranked."""
        if not self.validate:
            return
        count = len(self._nodes)
        for node in self._nodes:
            for edge in node.successors:
                if not 0 <= edge < count:
                    raise DAGError(f"edge to invalid node {edge}")

        for src, node in enumerate(self._nodes):
            for dest in node.successors:
                if src != dest and self.is_reachable(dest, src):
                    raise DAGError("We found a cycle!")

        if self._count_nodes_in_ranks() != count:
            raise DAGError("not every node is placed in a rank")

    def is_reachable(self, src: NodeHandle, dst: NodeHandle) -> bool:
        """True if there is a path from src to dst."""
        if src == dst:
            return True
        visited = [False] * len(self._nodes)
        stack = [src]
        while stack:
            current = stack.pop()
            if current == dst:
                return True
            if visited[current]:
                continue
            visited[current] = True
            stack.extend(self._nodes[current].successors)
        return False

    def topological_sort(self) -> List[NodeHandle]:
        """Return the nodes in reverse post order."""
        order: List[NodeHandle] = []
        visited = [False] * len(self._nodes)
        # Entries are (handle, emit): emit=True records the node in post order.
        worklist = [(n, False) for n in self]

        while worklist:
            current, emit = worklist.pop()
            if emit:
                order.append(current)
                continue
            if visited[current]:
                continue
            visited[current] = True
            worklist.append((current, True))
            worklist.extend((edge, False) for edge in self._nodes[current].successors)

        order.reverse()
        return order

    def num_levels(self) -> int:
        return len(self._ranks)

    def row(self, level: int) -> List[NodeHandle]:
        """The (mutable) list of nodes at the given level."""
        if not 0 <= level < len(self._ranks):
            raise DAGError("Invalid rank")
        return self._ranks[level]

    def ranks(self) -> RankType:
        """The (mutable) rank structure: one list of nodes per level."""
        return self._ranks

    def is_first_in_row(self, elem: NodeHandle, level: int) -> bool:
        if level >= len(self._ranks) or not self._ranks[level]:
            return False
        return self._ranks[level][0] == elem

    def is_last_in_row(self, elem: NodeHandle, level: int) -> bool:
        if level >= len(self._ranks) or not self._ranks[level]:
            return False
        return self._ranks[level][-1] == elem

    def _ensure_level(self, level: int) -> None:
        while len(self._ranks) < level + 1:
            self._ranks.append([])

    def _add_element_to_rank(self, elem: NodeHandle, level: int, prepend: bool) -> None:
        self._ensure_level(level)
        if prepend:
            self._ranks[level].insert(0, elem)
        else:
            self._ranks[level].append(elem)

    def recompute_node_ranks(self) -> None:
        """Place every node in the level given by its longest path from a root."""
        if not self._nodes:
            raise DAGError("Sorting an empty graph")
        levels = self.compute_levels(self.topological_sort())
        self._ranks.clear()
        for node, level in enumerate(levels):
            self._add_element_to_rank(node, level, prepend=False)

    def _count_nodes_in_ranks(self) -> int:
        return sum(len(row) for row in self._ranks)

    def update_node_rank_level(
        self,
        node: NodeHandle,
        new_level: int,
        insert_before: Optional[NodeHandle] = None,
    ) -> None:
        """Move node to new_level, before insert_before or at the end of the row."""
        current = self._ranks[self.level(node)]
        current.remove(node)
        self._ensure_level(new_level)
        row = self._ranks[new_level]

        if insert_before is not None:
            try:
                idx = row.index(insert_before)
            except ValueError:
                raise DAGError("Can't find the marker node in the array") from None
            row.insert(idx, node)
            return

        row.append(node)

    def level(self, node: NodeHandle) -> int:
        """The level that node is placed in."""
        if not 0 <= node < len(self._nodes):
            raise DAGError("Node not in the dag")
        for i, row in enumerate(self._ranks):
            if node in row:
                return i
        raise DAGError("Unexpected node. Is the graph ranked?")

    def compute_levels(self, order: Sequence[NodeHandle]) -> List[int]:
        """Level of each node (indexed by handle), given a topological order."""
        if len(order) != len(self._nodes):
            raise DAGError("order must contain every node exactly once")
        levels = [0] * len(self._nodes)

        for src in order:
            for dest in self._nodes[src].successors:
                if src == dest:
                    continue
                levels[dest] = max(levels[dest], levels[src] + 1)

        for src in order:
            for dest in self._nodes[src].successors:
                if levels[dest] < levels[src]:
                    raise DAGError("levels do not respect the edges")

        return levels