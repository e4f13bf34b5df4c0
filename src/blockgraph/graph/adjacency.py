"""Dense, index-addressed directed graph.

Nodes are the integers 0..n-1, handed out in order by add_node and never
reused.  Each node owns one slot in three parallel lists: its successors,
its predecessors and an optional display label.  Keeping both adjacency
directions means predecessor queries (which the longest-path and
unblocking analyses lean on) are O(1) instead of a full edge scan.

blockgraph uses this as the dependency DAG: an edge u -> v means
"u blocks v", so v cannot start until u is closed.
"""
from __future__ import annotations

from typing import Iterator


class InvalidNodeIndex(IndexError):
    """Raised when a node index is outside 0..node_count-1."""

    def __init__(self, node: int, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        super().__init__(
            f"Node index {node!r} out of range for graph with "
            f"{node_count} node(s)"
        )


class Graph:
    """Directed graph backed by index-addressed adjacency lists.

    Duplicate edges and self-loops are stored as given; the topological
    sort reports a self-loop as a cycle.
    """

    __slots__ = ("_succ", "_pred", "_labels")

    def __init__(self) -> None:
        self._succ: list[list[int]] = []
        self._pred: list[list[int]] = []
        self._labels: list[str | None] = []

    # ---- construction ----------------------------------------------------

    def add_node(self, label: str | None = None) -> int:
        """Append a node and return its index."""
        self._succ.append([])
        self._pred.append([])
        self._labels.append(label)
        return len(self._succ) - 1

    def add_edge(self, src: int, dst: int) -> None:
        """Add a directed edge src -> dst.

        Both endpoints are checked before anything is written, so a bad
        index leaves the graph untouched.
        """
        self._check(src)
        self._check(dst)
        self._succ[src].append(dst)
        self._pred[dst].append(src)

    # ---- queries ---------------------------------------------------------

    def successors(self, node: int) -> list[int]:
        """Direct successors, in the order the edges were added."""
        self._check(node)
        return list(self._succ[node])

    def predecessors(self, node: int) -> list[int]:
        """Direct predecessors, in the order the edges were added."""
        self._check(node)
        return list(self._pred[node])

    def label(self, node: int) -> str | None:
        self._check(node)
        return self._labels[node]

    def in_degree(self, node: int) -> int:
        self._check(node)
        return len(self._pred[node])

    def out_degree(self, node: int) -> int:
        self._check(node)
        return len(self._succ[node])

    def has_edge(self, src: int, dst: int) -> bool:
        return src in self and dst in self and dst in self._succ[src]

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._succ)))

    def edges(self) -> Iterator[tuple[int, int]]:
        for src, dsts in enumerate(self._succ):
            for dst in dsts:
                yield src, dst

    @property
    def node_count(self) -> int:
        return len(self._succ)

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._succ)

    def _check(self, node: int) -> None:
        if node not in self:
            raise InvalidNodeIndex(node, len(self._succ))

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        # bool is an int subclass but never a node id
        return (
            isinstance(node, int)
            and not isinstance(node, bool)
            and 0 <= node < len(self._succ)
        )

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
