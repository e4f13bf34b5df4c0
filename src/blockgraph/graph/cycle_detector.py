"""Cycle detection in directed graphs using DFS three-color marking.

The three colors:
  WHITE  -- node not yet visited
  GRAY   -- node is on the current DFS path (ancestors of current node)
  BLACK  -- node fully explored (all descendants visited)

A back edge (an edge to a GRAY node) means the graph has a cycle.
When we find one, we rebuild the loop from the parent pointers so the
caller can report exactly which work items block each other.

The DFS keeps its own stack of (node, successor-iterator) frames rather
than recursing, so long dependency chains do not run into the
interpreter's recursion limit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from blockgraph.graph.adjacency import Graph

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult:
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[int] | None = None


def detect_cycle(graph: Graph) -> CycleResult:
    """Detect whether *graph* contains a directed cycle.

    Returns a CycleResult with has_cycle=True and the cycle path if one
    exists.  The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is a directed edge.  A self-loop on v comes back
    as [v, v].
    """
    n = graph.node_count
    color = [WHITE] * n
    parent: list[int | None] = [None] * n

    for root in range(n):
        if color[root] != WHITE:
            continue
        color[root] = GRAY
        stack: list[tuple[int, Iterator[int]]] = [
            (root, iter(graph.successors(root)))
        ]
        while stack:
            node, succs = stack[-1]
            succ = next(succs, None)
            if succ is None:
                color[node] = BLACK
                stack.pop()
                continue
            if color[succ] == GRAY:
                return CycleResult(
                    has_cycle=True, cycle_path=_unwind(parent, node, succ)
                )
            if color[succ] == WHITE:
                color[succ] = GRAY
                parent[succ] = node
                stack.append((succ, iter(graph.successors(succ))))

    return CycleResult(has_cycle=False, cycle_path=None)


def _unwind(parent: list[int | None], node: int, back_to: int) -> list[int]:
    """Walk parents from *node* up to *back_to* and close the loop."""
    path = [node]
    cur = node
    while cur != back_to:
        cur = parent[cur]  # type: ignore[assignment]
        path.append(cur)
    path.reverse()
    path.append(back_to)
    return path
