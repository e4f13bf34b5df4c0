"""Topological sort via Kahn's algorithm (in-degree elimination).

Kahn's algorithm emits work in dependency "layers": nodes with nothing
blocking them first, then nodes whose only blockers were in that first
batch, and so on.  Plain Kahn's leaves the order among ready nodes up to
the queue discipline.  Here the ready set is a min-heap, so whenever
several nodes are unblocked at once the lowest index goes first and the
order is reproducible for a given graph.

The algorithm:
  1.  Compute in-degree for every node.
  2.  Seed the heap with all nodes whose in-degree is 0.
  3.  Pop the smallest node, append it to the result, decrement the
      in-degree of its successors.  Any successor whose in-degree drops
      to 0 enters the heap.
  4.  If the result contains all nodes, the graph is a DAG.
      Otherwise there is at least one cycle.
"""
from __future__ import annotations

import heapq

from blockgraph.graph.adjacency import Graph


class CyclicDependencyError(Exception):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_nodes: list[int]) -> None:
        self.remaining_nodes = remaining_nodes
        super().__init__(
            f"Cycle detected: {len(remaining_nodes)} node(s) involved in "
            f"circular dependencies"
        )


def topological_sort(graph: Graph) -> list[int]:
    """Return node indices in dependency order (blockers first).

    Raises CyclicDependencyError if the graph contains a cycle.
    """
    n = graph.node_count
    in_deg = [graph.in_degree(v) for v in range(n)]

    heap = [v for v in range(n) if in_deg[v] == 0]
    heapq.heapify(heap)

    result: list[int] = []
    while heap:
        node = heapq.heappop(heap)
        result.append(node)
        for succ in graph.successors(node):
            in_deg[succ] -= 1
            if in_deg[succ] == 0:
                heapq.heappush(heap, succ)

    if len(result) != n:
        # anything still holding in-degree is on, or behind, a cycle
        remaining = [v for v in range(n) if in_deg[v] > 0]
        raise CyclicDependencyError(remaining)

    return result
