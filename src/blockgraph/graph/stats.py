"""Per-node structural metrics for a dependency graph.

Three cheap O(V + E) passes:

  * degrees    -- in_degree[v] counts the nodes blocking v, out_degree[v]
                  the nodes v blocks.
  * impact     -- critical_path_score[v] is the number of nodes on the
                  longest chain of dependents starting at v (v included).
                  A node nothing depends on scores 1; a blocker scores one
                  more than its deepest dependent.  Filled in reverse
                  topological order, so every dependent is final before
                  its blocker is scored.
  * density    -- edges / (n * (n - 1)), or 0.0 for graphs with fewer
                  than two nodes.

Impact depth and the topological order only exist for DAGs.  On a
cyclic graph both come back as None while degrees and density are
still reported.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from blockgraph.graph.adjacency import Graph
from blockgraph.graph.topological import CyclicDependencyError, topological_sort

log = logging.getLogger(__name__)


@dataclass(slots=True)
class GraphStats:
    """Result of structural graph analysis."""
    node_count: int = 0
    edge_count: int = 0
    in_degree: list[int] = field(default_factory=list)
    out_degree: list[int] = field(default_factory=list)
    density: float = 0.0
    topological_order: list[int] | None = None
    critical_path_score: list[int] | None = None   # None if cyclic


def impact_depths(graph: Graph, order: list[int]) -> list[int]:
    """Longest dependent chain starting at each node, in nodes.

    *order* must be a topological order of *graph*.
    """
    depth = [1] * graph.node_count
    for node in reversed(order):
        for succ in graph.successors(node):
            if depth[succ] + 1 > depth[node]:
                depth[node] = depth[succ] + 1
    return depth


def graph_stats(graph: Graph) -> GraphStats:
    """Degrees, density and (for DAGs) per-node impact depth."""
    n = graph.node_count
    e = graph.edge_count
    stats = GraphStats(
        node_count=n,
        edge_count=e,
        in_degree=[graph.in_degree(v) for v in range(n)],
        out_degree=[graph.out_degree(v) for v in range(n)],
        density=e / (n * (n - 1)) if n > 1 else 0.0,
    )

    try:
        order = topological_sort(graph)
    except CyclicDependencyError as exc:
        log.debug(
            "graph_stats: %d node(s) on or behind a cycle, impact skipped",
            len(exc.remaining_nodes),
        )
        return stats

    stats.topological_order = order
    stats.critical_path_score = impact_depths(graph, order)
    return stats
