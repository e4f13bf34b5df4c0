"""K longest dependency chains in a DAG.

A critical path is a longest chain of blocking edges: the minimum
number of sequential steps needed to finish the work at its end.  We
report the k longest such chains, one per end node.

Algorithm:
  1.  Topologically sort the graph.  A cycle means there is no longest
      path, and the result is empty (not an error).
  2.  Walk nodes in topological order.  For each node v, for each
      predecessor u, relax: if dist[u] + 1 > dist[v], update dist[v] and
      record u as the predecessor of v.  Predecessors are final by the
      time v is reached, so one pass is enough.
  3.  Rank all nodes by dist, descending.  The sort is stable and the
      candidates start in index order, so ties go to the lower index.
  4.  Keep the first k candidates, then drop those with dist == 0 and
      walk pred pointers back to rebuild a path for each survivor.

Step 4 truncates before it filters.  A zero-distance node sitting in
the top k still uses up a slot, so fewer than k paths come back
whenever fewer than k nodes have a nonzero distance.

Runs in O(V + E) plus the O(V log V) ranking sort.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from blockgraph.graph.adjacency import Graph
from blockgraph.graph.cycle_detector import detect_cycle
from blockgraph.graph.topological import CyclicDependencyError, topological_sort

log = logging.getLogger(__name__)

DEFAULT_K = 5


@dataclass(slots=True)
class CriticalPath:
    """One chain, source first."""
    nodes: list[int]
    length: int            # node count, i.e. edges + 1


@dataclass(slots=True)
class KPathsResult:
    """Result of k-longest-path analysis."""
    paths: list[CriticalPath] = field(default_factory=list)
    total_nodes: int = 0
    max_length: int = 0    # nodes on the top-ranked chain, 0 if none ranked


def longest_distances(
    graph: Graph, order: list[int]
) -> tuple[list[int], list[int | None]]:
    """Longest-path DP over a topological *order*.

    Returns (dist, pred): dist[v] is the number of edges on the longest
    path ending at v, pred[v] the predecessor that achieves it.
    """
    n = graph.node_count
    dist = [0] * n
    pred: list[int | None] = [None] * n

    for node in order:
        for p in graph.predecessors(node):
            if dist[p] + 1 > dist[node]:
                dist[node] = dist[p] + 1
                pred[node] = p

    return dist, pred


def k_critical_paths(graph: Graph, k: int = DEFAULT_K) -> KPathsResult:
    """Find up to *k* longest paths, each ending at a different node.

    Returns an empty result (max_length 0) for a cyclic graph.
    Raises ValueError if *k* is negative.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    n = graph.node_count
    try:
        order = topological_sort(graph)
    except CyclicDependencyError as exc:
        if log.isEnabledFor(logging.WARNING):
            log.warning(
                "Critical path skipped: %d node(s) blocked by a cycle, e.g. %s",
                len(exc.remaining_nodes), detect_cycle(graph).cycle_path,
            )
        return KPathsResult(paths=[], total_nodes=n, max_length=0)

    dist, pred = longest_distances(graph, order)

    candidates = sorted(range(n), key=lambda v: dist[v], reverse=True)[:k]
    max_length = dist[candidates[0]] + 1 if candidates else 0

    paths: list[CriticalPath] = []
    for end in candidates:
        if dist[end] == 0:
            continue
        chain = [end]
        cur = end
        while pred[cur] is not None:
            cur = pred[cur]  # type: ignore[assignment]
            chain.append(cur)
        chain.reverse()
        paths.append(CriticalPath(nodes=chain, length=len(chain)))

    log.debug(
        "k_critical_paths: n=%d k=%d -> %d path(s), max_length=%d",
        n, k, len(paths), max_length,
    )
    return KPathsResult(paths=paths, total_nodes=n, max_length=max_length)


def k_path_nodes(graph: Graph, k: int = DEFAULT_K) -> list[list[int]]:
    """Node sequences of k_critical_paths, without the bookkeeping."""
    return [p.nodes for p in k_critical_paths(graph, k).paths]
