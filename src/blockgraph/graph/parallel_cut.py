"""Parallel cut analysis: which open node unlocks the most work?

A node is *actionable* when it is open and every node blocking it is
closed.  Closing an open node v makes a successor w actionable exactly
when w is open and v was its last open blocker.  The count of such
successors is new_actionable(v).

Closing v also takes v itself off the actionable list, so the net
change in concurrently workable items is

    parallel_gain(v) = new_actionable(v) - 1

parallel_cut_suggestions keeps nodes with a positive gain (closing them
widens the frontier).  unblock_ranking ranks every open node by the raw
new_actionable count, with no gain filter.

The completion state is a caller-owned sequence indexed by node.  It
can be shorter than the graph; missing entries count as open.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from blockgraph.graph.adjacency import Graph

log = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


@dataclass(slots=True)
class ParallelCutItem:
    """An open node whose completion widens the set of workable nodes."""
    node: int
    parallel_gain: int     # new_actionable - 1, always > 0 in results
    new_actionable: int


@dataclass(slots=True)
class ParallelCutResult:
    """Result of parallel cut analysis."""
    items: list[ParallelCutItem] = field(default_factory=list)
    open_nodes: int = 0
    current_actionable: int = 0


def is_closed(closed_set: Sequence[bool], node: int) -> bool:
    """True if *node* is marked done; indices past the end are open."""
    return 0 <= node < len(closed_set) and bool(closed_set[node])


def is_actionable(graph: Graph, closed_set: Sequence[bool], node: int) -> bool:
    return not is_closed(closed_set, node) and all(
        is_closed(closed_set, p) for p in graph.predecessors(node)
    )


def actionable_nodes(graph: Graph, closed_set: Sequence[bool]) -> list[int]:
    """Open nodes with no open blockers, in index order."""
    return [
        v for v in range(graph.node_count)
        if is_actionable(graph, closed_set, v)
    ]


def _would_unblock(
    graph: Graph, closed_set: Sequence[bool], node: int, succ: int
) -> bool:
    # succ becomes actionable iff node is its only open blocker
    return not is_closed(closed_set, succ) and all(
        is_closed(closed_set, p)
        for p in graph.predecessors(succ)
        if p != node
    )


def new_actionable_count(
    graph: Graph, closed_set: Sequence[bool], node: int
) -> int:
    """Successor entries of *node* that closing it would make actionable.

    Parallel edges to the same successor are counted once per edge.
    """
    return sum(
        1 for w in graph.successors(node)
        if _would_unblock(graph, closed_set, node, w)
    )


def unblocks(graph: Graph, closed_set: Sequence[bool], node: int) -> list[int]:
    """Distinct nodes that closing *node* would make actionable, sorted."""
    return sorted({
        w for w in graph.successors(node)
        if _would_unblock(graph, closed_set, node, w)
    })


def _open_nodes(graph: Graph, closed_set: Sequence[bool]) -> list[int]:
    return [
        v for v in range(graph.node_count)
        if not is_closed(closed_set, v)
    ]


def parallel_cut_suggestions(
    graph: Graph,
    closed_set: Sequence[bool],
    limit: int = DEFAULT_LIMIT,
) -> ParallelCutResult:
    """Open nodes whose completion would increase parallel work.

    Items are sorted by parallel_gain descending (ties by node index)
    and truncated to *limit*.  Raises ValueError if *limit* is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    open_nodes = _open_nodes(graph, closed_set)
    current_actionable = len(actionable_nodes(graph, closed_set))

    items: list[ParallelCutItem] = []
    for v in open_nodes:
        count = new_actionable_count(graph, closed_set, v)
        gain = count - 1
        if gain > 0:
            items.append(ParallelCutItem(
                node=v, parallel_gain=gain, new_actionable=count,
            ))

    items.sort(key=lambda item: item.parallel_gain, reverse=True)
    del items[limit:]

    log.debug(
        "parallel_cut_suggestions: open=%d actionable=%d -> %d item(s)",
        len(open_nodes), current_actionable, len(items),
    )
    return ParallelCutResult(
        items=items,
        open_nodes=len(open_nodes),
        current_actionable=current_actionable,
    )


def unblock_ranking(
    graph: Graph,
    closed_set: Sequence[bool],
    limit: int = DEFAULT_LIMIT,
) -> list[tuple[int, int]]:
    """(node, new_actionable) for open nodes, most unblocking first.

    Unlike parallel_cut_suggestions, nodes that unblock zero or one
    dependent are kept.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    ranking = [
        (v, new_actionable_count(graph, closed_set, v))
        for v in _open_nodes(graph, closed_set)
    ]
    ranking.sort(key=lambda entry: entry[1], reverse=True)
    return ranking[:limit]
