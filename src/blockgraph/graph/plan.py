"""Execution plan: actionable work grouped into parallel tracks.

Nodes in different weakly connected components share no dependencies
at all, so separate people can work each component without stepping on
each other.  The plan takes the actionable nodes, groups them by
component and labels every group as a track (track-A, track-B, ...).
Each item records what it would unblock, and the summary names the
single actionable node with the most downstream payoff.

Components come from a small union-find over all nodes (edges taken
undirected), so blocked nodes still tie their actionable blockers into
the same track.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from blockgraph.graph.adjacency import Graph
from blockgraph.graph.parallel_cut import actionable_nodes, is_closed, unblocks

log = logging.getLogger(__name__)


@dataclass(slots=True)
class PlanItem:
    """An actionable node and what closing it would unblock."""
    node: int
    label: str | None
    priority: int
    unblocks: list[int] = field(default_factory=list)


@dataclass(slots=True)
class ExecutionTrack:
    """Actionable nodes from one weakly connected component."""
    track_id: str
    items: list[PlanItem]
    reason: str


@dataclass(slots=True)
class PlanSummary:
    """The highest-impact actionable node, if any."""
    highest_impact: int | None = None
    impact_reason: str = ""
    unblocks_count: int = 0


@dataclass(slots=True)
class ExecutionPlan:
    """Result of execution planning."""
    tracks: list[ExecutionTrack]
    total_actionable: int
    total_blocked: int
    summary: PlanSummary


def track_id(n: int) -> str:
    """1 -> track-A, 26 -> track-Z, 27 -> track-AA, ..."""
    if n <= 0:
        return "track-?"
    letters: list[str] = []
    n -= 1
    while n >= 0:
        letters.append(chr(ord("A") + n % 26))
        n = n // 26 - 1
    return "track-" + "".join(reversed(letters))


def _components(graph: Graph) -> list[list[int]]:
    """Weakly connected components, each sorted, ordered by first node."""
    parent = list(range(graph.node_count))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for src, dst in graph.edges():
        a, b = find(src), find(dst)
        if a != b:
            # smaller index stays root so the root is the component's min
            if a < b:
                parent[b] = a
            else:
                parent[a] = b

    groups: dict[int, list[int]] = {}
    for v in range(graph.node_count):
        groups.setdefault(find(v), []).append(v)
    return [groups[root] for root in sorted(groups)]


def _summarize(unblock_map: dict[int, list[int]]) -> PlanSummary:
    if not unblock_map:
        return PlanSummary()

    best_node = -1
    best_count = -1
    for node in sorted(unblock_map):
        count = len(unblock_map[node])
        if count > best_count:
            best_node, best_count = node, count

    if best_count == 0:
        reason = "No downstream dependencies"
    elif best_count == 1:
        reason = "Unblocks 1 node"
    else:
        reason = "Unblocks multiple nodes"
    return PlanSummary(
        highest_impact=best_node,
        impact_reason=reason,
        unblocks_count=best_count,
    )


def execution_plan(
    graph: Graph,
    closed_set: Sequence[bool],
    priorities: Sequence[int] | None = None,
) -> ExecutionPlan:
    """Group actionable nodes into independent tracks.

    *priorities* is an optional per-node sequence where lower means
    more urgent; nodes beyond its end get priority 0.  Within a track,
    items are ordered by priority, then node index.
    """
    prio = priorities if priorities is not None else ()

    def priority_of(v: int) -> int:
        return prio[v] if v < len(prio) else 0

    actionable = actionable_nodes(graph, closed_set)
    actionable_set = set(actionable)
    unblock_map = {v: unblocks(graph, closed_set, v) for v in actionable}

    components = _components(graph)
    tracks: list[ExecutionTrack] = []
    for members in components:
        ready = [v for v in members if v in actionable_set]
        if not ready:
            continue
        ready.sort(key=lambda v: (priority_of(v), v))

        if len(ready) == 1:
            reason = "Single actionable item"
        elif len(components) == 1:
            reason = "All nodes in connected graph"
        else:
            reason = "Independent work stream"

        tracks.append(ExecutionTrack(
            track_id=track_id(len(tracks) + 1),
            items=[
                PlanItem(
                    node=v,
                    label=graph.label(v),
                    priority=priority_of(v),
                    unblocks=unblock_map[v],
                )
                for v in ready
            ],
            reason=reason,
        ))

    total_open = sum(
        1 for v in range(graph.node_count) if not is_closed(closed_set, v)
    )
    log.debug(
        "execution_plan: %d track(s), %d actionable of %d open",
        len(tracks), len(actionable), total_open,
    )
    return ExecutionPlan(
        tracks=tracks,
        total_actionable=len(actionable),
        total_blocked=total_open - len(actionable),
        summary=_summarize(unblock_map),
    )
