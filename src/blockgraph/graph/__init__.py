"""Graph algorithms for dependency analysis of work items."""

from blockgraph.graph.adjacency import Graph, InvalidNodeIndex
from blockgraph.graph.critical_path import (
    DEFAULT_K,
    CriticalPath,
    KPathsResult,
    k_critical_paths,
    k_path_nodes,
)
from blockgraph.graph.cycle_detector import CycleResult, detect_cycle
from blockgraph.graph.parallel_cut import (
    DEFAULT_LIMIT,
    ParallelCutItem,
    ParallelCutResult,
    actionable_nodes,
    parallel_cut_suggestions,
    unblock_ranking,
    unblocks,
)
from blockgraph.graph.plan import (
    ExecutionPlan,
    ExecutionTrack,
    PlanItem,
    PlanSummary,
    execution_plan,
    track_id,
)
from blockgraph.graph.stats import GraphStats, graph_stats, impact_depths
from blockgraph.graph.topological import (
    CyclicDependencyError,
    topological_sort,
)

__all__ = [
    "DEFAULT_K",
    "DEFAULT_LIMIT",
    "CriticalPath",
    "CycleResult",
    "CyclicDependencyError",
    "ExecutionPlan",
    "ExecutionTrack",
    "Graph",
    "GraphStats",
    "InvalidNodeIndex",
    "KPathsResult",
    "ParallelCutItem",
    "ParallelCutResult",
    "PlanItem",
    "PlanSummary",
    "actionable_nodes",
    "detect_cycle",
    "execution_plan",
    "graph_stats",
    "impact_depths",
    "k_critical_paths",
    "k_path_nodes",
    "parallel_cut_suggestions",
    "topological_sort",
    "track_id",
    "unblock_ranking",
    "unblocks",
]
