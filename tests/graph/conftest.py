"""Shared fixtures for graph tests."""
from __future__ import annotations

import random

import pytest

from blockgraph.graph.adjacency import Graph

SEED = 42


def make_graph(edges: list[tuple[int, int]], n: int | None = None) -> Graph:
    """Build a graph with nodes 0..max(edge endpoint) (or 0..n-1)."""
    if n is None:
        n = max((max(e) for e in edges), default=-1) + 1
    g = Graph()
    for i in range(n):
        g.add_node(f"n{i}")
    for src, dst in edges:
        g.add_edge(src, dst)
    return g


def make_random_dag(n_nodes: int, edge_prob: float, seed: int = SEED) -> Graph:
    """Random DAG with forward edges only (i -> j for i < j)."""
    rng = random.Random(seed)
    g = Graph()
    for i in range(n_nodes):
        g.add_node(f"task-{i}")
    for i in range(n_nodes):
        for j in range(i + 1, n_nodes):
            if rng.random() < edge_prob:
                g.add_edge(i, j)
    return g


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def single_node() -> Graph:
    return make_graph([], n=1)


@pytest.fixture
def chain_graph() -> Graph:
    """0 -> 1 -> 2 -> 3"""
    return make_graph([(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return make_graph([(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def fork_graph() -> Graph:
    """0 -> {1, 2, 3}"""
    return make_graph([(0, 1), (0, 2), (0, 3)])
