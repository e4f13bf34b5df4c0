"""Tests for the dense adjacency-list graph."""
from __future__ import annotations

import pytest

from blockgraph.graph.adjacency import Graph, InvalidNodeIndex


class TestGraphBasics:
    def test_empty_graph(self, empty_graph: Graph) -> None:
        assert empty_graph.node_count == 0
        assert empty_graph.edge_count == 0
        assert list(empty_graph.nodes()) == []
        assert list(empty_graph.edges()) == []

    def test_add_node_returns_dense_indices(self, empty_graph: Graph) -> None:
        assert empty_graph.add_node("a") == 0
        assert empty_graph.add_node("b") == 1
        assert empty_graph.add_node() == 2
        assert empty_graph.node_count == 3
        assert list(empty_graph.nodes()) == [0, 1, 2]

    def test_labels(self, empty_graph: Graph) -> None:
        empty_graph.add_node("design")
        empty_graph.add_node()
        assert empty_graph.label(0) == "design"
        assert empty_graph.label(1) is None

    def test_successors_and_predecessors(self, chain_graph: Graph) -> None:
        assert chain_graph.successors(0) == [1]
        assert chain_graph.predecessors(1) == [0]
        assert chain_graph.successors(3) == []
        assert chain_graph.predecessors(0) == []

    def test_views_stay_consistent(self, diamond_graph: Graph) -> None:
        for u in diamond_graph.nodes():
            for v in diamond_graph.successors(u):
                assert u in diamond_graph.predecessors(v)
            for p in diamond_graph.predecessors(u):
                assert u in diamond_graph.successors(p)

    def test_adjacency_keeps_insertion_order(self) -> None:
        g = Graph()
        for _ in range(4):
            g.add_node()
        g.add_edge(0, 3)
        g.add_edge(0, 1)
        g.add_edge(2, 3)
        assert g.successors(0) == [3, 1]
        assert g.predecessors(3) == [0, 2]

    def test_returned_lists_are_copies(self, chain_graph: Graph) -> None:
        succ = chain_graph.successors(0)
        succ.append(3)
        assert chain_graph.successors(0) == [1]

    def test_in_degree_out_degree(self, diamond_graph: Graph) -> None:
        assert diamond_graph.in_degree(0) == 0
        assert diamond_graph.out_degree(0) == 2
        assert diamond_graph.in_degree(3) == 2
        assert diamond_graph.out_degree(3) == 0

    def test_duplicate_edges_and_self_loops_kept(self) -> None:
        g = Graph()
        g.add_node()
        g.add_node()
        g.add_edge(0, 1)
        g.add_edge(0, 1)
        g.add_edge(1, 1)
        assert g.successors(0) == [1, 1]
        assert g.predecessors(1) == [0, 0, 1]
        assert g.edge_count == 3

    def test_has_edge(self, chain_graph: Graph) -> None:
        assert chain_graph.has_edge(0, 1)
        assert not chain_graph.has_edge(1, 0)
        assert not chain_graph.has_edge(0, 3)
        assert not chain_graph.has_edge(0, 99)

    def test_edges_iteration(self, diamond_graph: Graph) -> None:
        edges = list(diamond_graph.edges())
        assert len(edges) == 4
        assert (0, 1) in edges
        assert (2, 3) in edges

    def test_contains(self, chain_graph: Graph) -> None:
        assert 0 in chain_graph
        assert 3 in chain_graph
        assert 4 not in chain_graph
        assert -1 not in chain_graph
        assert "0" not in chain_graph
        assert True not in chain_graph

    def test_repr(self, diamond_graph: Graph) -> None:
        r = repr(diamond_graph)
        assert "nodes=4" in r
        assert "edges=4" in r

    def test_len(self, chain_graph: Graph) -> None:
        assert len(chain_graph) == 4


class TestInvalidNodeIndex:
    def test_add_edge_out_of_range(self, chain_graph: Graph) -> None:
        with pytest.raises(InvalidNodeIndex) as exc_info:
            chain_graph.add_edge(0, 4)
        assert exc_info.value.node == 4
        assert exc_info.value.node_count == 4

    def test_failed_add_edge_leaves_graph_untouched(
        self, chain_graph: Graph
    ) -> None:
        with pytest.raises(InvalidNodeIndex):
            chain_graph.add_edge(1, 10)
        with pytest.raises(InvalidNodeIndex):
            chain_graph.add_edge(10, 1)
        assert chain_graph.edge_count == 3
        assert chain_graph.successors(1) == [2]
        assert chain_graph.predecessors(1) == [0]

    def test_negative_index_rejected(self, chain_graph: Graph) -> None:
        with pytest.raises(InvalidNodeIndex):
            chain_graph.add_edge(-1, 0)
        with pytest.raises(InvalidNodeIndex):
            chain_graph.successors(-1)

    def test_traversal_out_of_range(self, chain_graph: Graph) -> None:
        for query in (
            chain_graph.successors,
            chain_graph.predecessors,
            chain_graph.label,
            chain_graph.in_degree,
            chain_graph.out_degree,
        ):
            with pytest.raises(InvalidNodeIndex):
                query(4)

    def test_is_an_index_error(self, empty_graph: Graph) -> None:
        with pytest.raises(IndexError, match="out of range"):
            empty_graph.add_edge(0, 0)
