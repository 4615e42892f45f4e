"""Tests for DAG single-source shortest paths and path reconstruction."""
from __future__ import annotations

import math
import random

import pytest

from citysched_lite.graph.adjacency import Graph, GraphError
from citysched_lite.graph.shortest_path import (
    UNREACHABLE,
    DAGShortestPath,
    InvalidSourceError,
    path_weight,
    shortest_paths,
)
from citysched_lite.graph.topological import topological_sort


class TestShortestPaths:
    def test_linear_chain(self, linear_graph: Graph) -> None:
        assert shortest_paths(linear_graph, 0, [0, 1, 2, 3]) == [0, 1, 3, 6]

    def test_diamond_takes_cheaper_branch(self, diamond_graph: Graph) -> None:
        dist = shortest_paths(diamond_graph, 0, [0, 1, 2, 3])
        assert dist == [0, 1, 3, 4]

    def test_unreachable_keeps_sentinel(self) -> None:
        g = Graph.from_edges(5, [(0, 1, 1), (1, 2, 2)])
        dist = shortest_paths(g, 0, [0, 1, 2, 3, 4])
        assert dist[:3] == [0, 1, 3]
        assert dist[3] == UNREACHABLE
        assert dist[4] == UNREACHABLE
        assert math.isinf(UNREACHABLE)

    def test_negative_weights(self) -> None:
        g = Graph.from_edges(3, [(0, 1, -2), (1, 2, 3), (0, 2, 2)])
        dist = shortest_paths(g, 0, [0, 1, 2])
        assert dist == [0, -2, 1]

    def test_vertices_before_source_are_unreachable(self) -> None:
        g = Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (0, 3, 1)])
        dist = shortest_paths(g, 1, [0, 1, 2, 3])
        assert dist == [UNREACHABLE, 0, 1, 2]

    def test_single_vertex(self, single_vertex: Graph) -> None:
        assert shortest_paths(single_vertex, 0, [0]) == [0]

    def test_source_not_in_order_raises(self, linear_graph: Graph) -> None:
        with pytest.raises(InvalidSourceError, match="Source 7"):
            shortest_paths(linear_graph, 7, [0, 1, 2, 3])

    def test_empty_order_raises(self, empty_graph: Graph) -> None:
        with pytest.raises(InvalidSourceError):
            shortest_paths(empty_graph, 0, [])

    def test_invalid_source_is_graph_error(self) -> None:
        err = InvalidSourceError(3)
        assert isinstance(err, GraphError)
        assert err.source == 3

    def test_counts(self, diamond_graph: Graph) -> None:
        sp = DAGShortestPath()
        sp.shortest_paths(diamond_graph, 0, [0, 1, 2, 3])
        assert sp.metrics.count("topo_processing") == 4
        assert sp.metrics.count("relaxation") == 4
        # 1, 2, 3 (via 1), then 3 again (via 2)
        assert sp.metrics.count("distance_update") == 4

    def test_invalid_source_skips_relaxation(self, diamond_graph: Graph) -> None:
        sp = DAGShortestPath()
        with pytest.raises(InvalidSourceError):
            sp.shortest_paths(diamond_graph, 9, [0, 1, 2, 3])
        assert sp.metrics.count("relaxation") == 0


class TestReconstructPath:
    def test_picks_shortest_route(self) -> None:
        g = Graph.from_edges(5, [(0, 1, 2), (1, 2, 3), (0, 3, 1), (3, 2, 1), (2, 4, 2)])
        order = [0, 1, 3, 2, 4]
        sp = DAGShortestPath()
        dist = sp.shortest_paths(g, 0, order)
        assert dist[4] == 4
        assert sp.reconstruct_path(dist, 4, g, order) == [0, 3, 2, 4]

    def test_diamond_path(self, diamond_graph: Graph) -> None:
        sp = DAGShortestPath()
        order = [0, 1, 2, 3]
        dist = sp.shortest_paths(diamond_graph, 0, order)
        assert sp.reconstruct_path(dist, 3, diamond_graph, order) == [0, 2, 3]

    def test_unreachable_target_gives_empty_path(self) -> None:
        g = Graph.from_edges(3, [(0, 1, 1)])
        sp = DAGShortestPath()
        dist = sp.shortest_paths(g, 0, [0, 1, 2])
        assert sp.reconstruct_path(dist, 2, g, [0, 1, 2]) == []

    def test_source_path_is_just_source(self, linear_graph: Graph) -> None:
        sp = DAGShortestPath()
        order = [0, 1, 2, 3]
        dist = sp.shortest_paths(linear_graph, 0, order)
        assert sp.reconstruct_path(dist, 0, linear_graph, order) == [0]

    def test_tie_goes_to_earliest_in_order(self) -> None:
        # 0 -> 1 -> 3 and 0 -> 2 -> 3 both cost 2
        g = Graph.from_edges(4, [(0, 2, 1), (0, 1, 1), (2, 3, 1), (1, 3, 1)])
        sp = DAGShortestPath()
        dist = sp.shortest_paths(g, 0, [0, 1, 2, 3])
        assert sp.reconstruct_path(dist, 3, g, [0, 1, 2, 3]) == [0, 1, 3]
        dist = sp.shortest_paths(g, 0, [0, 2, 1, 3])
        assert sp.reconstruct_path(dist, 3, g, [0, 2, 1, 3]) == [0, 2, 3]

    def test_negative_weight_path(self) -> None:
        g = Graph.from_edges(3, [(0, 1, -2), (1, 2, 3), (0, 2, 2)])
        sp = DAGShortestPath()
        dist = sp.shortest_paths(g, 0, [0, 1, 2])
        assert sp.reconstruct_path(dist, 2, g, [0, 1, 2]) == [0, 1, 2]

    def test_zero_weight_edges_terminate(self) -> None:
        g = Graph.from_edges(3, [(0, 1, 0), (1, 2, 0)])
        sp = DAGShortestPath()
        dist = sp.shortest_paths(g, 0, [0, 1, 2])
        assert sp.reconstruct_path(dist, 2, g, [0, 1, 2]) == [0, 1, 2]

    def test_path_from_mid_order_source(self) -> None:
        g = Graph.from_edges(4, [(0, 1, 1), (1, 2, 5), (1, 3, 1), (3, 2, 1)])
        order = [0, 1, 3, 2]
        sp = DAGShortestPath()
        dist = sp.shortest_paths(g, 1, order)
        assert sp.reconstruct_path(dist, 2, g, order) == [1, 3, 2]

    def test_reconstructed_weight_matches_distance_random(self) -> None:
        rng = random.Random(42)
        sp = DAGShortestPath()
        for _ in range(40):
            n = rng.randint(2, 25)
            g = Graph(n)
            for i in range(n):
                for j in range(i + 1, n):
                    if rng.random() < 0.25:
                        g.add_edge(i, j, rng.randint(-5, 10))
            order = topological_sort(g)
            source = rng.randrange(n)
            dist = sp.shortest_paths(g, source, order)
            for target in range(n):
                path = sp.reconstruct_path(dist, target, g, order)
                if dist[target] == UNREACHABLE:
                    assert path == []
                    continue
                assert path[0] == source
                assert path[-1] == target
                assert path_weight(g, path) == dist[target]


class TestPathWeight:
    def test_sums_edges(self, linear_graph: Graph) -> None:
        assert path_weight(linear_graph, [0, 1, 2, 3]) == 6

    def test_single_vertex_path(self, linear_graph: Graph) -> None:
        assert path_weight(linear_graph, [2]) == 0

    def test_missing_edge_raises(self, linear_graph: Graph) -> None:
        with pytest.raises(ValueError, match="No edge 0 -> 2"):
            path_weight(linear_graph, [0, 2])
