"""Tests for DFS-based cycle detection."""
from __future__ import annotations

import random

from citysched_lite.graph.adjacency import Graph
from citysched_lite.graph.cycle_detector import CycleResult, detect_cycle


class TestCycleDetector:
    def test_no_cycle_empty(self, empty_graph: Graph) -> None:
        assert detect_cycle(empty_graph) == CycleResult(has_cycle=False, cycle_path=None)

    def test_no_cycle_linear(self, linear_graph: Graph) -> None:
        assert not detect_cycle(linear_graph).has_cycle

    def test_no_cycle_diamond(self, diamond_graph: Graph) -> None:
        assert not detect_cycle(diamond_graph).has_cycle

    def test_simple_cycle(self) -> None:
        g = Graph.from_edges(2, [(0, 1, 1), (1, 0, 1)])
        result = detect_cycle(g)
        assert result.has_cycle
        assert result.cycle_path == [0, 1, 0]

    def test_deep_cycle(self) -> None:
        """0 -> 1 -> 2 -> 3 -> 1 (cycle of length 3)."""
        g = Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 1, 1)])
        result = detect_cycle(g)
        assert result.has_cycle
        assert result.cycle_path == [1, 2, 3, 1]

    def test_self_loop(self) -> None:
        g = Graph.from_edges(1, [(0, 0, 1)])
        result = detect_cycle(g)
        assert result.has_cycle
        assert result.cycle_path == [0, 0]

    def test_cycle_in_second_component(self) -> None:
        g = Graph.from_edges(4, [(0, 1, 1), (2, 3, 1), (3, 2, 1)])
        result = detect_cycle(g)
        assert result.has_cycle
        assert set(result.cycle_path or []) == {2, 3}

    def test_long_ring_does_not_recurse(self) -> None:
        n = 5000
        g = Graph.from_edges(n, [(i, (i + 1) % n, 1) for i in range(n)])
        result = detect_cycle(g)
        assert result.has_cycle
        assert len(result.cycle_path or []) == n + 1

    def test_cycle_path_follows_real_edges(self, ring_graph: Graph) -> None:
        path = detect_cycle(ring_graph).cycle_path
        assert path is not None
        assert path[0] == path[-1]
        for u, v in zip(path, path[1:]):
            assert ring_graph.has_edge(u, v), f"Edge {u}->{v} not in graph"

    def test_no_false_positives_random_dags(self) -> None:
        rng = random.Random(42)
        for _ in range(50):
            n = rng.randint(2, 30)
            g = Graph(n)
            for i in range(n):
                for j in range(i + 1, n):
                    if rng.random() < 0.3:
                        g.add_edge(i, j, 1)
            assert not detect_cycle(g).has_cycle, f"False positive on DAG with {n} vertices"

    def test_no_false_negatives_random_cycles(self) -> None:
        """A chain guarantees reachability, so one back edge closes a cycle."""
        rng = random.Random(43)
        for _ in range(50):
            n = rng.randint(3, 20)
            g = Graph(n)
            for i in range(n - 1):
                g.add_edge(i, i + 1, 1)
            for i in range(n):
                for j in range(i + 2, n):
                    if rng.random() < 0.2:
                        g.add_edge(i, j, 1)
            src = rng.randint(1, n - 1)
            dst = rng.randint(0, src - 1)
            g.add_edge(src, dst, 1)
            result = detect_cycle(g)
            assert result.has_cycle, f"Missed cycle with back edge {src}->{dst}"
            path = result.cycle_path or []
            for u, v in zip(path, path[1:]):
                assert g.has_edge(u, v)
