"""Shared fixtures for graph algorithm tests."""
from __future__ import annotations

import pytest

from citysched_lite.graph.adjacency import Graph


@pytest.fixture
def empty_graph() -> Graph:
    return Graph(0)


@pytest.fixture
def single_vertex() -> Graph:
    return Graph(1)


@pytest.fixture
def linear_graph() -> Graph:
    """0 -> 1 -> 2 -> 3 with weights 1, 2, 3"""
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3)])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -(1)-> 1 -(4)-> 3
    0 -(3)-> 2 -(1)-> 3
    """
    return Graph.from_edges(4, [(0, 1, 1), (0, 2, 3), (1, 3, 4), (2, 3, 1)])


@pytest.fixture
def ring_graph() -> Graph:
    """0 -> 1 -> 2 -> 3 -> 4 -> 0"""
    return Graph.from_edges(5, [(i, (i + 1) % 5, 1) for i in range(5)])


@pytest.fixture
def mixed_graph() -> Graph:
    """
    Cycle {0, 1, 2} feeds cycle {3, 4}, which feeds the chain 5 -> 6.
    Vertex 7 is isolated.
    """
    return Graph.from_edges(8, [
        (0, 1, 2), (1, 2, 3), (2, 0, 1),
        (2, 3, 4), (1, 3, 9),
        (3, 4, 1), (4, 3, 1),
        (4, 5, 2), (5, 6, 5),
    ])
