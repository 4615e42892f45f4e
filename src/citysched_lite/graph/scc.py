"""Strongly connected components via Kosaraju's algorithm.

Two vertices are in the same SCC when each can reach the other.  For a
task graph that means "these jobs wait on each other in a loop", so
they have to be scheduled as one unit.  Collapsing each SCC to a single
vertex (the condensation) always gives a DAG, and everything downstream
(topological order, shortest/critical path) runs on that DAG.

Kosaraju's algorithm:
  1.  DFS the graph, pushing each vertex onto a stack once all of its
      descendants are finished (post-order).
  2.  Reverse every edge.
  3.  Pop vertices off the stack.  Each still-unvisited vertex seeds a
      DFS on the reversed graph; everything that DFS reaches is one SCC.

The stack from step 1 puts the vertex that finished last on top, and
that vertex always lives in a source SCC of the condensation.  In the
reversed graph a source SCC can't escape into any other SCC, so the
second DFS picks up exactly one component at a time.  Components come
out in topological order of the condensation, though nothing downstream
relies on that.

Both passes keep an explicit stack of (vertex, edge iterator) frames
instead of recursing.  A 1000-vertex chain would blow past Python's
default recursion limit, and the iterator frames give the same visit
order and the same post-order push as the recursive version.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator

from citysched_lite.graph.adjacency import Edge, Graph
from citysched_lite.metrics.counter import Metrics, OperationCounter

log = logging.getLogger(__name__)


class StronglyConnectedComponents(ABC):
    """Interface for an SCC finder."""

    @abstractmethod
    def find_sccs(self, graph: Graph) -> list[list[int]]:
        """Partition the vertices of *graph* into SCCs."""
        ...

    @abstractmethod
    def build_condensation(
        self, graph: Graph, sccs: list[list[int]]
    ) -> Graph:
        """Collapse each SCC of *graph* to a single vertex."""
        ...

    @property
    @abstractmethod
    def metrics(self) -> Metrics:
        ...


class KosarajuSCC(StronglyConnectedComponents):
    """Two-pass DFS SCC finder.

    Counts dfs_visit, edge_traversal, stack_push, stack_pop and
    graph_reversal.  The counter is reset at the start of find_sccs.
    """

    __slots__ = ("_metrics",)

    def __init__(self, metrics: Metrics | None = None) -> None:
        self._metrics = metrics if metrics is not None else OperationCounter()

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def find_sccs(self, graph: Graph) -> list[list[int]]:
        self._metrics.reset()
        n = graph.vertex_count
        visited = [False] * n
        finish: list[int] = []

        for v in range(n):
            if not visited[v]:
                self._fill_order(graph, v, visited, finish)

        reversed_graph = graph.reversed()
        self._metrics.increment("graph_reversal", reversed_graph.edge_count)

        visited = [False] * n
        sccs: list[list[int]] = []
        while finish:
            v = finish.pop()
            self._metrics.increment("stack_pop")
            if not visited[v]:
                sccs.append(self._collect(reversed_graph, v, visited))

        log.debug("Found %d SCC(s) in %r", len(sccs), graph)
        return sccs

    def _fill_order(
        self, graph: Graph, start: int, visited: list[bool], finish: list[int]
    ) -> None:
        """First pass: post-order push of everything reachable from *start*."""
        visited[start] = True
        self._metrics.increment("dfs_visit")
        stack: list[tuple[int, Iterator[Edge]]] = [
            (start, iter(graph.neighbors(start)))
        ]
        while stack:
            node, edges = stack[-1]
            for edge in edges:
                self._metrics.increment("edge_traversal")
                if not visited[edge.target]:
                    visited[edge.target] = True
                    self._metrics.increment("dfs_visit")
                    stack.append((edge.target, iter(graph.neighbors(edge.target))))
                    break
            else:
                # every edge of node explored
                stack.pop()
                finish.append(node)
                self._metrics.increment("stack_push")

    def _collect(
        self, graph: Graph, start: int, visited: list[bool]
    ) -> list[int]:
        """Second pass: every unvisited vertex reachable from *start*, in visit order."""
        component = [start]
        visited[start] = True
        self._metrics.increment("dfs_visit")
        stack: list[Iterator[Edge]] = [iter(graph.neighbors(start))]
        while stack:
            for edge in stack[-1]:
                self._metrics.increment("edge_traversal")
                if not visited[edge.target]:
                    visited[edge.target] = True
                    component.append(edge.target)
                    self._metrics.increment("dfs_visit")
                    stack.append(iter(graph.neighbors(edge.target)))
                    break
            else:
                stack.pop()
        return component

    def build_condensation(
        self, graph: Graph, sccs: list[list[int]]
    ) -> Graph:
        return build_condensation(graph, sccs)


def component_index(vertex_count: int, sccs: list[list[int]]) -> list[int]:
    """Map each vertex id to the index of the SCC that contains it."""
    index = [-1] * vertex_count
    for i, component in enumerate(sccs):
        for v in component:
            index[v] = i
    return index


def build_condensation(graph: Graph, sccs: list[list[int]]) -> Graph:
    """Collapse each SCC to one vertex, keeping edges between SCCs.

    Vertex i of the result stands for sccs[i].  Parallel edges between
    the same pair of components are merged into one, which keeps the
    weight of whichever original edge is seen first (scanning sources
    in ascending order).  Edges inside a component are dropped.
    """
    index = component_index(graph.vertex_count, sccs)
    condensation = Graph(len(sccs), directed=True)
    seen: set[tuple[int, int]] = set()
    for u, v, w in graph.edges():
        cu, cv = index[u], index[v]
        if cu != cv and (cu, cv) not in seen:
            seen.add((cu, cv))
            condensation.add_edge(cu, cv, w)
    log.debug("Condensation %r built from %r", condensation, graph)
    return condensation


def find_sccs(graph: Graph) -> list[list[int]]:
    """Convenience wrapper: Kosaraju with a throwaway counter."""
    return KosarajuSCC().find_sccs(graph)
