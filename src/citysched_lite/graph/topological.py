"""Topological sort via Kahn's algorithm (BFS with in-degree tracking).

In the pipeline this runs on the condensation graph, so its input is a
DAG by construction.  It is still a general-purpose sorter: hand it a
graph with a cycle and it raises CyclicGraphError instead of returning
a partial order.

The algorithm:
  1.  Compute in-degree for every vertex by scanning all edges.
  2.  Seed a FIFO queue with every vertex of in-degree 0, in ascending
      id order so the output is deterministic.
  3.  Pop a vertex, append it to the result, decrement the in-degree of
      its successors.  Any successor that drops to 0 enters the queue.
  4.  If the result contains every vertex, the graph is a DAG.
      Otherwise the vertices left over sit on (or behind) a cycle.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque

from citysched_lite.graph.adjacency import Graph, GraphError
from citysched_lite.metrics.counter import Metrics, OperationCounter

log = logging.getLogger(__name__)


class CyclicGraphError(GraphError):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_vertices: list[int]) -> None:
        self.remaining_vertices = remaining_vertices
        super().__init__(
            f"Cycle detected: {len(remaining_vertices)} vertex(es) could not "
            f"be ordered"
        )


class TopologicalSort(ABC):
    """Interface for a topological sorter."""

    @abstractmethod
    def topological_order(self, graph: Graph) -> list[int]:
        """Return the vertices of *graph* with every edge pointing forward."""
        ...

    @property
    @abstractmethod
    def metrics(self) -> Metrics:
        ...


class KahnTopologicalSort(TopologicalSort):
    """Kahn's algorithm.

    Counts in_degree_calc, queue_push, queue_pop and in_degree_decrement.
    """

    __slots__ = ("_metrics",)

    def __init__(self, metrics: Metrics | None = None) -> None:
        self._metrics = metrics if metrics is not None else OperationCounter()

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def topological_order(self, graph: Graph) -> list[int]:
        self._metrics.reset()
        n = graph.vertex_count
        in_deg = [0] * n
        for _, v, _ in graph.edges():
            in_deg[v] += 1
            self._metrics.increment("in_degree_calc")

        q: deque[int] = deque()
        for v in range(n):
            if in_deg[v] == 0:
                q.append(v)
                self._metrics.increment("queue_push")

        result: list[int] = []
        while q:
            node = q.popleft()
            self._metrics.increment("queue_pop")
            result.append(node)
            for edge in graph.neighbors(node):
                in_deg[edge.target] -= 1
                self._metrics.increment("in_degree_decrement")
                if in_deg[edge.target] == 0:
                    q.append(edge.target)
                    self._metrics.increment("queue_push")

        if len(result) != n:
            placed = set(result)
            remaining = [v for v in range(n) if v not in placed]
            raise CyclicGraphError(remaining)

        log.debug("Topological order of %d vertices computed", n)
        return result


def topological_sort(graph: Graph) -> list[int]:
    """Return vertices in dependency order (prerequisites first).

    Raises CyclicGraphError if the graph contains a cycle.
    """
    return KahnTopologicalSort().topological_order(graph)
