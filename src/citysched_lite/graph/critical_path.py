"""Critical path analysis on a weighted DAG.

The critical path is the longest path through the graph when edges carry
the time needed to get from one task to the next.  No matter how many
crews work in parallel, the schedule can't finish faster than this
chain, so its length is the minimum completion time.

Algorithm:
  1.  Start every vertex at distance 0.  Any vertex can begin a path,
      so there is no single source here.
  2.  Walk vertices in topological order.  For each vertex u, for each
      edge u -> v of weight w, relax: if dist[u] + w > dist[v], update
      dist[v] and record u as the predecessor of v.
  3.  The vertex with the largest distance is the endpoint.  Ties go to
      the lowest vertex id: the scan keeps the first maximum it sees and
      only moves on a strictly larger value.
  4.  Walk predecessors backward to reconstruct the full path.

This runs in O(V + E).  Because distances start at 0 rather than minus
infinity, an edge with negative weight never extends a path; a path
that would only get shorter is simply not taken.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from citysched_lite.graph.adjacency import Graph
from citysched_lite.metrics.counter import Metrics, OperationCounter

log = logging.getLogger(__name__)

NO_PREDECESSOR = -1


@dataclass(slots=True)
class CriticalPath:
    """Result of critical path analysis."""
    path: list[int]
    length: int
    longest: list[int]     # longest-path distance ending at each vertex


class CriticalPathFinder:
    """Longest-path relaxation over a topological order.

    Counts topo_processing, relaxation and distance_update.
    """

    __slots__ = ("_metrics",)

    def __init__(self, metrics: Metrics | None = None) -> None:
        self._metrics = metrics if metrics is not None else OperationCounter()

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def find_critical_path(self, graph: Graph, order: Sequence[int]) -> CriticalPath:
        """Find the longest weighted path through *graph*.

        *order* must be a topological order of *graph*.  An empty graph
        gives an empty path of length 0.
        """
        self._metrics.reset()
        n = graph.vertex_count
        longest = [0] * n
        pred = [NO_PREDECESSOR] * n

        for u in order:
            self._metrics.increment("topo_processing")
            for edge in graph.neighbors(u):
                self._metrics.increment("relaxation")
                candidate = longest[u] + edge.weight
                if candidate > longest[edge.target]:
                    longest[edge.target] = candidate
                    pred[edge.target] = u
                    self._metrics.increment("distance_update")

        if n == 0:
            return CriticalPath(path=[], length=0, longest=[])

        best_vertex = 0
        best_length = 0
        for v in range(n):
            if longest[v] > best_length:
                best_length = longest[v]
                best_vertex = v

        path = [best_vertex]
        cur = best_vertex
        while pred[cur] != NO_PREDECESSOR:
            cur = pred[cur]
            path.append(cur)
        path.reverse()

        log.debug("Critical path %s has length %d", path, best_length)
        return CriticalPath(path=path, length=best_length, longest=longest)


def critical_path(graph: Graph, order: Sequence[int]) -> CriticalPath:
    """Convenience wrapper around CriticalPathFinder.find_critical_path."""
    return CriticalPathFinder().find_critical_path(graph, order)
