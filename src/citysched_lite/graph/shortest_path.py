"""Single-source shortest paths on a DAG.

Given a topological order, one pass of edge relaxation is enough: by the
time we reach vertex u, every path into u has already been relaxed, so
dist[u] is final.  That gives O(V + E) with no heap, and unlike Dijkstra
it doesn't care about negative weights.

Vertices that come before the source in the order can't be reached from
it (any path source -> u would put source before u), so the walk starts
at the source's position and skips the prefix.

Path reconstruction doesn't keep a predecessor array.  It walks backward
from the target, each time taking the *first* vertex in topological
order that has an edge into the current vertex and sits on a shortest
path to it (dist[u] + w == dist[current]).  That fixes the tie-break
when several shortest paths exist: the earliest candidate in the order
always wins.  The price is O(V * E) per path, which is fine for the
graph sizes the pipeline deals with.  Tracking predecessors during the
forward pass, as critical_path does, would make it O(V) if that ever
matters.
"""
from __future__ import annotations

import logging
import math
from typing import Final, Sequence

from citysched_lite.graph.adjacency import Graph, GraphError
from citysched_lite.metrics.counter import Metrics, OperationCounter

log = logging.getLogger(__name__)

UNREACHABLE: Final = math.inf
"""Distance sentinel for vertices the source can't reach."""

Distance = int | float   # int, or UNREACHABLE


class InvalidSourceError(GraphError):
    """Raised when the source vertex is not part of the supplied order."""

    def __init__(self, source: int, reason: str = "not found in topological order") -> None:
        self.source = source
        super().__init__(f"Source {source} {reason}")


class DAGShortestPath:
    """Topological-order relaxation from one source.

    Counts topo_processing, relaxation and distance_update.
    """

    __slots__ = ("_metrics",)

    def __init__(self, metrics: Metrics | None = None) -> None:
        self._metrics = metrics if metrics is not None else OperationCounter()

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def shortest_paths(
        self, graph: Graph, source: int, order: Sequence[int]
    ) -> list[Distance]:
        """Distances from *source* to every vertex of *graph*.

        Unreached vertices keep UNREACHABLE.  Raises InvalidSourceError
        if *source* does not appear in *order*.
        """
        self._metrics.reset()
        order = list(order)
        try:
            start = order.index(source)
        except ValueError:
            raise InvalidSourceError(source) from None

        dist: list[Distance] = [UNREACHABLE] * graph.vertex_count
        dist[source] = 0

        for u in order[start:]:
            self._metrics.increment("topo_processing")
            if dist[u] == UNREACHABLE:
                continue
            for edge in graph.neighbors(u):
                self._metrics.increment("relaxation")
                candidate = dist[u] + edge.weight
                if candidate < dist[edge.target]:
                    dist[edge.target] = candidate
                    self._metrics.increment("distance_update")

        reached = sum(1 for d in dist if d != UNREACHABLE)
        log.debug("Shortest paths from %d reached %d/%d vertices",
                  source, reached, graph.vertex_count)
        return dist

    def reconstruct_path(
        self,
        dist: Sequence[Distance],
        target: int,
        graph: Graph,
        order: Sequence[int],
    ) -> list[int]:
        """One shortest path ending at *target*, or [] if it is unreachable.

        The path starts at the source (the only reached vertex with no
        shortest-path predecessor) and its edge weights sum to
        dist[target].
        """
        if dist[target] == UNREACHABLE:
            return []

        order = list(order)
        path = [target]
        current = target
        while True:
            pred = self._predecessor(dist, current, graph, order)
            if pred is None:
                break
            path.append(pred)
            current = pred
        path.reverse()
        return path

    @staticmethod
    def _predecessor(
        dist: Sequence[Distance], vertex: int, graph: Graph, order: list[int]
    ) -> int | None:
        # First u in topological order with a tight edge u -> vertex.
        # Only vertices ahead of vertex are candidates, so each step moves
        # strictly earlier in the order and the walk terminates.
        for u in order[:order.index(vertex)]:
            if dist[u] == UNREACHABLE:
                continue
            for edge in graph.neighbors(u):
                if edge.target == vertex and dist[u] + edge.weight == dist[vertex]:
                    return u
        return None


def shortest_paths(graph: Graph, source: int, order: Sequence[int]) -> list[Distance]:
    """Convenience wrapper around DAGShortestPath.shortest_paths."""
    return DAGShortestPath().shortest_paths(graph, source, order)


def path_weight(graph: Graph, path: Sequence[int]) -> int:
    """Sum of edge weights along *path*, using the lightest parallel edge.

    Raises ValueError if some consecutive pair is not an edge.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [e.weight for e in graph.neighbors(u) if e.target == v]
        if not weights:
            raise ValueError(f"No edge {u} -> {v} in graph")
        total += min(weights)
    return total
