"""Weighted directed graph using adjacency lists.

Vertices are the integers 0..vertex_count-1, fixed when the graph is
created.  Each vertex owns a list of outgoing Edge records (target plus
integer weight).  Indexing by position instead of hashing keeps the
algorithms in this package working on plain lists of ints, which is
both faster and easier to reason about than dict-of-dict graphs.

An undirected graph is just a directed one where add_edge also writes
the mirror edge.  There is no separate undirected representation.

The graph is populated once and then handed read-only to every stage of
the pipeline.  Stages that need a different shape (reversed for the
second Kosaraju pass, condensed after SCC detection) build a new Graph
rather than touching the one they were given.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


class GraphError(Exception):
    """Base class for every error raised by the scheduling pipeline."""


class OutOfRangeError(GraphError, IndexError):
    """Raised when a vertex id falls outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex} out of range for graph with {vertex_count} vertices"
        )


@dataclass(frozen=True, slots=True)
class Edge:
    """An outgoing edge: where it goes and what it costs."""
    target: int
    weight: int


class Graph:
    """Directed (or undirected) weighted graph over vertices 0..n-1."""

    __slots__ = ("_n", "_directed", "_adj")

    def __init__(self, vertex_count: int, directed: bool = True) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self._n = vertex_count
        self._directed = directed
        self._adj: list[list[Edge]] = [[] for _ in range(vertex_count)]

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[tuple[int, int, int]],
        directed: bool = True,
    ) -> Graph:
        """Build a graph from (u, v, weight) triples."""
        g = cls(vertex_count, directed)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    # ---- construction ----------------------------------------------------

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Add edge u -> v.  Undirected graphs also get v -> u.

        Both endpoints are checked before anything is written, so a bad
        edge never leaves half of itself behind.
        """
        self._check(u)
        self._check(v)
        self._adj[u].append(Edge(v, weight))
        if not self._directed:
            self._adj[v].append(Edge(u, weight))

    # ---- queries ---------------------------------------------------------

    def neighbors(self, vertex: int) -> Sequence[Edge]:
        """Outgoing edges of *vertex*, in insertion order."""
        self._check(vertex)
        return tuple(self._adj[vertex])

    def out_degree(self, vertex: int) -> int:
        self._check(vertex)
        return len(self._adj[vertex])

    def vertices(self) -> range:
        return range(self._n)

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield (u, v, weight) for every stored edge, by ascending u."""
        for u, out in enumerate(self._adj):
            for e in out:
                yield u, e.target, e.weight

    def has_edge(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        return any(e.target == v for e in self._adj[u])

    def reversed(self) -> Graph:
        """New directed graph with every edge u -> v flipped to v -> u."""
        rev = Graph(self._n, directed=True)
        for u, v, w in self.edges():
            rev._adj[v].append(Edge(u, w))
        return rev

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of stored adjacency entries (undirected edges count twice)."""
        return sum(len(out) for out in self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._n:
            raise OutOfRangeError(vertex, self._n)

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph(vertices={self._n}, edges={self.edge_count}, {kind})"
