"""Find one directed cycle in a task graph, if there is any.

Iterative DFS that colours each vertex:
  WHITE  -- never reached
  GRAY   -- on the active DFS branch
  BLACK  -- finished, every successor explored

Reaching a GRAY vertex again means we followed an edge back up the
active branch, which closes a loop.  The parent links then give the
tasks on that loop in edge order.

The topological sorter already refuses cyclic input, but it only says
*that* there is a cycle.  This module says *where*, which is what the
dataset report wants when it labels a dataset cyclic.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from citysched_lite.graph.adjacency import Edge, Graph

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult:
    """Outcome of detect_cycle; cycle_path is None for an acyclic graph."""
    has_cycle: bool
    cycle_path: list[int] | None = None


def detect_cycle(graph: Graph) -> CycleResult:
    """First directed cycle found in *graph*, scanning roots in id order.

    On success cycle_path is closed, [v0, ..., vk, v0], and every
    adjacent pair in it is an edge of *graph*.
    """
    n = graph.vertex_count
    color = [WHITE] * n
    parent = [-1] * n

    for root in range(n):
        if color[root] != WHITE:
            continue
        color[root] = GRAY
        stack: list[tuple[int, Iterator[Edge]]] = [
            (root, iter(graph.neighbors(root)))
        ]
        while stack:
            node, edges = stack[-1]
            for edge in edges:
                succ = edge.target
                if color[succ] == GRAY:
                    return CycleResult(has_cycle=True, cycle_path=_unwind(parent, node, succ))
                if color[succ] == WHITE:
                    color[succ] = GRAY
                    parent[succ] = node
                    stack.append((succ, iter(graph.neighbors(succ))))
                    break
            else:
                color[node] = BLACK
                stack.pop()

    return CycleResult(has_cycle=False, cycle_path=None)


def _unwind(parent: list[int], node: int, back_to: int) -> list[int]:
    """Cycle for back edge node -> back_to, as [back_to, ..., node, back_to]."""
    path = [back_to, node]
    cur = node
    while cur != back_to:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path
