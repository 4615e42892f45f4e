"""Graph algorithms for task dependency analysis."""

from citysched_lite.graph.adjacency import Edge, Graph, GraphError, OutOfRangeError
from citysched_lite.graph.critical_path import (
    CriticalPath,
    CriticalPathFinder,
    critical_path,
)
from citysched_lite.graph.cycle_detector import CycleResult, detect_cycle
from citysched_lite.graph.scc import (
    KosarajuSCC,
    StronglyConnectedComponents,
    build_condensation,
    component_index,
    find_sccs,
)
from citysched_lite.graph.shortest_path import (
    UNREACHABLE,
    DAGShortestPath,
    InvalidSourceError,
    path_weight,
    shortest_paths,
)
from citysched_lite.graph.topological import (
    CyclicGraphError,
    KahnTopologicalSort,
    TopologicalSort,
    topological_sort,
)

__all__ = [
    "UNREACHABLE",
    "CriticalPath",
    "CriticalPathFinder",
    "CycleResult",
    "CyclicGraphError",
    "DAGShortestPath",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidSourceError",
    "KahnTopologicalSort",
    "KosarajuSCC",
    "OutOfRangeError",
    "StronglyConnectedComponents",
    "TopologicalSort",
    "build_condensation",
    "component_index",
    "critical_path",
    "detect_cycle",
    "find_sccs",
    "path_weight",
    "shortest_paths",
    "topological_sort",
]
