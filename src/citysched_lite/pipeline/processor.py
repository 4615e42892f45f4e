"""Run the full analysis pipeline on one dataset or a batch of them.

For each dataset:
  1.  Build the task graph from the dataset's edge list.
  2.  Find SCCs (Kosaraju) and collapse them into the condensation DAG.
  3.  Topologically sort the condensation (Kahn) and expand the
      component order back into an order over the original tasks.
  4.  Shortest paths from the source task's component, plus one example
      optimal path.
  5.  Critical (longest) path over the whole condensation.

Every stage is timed with perf_counter_ns and gets a fresh set of
algorithm objects, so each run owns its own operation counters and two
runs never share state.

Errors from any stage abort that dataset.  process_all logs the failure
and moves on to the next one; process_dataset and process_graph_data
let it propagate.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from citysched_lite.graph.adjacency import Graph, GraphError
from citysched_lite.graph.critical_path import CriticalPathFinder
from citysched_lite.graph.scc import KosarajuSCC, component_index
from citysched_lite.graph.shortest_path import (
    UNREACHABLE,
    DAGShortestPath,
    Distance,
    InvalidSourceError,
)
from citysched_lite.graph.topological import KahnTopologicalSort
from citysched_lite.pipeline.dataset import GraphData, build_graph, load_graph_data

log = logging.getLogger(__name__)


@dataclass(slots=True)
class StageTimings:
    """Wall-clock time per stage, in nanoseconds."""
    scc_ns: int = 0
    condensation_ns: int = 0
    topo_ns: int = 0
    shortest_path_ns: int = 0
    critical_path_ns: int = 0
    total_ns: int = 0


@dataclass(slots=True)
class ProcessingResult:
    """Everything the pipeline produced for one dataset."""
    dataset_name: str
    graph_data: GraphData
    graph: Graph
    sccs: list[list[int]]
    condensation: Graph
    component_order: list[int]
    task_order: list[int]
    source: int                 # vertex id from the dataset
    source_component: int       # SCC containing that vertex
    distances: list[Distance]
    target: int | None          # component the example path leads to
    optimal_path: list[int]
    critical_path: list[int]
    critical_path_length: int
    timings: StageTimings = field(default_factory=StageTimings)
    operation_counts: dict[str, dict[str, int]] = field(default_factory=dict)

    @property
    def reachable(self) -> dict[int, int]:
        """Component -> distance, for components the source reaches."""
        return {
            i: int(d) for i, d in enumerate(self.distances) if d != UNREACHABLE
        }


def derive_task_order(sccs: list[list[int]], component_order: list[int]) -> list[int]:
    """Original task ids, component by component in *component_order*."""
    order: list[int] = []
    for c in component_order:
        order.extend(sccs[c])
    return order


def find_reachable_target(distances: list[Distance], source: int) -> int | None:
    """Lowest-indexed vertex other than *source* with a finite distance."""
    for i, d in enumerate(distances):
        if i != source and d != UNREACHABLE:
            return i
    return None


def process_graph_data(data: GraphData, name: str = "dataset") -> ProcessingResult:
    """Run every pipeline stage on *data*.

    Raises OutOfRangeError for a bad edge endpoint and InvalidSourceError
    if the dataset's source vertex is not in the graph.
    """
    log.info("Processing %s (%d vertices, %d edges)", name, data.n, data.edge_count)
    graph = build_graph(data)
    if not 0 <= data.source < graph.vertex_count:
        raise InvalidSourceError(
            data.source, f"out of range for graph with {graph.vertex_count} vertices"
        )

    timings = StageTimings()
    total_start = time.perf_counter_ns()

    scc_finder = KosarajuSCC()
    t0 = time.perf_counter_ns()
    sccs = scc_finder.find_sccs(graph)
    timings.scc_ns = time.perf_counter_ns() - t0

    t0 = time.perf_counter_ns()
    condensation = scc_finder.build_condensation(graph, sccs)
    timings.condensation_ns = time.perf_counter_ns() - t0

    topo = KahnTopologicalSort()
    t0 = time.perf_counter_ns()
    component_order = topo.topological_order(condensation)
    timings.topo_ns = time.perf_counter_ns() - t0
    task_order = derive_task_order(sccs, component_order)

    source_component = component_index(graph.vertex_count, sccs)[data.source]
    sp = DAGShortestPath()
    t0 = time.perf_counter_ns()
    distances = sp.shortest_paths(condensation, source_component, component_order)
    timings.shortest_path_ns = time.perf_counter_ns() - t0

    target = find_reachable_target(distances, source_component)
    optimal_path: list[int] = []
    if target is not None:
        optimal_path = sp.reconstruct_path(
            distances, target, condensation, component_order
        )

    cp_finder = CriticalPathFinder()
    t0 = time.perf_counter_ns()
    cp = cp_finder.find_critical_path(condensation, component_order)
    timings.critical_path_ns = time.perf_counter_ns() - t0

    timings.total_ns = time.perf_counter_ns() - total_start

    log.info(
        "%s: %d SCC(s), critical path length %d",
        name, len(sccs), cp.length,
    )
    return ProcessingResult(
        dataset_name=name,
        graph_data=data,
        graph=graph,
        sccs=sccs,
        condensation=condensation,
        component_order=component_order,
        task_order=task_order,
        source=data.source,
        source_component=source_component,
        distances=distances,
        target=target,
        optimal_path=optimal_path,
        critical_path=cp.path,
        critical_path_length=cp.length,
        timings=timings,
        operation_counts={
            "scc": scc_finder.metrics.snapshot(),
            "topological_sort": topo.metrics.snapshot(),
            "shortest_path": sp.metrics.snapshot(),
            "critical_path": cp_finder.metrics.snapshot(),
        },
    )


def process_dataset(path: str | Path) -> ProcessingResult:
    """Load a dataset file and run the pipeline on it."""
    p = Path(path)
    return process_graph_data(load_graph_data(p), name=p.stem)


def process_all(paths: Iterable[str | Path]) -> list[ProcessingResult]:
    """Process each dataset in turn, skipping the ones that fail.

    A missing file or a pipeline error is logged and the batch carries
    on.  Returns the results of the datasets that succeeded.
    """
    results: list[ProcessingResult] = []
    for path in paths:
        p = Path(path)
        if not p.exists():
            log.warning("Dataset not found: %s", p)
            continue
        try:
            results.append(process_dataset(p))
        except (GraphError, OSError):
            log.exception("Error processing %s", p)
    return results


def discover_datasets(data_dir: str | Path) -> list[Path]:
    """Every *.json file in *data_dir*, sorted by name."""
    return sorted(Path(data_dir).glob("*.json"))
