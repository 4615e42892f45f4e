"""Generate the standard smart-city scheduling datasets.

Nine datasets in three size classes:
  - small  (6-10 tasks):  one cycle, a pure DAG, chained 2-cycles
  - medium (10-20 tasks): mixed SCCs, a dense cyclic block, a sparse DAG
  - large  (20-50 tasks): mixed, dense DAG, hierarchical SCCs

Hand-written edges are fixed.  Where a dataset needs random weights or
random extra edges, they come from a random.Random seeded once per
generator, so the same seed always produces byte-identical files.  The
datasets are built in a fixed order and share that one RNG, so asking
for large3 on its own gives different weights than generate_all does.

Each dataset picks a source task inside the part of the graph where
shortest paths are interesting (usually the DAG tail), not vertex 0.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from citysched_lite.graph.cycle_detector import detect_cycle
from citysched_lite.pipeline.dataset import (
    EdgeSpec,
    GraphData,
    build_graph,
    save_graph_data,
)

log = logging.getLogger(__name__)

REPORT_NAME = "DATASET_REPORT.md"


@dataclass(frozen=True, slots=True)
class DatasetInfo:
    """Catalogue entry for one standard dataset."""
    name: str
    category: str
    description: str


STANDARD_DATASETS: tuple[DatasetInfo, ...] = (
    DatasetInfo("small1", "Small", "Simple case with 1 cycle and DAG structure"),
    DatasetInfo("small2", "Small", "Pure DAG with multiple paths"),
    DatasetInfo("small3", "Small", "Multiple small cycles with connections"),
    DatasetInfo("medium1", "Medium", "Mixed structure with several SCCs"),
    DatasetInfo("medium2", "Medium", "Dense cyclic graph with DAG components"),
    DatasetInfo("medium3", "Medium", "Sparse DAG with complex dependencies"),
    DatasetInfo("large1", "Large", "Large mixed graph for performance testing"),
    DatasetInfo("large2", "Large", "Dense DAG for critical path analysis"),
    DatasetInfo("large3", "Large", "Complex graph with multiple SCC hierarchies"),
)


def _edges(*triples: tuple[int, int, int]) -> list[EdgeSpec]:
    return [EdgeSpec(u, v, w) for u, v, w in triples]


class DatasetGenerator:
    """Build the nine standard datasets from a seeded RNG."""

    __slots__ = ("_rng",)

    def __init__(self, seed: int = 42) -> None:
        self._rng = random.Random(seed)

    def _w(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    # ---- small -----------------------------------------------------------

    def small1(self) -> GraphData:
        edges = _edges(
            (0, 1, 2), (1, 2, 3), (2, 0, 1),      # cycle 0-1-2
            (3, 4, 4), (4, 5, 2), (5, 6, 3),
        )
        return GraphData(n=7, edges=edges, source=3)

    def small2(self) -> GraphData:
        edges = _edges(
            (0, 1, 3), (0, 2, 1), (1, 3, 2), (2, 3, 4),
            (3, 4, 2), (3, 5, 3), (4, 6, 1),
        )
        return GraphData(n=7, edges=edges, source=1)

    def small3(self) -> GraphData:
        edges = _edges(
            (0, 1, 2), (1, 0, 3),
            (2, 3, 1), (3, 2, 2),
            (4, 5, 4), (5, 4, 3),
            (1, 3, 2), (3, 5, 1),
        )
        return GraphData(n=6, edges=edges, source=2)

    # ---- medium ----------------------------------------------------------

    def medium1(self) -> GraphData:
        edges = _edges(
            (0, 1, 2), (1, 2, 3), (2, 0, 1),      # SCC 0-1-2
            (3, 4, 2), (4, 5, 1), (5, 3, 3),      # SCC 3-4-5
            (2, 3, 4), (1, 6, 2), (5, 7, 3),
        )
        for i in range(6, 13):
            edges.append(EdgeSpec(i, i + 1, self._w(1, 3)))
        return GraphData(n=14, edges=edges, source=6)

    def medium2(self) -> GraphData:
        edges: list[EdgeSpec] = []
        # dense block with random back edges
        for i in range(12):
            for j in range(i + 1, min(i + 4, 12)):
                edges.append(EdgeSpec(i, j, self._w(1, 4)))
                if self._rng.random() < 0.3:
                    edges.append(EdgeSpec(j, i, self._w(1, 4)))
        for i in range(12, 18):
            edges.append(EdgeSpec(i - 2, i, self._w(1, 3)))
            if i < 17:
                edges.append(EdgeSpec(i, i + 1, self._w(1, 2)))
        return GraphData(n=18, edges=edges, source=12)

    def medium3(self) -> GraphData:
        edges = _edges(
            (0, 1, 3), (0, 2, 1), (1, 3, 2), (1, 4, 4),
            (2, 4, 2), (2, 5, 3), (3, 6, 1), (4, 6, 2),
            (4, 7, 3), (5, 7, 2), (6, 8, 4), (7, 8, 1),
            (8, 9, 2), (8, 10, 3), (9, 11, 1), (10, 11, 2),
        )
        return GraphData(n=12, edges=edges, source=8)

    # ---- large -----------------------------------------------------------

    def large1(self) -> GraphData:
        n = 25
        edges: list[EdgeSpec] = []
        for i in range(3):
            start = i * 3
            edges.append(EdgeSpec(start, start + 1, self._w(1, 3)))
            edges.append(EdgeSpec(start + 1, start + 2, self._w(1, 3)))
            edges.append(EdgeSpec(start + 2, start, self._w(1, 3)))
        for i in range(n - 1):
            for step in range(1, 4):
                if i + step < n and self._rng.random() < 0.4:
                    edges.append(EdgeSpec(i, i + step, self._w(1, 5)))
        return GraphData(n=n, edges=edges, source=9)

    def large2(self) -> GraphData:
        n = 35
        edges: list[EdgeSpec] = []
        for i in range(n):
            for j in range(i + 1, min(i + 8, n)):
                if self._rng.random() < 0.6:
                    edges.append(EdgeSpec(i, j, self._w(1, 6)))
        return GraphData(n=n, edges=edges, source=15)

    def large3(self) -> GraphData:
        n = 40
        edges: list[EdgeSpec] = []
        self._ring_with_chords(edges, start=0, size=5)
        self._ring_with_chords(edges, start=5, size=8)
        self._ring_with_chords(edges, start=13, size=6)
        edges += _edges((4, 5, 3), (12, 13, 2), (8, 19, 4))
        for i in range(19, n - 1):
            edges.append(EdgeSpec(i, i + 1, self._w(1, 3)))
        for i in range(0, n - 10, 5):
            edges.append(EdgeSpec(i, i + 10, self._w(1, 4)))
        return GraphData(n=n, edges=edges, source=20)

    def _ring_with_chords(self, edges: list[EdgeSpec], start: int, size: int) -> None:
        """A cycle over start..start+size-1 plus a few random internal edges."""
        for i in range(start, start + size - 1):
            edges.append(EdgeSpec(i, i + 1, self._w(1, 3)))
        edges.append(EdgeSpec(start + size - 1, start, self._w(1, 3)))
        for _ in range(size // 2):
            u = start + self._rng.randrange(size)
            v = start + self._rng.randrange(size)
            if u != v:
                edges.append(EdgeSpec(u, v, self._w(1, 2)))

    # ---- batch -----------------------------------------------------------

    def generate(self) -> dict[str, GraphData]:
        """All nine datasets, keyed by name, in catalogue order."""
        return {info.name: getattr(self, info.name)() for info in STANDARD_DATASETS}

    def generate_all(self, data_dir: str | Path = "data") -> list[Path]:
        """Write every dataset plus the Markdown report into *data_dir*."""
        out_dir = Path(data_dir)
        datasets = self.generate()
        paths = [
            save_graph_data(data, out_dir / f"{name}.json")
            for name, data in datasets.items()
        ]
        (out_dir / REPORT_NAME).write_text(
            format_dataset_report(datasets), encoding="utf-8"
        )
        log.info("Generated %d datasets in %s", len(paths), out_dir)
        return paths


def is_cyclic(data: GraphData) -> bool:
    return detect_cycle(build_graph(data)).has_cycle


def format_dataset_report(datasets: dict[str, GraphData]) -> str:
    """Markdown summary table plus one detail section per dataset."""
    info_by_name = {info.name: info for info in STANDARD_DATASETS}
    lines = [
        "# Graph Dataset Report",
        "",
        f"This report describes the {len(datasets)} generated datasets "
        "for testing graph algorithms.",
        "",
        "## Dataset Summary",
        "",
        "| Category | Dataset | Nodes | Edges | Source | Description |",
        "|----------|---------|-------|-------|--------|-------------|",
    ]
    kinds = {name: "Cyclic" if is_cyclic(d) else "Acyclic" for name, d in datasets.items()}
    for name, data in datasets.items():
        info = info_by_name.get(name, DatasetInfo(name, "Custom", ""))
        lines.append(
            f"| {info.category} | {name}.json | {data.n} | {data.edge_count} "
            f"| {data.source} | {info.description} ({kinds[name]}) |"
        )

    lines += ["", "## Dataset Details", ""]
    for name, data in datasets.items():
        info = info_by_name.get(name, DatasetInfo(name, "Custom", ""))
        lines += [
            f"### {name}.json",
            "",
            f"- **Category**: {info.category}",
            f"- **Nodes**: {data.n}",
            f"- **Edges**: {data.edge_count}",
            f"- **Source**: {data.source}",
            f"- **Type**: {kinds[name]}",
            f"- **Description**: {info.description}",
            "",
        ]
    return "\n".join(lines)
