"""Dataset descriptors and their JSON file format.

A dataset file looks like:

    {
      "directed": true,
      "n": 7,
      "edges": [{"u": 0, "v": 1, "w": 2}, ...],
      "source": 3,
      "weight_model": "edge"
    }

"source" and "weight_model" are optional.  "source" is a vertex id in
the original graph; the processor maps it onto its SCC before running
shortest paths.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from citysched_lite.graph.adjacency import Graph, GraphError


class DatasetError(GraphError, ValueError):
    """Raised when a dataset file is malformed."""


@dataclass(frozen=True, slots=True)
class EdgeSpec:
    """One edge as written in a dataset file."""
    u: int
    v: int
    w: int


@dataclass(slots=True)
class GraphData:
    """Everything a dataset file describes."""
    n: int
    edges: list[EdgeSpec] = field(default_factory=list)
    directed: bool = True
    source: int = 0
    weight_model: str = "edge"

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "directed": self.directed,
            "n": self.n,
            "edges": [{"u": e.u, "v": e.v, "w": e.w} for e in self.edges],
            "source": self.source,
            "weight_model": self.weight_model,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> GraphData:
        """Parse the decoded JSON object of a dataset file.

        Raises DatasetError on missing keys or values of the wrong type.
        Endpoint ranges are not checked here; build_graph does that.
        """
        if not isinstance(raw, dict):
            raise DatasetError(f"Dataset must be a JSON object, got {type(raw).__name__}")
        try:
            n = raw["n"]
            raw_edges = raw["edges"]
        except KeyError as exc:
            raise DatasetError(f"Dataset is missing required key {exc.args[0]!r}") from None

        if not _is_int(n) or n < 0:
            raise DatasetError(f"'n' must be a non-negative integer, got {n!r}")
        if not isinstance(raw_edges, list):
            raise DatasetError("'edges' must be a list")

        edges = []
        for i, item in enumerate(raw_edges):
            if not isinstance(item, dict):
                raise DatasetError(f"Edge #{i} must be an object, got {item!r}")
            values = [item.get(k) for k in ("u", "v", "w")]
            if not all(_is_int(x) for x in values):
                raise DatasetError(f"Edge #{i} needs integer u, v, w: {item!r}")
            edges.append(EdgeSpec(*values))

        source = raw.get("source")
        if source is None:
            source = 0
        if not _is_int(source):
            raise DatasetError(f"'source' must be an integer, got {source!r}")

        directed = raw.get("directed", True)
        if not isinstance(directed, bool):
            raise DatasetError(f"'directed' must be a boolean, got {directed!r}")

        return cls(
            n=n,
            edges=edges,
            directed=directed,
            source=source,
            weight_model=str(raw.get("weight_model") or "edge"),
        )


def _is_int(value: Any) -> bool:
    # bool is an int subclass; true/false in a dataset is always a mistake
    return isinstance(value, int) and not isinstance(value, bool)


def build_graph(data: GraphData) -> Graph:
    """Graph for *data*.  Raises OutOfRangeError on a bad endpoint."""
    return Graph.from_edges(
        data.n, ((e.u, e.v, e.w) for e in data.edges), directed=data.directed
    )


def load_graph_data(path: str | Path) -> GraphData:
    """Read a dataset file.  Raises DatasetError on bad encoding or invalid JSON."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DatasetError(f"{path}: not UTF-8 ({exc.reason} at byte {exc.start})") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{path}: invalid JSON ({exc.msg})") from exc
    return GraphData.from_dict(raw)


def save_graph_data(data: GraphData, path: str | Path) -> Path:
    """Write *data* as indented JSON, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(data.to_dict(), indent=2) + "\n", encoding="utf-8")
    return out
