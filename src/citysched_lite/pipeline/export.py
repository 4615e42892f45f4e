"""Write processing results to CSV and JSON files.

Per dataset:
    <results_dir>/csv/<name>_results.csv
    <results_dir>/json/<name>_results.json

Per batch:
    <results_dir>/summary.csv
    <results_dir>/summary.json

The CSV is sectioned for humans (a title row, then one block per
pipeline stage) rather than one flat table; the JSON carries the same
data with stable keys for tooling.  Unreachable shortest-path distances
are left out of both, since JSON has no infinity.
"""
from __future__ import annotations

import csv
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from citysched_lite.pipeline.processor import ProcessingResult

log = logging.getLogger(__name__)

# stage key in operation_counts -> (timing attribute, label)
_STAGES = (
    ("scc", "scc_ns", "SCC"),
    (None, "condensation_ns", "Condensation Graph"),
    ("topological_sort", "topo_ns", "Topological Sort"),
    ("shortest_path", "shortest_path_ns", "Shortest Path"),
    ("critical_path", "critical_path_ns", "Critical Path"),
)


def _fmt_list(values: Sequence[int]) -> str:
    return ", ".join(str(v) for v in values)


def result_to_dict(result: ProcessingResult) -> dict[str, Any]:
    """JSON-ready view of *result*."""
    t = result.timings
    return {
        "dataset_name": result.dataset_name,
        "graph_info": {
            "nodes": result.graph_data.n,
            "edges": result.graph_data.edge_count,
            "source": result.source,
            "source_component": result.source_component,
            "weight_model": result.graph_data.weight_model,
            "is_directed": result.graph_data.directed,
        },
        "scc_analysis": {
            "components": result.sccs,
            "component_sizes": [len(c) for c in result.sccs],
            "total_components": len(result.sccs),
        },
        "topological_sort": {
            "component_order": result.component_order,
            "task_order": result.task_order,
        },
        "shortest_paths": {
            "source": result.source_component,
            "distances": {str(k): v for k, v in result.reachable.items()},
            "target": result.target,
            "optimal_path": result.optimal_path,
        },
        "critical_path": {
            "path": result.critical_path,
            "length": result.critical_path_length,
        },
        "performance_metrics": {
            "scc_time_ns": t.scc_ns,
            "condensation_time_ns": t.condensation_ns,
            "topo_time_ns": t.topo_ns,
            "shortest_path_time_ns": t.shortest_path_ns,
            "critical_path_time_ns": t.critical_path_ns,
            "total_time_ns": t.total_ns,
            "operation_counts": result.operation_counts,
        },
    }


def write_result_csv(result: ProcessingResult, path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as fh:
        w = csv.writer(fh)
        w.writerow(["SMART CITY SCHEDULING ANALYSIS RESULTS"])
        w.writerow(["Dataset", result.dataset_name])
        w.writerow(["Generated", datetime.now(timezone.utc).isoformat(timespec="seconds")])
        w.writerow([])

        w.writerow(["1. GRAPH INFORMATION"])
        w.writerow(["Nodes", result.graph_data.n])
        w.writerow(["Edges", result.graph_data.edge_count])
        w.writerow(["Source", result.source])
        w.writerow(["Source Component", result.source_component])
        w.writerow(["Weight Model", result.graph_data.weight_model])
        w.writerow(["Directed", result.graph_data.directed])
        w.writerow([])

        w.writerow(["2. STRONGLY CONNECTED COMPONENTS"])
        w.writerow(["Total Components", len(result.sccs)])
        w.writerow(["Component ID", "Size", "Nodes"])
        for i, comp in enumerate(result.sccs):
            w.writerow([i, len(comp), _fmt_list(comp)])
        w.writerow([])

        w.writerow(["3. TOPOLOGICAL ORDERING"])
        w.writerow(["Component Order", _fmt_list(result.component_order)])
        w.writerow(["Task Order", _fmt_list(result.task_order)])
        w.writerow([])

        w.writerow([f"4. SHORTEST PATHS FROM COMPONENT {result.source_component}"])
        w.writerow(["Target Component", "Distance"])
        reachable = result.reachable
        if len(reachable) > 1:
            for comp, dist in reachable.items():
                w.writerow([comp, dist])
        else:
            w.writerow(["No reachable components from source"])
        if result.optimal_path:
            w.writerow(["Optimal Path Example", _fmt_list(result.optimal_path)])
        w.writerow([])

        w.writerow(["5. CRITICAL PATH ANALYSIS"])
        w.writerow(["Critical Path", _fmt_list(result.critical_path)])
        w.writerow(["Critical Path Length", result.critical_path_length])
        w.writerow([])

        w.writerow(["6. PERFORMANCE METRICS"])
        w.writerow(["Algorithm", "Time (ns)", "Operations"])
        for stage, attr, label in _STAGES:
            ops: int | str = "-"
            if stage is not None:
                ops = sum(result.operation_counts.get(stage, {}).values())
            w.writerow([label, getattr(result.timings, attr), ops])
        w.writerow(["Total", result.timings.total_ns, "-"])


def export_results(result: ProcessingResult, results_dir: str | Path = "results") -> tuple[Path, Path]:
    """Write the CSV and JSON files for one result.  Returns both paths."""
    root = Path(results_dir)
    csv_dir = root / "csv"
    json_dir = root / "json"
    csv_dir.mkdir(parents=True, exist_ok=True)
    json_dir.mkdir(parents=True, exist_ok=True)

    csv_path = csv_dir / f"{result.dataset_name}_results.csv"
    json_path = json_dir / f"{result.dataset_name}_results.json"
    write_result_csv(result, csv_path)
    json_path.write_text(
        json.dumps(result_to_dict(result), indent=2) + "\n", encoding="utf-8"
    )
    log.info("Exported %s to %s and %s", result.dataset_name, csv_path, json_path)
    return csv_path, json_path


_SUMMARY_FIELDS = (
    "dataset", "nodes", "edges", "sccs", "critical_path_length",
    "total_time_ns", "scc_time_ns", "condensation_time_ns", "topo_time_ns",
    "shortest_path_time_ns", "critical_path_time_ns",
)


def summary_rows(results: Sequence[ProcessingResult]) -> list[dict[str, Any]]:
    rows = []
    for r in results:
        t = r.timings
        rows.append({
            "dataset": r.dataset_name,
            "nodes": r.graph_data.n,
            "edges": r.graph_data.edge_count,
            "sccs": len(r.sccs),
            "critical_path_length": r.critical_path_length,
            "total_time_ns": t.total_ns,
            "scc_time_ns": t.scc_ns,
            "condensation_time_ns": t.condensation_ns,
            "topo_time_ns": t.topo_ns,
            "shortest_path_time_ns": t.shortest_path_ns,
            "critical_path_time_ns": t.critical_path_ns,
        })
    return rows


def export_summary(
    results: Sequence[ProcessingResult], results_dir: str | Path = "results"
) -> tuple[Path, Path]:
    """Write summary.csv and summary.json for a batch.  Returns both paths."""
    root = Path(results_dir)
    root.mkdir(parents=True, exist_ok=True)
    rows = summary_rows(results)

    csv_path = root / "summary.csv"
    with csv_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=_SUMMARY_FIELDS)
        writer.writeheader()
        writer.writerows(rows)

    json_path = root / "summary.json"
    json_path.write_text(json.dumps(rows, indent=2) + "\n", encoding="utf-8")
    log.info("Summary of %d dataset(s) exported to %s", len(rows), root)
    return csv_path, json_path
