"""Report generation for processing results.

Formats ProcessingResult data into human-readable text for terminal
output.  Nothing here prints; the CLI decides where the text goes.
"""
from __future__ import annotations

from typing import Sequence

from citysched_lite.pipeline.processor import ProcessingResult


def format_nanos(nanos: int) -> str:
    """Render a duration with a unit that keeps the number readable."""
    if nanos < 1_000:
        return f"{nanos} ns"
    if nanos < 1_000_000:
        return f"{nanos / 1_000:.3f} µs"
    if nanos < 1_000_000_000:
        return f"{nanos / 1_000_000:.3f} ms"
    return f"{nanos / 1_000_000_000:.3f} s"


def format_report(result: ProcessingResult) -> str:
    """Format one dataset's result as a readable report string."""
    ops = result.operation_counts
    scc_ops = ops.get("scc", {})
    topo_ops = ops.get("topological_sort", {})
    t = result.timings

    lines = [
        "=" * 80,
        f"DATASET: {result.dataset_name}",
        "=" * 80,
        "",
        "1. STRONGLY CONNECTED COMPONENTS",
        "-" * 50,
        f"Found {len(result.sccs)} SCC(s):",
    ]
    for i, comp in enumerate(result.sccs):
        lines.append(f"  SCC {i}: {comp} (size: {len(comp)})")
    lines.append(
        f"Condensation graph: {result.condensation.vertex_count} components, "
        f"{result.condensation.edge_count} edges"
    )

    lines += [
        "",
        "2. TOPOLOGICAL SORTING",
        "-" * 50,
        f"Component order: {result.component_order}",
        f"Task order:      {result.task_order}",
        "",
        "3. SHORTEST PATHS AND CRITICAL PATH",
        "-" * 50,
        f"Source task {result.source} (component {result.source_component})",
    ]
    for comp, dist in result.reachable.items():
        lines.append(f"  To component {comp}: {dist}")
    if result.optimal_path:
        lines.append(f"Optimal path to component {result.target}: {result.optimal_path}")
    lines += [
        f"Critical path:        {result.critical_path}",
        f"Critical path length: {result.critical_path_length}",
        "",
        "4. PERFORMANCE METRICS",
        "-" * 50,
        f"SCC:              {format_nanos(t.scc_ns):>12}  "
        f"dfs_visit={scc_ops.get('dfs_visit', 0)} "
        f"edge_traversal={scc_ops.get('edge_traversal', 0)}",
        f"Condensation:     {format_nanos(t.condensation_ns):>12}",
        f"Topological sort: {format_nanos(t.topo_ns):>12}  "
        f"queue_ops={topo_ops.get('queue_push', 0) + topo_ops.get('queue_pop', 0)}",
        f"Shortest path:    {format_nanos(t.shortest_path_ns):>12}  "
        f"relaxation={ops.get('shortest_path', {}).get('relaxation', 0)}",
        f"Critical path:    {format_nanos(t.critical_path_ns):>12}  "
        f"relaxation={ops.get('critical_path', {}).get('relaxation', 0)}",
        f"Total:            {format_nanos(t.total_ns):>12}",
    ]
    return "\n".join(lines)


def format_summary(results: Sequence[ProcessingResult]) -> str:
    """Format a one-row-per-dataset summary table."""
    lines = [
        f"{'Dataset':<12} {'Nodes':>6} {'Edges':>6} {'SCCs':>6} "
        f"{'Crit Path Len':>14} {'Total Time':>14}",
        "-" * 63,
    ]
    total = 0
    for r in results:
        lines.append(
            f"{r.dataset_name:<12} {r.graph_data.n:>6} {r.graph_data.edge_count:>6} "
            f"{len(r.sccs):>6} {r.critical_path_length:>14} "
            f"{format_nanos(r.timings.total_ns):>14}"
        )
        total += r.timings.total_ns
    lines.append("-" * 63)
    lines.append(f"Total processing time for {len(results)} dataset(s): {format_nanos(total)}")
    return "\n".join(lines)
