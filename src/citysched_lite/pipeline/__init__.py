"""Dataset handling, pipeline orchestration, export and reporting."""

from citysched_lite.pipeline.dataset import (
    DatasetError,
    EdgeSpec,
    GraphData,
    build_graph,
    load_graph_data,
    save_graph_data,
)
from citysched_lite.pipeline.export import export_results, export_summary
from citysched_lite.pipeline.generator import DatasetGenerator, STANDARD_DATASETS
from citysched_lite.pipeline.processor import (
    ProcessingResult,
    StageTimings,
    discover_datasets,
    process_all,
    process_dataset,
    process_graph_data,
)
from citysched_lite.pipeline.report import format_nanos, format_report, format_summary

__all__ = [
    "STANDARD_DATASETS",
    "DatasetError",
    "DatasetGenerator",
    "EdgeSpec",
    "GraphData",
    "ProcessingResult",
    "StageTimings",
    "build_graph",
    "discover_datasets",
    "export_results",
    "export_summary",
    "format_nanos",
    "format_report",
    "format_summary",
    "load_graph_data",
    "process_all",
    "process_dataset",
    "process_graph_data",
    "save_graph_data",
]
