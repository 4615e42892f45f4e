"""Operation counting for algorithm instrumentation."""

from citysched_lite.metrics.counter import Metrics, OperationCounter

__all__ = [
    "Metrics",
    "OperationCounter",
]
