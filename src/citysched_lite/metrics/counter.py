"""Operation counters for instrumenting the graph algorithms.

Every algorithm in the pipeline bumps a named counter each time it does
a unit of work: a DFS visit, an edge traversal, a relaxation.  The
counts are reported next to wall-clock timings so you can see *why* one
dataset is slower than another, not just that it is.

Each algorithm instance owns its counter and resets it at the start of
every call.  A counter is not meant to be shared between two pipeline
runs at once: there is no locking, and interleaved increments from two
runs would just produce a meaningless total.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter


class Metrics(ABC):
    """Interface for a mapping of operation name -> count."""

    @abstractmethod
    def increment(self, operation: str, amount: int = 1) -> None:
        """Add *amount* to the counter for *operation*."""
        ...

    @abstractmethod
    def count(self, operation: str) -> int:
        """Current count for *operation* (0 if never incremented)."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Drop all counts."""
        ...

    @abstractmethod
    def snapshot(self) -> dict[str, int]:
        """Copy of all counts, sorted by operation name."""
        ...


class OperationCounter(Metrics):
    """Metrics backed by collections.Counter."""

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def increment(self, operation: str, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        self._counts[operation] += amount

    def count(self, operation: str) -> int:
        return self._counts.get(operation, 0)

    def reset(self) -> None:
        self._counts.clear()

    def snapshot(self) -> dict[str, int]:
        return {op: self._counts[op] for op in sorted(self._counts)}

    def total(self) -> int:
        """Sum over all operations."""
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"OperationCounter(operations={len(self)}, total={self.total()})"
