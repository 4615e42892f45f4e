"""Tests for the operation counter."""
from __future__ import annotations

import pytest

from citysched_lite.metrics.counter import Metrics, OperationCounter


class TestOperationCounter:
    def test_starts_empty(self) -> None:
        c = OperationCounter()
        assert isinstance(c, Metrics)
        assert len(c) == 0
        assert c.total() == 0
        assert c.snapshot() == {}

    def test_unknown_operation_is_zero(self) -> None:
        assert OperationCounter().count("dfs_visit") == 0

    def test_increment(self) -> None:
        c = OperationCounter()
        c.increment("relaxation")
        c.increment("relaxation")
        c.increment("queue_push", 5)
        assert c.count("relaxation") == 2
        assert c.count("queue_push") == 5
        assert c.total() == 7

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            OperationCounter().increment("x", -1)

    def test_reset(self) -> None:
        c = OperationCounter()
        c.increment("a")
        c.reset()
        assert c.count("a") == 0
        assert c.snapshot() == {}

    def test_snapshot_is_sorted_copy(self) -> None:
        c = OperationCounter()
        c.increment("b")
        c.increment("a", 2)
        snap = c.snapshot()
        assert list(snap) == ["a", "b"]
        snap["a"] = 100
        assert c.count("a") == 2

    def test_independent_instances(self) -> None:
        a, b = OperationCounter(), OperationCounter()
        a.increment("x")
        assert b.count("x") == 0

    def test_repr(self) -> None:
        c = OperationCounter()
        c.increment("x", 3)
        assert "total=3" in repr(c)
