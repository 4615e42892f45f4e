"""Shared fixtures for pipeline tests."""
from __future__ import annotations

import pytest

from citysched_lite.pipeline.dataset import EdgeSpec, GraphData
from citysched_lite.pipeline.generator import DatasetGenerator


@pytest.fixture
def cycle_then_chain() -> GraphData:
    """Cycle 0-1-2 plus chain 3 -> 4 -> 5 -> 6, source 3."""
    return DatasetGenerator().small1()


@pytest.fixture
def paired_cycles() -> GraphData:
    """Three 2-cycles {0,1} {2,3} {4,5} linked 1 -> 3 -> 5, source 2."""
    return DatasetGenerator().small3()


@pytest.fixture
def tiny_dag() -> GraphData:
    return GraphData(
        n=3,
        edges=[EdgeSpec(0, 1, 2), EdgeSpec(1, 2, 3)],
        source=0,
    )
