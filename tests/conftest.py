from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from pyscope.scopeview import BoundingBox, RecordingCanvas


class StubScopeData:
    """Scope data that hands out a fixed list of lines and counts recalculations."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.recalculate_count = 0

    def recalculate(self) -> None:
        self.recalculate_count += 1

    def scope_lines(self):
        return self.lines


@pytest.fixture
def square_box() -> BoundingBox:
    return BoundingBox(0.0, 0.0, 100.0, 100.0)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def make_scope_data():
    return StubScopeData


@pytest.fixture
def alternating_full_scale() -> np.ndarray:
    samples = np.ones(1000, dtype=np.float32)
    samples[1::2] = -1.0
    return samples
