"""Shared fixtures and synthetic datasets for optics_order tests."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pytest

from optics_order.engine.config.optics_config import OPTICSConfig
from optics_order.engine.pipeline.optics_pipeline import OPTICS


# ---------------------------------------------------------------------------
# Synthetic data factories
# ---------------------------------------------------------------------------

# Ten 2-D points: three tight groups plus the outlier [89, 89] (id 8).
EXAMPLE_DATASET: List[List[float]] = [
    [1, 1], [0, 1], [1, 0],
    [10, 10], [13, 13], [10, 13],
    [54, 54], [55, 55], [89, 89], [57, 55],
]


def make_blobs(
    centers: Sequence[Sequence[float]],
    per_blob: int = 20,
    spread: float = 0.3,
    seed: int = 0,
) -> np.ndarray:
    """Gaussian blobs stacked blob by blob, shape (len(centers) * per_blob, D)."""
    rng = np.random.default_rng(seed)
    blobs = [
        rng.normal(loc=c, scale=spread, size=(per_blob, len(c)))
        for c in centers
    ]
    return np.concatenate(blobs, axis=0)


def make_line(n: int = 50, step: float = 1.0) -> List[List[float]]:
    """Points spaced *step* apart on the x axis (a single chain)."""
    return [[i * step, 0.0] for i in range(n)]


def flatten(clusters: Sequence[Sequence[int]]) -> List[int]:
    return [p for cluster in clusters for p in cluster]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def example_dataset() -> List[List[float]]:
    return [list(p) for p in EXAMPLE_DATASET]


@pytest.fixture
def example_config() -> OPTICSConfig:
    return OPTICSConfig(epsilon=5.0, min_pts=2)


@pytest.fixture
def optics():
    """A fresh OPTICS instance with library defaults."""
    return OPTICS()
