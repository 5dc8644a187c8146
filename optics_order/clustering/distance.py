"""Point-pair distance functions.

Every metric here works over the shared coordinate prefix of the two
points: when the points differ in dimension, the extra coordinates of the
longer one are ignored instead of raising.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple, Union

import numpy as np

DistanceFunction = Callable[[Sequence[float], Sequence[float]], float]


def _shared_prefix(p: Sequence[float], q: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    a = np.asarray(p, dtype=np.float64).ravel()
    b = np.asarray(q, dtype=np.float64).ravel()
    n = min(a.shape[0], b.shape[0])
    return a[:n], b[:n]


def euclidean_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """L2 distance over the first ``min(len(p), len(q))`` coordinates."""
    a, b = _shared_prefix(p, q)
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def manhattan_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """L1 distance over the shared coordinate prefix."""
    a, b = _shared_prefix(p, q)
    return float(np.abs(a - b).sum())


def chebyshev_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """L-infinity distance over the shared coordinate prefix."""
    a, b = _shared_prefix(p, q)
    if a.shape[0] == 0:
        return 0.0
    return float(np.abs(a - b).max())


DISTANCE_FUNCTIONS: Dict[str, DistanceFunction] = {
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
    "chebyshev": chebyshev_distance,
}


def resolve_distance(metric: Union[str, DistanceFunction]) -> DistanceFunction:
    """Return a distance callable for a metric name or a callable."""
    if callable(metric):
        return metric
    try:
        return DISTANCE_FUNCTIONS[metric]
    except KeyError:
        raise ValueError(
            f"Unknown metric {metric!r}; expected one of {sorted(DISTANCE_FUNCTIONS)} "
            f"or a callable"
        ) from None
