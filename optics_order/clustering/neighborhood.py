"""Epsilon-neighborhood search and core-distance evaluation.

Both functions scan the whole dataset on every call; there is no spatial
index.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from optics_order.clustering.distance import DistanceFunction
from optics_order.data.schema import Point


def region_query(
    dataset: Sequence[Point],
    point_id: int,
    epsilon: float,
    distance: DistanceFunction,
) -> List[int]:
    """Return ids of all *other* points strictly closer than *epsilon*.

    Ids come back in ascending order.  A point at exactly *epsilon* is not a
    neighbor.
    """
    point = dataset[point_id]
    neighbors: List[int] = []
    for other_id, other in enumerate(dataset):
        if other_id != point_id and distance(point, other) < epsilon:
            neighbors.append(other_id)
    return neighbors


def core_distance(
    dataset: Sequence[Point],
    point_id: int,
    epsilon: float,
    min_pts: int,
    distance: DistanceFunction,
    neighbors: Optional[Sequence[int]] = None,
) -> Optional[float]:
    """Density radius of *point_id*, or ``None`` if it is not a core point.

    A core point has at least *min_pts* neighbors (inclusive).  The result is
    the smallest distance to any neighbor, seeded with *epsilon* as the upper
    bound.

    Args:
        dataset: Points indexed by id.
        point_id: Point to evaluate.
        epsilon: Neighborhood radius.
        min_pts: Minimum neighbor count for a core point.
        distance: Point-pair metric.
        neighbors: Precomputed ``region_query`` result.  Computed when *None*.
    """
    if neighbors is None:
        neighbors = region_query(dataset, point_id, epsilon, distance)

    if len(neighbors) < min_pts:
        return None

    point = dataset[point_id]
    min_distance = epsilon
    for other_id in neighbors:
        d = distance(point, dataset[other_id])
        if d < min_distance:
            min_distance = d
    return min_distance
