"""OPTICS frontier expansion.

The traversal visits every point in dataset order.  An unprocessed point
opens a new cluster; if it is a core point, its neighbors are relaxed into
a fresh seed queue and the queue is drained in ascending reachability,
relaxing again from every core point found along the way.

Relaxation mirrors edge relaxation in a shortest-path frontier: a
neighbor's reachability is ``max(core_distance(p), distance(p, n))`` and
can only be lowered while the neighbor waits in the queue.  Once a point is
output, its reachability is frozen.

The expansion is an explicit loop, never recursion, so a single large
connected component cannot exhaust the call stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from optics_order.clustering.distance import DistanceFunction, resolve_distance
from optics_order.clustering.neighborhood import core_distance, region_query
from optics_order.clustering.ordering import ClusterOrdering
from optics_order.clustering.seed_queue import QueueFactory, SeedQueue, SortedSeedQueue
from optics_order.data.schema import Point
from optics_order.engine.config.optics_config import FRONTIER_MODES, OPTICSConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OPTICSResult:
    """Output of one complete OPTICS run.

    Attributes:
        clusters: Greedy traversal-time partition, in discovery order.
        ordered_list: Visitation order over all points.
        reachability: pointId -> reachability-distance.  Points that seeded a
            cluster (never reached by relaxation) are absent.
        core_distances: pointId -> core-distance, ``None`` for non-core points.
        config: The configuration the run used.
    """
    clusters: List[List[int]]
    ordered_list: List[int]
    reachability: Dict[int, float]
    core_distances: Dict[int, Optional[float]]
    config: OPTICSConfig

    @property
    def num_points(self) -> int:
        return len(self.ordered_list)

    @property
    def num_clusters(self) -> int:
        return len(self.clusters)

    def reachability_of(self, point_id: int) -> Optional[float]:
        return self.reachability.get(point_id)


@dataclass
class RunState:
    """Mutable state owned by exactly one run."""

    dataset: Sequence[Point]
    epsilon: float
    min_pts: int
    distance: DistanceFunction
    processed: Set[int] = field(default_factory=set)
    reachability: Dict[int, float] = field(default_factory=dict)
    core_distances: Dict[int, Optional[float]] = field(default_factory=dict)
    ordering: ClusterOrdering = field(default_factory=ClusterOrdering)

    def neighbors_of(self, point_id: int) -> List[int]:
        return region_query(self.dataset, point_id, self.epsilon, self.distance)

    def core_distance_of(self, point_id: int, neighbors: Sequence[int]) -> Optional[float]:
        cd = core_distance(
            self.dataset, point_id, self.epsilon, self.min_pts, self.distance, neighbors
        )
        self.core_distances[point_id] = cd
        return cd


def update_queue(
    state: RunState,
    point_id: int,
    neighbors: Sequence[int],
    queue: SeedQueue,
) -> None:
    """Relax every unprocessed neighbor of core point *point_id* into *queue*."""
    cd = state.core_distance_of(point_id, neighbors)
    if cd is None:
        return

    point = state.dataset[point_id]
    for other_id in neighbors:
        if other_id in state.processed:
            continue
        candidate = max(cd, state.distance(point, state.dataset[other_id]))
        current = state.reachability.get(other_id)
        if current is None:
            state.reachability[other_id] = candidate
            queue.insert(other_id, candidate)
        elif candidate < current:
            state.reachability[other_id] = candidate
            queue.remove(other_id)
            queue.insert(other_id, candidate)


def _process(state: RunState, point_id: int, queue: SeedQueue) -> bool:
    """Output *point_id* into the open cluster; relax from it if it is core.

    Returns True when the point was a core point (the frontier may have grown).
    """
    neighbors = state.neighbors_of(point_id)
    state.processed.add(point_id)
    state.ordering.append(point_id)

    if state.core_distance_of(point_id, neighbors) is None:
        return False
    update_queue(state, point_id, neighbors, queue)
    return True


def _expand_live(state: RunState, queue: SeedQueue) -> None:
    # Re-read the ordered frontier before each step so growth from the last
    # relaxation is visible immediately.
    while len(queue):
        next_id = queue.get_elements()[0]
        queue.remove(next_id)
        if next_id in state.processed:
            continue
        _process(state, next_id, queue)


def _expand_snapshot(state: RunState, queue: SeedQueue) -> None:
    # Iterate a snapshot of the queue; a core point takes a fresh snapshot.
    # Every entry left in the old snapshot is still queued, so it reappears
    # in the new one and the old snapshot can be dropped.
    elements: List[int] = queue.get_elements()
    cursor = 0
    while cursor < len(elements):
        point_id = elements[cursor]
        cursor += 1
        if point_id in state.processed:
            continue
        if _process(state, point_id, queue):
            elements, cursor = queue.get_elements(), 0


def expand_cluster(state: RunState, queue: SeedQueue, frontier_mode: str = "live") -> None:
    """Drain *queue* into the currently open cluster.

    Each queue entry is consumed at most once: entries whose point was
    already output are skipped even if their priority changed since insert.
    """
    if frontier_mode == "live":
        _expand_live(state, queue)
    elif frontier_mode == "snapshot":
        _expand_snapshot(state, queue)
    else:
        raise ValueError(
            f"frontier_mode must be one of {FRONTIER_MODES}, got {frontier_mode!r}"
        )


def run_optics(
    dataset: Sequence[Point],
    config: OPTICSConfig,
    queue_factory: QueueFactory = SortedSeedQueue,
) -> OPTICSResult:
    """Compute the OPTICS ordering of *dataset* under *config*.

    Pure with respect to its arguments: all mutable state lives in a fresh
    :class:`RunState`, so independent calls may run concurrently.

    Args:
        dataset: Points indexed by position.
        config: Immutable run configuration.
        queue_factory: Builds an empty :class:`SeedQueue` per cluster.

    Returns:
        :class:`OPTICSResult` with clusters, ordering and distances.
    """
    if config.frontier_mode not in FRONTIER_MODES:
        raise ValueError(
            f"frontier_mode must be one of {FRONTIER_MODES}, got {config.frontier_mode!r}"
        )

    state = RunState(
        dataset=dataset,
        epsilon=config.epsilon,
        min_pts=config.min_pts,
        distance=resolve_distance(config.metric),
    )

    for point_id in range(len(dataset)):
        if point_id in state.processed:
            continue

        state.processed.add(point_id)
        cluster_id = state.ordering.open_cluster(point_id)
        neighbors = state.neighbors_of(point_id)

        if state.core_distance_of(point_id, neighbors) is None:
            continue

        queue = queue_factory()
        update_queue(state, point_id, neighbors, queue)
        expand_cluster(state, queue, config.frontier_mode)
        logger.debug(
            "Cluster %d seeded by point %d: %d points",
            cluster_id, point_id, len(state.ordering.clusters[cluster_id]),
        )

    return OPTICSResult(
        clusters=state.ordering.clusters,
        ordered_list=state.ordering.ordered_list,
        reachability=state.reachability,
        core_distances=state.core_distances,
        config=config,
    )
