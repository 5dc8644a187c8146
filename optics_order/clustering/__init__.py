"""OPTICS clustering core.

Exhaustive neighborhood search, core-distance evaluation and the
priority-queue-driven frontier expansion that produces the cluster
ordering.
"""

from optics_order.clustering.distance import (
    DISTANCE_FUNCTIONS,
    DistanceFunction,
    chebyshev_distance,
    euclidean_distance,
    manhattan_distance,
    resolve_distance,
)
from optics_order.clustering.neighborhood import (
    core_distance,
    region_query,
)
from optics_order.clustering.seed_queue import (
    QueueFactory,
    SeedQueue,
    SortedSeedQueue,
)
from optics_order.clustering.ordering import ClusterOrdering
from optics_order.clustering.expansion import (
    OPTICSResult,
    RunState,
    expand_cluster,
    run_optics,
    update_queue,
)

__all__ = [
    # Distance
    "DISTANCE_FUNCTIONS",
    "DistanceFunction",
    "chebyshev_distance",
    "euclidean_distance",
    "manhattan_distance",
    "resolve_distance",
    # Neighborhood
    "core_distance",
    "region_query",
    # Seed queue
    "QueueFactory",
    "SeedQueue",
    "SortedSeedQueue",
    # Expansion
    "ClusterOrdering",
    "OPTICSResult",
    "RunState",
    "expand_cluster",
    "run_optics",
    "update_queue",
]
