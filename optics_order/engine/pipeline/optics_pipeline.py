"""Stateful OPTICS facade.

``OPTICS`` remembers its configuration between runs: an argument omitted
from :meth:`OPTICS.run` reuses the value from the previous call instead of
resetting to a default.  Per-run state (processed set, reachability map,
ordered list, clusters) is rebuilt from scratch on every run by
:func:`~optics_order.clustering.expansion.run_optics`.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional, Sequence, Union

from optics_order.clustering.distance import DistanceFunction
from optics_order.clustering.expansion import OPTICSResult, run_optics
from optics_order.clustering.seed_queue import QueueFactory, SortedSeedQueue
from optics_order.data.schema import Dataset, InvalidInput, validate_dataset
from optics_order.engine.config.optics_config import OPTICSConfig
from optics_order.reporting.reachability import ReachabilityEntry, ReachabilityPlot

logger = logging.getLogger(__name__)


class OPTICS:
    """Ordering points to identify the clustering structure.

    Example::

        optics = OPTICS()
        clusters = optics.run(points, epsilon=5, min_pts=2)
        plot = optics.get_reachability_plot()
    """

    def __init__(
        self,
        dataset: Optional[Sequence[Any]] = None,
        epsilon: Optional[float] = None,
        min_pts: Optional[int] = None,
        distance_function: Optional[Union[str, DistanceFunction]] = None,
        config: Optional[OPTICSConfig] = None,
        queue_factory: QueueFactory = SortedSeedQueue,
    ):
        self.config = (config or OPTICSConfig()).replace(
            epsilon=epsilon, min_pts=min_pts, metric=distance_function
        )
        self.queue_factory = queue_factory
        self._dataset: Optional[Dataset] = None
        self._lock = threading.Lock()
        if dataset is not None:
            self._dataset = validate_dataset(dataset)
        self.reset()

    def reset(self) -> None:
        """Drop the last result; configuration and dataset are kept."""
        self._result: Optional[OPTICSResult] = None

    @property
    def dataset(self) -> Optional[Dataset]:
        return self._dataset

    @property
    def result(self) -> Optional[OPTICSResult]:
        """Full output of the last completed run."""
        return self._result

    @property
    def clusters(self) -> List[List[int]]:
        """Copy of the last run's clusters; empty before any run."""
        if self._result is None:
            return []
        return [list(c) for c in self._result.clusters]

    def run(
        self,
        dataset: Optional[Sequence[Any]] = None,
        epsilon: Optional[float] = None,
        min_pts: Optional[int] = None,
        distance_function: Optional[Union[str, DistanceFunction]] = None,
    ) -> List[List[int]]:
        """Cluster *dataset* and return the clusters in discovery order.

        Any argument left as None falls back to the value used by the
        previous call (or given to the constructor).

        Raises:
            InvalidInput: if *dataset* is not a sequence, or if no dataset
                was ever provided.
        """
        with self._lock:
            if dataset is not None:
                self._dataset = validate_dataset(dataset)
            if self._dataset is None:
                raise InvalidInput("No dataset given to run() or the constructor")

            self.config = self.config.replace(
                epsilon=epsilon, min_pts=min_pts, metric=distance_function
            )
            self.reset()

            result = run_optics(self._dataset, self.config, self.queue_factory)
            self._result = result

        logger.info(
            "OPTICS run: %d points, %d clusters (epsilon=%s, min_pts=%d)",
            result.num_points, result.num_clusters, result.config.epsilon, result.config.min_pts,
        )
        return [list(c) for c in result.clusters]

    def get_reachability_plot(self) -> List[ReachabilityEntry]:
        """``(point_id, reachability)`` pairs in visitation order.

        Empty until a run has completed.
        """
        return self.reachability_report().entries

    def reachability_report(self) -> ReachabilityPlot:
        if self._result is None:
            return ReachabilityPlot()
        return ReachabilityPlot.from_result(self._result)
