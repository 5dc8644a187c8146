"""Ordered-list and cluster bookkeeping for one OPTICS run."""

from __future__ import annotations

from typing import List, Set


class ClusterOrdering:
    """Sink fed by the expansion engine.

    Every processed point lands in exactly one cluster and in the ordered
    list, so the clusters concatenated in discovery order always equal
    ``ordered_list``.
    """

    def __init__(self) -> None:
        self.ordered_list: List[int] = []
        self.clusters: List[List[int]] = []
        self._seen: Set[int] = set()

    def open_cluster(self, point_id: int) -> int:
        """Start a new cluster seeded by *point_id*; return its index."""
        self._record(point_id)
        self.clusters.append([point_id])
        return len(self.clusters) - 1

    def append(self, point_id: int) -> None:
        """Add *point_id* to the currently open cluster."""
        if not self.clusters:
            raise RuntimeError("append() called before any cluster was opened")
        self._record(point_id)
        self.clusters[-1].append(point_id)

    def _record(self, point_id: int) -> None:
        if point_id in self._seen:
            raise RuntimeError(f"Bug: point {point_id} was output twice")
        self._seen.add(point_id)
        self.ordered_list.append(point_id)

    def __len__(self) -> int:
        return len(self.ordered_list)
