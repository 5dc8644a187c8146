"""Reachability plot: the ordered list paired with reachability distances.

Valleys in the plot are clusters; the first point of every cluster has no
reachability (it seeded the cluster rather than being reached).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

ReachabilityEntry = Tuple[int, Optional[float]]


def build_reachability_plot(
    ordered_list: Sequence[int],
    reachability: Mapping[int, float],
) -> List[ReachabilityEntry]:
    """Pair each point of *ordered_list* with its reachability (or None)."""
    return [(point_id, reachability.get(point_id)) for point_id in ordered_list]


@dataclass(frozen=True)
class ReachabilityPlot:
    """Report object wrapping a reachability plot."""

    entries: List[ReachabilityEntry] = field(default_factory=list)

    @classmethod
    def from_result(cls, result) -> "ReachabilityPlot":
        """Build from an :class:`~optics_order.clustering.OPTICSResult`."""
        return cls(entries=build_reachability_plot(result.ordered_list, result.reachability))

    def __len__(self) -> int:
        return len(self.entries)

    def point_ids(self) -> List[int]:
        return [point_id for point_id, _ in self.entries]

    def values(self, fill: float = np.nan) -> np.ndarray:
        """Reachability values in plot order; undefined entries become *fill*."""
        return np.array(
            [fill if r is None else r for _, r in self.entries], dtype=np.float64
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "point_ids": self.point_ids(),
            "reachability": [r for _, r in self.entries],
        }

    def render_text(self, width: int = 40, undefined_marker: str = "UNDEFINED") -> str:
        """Render a horizontal bar chart, one row per point.

        Bars are scaled to the largest defined reachability.
        """
        if not self.entries:
            return ""
        defined = [r for _, r in self.entries if r is not None]
        top = max(defined) if defined else 0.0
        id_width = len(str(max(self.point_ids())))

        lines = []
        for point_id, r in self.entries:
            label = str(point_id).rjust(id_width)
            if r is None:
                lines.append(f"{label} | {undefined_marker}")
                continue
            n = int(math.ceil(width * r / top)) if top > 0 else 0
            lines.append(f"{label} | {'#' * n} {r:.4g}")
        return "\n".join(lines)
