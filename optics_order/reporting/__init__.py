"""Reporting helpers for OPTICS results."""

from optics_order.reporting.reachability import (
    ReachabilityEntry,
    ReachabilityPlot,
    build_reachability_plot,
)

__all__ = [
    "ReachabilityEntry",
    "ReachabilityPlot",
    "build_reachability_plot",
]
