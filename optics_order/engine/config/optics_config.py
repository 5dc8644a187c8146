"""OPTICS configuration dataclasses.

``OPTICSConfig`` is the immutable per-run value the engine consumes.
``OPTICSRunConfig`` wraps it together with reporting options so a whole
run can be described in one YAML file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Union

import yaml

if TYPE_CHECKING:
    from optics_order.clustering.distance import DistanceFunction

FRONTIER_MODES = ("live", "snapshot")


# =============================================================================
# Algorithm Config
# =============================================================================

@dataclass(frozen=True)
class OPTICSConfig:
    """OPTICS hyperparameters.

    epsilon: neighborhood radius; a point at exactly epsilon is not a
        neighbor.  ``0`` is valid and makes every neighborhood empty.
    min_pts: minimum neighbor count (inclusive) for a core point.
    metric: registered metric name (see ``clustering.distance``) or a
        callable ``(p, q) -> float``.
    frontier_mode: how the expansion reads the seed queue.
        ``"live"`` re-reads the ordered frontier before every consumption;
        ``"snapshot"`` iterates a snapshot of the queue and replaces it
        with a fresh one whenever a core point is found.
    """
    epsilon: float = 1.0
    min_pts: int = 1
    metric: Union[str, DistanceFunction] = "euclidean"
    frontier_mode: str = "live"

    def replace(self, **overrides: Any) -> "OPTICSConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


# =============================================================================
# Reporting Config
# =============================================================================

@dataclass
class ReportConfig:
    """Text rendering of the reachability plot."""
    bar_width: int = 40
    undefined_marker: str = "UNDEFINED"


# =============================================================================
# Main Config
# =============================================================================

@dataclass
class OPTICSRunConfig:
    """Top-level configuration for scripted runs."""
    optics: OPTICSConfig = field(default_factory=OPTICSConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    verbose: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)


# =============================================================================
# YAML Loading / Saving
# =============================================================================

def _build_from_dict(cls, raw: Dict[str, Any]):
    """Recursively construct dataclass from a dict."""
    if not isinstance(raw, dict):
        return cls()
    kwargs = {}
    for f in fields(cls):
        if f.name not in raw:
            continue
        val = raw[f.name]
        ft = f.type
        # Resolve string annotations
        if isinstance(ft, str):
            ft = globals().get(ft, ft)
        if hasattr(ft, "__dataclass_fields__") and isinstance(val, dict):
            kwargs[f.name] = _build_from_dict(ft, val)
        else:
            kwargs[f.name] = val
    return cls(**kwargs)


def load_optics_config(path: Union[str, Path]) -> OPTICSRunConfig:
    """Load OPTICSRunConfig from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _build_from_dict(OPTICSRunConfig, data)


def save_optics_config(config: OPTICSRunConfig, path: Union[str, Path]) -> None:
    """Save OPTICSRunConfig to a YAML file.

    Only named metrics can be saved; a callable metric has no YAML form.
    """
    if not isinstance(config.optics.metric, str):
        raise ValueError("Cannot save a config whose metric is a callable")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, sort_keys=False)
