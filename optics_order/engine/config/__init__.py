"""OPTICS configuration system.

Configuration can be loaded from YAML files or created programmatically.

Usage:
    from optics_order.engine.config import load_optics_config, OPTICSConfig

    # Load from YAML
    config = load_optics_config("configs/default.yaml")
    print(config.optics.epsilon)

    # Or build directly
    config = OPTICSConfig(epsilon=5.0, min_pts=2)
"""

from optics_order.engine.config.optics_config import (
    FRONTIER_MODES,
    OPTICSConfig,
    OPTICSRunConfig,
    ReportConfig,
    load_optics_config,
    save_optics_config,
)

__all__ = [
    "FRONTIER_MODES",
    "OPTICSConfig",
    "OPTICSRunConfig",
    "ReportConfig",
    "load_optics_config",
    "save_optics_config",
]
