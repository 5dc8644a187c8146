#!/usr/bin/env python3
"""OPTICS example runner.

Clusters the bundled ten-point example dataset and prints the clusters and
the reachability plot.

Usage:
    # Defaults from the example (epsilon=5, min_pts=2)
    python scripts/run_optics.py

    # Override parameters
    python scripts/run_optics.py --epsilon 3 --min-pts 1 --metric manhattan

    # Load parameters from YAML
    python scripts/run_optics.py --config configs/default.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from optics_order.clustering.distance import DISTANCE_FUNCTIONS
from optics_order.engine.config.optics_config import (
    FRONTIER_MODES,
    OPTICSConfig,
    OPTICSRunConfig,
    load_optics_config,
)
from optics_order.engine.pipeline.optics_pipeline import OPTICS

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

EXAMPLE_DATASET = [
    [1, 1], [0, 1], [1, 0],
    [10, 10], [13, 13], [10, 13],
    [54, 54], [55, 55], [89, 89], [57, 55],
]


def main():
    parser = argparse.ArgumentParser(description="Run OPTICS on the example dataset")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML run config (command-line values override it)"
    )
    parser.add_argument("--epsilon", type=float, default=None, help="Neighborhood radius")
    parser.add_argument("--min-pts", type=int, default=None, help="Minimum neighbors for a core point")
    parser.add_argument(
        "--metric",
        choices=sorted(DISTANCE_FUNCTIONS),
        default=None,
        help="Distance metric"
    )
    parser.add_argument(
        "--frontier-mode",
        choices=FRONTIER_MODES,
        default=None,
        help="Seed queue read semantics during expansion"
    )
    parser.add_argument("--verbose", action="store_true", help="Log each cluster")

    args = parser.parse_args()

    if args.config is not None:
        run_config = load_optics_config(args.config)
    else:
        run_config = OPTICSRunConfig(optics=OPTICSConfig(epsilon=5.0, min_pts=2))

    if args.verbose or run_config.verbose:
        logging.getLogger("optics_order").setLevel(logging.DEBUG)

    optics_config = run_config.optics.replace(
        epsilon=args.epsilon,
        min_pts=args.min_pts,
        metric=args.metric,
        frontier_mode=args.frontier_mode,
    )

    optics = OPTICS(config=optics_config)
    clusters = optics.run(EXAMPLE_DATASET)

    for i, cluster in enumerate(clusters):
        logger.info("Cluster %d: %s", i, cluster)

    print()
    print("Reachability plot")
    print("=" * 60)
    print(optics.reachability_report().render_text(
        width=run_config.report.bar_width,
        undefined_marker=run_config.report.undefined_marker,
    ))


if __name__ == "__main__":
    main()
