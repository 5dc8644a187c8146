"""OPTICS pipeline module."""

from optics_order.engine.pipeline.optics_pipeline import OPTICS

__all__ = [
    "OPTICS",
]
