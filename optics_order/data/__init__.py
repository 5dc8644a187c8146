"""Data module for optics_order.

Dataset validation and the point/dataset type aliases.
"""

from optics_order.data.schema import (
    Dataset,
    InvalidInput,
    Point,
    validate_dataset,
)

__all__ = [
    "Dataset",
    "InvalidInput",
    "Point",
    "validate_dataset",
]
