"""Dataset schema for the OPTICS engine.

A dataset is an ordered sequence of points; a point is an ordered sequence
of numeric coordinates.  Points are identified only by their 0-based
position (``point_id``) in the dataset, never by value.

Accepted containers
-------------------
- ``list`` / ``tuple`` / any non-string ``collections.abc.Sequence``
- ``numpy.ndarray`` with ``ndim >= 1`` (rows are points)
"""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from typing import Any, List, Sequence

import numpy as np

Point = Sequence[float]
Dataset = List[Point]


class InvalidInput(TypeError):
    """Raised when the dataset argument is not a sequence of points."""


def validate_dataset(dataset: Any) -> Dataset:
    """Check that *dataset* is a sequence and return it as a list of points.

    Coordinates are not copied or converted; a malformed point surfaces
    later as an ordinary runtime error in the distance function.

    Raises:
        InvalidInput: if *dataset* is not a sequence (strings and bytes are
            rejected too).
    """
    if isinstance(dataset, np.ndarray):
        if dataset.ndim < 1:
            raise InvalidInput(
                f"Dataset must be a sequence of points, got 0-d {type(dataset).__name__}"
            )
        return list(dataset)
    if isinstance(dataset, (str, bytes, bytearray)) or not isinstance(dataset, SequenceABC):
        raise InvalidInput(
            f"Dataset must be a sequence of points, {type(dataset).__name__} given"
        )
    return list(dataset)
