"""Summary statistics for simulated samples.

Percentiles use the nearest-rank index ``sorted[floor(n * p)]`` rather than
interpolation, so every reported percentile is a value that actually
occurred in the sample.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

from ..exceptions import InsufficientDataError

PERCENTILES = (0.25, 0.50, 0.75, 0.90, 0.95, 0.99)


def nearest_rank(sorted_values: np.ndarray, p: float) -> float:
    """Value at index floor(n * p) of an ascending array."""
    n = sorted_values.size
    index = min(n - 1, math.floor(n * p))
    return sorted_values[index].item()


@dataclass(frozen=True)
class SummaryStats:
    """Descriptive statistics of one sample."""

    count: int
    mean: float
    minimum: float
    maximum: float
    median: float
    std: float
    percentiles: dict[float, float] = field(default_factory=dict)

    @property
    def range(self) -> float:
        return self.maximum - self.minimum

    @classmethod
    def from_values(
        cls,
        values: Union[Sequence[float], np.ndarray],
        percentiles: Sequence[float] = PERCENTILES,
    ) -> "SummaryStats":
        """Compute statistics; the standard deviation is the population one.

        Raises:
            InsufficientDataError: If values is empty
        """
        arr = np.sort(np.asarray(values))
        if arr.size == 0:
            raise InsufficientDataError("cannot summarise an empty sample", minimum_required=1)

        return cls(
            count=int(arr.size),
            mean=float(arr.mean()),
            minimum=arr[0].item(),
            maximum=arr[-1].item(),
            median=nearest_rank(arr, 0.5),
            std=float(arr.std()),
            percentiles={p: nearest_rank(arr, p) for p in percentiles},
        )
