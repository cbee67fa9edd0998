"""Gini coefficient for inequality measurement.

Applied to preferential-attachment outcomes it says how strongly the
rich-get-richer dynamic concentrated the counts.

    G = 0: perfect equality (every slot got the same count)
    G = 1: perfect inequality (one slot got everything)

Formula (for sorted values x_1 <= x_2 <= ... <= x_n):
    G = (2 * sum(i * x_i)) / (n * sum(x_i)) - (n + 1) / n
"""

from typing import List, Sequence, Union

import numpy as np


class Gini:
    """Gini coefficient calculations for inequality measurement."""

    @staticmethod
    def gini_coefficient(
        values: Union[List[float], List[int], Sequence[float], np.ndarray],
        bias_correction: bool = True,
    ) -> float:
        """Compute Gini coefficient.

        Args:
            values: Non-negative values. Must not be empty.
            bias_correction: If True, apply n/(n-1) correction for sample
                data. The simulators report the population form (False).

        Returns:
            Gini coefficient in [0, 1].

        Raises:
            ValueError: If values is empty or contains negative values.
        """
        arr = np.asarray(values, dtype=float)
        if arr.size == 0:
            raise ValueError("Cannot compute Gini for empty list")

        if np.any(arr < 0):
            raise ValueError("Gini requires non-negative values")

        if arr.size == 1:
            return 0.0

        total = float(arr.sum())
        if total == 0:
            return 0.0

        sorted_vals = np.sort(arr)
        n = sorted_vals.size

        # i is 1-indexed
        ranks = np.arange(1, n + 1, dtype=float)
        weighted_sum = float(np.dot(ranks, sorted_vals))
        gini = (2.0 * weighted_sum) / (n * total) - (n + 1.0) / n

        if bias_correction and n > 1:
            gini *= n / (n - 1)

        return max(0.0, min(1.0, gini))
