"""Growing population with preferential attachment.

Every step bumps one existing element, chosen with weight
``value ** (1 / (alpha - 1))``, and with some probability adds a brand new
element of value 1. The value distribution of the population ends up
heavy-tailed.
"""

from __future__ import annotations

import math
from typing import List, Optional

import numpy as np


def _check_alpha(alpha: float) -> None:
    if alpha <= 1:
        raise ValueError("alpha must be greater than 1")


def preferential_attachment_step(
    values: List[int],
    alpha: float,
    rng: np.random.Generator,
    new_element_probability: float = 0.1,
) -> List[int]:
    """Grow ``values`` in place by one step and return it."""
    _check_alpha(alpha)

    if values:
        weights = np.power(np.asarray(values, dtype=float), 1.0 / (alpha - 1))
        r = rng.random() * weights.sum()
        index = int(np.searchsorted(np.cumsum(weights), r, side="left"))
        values[min(index, len(values) - 1)] += 1

    if rng.random() < new_element_probability:
        values.append(1)

    return values


def generate_power_law(
    alpha: float,
    x_min: float = 1,
    steps: int = 1000,
    new_element_probability: float = 0.1,
    rng: Optional[np.random.Generator] = None,
) -> List[int]:
    """Run ``steps`` growth steps from ``floor(x_min)`` elements of value 1.

    Returns:
        Every element's final value.
    """
    _check_alpha(alpha)
    if steps < 0:
        raise ValueError("steps must be non-negative")
    if not 0.0 <= new_element_probability <= 1.0:
        raise ValueError("new_element_probability must be between 0.0 and 1.0")
    rng = rng if rng is not None else np.random.default_rng()

    values = [1] * max(0, math.floor(x_min))
    for _ in range(steps):
        preferential_attachment_step(values, alpha, rng, new_element_probability)
    return values
