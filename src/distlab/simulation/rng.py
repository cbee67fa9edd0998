"""Random source shared by the simulators."""

from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """PCG64 generator; a fixed seed makes a whole run reproducible."""
    return np.random.default_rng(seed)
