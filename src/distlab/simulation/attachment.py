"""Preferential attachment on a fixed set of slots (a Pólya urn).

Each round one slot is picked with probability proportional to its current
count and its count goes up by one, so early leaders tend to stay ahead.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..logging_config import get_logger

logger = get_logger(__name__)

AttachmentProgress = Callable[[int, np.ndarray], None]


def sample_preferential(counts: np.ndarray, rng: np.random.Generator) -> int:
    """Pick an index with probability proportional to its count.

    When every count is zero the pick is uniform. Starting an urn from all
    zeros therefore hands the whole run to whichever slot wins the first
    draw.
    """
    counts = np.asarray(counts)
    total = counts.sum()
    if total == 0:
        return int(rng.integers(counts.size))

    r = rng.random() * total
    index = int(np.searchsorted(np.cumsum(counts), r, side="left"))
    return min(index, counts.size - 1)


def sample_preferential_weighted(counts: np.ndarray, rng: np.random.Generator) -> int:
    """Same pick, walking cumulative probabilities instead of raw counts.

    Expects a positive total; seed the urn with a non-zero initial weight.
    """
    counts = np.asarray(counts, dtype=float)
    total = counts.sum()
    if total <= 0:
        raise ValueError("weighted sampling needs a positive total weight")

    r = rng.random()
    index = int(np.searchsorted(np.cumsum(counts / total), r, side="left"))
    return min(index, counts.size - 1)


def run_attachment(
    size: int = 10,
    iterations: int = 1000,
    initial_weight: int = 0,
    rng: Optional[np.random.Generator] = None,
    progress_every: int = 100,
    on_progress: Optional[AttachmentProgress] = None,
) -> np.ndarray:
    """Run the urn for ``iterations`` rounds and return the final counts.

    Args:
        size: Number of slots
        iterations: Number of picks
        initial_weight: Starting count of every slot. Zero uses
            :func:`sample_preferential`, anything else the weighted sampler.
        rng: Random generator
        progress_every: Call ``on_progress`` after this many rounds
        on_progress: ``on_progress(rounds_done, counts)``

    Returns:
        Integer array of final counts (initial weight included).
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    if initial_weight < 0:
        raise ValueError("initial_weight must be non-negative")
    if progress_every < 1:
        raise ValueError("progress_every must be at least 1")
    rng = rng if rng is not None else np.random.default_rng()

    counts = np.full(size, initial_weight, dtype=np.int64)
    sampler = sample_preferential if initial_weight == 0 else sample_preferential_weighted
    logger.debug("Initial state: %s", counts.tolist())

    for i in range(iterations):
        counts[sampler(counts, rng)] += 1
        if on_progress is not None and (i + 1) % progress_every == 0:
            on_progress(i + 1, counts)

    return counts
