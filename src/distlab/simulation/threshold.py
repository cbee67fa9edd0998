"""Threshold-crossing iteration counts.

A sample starts at ``initial_sample`` and grows by ``growth_rate`` per
iteration. Before each growth step it is compared with a fresh uniform
draw; the process stops the first time the sample exceeds the draw. The
quantity of interest is how many growth steps happened before that.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..logging_config import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


def _validate(growth_rate: float, initial_sample: float) -> None:
    if initial_sample <= 0:
        raise ValueError("initial_sample must be positive")
    if growth_rate < 0:
        raise ValueError("growth_rate must be non-negative")


def generate_iterations(
    growth_rate: float,
    initial_sample: float = 0.01,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Count growth steps until the sample exceeds a fresh random threshold.

    Args:
        growth_rate: Fractional growth per step (0.1 means 10%)
        initial_sample: Starting sample value
        rng: Random generator (a fresh unseeded one if omitted)

    Returns:
        Number of growth steps taken before the sample beat a draw.
    """
    _validate(growth_rate, initial_sample)
    rng = rng if rng is not None else np.random.default_rng()

    sample = initial_sample
    iterations = 0
    while sample <= rng.random():
        sample *= 1 + growth_rate
        iterations += 1
    return iterations


def _simulate_chunk(
    n: int, growth_rate: float, initial_sample: float, rng: np.random.Generator
) -> np.ndarray:
    # Every live sample has the same value at a given step, so one draw per
    # live sample per step reproduces generate_iterations exactly.
    result = np.zeros(n, dtype=np.int64)
    active = np.arange(n)
    sample = initial_sample
    step = 0
    while active.size:
        crossed = sample > rng.random(active.size)
        result[active[crossed]] = step
        active = active[~crossed]
        sample *= 1 + growth_rate
        step += 1
    return result


def simulate_iterations(
    n: int,
    growth_rate: float,
    initial_sample: float = 0.01,
    rng: Optional[np.random.Generator] = None,
    chunk_size: int = 1_000_000,
) -> np.ndarray:
    """Draw ``n`` independent iteration counts.

    Same distribution as calling :func:`generate_iterations` ``n`` times,
    computed a chunk at a time.
    """
    _validate(growth_rate, initial_sample)
    if n < 0:
        raise ValueError("n must be non-negative")
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    rng = rng if rng is not None else np.random.default_rng()

    chunks = []
    remaining = n
    while remaining > 0:
        size = min(chunk_size, remaining)
        chunks.append(_simulate_chunk(size, growth_rate, initial_sample, rng))
        remaining -= size
    if not chunks:
        return np.zeros(0, dtype=np.int64)
    return np.concatenate(chunks)


def mean_iterations(
    n: int,
    growth_rate: float,
    initial_sample: float = 0.01,
    rng: Optional[np.random.Generator] = None,
    chunk_size: int = 10_000_000,
    on_progress: Optional[ProgressCallback] = None,
) -> float:
    """Average iteration count over ``n`` samples without keeping them.

    ``on_progress(done, n)`` is called after every chunk.
    """
    _validate(growth_rate, initial_sample)
    if n < 1:
        raise ValueError("n must be at least 1")
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    rng = rng if rng is not None else np.random.default_rng()

    total = 0
    done = 0
    while done < n:
        size = min(chunk_size, n - done)
        total += int(_simulate_chunk(size, growth_rate, initial_sample, rng).sum())
        done += size
        logger.debug("Averaged %d of %d samples", done, n)
        if on_progress is not None:
            on_progress(done, n)
    return total / n
