"""Threshold command — distribution of threshold-crossing iteration counts."""

from pathlib import Path
from typing import List, Optional

import typer

from . import app
from ._common import (
    CONFIG_OPTION,
    QUIET_OPTION,
    SEED_OPTION,
    VERBOSE_OPTION,
    console,
    resolve_config,
)
from ..formatters.distributions import print_iteration_histogram, print_summary
from ..logging_config import get_logger
from ..simulation import make_rng, mean_iterations, simulate_iterations

logger = get_logger(__name__)

DEFAULT_SAMPLE_SIZES = [100_000, 1_000_000, 10_000_000]


@app.command()
def threshold(
    samples: Optional[List[int]] = typer.Option(
        None,
        "--samples",
        "-n",
        min=1,
        help="Sample size to histogram (repeatable) [default: 100000, 1000000, 10000000]",
    ),
    average_only: Optional[List[int]] = typer.Option(
        None,
        "--average-only",
        min=1,
        help="Sample size to average without keeping samples (repeatable)",
    ),
    growth_rate: Optional[float] = typer.Option(
        None, "--growth-rate", "-g", min=0.0, help="Growth per iteration [default: 0.1]"
    ),
    initial_sample: Optional[float] = typer.Option(
        None, "--initial-sample", help="Starting sample value [default: 0.01]"
    ),
    stats: bool = typer.Option(
        False, "--stats", help="Also print summary statistics and percentiles"
    ),
    seed: Optional[int] = SEED_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Count growth steps until a growing sample beats a fresh random draw.

    [bold cyan]Examples:[/bold cyan]

      distlab threshold -n 100000 --stats

      distlab threshold -n 1000 --average-only 110000000 --seed 1
    """
    settings = resolve_config(
        config,
        verbose=verbose,
        quiet=quiet,
        growth_rate=growth_rate,
        initial_sample=initial_sample,
        seed=seed,
    )
    sim = settings.simulation
    rng = make_rng(sim.seed)

    for n in samples or DEFAULT_SAMPLE_SIZES:
        logger.info("Running %s samples...", f"{n:,}")
        results = simulate_iterations(
            n, sim.growth_rate, sim.initial_sample, rng=rng, chunk_size=sim.chunk_size
        )
        print_iteration_histogram(console, results, f"{n:,} samples")
        if stats:
            print_summary(console, results, f"{n:,} samples")

    if average_only:
        console.print()
        console.print("=== Larger Sample Averages ===")

    for n in average_only or []:
        logger.info("Running %s samples...", f"{n:,}")
        avg = mean_iterations(
            n,
            sim.growth_rate,
            sim.initial_sample,
            rng=rng,
            chunk_size=sim.chunk_size,
            on_progress=lambda done, total: logger.info("  Completed %s samples...", f"{done:,}"),
        )
        console.print(f"Average with {n:,} samples: {avg:.6f}", highlight=False)
