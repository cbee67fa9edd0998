"""Attach command — preferential attachment over a fixed set of slots."""

from pathlib import Path
from typing import Optional

import numpy as np
import typer

from . import app
from ._common import (
    CONFIG_OPTION,
    QUIET_OPTION,
    SEED_OPTION,
    VERBOSE_OPTION,
    console,
    fail,
    resolve_config,
)
from ..formatters.distributions import print_urn_report
from ..simulation import make_rng, run_attachment


def _show(label: str, counts: np.ndarray) -> None:
    console.print(f"{label}: {counts.tolist()}", highlight=False, markup=False)


@app.command()
def attach(
    size: int = typer.Option(10, "--size", "-s", min=1, help="Number of slots"),
    iterations: int = typer.Option(1000, "--iterations", "-n", min=0, help="Number of picks"),
    initial_weight: int = typer.Option(
        0,
        "--initial-weight",
        "-w",
        min=0,
        help="Starting count of every slot (0 = pick uniformly until one slot leads)",
    ),
    progress_every: Optional[int] = typer.Option(
        None,
        "--progress-every",
        min=1,
        help="Print counts every N picks [default: 100, or 200 with an initial weight]",
    ),
    seed: Optional[int] = SEED_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Pick slots with probability proportional to their counts.

    [bold cyan]Examples:[/bold cyan]

      distlab attach --size 10 --iterations 1000

      distlab attach --initial-weight 1 --seed 42
    """
    settings = resolve_config(config, verbose=verbose, quiet=quiet, seed=seed)
    if progress_every is None:
        progress_every = 100 if initial_weight == 0 else 200

    initial = np.full(size, initial_weight, dtype=np.int64)
    _show("Initial state" if initial_weight == 0 else "Initial state (with base weights)", initial)

    try:
        counts = run_attachment(
            size=size,
            iterations=iterations,
            initial_weight=initial_weight,
            rng=make_rng(settings.simulation.seed),
            progress_every=progress_every,
            on_progress=lambda done, c: _show(f"After {done} iterations", c),
        )
    except ValueError as e:
        fail(e)

    console.print()
    _show("Final result", counts)
    total = int(counts.sum())
    console.print(f"Total iterations: {total}", highlight=False)
    if total:
        shares = [f"{c / total * 100:.1f}%" for c in counts.tolist()]
        console.print(f"Distribution: {shares}", highlight=False, markup=False)

    print_urn_report(console, counts)
