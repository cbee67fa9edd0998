"""Power-law command — threshold-crossing samples vs. preferential growth."""

from pathlib import Path
from typing import Optional

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
from ..exceptions import DistlabError
from ..formatters.distributions import (
    print_csv,
    print_log_log,
    print_scaled_histogram,
    print_top_frequencies,
)
from ..math.statistics import SummaryStats
from ..simulation import generate_iterations, generate_power_law, make_rng, simulate_iterations


def _print_stats(samples, label: str) -> None:
    stats = SummaryStats.from_values(samples)
    console.print()
    console.print(f"{label}:", highlight=False, markup=False)
    console.print(f"  Average: {stats.mean:.3f}", highlight=False)
    console.print(f"  Min: {stats.minimum:g}, Max: {stats.maximum:g}", highlight=False)
    console.print(f"  Range: {stats.range:g}", highlight=False)


@app.command(name="power-law")
def power_law(
    alpha: Optional[float] = typer.Option(
        None, "--alpha", "-a", help="Power-law exponent, > 1 [default: 2.5]"
    ),
    x_min: float = typer.Option(1.0, "--x-min", min=0.0, help="Initial population size"),
    steps: int = typer.Option(1000, "--steps", min=0, help="Growth steps"),
    new_element_probability: Optional[float] = typer.Option(
        None,
        "--new-element-probability",
        "-p",
        min=0.0,
        max=1.0,
        help="Chance a step adds a new element [default: 0.1]",
    ),
    samples: int = typer.Option(
        1000, "--samples", "-n", min=1, help="Threshold-crossing samples to compare against"
    ),
    demo_runs: int = typer.Option(10, "--demo-runs", min=0, help="Single runs to print first"),
    max_bars: int = typer.Option(50, "--max-bars", min=1, help="Histogram rows to show"),
    max_show: int = typer.Option(20, "--max-show", min=1, help="Top frequencies to show"),
    csv_output: bool = typer.Option(False, "--csv", help="Append CSV frequency data"),
    seed: Optional[int] = SEED_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Compare threshold-crossing counts with a preferential-growth population.

    [bold cyan]Examples:[/bold cyan]

      distlab power-law

      distlab power-law --alpha 2.1 --steps 5000 --csv --seed 3
    """
    settings = resolve_config(
        config,
        verbose=verbose,
        quiet=quiet,
        alpha=alpha,
        new_element_probability=new_element_probability,
        seed=seed,
    )
    sim = settings.simulation
    rng = make_rng(sim.seed)

    growth_label = f"{sim.growth_rate:g} growth"
    alpha_label = f"alpha={sim.alpha:g}"

    console.print("=== Testing generate_iterations ===")
    console.print(f"Sample runs with {sim.growth_rate * 100:g}% growth rate:", highlight=False)
    for i in range(demo_runs):
        its = generate_iterations(sim.growth_rate, sim.initial_sample, rng=rng)
        console.print(f"Run {i + 1}: {its} iterations", highlight=False)

    console.print()
    console.print("=== Testing generate_power_law ===")
    console.print(f"Single simulation with {alpha_label}:", highlight=False)
    population = generate_power_law(
        sim.alpha,
        x_min=x_min,
        steps=steps,
        new_element_probability=sim.new_element_probability,
        rng=rng,
    )
    console.print(f"Generated {len(population)} elements", highlight=False)
    if not population:
        fail(DistlabError("The power-law population is empty; raise --x-min or --steps"))
    console.print(f"Sample values: {', '.join(map(str, population[:10]))}...", highlight=False)
    console.print(f"Value range: {min(population)} to {max(population)}", highlight=False)

    iteration_samples = simulate_iterations(
        samples, sim.growth_rate, sim.initial_sample, rng=rng, chunk_size=sim.chunk_size
    )

    console.print()
    console.print("=== Comparing Distributions ===")
    _print_stats(iteration_samples, f"generate_iterations ({growth_label})")
    _print_stats(population, f"generate_power_law ({alpha_label})")

    print_top_frequencies(console, iteration_samples, "generate_iterations", max_show)
    print_top_frequencies(console, population, "generate_power_law", max_show)

    print_scaled_histogram(
        console, iteration_samples, "generate_iterations Distribution", max_bars=max_bars
    )
    print_scaled_histogram(
        console, population, "generate_power_law Distribution", max_bars=max_bars
    )

    print_log_log(console, iteration_samples, "generate_iterations")
    print_log_log(console, population, "generate_power_law")

    if csv_output:
        console.print()
        console.print("=" * 60)
        console.print("CSV DATA FOR EXTERNAL PLOTTING")
        console.print("=" * 60)
        print_csv(console, iteration_samples, "generate_iterations")
        print_csv(console, population, "generate_power_law")
