"""Terminal reports for simulated distributions."""

from __future__ import annotations

import csv
import io
from typing import Sequence, Union

import numpy as np
from rich.console import Console
from rich.table import Table

from ..math.gini import Gini
from ..math.histogram import (
    bar,
    csv_rows,
    frequency,
    log_log_table,
    percentage,
    sorted_by_count,
    sorted_by_value,
)
from ..math.statistics import SummaryStats

Samples = Union[Sequence[int], np.ndarray]


def _line(console: Console, text: str = "") -> None:
    console.print(text, markup=False, highlight=False)


def print_iteration_histogram(console: Console, samples: Samples, label: str) -> None:
    """Mean plus one row per iteration count.

    Bars are scaled so that 1/50th of the sample is one block.
    """
    n = len(samples)
    freq = frequency(samples)
    mean = float(np.mean(samples)) if n else 0.0
    unit = max(1.0, n / 50)

    _line(console)
    _line(console, f"{label}: {mean:.6f}")
    _line(console, "Histogram:")
    for value, count in sorted_by_value(freq):
        _line(
            console,
            f"{value}: {count} ({percentage(count, n):.3f}%) {bar(count, unit, 1)}",
        )


def print_scaled_histogram(
    console: Console,
    samples: Samples,
    title: str,
    max_bars: int = 50,
    bar_width: int = 60,
) -> None:
    """Histogram with bars scaled to the most frequent value."""
    n = len(samples)
    freq = frequency(samples)
    rows = sorted_by_value(freq)
    max_freq = max(freq.values()) if freq else 0

    _line(console)
    _line(console, f"=== {title} Histogram ===")
    for value, count in rows[:max_bars]:
        _line(
            console,
            f"{value:>3}: {bar(count, max_freq, bar_width)} {count} "
            f"({percentage(count, n):.1f}%)",
        )

    if len(rows) > max_bars:
        _line(console, f"... (showing first {max_bars} of {len(rows)} unique values)")


def print_top_frequencies(
    console: Console, samples: Samples, label: str, max_show: int = 20
) -> None:
    n = len(samples)
    rows = sorted_by_count(frequency(samples))

    _line(console)
    _line(console, f"{label} - Top {max_show} frequencies:")
    for value, count in rows[:max_show]:
        _line(console, f"  {value}: {count} ({percentage(count, n):.1f}%)")


def print_summary(console: Console, samples: Samples, label: str) -> SummaryStats:
    """Statistics and percentile tables; returns the computed stats."""
    stats = SummaryStats.from_values(samples)

    table = Table(title=label, show_header=True, header_style="bold cyan")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    table.add_row("Total samples", f"{stats.count:,}")
    table.add_row("Average", f"{stats.mean:.3f}")
    table.add_row("Median", f"{stats.median:g}")
    table.add_row("Minimum", f"{stats.minimum:g}")
    table.add_row("Maximum", f"{stats.maximum:g}")
    table.add_row("Range", f"{stats.range:g}")
    table.add_row("Standard deviation", f"{stats.std:.3f}")
    console.print(table)

    pct_table = Table(title="Percentiles", show_header=True, header_style="bold cyan")
    pct_table.add_column("Percentile")
    pct_table.add_column("Value", justify="right")
    for p, value in stats.percentiles.items():
        name = f"{p * 100:g}th"
        if p == 0.5:
            name += " (median)"
        pct_table.add_row(name, f"{value:g}")
    console.print(pct_table)

    return stats


def print_log_log(console: Console, samples: Samples, title: str, limit: int = 20) -> None:
    """First ``limit`` rows of the frequency table in log10 space."""
    _line(console)
    _line(console, f"=== {title} Log-Log Analysis ===")
    _line(console, "Value\tCount\tlog(Value)\tlog(Count)")
    for point in log_log_table(samples)[:limit]:
        _line(
            console,
            f"{point.value}\t{point.count}\t{point.log_value:.3f}\t\t{point.log_count:.3f}",
        )


def format_csv(samples: Samples) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(["value", "frequency", "percentage"])
    writer.writerows(csv_rows(samples))
    return output.getvalue()


def print_csv(console: Console, samples: Samples, name: str) -> None:
    _line(console)
    _line(console, f"=== {name} CSV Data ===")
    _line(console, format_csv(samples).rstrip("\n"))


def print_urn_report(console: Console, counts: Samples) -> None:
    """Rank table, count-of-counts histogram and inequality statistics."""
    counts = np.asarray(counts)
    total = int(counts.sum())
    max_count = int(counts.max())

    _line(console)
    _line(console, "=== SORTED HISTOGRAM ===")
    _line(console, "Sorted by frequency (highest to lowest):")
    # stable sort keeps lower indices first among ties
    order = np.argsort(-counts, kind="stable")
    for rank, index in enumerate(order, start=1):
        count = int(counts[index])
        _line(
            console,
            f"Rank {rank}: Index {index} = {count:,} "
            f"({percentage(count, total):.1f}%) {bar(count, max_count, 40)}",
        )

    _line(console)
    _line(console, "=== FREQUENCY HISTOGRAM ===")
    _line(console, "How many indices got each number of iterations:")
    freq = frequency(counts)
    max_frequency = max(freq.values())
    for value, how_many in sorted_by_value(freq):
        _line(
            console,
            f"{value:,} iterations: {how_many} indices {bar(how_many, max_frequency, 20, '▓')}",
        )

    gini = Gini.gini_coefficient(counts, bias_correction=False)
    _line(console)
    _line(console, "=== STATISTICS ===")
    _line(console, f"Maximum: {max_count} iterations")
    _line(console, f"Minimum: {int(counts.min())} iterations")
    _line(console, f"Average: {counts.mean():.1f} iterations")
    _line(console, f"Range: {max_count - int(counts.min())}")
    _line(
        console,
        f"Gini Coefficient: {gini:.3f} (0 = perfect equality, 1 = maximum inequality)",
    )
