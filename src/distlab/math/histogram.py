"""Frequency tables and text bars shared by every report."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable


def frequency(values: Iterable[int]) -> Counter:
    """Count occurrences of each value."""
    return Counter(int(v) for v in values)


def sorted_by_value(freq: Counter) -> list[tuple[int, int]]:
    """(value, count) pairs in ascending value order."""
    return sorted(freq.items(), key=lambda item: item[0])


def sorted_by_count(freq: Counter) -> list[tuple[int, int]]:
    """(value, count) pairs, most frequent first; ties keep first-seen order."""
    return sorted(freq.items(), key=lambda item: item[1], reverse=True)


def bar(count: int, max_count: float, width: int, char: str = "█") -> str:
    """A bar of ``floor(count / max_count * width)`` chars, never empty."""
    length = math.floor(count / max_count * width) if max_count > 0 else 0
    return char * max(1, length)


def percentage(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return count / total * 100


@dataclass(frozen=True)
class LogLogPoint:
    value: int
    count: int
    log_value: float
    log_count: float


def log_log_table(values: Iterable[int]) -> list[LogLogPoint]:
    """Frequency table in log10 space, for eyeballing a power-law slope.

    Non-positive values have no logarithm and are left out.
    """
    freq = frequency(values)
    return [
        LogLogPoint(value, count, math.log10(value), math.log10(count))
        for value, count in sorted_by_value(freq)
        if value > 0 and count > 0
    ]


def csv_rows(values: Iterable[int]) -> list[tuple[int, int, str]]:
    """(value, frequency, percentage) rows sorted by value."""
    values = list(values)
    freq = frequency(values)
    total = len(values)
    return [
        (value, count, f"{percentage(count, total):.3f}")
        for value, count in sorted_by_value(freq)
    ]
