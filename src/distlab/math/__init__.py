"""Statistics primitives used by the reports."""

from .gini import Gini
from .histogram import (
    LogLogPoint,
    bar,
    csv_rows,
    frequency,
    log_log_table,
    percentage,
    sorted_by_count,
    sorted_by_value,
)
from .statistics import PERCENTILES, SummaryStats, nearest_rank

__all__ = [
    "Gini",
    "SummaryStats",
    "PERCENTILES",
    "nearest_rank",
    "frequency",
    "sorted_by_value",
    "sorted_by_count",
    "bar",
    "percentage",
    "log_log_table",
    "LogLogPoint",
    "csv_rows",
]
