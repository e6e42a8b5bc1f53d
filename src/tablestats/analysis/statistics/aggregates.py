"""Aggregate calculator for numeric columns.

NaN and infinities are not filtered: they flow through sum, mean and
variance by ordinary floating-point arithmetic.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from tablestats.analysis.statistics.models import PERCENTILE_RANKS, AggregateStats


def calculate_percentile(sorted_values: Sequence[float] | np.ndarray, percentile: float) -> float:
    """Percentile of already-sorted values by linear interpolation.

    index = percentile / 100 * (n - 1); a whole index returns that element,
    otherwise the two neighbours are blended by the fractional part.

    Args:
        sorted_values: Values in ascending order
        percentile: Rank between 0 and 100

    Returns:
        The interpolated value, or 0.0 for an empty input
    """
    n = len(sorted_values)
    if n == 0:
        return 0.0

    index = percentile / 100.0 * (n - 1)
    if index == int(index):
        return float(sorted_values[int(index)])

    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower
    return float(sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight)


def calculate_aggregates(values: Sequence[float]) -> AggregateStats:
    """Compute count, sum, mean, population variance, stddev and percentiles.

    The input is not reordered; percentiles are taken from a sorted copy.

    Args:
        values: Numeric values of one column

    Returns:
        AggregateStats; all zero with no percentiles for an empty input
    """
    if len(values) == 0:
        return AggregateStats()

    data = np.asarray(values, dtype=np.float64)
    sorted_values = np.sort(data)

    count = len(data)
    with np.errstate(invalid="ignore", over="ignore"):
        total = float(data.sum())
        mean = total / count
        variance = float(((data - mean) ** 2).sum()) / count
        percentiles = {p: calculate_percentile(sorted_values, p) for p in PERCENTILE_RANKS}
    std_dev = math.sqrt(variance) if variance >= 0 else math.nan

    return AggregateStats(
        count=count,
        sum=total,
        mean=mean,
        median=percentiles[50],
        std_dev=std_dev,
        variance=variance,
        percentiles=percentiles,
    )
