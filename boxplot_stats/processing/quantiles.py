"""Quantile computation for numeric samples with missing values."""

import math
from collections.abc import Iterable
from numbers import Real
from typing import Any

import pandas as pd

from boxplot_stats.core.errors import EmptySampleError


def is_missing(value: Any) -> bool:
    """Return whether a scalar entry is missing (``None``, any NaN, ``pd.NA``)."""
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _to_float(value: Any) -> float:
    """Convert numeric values to float and reject non-numeric values."""
    if isinstance(value, bool):
        raise ValueError("bool is not numeric")
    if isinstance(value, Real):
        return float(value)
    raise ValueError(f"value is not numeric: {value!r}")


def clean_sample(sample: Iterable[Any]) -> list[float]:
    """Drop missing entries and coerce the rest to float, preserving order."""
    return [_to_float(value) for value in sample if not is_missing(value)]


def quantile_sorted(sorted_values: list[float], probability: float) -> float:
    """Return the linearly interpolated quantile of already sorted values."""
    if not sorted_values:
        raise EmptySampleError()
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be within [0, 1], got {probability}")
    if len(sorted_values) == 1:
        return sorted_values[0]
    index = (len(sorted_values) - 1) * probability
    lower = math.floor(index)
    upper = min(lower + 1, len(sorted_values) - 1)
    fraction = index - lower
    if fraction == 0:
        return sorted_values[lower]
    return sorted_values[lower] * (1.0 - fraction) + sorted_values[upper] * fraction


def quantile(sample: Iterable[Any], probability: float) -> float:
    """Compute a sample quantile, ignoring missing values.

    Uses linear interpolation between order statistics: with ``n`` values sorted
    ascending, ``h = (n - 1) * probability`` and the result interpolates between
    the values at ``floor(h)`` and ``ceil(h)``.
    """
    return quantile_sorted(sorted(clean_sample(sample)), probability)
