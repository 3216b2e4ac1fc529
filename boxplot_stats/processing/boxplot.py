"""Boxplot summary statistics for single samples and labelled groups."""

from collections.abc import Iterable, Sequence
from typing import Any

import pandas as pd

from boxplot_stats.core.errors import EmptySampleError, MismatchedLengthError
from boxplot_stats.core.schemas import BoxplotStats

from .outliers import DEFAULT_DELIMITER
from .quantiles import clean_sample, is_missing, quantile_sorted
from .tables import boxplot_stats_frame

OUTLIER_FENCE_FACTOR = 1.5


def _summarize(values: list[float], label: str | None) -> BoxplotStats:
    """Compute the summary record for already cleaned values."""
    if not values:
        if label is None:
            raise EmptySampleError()
        raise EmptySampleError(f"Group {label!r} has no non-missing values.")

    ordered = sorted(values)
    q1 = quantile_sorted(ordered, 0.25)
    q3 = quantile_sorted(ordered, 0.75)
    iqr = q3 - q1
    low = q1 - OUTLIER_FENCE_FACTOR * iqr
    high = q3 + OUTLIER_FENCE_FACTOR * iqr

    return BoxplotStats(
        min=ordered[0],
        max=ordered[-1],
        q1=q1,
        q3=q3,
        iqr=iqr,
        median=quantile_sorted(ordered, 0.5),
        outlier_low_threshold=low,
        outlier_high_threshold=high,
        outliers=[value for value in values if value < low or value > high],
        id=label,
    )


def calculate_boxplot_stats(
    sample: Iterable[Any],
    id: str | None = None,
    *,
    return_as_table: bool = False,
    outliers_as_strings: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
) -> BoxplotStats | pd.DataFrame:
    """Calculate boxplot summary statistics for one numeric sample.

    Missing values (``None`` and NaN) are ignored by every statistic. Outliers
    are the values strictly below ``q1 - 1.5 * iqr`` or strictly above
    ``q3 + 1.5 * iqr``, in sample order.

    Returns a ``BoxplotStats`` record, or a one-row summary table when
    ``return_as_table`` is set. The table only has an ``id`` column when ``id``
    is given, and ``outliers_as_strings`` stores its outliers as a delimited
    string instead of a list.

    Raises ``EmptySampleError`` when no non-missing value remains.
    """
    record = _summarize(clean_sample(sample), id)
    if not return_as_table:
        return record
    return boxplot_stats_frame(
        [record],
        include_id=id is not None,
        outliers_as_strings=outliers_as_strings,
        delimiter=delimiter,
    )


def partition_by_label(
    values: Sequence[Any],
    ids: Sequence[Any],
) -> dict[str, list[Any]]:
    """Split parallel values/labels into per-label lists ordered by label.

    Labels are compared as strings. Observations with a missing label are
    dropped.
    """
    values = list(values)
    ids = list(ids)
    if len(values) != len(ids):
        raise MismatchedLengthError.for_sequences("values", len(values), "ids", len(ids))

    groups: dict[str, list[Any]] = {}
    for value, label in zip(values, ids):
        if is_missing(label):
            continue
        groups.setdefault(str(label), []).append(value)
    return {label: groups[label] for label in sorted(groups)}


def calculate_group_stats(values: Sequence[Any], ids: Sequence[Any]) -> list[BoxplotStats]:
    """Calculate one summary record per distinct label, ordered by label."""
    return [
        _summarize(clean_sample(group_values), label)
        for label, group_values in partition_by_label(values, ids).items()
    ]


def calculate_boxplot_stats_for_groups(
    values: Sequence[Any],
    ids: Sequence[Any],
    *,
    outliers_as_strings: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
) -> pd.DataFrame:
    """Calculate a summary table with one row per group and an ``id`` column."""
    return boxplot_stats_frame(
        calculate_group_stats(values, ids),
        include_id=True,
        outliers_as_strings=outliers_as_strings,
        delimiter=delimiter,
    )
