"""Boxplot summary statistics without keeping the raw data."""

from boxplot_stats.core.errors import (
    EmptySampleError,
    LengthMismatchError,
    MismatchedLengthError,
    MissingColumnError,
)
from boxplot_stats.core.schemas import BoxplotStats, OutlierFormat, SortOrder
from boxplot_stats.processing import (
    calculate_boxplot_stats,
    calculate_boxplot_stats_for_groups,
    calculate_group_stats,
    decode_outliers,
    encode_outliers,
    list_column_to_delim,
    quantile,
    unnest,
)
from boxplot_stats.services import (
    plot_boxplot_stats,
    read_boxplot_stats_tsv,
    save_boxplot_html,
    write_boxplot_stats_tsv,
)

__all__ = [
    "BoxplotStats",
    "EmptySampleError",
    "LengthMismatchError",
    "MismatchedLengthError",
    "MissingColumnError",
    "OutlierFormat",
    "SortOrder",
    "calculate_boxplot_stats",
    "calculate_boxplot_stats_for_groups",
    "calculate_group_stats",
    "decode_outliers",
    "encode_outliers",
    "list_column_to_delim",
    "plot_boxplot_stats",
    "quantile",
    "read_boxplot_stats_tsv",
    "save_boxplot_html",
    "unnest",
    "write_boxplot_stats_tsv",
]
