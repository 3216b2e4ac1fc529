"""Processing helpers for quantiles, boxplot statistics, and outlier encoding."""

from .boxplot import (
    calculate_boxplot_stats,
    calculate_boxplot_stats_for_groups,
    calculate_group_stats,
)
from .outliers import (
    decode_outliers,
    delim_to_list_column,
    encode_outliers,
    list_column_to_delim,
    unnest,
)
from .quantiles import quantile
from .tables import boxplot_stats_frame, outliers_as_delimited, outliers_as_values

__all__ = [
    "boxplot_stats_frame",
    "calculate_boxplot_stats",
    "calculate_boxplot_stats_for_groups",
    "calculate_group_stats",
    "decode_outliers",
    "delim_to_list_column",
    "encode_outliers",
    "list_column_to_delim",
    "outliers_as_delimited",
    "outliers_as_values",
    "quantile",
    "unnest",
]
