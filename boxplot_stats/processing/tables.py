"""Summary table assembly with an explicit outlier column format."""

from collections.abc import Iterable

import pandas as pd

from boxplot_stats.core.schemas import BoxplotStats, OutlierFormat

from .outliers import (
    DEFAULT_DELIMITER,
    delim_to_list_column,
    format_number,
    list_column_to_delim,
)
from .quantiles import is_missing

STATS_COLUMNS = [
    "min",
    "max",
    "q1",
    "q3",
    "iqr",
    "median",
    "outlier_low_threshold",
    "outlier_high_threshold",
    "outliers",
]
ID_COLUMN = "id"
OUTLIERS_COLUMN = "outliers"

OUTLIER_FORMAT_ATTR = "outlier_format"
OUTLIER_DELIMITER_ATTR = "outlier_delimiter"


def tag_outlier_format(
    frame: pd.DataFrame,
    outlier_format: OutlierFormat,
    delimiter: str = DEFAULT_DELIMITER,
) -> pd.DataFrame:
    """Record how the outliers column of ``frame`` is represented."""
    frame.attrs[OUTLIER_FORMAT_ATTR] = outlier_format.value
    frame.attrs[OUTLIER_DELIMITER_ATTR] = delimiter
    return frame


def outlier_format_of(frame: pd.DataFrame) -> tuple[OutlierFormat, str]:
    """Return the recorded outlier format and delimiter; untagged tables hold lists."""
    outlier_format = OutlierFormat(
        frame.attrs.get(OUTLIER_FORMAT_ATTR, OutlierFormat.values.value)
    )
    delimiter = frame.attrs.get(OUTLIER_DELIMITER_ATTR, DEFAULT_DELIMITER)
    return outlier_format, delimiter


def boxplot_stats_frame(
    records: Iterable[BoxplotStats],
    *,
    include_id: bool | None = None,
    outliers_as_strings: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
) -> pd.DataFrame:
    """Build a summary table with one row per record.

    ``include_id`` defaults to adding the ``id`` column only when a record
    carries one.
    """
    records = list(records)
    if include_id is None:
        include_id = any(record.id is not None for record in records)
    columns = [*STATS_COLUMNS, ID_COLUMN] if include_id else list(STATS_COLUMNS)

    frame = pd.DataFrame(
        [record.model_dump(include=set(columns)) for record in records],
        columns=columns,
    )
    tag_outlier_format(frame, OutlierFormat.values, delimiter)
    if outliers_as_strings:
        return outliers_as_delimited(frame, delimiter)
    return frame


def _delimited_cells(column: Iterable[object]) -> list[str]:
    """Normalize delimited cells; ``read_csv`` yields NaN for no outliers and a number for one."""
    cells: list[str] = []
    for cell in column:
        if is_missing(cell):
            cells.append("")
        elif isinstance(cell, str):
            cells.append(cell)
        else:
            cells.append(format_number(cell))
    return cells


def outliers_as_values(frame: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``frame`` whose outliers column holds numeric lists."""
    outlier_format, delimiter = outlier_format_of(frame)
    converted = frame.copy()
    if outlier_format is OutlierFormat.delimited:
        converted[OUTLIERS_COLUMN] = pd.Series(
            delim_to_list_column(_delimited_cells(frame[OUTLIERS_COLUMN]), delimiter),
            index=frame.index,
            dtype=object,
        )
    return tag_outlier_format(converted, OutlierFormat.values, delimiter)


def outliers_as_delimited(
    frame: pd.DataFrame,
    delimiter: str = DEFAULT_DELIMITER,
) -> pd.DataFrame:
    """Return a copy of ``frame`` whose outliers column holds encoded strings."""
    values = outliers_as_values(frame)
    values[OUTLIERS_COLUMN] = pd.Series(
        list_column_to_delim(values[OUTLIERS_COLUMN], delimiter),
        index=frame.index,
        dtype=object,
    )
    return tag_outlier_format(values, OutlierFormat.delimited, delimiter)
