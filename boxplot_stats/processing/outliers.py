"""Conversions between per-record outlier lists, delimited strings, and long tables."""

from collections.abc import Iterable, Sequence
from typing import Any

import pandas as pd

from boxplot_stats.core.errors import MismatchedLengthError

DEFAULT_DELIMITER = "|"
INTEGRAL_TEXT_LIMIT = 1e16
UNNEST_COLUMNS = ["id", "value"]


def _check_delimiter(delimiter: str) -> None:
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")


def format_number(value: float) -> str:
    """Render a number as canonical text; integral values below 1e16 drop the fraction."""
    number = float(value)
    if number.is_integer() and abs(number) < INTEGRAL_TEXT_LIMIT:
        return f"{number:.0f}"
    return repr(number)


def encode_outliers(values: Iterable[float], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join outlier values into one delimited field; no outliers gives ``""``."""
    _check_delimiter(delimiter)
    return delimiter.join(format_number(value) for value in values)


def decode_outliers(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[float]:
    """Parse a delimited outlier field back into numbers.

    A field without any delimiter holds a single value, and an empty field holds
    none. Non-numeric tokens raise ``ValueError``.
    """
    _check_delimiter(delimiter)
    if text.strip() == "":
        return []
    if delimiter not in text:
        return [float(text)]
    return [float(token) for token in text.split(delimiter)]


def list_column_to_delim(
    column: Iterable[Iterable[float]],
    delimiter: str = DEFAULT_DELIMITER,
) -> list[str]:
    """Encode every outlier list of a column."""
    return [encode_outliers(values, delimiter) for values in column]


def delim_to_list_column(
    column: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> list[list[float]]:
    """Decode every delimited outlier field of a column."""
    return [decode_outliers(text, delimiter) for text in column]


def unnest(ids: Sequence[Any], nested_lists: Sequence[Iterable[float]]) -> pd.DataFrame:
    """Expand per-id value lists into one ``(id, value)`` row per element."""
    ids = list(ids)
    nested_lists = list(nested_lists)
    if len(ids) != len(nested_lists):
        raise MismatchedLengthError.for_sequences(
            "ids", len(ids), "nested_lists", len(nested_lists)
        )

    rows = [
        (label, float(value))
        for label, values in zip(ids, nested_lists)
        for value in values
    ]
    return pd.DataFrame(rows, columns=UNNEST_COLUMNS).astype({"value": float})
