from pathlib import Path

import pandas as pd

from boxplot_stats.core.errors import MissingColumnError
from boxplot_stats.core.logging import get_logger
from boxplot_stats.core.schemas import OutlierFormat
from boxplot_stats.processing.outliers import DEFAULT_DELIMITER
from boxplot_stats.processing.tables import (
    ID_COLUMN,
    OUTLIERS_COLUMN,
    outliers_as_delimited,
    outliers_as_values,
    tag_outlier_format,
)

TSV_SEPARATOR = "\t"

logger = get_logger(__name__)


def _flatten(frame: pd.DataFrame, delimiter: str) -> pd.DataFrame:
    if OUTLIERS_COLUMN not in frame.columns:
        raise MissingColumnError([OUTLIERS_COLUMN])
    return outliers_as_delimited(frame, delimiter)


def boxplot_stats_tsv_text(frame: pd.DataFrame, *, delimiter: str = DEFAULT_DELIMITER) -> str:
    return _flatten(frame, delimiter).to_csv(sep=TSV_SEPARATOR, index=False)


def write_boxplot_stats_tsv(
    frame: pd.DataFrame,
    path: str | Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Path:
    """Write a summary table as TSV with the outliers column flattened to strings."""
    path = Path(path)
    flat = _flatten(frame, delimiter)
    flat.to_csv(path, sep=TSV_SEPARATOR, index=False)
    logger.info(
        "boxplot.export.written",
        path=str(path),
        row_count=len(flat),
        delimiter=delimiter,
    )
    return path


def read_boxplot_stats_tsv(
    path: str | Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    decode_outliers: bool = True,
) -> pd.DataFrame:
    """Read a summary table written by ``write_boxplot_stats_tsv``."""
    header = pd.read_csv(path, sep=TSV_SEPARATOR, nrows=0).columns
    if OUTLIERS_COLUMN not in header:
        raise MissingColumnError([OUTLIERS_COLUMN])

    text_columns = {column: str for column in (OUTLIERS_COLUMN, ID_COLUMN) if column in header}
    frame = pd.read_csv(path, sep=TSV_SEPARATOR, dtype=text_columns)
    frame[OUTLIERS_COLUMN] = frame[OUTLIERS_COLUMN].fillna("")
    tag_outlier_format(frame, OutlierFormat.delimited, delimiter)

    logger.info("boxplot.export.read", path=str(path), row_count=len(frame))
    if decode_outliers:
        return outliers_as_values(frame)
    return frame
