"""Plotly rendering of precomputed boxplot summary tables."""

from collections.abc import Hashable
from pathlib import Path
from typing import Any

import pandas as pd
import plotly.graph_objects as go
from plotly.colors import qualitative

from boxplot_stats.core.config import settings
from boxplot_stats.core.errors import MissingColumnError
from boxplot_stats.core.logging import get_logger
from boxplot_stats.core.schemas import OutlierFormat, SortOrder
from boxplot_stats.processing.outliers import DEFAULT_DELIMITER, unnest
from boxplot_stats.processing.tables import (
    ID_COLUMN,
    OUTLIERS_COLUMN,
    outliers_as_values,
    tag_outlier_format,
)

REQUIRED_COLUMNS = [
    "outlier_low_threshold",
    "outlier_high_threshold",
    "median",
    "q1",
    "q3",
    OUTLIERS_COLUMN,
]
SYNTHESIZED_ID_TEMPLATE = "id: {}"
PALETTE = qualitative.Plotly

logger = get_logger(__name__)


def _check_columns(frame: pd.DataFrame, extra_columns: list[str]) -> None:
    missing = [column for column in [*REQUIRED_COLUMNS, *extra_columns] if column not in frame]
    if missing:
        raise MissingColumnError(missing)


def _box_labels(frame: pd.DataFrame) -> list[str]:
    if ID_COLUMN in frame.columns:
        return [str(label) for label in frame[ID_COLUMN]]
    if len(frame) > 1:
        logger.warning(
            "boxplot.plot.ids_synthesized",
            row_count=len(frame),
            hint="Add an 'id' column to label each box explicitly.",
        )
    return [SYNTHESIZED_ID_TEMPLATE.format(position) for position in range(1, len(frame) + 1)]


def _category_order(labels: list[str], medians: list[float], sort: SortOrder | None) -> list[str]:
    if sort is None:
        return labels
    positions = sorted(
        range(len(labels)),
        key=lambda position: medians[position],
        reverse=sort is SortOrder.descending,
    )
    return [labels[position] for position in positions]


def _palette(frame: pd.DataFrame, column: str | None) -> dict[Hashable, str]:
    if column is None:
        return {}
    return {
        value: PALETTE[index % len(PALETTE)]
        for index, value in enumerate(pd.unique(frame[column]))
    }


def _colour_groups(
    frame: pd.DataFrame,
    fill_by: str | None,
    colour_by: str | None,
) -> dict[tuple[Any, Any], list[int]]:
    groups: dict[tuple[Any, Any], list[int]] = {}
    for position in range(len(frame)):
        key = (
            frame[fill_by].iloc[position] if fill_by else None,
            frame[colour_by].iloc[position] if colour_by else None,
        )
        groups.setdefault(key, []).append(position)
    return groups


def plot_boxplot_stats(
    frame: pd.DataFrame,
    *,
    xlab: str = "ID",
    ylab: str = "Value",
    sort: SortOrder | str | None = None,
    fill_by: str | None = None,
    colour_by: str | None = None,
    point_size: float = 6,
    point_shape: str = "circle",
    point_stroke: float = 0,
    point_colour: str = "black",
    line_width: float = 1,
    box_width: float = 0.5,
    outlier_format: OutlierFormat | None = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> go.Figure:
    """Draw one box per summary row plus its outliers as points.

    Whiskers end at the outlier thresholds. Rows without an ``id`` column get
    positional labels. ``sort`` orders the boxes by median on the axis only;
    ``frame`` itself is never modified. ``fill_by`` and ``colour_by`` name
    columns whose values select the box fill and line colours.

    The outliers column is read according to the format recorded on ``frame``;
    pass ``outlier_format`` for tables built elsewhere, e.g. a TSV loaded
    directly with pandas.
    """
    _check_columns(frame, [column for column in (fill_by, colour_by) if column])
    sort_order = SortOrder(sort) if sort is not None else None

    if outlier_format is not None:
        frame = tag_outlier_format(frame.copy(), outlier_format, delimiter)
    outliers = outliers_as_values(frame)[OUTLIERS_COLUMN]

    labels = _box_labels(frame)
    medians = [float(value) for value in frame["median"]]
    fills = _palette(frame, fill_by)
    lines = _palette(frame, colour_by)

    fig = go.Figure()
    for (fill_key, colour_key), positions in _colour_groups(frame, fill_by, colour_by).items():
        rows = frame.iloc[positions]
        names = [str(key) for key in (fill_key, colour_key) if key is not None]
        fig.add_trace(
            go.Box(
                name=" / ".join(dict.fromkeys(names)) or None,
                showlegend=bool(names),
                x=[labels[position] for position in positions],
                q1=rows["q1"].tolist(),
                median=rows["median"].tolist(),
                q3=rows["q3"].tolist(),
                lowerfence=rows["outlier_low_threshold"].tolist(),
                upperfence=rows["outlier_high_threshold"].tolist(),
                boxpoints=False,
                width=box_width,
                fillcolor=fills.get(fill_key),
                line={"width": line_width, "color": lines.get(colour_key)},
            )
        )

    points = unnest(labels, outliers.tolist())
    fig.add_trace(
        go.Scatter(
            name="outliers",
            showlegend=False,
            x=points["id"].tolist(),
            y=points["value"].tolist(),
            mode="markers",
            marker={
                "size": point_size,
                "symbol": point_shape,
                "color": point_colour,
                "line": {"width": point_stroke},
            },
        )
    )

    fig.update_layout(
        template="plotly_white",
        boxmode="overlay",
        xaxis_title=xlab,
        yaxis_title=ylab,
    )
    fig.update_xaxes(
        type="category",
        categoryorder="array",
        categoryarray=_category_order(labels, medians, sort_order),
    )

    logger.info(
        "boxplot.plot.rendered",
        box_count=len(frame),
        outlier_count=len(points),
        sort=sort_order.value if sort_order else None,
    )
    return fig


def _html_config(interactive: bool) -> dict[str, bool]:
    return {"staticPlot": not interactive, "displaylogo": False}


def boxplot_html_text(fig: go.Figure, *, interactive: bool = True) -> str:
    return fig.to_html(
        include_plotlyjs=settings.include_plotlyjs,
        full_html=True,
        config=_html_config(interactive),
    )


def save_boxplot_html(fig: go.Figure, path: str | Path, *, interactive: bool = True) -> Path:
    """Write the figure as a standalone HTML page."""
    path = Path(path)
    fig.write_html(
        path,
        include_plotlyjs=settings.include_plotlyjs,
        full_html=True,
        config=_html_config(interactive),
    )
    logger.info("boxplot.plot.saved", path=str(path), interactive=interactive)
    return path
