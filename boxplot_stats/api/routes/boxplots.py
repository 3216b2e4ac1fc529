"""Boxplot API routes for summary statistics, TSV export, and rendered plots."""

import pandas as pd
from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse

from boxplot_stats.core.logging import bind_context, get_logger
from boxplot_stats.core.schemas import (
    BoxplotPlotRequest,
    BoxplotStatsList,
    BoxplotStatsPublic,
    BoxplotStatsRequest,
)
from boxplot_stats.processing import calculate_boxplot_stats, calculate_boxplot_stats_for_groups
from boxplot_stats.services.export import boxplot_stats_tsv_text
from boxplot_stats.services.plotting import boxplot_html_text, plot_boxplot_stats

router = APIRouter(prefix="/boxplots", tags=["boxplots"])
logger = get_logger(__name__)

TSV_MEDIA_TYPE = "text/tab-separated-values"


def _summary_frame(payload: BoxplotStatsRequest) -> pd.DataFrame:
    """Compute the summary table for a request, grouped when ids are supplied."""
    bind_context(sample_size=len(payload.values), grouped=payload.ids is not None)
    if payload.ids is None:
        frame = calculate_boxplot_stats(
            payload.values,
            return_as_table=True,
            outliers_as_strings=payload.outliers_as_strings,
            delimiter=payload.delimiter,
        )
    else:
        frame = calculate_boxplot_stats_for_groups(
            payload.values,
            payload.ids,
            outliers_as_strings=payload.outliers_as_strings,
            delimiter=payload.delimiter,
        )
    logger.info("boxplot.stats.computed", row_count=len(frame))
    return frame


@router.post("/stats", response_model=BoxplotStatsList)
def compute_boxplot_stats(payload: BoxplotStatsRequest) -> BoxplotStatsList:
    """Return one summary record per group, or one for the whole sample."""
    frame = _summary_frame(payload)
    return BoxplotStatsList(
        stats=[BoxplotStatsPublic(**row) for row in frame.to_dict(orient="records")]
    )


@router.post("/stats.tsv")
def export_boxplot_stats(payload: BoxplotStatsRequest) -> Response:
    """Return the summary table as tab-separated text."""
    frame = _summary_frame(payload)
    body = boxplot_stats_tsv_text(frame, delimiter=payload.delimiter)
    return Response(content=body, media_type=TSV_MEDIA_TYPE)


@router.post("/plot", response_class=HTMLResponse)
def render_boxplot(payload: BoxplotPlotRequest) -> HTMLResponse:
    """Return a standalone HTML page with the rendered boxplot."""
    frame = _summary_frame(payload)
    fig = plot_boxplot_stats(frame, xlab=payload.xlab, ylab=payload.ylab, sort=payload.sort)
    return HTMLResponse(content=boxplot_html_text(fig, interactive=payload.interactive))
