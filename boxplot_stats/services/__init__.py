"""Adapters that persist and render boxplot summary tables."""

from .export import boxplot_stats_tsv_text, read_boxplot_stats_tsv, write_boxplot_stats_tsv
from .plotting import boxplot_html_text, plot_boxplot_stats, save_boxplot_html

__all__ = [
    "boxplot_html_text",
    "boxplot_stats_tsv_text",
    "plot_boxplot_stats",
    "read_boxplot_stats_tsv",
    "save_boxplot_html",
    "write_boxplot_stats_tsv",
]
