from pathlib import Path

import pandas as pd
import pytest

from boxplot_stats.core.errors import MissingColumnError
from boxplot_stats.core.schemas import OutlierFormat
from boxplot_stats.processing import calculate_boxplot_stats, calculate_boxplot_stats_for_groups
from boxplot_stats.processing.tables import STATS_COLUMNS, outlier_format_of
from boxplot_stats.services.export import (
    boxplot_stats_tsv_text,
    read_boxplot_stats_tsv,
    write_boxplot_stats_tsv,
)


def test_write_boxplot_stats_tsv(
    tmp_path: Path, grouped_values: list[float], grouped_ids: list[str]
) -> None:
    frame = calculate_boxplot_stats_for_groups(grouped_values, grouped_ids)

    path = write_boxplot_stats_tsv(frame, tmp_path / "stats.tsv")

    written = pd.read_csv(path, sep="\t", dtype={"outliers": str})
    assert list(written.columns) == [*STATS_COLUMNS, "id"]
    assert len(written) == 2
    assert written["outliers"].tolist() == ["22|23", "30|31"]
    assert written["id"].tolist() == ["b1", "b2"]
    assert frame["outliers"].tolist() == [[22, 23], [30, 31]]


def test_read_boxplot_stats_tsv_round_trip(
    tmp_path: Path, grouped_values: list[float], grouped_ids: list[str]
) -> None:
    frame = calculate_boxplot_stats_for_groups(grouped_values, grouped_ids)
    path = write_boxplot_stats_tsv(frame, tmp_path / "stats.tsv", delimiter=";")

    restored = read_boxplot_stats_tsv(path, delimiter=";")

    assert restored["outliers"].tolist() == [[22, 23], [30, 31]]
    assert restored["median"].tolist() == frame["median"].tolist()
    assert restored["id"].tolist() == ["b1", "b2"]
    assert outlier_format_of(restored)[0] is OutlierFormat.values


def test_read_boxplot_stats_tsv_keeps_encoded_strings(tmp_path: Path) -> None:
    frame = calculate_boxplot_stats_for_groups(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 100, 5, 5, 5],
        ["a"] * 11 + ["b"] * 3,
    )
    path = write_boxplot_stats_tsv(frame, tmp_path / "stats.tsv")

    restored = read_boxplot_stats_tsv(path, decode_outliers=False)

    assert restored["outliers"].tolist() == ["100", ""]
    assert outlier_format_of(restored) == (OutlierFormat.delimited, "|")


def test_write_boxplot_stats_tsv_accepts_encoded_table(
    tmp_path: Path, single_sample: list[float]
) -> None:
    frame = calculate_boxplot_stats(single_sample, return_as_table=True, outliers_as_strings=True)

    path = write_boxplot_stats_tsv(frame, tmp_path / "single.tsv")

    restored = read_boxplot_stats_tsv(path)
    assert list(restored.columns) == STATS_COLUMNS
    assert restored["outliers"].tolist() == [[100]]


def test_write_boxplot_stats_tsv_requires_outliers_column(tmp_path: Path) -> None:
    frame = pd.DataFrame({"median": [1.0]})

    with pytest.raises(MissingColumnError, match="outliers"):
        write_boxplot_stats_tsv(frame, tmp_path / "bad.tsv")


def test_read_boxplot_stats_tsv_requires_outliers_column(tmp_path: Path) -> None:
    path = tmp_path / "bad.tsv"
    path.write_text("median\tq1\n1.0\t0.5\n")

    with pytest.raises(MissingColumnError):
        read_boxplot_stats_tsv(path)


def test_boxplot_stats_tsv_text(grouped_values: list[float], grouped_ids: list[str]) -> None:
    frame = calculate_boxplot_stats_for_groups(grouped_values, grouped_ids)

    lines = boxplot_stats_tsv_text(frame).splitlines()

    assert lines[0].split("\t") == [*STATS_COLUMNS, "id"]
    assert [line.split("\t")[8] for line in lines[1:]] == ["22|23", "30|31"]
