import numpy as np
import pandas as pd
import pytest

from boxplot_stats.core.errors import EmptySampleError
from boxplot_stats.processing.quantiles import clean_sample, is_missing, quantile


@pytest.mark.parametrize(
    ("probability", "expected"),
    [(0.0, 1.0), (0.25, 3.5), (0.5, 6.0), (0.75, 8.5), (1.0, 100.0)],
)
def test_quantile_interpolates_between_order_statistics(
    single_sample: list[float], probability: float, expected: float
) -> None:
    assert quantile(single_sample, probability) == pytest.approx(expected)


def test_quantile_sorts_unordered_input() -> None:
    assert quantile([4, 1, 3, 2], 0.25) == pytest.approx(1.75)
    assert quantile([4, 1, 3, 2], 0.5) == pytest.approx(2.5)


def test_quantile_ignores_missing_values() -> None:
    sample = [None, 1, float("nan"), 2, 3, None]

    assert quantile(sample, 0.5) == 2.0
    assert quantile(sample, 0.25) == 1.5


def test_quantile_single_value() -> None:
    assert quantile([7], 0.75) == 7.0


def test_quantile_empty_sample_raises() -> None:
    with pytest.raises(EmptySampleError):
        quantile([None, float("nan")], 0.5)


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_quantile_rejects_probability_out_of_range(probability: float) -> None:
    with pytest.raises(ValueError, match="probability"):
        quantile([1, 2, 3], probability)


def test_clean_sample_rejects_non_numeric_values() -> None:
    with pytest.raises(ValueError, match="bool is not numeric"):
        clean_sample([1, True])
    with pytest.raises(ValueError, match="not numeric"):
        clean_sample([1, "2"])


def test_clean_sample_keeps_order() -> None:
    assert clean_sample([3, None, 1, 2]) == [3.0, 1.0, 2.0]


def test_is_missing() -> None:
    assert is_missing(None)
    assert is_missing(float("nan"))
    assert is_missing(np.float32("nan"))
    assert is_missing(pd.NA)
    assert not is_missing(0.0)
    assert not is_missing(np.float32(0.0))
    assert not is_missing("b1")


def test_quantile_ignores_numpy_nan_in_float32_array() -> None:
    sample = np.array([5, 1, np.nan, 4, 2, 3], dtype=np.float32)

    assert clean_sample(sample) == [5.0, 1.0, 4.0, 2.0, 3.0]
    assert quantile(sample, 0.25) == 2.0
    assert quantile(sample, 0.75) == 4.0


def test_quantile_ignores_pandas_na_in_nullable_series() -> None:
    sample = pd.Series([1.0, None, 3.0, 100.0], dtype="Float64")

    assert clean_sample(sample) == [1.0, 3.0, 100.0]
    assert quantile(sample, 0.5) == 3.0
