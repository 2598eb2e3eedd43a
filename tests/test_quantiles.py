import math

import numpy as np
import pytest

from chartstats.stats.quantiles import calculate_quartiles, quantile


def test_quartiles_one_to_ten():
    q = calculate_quartiles([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    assert math.isclose(q["q1"], 3.25)
    assert math.isclose(q["median"], 5.5)
    assert math.isclose(q["q3"], 7.75)
    assert math.isclose(q["iqr"], 4.5)
    # Fences at -3.5 and 14.5
    assert q["outliers"] == []
    assert q["min"] == 1.0
    assert q["max"] == 10.0


def test_quartiles_does_not_mutate_input():
    data = [5.0, 1.0, 3.0]
    calculate_quartiles(data)
    assert data == [5.0, 1.0, 3.0]


def test_quartiles_empty_sample_is_zeroed():
    q = calculate_quartiles([])
    assert q == {
        "min": 0.0,
        "q1": 0.0,
        "median": 0.0,
        "q3": 0.0,
        "max": 0.0,
        "outliers": [],
        "iqr": 0.0,
    }


def test_whiskers_stop_at_retained_values():
    data = [10, 11, 12, 13, 14, 15, 100, -50]
    q = calculate_quartiles(data)
    assert q["outliers"] == [-50.0, 100.0]
    assert q["min"] == 10.0
    assert q["max"] == 15.0


def test_value_on_fence_is_not_an_outlier():
    # q1 = 1, q3 = 2 -> iqr = 1, upper fence = 3.5
    data = [1, 1, 1, 2, 2, 3.5, 1, 2, 1]
    q = calculate_quartiles(data)
    upper_fence = q["q3"] + 1.5 * q["iqr"]
    assert math.isclose(upper_fence, 3.5)
    assert q["outliers"] == []
    assert q["max"] == 3.5


def test_outliers_lie_strictly_outside_fences():
    rng = np.random.default_rng(7)
    for _ in range(20):
        data = np.concatenate([rng.normal(0, 1, 60), rng.normal(0, 8, 5)])
        q = calculate_quartiles(data)
        lo = q["q1"] - 1.5 * q["iqr"]
        hi = q["q3"] + 1.5 * q["iqr"]
        assert q["iqr"] == pytest.approx(q["q3"] - q["q1"])
        assert q["iqr"] >= 0
        assert all(v < lo or v > hi for v in q["outliers"])
        assert q["outliers"] == sorted(q["outliers"])
        assert lo <= q["min"] <= q["max"] <= hi


def test_quantile_boundaries():
    s = [2.0, 4.0, 8.0]
    assert quantile(s, 0) == 2.0
    assert quantile(s, 1) == 8.0
    assert quantile(s, -0.5) == 2.0
    assert quantile(s, 1.5) == 8.0
    assert quantile([], 0.5) == 0.0


def test_quantile_nan_probability_returns_nan():
    assert math.isnan(quantile([1.0, 2.0, 3.0], float("nan")))
    # Empty sample still takes precedence
    assert quantile([], float("nan")) == 0.0


def test_quantile_matches_numpy_linear_method():
    rng = np.random.default_rng(3)
    s = np.sort(rng.uniform(-10, 10, 37))
    for p in (0.1, 0.25, 0.5, 0.66, 0.9):
        assert math.isclose(quantile(s, p), float(np.quantile(s, p)), rel_tol=1e-12, abs_tol=1e-12)
