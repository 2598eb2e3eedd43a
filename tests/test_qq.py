import math

import numpy as np
import pytest

from chartstats.stats.qq import P_LOW, normal_quantile, plotting_positions, qq_plot_data


def test_median_and_symmetry():
    assert normal_quantile(0.5) == 0.0
    for p in (0.001, 0.01, P_LOW, 0.1, 0.3):
        assert math.isclose(normal_quantile(p), -normal_quantile(1 - p), rel_tol=1e-9)


def test_known_quantiles():
    assert math.isclose(normal_quantile(0.975), 1.959963984540054, rel_tol=1e-8)
    assert math.isclose(normal_quantile(0.84134474606854293), 1.0, rel_tol=1e-8)
    assert math.isclose(normal_quantile(0.01), -2.3263478740408408, rel_tol=1e-8)


def test_out_of_range_probabilities():
    assert normal_quantile(0.0) == -math.inf
    assert normal_quantile(1.0) == math.inf
    assert math.isnan(normal_quantile(float("nan")))


def test_agrees_with_scipy_across_regions():
    stats = pytest.importorskip("scipy.stats")
    ps = np.concatenate([np.geomspace(1e-8, P_LOW, 40), np.linspace(0.03, 0.97, 60)])
    ps = np.concatenate([ps, 1 - ps[:40]])
    ours = np.array([normal_quantile(float(p)) for p in ps])
    assert np.allclose(ours, stats.norm.ppf(ps), rtol=2e-9, atol=1e-9)


def test_plotting_positions():
    assert plotting_positions(4).tolist() == [0.125, 0.375, 0.625, 0.875]


def test_qq_points_sorted_and_monotone():
    rng = np.random.default_rng(9)
    data = rng.gamma(2.0, 1.5, 57)
    points = qq_plot_data(data)

    assert len(points) == len(data)
    samples = [p["sample"] for p in points]
    theoretical = [p["theoretical"] for p in points]
    assert samples == sorted(data.tolist())
    assert all(a <= b for a, b in zip(theoretical, theoretical[1:]))


def test_qq_small_sample_values():
    points = qq_plot_data([3.0, 1.0])
    assert [p["sample"] for p in points] == [1.0, 3.0]
    assert math.isclose(points[0]["theoretical"], -0.6744897501960817, rel_tol=1e-8)
    assert math.isclose(points[1]["theoretical"], 0.6744897501960817, rel_tol=1e-8)


def test_qq_empty_sample():
    assert qq_plot_data([]) == []
