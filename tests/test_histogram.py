import math

import numpy as np
import pytest

from chartstats.stats.histogram import (
    _format_fixed,
    calculate_breaks,
    create_histogram,
    sturges_bins,
)


def test_sturges_rule():
    assert sturges_bins(1) == 1
    assert sturges_bins(8) == 4
    assert sturges_bins(10) == 5
    assert sturges_bins(100) == 8


def test_histogram_default_bins_and_labels():
    data = [1, 2, 2, 3, 3, 3, 4, 4, 5, 9]
    hist = create_histogram(data)
    assert len(hist) == 5
    assert hist[0]["bin"] == "1.0-2.6"
    assert hist[0]["bin_start"] == 1.0
    assert math.isclose(hist[0]["bin_end"], 2.6)
    assert math.isclose(hist[0]["bin_mid"], 1.8)
    # Width 1.6: 3 and 4 both land in [2.6, 4.2), 9 is clamped into the last bin
    assert [b["count"] for b in hist] == [3, 5, 1, 0, 1]


def test_maximum_falls_in_last_bin():
    hist = create_histogram([0.0, 1.0, 2.0, 3.0, 4.0], bins=4)
    assert [b["count"] for b in hist] == [1, 1, 1, 2]


@pytest.mark.parametrize("bins", [None, 1, 2, 3, 7, 50])
def test_counts_sum_to_sample_length(bins):
    rng = np.random.default_rng(5)
    data = rng.lognormal(1.0, 0.8, 213)
    hist = create_histogram(data, bins)
    assert sum(b["count"] for b in hist) == len(data)


def test_empty_and_constant_samples():
    assert create_histogram([]) == []
    hist = create_histogram([2.5, 2.5, 2.5], bins=3)
    assert [b["count"] for b in hist] == [3, 0, 0]
    assert hist[0]["bin"] == "2.5-3.5"


def test_invalid_bin_count_raises():
    with pytest.raises(ValueError):
        create_histogram([1.0, 2.0], bins=0)


def test_labels_round_half_away_from_zero():
    assert _format_fixed(0.25) == "0.3"
    assert _format_fixed(-0.25) == "-0.3"
    # 0.35 is stored just below 0.35, so it rounds down
    assert _format_fixed(0.35) == "0.3"
    assert _format_fixed(-0.0) == "0.0"
    assert _format_fixed(12.0) == "12.0"


def test_breaks_are_equal_interval():
    out = calculate_breaks([0.0, 10.0, 3.0, 7.0])
    assert out["min"] == 0.0
    assert out["max"] == 10.0
    assert out["breaks"] == [2.0, 4.0, 6.0, 8.0]


def test_breaks_for_empty_and_constant_values():
    assert calculate_breaks([]) is None
    assert calculate_breaks([4.2, 4.2]) == {"breaks": [], "min": 4.2, "max": 4.2}


def test_breaks_round_away_float_noise():
    out = calculate_breaks([0.1, 0.6])
    assert out["breaks"] == [0.2, 0.3, 0.4, 0.5]


def test_breaks_fall_back_when_rounding_collapses():
    lo, hi = 1.0, 1.0 + 2e-6
    out = calculate_breaks([lo, hi])
    assert len(out["breaks"]) == 4
    assert out["breaks"] == sorted(out["breaks"])
    assert all(lo < b < hi for b in out["breaks"])


def test_breaks_reject_too_few_classes():
    with pytest.raises(ValueError):
        calculate_breaks([1.0, 2.0], classes=1)
