"""Provide order-statistic quantiles and box-plot quartile summaries.

This module supports:
- linear-interpolation quantiles on pre-sorted samples, and
- quartile summaries with Tukey fences for box and violin plots.
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence, Union

import numpy as np

OUTLIER_FENCE = 1.5


def quantile(sorted_data: Sequence[float], p: float) -> float:
    """Return the linearly interpolated ``p``-quantile of a sorted sample.

    Args:
        sorted_data (Sequence[float]): Sample values in ascending order. The
            ordering is not checked.
        p (float): Probability in ``[0, 1]``. Values at or below 0 return the
            first element and values at or above 1 return the last element.
            NaN returns NaN.

    Returns:
        float: Quantile value, interpolated between the order statistics at
        ``floor((n - 1) * p)`` and ``ceil((n - 1) * p)``. Returns ``0.0`` for
        an empty sample.

    Note:
        This matches the default ("linear", type 7) method of numpy and R.

    References:
        Hyndman, R. J. and Fan, Y. (1996), Sample quantiles in statistical
        packages, definition 7.
    """
    n = len(sorted_data)
    if n == 0:
        return 0.0
    if math.isnan(p):
        return math.nan
    if p <= 0:
        return float(sorted_data[0])
    if p >= 1:
        return float(sorted_data[n - 1])

    index = (n - 1) * p
    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower

    return float(sorted_data[lower] * (1 - weight) + sorted_data[upper] * weight)


def calculate_quartiles(data: Sequence[float]) -> Dict[str, Union[float, List[float]]]:
    """Summarize a sample as box-plot quartiles with IQR-fenced outliers.

    Args:
        data (Sequence[float]): Sample values in any order. The input is not
            modified.

    Returns:
        dict: Summary with keys ``min``, ``q1``, ``median``, ``q3``, ``max``,
        ``outliers`` (ascending list) and ``iqr``. ``min`` and ``max`` are the
        most extreme values inside ``[q1 - 1.5 * iqr, q3 + 1.5 * iqr]``; when
        every value falls outside the fences they revert to the sample
        extremes. An empty sample yields zeros and an empty outlier list.

    Note:
        Outliers are strictly outside the fences; a value equal to a fence is
        retained as a whisker end.
    """
    if len(data) == 0:
        return {
            "min": 0.0,
            "q1": 0.0,
            "median": 0.0,
            "q3": 0.0,
            "max": 0.0,
            "outliers": [],
            "iqr": 0.0,
        }

    sorted_arr = np.sort(np.asarray(data, dtype=float))

    q1 = quantile(sorted_arr, 0.25)
    median = quantile(sorted_arr, 0.5)
    q3 = quantile(sorted_arr, 0.75)
    iqr = q3 - q1

    lower_fence = q1 - OUTLIER_FENCE * iqr
    upper_fence = q3 + OUTLIER_FENCE * iqr

    is_outlier = (sorted_arr < lower_fence) | (sorted_arr > upper_fence)
    retained = sorted_arr[(sorted_arr >= lower_fence) & (sorted_arr <= upper_fence)]

    if len(retained) > 0:
        lo, hi = float(retained[0]), float(retained[-1])
    else:
        lo, hi = float(sorted_arr[0]), float(sorted_arr[-1])

    return {
        "min": lo,
        "q1": q1,
        "median": median,
        "q3": q3,
        "max": hi,
        "outliers": sorted_arr[is_outlier].tolist(),
        "iqr": iqr,
    }
