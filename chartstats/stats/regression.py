"""Provide the least-squares line used by scatter-with-trend charts.

Degenerate inputs produce a zeroed or flat fit instead of raising.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Union

import numpy as np


def _empty_fit() -> Dict[str, Union[float, List[float]]]:
    return {
        "slope": 0.0,
        "intercept": 0.0,
        "r_squared": 0.0,
        "residuals": [],
        "fitted": [],
    }


def linear_regression(
    x: Sequence[float], y: Sequence[float]
) -> Dict[str, Union[float, List[float]]]:
    """Fit an ordinary least-squares straight line to paired observations.

    Args:
        x (Sequence[float]): Independent variable values.
        y (Sequence[float]): Dependent variable values, paired with ``x`` by
            position.

    Returns:
        dict: Fit with keys ``slope``, ``intercept``, ``r_squared``,
        ``fitted`` (``slope * x + intercept`` per point) and ``residuals``
        (``y - fitted`` per point).

    Note:
        Empty or mismatched-length inputs return a zeroed fit with empty
        lists; shape validation is left to the caller. A constant ``x`` gives
        ``slope = 0`` (horizontal line through the mean of ``y``), and a
        constant ``y`` gives ``r_squared = 0``. Non-finite values are not
        filtered and propagate into every output.

    References:
        Ordinary least squares linear regression.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    n = int(len(x_arr))
    if n == 0 or n != len(y_arr):
        return _empty_fit()

    xbar = float(np.mean(x_arr))
    ybar = float(np.mean(y_arr))

    sxy = float(np.sum((x_arr - xbar) * (y_arr - ybar)))
    sxx = float(np.sum((x_arr - xbar) ** 2))

    slope = sxy / sxx if sxx != 0 else 0.0
    intercept = ybar - slope * xbar

    fitted = slope * x_arr + intercept
    resid = y_arr - fitted

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - ybar) ** 2))
    r2 = 1.0 - sse / sst if sst != 0 else 0.0

    return {
        "slope": float(slope),
        "intercept": float(intercept),
        "r_squared": float(r2),
        "residuals": resid.tolist(),
        "fitted": fitted.tolist(),
    }
