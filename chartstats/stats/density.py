"""Gaussian kernel density estimation for density and violin plots.

The estimate is evaluated directly on a fixed grid, costing ``O(points * n)``
with no binning or FFT acceleration.
"""

from __future__ import annotations

import math
import warnings
from typing import Dict, List, Optional, Sequence

import numpy as np

from .descriptive import standard_deviation

DEFAULT_KDE_POINTS = 50
KDE_PADDING_FRACTION = 0.1
SILVERMAN_FACTOR = 1.06

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def silverman_bandwidth(data: Sequence[float]) -> float:
    """Return Silverman's rule-of-thumb bandwidth ``1.06 * std * n**(-1/5)``.

    Uses the population standard deviation. Returns ``0.0`` for an empty
    sample or a constant one.
    """
    n = len(data)
    if n == 0:
        return 0.0
    return SILVERMAN_FACTOR * standard_deviation(data) * n ** (-1.0 / 5.0)


def kernel_density(
    data: Sequence[float],
    bandwidth: Optional[float] = None,
    points: int = DEFAULT_KDE_POINTS,
) -> List[Dict[str, float]]:
    """Evaluate a Gaussian kernel density estimate on an evenly spaced grid.

    Args:
        data (Sequence[float]): Sample values.
        bandwidth (float, optional): Kernel standard deviation in data units.
            Defaults to :func:`silverman_bandwidth` of ``data``.
        points (int, optional): Number of grid points. Defaults to ``50``.

    Returns:
        list[dict[str, float]]: ``points`` records ``{"x", "density"}`` with
        ``x`` ascending from ``min - 0.1 * range`` to ``max + 0.1 * range``.
        Empty when ``data`` is empty or ``points < 1``.

    Note:
        A zero bandwidth (for example a constant sample with the default
        bandwidth) leaves the estimate undefined: the grid is still returned
        but every density is NaN and a ``RuntimeWarning`` is issued.

    References:
        Silverman, B. W. (1986), Density Estimation for Statistics and Data
        Analysis, eq. 3.31.
    """
    values = np.asarray(data, dtype=float)
    n = int(values.size)
    if n == 0 or points < 1:
        return []

    bw = silverman_bandwidth(values) if bandwidth is None else float(bandwidth)

    lo = float(np.min(values))
    hi = float(np.max(values))
    padding = (hi - lo) * KDE_PADDING_FRACTION
    grid = np.linspace(lo - padding, hi + padding, int(points))

    if bw == 0:
        warnings.warn(
            "Kernel bandwidth is zero (constant sample?); densities are undefined.",
            RuntimeWarning,
            stacklevel=2,
        )
        density = np.full(grid.shape, np.nan)
    else:
        u = (grid[:, None] - values[None, :]) / bw
        kernel = np.exp(-0.5 * u * u) * _INV_SQRT_2PI
        density = kernel.sum(axis=1) / (n * bw)

    return [{"x": float(x), "density": float(d)} for x, d in zip(grid, density)]
