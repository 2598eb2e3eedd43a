"""Provide normal Q-Q plot coordinates.

Theoretical quantiles come from a rational approximation of the inverse
standard-normal CDF with relative error of about 1.15e-9.
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence

import numpy as np

# Rational approximation coefficients for the central region (a / b) and the
# tails (c / d).
_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def normal_quantile(p: float) -> float:
    """Approximate the inverse standard-normal CDF at probability ``p``.

    Args:
        p (float): Probability in ``(0, 1)``.

    Returns:
        float: ``z`` such that ``Phi(z) ~= p``. Returns ``-inf`` for
        ``p <= 0`` and ``inf`` for ``p >= 1``; NaN propagates.

    Note:
        Piecewise rational approximation: a lower tail for ``p < 0.02425``,
        a central region up to ``1 - 0.02425``, and an upper tail mirroring
        the lower one.

    References:
        Acklam, P. J., An algorithm for computing the inverse normal
        cumulative distribution function (the coefficients also used by the
        Beasley-Springer-Moro family of approximations).
    """
    if p <= 0:
        return -math.inf
    if p >= 1:
        return math.inf

    if p < P_LOW:
        q = math.sqrt(-2 * math.log(p))
        return (((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5]) / (
            (((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1
        )
    if p <= P_HIGH:
        q = p - 0.5
        r = q * q
        return (
            (((((_A[0] * r + _A[1]) * r + _A[2]) * r + _A[3]) * r + _A[4]) * r + _A[5])
            * q
            / (((((_B[0] * r + _B[1]) * r + _B[2]) * r + _B[3]) * r + _B[4]) * r + 1)
        )
    q = math.sqrt(-2 * math.log(1 - p))
    return -(((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5]) / (
        (((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1
    )


def plotting_positions(n: int) -> np.ndarray:
    """Rank probabilities ``(i + 0.5) / n`` for ``i = 0 .. n - 1``."""
    return (np.arange(n, dtype=float) + 0.5) / n


def qq_plot_data(data: Sequence[float]) -> List[Dict[str, float]]:
    """Pair sorted sample values with standard-normal theoretical quantiles.

    Args:
        data (Sequence[float]): Sample values in any order.

    Returns:
        list[dict[str, float]]: Records ``{"theoretical", "sample"}`` in
        ascending sample order; the theoretical quantiles are ascending too.
        Empty for an empty sample.
    """
    sorted_arr = np.sort(np.asarray(data, dtype=float))
    n = int(sorted_arr.size)
    if n == 0:
        return []

    return [
        {"theoretical": normal_quantile(float(p)), "sample": float(value)}
        for p, value in zip(plotting_positions(n), sorted_arr)
    ]
