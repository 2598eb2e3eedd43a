"""
Descriptive statistics for chart annotations (mean lines, error bars).
"""

from __future__ import annotations

import math
from typing import Dict, Sequence

import numpy as np

# Two-sided normal critical values. Any other confidence level falls back to
# the 95% value; sample size does not enter (no t-distribution correction).
Z_SCORES: Dict[float, float] = {
    0.95: 1.96,
    0.99: 2.576,
}
DEFAULT_Z = Z_SCORES[0.95]


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean; ``0.0`` for an empty sample."""
    if len(data) == 0:
        return 0.0
    return float(np.mean(np.asarray(data, dtype=float)))


def standard_deviation(data: Sequence[float]) -> float:
    """Population standard deviation (divides by n); ``0.0`` for an empty sample."""
    if len(data) == 0:
        return 0.0
    return float(np.std(np.asarray(data, dtype=float), ddof=0))


def z_score_for(confidence: float) -> float:
    """Two-sided z critical value for ``confidence``; ``1.96`` when not in ``Z_SCORES``."""
    return Z_SCORES.get(confidence, DEFAULT_Z)


def confidence_interval(
    data: Sequence[float], confidence: float = 0.95
) -> Dict[str, float]:
    """Normal-approximation confidence interval for the sample mean.

    Args:
        data (Sequence[float]): Sample values.
        confidence (float, optional): Confidence level. Only ``0.95`` and
            ``0.99`` are recognised; anything else uses the 95% z-score.
            Defaults to ``0.95``.

    Returns:
        dict[str, float]: ``mean``, ``lower``, ``upper`` and ``error`` (the
        half-width ``z * std / sqrt(n)``, with the population standard
        deviation). All fields are ``0.0`` for an empty sample.

    Note:
        The fixed z-score is a simplification of the t-distribution that
        understates the interval for small samples.
    """
    n = len(data)
    if n == 0:
        return {"mean": 0.0, "lower": 0.0, "upper": 0.0, "error": 0.0}

    avg = mean(data)
    std = standard_deviation(data)
    standard_error = std / math.sqrt(n)
    margin = z_score_for(confidence) * standard_error

    return {
        "mean": avg,
        "lower": avg - margin,
        "upper": avg + margin,
        "error": margin,
    }
