"""Provide equal-width binning for histograms and choropleth legends.

This module supports:
- histogram bins with Sturges' rule as the default bin count, and
- equal-interval class breaks for sequential map colour scales.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

DEFAULT_MAP_CLASSES = 5
BREAK_DECIMALS = 6


def sturges_bins(n: int) -> int:
    """Sturges' rule ``ceil(log2(n) + 1)``; at least one bin."""
    if n < 1:
        return 1
    return int(math.ceil(math.log2(n) + 1))


def _format_fixed(x: float, ndigits: int = 1) -> str:
    # Rounds half away from zero on the exact binary value.
    if not math.isfinite(x):
        return f"{x:.{ndigits}f}"
    if x == 0:
        x = 0.0
    q = Decimal(1).scaleb(-ndigits)
    return str(Decimal(x).quantize(q, rounding=ROUND_HALF_UP))


def create_histogram(
    data: Sequence[float], bins: Optional[int] = None
) -> List[Dict[str, Union[str, int, float]]]:
    """Count a sample into equal-width bins spanning ``[min, max]``.

    Args:
        data (Sequence[float]): Sample values.
        bins (int, optional): Number of bins. Defaults to Sturges' rule for
            the sample size.

    Returns:
        list[dict]: One record per bin with ``bin`` (label such as
        ``"1.0-2.5"``), ``count``, ``bin_start``, ``bin_end`` and ``bin_mid``.
        Empty for an empty sample.

    Raises:
        ValueError: If ``bins`` is less than 1.

    Note:
        A value lands in bin ``floor((value - min) / width)`` clamped to the
        last bin, so the maximum is counted in the final bin and the counts
        always sum to ``len(data)``. A constant sample uses a unit bin width,
        placing every value in the first bin.
    """
    values = np.asarray(data, dtype=float)
    if values.size == 0:
        return []

    num_bins = sturges_bins(values.size) if bins is None else int(bins)
    if num_bins < 1:
        raise ValueError("bins must be >= 1")

    lo = float(np.min(values))
    hi = float(np.max(values))
    width = (hi - lo) / num_bins
    if width == 0:
        width = 1.0

    histogram = []
    for i in range(num_bins):
        start = lo + i * width
        end = lo + (i + 1) * width
        histogram.append(
            {
                "bin": f"{_format_fixed(start)}-{_format_fixed(end)}",
                "count": 0,
                "bin_start": start,
                "bin_end": end,
                "bin_mid": (start + end) / 2,
            }
        )

    position = np.minimum(np.floor((values - lo) / width), num_bins - 1)
    # NaN positions are left uncounted
    index = position[np.isfinite(position)].astype(int)
    counts = np.bincount(index, minlength=num_bins)
    for record, count in zip(histogram, counts):
        record["count"] = int(count)

    return histogram


def calculate_breaks(
    values: Sequence[float], classes: int = DEFAULT_MAP_CLASSES
) -> Optional[Dict[str, Union[float, List[float]]]]:
    """Return equal-interval class breaks for a choropleth colour scale.

    Args:
        values (Sequence[float]): Metric values across map regions.
        classes (int, optional): Number of colour classes. Defaults to ``5``,
            giving four interior breaks.

    Returns:
        dict or None: ``{"breaks", "min", "max"}``, or ``None`` for an empty
        input. ``breaks`` is empty when all values are equal.

    Raises:
        ValueError: If ``classes`` is less than 2.

    Note:
        Breaks are rounded to six decimals to hide floating-point noise and
        kept only while strictly ascending. If rounding collapses any of them
        (very narrow ranges), the unrounded evenly spaced breaks are returned
        instead.
    """
    if classes < 2:
        raise ValueError("classes must be >= 2")
    if len(values) == 0:
        return None

    sorted_arr = np.sort(np.asarray(values, dtype=float))
    lo = float(sorted_arr[0])
    hi = float(sorted_arr[-1])
    if lo == hi:
        return {"breaks": [], "min": lo, "max": hi}

    step = (hi - lo) / classes
    candidates = [round(lo + step * k, BREAK_DECIMALS) for k in range(1, classes)]

    breaks: List[float] = []
    last = lo
    for b in candidates:
        if b > last:
            breaks.append(b)
            last = b

    if len(breaks) < classes - 1:
        breaks = [lo + step * k for k in range(1, classes)]

    return {"breaks": breaks, "min": lo, "max": hi}
