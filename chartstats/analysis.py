"""
Distribution summaries assembled from the statistics subpackage.

This module builds the composite structures distribution charts consume:
- violin outlines (KDE widths scaled to a category half-width plus the box
  quartiles drawn inside them),
- per-category summary tables (n, mean, SD, confidence interval, quartiles,
  outlier counts), and
- the histogram / density / Q-Q / summary tables for a single metric.

All tables are :class:`pandas.DataFrame` objects using the labels in
:mod:`chartstats.schema`.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd

from .data_processing import group_metric_values
from .schema import SUMMARY_COLUMNS as C
from .stats.density import DEFAULT_KDE_POINTS, kernel_density
from .stats.descriptive import confidence_interval, standard_deviation
from .stats.histogram import create_histogram
from .stats.qq import qq_plot_data
from .stats.quantiles import calculate_quartiles

VIOLIN_POINTS = 100
VIOLIN_HALF_WIDTH = 0.35


def violin_profile(
    values: Sequence[float],
    points: int = VIOLIN_POINTS,
    half_width: float = VIOLIN_HALF_WIDTH,
) -> Dict:
    """Build the outline and box summary of one violin.

    Args:
        values (Sequence[float]): Finite sample for one category.
        points (int, optional): KDE grid size. Defaults to ``100``.
        half_width (float, optional): Half-width, in category-axis units, of
            the widest part of the violin. Defaults to ``0.35``.

    Returns:
        dict: ``density`` as records ``{"y", "width"}`` (``y`` is the grid
        value, ``width`` the scaled density so the mode reaches
        ``half_width``) and ``quartiles`` from
        :func:`~chartstats.stats.quantiles.calculate_quartiles`.

    Note:
        Widths are all zero when the maximum density is not a positive
        number, which covers constant samples.
    """
    density = kernel_density(values, points=points)
    peaks = [d["density"] for d in density if np.isfinite(d["density"])]
    max_density = max(peaks) if peaks else 0.0

    outline = []
    for d in density:
        width = d["density"] / max_density * half_width if max_density > 0 else 0.0
        outline.append({"y": d["x"], "width": float(width)})

    return {"density": outline, "quartiles": calculate_quartiles(values)}


def _summary_row(values: Sequence[float], confidence: float) -> Dict[str, float]:
    quartiles = calculate_quartiles(values)
    ci = confidence_interval(values, confidence)
    return {
        C.n: int(len(values)),
        C.mean: ci["mean"],
        C.sd: standard_deviation(values),
        C.confidence: float(confidence),
        C.ci_lower: ci["lower"],
        C.ci_upper: ci["upper"],
        C.q1: quartiles["q1"],
        C.median: quartiles["median"],
        C.q3: quartiles["q3"],
        C.iqr: quartiles["iqr"],
        C.whisker_low: quartiles["min"],
        C.whisker_high: quartiles["max"],
        C.n_outliers: len(quartiles["outliers"]),
    }


def summarize_sample(values: Sequence[float], confidence: float = 0.95) -> pd.DataFrame:
    """One-row summary table for a single sample."""
    return pd.DataFrame([_summary_row(values, confidence)], columns=C.ordered(False))


def summarize_by_category(
    df: pd.DataFrame,
    value_col: str,
    category_col: str,
    confidence: float = 0.95,
) -> pd.DataFrame:
    """Summarize a metric per category for box plots and error-bar charts.

    Args:
        df (pandas.DataFrame): Long-format table with one observation per row.
        value_col (str): Numeric metric column. Non-finite values are dropped.
        category_col (str): Grouping column.
        confidence (float, optional): Confidence level for the mean interval.
            Defaults to ``0.95``.

    Returns:
        pandas.DataFrame: One row per category in first-appearance order, with
        the columns of :meth:`chartstats.schema.SummaryColumns.ordered`.
        Categories without finite values get ``n = 0`` and zeroed statistics.

    Raises:
        KeyError: If either column is missing.
    """
    groups = group_metric_values(df, value_col, category_col)
    rows = []
    for category, values in groups.items():
        row = {C.category: category}
        row.update(_summary_row(values, confidence))
        rows.append(row)
    return pd.DataFrame(rows, columns=C.ordered())


def build_distribution_tables(
    values: Sequence[float],
    bins: Optional[int] = None,
    points: int = DEFAULT_KDE_POINTS,
    confidence: float = 0.95,
) -> Dict[str, pd.DataFrame]:
    """Compute the chart tables describing one metric's distribution.

    Returns:
        dict[str, pandas.DataFrame]: ``histogram``, ``density``, ``qq`` and
        ``summary`` tables. The first three are empty (with their columns) for
        an empty sample.
    """
    values = np.asarray(values, dtype=float)
    return {
        "histogram": pd.DataFrame(
            create_histogram(values, bins),
            columns=["bin", "count", "bin_start", "bin_end", "bin_mid"],
        ),
        "density": pd.DataFrame(kernel_density(values, points=points), columns=["x", "density"]),
        "qq": pd.DataFrame(qq_plot_data(values), columns=["theoretical", "sample"]),
        "summary": summarize_sample(values, confidence),
    }
