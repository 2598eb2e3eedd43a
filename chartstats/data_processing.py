"""
Handles CSV loading and numeric metric extraction for the statistics layer.
"""

# The stats functions do not defend against NaN or infinite values, so every
# sample handed to them from tabular data passes through this module first:
# values are coerced with pandas (unparseable strings become NaN) and anything
# non-finite is dropped with a logged warning.

import logging
from collections.abc import Mapping

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def load_metric_table(filepath):
    """
    Load a metric table from a CSV file.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded DataFrame.
    """
    return pd.read_csv(filepath)


def _finite_values(raw, label):
    numeric = pd.to_numeric(pd.Series(raw, dtype=object), errors="coerce")
    arr = numeric.to_numpy(dtype=float)
    mask = np.isfinite(arr)
    dropped = int(len(arr) - mask.sum())
    if dropped:
        logger.warning(
            "Dropped %d of %d values of '%s' that are missing or non-numeric",
            dropped,
            len(arr),
            label,
        )
    return arr[mask]


def extract_metric_values(records, field):
    """Extract the finite numeric values of one field.

    Chart data arrives either as a list of row mappings (parsed JSON) or as a
    DataFrame. Values are coerced with :func:`pandas.to_numeric` so numeric
    strings such as ``"12.5"`` are kept, while empty cells, text and
    infinities are dropped.

    Args:
        records: A :class:`pandas.DataFrame` or an iterable of mappings.
        field (str): Column or key holding the metric.

    Returns:
        numpy.ndarray: Finite float values in their original order.

    Raises:
        KeyError: If ``records`` is a DataFrame without ``field``.
    """
    if isinstance(records, pd.DataFrame):
        if field not in records.columns:
            raise KeyError(f"Column '{field}' not found; available: {list(records.columns)}")
        raw = records[field].tolist()
    else:
        raw = [r.get(field) if isinstance(r, Mapping) else None for r in records]
    return _finite_values(raw, field)


def group_metric_values(df, value_col, category_col):
    """Split a metric column into finite samples per category.

    Categories keep their first-appearance order so chart axes follow the
    source data. Rows with a missing category are ignored; a category whose
    values are all non-finite maps to an empty array.

    Returns:
        dict[str, numpy.ndarray]: Mapping of category label to values.
    """
    for col in (value_col, category_col):
        if col not in df.columns:
            raise KeyError(f"Column '{col}' not found; available: {list(df.columns)}")

    groups = {}
    for category, group in df.groupby(category_col, sort=False, dropna=True):
        groups[category] = _finite_values(group[value_col].tolist(), f"{value_col}[{category}]")
    return groups
