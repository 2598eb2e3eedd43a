"""
A Python package computing the statistics behind distribution and trend charts.

Turns numeric samples into plot-ready records: box-plot quartiles, confidence
intervals, kernel density curves, histograms, regression lines, Q-Q points and
beeswarm positions.

Modules:
    - stats: Pure numerical transforms (no I/O, no pandas).
    - data_processing: Loads CSV tables and extracts finite metric values.
    - analysis: Violin profiles, per-category summaries and distribution tables.
    - output: Writes distribution tables to CSV.
    - cli: Command-line entry point.
"""

__version__ = "1.0.0"

from .analysis import (
    build_distribution_tables,
    summarize_by_category,
    summarize_sample,
    violin_profile,
)
from .data_processing import (
    extract_metric_values,
    group_metric_values,
    load_metric_table,
)
from .output import save_distribution_tables
from .stats import (
    add_jitter,
    beeswarm_layout,
    calculate_breaks,
    calculate_quartiles,
    confidence_interval,
    create_histogram,
    kernel_density,
    linear_regression,
    mean,
    normal_quantile,
    qq_plot_data,
    quantile,
    silverman_bandwidth,
    standard_deviation,
    sturges_bins,
)

__all__ = [
    # Statistics
    "quantile",
    "calculate_quartiles",
    "mean",
    "standard_deviation",
    "confidence_interval",
    "kernel_density",
    "silverman_bandwidth",
    "create_histogram",
    "sturges_bins",
    "calculate_breaks",
    "linear_regression",
    "normal_quantile",
    "qq_plot_data",
    "beeswarm_layout",
    "add_jitter",
    # Data processing
    "load_metric_table",
    "extract_metric_values",
    "group_metric_values",
    # Analysis
    "violin_profile",
    "summarize_sample",
    "summarize_by_category",
    "build_distribution_tables",
    # Output
    "save_distribution_tables",
]
