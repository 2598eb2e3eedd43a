"""
Statistical transforms behind the distribution and trend charts.

This subpackage turns numeric samples into the records that chart components
plot directly (box whiskers, density curves, bars, trend lines, Q-Q points,
swarm positions). All functions accept plain sequences or numpy arrays and
return dicts and lists.

Modules:
    quantiles:
        Linear-interpolation quantiles and box-plot quartile summaries with
        1.5 * IQR outlier fences.

    descriptive:
        Mean, population standard deviation and fixed-z confidence intervals.

    density:
        Gaussian kernel density estimates with Silverman's bandwidth.

    histogram:
        Sturges'-rule histograms and equal-interval choropleth breaks.

    regression:
        Ordinary least-squares line with fitted values and residuals.

    qq:
        Normal Q-Q coordinates from an inverse-normal-CDF approximation.

    layout:
        Beeswarm packing and strip-plot jitter.

Design Principle:
    Empty samples give documented zero or empty results instead of raising,
    and no function filters NaN or infinite values. The subpackage has no
    dependency on pandas or on the loaders in the parent package.
"""

from .density import kernel_density, silverman_bandwidth
from .descriptive import confidence_interval, mean, standard_deviation
from .histogram import calculate_breaks, create_histogram, sturges_bins
from .layout import add_jitter, beeswarm_layout
from .qq import normal_quantile, qq_plot_data
from .quantiles import calculate_quartiles, quantile
from .regression import linear_regression

__all__ = [
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
]
