"""Define standardized column names for summary DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized summary-table column labels.

    These names are shared by the per-category summary, the single-sample
    summary and the CSV exports, so downstream charts can read either table
    with the same keys.

    Attributes:
        category: Grouping label (for example a state or survey year).

        n: Number of finite observations summarized.

        ci_lower / ci_upper: Bounds of the normal-approximation confidence
            interval for the mean, at the level recorded in ``confidence``.

        whisker_low / whisker_high: Most extreme values inside the
            ``1.5 * IQR`` fences, used as box-plot whisker ends.

        n_outliers: Count of observations outside the fences.
    """

    category: str = "category"
    n: str = "n"
    mean: str = "mean"
    sd: str = "sd"
    confidence: str = "confidence"
    ci_lower: str = "ci_lower"
    ci_upper: str = "ci_upper"
    q1: str = "q1"
    median: str = "median"
    q3: str = "q3"
    iqr: str = "iqr"
    whisker_low: str = "whisker_low"
    whisker_high: str = "whisker_high"
    n_outliers: str = "n_outliers"

    def ordered(self, with_category: bool = True) -> list[str]:
        cols = [
            self.n,
            self.mean,
            self.sd,
            self.confidence,
            self.ci_lower,
            self.ci_upper,
            self.q1,
            self.median,
            self.q3,
            self.iqr,
            self.whisker_low,
            self.whisker_high,
            self.n_outliers,
        ]
        return [self.category, *cols] if with_category else cols


SUMMARY_COLUMNS = SummaryColumns()
