#!/usr/bin/env python3
"""
Main script for generating chart statistics tables from a CSV file.
"""

# Pipeline overview (README-style):
# 1) Load the CSV and coerce the chosen metric column to finite floats.
# 2) Bin a Sturges'-rule histogram, evaluate a Silverman-bandwidth KDE and
#    pair sorted values with normal quantiles for a Q-Q plot.
# 3) Summarize the sample (and optionally each category) with quartiles,
#    IQR outlier counts and a fixed-z confidence interval for the mean.
# 4) Export every table as CSV for the chart components to fetch.
#
# Example:
#   python main.py --input data/health.csv --column MHLTH_AdjPrev --category StateAbbr

import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from chartstats.cli import main

if __name__ == "__main__":
    sys.exit(main())
