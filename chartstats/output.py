"""Write distribution tables to CSV files for the chart data directory.

This module is the boundary between in-memory statistics and the static
artifacts a chart component fetches.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"


def save_distribution_tables(
    tables: Mapping[str, pd.DataFrame],
    output_dir: str = DEFAULT_OUTPUT_DIR,
    prefix: str = "",
) -> Dict[str, str]:
    """Save each table to ``<output_dir>/<prefix><name>.csv``.

    Args:
        tables (Mapping[str, pandas.DataFrame]): Tables keyed by name, for
            example the output of
            :func:`chartstats.analysis.build_distribution_tables`.
        output_dir (str): Directory for the CSV files; created if missing.
        prefix (str): Optional file-name prefix, such as the metric name.

    Returns:
        dict[str, str]: Mapping of table name to written path, in the order of
        ``tables``.
    """
    os.makedirs(output_dir, exist_ok=True)

    paths = {}
    for name, table in tables.items():
        path = os.path.join(output_dir, f"{prefix}{name}.csv")
        table.to_csv(path, index=False)
        logger.info("Saved %s table (%d rows) to %s", name, len(table), path)
        paths[name] = path
    return paths
