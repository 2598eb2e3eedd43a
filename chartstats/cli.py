"""Command-line entry point that turns a CSV metric column into chart tables."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from .analysis import build_distribution_tables, summarize_by_category
from .data_processing import extract_metric_values, load_metric_table
from .output import DEFAULT_OUTPUT_DIR, save_distribution_tables
from .stats.density import DEFAULT_KDE_POINTS

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _configure_logging() -> None:
    """Log INFO to stdout unless the root logger already has handlers."""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Compute histogram, density, Q-Q and summary tables for a CSV column."
    )
    parser.add_argument("--input", required=True, help="Path to input CSV file.")
    parser.add_argument("--column", required=True, help="Numeric column to summarize.")
    parser.add_argument(
        "--category",
        default=None,
        help="Optional grouping column for a per-category summary table.",
    )
    parser.add_argument(
        "--bins",
        type=int,
        default=None,
        help="Histogram bin count (default: Sturges' rule).",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=DEFAULT_KDE_POINTS,
        help=f"Density grid size (default: {DEFAULT_KDE_POINTS}).",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=0.95,
        help="Confidence level for mean intervals; 0.95 or 0.99 (default: 0.95).",
    )
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="File-name prefix for the written tables.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns a process exit status."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    start_time = time.time()
    logger.info("Loading %s", args.input)
    try:
        df = load_metric_table(args.input)
        values = extract_metric_values(df, args.column)
    except (OSError, KeyError, ValueError) as exc:
        logger.error("Could not read column '%s' from %s: %s", args.column, args.input, exc)
        return 1

    if len(values) == 0:
        logger.error("No finite values in column '%s'; nothing to summarize.", args.column)
        return 1
    logger.info("Extracted %d finite values from '%s'", len(values), args.column)

    if args.bins is not None and args.bins < 1:
        logger.error("--bins must be >= 1, got %d", args.bins)
        return 1

    tables = build_distribution_tables(
        values, bins=args.bins, points=args.points, confidence=args.confidence
    )
    if args.category:
        try:
            tables["by_category"] = summarize_by_category(
                df, args.column, args.category, confidence=args.confidence
            )
        except KeyError as exc:
            logger.error("Could not group by '%s': %s", args.category, exc)
            return 1
        logger.info(
            "Summarized %d categories of '%s'", len(tables["by_category"]), args.category
        )

    paths = save_distribution_tables(tables, output_dir=args.outdir, prefix=args.prefix)
    logger.info("Wrote %d tables in %.2f seconds", len(paths), time.time() - start_time)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
