"""Command-line interface entrypoint."""
from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

import pandas as pd

from .analysis.analyzer import REPORTS, VideoMetricsAnalyzer
from .ingest.loader import load_videos
from .logging_config import configure_logging
from .utils.io import write_table
from .utils.paths import get_paths

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Music video metadata analytics")
    parser.add_argument("--log-level", type=str, default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list", help="List available reports")

    p_run = sub.add_parser("run", help="Run reports against a CSV or Parquet export")
    p_run.add_argument("input", type=str, help="Path to the video table (.csv or .parquet)")
    p_run.add_argument(
        "--report",
        action="append",
        choices=[name for name, _ in REPORTS],
        help="Report to run; repeatable. Defaults to all reports.",
    )
    p_run.add_argument("--output-dir", type=str, default=None, help="Write one CSV per report here")
    p_run.add_argument("--save", action="store_true", help="Write CSVs to the default reports directory")

    return parser


def print_table(title: str, table: pd.DataFrame) -> None:
    print(f"\n== {title} ==")
    if table.empty:
        print("(no rows)")
    else:
        print(table.to_string(index=False))


def run_reports(input_path: str, reports: Optional[List[str]] = None, output_dir: Optional[str] = None) -> None:
    analyzer = VideoMetricsAnalyzer(load_videos(input_path))
    descriptions = dict(REPORTS)
    for name in reports or [name for name, _ in REPORTS]:
        table = analyzer.run(name)
        print_table(descriptions[name], table)
        if output_dir:
            write_table(table, os.path.join(output_dir, f"{name}.csv"))
    if output_dir:
        log.info("Wrote %d report(s) to %s", len(reports or REPORTS), output_dir)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "list":
        for index, (name, description) in enumerate(REPORTS, start=1):
            print(f"{index:>2}. {name:<28} {description}")
    elif args.command == "run":
        output_dir = args.output_dir or (get_paths().reports if args.save else None)
        run_reports(args.input, reports=args.report, output_dir=output_dir)
    else:
        parser.print_help()
