"""Command line entry point: read a directory of wish logs, write tables and charts."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import matplotlib

from .config import GachaConfig, parse_date
from .errors import ConfigError, DataDirError, NoDataError
from .pipeline import analyze_dir
from .plot import plot_binned
from .report import save_csv

logger = logging.getLogger("pityscope")

# Axis ranges used for the published time-of-day chart.
TIME_AVG_LIMITS = (80.0, 95.0)
TIME_CHANCE_LIMITS = (0.4, 0.6)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pity and 50/50 statistics from gacha wish logs.")
    parser.add_argument("data_dir", type=Path, nargs="?", default=Path("player_data"),
                        help="Directory with one CSV wish log per account")
    parser.add_argument("--out-dir", type=Path, default=Path("outputs"), help="Output directory")
    parser.add_argument("--config", type=Path, help="JSON file with roster/banner overrides")
    parser.add_argument("--slices", type=int, help="Number of time-of-day slices")
    parser.add_argument("--exclude-date", action="append", default=[], metavar="YYYY-MM-DD",
                        help="Leave pulls from this date out of the time-of-day chart")
    parser.add_argument("--non-limited", action="append", default=[], metavar="NAME",
                        help="Extra non-limited five-star character")
    parser.add_argument("--excluded-banner", action="append", default=[], metavar="ID",
                        help="Extra banner id to ignore")
    parser.add_argument("--fixed-limits", action="store_true",
                        help="Use the fixed y ranges of the published time chart")
    parser.add_argument("--no-plots", action="store_true", help="Only write CSV tables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_config(args: argparse.Namespace) -> GachaConfig:
    config = GachaConfig.from_json(args.config) if args.config else GachaConfig()
    if args.slices is not None:
        config = replace(config, day_slices=args.slices)
    config = config.extended(
        non_limited=args.non_limited,
        excluded_banners=args.excluded_banner,
        excluded_dates=[parse_date(d) for d in args.exclude_date],
    )
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args)
        analysis = analyze_dir(args.data_dir, config)
    except (ConfigError, DataDirError, NoDataError) as exc:
        logger.error("%s", exc)
        return 1

    if not args.no_plots:
        # Charts are only written to files.
        matplotlib.use("Agg")
    args.out_dir.mkdir(parents=True, exist_ok=True)
    for binned in analysis.binned():
        csv_path = args.out_dir / f"{binned.name}.csv"
        save_csv(binned, csv_path)
        print(f"Saved: {csv_path}")

        if args.no_plots:
            continue
        plot_path = args.out_dir / f"{binned.name}.png"
        if args.fixed_limits and binned.name == "time":
            plot_binned(binned, plot_path, TIME_AVG_LIMITS, TIME_CHANCE_LIMITS)
        else:
            plot_binned(binned, plot_path)
        print(f"Saved: {plot_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
