"""Command-line interface for the momentum backtest."""

from __future__ import annotations

import argparse
import sys

from momentum_backtest.config import Settings, dedupe_symbols, parse_symbols
from momentum_backtest.runtime import run


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Backtest the daily rally pattern for one year")
    parser.add_argument("--year", type=int, help="Calendar year to backtest")
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download the year's daily bars for every symbol before running",
    )
    parser.add_argument("--symbols", type=str, help="Comma-separated symbols")
    parser.add_argument("--data-dir", type=str, help="Directory holding per-year bar files")
    parser.add_argument("--data-format", choices=["json", "csv"], help="Bar file format")
    parser.add_argument("--results-dir", type=str, help="Directory for result files")
    parser.add_argument("--max-workers", type=int, help="Concurrent symbol scans")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level",
    )
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.year is not None:
        overrides["year"] = args.year
    if args.download:
        overrides["should_download"] = True
    if args.symbols:
        overrides["symbols"] = dedupe_symbols(parse_symbols(args.symbols, settings.symbols))
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.data_format:
        overrides["data_format"] = args.data_format
    if args.results_dir:
        overrides["results_dir"] = args.results_dir
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers
    if args.log_level:
        overrides["log_level"] = args.log_level
    return settings.with_overrides(**overrides)


def main() -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args()
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        return 2
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
