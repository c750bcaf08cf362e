"""Runtime wiring for a single backtest run."""

from __future__ import annotations

from momentum_backtest.backtest.pipeline import run_backtest
from momentum_backtest.config import Settings
from momentum_backtest.data.base import BarStore
from momentum_backtest.data.csv_data import CsvBarStore
from momentum_backtest.data.download import download_universe
from momentum_backtest.data.json_data import JsonBarStore
from momentum_backtest.data.yfinance_data import YFinanceDataProvider
from momentum_backtest.errors import BacktestError
from momentum_backtest.logging.logger import HumanLogger
from momentum_backtest.logging.results import write_results


def build_bar_store(settings: Settings) -> BarStore:
    if settings.data_format == "csv":
        return CsvBarStore(settings.data_dir)
    return JsonBarStore(settings.data_dir)


def run(settings: Settings) -> int:
    """Download when asked, backtest the universe and write result files."""
    human_logger = HumanLogger(level=settings.log_level)
    store = build_bar_store(settings)
    universe = settings.universe()

    try:
        if settings.should_download:
            download_universe(
                universe,
                settings.year,
                YFinanceDataProvider(exchange_suffix=settings.exchange_suffix),
                store,
                throttle_seconds=settings.download_throttle_seconds,
                logger=human_logger,
            )
        result = run_backtest(
            universe,
            settings.year,
            store,
            max_workers=settings.max_workers,
            logger=human_logger,
        )
        paths = write_results(result, settings.year, settings.results_dir)
    except (BacktestError, OSError) as exc:
        human_logger.error(str(exc))
        return 1

    for path in (paths.json_path, paths.csv_path, paths.report_path):
        human_logger.file_written(str(path))
    return 0
