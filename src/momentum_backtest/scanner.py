"""Concurrent per-instrument pattern scan."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from momentum_backtest.data.base import PriceSeriesProvider
from momentum_backtest.domain.models import CandidateTrade, Universe
from momentum_backtest.errors import DataProviderError, EmptyUniverseError
from momentum_backtest.logging.logger import HumanLogger
from momentum_backtest.signals.detector import detect_candidates

# Raised by loaders for absent or malformed per-symbol data.
SKIPPABLE_ERRORS = (DataProviderError, FileNotFoundError, ValueError)


def scan_universe(
    universe: Universe,
    year: int,
    provider: PriceSeriesProvider,
    *,
    max_workers: int = 8,
    logger: HumanLogger,
) -> list[CandidateTrade]:
    """Run the detector over every symbol and flatten the candidates in universe order."""
    if not universe.symbols:
        raise EmptyUniverseError("universe has no symbols to scan")
    if max_workers <= 0:
        raise ValueError("max_workers must be positive")

    def scan_symbol(symbol: str) -> list[CandidateTrade]:
        try:
            series = provider.get_series(symbol, year)
        except SKIPPABLE_ERRORS as exc:
            logger.missing_data(symbol, str(exc))
            return []
        return list(detect_candidates(series))

    workers = min(max_workers, len(universe))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scan") as executor:
        per_symbol = list(executor.map(scan_symbol, universe.symbols))

    return [trade for trades in per_symbol for trade in trades]
