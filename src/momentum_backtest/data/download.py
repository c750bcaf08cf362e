"""Bulk download of one year of bars for every symbol in a universe."""

from __future__ import annotations

import time
from collections.abc import Callable

from momentum_backtest.data.base import BarFetcher, BarStore
from momentum_backtest.domain.models import Universe
from momentum_backtest.errors import DataProviderError
from momentum_backtest.logging.logger import HumanLogger


def download_universe(
    universe: Universe,
    year: int,
    fetcher: BarFetcher,
    store: BarStore,
    *,
    throttle_seconds: float,
    logger: HumanLogger,
    sleep: Callable[[float], None] = time.sleep,
) -> list[str]:
    """Fetch and persist the year's bars per symbol, returning symbols that failed.

    Requests run one after another with a fixed pause in between to stay
    under the remote rate limit.
    """
    failed: list[str] = []
    for position, symbol in enumerate(universe):
        if position and throttle_seconds > 0:
            sleep(throttle_seconds)
        try:
            bars = fetcher.get_bars(symbol, year)
        except DataProviderError as exc:
            logger.missing_data(symbol, str(exc))
            failed.append(symbol)
            continue
        try:
            path = store.save_bars(symbol, year, bars)
        except OSError as exc:
            logger.missing_data(symbol, f"cannot store bars: {exc}")
            failed.append(symbol)
            continue
        logger.download(symbol, year, len(bars), str(path))
    return failed
