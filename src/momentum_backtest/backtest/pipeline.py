"""End-to-end backtest over a universe for one year."""

from __future__ import annotations

from momentum_backtest.backtest.aggregate import TOP_K, group_by_date, select_top
from momentum_backtest.backtest.rollup import rollup
from momentum_backtest.data.base import PriceSeriesProvider
from momentum_backtest.domain.models import RollupResult, Universe
from momentum_backtest.logging.logger import HumanLogger
from momentum_backtest.scanner import scan_universe


def run_backtest(
    universe: Universe,
    year: int,
    provider: PriceSeriesProvider,
    *,
    max_workers: int = 8,
    logger: HumanLogger,
) -> RollupResult:
    """Scan, group, select and roll up; raises instead of returning partial totals."""
    logger.run_started(year, len(universe))
    candidates = scan_universe(
        universe,
        year,
        provider,
        max_workers=max_workers,
        logger=logger,
    )
    selected = select_top(group_by_date(candidates), k=TOP_K)
    result = rollup(selected).validate()

    for trades in result.trades.values():
        for trade in trades:
            logger.trade(trade)
    logger.monthly_pnl(year, result.monthly_pnl)
    logger.yearly_pnl(year, result.yearly_pnl)
    return result
