"""Per-date, per-month and per-year PnL reduction."""

from __future__ import annotations

from datetime import date
from functools import reduce

from momentum_backtest.domain.models import (
    DateBucket,
    ExportRow,
    RollupResult,
    SelectedTrade,
    month_label,
)
from momentum_backtest.signals.pricing import round2


def rollup(selected: DateBucket) -> RollupResult:
    """Reduce selected trades into monthly and yearly totals plus export rows.

    Monthly totals are rounded after every date is added, and the yearly
    total after every month, so results carry the same stepwise rounding
    as previously published runs.
    """
    monthly: dict[str, float] = {}
    trades: dict[date, list[SelectedTrade]] = {}
    for day in sorted(selected):
        day_trades = list(selected[day])
        label = month_label(day)
        total = 0.0
        for trade in day_trades:
            total += trade.pnl_pct
        monthly[label] = round2(monthly.get(label, 0.0) + total)
        trades[day] = day_trades

    export_rows = [
        ExportRow(date=day, pnl_pct=rounded_sum(day_trades))
        for day, day_trades in trades.items()
        if day_trades
    ]
    yearly = reduce(lambda acc, value: round2(acc + value), monthly.values(), 0.0)
    return RollupResult(
        yearly_pnl=yearly,
        monthly_pnl=monthly,
        trades=trades,
        export_rows=export_rows,
    )


def rounded_sum(trades: list[SelectedTrade]) -> float:
    """Sum PnL with 2-decimal rounding after each addition, starting from zero."""
    return reduce(lambda acc, trade: round2(acc + trade.pnl_pct), trades, 0.0)
