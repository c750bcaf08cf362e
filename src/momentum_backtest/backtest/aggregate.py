"""Date grouping and per-date top-K selection."""

from __future__ import annotations

from collections.abc import Iterable

from momentum_backtest.domain.models import CandidateTrade, DateBucket

# Maximum simultaneous positions per signal date.
TOP_K = 2


def group_by_date(trades: Iterable[CandidateTrade]) -> DateBucket:
    """Bucket trades by signal date, preserving input order within a bucket."""
    buckets: DateBucket = {}
    for trade in trades:
        buckets.setdefault(trade.signal_date, []).append(trade)
    return buckets


def select_top(buckets: DateBucket, k: int = TOP_K) -> DateBucket:
    """Keep the k strongest signals per date; equal strengths keep bucket order."""
    if k <= 0:
        raise ValueError("k must be positive")
    return {
        day: sorted(trades, key=lambda trade: trade.change_pct, reverse=True)[:k]
        for day, trades in buckets.items()
    }
