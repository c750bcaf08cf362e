"""Deterministic price arithmetic shared by detection and rollups."""

from __future__ import annotations

import math

from momentum_backtest.errors import ZeroBaselineError

# 0.1% entry slippage.
SLIPPAGE = 1 + 0.001


def round2(value: float) -> float:
    """Round to 2 decimals, halves toward +infinity on the scaled value."""
    return math.floor(value * 100 + 0.5) / 100


def pct_change(start: float, end: float) -> float:
    """Percent change from start to end, rounded to 2 decimals."""
    if start == 0:
        raise ZeroBaselineError(f"percent change from a zero baseline (end={end})")
    return round2(((end - start) / start) * 100)
