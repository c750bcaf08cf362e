"""Price data collaborator contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import pandas as pd

from momentum_backtest.domain.models import PriceSeries


class PriceSeriesProvider(Protocol):
    """Interface for year-scoped series retrieval."""

    def get_series(self, symbol: str, year: int) -> PriceSeries:
        """Return daily bars for the symbol and year, most-recent-first."""


class BarStore(PriceSeriesProvider, Protocol):
    """Provider that can also persist downloaded bars."""

    def save_bars(self, symbol: str, year: int, bars: pd.DataFrame) -> Path:
        """Persist an OHLCV frame and return the written path."""


class BarFetcher(Protocol):
    """Interface for remote year-scoped OHLCV retrieval."""

    def get_bars(self, symbol: str, year: int) -> pd.DataFrame:
        """Return OHLCV bars with ascending datetime index."""
