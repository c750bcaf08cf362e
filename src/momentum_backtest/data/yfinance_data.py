"""Yahoo Finance daily bar fetcher."""

from __future__ import annotations

import re
from typing import Any

import pandas as pd

from momentum_backtest.errors import DataProviderError


class YFinanceDataProvider:
    """Fetch one calendar year of daily OHLCV bars via yfinance."""

    def __init__(self, exchange_suffix: str = ".NS") -> None:
        self.exchange_suffix = exchange_suffix.strip()

    def get_bars(self, symbol: str, year: int) -> pd.DataFrame:
        try:
            import yfinance as yf
        except ImportError as exc:
            raise DataProviderError(
                "yfinance is required for downloads. Install it with `pip install yfinance`."
            ) from exc

        ticker = self._resolve_yfinance_symbol(symbol)
        try:
            history = yf.Ticker(ticker).history(
                start=f"{year}-01-01",
                end=f"{year + 1}-01-01",
                interval="1d",
                auto_adjust=False,
                actions=False,
            )
        except Exception as exc:
            raise DataProviderError(f"yfinance request failed for {symbol} ({ticker}): {exc}") from exc

        frame = self._normalize_history(history, symbol, ticker)
        frame = frame[frame.index.year == year]
        if frame.empty:
            raise DataProviderError(f"yfinance returned no {year} rows for {symbol} ({ticker})")
        return frame

    def _resolve_yfinance_symbol(self, symbol: str) -> str:
        bare_symbol = symbol.strip().upper()
        if not self.exchange_suffix or "." in bare_symbol:
            return bare_symbol
        return f"{bare_symbol}{self.exchange_suffix.upper()}"

    @staticmethod
    def _normalize_history(history: Any, symbol: str, ticker: str) -> pd.DataFrame:
        if history is None:
            raise DataProviderError(f"yfinance returned no rows for {symbol} ({ticker})")
        frame = pd.DataFrame(history).copy()
        if frame.empty:
            raise DataProviderError(f"yfinance returned no rows for {symbol} ({ticker})")

        open_column = YFinanceDataProvider._pick_column(frame, "open")
        high_column = YFinanceDataProvider._pick_column(frame, "high")
        low_column = YFinanceDataProvider._pick_column(frame, "low")
        close_column = YFinanceDataProvider._pick_column(frame, "close")
        if close_column is None:
            close_column = YFinanceDataProvider._pick_column(frame, "adj_close")
        volume_column = YFinanceDataProvider._pick_column(frame, "volume")

        if open_column is None or high_column is None or low_column is None or close_column is None:
            raise DataProviderError(f"yfinance payload missing OHLC columns for {symbol} ({ticker})")

        index = pd.DatetimeIndex(pd.to_datetime(frame.index, utc=False))
        if index.tz is not None:
            # Exchange-local trading day.
            index = index.tz_localize(None)
        normalized = pd.DataFrame(index=index)
        normalized.index.name = "date"
        normalized["open"] = pd.to_numeric(frame[open_column], errors="coerce").to_numpy()
        normalized["high"] = pd.to_numeric(frame[high_column], errors="coerce").to_numpy()
        normalized["low"] = pd.to_numeric(frame[low_column], errors="coerce").to_numpy()
        normalized["close"] = pd.to_numeric(frame[close_column], errors="coerce").to_numpy()
        if volume_column is None:
            normalized["volume"] = 0.0
        else:
            normalized["volume"] = (
                pd.to_numeric(frame[volume_column], errors="coerce").fillna(0.0).to_numpy()
            )
        normalized = normalized.sort_index()
        normalized = normalized.dropna(subset=["open", "high", "low", "close"])
        return normalized

    @staticmethod
    def _pick_column(frame: pd.DataFrame, field: str) -> Any | None:
        for column in frame.columns:
            key = YFinanceDataProvider._column_key(column)
            if key == field or key.startswith(f"{field}_"):
                return column
        return None

    @staticmethod
    def _column_key(value: Any) -> str:
        if isinstance(value, tuple):
            text = "_".join(str(part) for part in value if part is not None)
        else:
            text = str(value)
        return re.sub(r"[^a-zA-Z0-9]+", "_", text).strip("_").lower()
