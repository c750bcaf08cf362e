"""JSON-backed bar store using one file per symbol and year."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd

from momentum_backtest.data.frames import filter_year, normalize_ohlcv
from momentum_backtest.domain.models import PriceSeries
from momentum_backtest.errors import DataProviderError, MissingDataError


class JsonBarStore:
    """Load and save daily bars as ``<data_dir>/<year>/<SYMBOL>.json``.

    Files hold the instrument record with its bars under ``ohlc``, newest
    first, so downloads made by earlier tooling load unchanged.
    """

    def __init__(self, data_dir: str) -> None:
        self.data_dir = Path(data_dir)

    def get_series(self, symbol: str, year: int) -> PriceSeries:
        return PriceSeries.from_frame(symbol, self.load_bars(symbol, year))

    def load_bars(self, symbol: str, year: int) -> pd.DataFrame:
        path = self._path_for(symbol, year)
        if not path.exists():
            raise MissingDataError(f"No JSON found for {symbol} under {path.parent}")
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise DataProviderError(f"{symbol}: invalid JSON in {path}: {exc}") from exc
        except OSError as exc:
            raise DataProviderError(f"{symbol}: cannot read {path}: {exc}") from exc

        records = self._extract_records(payload, symbol)
        bars = filter_year(normalize_ohlcv(pd.DataFrame(records), symbol), year)
        if bars.empty:
            raise MissingDataError(f"{symbol}: no bars dated {year} in {path}")
        return bars

    def save_bars(self, symbol: str, year: int, bars: pd.DataFrame) -> Path:
        path = self._path_for(symbol, year)
        path.parent.mkdir(parents=True, exist_ok=True)
        ordered = bars.sort_index(ascending=False)
        ohlc: list[dict[str, Any]] = []
        for timestamp, row in ordered.iterrows():
            ohlc.append(
                {
                    "date": pd.Timestamp(timestamp).strftime("%Y-%m-%d"),
                    "open": float(row["open"]),
                    "high": float(row["high"]),
                    "low": float(row["low"]),
                    "close": float(row["close"]),
                    "volume": float(row.get("volume", 0.0)),
                }
            )
        record = {"tradingsymbol": symbol.upper(), "ohlc": ohlc}
        path.write_text(json.dumps(record), encoding="utf-8")
        return path

    def _path_for(self, symbol: str, year: int) -> Path:
        return self.data_dir / str(year) / f"{symbol.strip().upper()}.json"

    @staticmethod
    def _extract_records(payload: Any, symbol: str) -> list[dict[str, Any]]:
        if isinstance(payload, dict):
            records = payload.get("ohlc")
        else:
            records = payload
        if not isinstance(records, list) or not records:
            raise DataProviderError(f"{symbol}: JSON payload has no ohlc records")
        return records
