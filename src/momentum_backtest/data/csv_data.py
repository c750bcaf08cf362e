"""CSV-backed bar store."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from momentum_backtest.data.frames import filter_year, normalize_ohlcv
from momentum_backtest.domain.models import PriceSeries
from momentum_backtest.errors import DataProviderError, MissingDataError


class CsvBarStore:
    """Load daily bars from local CSV files.

    Looks for ``<data_dir>/<year>/<SYMBOL>.csv`` first and falls back to a
    multi-year ``<data_dir>/<SYMBOL>.csv`` trimmed to the requested year.
    """

    def __init__(self, data_dir: str) -> None:
        self.data_dir = Path(data_dir)

    def get_series(self, symbol: str, year: int) -> PriceSeries:
        return PriceSeries.from_frame(symbol, self.load_bars(symbol, year))

    def load_bars(self, symbol: str, year: int) -> pd.DataFrame:
        path = self._resolve_path(symbol, year)
        if path is None:
            raise MissingDataError(f"No CSV found for {symbol} under {self.data_dir}")
        try:
            frame = pd.read_csv(path)
        except OSError as exc:
            raise DataProviderError(f"{symbol}: cannot read {path}: {exc}") from exc
        bars = filter_year(normalize_ohlcv(frame, symbol), year)
        if bars.empty:
            raise MissingDataError(f"{symbol}: no bars dated {year} in {path}")
        return bars

    def save_bars(self, symbol: str, year: int, bars: pd.DataFrame) -> Path:
        path = self.data_dir / str(year) / f"{symbol.strip().upper()}.csv"
        path.parent.mkdir(parents=True, exist_ok=True)
        output = bars.reset_index()
        first_column = str(output.columns[0])
        if first_column != "date":
            output = output.rename(columns={first_column: "date"})
        output.to_csv(path, index=False)
        return path

    def _resolve_path(self, symbol: str, year: int) -> Path | None:
        bare_symbol = symbol.strip()
        symbol_upper = bare_symbol.upper()
        symbol_lower = bare_symbol.lower()
        year_dir = self.data_dir / str(year)
        candidates = [
            year_dir / f"{symbol_upper}.csv",
            year_dir / f"{symbol_lower}.csv",
            self.data_dir / f"{symbol_upper}.csv",
            self.data_dir / f"{symbol_lower}.csv",
        ]
        for candidate in candidates:
            if candidate.exists():
                return candidate
        return None
