"""OHLCV frame normalization shared by the local bar stores."""

from __future__ import annotations

import math

import pandas as pd

from momentum_backtest.errors import DataProviderError

DATE_COLUMN_CANDIDATES = ("date", "datetime", "timestamp")
OHLCV_COLUMNS = ("open", "high", "low", "close", "volume")
REQUIRED_COLUMNS = ("open", "high", "low", "close")


def normalize_ohlcv(frame: pd.DataFrame, symbol: str) -> pd.DataFrame:
    """Index a raw frame by naive datetime and keep numeric OHLCV columns."""
    lower_to_original = {str(column).strip().lower(): column for column in frame.columns}
    date_column = pick_date_column(lower_to_original, symbol)
    normalized = frame.rename(columns=build_ohlcv_rename_map(lower_to_original, symbol))
    try:
        index = pd.DatetimeIndex(pd.to_datetime(normalized[date_column], utc=False))
    except (TypeError, ValueError) as exc:
        raise DataProviderError(f"{symbol}: unparseable dates: {exc}") from exc
    if index.tz is not None:
        # Keep the exchange-local calendar day.
        index = index.tz_localize(None)
    normalized.index = index
    if "volume" not in normalized.columns:
        normalized["volume"] = 0.0
    # Later rows win for a repeated date.
    normalized = normalized[~normalized.index.duplicated(keep="last")]
    normalized = normalized.sort_index()
    normalized = normalized[list(OHLCV_COLUMNS)].copy()
    normalized.index.name = "date"
    normalized = normalized.apply(pd.to_numeric, errors="coerce")
    normalized = normalized.replace([math.inf, -math.inf], math.nan)
    normalized = normalized.dropna(subset=list(REQUIRED_COLUMNS))
    normalized["volume"] = normalized["volume"].fillna(0.0)
    if normalized.empty:
        raise DataProviderError(f"{symbol}: data has no valid OHLCV rows")
    return normalized


def filter_year(frame: pd.DataFrame, year: int) -> pd.DataFrame:
    """Keep rows whose index falls inside the calendar year."""
    return frame[frame.index.year == year]


def pick_date_column(lower_to_original: dict[str, object], symbol: str) -> object:
    for candidate in DATE_COLUMN_CANDIDATES:
        if candidate in lower_to_original:
            return lower_to_original[candidate]
    candidates = ", ".join(DATE_COLUMN_CANDIDATES)
    raise DataProviderError(f"{symbol}: missing date column. Expected one of: {candidates}")


def build_ohlcv_rename_map(
    lower_to_original: dict[str, object],
    symbol: str,
) -> dict[object, str]:
    rename_map: dict[object, str] = {}
    for name in OHLCV_COLUMNS:
        source = lower_to_original.get(name)
        if source is None:
            if name == "volume":
                continue
            raise DataProviderError(f"{symbol}: missing required column '{name}'")
        rename_map[source] = name
    return rename_map
