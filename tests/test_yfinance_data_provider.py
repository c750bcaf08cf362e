from __future__ import annotations

import sys
from types import SimpleNamespace

import pandas as pd
import pytest

from momentum_backtest.data.yfinance_data import YFinanceDataProvider
from momentum_backtest.errors import DataProviderError


def test_yfinance_symbol_gets_exchange_suffix() -> None:
    provider = YFinanceDataProvider(exchange_suffix=".NS")

    assert provider._resolve_yfinance_symbol("infy") == "INFY.NS"
    assert provider._resolve_yfinance_symbol("INFY.BO") == "INFY.BO"
    assert YFinanceDataProvider(exchange_suffix="")._resolve_yfinance_symbol("spy") == "SPY"


def test_yfinance_provider_requests_calendar_year(monkeypatch) -> None:
    captured: dict[str, object] = {}
    history = pd.DataFrame(
        {
            "Open": [10.0, 11.0, 12.0],
            "High": [11.0, 12.0, 13.0],
            "Low": [9.0, 10.0, 11.0],
            "Close": [10.5, 11.5, 12.5],
        },
        index=pd.DatetimeIndex(
            pd.to_datetime(["2018-01-02", "2018-01-03", "2019-01-01"])
        ).tz_localize("Asia/Kolkata"),
    )

    class FakeTicker:
        def __init__(self, ticker: str) -> None:
            captured["ticker"] = ticker

        def history(self, **kwargs: str) -> pd.DataFrame:
            captured.update(kwargs)
            return history

    monkeypatch.setitem(sys.modules, "yfinance", SimpleNamespace(Ticker=FakeTicker))

    bars = YFinanceDataProvider(exchange_suffix=".NS").get_bars("INFY", 2018)

    assert captured["ticker"] == "INFY.NS"
    assert captured["start"] == "2018-01-01"
    assert captured["end"] == "2019-01-01"
    assert list(bars.columns) == ["open", "high", "low", "close", "volume"]
    assert bars.index.tz is None
    assert len(bars) == 2
    assert float(bars["volume"].iloc[-1]) == 0.0
    assert float(bars["close"].iloc[-1]) == 11.5


def test_yfinance_provider_wraps_request_failures(monkeypatch) -> None:
    class FakeTicker:
        def __init__(self, _ticker: str) -> None:
            return None

        def history(self, **_kwargs: str) -> pd.DataFrame:
            raise ConnectionError("offline")

    monkeypatch.setitem(sys.modules, "yfinance", SimpleNamespace(Ticker=FakeTicker))

    with pytest.raises(DataProviderError, match="offline"):
        YFinanceDataProvider().get_bars("ACC", 2018)


def test_yfinance_provider_rejects_empty_history(monkeypatch) -> None:
    class FakeTicker:
        def __init__(self, _ticker: str) -> None:
            return None

        def history(self, **_kwargs: str) -> pd.DataFrame:
            return pd.DataFrame()

    monkeypatch.setitem(sys.modules, "yfinance", SimpleNamespace(Ticker=FakeTicker))

    with pytest.raises(DataProviderError, match="no rows"):
        YFinanceDataProvider().get_bars("ACC", 2018)
