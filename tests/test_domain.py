from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from momentum_backtest.domain.models import PriceSeries, Universe, format_date, month_label


def test_price_series_from_frame_orders_most_recent_first() -> None:
    frame = pd.DataFrame(
        {
            "open": [10.0, 11.0, 12.0],
            "high": [11.0, 12.0, 13.0],
            "low": [9.0, 10.0, 11.0],
            "close": [10.5, 11.5, 12.5],
        },
        index=pd.to_datetime(["2018-01-02", "2018-01-03", "2018-01-04"]),
    )

    series = PriceSeries.from_frame("ACC", frame)

    assert series.symbol == "ACC"
    assert len(series) == 3
    assert [bar.date for bar in series.bars] == [
        date(2018, 1, 4),
        date(2018, 1, 3),
        date(2018, 1, 2),
    ]
    assert series.bars[0].open == 12.0
    assert series.bars[0].close == 12.5


def test_price_series_from_frame_requires_open_and_close() -> None:
    frame = pd.DataFrame({"close": [1.0]}, index=pd.to_datetime(["2018-01-02"]))

    with pytest.raises(ValueError, match="open"):
        PriceSeries.from_frame("ACC", frame)


def test_universe_snapshot_dedupes_and_uppercases() -> None:
    universe = Universe.from_symbols(["infy", "TCS", " INFY ", ""])

    assert universe.symbols == ("INFY", "TCS")
    assert list(universe) == ["INFY", "TCS"]
    assert len(universe) == 2


def test_date_helpers_are_locale_independent() -> None:
    assert format_date(date(2018, 3, 9)) == "09-03-2018"
    assert month_label(date(2018, 9, 30)) == "Sep"


def test_price_series_from_frame_skips_non_finite_and_repeated_days() -> None:
    frame = pd.DataFrame(
        {
            "open": [10.0, 11.0, 11.5, float("inf")],
            "close": [10.5, 11.2, 11.8, 12.5],
        },
        index=pd.to_datetime(["2018-01-02", "2018-01-03", "2018-01-03", "2018-01-04"]),
    )

    series = PriceSeries.from_frame("ACC", frame)

    assert [(bar.date, bar.close) for bar in series.bars] == [
        (date(2018, 1, 3), 11.8),
        (date(2018, 1, 2), 10.5),
    ]
