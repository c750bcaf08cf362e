"""Core backtest domain models."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pandas as pd

from momentum_backtest.errors import ResultSchemaError

DATE_FORMAT = "%d-%m-%Y"
MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_date(value: date) -> str:
    """Render a calendar date as DD-MM-YYYY."""
    return value.strftime(DATE_FORMAT)


def month_label(value: date) -> str:
    """Return the English short month name, independent of locale."""
    return MONTH_LABELS[value.month - 1]


@dataclass(frozen=True)
class Bar:
    """One trading day for an instrument."""

    date: date
    open: float
    close: float


@dataclass(frozen=True)
class PriceSeries:
    """Daily bars for one instrument ordered most-recent-first."""

    symbol: str
    bars: tuple[Bar, ...] = ()

    def __len__(self) -> int:
        return len(self.bars)

    @classmethod
    def from_frame(cls, symbol: str, frame: pd.DataFrame) -> PriceSeries:
        """Build a series from an OHLC frame indexed by datetime, in any order."""
        for column in ("open", "close"):
            if column not in frame.columns:
                raise ValueError(f"{symbol}: bars must include {column} column")
        deduped = frame[~frame.index.duplicated(keep="last")]
        ordered = deduped.sort_index(ascending=False)
        days = pd.DatetimeIndex(ordered.index).date
        opens = pd.to_numeric(ordered["open"], errors="coerce")
        closes = pd.to_numeric(ordered["close"], errors="coerce")
        bars: list[Bar] = []
        for day, open_, close in zip(days, opens, closes):
            if not (math.isfinite(open_) and math.isfinite(close)):
                continue
            # Timestamps within one calendar day collapse to a single bar.
            if bars and bars[-1].date == day:
                continue
            bars.append(Bar(date=day, open=float(open_), close=float(close)))
        return cls(symbol=symbol, bars=tuple(bars))


@dataclass(frozen=True)
class CandidateTrade:
    """Single-day trade emitted by the pattern detector."""

    symbol: str
    signal_date: date
    entry_price: float
    exit_price: float
    change_pct: float
    pnl_pct: float

    def to_record(self) -> dict[str, Any]:
        """Convert trade to a serializable dict."""
        return {
            "date": format_date(self.signal_date),
            "entry": self.entry_price,
            "exit": self.exit_price,
            "symbol": self.symbol,
            "pnlPercent": self.pnl_pct,
            "change": self.change_pct,
        }


# A selected trade is a candidate that survived per-date ranking.
SelectedTrade = CandidateTrade

DateBucket = dict[date, list[CandidateTrade]]


@dataclass(frozen=True)
class ExportRow:
    """One row of the flat per-date export table."""

    date: date
    pnl_pct: float


@dataclass(frozen=True)
class Universe:
    """Immutable snapshot of the instruments scanned in one run."""

    symbols: tuple[str, ...] = ()

    @classmethod
    def from_symbols(cls, symbols: list[str] | tuple[str, ...]) -> Universe:
        deduped: list[str] = []
        seen: set[str] = set()
        for raw in symbols:
            symbol = raw.strip().upper()
            if not symbol or symbol in seen:
                continue
            seen.add(symbol)
            deduped.append(symbol)
        return cls(symbols=tuple(deduped))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)


@dataclass(frozen=True)
class RollupResult:
    """Yearly, monthly and per-date outcome of one backtest run."""

    yearly_pnl: float
    monthly_pnl: dict[str, float] = field(default_factory=dict)
    trades: dict[date, list[SelectedTrade]] = field(default_factory=dict)
    export_rows: list[ExportRow] = field(default_factory=list)

    def validate(self) -> RollupResult:
        """Check the result against the output schema."""
        if not _is_finite(self.yearly_pnl):
            raise ResultSchemaError("yearly_pnl must be a finite number")
        for label, value in self.monthly_pnl.items():
            if label not in MONTH_LABELS:
                raise ResultSchemaError(f"unknown month label '{label}'")
            if not _is_finite(value):
                raise ResultSchemaError(f"monthly_pnl[{label}] must be a finite number")
        for day, trades in self.trades.items():
            if not isinstance(day, date):
                raise ResultSchemaError(f"trades key {day!r} is not a date")
            for trade in trades:
                if trade.signal_date != day:
                    raise ResultSchemaError(
                        f"{trade.symbol} trade dated {trade.signal_date} filed under {day}"
                    )
                if not _is_finite(trade.pnl_pct) or not _is_finite(trade.change_pct):
                    raise ResultSchemaError(f"{trade.symbol} trade has non-finite values")
        for row in self.export_rows:
            if row.date not in self.trades:
                raise ResultSchemaError(f"export row {row.date} has no selected trades")
            if not _is_finite(row.pnl_pct):
                raise ResultSchemaError(f"export row {row.date} has a non-finite value")
        return self

    def to_record(self) -> dict[str, Any]:
        """Convert result to a serializable dict."""
        return {
            "yearlyPnl": self.yearly_pnl,
            "monthlyPnl": dict(self.monthly_pnl),
            "trades": {
                format_date(day): [trade.to_record() for trade in trades]
                for day, trades in self.trades.items()
            },
        }


def _is_finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)
