"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Self

from dotenv import load_dotenv

from momentum_backtest.domain.models import Universe

DEFAULT_YEAR = 2018

# NSE futures & options stocks.
DEFAULT_UNIVERSE = [
    "ACC",
    "ADANIPORTS",
    "AMBUJACEM",
    "ASIANPAINT",
    "AXISBANK",
    "BAJAJ-AUTO",
    "BAJFINANCE",
    "BANKBARODA",
    "BHARTIARTL",
    "BPCL",
    "CIPLA",
    "COALINDIA",
    "DRREDDY",
    "EICHERMOT",
    "GAIL",
    "GRASIM",
    "HCLTECH",
    "HDFC",
    "HDFCBANK",
    "HEROMOTOCO",
    "HINDALCO",
    "HINDUNILVR",
    "ICICIBANK",
    "INDUSINDBK",
    "INFY",
    "IOC",
    "ITC",
    "KOTAKBANK",
    "LT",
    "LUPIN",
    "M&M",
    "MARUTI",
    "NTPC",
    "ONGC",
    "POWERGRID",
    "RELIANCE",
    "SBIN",
    "SUNPHARMA",
    "TATAMOTORS",
    "TATASTEEL",
    "TCS",
    "TECHM",
    "ULTRACEMCO",
    "UPL",
    "VEDL",
    "WIPRO",
    "YESBANK",
    "ZEEL",
]


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse truthy environment strings."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_symbols(value: str | None, default: list[str] | None = None) -> list[str]:
    """Parse comma-separated symbols."""
    fallback = default or DEFAULT_UNIVERSE
    if not value:
        return list(fallback)
    symbols = [item.strip().upper() for item in value.split(",") if item.strip()]
    return symbols or list(fallback)


def dedupe_symbols(symbols: list[str]) -> list[str]:
    """Remove duplicate symbols while preserving order."""
    deduped: list[str] = []
    seen: set[str] = set()
    for symbol in symbols:
        if symbol in seen:
            continue
        seen.add(symbol)
        deduped.append(symbol)
    return deduped


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    year: int = DEFAULT_YEAR
    symbols: list[str] = field(default_factory=lambda: list(DEFAULT_UNIVERSE))
    data_dir: str = "data"
    data_format: str = "json"
    results_dir: str = "data"
    should_download: bool = False
    exchange_suffix: str = ".NS"
    download_throttle_seconds: float = 0.5
    max_workers: int = 8
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            year=int(os.getenv("YEAR", str(DEFAULT_YEAR))),
            symbols=dedupe_symbols(parse_symbols(os.getenv("SYMBOLS"))),
            data_dir=str(os.getenv("DATA_DIR", "data")).strip(),
            data_format=str(os.getenv("DATA_FORMAT", "json")).strip().lower(),
            results_dir=str(os.getenv("RESULTS_DIR", "data")).strip(),
            should_download=parse_bool(os.getenv("SHOULD_DOWNLOAD"), False),
            exchange_suffix=str(os.getenv("EXCHANGE_SUFFIX", ".NS")).strip(),
            download_throttle_seconds=float(os.getenv("DOWNLOAD_THROTTLE_SECONDS", "0.5")),
            max_workers=int(os.getenv("MAX_WORKERS", "8")),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def universe(self) -> Universe:
        """Snapshot of the symbols scanned in a run."""
        return Universe.from_symbols(self.symbols)

    def validate(self) -> Self:
        """Validate settings fields."""
        if self.year < 1970 or self.year > 9999:
            raise ValueError("year must be between 1970 and 9999")
        if not self.symbols:
            raise ValueError("symbols must not be empty")
        if self.data_format not in {"json", "csv"}:
            raise ValueError("data_format must be one of json, csv")
        if not self.data_dir:
            raise ValueError("data_dir must not be empty")
        if not self.results_dir:
            raise ValueError("results_dir must not be empty")
        if self.download_throttle_seconds < 0:
            raise ValueError("download_throttle_seconds must be non-negative")
        if self.max_workers <= 0:
            raise ValueError("max_workers must be positive")
        return self
