"""Concise human-readable run logger."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from momentum_backtest.domain.models import CandidateTrade, format_date


class HumanLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO") -> None:
        self._logger = logging.getLogger("momentum_backtest")
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def run_started(self, year: int, symbols: int) -> None:
        self._logger.info("backtest | %s | scanning %s symbols", year, symbols)

    def download(self, symbol: str, year: int, rows: int, path: str) -> None:
        self._logger.info("download | %s | %s | %s bars -> %s", symbol, year, rows, path)

    def missing_data(self, symbol: str, reason: str) -> None:
        self._logger.warning("skip | %s | %s", symbol, reason)

    def trade(self, trade: CandidateTrade) -> None:
        self._logger.info(
            ">> %s %s => Entry = %s | Exit = %s | PnL = %s%%",
            format_date(trade.signal_date),
            trade.symbol,
            self.format_number(trade.entry_price),
            self.format_number(trade.exit_price),
            self.format_number(trade.pnl_pct),
        )

    def monthly_pnl(self, year: int, monthly: Mapping[str, float]) -> None:
        parts = [f"{month} {self.format_number(value)}%" for month, value in monthly.items()]
        self._logger.info("monthly | %s | %s", year, " | ".join(parts) or "no trades")

    def yearly_pnl(self, year: int, value: float) -> None:
        self._logger.info("yearly | %s | %s%%", year, self.format_number(value))

    def file_written(self, path: str) -> None:
        self._logger.info("written | %s", path)

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    @staticmethod
    def format_number(value: float, precision: int = 2) -> str:
        """Render without trailing zeros, e.g. 1.0 -> 1 and 0.50 -> 0.5."""
        normalized = 0.0 if abs(float(value)) < 1e-9 else float(value)
        text = f"{normalized:.{max(0, precision)}f}".rstrip("0").rstrip(".")
        if text in {"", "-", "-0"}:
            return "0"
        return text
