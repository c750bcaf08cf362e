"""Tests for result files written after a run."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from momentum_backtest.backtest.rollup import rollup
from momentum_backtest.domain.models import CandidateTrade, ExportRow, RollupResult
from momentum_backtest.logging.logger import HumanLogger
from momentum_backtest.logging.results import export_frame, load_result, write_results


def _trade(symbol: str, day: date, pnl: float) -> CandidateTrade:
    return CandidateTrade(
        symbol=symbol,
        signal_date=day,
        entry_price=100.1,
        exit_price=101.0,
        change_pct=2.0,
        pnl_pct=pnl,
    )


def test_write_results_creates_json_csv_and_report(tmp_path: Path) -> None:
    jan = date(2018, 1, 5)
    mar = date(2018, 3, 12)
    result = rollup(
        {
            jan: [_trade("ACC", jan, 1.5), _trade("TCS", jan, -0.5)],
            mar: [_trade("INFY", mar, -0.25)],
        }
    )

    paths = write_results(result, 2018, str(tmp_path))

    assert paths.json_path == tmp_path / "2018" / "backtest-result.json"
    assert paths.csv_path.read_text().splitlines() == [
        "Date,PnL%",
        "05-01-2018,1",
        "12-03-2018,-0.25",
    ]
    assert paths.report_path.exists()
    assert "<html" in paths.report_path.read_text()
    record = load_result(paths.json_path)
    assert record["yearlyPnl"] == 0.75
    assert record["monthlyPnl"] == {"Jan": 1.0, "Mar": -0.25}
    assert [trade["symbol"] for trade in record["trades"]["05-01-2018"]] == ["ACC", "TCS"]


def test_write_results_handles_run_without_trades(tmp_path: Path) -> None:
    paths = write_results(RollupResult(yearly_pnl=0.0), 2019, str(tmp_path))

    assert paths.csv_path.read_text().splitlines() == ["Date,PnL%"]
    assert load_result(paths.json_path) == {"yearlyPnl": 0.0, "monthlyPnl": {}, "trades": {}}
    assert paths.report_path.exists()


def test_export_frame_formats_compact_numbers() -> None:
    frame = export_frame(
        [
            ExportRow(date=date(2018, 2, 1), pnl_pct=0.1),
            ExportRow(date=date(2018, 2, 2), pnl_pct=-0.0),
        ]
    )

    assert frame.to_dict("list") == {"Date": ["01-02-2018", "02-02-2018"], "PnL%": ["0.1", "0"]}


def test_format_number_drops_trailing_zeros() -> None:
    assert HumanLogger.format_number(1.0) == "1"
    assert HumanLogger.format_number(2.5) == "2.5"
    assert HumanLogger.format_number(-0.004) == "0"
    assert HumanLogger.format_number(109.11) == "109.11"
