"""Backtest result files and per-run Plotly report."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
import plotly.express as px

from momentum_backtest.domain.models import ExportRow, RollupResult, format_date
from momentum_backtest.logging.logger import HumanLogger

RESULT_JSON = "backtest-result.json"
RESULT_CSV = "backtest-result.csv"
RESULT_REPORT = "backtest-report.html"
CSV_HEADER = ("Date", "PnL%")


@dataclass(frozen=True)
class ResultPaths:
    """Files produced for one run."""

    json_path: Path
    csv_path: Path
    report_path: Path


def write_results(result: RollupResult, year: int, results_dir: str) -> ResultPaths:
    """Persist the rollup as JSON, CSV export and HTML report under ``<results_dir>/<year>``."""
    result.validate()
    output_dir = Path(results_dir) / str(year)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = ResultPaths(
        json_path=output_dir / RESULT_JSON,
        csv_path=output_dir / RESULT_CSV,
        report_path=output_dir / RESULT_REPORT,
    )
    paths.json_path.write_text(json.dumps(result.to_record()), encoding="utf-8")
    export_frame(result.export_rows).to_csv(paths.csv_path, index=False)
    generate_plotly_report(result, year, str(paths.report_path))
    return paths


def export_frame(rows: list[ExportRow]) -> pd.DataFrame:
    """Two-column export table with DD-MM-YYYY dates and compact numbers."""
    return pd.DataFrame(
        {
            CSV_HEADER[0]: [format_date(row.date) for row in rows],
            CSV_HEADER[1]: [HumanLogger.format_number(row.pnl_pct) for row in rows],
        },
        columns=list(CSV_HEADER),
    )


def load_result(path: str | Path) -> dict[str, Any]:
    """Load a previously written JSON result."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def generate_plotly_report(result: RollupResult, year: int, output_html_path: str) -> None:
    """Render monthly totals and the cumulative per-date curve."""
    output = Path(output_html_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    title = f"Backtest {year}: {HumanLogger.format_number(result.yearly_pnl)}%"
    if not result.export_rows:
        empty_df = pd.DataFrame({"month": ["none"], "pnl_pct": [0.0]})
        figure = px.bar(empty_df, x="month", y="pnl_pct", title=title)
        figure.write_html(str(output), include_plotlyjs="cdn")
        return

    monthly = pd.DataFrame(
        {"month": list(result.monthly_pnl), "pnl_pct": list(result.monthly_pnl.values())}
    )
    daily = pd.DataFrame(
        {
            "date": pd.to_datetime([row.date for row in result.export_rows]),
            "pnl_pct": [row.pnl_pct for row in result.export_rows],
        }
    )
    daily["cumulative_pct"] = daily["pnl_pct"].cumsum()
    bars = px.bar(monthly, x="month", y="pnl_pct", title=f"{title} (monthly)")
    curve = px.line(
        daily,
        x="date",
        y="cumulative_pct",
        title="Cumulative PnL% by signal date",
        markers=True,
        hover_data=["pnl_pct"],
    )
    html_parts = [
        "<html><head><meta charset='utf-8'><title>momentum backtest report</title></head><body>",
        bars.to_html(full_html=False, include_plotlyjs="cdn"),
        curve.to_html(full_html=False, include_plotlyjs=False),
        "</body></html>",
    ]
    output.write_text("".join(html_parts), encoding="utf-8")
