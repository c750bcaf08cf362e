"""Domain models."""

from .models import (
    Bar,
    CandidateTrade,
    DateBucket,
    ExportRow,
    PriceSeries,
    RollupResult,
    SelectedTrade,
    Universe,
    format_date,
    month_label,
)

__all__ = [
    "Bar",
    "CandidateTrade",
    "DateBucket",
    "ExportRow",
    "PriceSeries",
    "RollupResult",
    "SelectedTrade",
    "Universe",
    "format_date",
    "month_label",
]
