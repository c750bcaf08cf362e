"""Candidate aggregation, selection and rollup."""

from .aggregate import TOP_K, group_by_date, select_top
from .pipeline import run_backtest
from .rollup import rollup, rounded_sum

__all__ = ["TOP_K", "group_by_date", "rollup", "rounded_sum", "run_backtest", "select_top"]
