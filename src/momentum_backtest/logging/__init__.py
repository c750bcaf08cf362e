"""Logging and result output helpers."""

from .logger import HumanLogger
from .results import ResultPaths, generate_plotly_report, load_result, write_results

__all__ = ["HumanLogger", "ResultPaths", "generate_plotly_report", "load_result", "write_results"]
