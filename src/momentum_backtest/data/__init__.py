"""Price data collaborators."""

from .base import BarFetcher, BarStore, PriceSeriesProvider
from .csv_data import CsvBarStore
from .download import download_universe
from .json_data import JsonBarStore
from .yfinance_data import YFinanceDataProvider

__all__ = [
    "BarFetcher",
    "BarStore",
    "CsvBarStore",
    "JsonBarStore",
    "PriceSeriesProvider",
    "YFinanceDataProvider",
    "download_universe",
]
