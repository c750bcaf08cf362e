"""Custom exceptions for clearer error handling across the backtest."""


class BacktestError(Exception):
    """Base exception for all backtest-specific errors."""


class DataProviderError(BacktestError):
    """Raised when price data retrieval or parsing fails."""


class MissingDataError(DataProviderError):
    """Raised when an instrument has no price data for the requested year."""


class EmptyUniverseError(BacktestError):
    """Raised when a run is started without any instruments to scan."""


class ResultSchemaError(BacktestError):
    """Raised when a rollup result does not match the output schema."""


class ZeroBaselineError(BacktestError, ArithmeticError):
    """Raised when a percent change is requested against a zero baseline."""
