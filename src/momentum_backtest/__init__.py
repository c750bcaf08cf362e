"""Daily momentum pattern backtest across an instrument universe."""

__version__ = "0.1.0"
