"""Pattern detection and price arithmetic."""

from .detector import detect_candidates
from .pricing import SLIPPAGE, pct_change, round2

__all__ = ["SLIPPAGE", "detect_candidates", "pct_change", "round2"]
