"""
Curves package - yield curve storage and analytics.

Provides:
- CurveStore: Sorted yield observations for a single curve date
- CurveAnalytics: Interpolated yields, forwards, duration, spreads, shape
- LinearInterpolator: Node-exact linear interpolation with flat ends
"""

from .store import YieldPoint, CurveSnapshot, CurveStore, parse_yield
from .interpolation import LinearInterpolator
from .analytics import (
    CurveAnalytics,
    CurveShape,
    SHORT_MATURITY,
    MEDIUM_MATURITY,
    LONG_MATURITY,
)

__all__ = [
    "YieldPoint",
    "CurveSnapshot",
    "CurveStore",
    "parse_yield",
    "LinearInterpolator",
    "CurveAnalytics",
    "CurveShape",
    "SHORT_MATURITY",
    "MEDIUM_MATURITY",
    "LONG_MATURITY",
]
