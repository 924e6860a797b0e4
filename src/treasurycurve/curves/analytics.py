"""
Curve analytics: interpolated yields, forwards, duration, spreads, shape.

All maturities are in years and all yields in percent. Every query reads
a single snapshot of the store, so results are pure functions of the
curve as it stood when the call was made.

Conventions:
    - Spreads are in percentage points (x100 for basis points)
    - Forward rates use annual compounding on the spot yields
    - Invalid forward queries return the sentinel 0.0; use
      forward_rate_or_none() to tell them apart from a true zero
"""

from enum import Enum
from typing import Optional, Tuple
import math

from .store import CurveSnapshot, CurveStore, YieldPoint


# Maturities sampled for shape classification
SHORT_MATURITY = 0.25
MEDIUM_MATURITY = 5.0
LONG_MATURITY = 30.0

# Shape thresholds, percentage points
HUMP_THRESHOLD = 0.2
INVERSION_THRESHOLD = 0.1
STEEP_THRESHOLD = 0.5
NORMAL_THRESHOLD = 0.1

MIN_POINTS_FOR_SHAPE = 3


class CurveShape(str, Enum):
    """Qualitative curve shape."""
    HUMPED = "Humped"
    INVERTED = "Inverted"
    STEEP_NORMAL = "Steep Normal"
    NORMAL = "Normal"
    FLAT = "Flat"
    INSUFFICIENT_DATA = "Insufficient Data"


def _yield_at(snapshot: CurveSnapshot, maturity: float) -> float:
    if snapshot.interpolator is None:
        return 0.0
    return snapshot.interpolator.interpolate(maturity)


def _forward(y1: float, y2: float, t1: float, t2: float) -> Optional[float]:
    """Annually compounded forward between t1 and t2 from decimal spot yields."""
    try:
        growth = math.pow(1.0 + y2, t2) / math.pow(1.0 + y1, t1)
        fwd = math.pow(growth, 1.0 / (t2 - t1)) - 1.0
    except (ValueError, ZeroDivisionError, OverflowError):
        return None
    if not math.isfinite(fwd):
        return None
    return fwd


class CurveAnalytics:
    """
    Read-only analytics facade over a CurveStore.

    Holds no state of its own; a store reloaded between calls is picked
    up on the next call.

    Example:
        >>> analytics = CurveAnalytics(store)
        >>> analytics.spread(2.0, 10.0) * 100   # 2s10s in bp
    """

    def __init__(self, store: CurveStore):
        self.store = store

    # ------------------------------------------------------------- Facade
    def points(self) -> Tuple[YieldPoint, ...]:
        return self.store.points()

    def date(self) -> str:
        return self.store.date()

    # ------------------------------------------------------------ Queries
    def yield_at(self, maturity: float) -> float:
        """
        Yield in percent at any maturity.

        Stored maturities (within 1e-6) return their quote exactly.
        Between nodes the yield is linear in maturity; outside the node
        range it is flat at the nearest node. An empty curve gives 0.0.
        """
        return _yield_at(self.store.snapshot(), maturity)

    def forward_rate_or_none(self, t1: float, t2: float) -> Optional[float]:
        """
        Implied forward rate in percent between t1 and t2.

        f = ((1 + y2)^t2 / (1 + y1)^t1)^(1 / (t2 - t1)) - 1

        Returns:
            Forward rate, or None when t2 <= t1 or the compounding
            identity has no real solution (e.g. a yield below -100%)
        """
        if t2 <= t1:
            return None

        snapshot = self.store.snapshot()
        y1 = _yield_at(snapshot, t1) / 100.0
        y2 = _yield_at(snapshot, t2) / 100.0

        fwd = _forward(y1, y2, t1, t2)
        if fwd is None:
            return None
        return fwd * 100.0

    def forward_rate(self, t1: float, t2: float) -> float:
        """
        Implied forward rate in percent between t1 and t2.

        Returns 0.0 for an empty range (t2 <= t1) and for numerical
        failures, the same value a genuinely zero forward would give.
        """
        fwd = self.forward_rate_or_none(t1, t2)
        return 0.0 if fwd is None else fwd

    def duration(self, maturity: float, coupon_rate: float = 0.0) -> float:
        """
        Approximate duration in years.

        A zero-coupon instrument has duration equal to its maturity. For
        a coupon instrument this returns maturity / (1 + y), the simple
        modified-duration approximation, not a cash-flow weighted figure.
        """
        if coupon_rate == 0.0:
            return float(maturity)

        denom = 1.0 + self.yield_at(maturity) / 100.0
        if denom == 0.0:
            return math.inf
        return maturity / denom

    def spread(self, maturity1: float, maturity2: float) -> float:
        """Yield at maturity2 minus yield at maturity1, in percentage points."""
        snapshot = self.store.snapshot()
        return _yield_at(snapshot, maturity2) - _yield_at(snapshot, maturity1)

    def classify_shape(self) -> CurveShape:
        """
        Classify the curve from the 3M, 5Y and 30Y yields.

        Rules are checked in order:
            1. Humped: both ends more than 20bp above the 5Y
            2. Inverted: 3M more than 10bp above 30Y
            3. Steep Normal: 30Y more than 50bp above 3M
            4. Normal: 30Y more than 10bp above 3M
            5. Flat otherwise
        """
        snapshot = self.store.snapshot()
        if len(snapshot.points) < MIN_POINTS_FOR_SHAPE:
            return CurveShape.INSUFFICIENT_DATA

        short_rate = _yield_at(snapshot, SHORT_MATURITY)
        medium_rate = _yield_at(snapshot, MEDIUM_MATURITY)
        long_rate = _yield_at(snapshot, LONG_MATURITY)

        if short_rate > medium_rate + HUMP_THRESHOLD and long_rate > medium_rate + HUMP_THRESHOLD:
            return CurveShape.HUMPED
        elif short_rate > long_rate + INVERSION_THRESHOLD:
            return CurveShape.INVERTED
        elif long_rate > short_rate + STEEP_THRESHOLD:
            return CurveShape.STEEP_NORMAL
        elif long_rate > short_rate + NORMAL_THRESHOLD:
            return CurveShape.NORMAL
        else:
            return CurveShape.FLAT


__all__ = [
    "CurveAnalytics",
    "CurveShape",
    "SHORT_MATURITY",
    "MEDIUM_MATURITY",
    "LONG_MATURITY",
]
