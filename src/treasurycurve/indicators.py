"""
Economic indicators read off the yield curve.

Provides:
- Recession warning and steepness from the 2s10s spread
- Market regime from the 3m10y slope
- Policy rate proxy (1M yield) and the policy outlook from the 3M->15M forward
- Forward expectations: near (3M->15M), medium (1Y->3Y), long (5Y->10Y)
- Short-end (3M-1Y) and long-end (10Y-30Y) yield volatility spreads
- Term premium (30Y - 10Y) and its level
- Duration risk bands and approximate DV01

Spreads and thresholds are in percentage points.
"""

from typing import Any, Dict

from .curves.analytics import CurveAnalytics


# 2s10s thresholds
RECESSION_SPREAD = -0.2
STEEP_SPREAD = 1.0
INVERTED_SPREAD = -0.1
FLATTENING_SPREAD = 0.5

# 3m10y regime thresholds
DEEP_INVERSION_SLOPE = -0.5
FLAT_SLOPE = 0.5
VERY_STEEP_SLOPE = 2.0

# 1M yield stands in for the policy rate
POLICY_RATE_MATURITY = 1.0 / 12.0

# Forward windows (start, end) in years
FORWARD_WINDOWS = {
    "near_term": (0.25, 1.25),
    "medium_term": (1.0, 3.0),
    "long_term": (5.0, 10.0),
}

# Forward vs spot policy thresholds
AGGRESSIVE_CUT_GAP = 0.5
POLICY_MOVE_GAP = 0.1

# Term premium levels
LOW_TERM_PREMIUM = 0.2
HIGH_TERM_PREMIUM = 0.8

# Duration bands (years) for risk levels
RISK_BANDS = (
    (2.0, "LOW"),
    (7.0, "MODERATE"),
    (15.0, "HIGH"),
)
TOP_RISK_LEVEL = "VERY HIGH"

# DV01 per $10,000 face, per year of duration
DV01_PER_DURATION = 100.0


def spread_2s10s(analytics: CurveAnalytics) -> float:
    return analytics.spread(2.0, 10.0)


def recession_warning(analytics: CurveAnalytics) -> bool:
    """True when the 2s10s spread is inverted by more than 20bp."""
    return spread_2s10s(analytics) < RECESSION_SPREAD


def curve_steepness(analytics: CurveAnalytics) -> str:
    """
    Dashboard steepness flag from the 2s10s spread.

    "steep" above 100bp, "inverted" below -10bp, otherwise "flat".
    """
    spread = spread_2s10s(analytics)
    if spread > STEEP_SPREAD:
        return "steep"
    elif spread < INVERTED_SPREAD:
        return "inverted"
    return "flat"


def recession_signal(analytics: CurveAnalytics) -> str:
    """Console label for the 2s10s spread."""
    spread = spread_2s10s(analytics)
    if spread < RECESSION_SPREAD:
        return "RECESSION WARNING"
    elif spread < 0:
        return "INVERTED"
    elif spread < FLATTENING_SPREAD:
        return "FLATTENING"
    return "NORMAL"


def term_premium(analytics: CurveAnalytics) -> float:
    """30Y yield minus 10Y yield."""
    return analytics.spread(10.0, 30.0)


def term_premium_level(premium: float) -> str:
    if premium < LOW_TERM_PREMIUM:
        return "LOW"
    elif premium > HIGH_TERM_PREMIUM:
        return "HIGH"
    return "NORMAL"


def market_regime(analytics: CurveAnalytics) -> str:
    """Regime label from the 3m10y slope."""
    slope = analytics.spread(0.25, 10.0)
    if slope < DEEP_INVERSION_SLOPE:
        return "DEEPLY INVERTED"
    elif slope < 0:
        return "INVERTED"
    elif slope < FLAT_SLOPE:
        return "FLAT"
    elif slope > VERY_STEEP_SLOPE:
        return "VERY STEEP"
    return "NORMAL"


def policy_rate(analytics: CurveAnalytics) -> float:
    """1M yield as a proxy for the policy rate."""
    return analytics.yield_at(POLICY_RATE_MATURITY)


def forward_expectations(analytics: CurveAnalytics) -> Dict[str, float]:
    """Near, medium and long-term forward rates in percent."""
    return {
        name: analytics.forward_rate(t1, t2)
        for name, (t1, t2) in FORWARD_WINDOWS.items()
    }


def short_end_volatility(analytics: CurveAnalytics) -> float:
    """|3M - 1Y| in percentage points."""
    return abs(analytics.spread(0.25, 1.0))


def long_end_volatility(analytics: CurveAnalytics) -> float:
    """|10Y - 30Y| in percentage points."""
    return abs(analytics.spread(10.0, 30.0))


def policy_outlook(analytics: CurveAnalytics) -> str:
    """
    Expected policy path from the 3M->15M forward against the 3M yield.
    """
    near_forward = analytics.forward_rate(*FORWARD_WINDOWS["near_term"])
    current_short = analytics.yield_at(0.25)

    if near_forward < current_short - AGGRESSIVE_CUT_GAP:
        return "AGGRESSIVE CUTS"
    elif near_forward < current_short - POLICY_MOVE_GAP:
        return "MODEST CUTS"
    elif near_forward > current_short + POLICY_MOVE_GAP:
        return "HIKES"
    return "STABLE"


def risk_level(duration: float) -> str:
    """Risk band for a duration in years."""
    for upper, level in RISK_BANDS:
        if duration < upper:
            return level
    return TOP_RISK_LEVEL


def dv01(duration: float) -> float:
    """Approximate DV01 in dollars for $10,000 face."""
    return duration * DV01_PER_DURATION


def market_snapshot(analytics: CurveAnalytics) -> Dict[str, Any]:
    """All indicators for the resident curve."""
    premium = term_premium(analytics)
    forwards = forward_expectations(analytics)
    return {
        "curve_shape": analytics.classify_shape().value,
        "spread_2s10s": spread_2s10s(analytics),
        "recession_warning": recession_warning(analytics),
        "recession_signal": recession_signal(analytics),
        "curve_steepness": curve_steepness(analytics),
        "market_regime": market_regime(analytics),
        "policy_rate": policy_rate(analytics),
        "policy_outlook": policy_outlook(analytics),
        "near_term_forward": forwards["near_term"],
        "medium_term_forward": forwards["medium_term"],
        "long_term_forward": forwards["long_term"],
        "short_end_volatility": short_end_volatility(analytics),
        "long_end_volatility": long_end_volatility(analytics),
        "term_premium": premium,
        "term_premium_level": term_premium_level(premium),
    }


__all__ = [
    "spread_2s10s",
    "recession_warning",
    "curve_steepness",
    "recession_signal",
    "term_premium",
    "term_premium_level",
    "market_regime",
    "policy_rate",
    "forward_expectations",
    "short_end_volatility",
    "long_end_volatility",
    "policy_outlook",
    "risk_level",
    "dv01",
    "market_snapshot",
]
