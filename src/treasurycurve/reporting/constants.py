"""
Fixed report contents.

Dashboards and downstream tooling key off these names, so they are part of
the output contract: (start, end) maturities in years for each named
spread and forward.
"""

from typing import Dict, Tuple

DATA_SOURCE = "Federal Reserve H.15 Selected Interest Rates"
SOURCE_URL = "https://www.federalreserve.gov/releases/h15/"

# Console summary
NAMED_SPREADS: Dict[str, Tuple[float, float]] = {
    "2s10s": (2.0, 10.0),
    "3m10y": (0.25, 10.0),
    "5s30s": (5.0, 30.0),
}

NAMED_FORWARDS: Dict[str, Tuple[float, float]] = {
    "1y1y": (1.0, 2.0),
    "2y1y": (2.0, 3.0),
    "5y5y": (5.0, 10.0),
}

# JSON export adds the money-market and long-end points
EXPORT_SPREADS: Dict[str, Tuple[float, float]] = {
    **NAMED_SPREADS,
    "1m3m": (1.0 / 12.0, 0.25),
}

EXPORT_FORWARDS: Dict[str, Tuple[float, float]] = {
    **NAMED_FORWARDS,
    "10y10y": (10.0, 20.0),
}

# Tenors tabulated in the interest rate risk section
RISK_TABLE_TENORS: Dict[str, float] = {
    "2Y": 2.0,
    "5Y": 5.0,
    "10Y": 10.0,
    "30Y": 30.0,
}

# CSV forward_1y is only reported from this maturity out
FORWARD_1Y_MIN_MATURITY = 1.0

BPS_PER_PERCENT = 100.0
