"""
TreasuryCurve: US Treasury Yield Curve Analytics

A small library for:
- Loading daily Treasury yield observations (H.15 style CSV files)
- Querying the curve: interpolated yields, forward rates, duration, spreads
- Classifying curve shape and reading economic indicators
- Console reports plus JSON/CSV exports for dashboards

Scope: a single as-of date per curve; linear interpolation only.
"""

__version__ = "0.1.0"

# Tenor vocabularies
from .tenors import (
    TenorSet,
    LEGACY_TENORS,
    LIVE_TENORS,
    get_tenor_set,
    tenor_to_years,
)

# Curves
from .curves import (
    YieldPoint,
    CurveStore,
    CurveAnalytics,
    CurveShape,
    LinearInterpolator,
)

# Ingestion
from .ingest import read_curve_rows, load_curve_csv

# Indicators
from .indicators import market_snapshot

# Reporting
from .reporting import (
    CurveReport,
    ReportFormatter,
    build_curve_report,
    build_dashboard_payload,
    build_analysis_frame,
    export_to_json,
    export_to_csv,
)

__all__ = [
    # Version
    "__version__",
    # Tenors
    "TenorSet",
    "LEGACY_TENORS",
    "LIVE_TENORS",
    "get_tenor_set",
    "tenor_to_years",
    # Curves
    "YieldPoint",
    "CurveStore",
    "CurveAnalytics",
    "CurveShape",
    "LinearInterpolator",
    # Ingestion
    "read_curve_rows",
    "load_curve_csv",
    # Indicators
    "market_snapshot",
    # Reporting
    "CurveReport",
    "ReportFormatter",
    "build_curve_report",
    "build_dashboard_payload",
    "build_analysis_frame",
    "export_to_json",
    "export_to_csv",
]
