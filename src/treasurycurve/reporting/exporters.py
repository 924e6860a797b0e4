"""
File exports for dashboards and further analysis.

JSON payload layout:
    {
      "data_source", "source_url", "date", "curve_shape",
      "yield_points": [{maturity_label, maturity_years, yield, duration}, ...],
      "key_spreads": {"2s10s_bps", "3m10y_bps", "5s30s_bps", "1m3m_bps"},
      "forward_rates": {"1y1y", "2y1y", "5y5y", "10y10y"},
      "economic_indicators": {recession_warning, term_premium_bps, curve_steepness}
    }

CSV columns:
    date, maturity_label, maturity_years, yield, duration, forward_1y
    (+ dv01, risk_level when detailed)
"""

from pathlib import Path
from typing import Any, Dict, Union
import json
import logging

import pandas as pd

from ..curves.analytics import CurveAnalytics
from .. import indicators
from .constants import (
    BPS_PER_PERCENT,
    DATA_SOURCE,
    EXPORT_FORWARDS,
    EXPORT_SPREADS,
    FORWARD_1Y_MIN_MATURITY,
    SOURCE_URL,
)

LOGGER = logging.getLogger(__name__)

CSV_COLUMNS = ["date", "maturity_label", "maturity_years", "yield", "duration", "forward_1y"]
DETAILED_CSV_COLUMNS = CSV_COLUMNS + ["dv01", "risk_level"]


def build_dashboard_payload(analytics: CurveAnalytics) -> Dict[str, Any]:
    """
    Build the dashboard JSON payload for the resident curve.

    Spreads are in basis points; forwards and yields in percent.
    """
    yield_points = [
        {
            **point.to_dict(),
            "duration": analytics.duration(point.maturity),
        }
        for point in analytics.points()
    ]

    key_spreads = {
        f"{name}_bps": analytics.spread(m1, m2) * BPS_PER_PERCENT
        for name, (m1, m2) in EXPORT_SPREADS.items()
    }

    forward_rates = {
        name: analytics.forward_rate(t1, t2)
        for name, (t1, t2) in EXPORT_FORWARDS.items()
    }

    return {
        "data_source": DATA_SOURCE,
        "source_url": SOURCE_URL,
        "date": analytics.date(),
        "curve_shape": analytics.classify_shape().value,
        "yield_points": yield_points,
        "key_spreads": key_spreads,
        "forward_rates": forward_rates,
        "economic_indicators": {
            "recession_warning": indicators.recession_warning(analytics),
            "term_premium_bps": indicators.term_premium(analytics) * BPS_PER_PERCENT,
            "curve_steepness": indicators.curve_steepness(analytics),
        },
    }


def export_to_json(analytics: CurveAnalytics, filepath: Union[str, Path]) -> Path:
    """
    Write the dashboard payload to a JSON file.

    Returns:
        Path of the written file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as fh:
        json.dump(build_dashboard_payload(analytics), fh, indent=2)

    LOGGER.info("Yield curve data exported to %s", path)
    return path


def forward_1y(analytics: CurveAnalytics, maturity: float) -> float:
    """One-year forward starting at maturity, 0.0 inside one year."""
    if maturity >= FORWARD_1Y_MIN_MATURITY:
        return analytics.forward_rate(maturity, maturity + 1.0)
    return 0.0


def build_analysis_frame(analytics: CurveAnalytics, detailed: bool = False) -> pd.DataFrame:
    """
    One row per curve point.

    Args:
        analytics: Analytics over a loaded store
        detailed: Append dv01 and risk_level columns

    Returns:
        DataFrame with CSV_COLUMNS (or DETAILED_CSV_COLUMNS)
    """
    curve_date = analytics.date()
    rows = []

    for point in analytics.points():
        duration = analytics.duration(point.maturity)
        row = {
            "date": curve_date,
            "maturity_label": point.label,
            "maturity_years": point.maturity,
            "yield": point.yield_,
            "duration": duration,
            "forward_1y": forward_1y(analytics, point.maturity),
        }
        if detailed:
            row["dv01"] = indicators.dv01(duration)
            row["risk_level"] = indicators.risk_level(duration)
        rows.append(row)

    columns = DETAILED_CSV_COLUMNS if detailed else CSV_COLUMNS
    return pd.DataFrame(rows, columns=columns)


def export_to_csv(
    analytics: CurveAnalytics,
    filepath: Union[str, Path],
    detailed: bool = False
) -> Path:
    """
    Write the per-point analysis to CSV.

    Returns:
        Path of the written file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    build_analysis_frame(analytics, detailed=detailed).to_csv(path, index=False)

    LOGGER.info("Detailed analysis exported to %s", path)
    return path


__all__ = [
    "CSV_COLUMNS",
    "DETAILED_CSV_COLUMNS",
    "build_dashboard_payload",
    "export_to_json",
    "forward_1y",
    "build_analysis_frame",
    "export_to_csv",
]
