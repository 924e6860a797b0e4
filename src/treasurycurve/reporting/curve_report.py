"""
Console reporting for yield curve analysis.

Provides formatted console output for:
- Curve points with duration and DV01
- Named spreads and forward rates
- Economic indicators
- Interest rate risk by key tenor
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from ..curves.analytics import CurveAnalytics
from .. import indicators
from .constants import (
    BPS_PER_PERCENT,
    DATA_SOURCE,
    NAMED_FORWARDS,
    NAMED_SPREADS,
    RISK_TABLE_TENORS,
)


@dataclass
class ReportSection:
    """
    A section of a report.

    Attributes:
        title: Section title
        data: Data (DataFrame or dict)
        notes: Optional notes
    """
    title: str
    data: Union[pd.DataFrame, Dict[str, Any]]
    notes: Optional[str] = None


@dataclass
class CurveReport:
    """
    Complete curve report.

    Attributes:
        curve_date: Date of the resident curve
        title: Report title
        sections: List of report sections
        metadata: Additional metadata
    """
    curve_date: str
    title: str
    sections: List[ReportSection] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_section(
        self,
        title: str,
        data: Union[pd.DataFrame, Dict[str, Any]],
        notes: Optional[str] = None
    ):
        """Add a section to the report."""
        self.sections.append(ReportSection(title, data, notes))

    def get_section(self, title: str) -> Optional[ReportSection]:
        for section in self.sections:
            if section.title == title:
                return section
        return None

    def to_dict(self) -> Dict:
        """Convert entire report to dictionary."""
        result = {
            "curve_date": self.curve_date,
            "title": self.title,
            "metadata": self.metadata,
            "sections": {}
        }

        for section in self.sections:
            if isinstance(section.data, pd.DataFrame):
                result["sections"][section.title] = section.data.to_dict(orient="records")
            else:
                result["sections"][section.title] = section.data

        return result


class ReportFormatter:
    """
    Formats reports for console output.
    """

    def __init__(self, width: int = 60, precision: int = 2):
        """
        Initialize formatter.

        Args:
            width: Console width
            precision: Decimal precision for floats
        """
        self.width = width
        self.precision = precision

    def format_number(self, value: float, precision: Optional[int] = None) -> str:
        """Format a number for display."""
        p = precision if precision is not None else self.precision
        return f"{value:,.{p}f}"

    def format_bp(self, value: float) -> str:
        """Format basis points."""
        return f"{value:.0f} bps"

    def format_percent(self, value: float) -> str:
        """Format a value already in percent."""
        return f"{value:.2f}%"

    def header(self, title: str) -> str:
        """Create a header line."""
        return f"\n{'='*self.width}\n{title.center(self.width)}\n{'='*self.width}\n"

    def subheader(self, title: str) -> str:
        """Create a subheader."""
        return f"\n{title}\n{'-'*self.width}"

    def format_value(self, key: str, value: Any) -> str:
        if isinstance(value, bool):
            return "YES" if value else "NO"
        if isinstance(value, float):
            if key.endswith("(bps)"):
                return self.format_bp(value)
            if key.endswith("(%)"):
                return self.format_percent(value)
            return self.format_number(value)
        return str(value)

    def format_dict(self, data: Dict[str, Any], indent: int = 2) -> str:
        """Format dictionary as key-value pairs."""
        pad = " " * indent
        return "\n".join(f"{pad}{key}: {self.format_value(key, value)}" for key, value in data.items())

    def format_dataframe(self, df: pd.DataFrame, max_rows: int = 50) -> str:
        """Format DataFrame for console."""
        with pd.option_context(
            'display.max_rows', max_rows,
            'display.width', self.width * 2,
            'display.float_format', lambda x: self.format_number(x)
        ):
            return df.to_string(index=False)

    def format_report(self, report: CurveReport) -> str:
        """Format entire report for console."""
        lines = []

        lines.append(self.header(report.title))
        lines.append(f"Curve Date: {report.curve_date}")
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        if report.metadata:
            lines.append(self.format_dict(report.metadata, indent=0))

        for section in report.sections:
            lines.append(self.subheader(section.title))

            if isinstance(section.data, pd.DataFrame):
                lines.append(self.format_dataframe(section.data))
            else:
                lines.append(self.format_dict(section.data))

            if section.notes:
                lines.append(f"\nNote: {section.notes}")

        lines.append(f"\n{'='*self.width}")

        return "\n".join(lines)


def generate_points_table(analytics: CurveAnalytics) -> pd.DataFrame:
    """
    Tabulate the curve points.

    Returns:
        DataFrame with Maturity, Yield (%), Duration and DV01($) columns
    """
    rows = []
    for point in analytics.points():
        duration = analytics.duration(point.maturity)
        rows.append({
            "Maturity": point.label,
            "Yield (%)": point.yield_,
            "Duration": duration,
            "DV01($)": indicators.dv01(duration),
        })
    return pd.DataFrame(rows, columns=["Maturity", "Yield (%)", "Duration", "DV01($)"])


def generate_spread_summary(analytics: CurveAnalytics) -> Dict[str, Any]:
    """Named spreads in basis points, with the 2s10s signal."""
    summary: Dict[str, Any] = {}
    for name, (m1, m2) in NAMED_SPREADS.items():
        summary[f"{name} (bps)"] = analytics.spread(m1, m2) * BPS_PER_PERCENT
    summary["2s10s signal"] = indicators.recession_signal(analytics)
    return summary


def generate_forward_summary(analytics: CurveAnalytics) -> Dict[str, float]:
    """Named forward rates in percent."""
    return {
        f"{name} (%)": analytics.forward_rate(t1, t2)
        for name, (t1, t2) in NAMED_FORWARDS.items()
    }


def generate_indicator_summary(analytics: CurveAnalytics) -> Dict[str, Any]:
    """Economic indicators for the console."""
    snapshot = indicators.market_snapshot(analytics)
    return {
        "Curve Shape": snapshot["curve_shape"],
        "Recession Warning": snapshot["recession_warning"],
        "Market Regime (3m10y)": snapshot["market_regime"],
        "Policy Rate 1M (%)": snapshot["policy_rate"],
        "Policy Outlook": snapshot["policy_outlook"],
        "Near-Term Forward 3M-15M (%)": snapshot["near_term_forward"],
        "Medium-Term Forward 1Y-3Y (%)": snapshot["medium_term_forward"],
        "Long-Term Forward 5Y-10Y (%)": snapshot["long_term_forward"],
        "Short-End Spread 3M-1Y (bps)": snapshot["short_end_volatility"] * BPS_PER_PERCENT,
        "Long-End Spread 10Y-30Y (bps)": snapshot["long_end_volatility"] * BPS_PER_PERCENT,
        "Term Premium (bps)": snapshot["term_premium"] * BPS_PER_PERCENT,
        "Term Premium Level": snapshot["term_premium_level"],
    }


def generate_risk_table(analytics: CurveAnalytics) -> pd.DataFrame:
    """Yield, duration, DV01 and risk band at the key tenors."""
    rows = []
    for label, maturity in RISK_TABLE_TENORS.items():
        duration = analytics.duration(maturity)
        rows.append({
            "Tenor": label,
            "Yield (%)": analytics.yield_at(maturity),
            "Duration": duration,
            "DV01($)": indicators.dv01(duration),
            "Risk Level": indicators.risk_level(duration),
        })
    return pd.DataFrame(rows)


def build_curve_report(analytics: CurveAnalytics, detailed: bool = True) -> CurveReport:
    """
    Assemble the console report for the resident curve.

    Args:
        analytics: Analytics over a loaded store
        detailed: Include indicator and risk sections

    Returns:
        CurveReport ready for ReportFormatter
    """
    report = CurveReport(
        curve_date=analytics.date(),
        title="US Treasury Yield Curve Analysis",
        metadata={"Source": DATA_SOURCE},
    )

    report.add_section(
        "Yield Curve Points",
        generate_points_table(analytics),
        notes="DV01 approximated per $10,000 face value",
    )
    report.add_section("Key Spreads", generate_spread_summary(analytics))
    report.add_section("Implied Forward Rates", generate_forward_summary(analytics))

    if detailed:
        report.add_section("Economic Indicators", generate_indicator_summary(analytics))
        report.add_section("Interest Rate Risk", generate_risk_table(analytics))

    return report


def print_report(report: CurveReport, formatter: Optional[ReportFormatter] = None):
    """
    Print report to console.

    Args:
        report: CurveReport to print
        formatter: Optional custom formatter
    """
    fmt = formatter or ReportFormatter()
    print(fmt.format_report(report))


__all__ = [
    "ReportSection",
    "CurveReport",
    "ReportFormatter",
    "generate_points_table",
    "generate_spread_summary",
    "generate_forward_summary",
    "generate_indicator_summary",
    "generate_risk_table",
    "build_curve_report",
    "print_report",
]
