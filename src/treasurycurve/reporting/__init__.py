"""
Reporting module for yield curve analytics.

Provides:
- Console reports (formatted tables)
- Dashboard JSON export
- Per-point CSV export
"""

from .curve_report import (
    CurveReport,
    ReportFormatter,
    ReportSection,
    build_curve_report,
    print_report,
)
from .exporters import (
    build_dashboard_payload,
    build_analysis_frame,
    export_to_json,
    export_to_csv,
)


__all__ = [
    "CurveReport",
    "ReportFormatter",
    "ReportSection",
    "build_curve_report",
    "print_report",
    "build_dashboard_payload",
    "build_analysis_frame",
    "export_to_json",
    "export_to_csv",
]
