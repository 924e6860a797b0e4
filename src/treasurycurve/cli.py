"""
Treasury yield curve command line interface.

Usage:
    treasurycurve CSV_FILE [--tenors {legacy,live}] [--date DATE]
                  [--output-dir DIR] [--log-level LEVEL] COMMAND [ARGS]

Options go before COMMAND and may come before or after CSV_FILE.

Commands:
    analyze       Full console report plus JSON and CSV exports
    summary       Quick market summary
    forward T1 T2 Implied forward rate between two maturities (years)
    spread M1 M2  Yield spread M2 - M1 in basis points
    export-json   Write dashboard JSON
    export-csv    Write per-point analysis CSV
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .curves import CurveAnalytics, CurveStore
from .ingest import load_curve_csv
from .indicators import recession_warning, spread_2s10s
from .reporting import (
    ReportFormatter,
    build_curve_report,
    export_to_csv,
    export_to_json,
)
from .reporting.constants import BPS_PER_PERCENT
from .tenors import TENOR_SETS, get_tenor_set

LOGGER = logging.getLogger(__name__)

DEFAULT_CSV = "treasury_yields_live.csv"
JSON_FILENAME = "live_yield_curve_data.json"
CSV_FILENAME = "live_yield_analysis.csv"

# 2s10s alert level on the summary screen, bps
SUMMARY_ALERT_BPS = -20.0


def cmd_analyze(analytics: CurveAnalytics, args: argparse.Namespace) -> int:
    report = build_curve_report(analytics, detailed=True)
    print(ReportFormatter().format_report(report))

    if not args.no_export:
        output_dir = Path(args.output_dir)
        json_path = export_to_json(analytics, output_dir / JSON_FILENAME)
        csv_path = export_to_csv(analytics, output_dir / CSV_FILENAME, detailed=True)
        print(f"\nDashboard data: {json_path}")
        print(f"Analysis CSV: {csv_path}")
    return 0


def cmd_summary(analytics: CurveAnalytics, args: argparse.Namespace) -> int:
    print(f"\nQuick market summary ({analytics.date()})")
    print("-" * 30)
    for label, maturity in (("3M", 0.25), ("2Y", 2.0), ("10Y", 10.0), ("30Y", 30.0)):
        print(f"  {label:>4}: {analytics.yield_at(maturity):.2f}%")

    spread_bps = spread_2s10s(analytics) * BPS_PER_PERCENT
    if spread_bps < SUMMARY_ALERT_BPS:
        status = "RECESSION ALERT"
    elif spread_bps < 0:
        status = "INVERTED"
    else:
        status = "NORMAL"
    print(f"\n2s10s Spread: {spread_bps:.0f} bps {status}")
    print(f"Shape: {analytics.classify_shape().value}")
    return 0


def cmd_forward(analytics: CurveAnalytics, args: argparse.Namespace) -> int:
    fwd = analytics.forward_rate_or_none(args.start, args.end)
    if fwd is None:
        print(f"No forward rate from {args.start}Y to {args.end}Y "
              "(end must be after start and yields above -100%)")
        return 1

    print(f"Forward rate from {args.start}Y to {args.end}Y: {fwd:.2f}%")
    print(f"Market expects {fwd:.2f}% {args.end - args.start:g}-year rate in {args.start:g} years")
    return 0


def cmd_spread(analytics: CurveAnalytics, args: argparse.Namespace) -> int:
    spread = analytics.spread(args.first, args.second)
    print(f"Yield spread ({args.second}Y - {args.first}Y): {spread * BPS_PER_PERCENT:.0f} basis points")

    if abs(args.first - 2.0) < 0.1 and abs(args.second - 10.0) < 0.1 and recession_warning(analytics):
        print("WARNING: This is the key recession indicator!")
    return 0


def cmd_export_json(analytics: CurveAnalytics, args: argparse.Namespace) -> int:
    path = export_to_json(analytics, Path(args.output_dir) / JSON_FILENAME)
    print(f"Dashboard data exported to {path}")
    return 0


def cmd_export_csv(analytics: CurveAnalytics, args: argparse.Namespace) -> int:
    path = export_to_csv(analytics, Path(args.output_dir) / CSV_FILENAME, detailed=args.detailed)
    print(f"Analysis exported to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treasurycurve",
        description="US Treasury yield curve analysis",
    )
    parser.add_argument(
        "csv_file",
        help=f"Yield CSV file, e.g. {DEFAULT_CSV}",
    )
    parser.add_argument(
        "--tenors",
        choices=sorted(TENOR_SETS),
        default="live",
        help="Tenor columns of the CSV file",
    )
    parser.add_argument(
        "--date",
        default="",
        help="Load the first row whose date contains this text (default: last row)",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Output directory for exports",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Full analysis with exports")
    analyze.add_argument("--no-export", action="store_true", help="Skip JSON/CSV exports")
    analyze.set_defaults(func=cmd_analyze)

    summary = sub.add_parser("summary", help="Quick market summary")
    summary.set_defaults(func=cmd_summary)

    forward = sub.add_parser("forward", help="Implied forward rate")
    forward.add_argument("start", type=float, help="Start maturity in years")
    forward.add_argument("end", type=float, help="End maturity in years")
    forward.set_defaults(func=cmd_forward)

    spread = sub.add_parser("spread", help="Yield spread in basis points")
    spread.add_argument("first", type=float, help="First maturity in years")
    spread.add_argument("second", type=float, help="Second maturity in years")
    spread.set_defaults(func=cmd_spread)

    export_json = sub.add_parser("export-json", help="Write dashboard JSON")
    export_json.set_defaults(func=cmd_export_json)

    export_csv = sub.add_parser("export-csv", help="Write per-point CSV")
    export_csv.add_argument("--detailed", action="store_true", help="Add DV01 and risk level columns")
    export_csv.set_defaults(func=cmd_export_csv)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = CurveStore()
    try:
        loaded = load_curve_csv(
            store, args.csv_file, date_filter=args.date, tenors=get_tenor_set(args.tenors)
        )
    except FileNotFoundError:
        LOGGER.error("Could not open file %s", args.csv_file)
        return 1

    if not loaded:
        LOGGER.error("Failed to load yield curve data from %s", args.csv_file)
        return 1

    return args.func(CurveAnalytics(store), args)


if __name__ == "__main__":
    sys.exit(main())
