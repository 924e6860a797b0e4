"""
Treasury Yield Curve Dashboard
==============================

Plots a curve exported with `treasurycurve ... export-json` (or analyze).

Features:
- Yield curve with interpolated line
- Key spreads and implied forwards
- Economic indicators and duration risk table

Usage:
    streamlit run dashboard/app.py -- [path/to/live_yield_curve_data.json]
"""

import json
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# Add src to path for importing treasurycurve
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from treasurycurve import CurveAnalytics, CurveStore, YieldPoint
from treasurycurve.indicators import dv01, risk_level


# =============================================================================
# Constants
# =============================================================================

DEFAULT_PAYLOAD = Path(__file__).resolve().parent.parent / "live_yield_curve_data.json"
CURVE_PLOT_POINTS = 200

COLORS = {
    "primary": "#1f77b4",
    "forward": "#ff7f0e",
    "warning": "#d62728",
}

st.set_page_config(
    page_title="Treasury Yield Curve Dashboard",
    page_icon="📈",
    layout="wide",
)


# =============================================================================
# Data Loading Functions
# =============================================================================

@st.cache_data
def load_payload(path: str) -> dict:
    """Load an exported dashboard payload."""
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def payload_to_store(payload: dict) -> CurveStore:
    """Rebuild a store from the exported yield points."""
    points = [
        YieldPoint(
            maturity=float(p["maturity_years"]),
            yield_=float(p["yield"]),
            label=p["maturity_label"],
        )
        for p in payload["yield_points"]
    ]
    return CurveStore(payload["date"], points)


# =============================================================================
# Charts
# =============================================================================

def create_curve_chart(analytics: CurveAnalytics) -> go.Figure:
    """Observed yields with the interpolated curve and 1Y forwards."""
    points = analytics.points()
    grid = np.linspace(points[0].maturity, points[-1].maturity, CURVE_PLOT_POINTS)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=grid,
        y=[analytics.yield_at(t) for t in grid],
        mode="lines",
        name="Interpolated",
        line=dict(color=COLORS["primary"]),
    ))
    fig.add_trace(go.Scatter(
        x=[p.maturity for p in points],
        y=[p.yield_ for p in points],
        mode="markers+text",
        name="Observed",
        text=[p.label for p in points],
        textposition="top center",
        marker=dict(size=9, color=COLORS["primary"]),
    ))

    fwd_grid = [t for t in grid if t >= 1.0 and t + 1.0 <= points[-1].maturity]
    if fwd_grid:
        fig.add_trace(go.Scatter(
            x=fwd_grid,
            y=[analytics.forward_rate(t, t + 1.0) for t in fwd_grid],
            mode="lines",
            name="1Y Forward",
            line=dict(color=COLORS["forward"], dash="dash"),
        ))

    fig.update_layout(
        xaxis_title="Maturity (years)",
        yaxis_title="Yield (%)",
        hovermode="x unified",
        height=450,
    )
    return fig


def risk_table(analytics: CurveAnalytics) -> pd.DataFrame:
    rows = []
    for point in analytics.points():
        duration = analytics.duration(point.maturity)
        rows.append({
            "Maturity": point.label,
            "Yield (%)": round(point.yield_, 2),
            "Duration": round(duration, 2),
            "DV01 ($)": round(dv01(duration)),
            "Risk Level": risk_level(duration),
        })
    return pd.DataFrame(rows)


# =============================================================================
# Layout
# =============================================================================

def main():
    payload_path = sys.argv[1] if len(sys.argv) > 1 else str(DEFAULT_PAYLOAD)
    payload_path = st.sidebar.text_input("Payload file", payload_path)

    if not Path(payload_path).exists():
        st.error(f"Payload not found: {payload_path}. Run `treasurycurve <csv> export-json` first.")
        return

    payload = load_payload(payload_path)
    store = payload_to_store(payload)
    if store.is_empty():
        st.warning("Payload contains no yield points.")
        return
    analytics = CurveAnalytics(store)

    st.title("US Treasury Yield Curve")
    st.caption(f"{payload.get('data_source', '')} | {payload['date']}")

    indicators = payload["economic_indicators"]
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Curve Shape", payload["curve_shape"])
    col2.metric("2s10s", f"{payload['key_spreads']['2s10s_bps']:.0f} bps")
    col3.metric("Term Premium", f"{indicators['term_premium_bps']:.0f} bps")
    col4.metric("Steepness", indicators["curve_steepness"])

    if indicators["recession_warning"]:
        st.error("Recession warning: 2s10s inverted by more than 20bp")

    st.plotly_chart(create_curve_chart(analytics), use_container_width=True)

    left, right = st.columns(2)
    with left:
        st.subheader("Key Spreads (bps)")
        st.dataframe(
            pd.DataFrame(
                [{"Spread": k.replace("_bps", ""), "bps": round(v)} for k, v in payload["key_spreads"].items()]
            ),
            hide_index=True,
        )
        st.subheader("Implied Forwards (%)")
        st.dataframe(
            pd.DataFrame(
                [{"Forward": k, "Rate (%)": round(v, 2)} for k, v in payload["forward_rates"].items()]
            ),
            hide_index=True,
        )
    with right:
        st.subheader("Duration Risk")
        st.dataframe(risk_table(analytics), hide_index=True)


main()
