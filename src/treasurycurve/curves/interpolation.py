"""
Linear interpolation on curve yields.

Yields are interpolated directly in percent against maturity in years,
with flat extrapolation beyond the first and last nodes. Grid maturities
are returned verbatim so that stored quotes never pick up interpolation
rounding.
"""

from typing import Optional
import numpy as np


# Distance within which a query maturity is treated as a stored node
EXACT_MATCH_TOL = 1e-6
# Brackets narrower than this are treated as a single node
DEGENERATE_BRACKET_TOL = 1e-9


class LinearInterpolator:
    """
    Linear interpolation.

    Simple linear interpolation between knot points.
    Extrapolates flat beyond boundaries.
    """

    def __init__(self):
        self.times: Optional[np.ndarray] = None
        self.values: Optional[np.ndarray] = None

    def fit(self, times: np.ndarray, values: np.ndarray) -> "LinearInterpolator":
        """
        Fit the interpolator to data points.

        Args:
            times: Maturities in years
            values: Yields in percent

        A single point is allowed and gives a flat curve.
        """
        if len(times) != len(values):
            raise ValueError("Times and values must have same length")
        if len(times) < 1:
            raise ValueError("Need at least 1 point for interpolation")

        # Sort by time
        idx = np.argsort(times, kind="stable")
        self.times = np.asarray(times, dtype=np.float64)[idx]
        self.values = np.asarray(values, dtype=np.float64)[idx]
        return self

    def interpolate(self, t: float) -> float:
        """Linear interpolation with exact-node lookup and flat extrapolation."""
        if self.times is None:
            raise RuntimeError("Interpolator not fitted")

        hits = np.flatnonzero(np.abs(self.times - t) < EXACT_MATCH_TOL)
        if hits.size:
            return float(self.values[hits[0]])

        if t <= self.times[0]:
            return float(self.values[0])
        if t >= self.times[-1]:
            return float(self.values[-1])

        # Find bracket
        idx = np.searchsorted(self.times, t, side='right') - 1
        idx = max(0, min(idx, len(self.times) - 2))

        t0, t1 = self.times[idx], self.times[idx + 1]
        v0, v1 = self.values[idx], self.values[idx + 1]

        if abs(t1 - t0) < DEGENERATE_BRACKET_TOL:
            return float(v0)
        return float(v0 + (v1 - v0) * (t - t0) / (t1 - t0))

    def __call__(self, t: float) -> float:
        """Convenience method to call interpolate."""
        return self.interpolate(t)


__all__ = [
    "LinearInterpolator",
    "EXACT_MATCH_TOL",
    "DEGENERATE_BRACKET_TOL",
]
