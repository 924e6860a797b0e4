"""
Unit tests for curve analytics.
"""

import math

import pytest

from treasurycurve.curves import (
    CurveAnalytics,
    CurveShape,
    CurveStore,
    LinearInterpolator,
    YieldPoint,
)


def make_analytics(points, curve_date="2024-01-02"):
    store = CurveStore(curve_date, [YieldPoint(m, y, label) for m, y, label in points])
    return CurveAnalytics(store)


@pytest.fixture
def scenario_curve():
    """Four-point curve with an inverted 2s10s."""
    return make_analytics([
        (0.25, 5.00, "3MO"),
        (2.0, 4.50, "2Y"),
        (10.0, 4.20, "10Y"),
        (30.0, 4.60, "30Y"),
    ])


class TestLinearInterpolator:
    """Tests for the linear interpolator."""

    def test_exact_points(self):
        interp = LinearInterpolator().fit([0.25, 2.0, 10.0], [5.0, 4.5, 4.2])
        assert interp(2.0) == 4.5
        assert interp(2.0 + 5e-7) == 4.5

    def test_single_point_is_flat(self):
        interp = LinearInterpolator().fit([5.0], [3.0])
        assert interp(0.1) == 3.0
        assert interp(7.0) == 3.0

    def test_unfitted_raises(self):
        with pytest.raises(RuntimeError):
            LinearInterpolator().interpolate(1.0)

    def test_fit_validates_lengths(self):
        with pytest.raises(ValueError):
            LinearInterpolator().fit([1.0, 2.0], [4.0])
        with pytest.raises(ValueError):
            LinearInterpolator().fit([], [])


class TestYieldAt:
    """Tests for yield_at."""

    def test_empty_store_returns_zero(self):
        analytics = CurveAnalytics(CurveStore())
        assert analytics.yield_at(5.0) == 0.0

    def test_grid_points_exact(self, scenario_curve):
        for point in scenario_curve.points():
            assert scenario_curve.yield_at(point.maturity) == point.yield_

    def test_one_month_grid_point_exact(self):
        analytics = make_analytics([(1.0 / 12.0, 4.17, "1MO"), (0.25, 4.02, "3MO")])
        assert analytics.yield_at(1.0 / 12.0) == 4.17
        assert analytics.yield_at(0.0833333) == 4.17

    def test_flat_extrapolation(self, scenario_curve):
        assert scenario_curve.yield_at(0.0) == 5.00
        assert scenario_curve.yield_at(0.1) == 5.00
        assert scenario_curve.yield_at(30.5) == 4.60
        assert scenario_curve.yield_at(100.0) == 4.60

    def test_linear_interpolation(self, scenario_curve):
        m1, y1, m2, y2 = 2.0, 4.50, 10.0, 4.20
        for m in (3.0, 5.0, 7.5, 9.9):
            expected = y1 + (y2 - y1) * (m - m1) / (m2 - m1)
            assert scenario_curve.yield_at(m) == pytest.approx(expected, abs=1e-12)

    def test_midpoint(self, scenario_curve):
        assert scenario_curve.yield_at(20.0) == pytest.approx(4.40)

    def test_reload_is_seen(self, scenario_curve):
        scenario_curve.store.replace("2024-02-01", [YieldPoint(1.0, 2.0, "1Y")])
        assert scenario_curve.yield_at(10.0) == 2.0
        assert scenario_curve.date() == "2024-02-01"


class TestForwardRate:
    """Tests for forward rates."""

    def test_flat_curve_forward_equals_spot(self):
        analytics = make_analytics([(1.0, 4.0, "1Y"), (5.0, 4.0, "5Y"), (10.0, 4.0, "10Y")])
        assert analytics.forward_rate(1.0, 5.0) == pytest.approx(4.0)

    def test_compounding_identity(self, scenario_curve):
        y1 = scenario_curve.yield_at(2.0) / 100
        y2 = scenario_curve.yield_at(10.0) / 100
        expected = (((1 + y2) ** 10.0 / (1 + y1) ** 2.0) ** (1 / 8.0) - 1) * 100

        assert scenario_curve.forward_rate(2.0, 10.0) == pytest.approx(expected)
        assert scenario_curve.forward_rate(2.0, 10.0) < 4.20

    def test_from_zero(self, scenario_curve):
        """A forward starting today is the spot yield."""
        assert scenario_curve.forward_rate(0.0, 2.0) == pytest.approx(4.50)

    def test_invalid_range_returns_zero(self, scenario_curve):
        assert scenario_curve.forward_rate(5.0, 5.0) == 0.0
        assert scenario_curve.forward_rate(10.0, 2.0) == 0.0

    def test_invalid_range_optional(self, scenario_curve):
        assert scenario_curve.forward_rate_or_none(5.0, 5.0) is None
        assert scenario_curve.forward_rate_or_none(10.0, 2.0) is None
        assert scenario_curve.forward_rate_or_none(2.0, 10.0) is not None

    def test_domain_error_returns_zero(self):
        """A yield below -100% leaves no real forward."""
        analytics = make_analytics([(1.0, -150.0, "1Y"), (2.5, 4.0, "2.5Y")])
        assert analytics.forward_rate_or_none(1.0, 2.5) is None
        assert analytics.forward_rate(1.0, 2.5) == 0.0

    def test_zero_growth_base_returns_zero(self):
        analytics = make_analytics([(1.0, -100.0, "1Y"), (2.0, 4.0, "2Y")])
        assert analytics.forward_rate(1.0, 2.0) == 0.0

    def test_empty_store_forward(self):
        analytics = CurveAnalytics(CurveStore())
        assert analytics.forward_rate(1.0, 2.0) == 0.0


class TestDuration:
    """Tests for the duration approximation."""

    def test_zero_coupon_equals_maturity(self, scenario_curve):
        assert scenario_curve.duration(10.0) == 10.0
        assert scenario_curve.duration(0.25, coupon_rate=0.0) == 0.25

    def test_coupon_approximation(self, scenario_curve):
        assert scenario_curve.duration(10.0, coupon_rate=4.0) == pytest.approx(10.0 / 1.042)

    def test_coupon_at_minus_hundred(self):
        analytics = make_analytics([(1.0, -100.0, "1Y")])
        assert math.isinf(analytics.duration(1.0, coupon_rate=5.0))


class TestSpread:
    """Tests for spreads."""

    def test_2s10s(self, scenario_curve):
        assert scenario_curve.spread(2.0, 10.0) == pytest.approx(-0.30)

    def test_spread_matches_yields(self, scenario_curve):
        for m1, m2 in ((0.25, 10.0), (3.0, 17.0), (30.0, 1.0)):
            expected = scenario_curve.yield_at(m2) - scenario_curve.yield_at(m1)
            assert scenario_curve.spread(m1, m2) == expected

    def test_spread_antisymmetric(self, scenario_curve):
        assert scenario_curve.spread(5.0, 30.0) == -scenario_curve.spread(30.0, 5.0)


class TestClassifyShape:
    """Tests for curve shape classification."""

    def test_insufficient_data(self):
        analytics = make_analytics([(0.25, 5.0, "3MO"), (30.0, 4.0, "30Y")])
        assert analytics.classify_shape() == CurveShape.INSUFFICIENT_DATA
        assert analytics.classify_shape() == "Insufficient Data"

    def test_humped(self):
        analytics = make_analytics([(0.25, 5.0, "3MO"), (5.0, 3.0, "5Y"), (30.0, 4.8, "30Y")])
        assert analytics.classify_shape() == "Humped"

    def test_scenario_curve_is_humped(self, scenario_curve):
        # 5Y interpolates to 4.3875; both 3M (5.00) and 30Y (4.60) clear it by 20bp
        assert scenario_curve.classify_shape() == CurveShape.HUMPED

    def test_inverted(self):
        analytics = make_analytics([(0.25, 5.0, "3MO"), (5.0, 4.7, "5Y"), (30.0, 4.5, "30Y")])
        assert analytics.classify_shape() == CurveShape.INVERTED

    def test_steep_normal(self):
        analytics = make_analytics([(0.25, 1.0, "3MO"), (5.0, 2.0, "5Y"), (30.0, 3.0, "30Y")])
        assert analytics.classify_shape() == CurveShape.STEEP_NORMAL

    def test_normal(self):
        analytics = make_analytics([(0.25, 4.0, "3MO"), (5.0, 4.1, "5Y"), (30.0, 4.3, "30Y")])
        assert analytics.classify_shape() == CurveShape.NORMAL

    def test_flat(self):
        analytics = make_analytics([(0.25, 4.0, "3MO"), (5.0, 4.0, "5Y"), (30.0, 4.05, "30Y")])
        assert analytics.classify_shape() == CurveShape.FLAT

    def test_hump_checked_before_inversion(self):
        """Both ends above the belly wins even when short > long."""
        analytics = make_analytics([(0.25, 5.5, "3MO"), (5.0, 3.0, "5Y"), (30.0, 4.0, "30Y")])
        assert analytics.classify_shape() == CurveShape.HUMPED
