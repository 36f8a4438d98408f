"""Test the leaf components: units, capacity, demand, revenue, rent, metrics"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from engine.models import ScenarioInput
from engine.units import TimeUnit, to_minutes, from_minutes
from engine.capacity import InvalidCycleTime, cycle_time_minutes, cycles_per_unit, daily_capacity
from engine.demand import round_half_up, realized_sessions
from engine.revenue import (
    DAYS_PER_MONTH, REVENUE_STREAM_CLASS, RevenueBreakdown, monthly_revenue,
    metered_revenue_month, secondary_revenue_month
)
from engine.rent import calculate_monthly_rent, monthly_expenses
from engine.metrics import monthly_profit, annualize, profit_margin

def test_to_minutes_units():
    """Test conversion of hours, minutes and seconds to minutes"""
    assert to_minutes(14, "hours") == 840.0
    assert to_minutes(300, "seconds") == 5.0
    assert to_minutes(90, TimeUnit.SECONDS) == 1.5
    assert to_minutes(30, TimeUnit.MINUTES) == 30.0

def test_from_minutes_inverts_to_minutes():
    assert from_minutes(840, "hours") == 14.0
    assert from_minutes(1.5, "seconds") == 90.0
    assert from_minutes(to_minutes(7.5, "hours"), "hours") == 7.5

def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        to_minutes(1, "fortnights")

def test_cycles_drop_partial_cycle():
    """840 min / 35 min cycle = 24 exactly; 850 min still gives 24 full cycles"""
    assert cycle_time_minutes(30, 5) == 35
    assert cycles_per_unit(840, 30, 5) == 24
    assert cycles_per_unit(850, 30, 5) == 24
    assert cycles_per_unit(30, 30, 5) == 0

def test_daily_capacity_scales_with_units():
    assert daily_capacity(8, 840, 30, 5) == 192
    assert daily_capacity(1, 840, 30, 5) == 24
    assert daily_capacity(0, 840, 30, 5) == 0

def test_zero_cycle_time_resolves_to_zero_capacity():
    """A zero-length cycle raises internally but capacity resolves to 0"""
    with pytest.raises(InvalidCycleTime):
        cycles_per_unit(840, 0, 0)
    assert daily_capacity(8, 840, 0, 0) == 0

def test_round_half_up_not_bankers():
    """Python's round() sends 2.5 to 2; sessions round .5 up"""
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(86.4) == 86
    assert round_half_up(86.6) == 87

def test_realized_sessions():
    assert realized_sessions(192, 45) == 86
    assert realized_sessions(10, 25) == 3
    assert realized_sessions(192, 0) == 0
    assert realized_sessions(0, 100, 1.1) == 0

def test_realized_sessions_not_clamped_to_capacity():
    """Boost multiplier can push volume over nominal capacity"""
    assert realized_sessions(192, 100, 1.10) == 211
    assert realized_sessions(192, 100, 1.10) > 192

def test_revenue_streams():
    inp = ScenarioInput()
    rev = monthly_revenue(86, inp)
    assert DAYS_PER_MONTH == 30
    assert abs(rev.metered - 90_300.0) < 1e-6
    assert abs(rev.secondary - 30_960.0) < 1e-6
    assert abs(rev.subscription - 7_350.0) < 1e-6
    assert abs(rev.sponsorship - 5_000.0) < 1e-6
    assert abs(rev.total - 133_610.0) < 1e-6
    assert metered_revenue_month(1, 10) == 300
    assert secondary_revenue_month(2, 5) == 300

def test_revenue_decomposition_disjoint_and_exhaustive():
    """Every stream is exactly one of fixed/variable and the two sum to the total"""
    assert set(REVENUE_STREAM_CLASS) == {"metered", "secondary", "subscription", "sponsorship"}
    assert set(REVENUE_STREAM_CLASS.values()) == {"fixed", "variable"}
    rev = RevenueBreakdown(metered=100.0, secondary=20.0, subscription=7.0, sponsorship=3.0)
    assert rev.variable == 120.0
    assert rev.fixed == 10.0
    assert rev.fixed + rev.variable == rev.total

def test_monthly_rent_from_annual_psf():
    assert abs(calculate_monthly_rent(2500, 65) - 13_541.6667) < 0.001
    assert calculate_monthly_rent(0, 65) == 0.0

def test_monthly_expenses_all_fixed():
    exp = monthly_expenses(ScenarioInput())
    assert abs(exp.total - 27_041.6667) < 0.001
    assert exp.labor == 12000
    assert exp.utilities == 1500
    assert exp.fixed == exp.total

def test_profitability_metrics():
    assert monthly_profit(100.0, 120.0) == -20.0
    assert annualize(-20.0) == -240.0
    assert profit_margin(25.0, 100.0) == 25.0
    assert profit_margin(-20.0, 100.0) == -20.0

def test_margin_guard_zero_revenue():
    """No revenue gives a 0% margin, never NaN or infinity"""
    assert profit_margin(-500.0, 0.0) == 0.0
    assert profit_margin(0.0, 0.0) == 0.0
