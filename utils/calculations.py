"""Shared calculation helpers for the dashboard."""

from io import BytesIO

import numpy as np
import pandas as pd

from config.default_params import SCENARIO_DEFAULTS, BOOST_CHANNEL_MULTIPLIER
from engine.compute import compute_scenario
from engine.models import ScenarioInput
from engine.units import to_minutes, from_minutes


def is_standard_multiplier(multiplier):
    """True for the two values the boost checkbox can express (off / on)."""
    return multiplier in (1.0, BOOST_CHANNEL_MULTIPLIER)


def demand_multiplier_from_params(p):
    """An explicit multiplier wins; otherwise the boost checkbox decides."""
    if p.get('demand_multiplier') is not None:
        return float(p['demand_multiplier'])
    return BOOST_CHANNEL_MULTIPLIER if p['boost_channel'] else 1.0


def build_input(params):
    """Build a ScenarioInput from sidebar-style params (hours open, turnaround in seconds)."""
    p = dict(SCENARIO_DEFAULTS)
    p.update({k: v for k, v in params.items() if v is not None})

    return ScenarioInput(
        resource_unit_count=int(p['suites']),
        operating_window_minutes_per_day=to_minutes(p['hours_open'], 'hours'),
        service_duration_minutes=float(p['avg_duration']),
        turnaround_minutes=to_minutes(p['turnaround_seconds'], 'seconds'),
        utilization_rate=float(p['occupancy_rate']),
        demand_multiplier=demand_multiplier_from_params(p),
        price_metered=float(p['avg_price']),
        price_secondary_per_session=float(p['retail_spend_per_visit']),
        subscriber_count=int(p['active_members']),
        subscription_fee=float(p['monthly_fee']),
        sponsor_count=int(p['brand_partners']),
        sponsor_fee=float(p['fee_per_partner']),
        floor_area_units=float(p['total_sq_ft']),
        area_cost_per_unit_per_year=float(p['rent_per_sq_ft']),
        labor_cost_per_month=float(p['monthly_staff_cost']),
        utilities_cost_per_month=float(p['monthly_utilities']),
    )


def params_from_input(inp):
    """Inverse of build_input, for seeding the sidebar from a saved scenario."""
    return {
        'suites': inp.resource_unit_count,
        'hours_open': from_minutes(inp.operating_window_minutes_per_day, 'hours'),
        'avg_duration': inp.service_duration_minutes,
        'turnaround_seconds': from_minutes(inp.turnaround_minutes, 'seconds'),
        'occupancy_rate': inp.utilization_rate,
        'boost_channel': inp.demand_multiplier == BOOST_CHANNEL_MULTIPLIER,
        'demand_multiplier': None if is_standard_multiplier(inp.demand_multiplier) else inp.demand_multiplier,
        'avg_price': inp.price_metered,
        'retail_spend_per_visit': inp.price_secondary_per_session,
        'active_members': inp.subscriber_count,
        'monthly_fee': inp.subscription_fee,
        'brand_partners': inp.sponsor_count,
        'fee_per_partner': inp.sponsor_fee,
        'total_sq_ft': inp.floor_area_units,
        'rent_per_sq_ft': inp.area_cost_per_unit_per_year,
        'monthly_staff_cost': inp.labor_cost_per_month,
        'monthly_utilities': inp.utilities_cost_per_month,
    }


def utilization_sweep(inp, step=5):
    """Recompute the scenario across utilization 0..100% in `step` increments."""
    rows = []
    for rate in np.arange(0, 100 + step, step):
        rate = float(min(rate, 100.0))
        res = compute_scenario(inp.with_changes(utilization_rate=rate))
        rows.append({
            'utilization': rate,
            'sessions_per_day': res.daily_realized_sessions,
            'revenue': res.total_monthly_revenue,
            'expense': res.total_monthly_expense,
            'profit': res.monthly_profit,
        })
    return pd.DataFrame(rows).drop_duplicates(subset='utilization').reset_index(drop=True)


SUMMARY_LABELS = [
    ('daily_capacity_sessions', 'Daily Capacity (sessions)'),
    ('daily_realized_sessions', 'Daily Sessions'),
    ('monthly_metered_revenue', 'Suite Revenue (monthly)'),
    ('monthly_secondary_revenue', 'Retail Revenue (monthly)'),
    ('monthly_subscription_revenue', 'Membership Revenue (monthly)'),
    ('monthly_sponsorship_revenue', 'Sponsorship Revenue (monthly)'),
    ('total_monthly_revenue', 'Total Revenue (monthly)'),
    ('monthly_rent', 'Rent (monthly)'),
    ('total_monthly_expense', 'Total Expenses (monthly)'),
    ('monthly_profit', 'Net Profit (monthly)'),
    ('annual_revenue', 'Revenue (annual)'),
    ('annual_expense', 'Expenses (annual)'),
    ('annual_profit', 'Net Profit (annual)'),
    ('profit_margin', 'Profit Margin %'),
    ('break_even_utilization', 'Break-Even Occupancy %'),
]


def scenario_summary_frame(result):
    """Two-column Metric/Value table of a ScenarioResult."""
    values = result.to_dict()
    return pd.DataFrame(
        [{'Metric': label, 'Value': values[key]} for key, label in SUMMARY_LABELS]
    )


def make_summary_excel(inp, result):
    """Excel workbook with the assumptions and the projection on separate sheets."""
    assumptions = pd.DataFrame(
        [{'Assumption': k, 'Value': v} for k, v in inp.to_dict().items()]
    )
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as xw:
        assumptions.to_excel(xw, index=False, sheet_name="Assumptions")
        scenario_summary_frame(result).to_excel(xw, index=False, sheet_name="Projection")
    bio.seek(0)
    return bio.read()
