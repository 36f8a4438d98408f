"""
Suite Scenario Model - Revenue Simulator
A minimal Streamlit interface that uses the engine as the single source of truth
"""

import logging

import streamlit as st

from config.default_params import SCENARIO_DEFAULTS, SCENARIO_PRESETS
from config.settings import configure_logging, store_path, owner_id
from engine.compute import compute_scenario
from engine.models import ScenarioInputError
from utils.calculations import build_input, params_from_input
from utils.store import JsonFileScenarioStore, ScenarioStoreError
from components.projections_tab import render_projections_tab
from components.efficiency_tab import render_efficiency_tab

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Suite Revenue Simulator",
    page_icon="📈",
    layout="wide"
)


@st.cache_resource
def get_store():
    return JsonFileScenarioStore(store_path())


def load_saved_params():
    """Load the owner's saved scenario once per session."""
    if 'saved_params' not in st.session_state:
        try:
            saved = get_store().load(owner_id())
        except ScenarioStoreError as exc:
            st.error(f"Could not load saved scenario: {exc}")
            saved = None
        st.session_state['saved_params'] = params_from_input(saved) if saved else None
    return st.session_state['saved_params']


def get_params_from_ui():
    """Build sidebar-style params from widgets"""
    st.sidebar.header("⚙️ Assumptions")

    saved = load_saved_params()
    preset_options = (["Saved"] if saved else []) + list(SCENARIO_PRESETS)
    preset = st.sidebar.selectbox(
        "Scenario",
        preset_options,
        index=0 if saved else preset_options.index("Balanced"),
        help="Start from your saved scenario or a preset"
    )
    d = dict(SCENARIO_DEFAULTS)
    d.update(saved if preset == "Saved" else SCENARIO_PRESETS[preset])

    st.sidebar.subheader("🏢 Suite Operations")
    suites = st.sidebar.number_input("Suites", 0, 100, int(d['suites']))
    hours_open = st.sidebar.number_input("Hours Open per Day", 0.0, 24.0, float(d['hours_open']), 0.5)
    avg_duration = st.sidebar.number_input("Session Length (min)", 0.0, 240.0, float(d['avg_duration']), 5.0)
    turnaround_seconds = st.sidebar.number_input(
        "Turnaround (seconds)", 0.0, 3600.0, float(d['turnaround_seconds']), 10.0
    )
    occupancy_rate = st.sidebar.slider("Occupancy Rate (%)", 0, 100, int(round(d['occupancy_rate'])))
    demand_multiplier = None
    boost_channel = False
    if d.get('demand_multiplier') is not None:
        # saved multiplier the checkbox cannot express; keep it editable as-is
        demand_multiplier = st.sidebar.number_input(
            "Demand Multiplier", 0.0, 5.0, float(d['demand_multiplier']), 0.05,
            help="Can push daily sessions above nominal capacity"
        )
        st.sidebar.caption("Saved scenario uses a custom demand multiplier.")
    else:
        boost_channel = st.sidebar.checkbox(
            "Transit integration (+10% occupancy)", bool(d['boost_channel']),
            help="Can push daily sessions above nominal capacity"
        )

    st.sidebar.subheader("💰 Pricing")
    avg_price = st.sidebar.number_input("Price per Session", 0.0, 1000.0, float(d['avg_price']), 1.0)
    retail = st.sidebar.number_input("Retail Spend per Visit", 0.0, 500.0, float(d['retail_spend_per_visit']), 1.0)

    st.sidebar.subheader("👥 Recurring Revenue")
    members = st.sidebar.number_input("Active Members", 0, 100_000, int(d['active_members']))
    monthly_fee = st.sidebar.number_input("Monthly Fee", 0.0, 5000.0, float(d['monthly_fee']), 1.0)
    partners = st.sidebar.number_input("Brand Partners", 0, 100, int(d['brand_partners']))
    partner_fee = st.sidebar.number_input("Fee per Partner (monthly)", 0.0, 1_000_000.0, float(d['fee_per_partner']), 500.0)

    st.sidebar.subheader("🏠 Real Estate & Expenses")
    sq_ft = st.sidebar.number_input("Total Sq Ft", 0.0, 100_000.0, float(d['total_sq_ft']), 100.0)
    rent_psf = st.sidebar.number_input("Rent ($/sq ft/year)", 0.0, 1000.0, float(d['rent_per_sq_ft']), 1.0)
    staff = st.sidebar.number_input("Staff Cost (monthly)", 0.0, 1_000_000.0, float(d['monthly_staff_cost']), 500.0)
    utilities = st.sidebar.number_input("Utilities (monthly)", 0.0, 100_000.0, float(d['monthly_utilities']), 100.0)

    return {
        'suites': suites,
        'hours_open': hours_open,
        'avg_duration': avg_duration,
        'turnaround_seconds': turnaround_seconds,
        'occupancy_rate': occupancy_rate,
        'boost_channel': boost_channel,
        'demand_multiplier': demand_multiplier,
        'avg_price': avg_price,
        'retail_spend_per_visit': retail,
        'active_members': members,
        'monthly_fee': monthly_fee,
        'brand_partners': partners,
        'fee_per_partner': partner_fee,
        'total_sq_ft': sq_ft,
        'rent_per_sq_ft': rent_psf,
        'monthly_staff_cost': staff,
        'monthly_utilities': utilities,
    }


def save_scenario(inp):
    try:
        get_store().save(owner_id(), inp)
    except ScenarioStoreError as exc:
        st.error(f"Save failed: {exc}")
        return
    st.session_state['saved_params'] = params_from_input(inp)
    st.success("Scenario saved.")


def main():
    st.title("📈 Suite Revenue Simulator")
    st.caption("Capacity, revenue and break-even projection")

    params = get_params_from_ui()
    inp = build_input(params)

    # SINGLE call to engine; recomputed in full on every change
    try:
        res = compute_scenario(inp)
    except ScenarioInputError as exc:
        logger.warning("Rejected assumptions: %s", exc)
        st.error(f"Invalid assumptions: {exc}")
        st.stop()

    if st.sidebar.button("💾 Save Scenario"):
        save_scenario(inp)

    tab1, tab2 = st.tabs(["📊 Projection", "⏱️ Efficiency"])
    with tab1:
        render_projections_tab(inp, res)
    with tab2:
        render_efficiency_tab()


if __name__ == "__main__":
    main()
