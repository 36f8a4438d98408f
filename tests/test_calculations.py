"""Test dashboard helpers: input building, utilization sweep, summary export"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.default_params import SCENARIO_DEFAULTS, SCENARIO_PRESETS, BOOST_CHANNEL_MULTIPLIER
from engine.models import ScenarioInput
from engine.compute import compute_scenario
from utils.calculations import (
    build_input, params_from_input, utilization_sweep,
    scenario_summary_frame, make_summary_excel, SUMMARY_LABELS
)

def test_build_input_converts_units():
    """Hours open and turnaround seconds become minutes"""
    inp = build_input(SCENARIO_DEFAULTS)
    assert inp.operating_window_minutes_per_day == 840.0
    assert inp.turnaround_minutes == 5.0
    assert inp == ScenarioInput()

def test_build_input_boost_channel():
    inp = build_input({'boost_channel': True})
    assert inp.demand_multiplier == BOOST_CHANNEL_MULTIPLIER

def test_presets_build_valid_inputs():
    for name, preset in SCENARIO_PRESETS.items():
        inp = build_input(preset)
        assert inp.validate() == [], name
        compute_scenario(inp)

def test_params_round_trip():
    inp = ScenarioInput(turnaround_minutes=1.5, operating_window_minutes_per_day=720)
    assert build_input(params_from_input(inp)) == inp

def test_utilization_sweep_rows_and_monotonic_profit():
    df = utilization_sweep(ScenarioInput())
    assert len(df) == 21
    assert df['utilization'].iloc[0] == 0
    assert df['utilization'].iloc[-1] == 100
    # at 0% only fixed revenue remains
    assert df['revenue'].iloc[0] == 12_350.0
    assert df['profit'].is_monotonic_increasing
    assert (df['expense'] == df['expense'].iloc[0]).all()

def test_summary_frame_and_excel():
    inp = ScenarioInput()
    res = compute_scenario(inp)
    summary = scenario_summary_frame(res)
    assert len(summary) == len(SUMMARY_LABELS)
    assert list(summary.columns) == ['Metric', 'Value']
    assert summary.loc[summary['Metric'] == 'Daily Sessions', 'Value'].iloc[0] == 86

    xlsx = make_summary_excel(inp, res)
    assert xlsx[:2] == b"PK"

def test_custom_multiplier_survives_round_trip():
    """Multipliers other than off/boost are kept, not snapped to 1.0 or 1.10"""
    for multiplier in (1.05, 0.8, 1.0, BOOST_CHANNEL_MULTIPLIER):
        inp = ScenarioInput(demand_multiplier=multiplier)
        assert build_input(params_from_input(inp)).demand_multiplier == multiplier

def test_boost_maps_back_to_checkbox():
    params = params_from_input(ScenarioInput(demand_multiplier=BOOST_CHANNEL_MULTIPLIER))
    assert params['boost_channel'] is True
    assert params['demand_multiplier'] is None
    assert params_from_input(ScenarioInput(demand_multiplier=1.05))['demand_multiplier'] == 1.05
