"""Turnaround efficiency tab component."""

import streamlit as st

from config.default_params import EFFICIENCY_DEFAULTS
from engine.efficiency import turnaround_leak


def render_efficiency_tab():
    """Render the turnaround leak check."""
    col1, col2 = st.columns([1, 2])

    with col1:
        st.header("Turnaround")
        avg_seconds = st.slider("Average turnaround (seconds)", 0, 900, 150, step=10)
        target_seconds = st.slider(
            "Target turnaround (seconds)", 0, 300,
            int(EFFICIENCY_DEFAULTS['target_turnaround_minutes'] * 60), step=10
        )
        session_price = st.number_input(
            "Session price", 0.0, 500.0, float(EFFICIENCY_DEFAULTS['session_price']), 1.0
        )

    leak = turnaround_leak(
        avg_seconds / 60.0,
        target_turnaround_minutes=target_seconds / 60.0,
        service_duration_minutes=EFFICIENCY_DEFAULTS['service_duration_minutes'],
        window_minutes=EFFICIENCY_DEFAULTS['window_minutes'],
        session_price=session_price,
    )

    with col2:
        st.header("Efficiency Leak")
        m1, m2, m3 = st.columns(3)
        with m1:
            st.metric("Sessions/day at target", leak.potential_sessions)
        with m2:
            st.metric("Sessions/day actual", leak.actual_sessions)
        with m3:
            st.metric("Annual loss", f"${leak.annual_loss:,.0f}")
        if leak.leak_detected:
            st.error(f"Leak detected: average turnaround {leak.avg_turnaround:.1f} min exceeds target.")
        else:
            st.success("Turnaround is within target.")
        st.caption("Per suite, 30-minute sessions over a 12-hour day.")
