"""Scenario projection tab component."""

from datetime import datetime

import streamlit as st

from utils.calculations import utilization_sweep, scenario_summary_frame, make_summary_excel
from utils.visualizations import create_revenue_mix_chart, create_break_even_chart


def render_projections_tab(inp, res):
    """Render the monthly P&L, break-even chart and downloads for one scenario."""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Monthly Revenue", f"${res.total_monthly_revenue:,.0f}")
        st.caption(f"Annual: ${res.annual_revenue:,.0f}")
    with c2:
        st.metric("Monthly Expenses", f"${res.total_monthly_expense:,.0f}")
        st.caption(f"Rent: ${res.monthly_rent:,.0f}")
    with c3:
        st.metric("Net Profit", f"${res.monthly_profit:,.0f}", f"{res.profit_margin:.1f}% margin")
        st.caption(f"Annual: ${res.annual_profit:,.0f}")
    with c4:
        st.metric("Break-Even Occupancy", f"{res.break_even_utilization:.1f}%")
        st.caption(f"Current: {inp.utilization_rate:.0f}%")

    if res.break_even_warning:
        st.warning(res.break_even_warning)
    if not res.cycle_time_valid:
        st.error("Session length plus turnaround is zero; capacity treated as 0.")

    st.subheader("📊 Capacity")
    cap_cols = st.columns(3)
    with cap_cols[0]:
        st.metric("Daily Capacity", f"{res.daily_capacity_sessions:,}")
    with cap_cols[1]:
        st.metric("Daily Sessions", f"{res.daily_realized_sessions:,}")
    with cap_cols[2]:
        st.metric("Fixed Revenue", f"${res.fixed_monthly_revenue:,.0f}")
    if res.daily_realized_sessions > res.daily_capacity_sessions:
        st.info("Boost pushes sessions above nominal capacity.")

    chart_cols = st.columns(2)
    with chart_cols[0]:
        st.plotly_chart(create_revenue_mix_chart(res), use_container_width=True)
    with chart_cols[1]:
        sweep = utilization_sweep(inp)
        st.plotly_chart(
            create_break_even_chart(sweep, res.break_even_utilization, inp.utilization_rate),
            use_container_width=True
        )

    st.subheader("📋 Summary")
    summary = scenario_summary_frame(res)
    st.dataframe(summary, hide_index=True, use_container_width=True)

    st.download_button(
        "Download Scenario (Excel)",
        data=make_summary_excel(inp, res),
        file_name=f"Scenario_{datetime.now().strftime('%Y%m%d')}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
