"""Visualization utilities for the scenario dashboard."""

import plotly.graph_objects as go


def create_revenue_mix_chart(result):
    """Donut of the four monthly revenue streams."""
    labels = ['Suite Sessions', 'Retail', 'Memberships', 'Sponsorships']
    values = [
        result.monthly_metered_revenue,
        result.monthly_secondary_revenue,
        result.monthly_subscription_revenue,
        result.monthly_sponsorship_revenue,
    ]
    fig = go.Figure(go.Pie(labels=labels, values=values, hole=0.5, sort=False))
    fig.update_layout(title='Monthly Revenue Mix', height=380)
    return fig


def create_break_even_chart(sweep_df, break_even_rate, current_rate=None):
    """Revenue vs expense across utilization with the break-even point marked."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=sweep_df['utilization'],
        y=sweep_df['revenue'],
        mode='lines',
        name='Revenue',
        line=dict(color='green', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=sweep_df['utilization'],
        y=sweep_df['expense'],
        mode='lines',
        name='Expenses',
        line=dict(color='red', width=2, dash='dash')
    ))
    fig.add_vline(x=break_even_rate, line_dash="dot", line_color="gray",
                  annotation_text=f"Break-even {break_even_rate:.1f}%")
    if current_rate is not None:
        fig.add_vline(x=current_rate, line_color="blue",
                      annotation_text=f"Current {current_rate:.0f}%",
                      annotation_position="bottom right")
    fig.update_layout(
        title='Break-Even Occupancy',
        xaxis_title='Occupancy (%)',
        yaxis_title='Monthly ($)',
        height=400
    )
    return fig
