import logging
from .models import ScenarioInput, ScenarioResult, ScenarioInputError
from .capacity import cycle_time_minutes, daily_capacity
from .demand import realized_sessions
from .revenue import monthly_revenue
from .rent import monthly_expenses
from .metrics import monthly_profit, annualize, profit_margin
from .breakeven import variable_revenue_potential, solve_break_even_rate

logger = logging.getLogger(__name__)

def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))

def compute_scenario(inp: ScenarioInput) -> ScenarioResult:
    """
    Compute the full P&L projection and break-even point for a scenario

    Args:
        inp: Scenario assumptions; must be non-negative

    Raises:
        ScenarioInputError: if any input is negative
    """
    errors = inp.validate()
    if errors:
        raise ScenarioInputError(errors)

    # Capacity and demand
    capacity = daily_capacity(
        inp.resource_unit_count, inp.operating_window_minutes_per_day,
        inp.service_duration_minutes, inp.turnaround_minutes
    )
    utilization = clamp_percent(inp.utilization_rate)
    sessions = realized_sessions(capacity, utilization, inp.demand_multiplier)

    # Revenue / expense
    rev = monthly_revenue(sessions, inp)
    exp = monthly_expenses(inp)

    # Profitability
    profit = monthly_profit(rev.total, exp.total)

    # Break-even (inverse pass over the same fixed/variable split)
    potential = variable_revenue_potential(
        capacity, inp.price_metered, inp.price_secondary_per_session, inp.demand_multiplier
    )
    break_even, warning = solve_break_even_rate(exp.total, rev.fixed, potential)

    logger.debug("capacity=%d realized=%d revenue=%.2f expense=%.2f",
                 capacity, sessions, rev.total, exp.total)

    return ScenarioResult(
        daily_capacity_sessions=capacity,
        daily_realized_sessions=sessions,
        monthly_metered_revenue=rev.metered,
        monthly_secondary_revenue=rev.secondary,
        monthly_subscription_revenue=rev.subscription,
        monthly_sponsorship_revenue=rev.sponsorship,
        total_monthly_revenue=rev.total,
        monthly_rent=exp.rent,
        total_monthly_expense=exp.total,
        monthly_profit=profit,
        annual_profit=annualize(profit),
        profit_margin=profit_margin(profit, rev.total),
        break_even_utilization=break_even,
        annual_revenue=annualize(rev.total),
        annual_expense=annualize(exp.total),
        fixed_monthly_revenue=rev.fixed,
        variable_monthly_revenue=rev.variable,
        variable_revenue_potential=potential,
        cycle_time_valid=cycle_time_minutes(inp.service_duration_minutes, inp.turnaround_minutes) > 0,
        break_even_warning=warning,
    )
