"""Break-even utilization solver"""
import logging
from .revenue import DAYS_PER_MONTH

logger = logging.getLogger(__name__)

MIN_RATE = 0.0
MAX_RATE = 100.0

def variable_revenue_potential(capacity: int, price_metered: float,
                               price_secondary: float, demand_multiplier: float = 1.0) -> float:
    """Monthly variable revenue at 100% utilization"""
    return capacity * DAYS_PER_MONTH * (price_metered + price_secondary) * demand_multiplier

def solve_break_even_rate(total_expense: float, fixed_revenue: float,
                          potential: float) -> tuple[float, str]:
    """
    Solve for the utilization percent where revenue equals expense.

    Formula: fixed + (u/100) * potential = expense → u = (expense - fixed) / potential * 100
    Rounding of realized sessions is ignored so the equation stays linear.

    The result is clamped to [0, 100] for display; the warning says which
    bound was hit. No variable revenue at all returns 0, with a warning
    when fixed revenue does not cover expenses.

    Returns: (break_even_rate, warning_message)
    """
    if potential <= 0:
        if total_expense > fixed_revenue:
            return 0.0, "WARN: No per-session revenue; break-even not reachable by utilization"
        return 0.0, ""

    rate = (total_expense - fixed_revenue) / potential * 100.0

    warning = ""
    if rate < MIN_RATE:
        warning = f"WARN: Fixed revenue covers expenses at any utilization ({rate:.1f}%), clamping"
        rate = MIN_RATE
    elif rate > MAX_RATE:
        warning = f"WARN: Break-even needs {rate:.1f}% utilization, not achievable; clamping"
        rate = MAX_RATE

    if warning:
        logger.debug(warning)
    return rate, warning

def break_even_utilization(inp, capacity: int, revenue, expenses) -> tuple[float, str]:
    """Break-even rate for a scenario given its capacity and revenue/expense breakdowns"""
    potential = variable_revenue_potential(
        capacity, inp.price_metered, inp.price_secondary_per_session, inp.demand_multiplier
    )
    return solve_break_even_rate(expenses.total, revenue.fixed, potential)
