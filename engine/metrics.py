def monthly_profit(total_revenue: float, total_expense: float) -> float:
    return total_revenue - total_expense

def annualize(monthly: float) -> float:
    return monthly * 12.0

def profit_margin(profit: float, total_revenue: float) -> float:
    """Profit as a percent of revenue; 0 when there is no revenue"""
    return (profit / total_revenue) * 100.0 if total_revenue > 0 else 0.0
