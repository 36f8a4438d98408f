"""Space rent and fixed operating expenses"""
from dataclasses import dataclass
from .models import ScenarioInput

@dataclass(frozen=True)
class ExpenseBreakdown:
    rent: float
    labor: float
    utilities: float

    @property
    def total(self) -> float:
        return self.rent + self.labor + self.utilities

    @property
    def fixed(self) -> float:
        # nothing scales with session volume in this model
        return self.total

def calculate_monthly_rent(area_units: float, cost_per_unit_per_year: float) -> float:
    """
    Calculate monthly rent from an annual per-square-foot rate

    Args:
        area_units: Leased floor area (sq ft)
        cost_per_unit_per_year: Annual rent per sq ft

    Returns:
        Monthly rent amount
    """
    annual_rent = area_units * cost_per_unit_per_year
    return annual_rent / 12.0

def monthly_expenses(inp: ScenarioInput) -> ExpenseBreakdown:
    return ExpenseBreakdown(
        rent=calculate_monthly_rent(inp.floor_area_units, inp.area_cost_per_unit_per_year),
        labor=inp.labor_cost_per_month,
        utilities=inp.utilities_cost_per_month,
    )
