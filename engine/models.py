import math
from dataclasses import dataclass, asdict, fields, replace

# Integer-valued inputs; everything else is a float
INT_FIELDS = ("resource_unit_count", "subscriber_count", "sponsor_count")


class ScenarioInputError(ValueError):
    """Raised when a ScenarioInput has negative or non-finite values."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass(frozen=True)
class ScenarioInput:
    # Capacity (all times in minutes)
    resource_unit_count: int = 8
    operating_window_minutes_per_day: float = 840.0   # 14h
    service_duration_minutes: float = 30.0
    turnaround_minutes: float = 5.0

    # Demand
    utilization_rate: float = 45.0    # percent, 0–100
    demand_multiplier: float = 1.0    # 1.10 with the boost channel on

    # Revenue streams
    price_metered: float = 35.0
    price_secondary_per_session: float = 12.0
    subscriber_count: int = 150
    subscription_fee: float = 49.0
    sponsor_count: int = 1
    sponsor_fee: float = 5000.0

    # Expenses
    floor_area_units: float = 2500.0
    area_cost_per_unit_per_year: float = 65.0
    labor_cost_per_month: float = 12000.0
    utilities_cost_per_month: float = 1500.0

    def validate(self) -> list[str]:
        errors = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                errors.append(f"{f.name} must be a finite number (got {value})")
            elif value < 0:
                errors.append(f"{f.name} cannot be negative (got {value})")
        return errors

    def with_changes(self, **changes) -> "ScenarioInput":
        """Copy with the given fields replaced; this instance is left untouched."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, base: "ScenarioInput" = None) -> "ScenarioInput":
        """
        Build an input from a flat record (e.g. a stored row).

        Missing or None values fall back to `base` (defaults when omitted),
        unknown keys are ignored and numeric strings are coerced.
        """
        base = base if base is not None else cls()
        values = {}
        for f in fields(cls):
            raw = data.get(f.name) if data else None
            if raw is None or raw == "":
                values[f.name] = getattr(base, f.name)
            elif f.name in INT_FIELDS:
                values[f.name] = int(float(raw))
            else:
                values[f.name] = float(raw)
        return cls(**values)


@dataclass(frozen=True)
class ScenarioResult:
    daily_capacity_sessions: int
    daily_realized_sessions: int
    monthly_metered_revenue: float
    monthly_secondary_revenue: float
    monthly_subscription_revenue: float
    monthly_sponsorship_revenue: float
    total_monthly_revenue: float
    monthly_rent: float
    total_monthly_expense: float
    monthly_profit: float
    annual_profit: float
    profit_margin: float             # percent
    break_even_utilization: float    # percent, clamped to [0, 100]

    # Rollups and decomposition shown on the dashboard
    annual_revenue: float = 0.0
    annual_expense: float = 0.0
    fixed_monthly_revenue: float = 0.0
    variable_monthly_revenue: float = 0.0
    variable_revenue_potential: float = 0.0
    cycle_time_valid: bool = True
    break_even_warning: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
