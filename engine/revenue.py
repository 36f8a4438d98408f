from dataclasses import dataclass
from .models import ScenarioInput

DAYS_PER_MONTH = 30  # flat 30-day month, not calendar-accurate

# Every stream is exactly one of fixed (independent of utilization) or variable
REVENUE_STREAM_CLASS = {
    "metered": "variable",
    "secondary": "variable",
    "subscription": "fixed",
    "sponsorship": "fixed",
}

@dataclass(frozen=True)
class RevenueBreakdown:
    metered: float
    secondary: float
    subscription: float
    sponsorship: float

    def _sum_class(self, kind: str) -> float:
        return sum(getattr(self, s) for s, c in REVENUE_STREAM_CLASS.items() if c == kind)

    @property
    def fixed(self) -> float:
        return self._sum_class("fixed")

    @property
    def variable(self) -> float:
        return self._sum_class("variable")

    @property
    def total(self) -> float:
        return self.metered + self.secondary + self.subscription + self.sponsorship

def metered_revenue_month(sessions_per_day: int, price_metered: float) -> float:
    """Paid suite sessions over a 30-day month"""
    return sessions_per_day * DAYS_PER_MONTH * price_metered

def secondary_revenue_month(sessions_per_day: int, price_per_session: float) -> float:
    """Retail/attach spend per visit over a 30-day month"""
    return sessions_per_day * DAYS_PER_MONTH * price_per_session

def subscription_revenue_month(subscribers: int, fee: float) -> float:
    return subscribers * fee

def sponsorship_revenue_month(sponsors: int, fee: float) -> float:
    return sponsors * fee

def monthly_revenue(sessions_per_day: int, inp: ScenarioInput) -> RevenueBreakdown:
    return RevenueBreakdown(
        metered=metered_revenue_month(sessions_per_day, inp.price_metered),
        secondary=secondary_revenue_month(sessions_per_day, inp.price_secondary_per_session),
        subscription=subscription_revenue_month(inp.subscriber_count, inp.subscription_fee),
        sponsorship=sponsorship_revenue_month(inp.sponsor_count, inp.sponsor_fee),
    )
