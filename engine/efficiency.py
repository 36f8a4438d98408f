"""Revenue lost to slow suite turnaround (operational leak check)"""
from dataclasses import dataclass
from .capacity import cycles_per_unit

@dataclass(frozen=True)
class TurnaroundLeak:
    avg_turnaround: float      # minutes
    potential_sessions: int    # per suite per day at target turnaround
    actual_sessions: int       # per suite per day at observed turnaround
    daily_loss: float
    annual_loss: float
    leak_detected: bool

def average_turnaround(samples) -> float:
    """Mean of logged turnaround times, skipping missing entries"""
    valid = [s for s in samples if s is not None]
    return sum(valid) / len(valid) if valid else 0.0

def turnaround_leak(avg_turnaround_minutes: float,
                    target_turnaround_minutes: float = 1.5,
                    service_duration_minutes: float = 30.0,
                    window_minutes: float = 720.0,
                    session_price: float = 85.0) -> TurnaroundLeak:
    """
    Compare sessions per day at the target turnaround vs the observed average.

    Defaults: 90-second target, 30-minute sessions, 12h day, $85/session.
    """
    potential = cycles_per_unit(window_minutes, service_duration_minutes, target_turnaround_minutes)
    actual = cycles_per_unit(window_minutes, service_duration_minutes, avg_turnaround_minutes)

    daily_loss = (potential - actual) * session_price
    return TurnaroundLeak(
        avg_turnaround=avg_turnaround_minutes,
        potential_sessions=potential,
        actual_sessions=actual,
        daily_loss=daily_loss,
        annual_loss=daily_loss * 365,
        leak_detected=avg_turnaround_minutes > target_turnaround_minutes,
    )
