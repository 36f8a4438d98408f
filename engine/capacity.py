"""Daily session capacity from suites, hours open and cycle time"""
import logging
import math

logger = logging.getLogger(__name__)


class InvalidCycleTime(ValueError):
    """Service duration plus turnaround is zero, so a cycle is not a real session."""


def cycle_time_minutes(service_duration_minutes: float, turnaround_minutes: float) -> float:
    return service_duration_minutes + turnaround_minutes

def cycles_per_unit(window_minutes: float, service_duration_minutes: float,
                    turnaround_minutes: float) -> int:
    """Full cycles one unit completes in the window; a trailing partial cycle is dropped."""
    cycle = cycle_time_minutes(service_duration_minutes, turnaround_minutes)
    if cycle <= 0:
        raise InvalidCycleTime(f"cycle time must be positive, got {cycle}")
    return int(math.floor(window_minutes / cycle))

def daily_capacity(unit_count: int, window_minutes: float,
                   service_duration_minutes: float, turnaround_minutes: float) -> int:
    """
    Maximum sessions per day across all units.

    A zero cycle time resolves to capacity 0 instead of dividing by zero.
    """
    try:
        cycles = cycles_per_unit(window_minutes, service_duration_minutes, turnaround_minutes)
    except InvalidCycleTime as exc:
        logger.warning("Treating capacity as 0: %s", exc)
        return 0
    return cycles * int(unit_count)
