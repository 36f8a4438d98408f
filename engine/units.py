"""Time unit normalization; capacity math runs in minutes"""
from enum import Enum


class TimeUnit(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"
    SECONDS = "seconds"


# minutes per one unit
_MINUTES_PER = {
    TimeUnit.MINUTES: 1.0,
    TimeUnit.HOURS: 60.0,
    TimeUnit.SECONDS: 1.0 / 60.0,
}


def _unit(unit) -> TimeUnit:
    try:
        return TimeUnit(unit)
    except ValueError:
        raise ValueError(f"Unknown time unit: {unit!r}") from None


def to_minutes(value: float, unit) -> float:
    """Convert `value` expressed in `unit` to minutes"""
    u = _unit(unit)
    if u is TimeUnit.SECONDS:
        return value / 60.0
    return value * _MINUTES_PER[u]


def from_minutes(value: float, unit) -> float:
    """Convert minutes back to `unit` (for display)"""
    u = _unit(unit)
    if u is TimeUnit.SECONDS:
        return value * 60.0
    return value / _MINUTES_PER[u]
