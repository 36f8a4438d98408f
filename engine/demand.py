"""Realized session volume from capacity and utilization"""
import math


def round_half_up(x: float) -> int:
    """Round to the nearest whole number with .5 going up (round() would go to even)"""
    return int(math.floor(x + 0.5))

def realized_sessions(capacity: int, utilization_rate: float, demand_multiplier: float = 1.0) -> int:
    """
    Sessions per day after utilization (percent) and the demand multiplier.

    Not clamped to capacity: a multiplier above 1 can push volume past
    nominal capacity for boosted-throughput scenarios.
    """
    return round_half_up(capacity * (utilization_rate / 100.0) * demand_multiplier)
