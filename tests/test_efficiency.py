"""Test the turnaround efficiency leak check"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from engine.efficiency import average_turnaround, turnaround_leak

def test_average_turnaround_skips_missing():
    assert average_turnaround([1.0, None, 3.0]) == 2.0
    assert average_turnaround([]) == 0.0
    assert average_turnaround([None, None]) == 0.0

def test_leak_detected_with_lost_sessions():
    """5 min turnaround vs 1.5 min target over a 12h day"""
    leak = turnaround_leak(5.0)
    # floor(720/31.5) = 22 vs floor(720/35) = 20
    assert leak.potential_sessions == 22
    assert leak.actual_sessions == 20
    assert leak.daily_loss == 2 * 85
    assert leak.annual_loss == 2 * 85 * 365
    assert leak.leak_detected

def test_slow_turnaround_without_lost_sessions():
    """Over target but still the same whole sessions: flagged, no loss"""
    leak = turnaround_leak(2.5)
    assert leak.potential_sessions == leak.actual_sessions == 22
    assert leak.annual_loss == 0
    assert leak.leak_detected

def test_on_target_no_leak():
    leak = turnaround_leak(1.0)
    assert not leak.leak_detected
    assert leak.daily_loss <= 0
