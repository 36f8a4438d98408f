"""Default parameters for the suite scenario model."""

# Sidebar defaults as the operator authors them (hours / seconds, not minutes)
SCENARIO_DEFAULTS = {
    # Suite operations
    'suites': 8,
    'hours_open': 14,
    'avg_duration': 30,          # minutes
    'turnaround_seconds': 300,
    'occupancy_rate': 45,        # percent
    'boost_channel': False,
    'demand_multiplier': None,   # explicit multiplier overrides boost_channel
    # Pricing
    'avg_price': 35,
    'retail_spend_per_visit': 12,
    # Recurring revenue
    'active_members': 150,
    'monthly_fee': 49,
    'brand_partners': 1,
    'fee_per_partner': 5000,
    # Real estate & expenses
    'total_sq_ft': 2500,
    'rent_per_sq_ft': 65,        # per year
    'monthly_staff_cost': 12000,
    'monthly_utilities': 1500,
}

# Transit/app integration lifts occupancy by 10%
BOOST_CHANNEL_MULTIPLIER = 1.10

SCENARIO_PRESETS = {
    'Conservative': {'occupancy_rate': 30, 'turnaround_seconds': 600, 'active_members': 80, 'brand_partners': 0},
    'Balanced': {'occupancy_rate': 45, 'turnaround_seconds': 300, 'active_members': 150, 'brand_partners': 1},
    'Optimized': {'occupancy_rate': 65, 'turnaround_seconds': 90, 'active_members': 250, 'brand_partners': 2},
}

# Turnaround leak check (admin dashboard)
EFFICIENCY_DEFAULTS = {
    'target_turnaround_minutes': 1.5,   # 90 seconds
    'service_duration_minutes': 30,
    'window_minutes': 720,              # 12h day
    'session_price': 85,
}
