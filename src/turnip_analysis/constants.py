"""Centralized constants for turnip pattern analysis."""

# Half-day price slots in a week: Monday AM through Saturday PM.
HALF_DAYS_PER_WEEK = 12

HALF_DAY_LABELS = [
    "mon_am", "mon_pm",
    "tue_am", "tue_pm",
    "wed_am", "wed_pm",
    "thu_am", "thu_pm",
    "fri_am", "fri_pm",
    "sat_am", "sat_pm",
]

# Sunday buy price range produced by the game.
MIN_BASE_PRICE = 90
MAX_BASE_PRICE = 110

# Slack applied when comparing price factors against phase bounds.
# Bounds are computed in floating point, so exact edges would otherwise
# be rejected by rounding error.
FLOAT_TOLERANCE = 0.0001
