"""Enumerations and formula constants for workout calculations.

Calorie coefficients are empirical; changing any of them changes
report output.
"""

from enum import IntEnum, auto


class ActivityType(IntEnum):
    """Supported workout kinds."""

    RUNNING = auto()
    WALKING = auto()
    SWIMMING = auto()


# Labels printed in the "Тип тренировки" line of a report
ACTIVITY_LABELS = {
    ActivityType.RUNNING: "Бег",
    ActivityType.WALKING: "Ходьба",
    ActivityType.SWIMMING: "Плавание",
}

# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------
M_IN_KM = 1000
MIN_IN_HOURS = 60
CM_IN_M = 100

# Durations below this many hours are treated as zero for speed division
DURATION_EPSILON_HOURS = 1e-8

# ---------------------------------------------------------------------------
# Per-repetition distances (metres)
# ---------------------------------------------------------------------------
LEN_STEP = 0.65  # walking / running step
SWIMMING_LEN_STEP = 1.38  # one swimming stroke

# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------
CALORIES_MEAN_SPEED_MULTIPLIER = 18
CALORIES_MEAN_SPEED_SHIFT = 1.79

# ---------------------------------------------------------------------------
# Walking
# ---------------------------------------------------------------------------
CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029

# ---------------------------------------------------------------------------
# Swimming
# ---------------------------------------------------------------------------
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2
