"""Data models for workout calculations."""

from workout_tracker.models.activities import Running, Swimming, Walking
from workout_tracker.models.enums import ACTIVITY_LABELS, ActivityType
from workout_tracker.models.summary import ActivitySummary
from workout_tracker.models.training import CaloriesCalculator, WorkoutBase

__all__ = [
    "ACTIVITY_LABELS",
    "ActivitySummary",
    "ActivityType",
    "CaloriesCalculator",
    "Running",
    "Swimming",
    "Walking",
    "WorkoutBase",
]
