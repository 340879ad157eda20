"""Fitness metrics for running, walking and swimming workouts."""

from workout_tracker.models import (
    ActivitySummary,
    ActivityType,
    CaloriesCalculator,
    Running,
    Swimming,
    Walking,
    WorkoutBase,
)
from workout_tracker.report import build_summary, read_data, render_summary

__all__ = [
    "ActivitySummary",
    "ActivityType",
    "CaloriesCalculator",
    "Running",
    "Swimming",
    "Walking",
    "WorkoutBase",
    "build_summary",
    "read_data",
    "render_summary",
]
