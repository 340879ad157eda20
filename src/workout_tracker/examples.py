"""The three literal workouts printed by the entry point."""

from __future__ import annotations

from datetime import timedelta

from workout_tracker.models.activities import Running, Swimming, Walking
from workout_tracker.models.enums import (
    ACTIVITY_LABELS,
    LEN_STEP,
    SWIMMING_LEN_STEP,
    ActivityType,
)
from workout_tracker.models.training import CaloriesCalculator, WorkoutBase


def example_swimming() -> Swimming:
    return Swimming(
        training=WorkoutBase(
            activity_label=ACTIVITY_LABELS[ActivityType.SWIMMING],
            repetition_count=2000,
            step_length=SWIMMING_LEN_STEP,
            duration=timedelta(minutes=90),
            weight_kg=85,
        ),
        pool_length_m=50,
        pool_crossings=5,
    )


def example_walking() -> Walking:
    return Walking(
        training=WorkoutBase(
            activity_label=ACTIVITY_LABELS[ActivityType.WALKING],
            repetition_count=20000,
            step_length=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight_kg=85,
        ),
        height_cm=185,
    )


def example_running() -> Running:
    return Running(
        training=WorkoutBase(
            activity_label=ACTIVITY_LABELS[ActivityType.RUNNING],
            repetition_count=5000,
            step_length=LEN_STEP,
            duration=timedelta(minutes=30),
            weight_kg=85,
        ),
    )


def example_workouts() -> tuple[CaloriesCalculator, ...]:
    """Swimming, walking and running, in print order."""
    return (example_swimming(), example_walking(), example_running())
