"""Shared workout record and the capability interface every activity implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta

from workout_tracker.exceptions import WorkoutValidationError
from workout_tracker.math import metrics
from workout_tracker.models.summary import ActivitySummary

_SECONDS_IN_MINUTE = 60
_SECONDS_IN_HOUR = 3600


def check_non_negative(field_name: str, value: float) -> None:
    """Raise WorkoutValidationError if *value* is below zero."""
    if value < 0:
        raise WorkoutValidationError(field_name, value)


def check_positive(field_name: str, value: float) -> None:
    """Raise WorkoutValidationError unless *value* is above zero."""
    if value <= 0:
        raise WorkoutValidationError(field_name, value, "must be positive")


class CaloriesCalculator(ABC):
    """Capability shared by all workouts: a calorie total and a summary.

    The report builder accepts any implementation and merges the two.
    """

    @abstractmethod
    def compute_calories(self) -> float:
        """Calories burned during the workout, in kcal."""
        ...

    @abstractmethod
    def build_summary(self) -> ActivitySummary:
        """Draft summary of the workout.

        The calorie field of the draft is not guaranteed to be filled; the
        report builder overwrites it with ``compute_calories()``.
        """
        ...


@dataclass(frozen=True)
class WorkoutBase(CaloriesCalculator):
    """Raw inputs common to every activity.

    ``step_length`` is the distance of one repetition (a step or a stroke)
    in metres. A zero ``duration`` is allowed; speed then reads as 0.
    """

    activity_label: str
    repetition_count: int
    step_length: float
    duration: timedelta
    weight_kg: float

    def __post_init__(self) -> None:
        check_non_negative("repetition_count", self.repetition_count)
        check_non_negative("step_length", self.step_length)
        check_non_negative("weight_kg", self.weight_kg)

    def duration_hours(self) -> float:
        return self.duration.total_seconds() / _SECONDS_IN_HOUR

    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / _SECONDS_IN_MINUTE

    def distance_km(self) -> float:
        return metrics.calculate_distance_km(self.repetition_count, self.step_length)

    def avg_speed_kmh(self) -> float:
        return metrics.calculate_mean_speed_kmh(self.distance_km(), self.duration_hours())

    def compute_calories(self) -> float:
        """Fallback for the capability contract; activities supply the real formula."""
        return 0.0

    def build_summary(self) -> ActivitySummary:
        return ActivitySummary(
            activity_label=self.activity_label,
            duration=self.duration,
            distance_km=self.distance_km(),
            avg_speed_kmh=self.avg_speed_kmh(),
            calories_kcal=self.compute_calories(),
        )
