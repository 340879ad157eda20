"""Concrete activities: running, walking and swimming.

Each activity wraps a WorkoutBase in its ``training`` field and supplies
its own calorie formula. Swimming also replaces the speed formula used for
its calories.
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_tracker.math import metrics
from workout_tracker.models.summary import ActivitySummary
from workout_tracker.models.training import (
    CaloriesCalculator,
    WorkoutBase,
    check_non_negative,
    check_positive,
)


@dataclass(frozen=True)
class _Activity(CaloriesCalculator):
    """Delegates the shared measurements to the wrapped WorkoutBase."""

    training: WorkoutBase

    @property
    def activity_label(self) -> str:
        return self.training.activity_label

    @property
    def weight_kg(self) -> float:
        return self.training.weight_kg

    def duration_hours(self) -> float:
        return self.training.duration_hours()

    def distance_km(self) -> float:
        return self.training.distance_km()

    def avg_speed_kmh(self) -> float:
        return self.training.avg_speed_kmh()

    def build_summary(self) -> ActivitySummary:
        # Calories stay at the WorkoutBase default until the report builder
        # merges compute_calories() in.
        return self.training.build_summary()


@dataclass(frozen=True)
class Running(_Activity):
    """Running workout: no inputs beyond the shared record."""

    def compute_calories(self) -> float:
        return metrics.running_calories(
            self.avg_speed_kmh(), self.weight_kg, self.duration_hours()
        )


@dataclass(frozen=True)
class Walking(_Activity):
    """Walking workout; calories depend on the walker's height."""

    height_cm: float

    def __post_init__(self) -> None:
        # Height is a divisor in the calorie formula
        check_positive("height_cm", self.height_cm)

    def compute_calories(self) -> float:
        # Known deviation from the published walking formula, see walking_calories
        return metrics.walking_calories(
            self.avg_speed_kmh(), self.weight_kg, self.height_cm, self.duration_hours()
        )


@dataclass(frozen=True)
class Swimming(_Activity):
    """Pool swimming workout.

    Speed comes from pool length × crossings in truncating integer
    arithmetic. The summary still reports the stroke-based distance and
    speed of the shared record.
    """

    pool_length_m: int
    pool_crossings: int

    def __post_init__(self) -> None:
        check_non_negative("pool_length_m", self.pool_length_m)
        check_non_negative("pool_crossings", self.pool_crossings)

    def avg_speed_kmh(self) -> float:
        return metrics.calculate_swimming_speed_kmh(
            self.pool_length_m, self.pool_crossings, self.duration_hours()
        )

    def compute_calories(self) -> float:
        return metrics.swimming_calories(
            self.avg_speed_kmh(), self.weight_kg, self.duration_hours()
        )
