"""Tests for the shared WorkoutBase record."""

from __future__ import annotations

import dataclasses
from datetime import timedelta

import pytest

from workout_tracker.exceptions import WorkoutValidationError
from workout_tracker.models.summary import ActivitySummary
from workout_tracker.models.training import CaloriesCalculator, WorkoutBase


class TestWorkoutBase:
    def test_distance_and_speed(self, make_training) -> None:
        training = make_training()
        assert training.distance_km() == pytest.approx(3.25)
        assert training.avg_speed_kmh() == pytest.approx(6.5)

    def test_fractional_hours(self, make_training) -> None:
        training = make_training(duration=timedelta(hours=3, minutes=45))
        assert training.duration_hours() == pytest.approx(3.75)
        assert training.duration_minutes() == pytest.approx(225.0)

    def test_zero_duration_speed_is_zero(self, make_training) -> None:
        training = make_training(duration=timedelta(0))
        assert training.avg_speed_kmh() == 0.0

    def test_doubling_repetitions_doubles_distance(self, make_training) -> None:
        single = make_training(repetition_count=3000)
        double = make_training(repetition_count=6000)
        assert double.distance_km() == pytest.approx(2 * single.distance_km())

    def test_default_calories_are_zero(self, make_training) -> None:
        assert make_training().compute_calories() == 0.0

    def test_build_summary_uses_base_fields(self, make_training) -> None:
        summary = make_training().build_summary()
        assert isinstance(summary, ActivitySummary)
        assert summary.activity_label == "Бег"
        assert summary.duration == timedelta(minutes=30)
        assert summary.distance_km == pytest.approx(3.25)
        assert summary.avg_speed_kmh == pytest.approx(6.5)
        assert summary.calories_kcal == 0.0

    def test_satisfies_capability_interface(self, make_training) -> None:
        assert isinstance(make_training(), CaloriesCalculator)

    def test_is_frozen(self, make_training) -> None:
        training = make_training()
        with pytest.raises(dataclasses.FrozenInstanceError):
            training.weight_kg = 90.0  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize(
        "field_name, value",
        [("repetition_count", -1), ("step_length", -0.65), ("weight_kg", -85.0)],
    )
    def test_negative_inputs_rejected(self, make_training, field_name, value) -> None:
        with pytest.raises(WorkoutValidationError) as exc_info:
            make_training(**{field_name: value})
        assert exc_info.value.field_name == field_name
        assert exc_info.value.value == value

    def test_validation_error_is_value_error(self, make_training) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            make_training(repetition_count=-5)

    def test_zero_inputs_allowed(self, make_training) -> None:
        training = make_training(repetition_count=0, weight_kg=0.0, duration=timedelta(0))
        assert training.distance_km() == 0.0
