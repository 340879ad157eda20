"""Shared test fixtures: the example workouts and a WorkoutBase factory."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable

import pytest

from workout_tracker.examples import example_running, example_swimming, example_walking
from workout_tracker.models.activities import Running, Swimming, Walking
from workout_tracker.models.training import WorkoutBase


@pytest.fixture
def make_training() -> Callable[..., WorkoutBase]:
    """Factory for WorkoutBase with sensible defaults (30 min run, 85 kg)."""

    def _make(**overrides) -> WorkoutBase:
        defaults = {
            "activity_label": "Бег",
            "repetition_count": 5000,
            "step_length": 0.65,
            "duration": timedelta(minutes=30),
            "weight_kg": 85.0,
        }
        defaults.update(overrides)
        return WorkoutBase(**defaults)

    return _make


@pytest.fixture
def running_workout() -> Running:
    """5000 steps × 0.65 m in 30 min, 85 kg."""
    return example_running()


@pytest.fixture
def walking_workout() -> Walking:
    """20000 steps × 0.65 m in 3h45m, 85 kg, 185 cm."""
    return example_walking()


@pytest.fixture
def swimming_workout() -> Swimming:
    """2000 strokes × 1.38 m in 90 min, 85 kg, 50 m pool × 5 crossings."""
    return example_swimming()
