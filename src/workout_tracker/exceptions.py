"""Custom exception hierarchy for workout_tracker."""

from __future__ import annotations


class WorkoutTrackerError(Exception):
    """Base exception for all workout_tracker errors."""


class WorkoutValidationError(WorkoutTrackerError, ValueError):
    """A workout input is outside its valid range (e.g. a negative count)."""

    def __init__(
        self, field_name: str, value: object, requirement: str = "must not be negative"
    ) -> None:
        super().__init__(f"{field_name} {requirement}, got {value!r}")
        self.field_name = field_name
        self.value = value


class UnknownActivityError(WorkoutTrackerError, KeyError):
    """No activity kind is registered under the requested name."""

    def __init__(self, kind: object) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown activity kind: {self.kind!r}"
