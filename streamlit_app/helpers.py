"""Utility helpers bridging the Streamlit UI and workout_tracker.

Pure functions for building activities from form input and formatting
durations. No Streamlit calls here so everything is testable.
"""

from __future__ import annotations

from datetime import timedelta

import pandas as pd

from workout_tracker.exceptions import UnknownActivityError
from workout_tracker.models.activities import Running, Swimming, Walking
from workout_tracker.models.enums import (
    ACTIVITY_LABELS,
    LEN_STEP,
    SWIMMING_LEN_STEP,
    ActivityType,
)
from workout_tracker.models.training import CaloriesCalculator, WorkoutBase
from workout_tracker.report import build_summary
from workout_tracker.serialization import to_frame

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(minutes: float) -> str:
    """Convert fractional minutes to a clock-like string.

    e.g. 90.0 -> '1h 30m', 22.5 -> '22m 30s', 225.0 -> '3h 45m'.
    """
    total_seconds = round(minutes * 60)
    if total_seconds <= 0:
        return "0m"
    hours, rest = divmod(total_seconds, 3600)
    mins, secs = divmod(rest, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if mins:
        parts.append(f"{mins}m")
    if secs:
        parts.append(f"{secs}s")
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Form defaults
# ---------------------------------------------------------------------------

ACTIVITY_NAMES: dict[str, ActivityType] = {
    "running": ActivityType.RUNNING,
    "walking": ActivityType.WALKING,
    "swimming": ActivityType.SWIMMING,
}

DEFAULT_STEP_LENGTHS: dict[ActivityType, float] = {
    ActivityType.RUNNING: LEN_STEP,
    ActivityType.WALKING: LEN_STEP,
    ActivityType.SWIMMING: SWIMMING_LEN_STEP,
}

REPETITION_LABELS: dict[ActivityType, str] = {
    ActivityType.RUNNING: "Steps",
    ActivityType.WALKING: "Steps",
    ActivityType.SWIMMING: "Strokes",
}


# ---------------------------------------------------------------------------
# Activity construction
# ---------------------------------------------------------------------------


def resolve_activity_type(kind: ActivityType | str) -> ActivityType:
    """Accept an ActivityType or its lowercase name ("running", ...)."""
    if isinstance(kind, ActivityType):
        return kind
    try:
        return ACTIVITY_NAMES[str(kind).strip().lower()]
    except KeyError:
        raise UnknownActivityError(kind) from None


def build_activity(kind: ActivityType | str, params: dict) -> CaloriesCalculator:
    """Convert a UI form dict into a frozen activity.

    Required keys: ``repetition_count``, ``duration_min``, ``weight_kg``,
    plus ``height_cm`` for walking and ``pool_length_m`` / ``pool_crossings``
    for swimming. ``step_length`` is optional and defaults per activity.

    Raises:
        KeyError: A required key is missing.
        WorkoutValidationError: A value is out of range.
    """
    activity_type = resolve_activity_type(kind)
    training = WorkoutBase(
        activity_label=ACTIVITY_LABELS[activity_type],
        repetition_count=int(params["repetition_count"]),
        step_length=float(params.get("step_length", DEFAULT_STEP_LENGTHS[activity_type])),
        duration=timedelta(minutes=float(params["duration_min"])),
        weight_kg=float(params["weight_kg"]),
    )

    if activity_type == ActivityType.WALKING:
        return Walking(training=training, height_cm=float(params["height_cm"]))
    if activity_type == ActivityType.SWIMMING:
        return Swimming(
            training=training,
            pool_length_m=int(params["pool_length_m"]),
            pool_crossings=int(params["pool_crossings"]),
        )
    return Running(training=training)


def summaries_table(activities: list[CaloriesCalculator] | tuple[CaloriesCalculator, ...]) -> pd.DataFrame:
    """One display row per activity, values rounded to 2 places."""
    frame = to_frame((build_summary(a) for a in activities), decimals=2)
    return frame.rename(
        columns={
            "activity_label": "Activity",
            "duration_min": "Duration (min)",
            "distance_km": "Distance (km)",
            "avg_speed_kmh": "Speed (km/h)",
            "calories_kcal": "Calories (kcal)",
        }
    )
