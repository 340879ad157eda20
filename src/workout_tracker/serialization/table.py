"""Tabular export of activity summaries.

One row per workout, columns in report order. Nothing is totalled or
averaged across rows.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from workout_tracker.models.summary import ActivitySummary

SUMMARY_COLUMNS = (
    "activity_label",
    "duration_min",
    "distance_km",
    "avg_speed_kmh",
    "calories_kcal",
)


def to_record(summary: ActivitySummary) -> dict:
    """Convert a summary to a flat dict with the duration in minutes."""
    return {
        "activity_label": summary.activity_label,
        "duration_min": summary.duration_minutes,
        "distance_km": summary.distance_km,
        "avg_speed_kmh": summary.avg_speed_kmh,
        "calories_kcal": summary.calories_kcal,
    }


def to_frame(summaries: Iterable[ActivitySummary], decimals: int | None = None) -> pd.DataFrame:
    """Build a DataFrame with one row per summary.

    Args:
        summaries: Summaries in display order.
        decimals: Round the float columns to this many places, or leave
            them untouched when None.
    """
    frame = pd.DataFrame([to_record(s) for s in summaries], columns=list(SUMMARY_COLUMNS))
    if decimals is not None:
        frame = frame.round(decimals)
    return frame
