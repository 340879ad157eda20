"""Report builder — merges an activity's calories into its summary and renders it."""

from __future__ import annotations

import logging

from workout_tracker.models.summary import ActivitySummary
from workout_tracker.models.training import CaloriesCalculator

logger = logging.getLogger(__name__)


def build_summary(activity: CaloriesCalculator) -> ActivitySummary:
    """Build the final summary for any activity.

    The draft from ``activity.build_summary()`` carries the base-record
    calorie default, so the freshly computed total replaces it.
    """
    calories = activity.compute_calories()
    summary = activity.build_summary().with_calories(calories)
    logger.debug(
        "Built summary for %s: %.2f km, %.2f km/h, %.2f kcal",
        summary.activity_label,
        summary.distance_km,
        summary.avg_speed_kmh,
        summary.calories_kcal,
    )
    return summary


def render_summary(summary: ActivitySummary) -> str:
    return summary.render()


def read_data(activity: CaloriesCalculator) -> str:
    """Return the rendered report for one workout."""
    return render_summary(build_summary(activity))
