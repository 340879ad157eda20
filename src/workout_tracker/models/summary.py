"""Activity summary — the per-workout output record and its text form."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import timedelta

_SECONDS_IN_MINUTE = 60

_REPORT_TEMPLATE = (
    "Тип тренировки: {label}\n"
    "Длительность: {minutes} мин\n"
    "Дистанция: {distance:.2f} км.\n"
    "Ср.скорость: {speed:.2f} км/ч\n"
    "Потрачено ккал: {calories:.2f}\n"
)


def format_minutes(minutes: float) -> str:
    """Shortest exact form of a minute count: 30.0 -> '30', 22.5 -> '22.5'."""
    if float(minutes).is_integer():
        return str(int(minutes))
    return repr(float(minutes))


@dataclass(frozen=True)
class ActivitySummary:
    """Derived metrics of one workout, ready to be rendered."""

    activity_label: str
    duration: timedelta
    distance_km: float
    avg_speed_kmh: float
    calories_kcal: float = 0.0

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / _SECONDS_IN_MINUTE

    def with_calories(self, calories_kcal: float) -> ActivitySummary:
        """Return a copy with the calorie field replaced."""
        return dataclasses.replace(self, calories_kcal=calories_kcal)

    def render(self) -> str:
        """Render the fixed multi-line report."""
        return _REPORT_TEMPLATE.format(
            label=self.activity_label,
            minutes=format_minutes(self.duration_minutes),
            distance=self.distance_km,
            speed=self.avg_speed_kmh,
            calories=self.calories_kcal,
        )

    def __str__(self) -> str:
        return self.render()
