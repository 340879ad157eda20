"""Workout metric formulas: distance, mean speed and per-activity calories.

Pure functions over plain numbers. The activity models in
``workout_tracker.models`` delegate to these so every formula can be
tested on its own.
"""

from __future__ import annotations

import logging

from workout_tracker.models.enums import (
    CALORIES_MEAN_SPEED_MULTIPLIER,
    CALORIES_MEAN_SPEED_SHIFT,
    CALORIES_SPEED_HEIGHT_MULTIPLIER,
    CM_IN_M,
    DURATION_EPSILON_HOURS,
    M_IN_KM,
    MIN_IN_HOURS,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
)

logger = logging.getLogger(__name__)


def calculate_distance_km(repetition_count: int, step_length: float) -> float:
    """Distance covered in km: repetitions × metres per repetition / 1000."""
    return repetition_count * step_length / M_IN_KM


def is_zero_duration(duration_hours: float) -> bool:
    """True when a duration is too small to divide by."""
    return abs(duration_hours) < DURATION_EPSILON_HOURS


def calculate_mean_speed_kmh(distance_km: float, duration_hours: float) -> float:
    """Mean speed in km/h.

    Returns 0.0 instead of dividing when the duration is indistinguishable
    from zero.
    """
    if is_zero_duration(duration_hours):
        logger.debug("Zero duration, mean speed falls back to 0")
        return 0.0
    return distance_km / duration_hours


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounded toward zero, unlike the flooring //."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def calculate_swimming_speed_kmh(
    pool_length_m: int, pool_crossings: int, duration_hours: float
) -> float:
    """Mean swimming speed using truncating integer arithmetic.

    speed = pool_length × crossings / 1000 / whole_hours, each step truncated
    toward zero.

    Every intermediate value is truncated, so a 250 m swim reports 0 km/h
    and a 1.5 h session divides by 1. Sessions shorter than one whole hour
    have no hour to divide by and report 0.
    """
    if is_zero_duration(duration_hours):
        return 0.0
    whole_hours = int(duration_hours)
    if whole_hours == 0:
        logger.debug(
            "Swim of %.3f h has zero whole hours, mean speed falls back to 0",
            duration_hours,
        )
        return 0.0
    pool_km = _truncating_div(pool_length_m * pool_crossings, M_IN_KM)
    return float(_truncating_div(pool_km, whole_hours))


def running_calories(mean_speed_kmh: float, weight_kg: float, duration_hours: float) -> float:
    """Calories burned running.

    (18 × speed + 1.79) × weight / 1000 × hours × 60
    """
    return (
        (CALORIES_MEAN_SPEED_MULTIPLIER * mean_speed_kmh + CALORIES_MEAN_SPEED_SHIFT)
        * weight_kg
        / M_IN_KM
        * duration_hours
        * MIN_IN_HOURS
    )


def walking_calories(
    mean_speed_kmh: float,
    weight_kg: float,
    height_cm: float,
    duration_hours: float,
) -> float:
    """Calories burned walking.

    (18 × weight + speed² / (height × 100) × 0.029 × weight) × hours × 60

    Known deviation: the published formula is
    (0.035 × weight + (speed_m_s² / height_m) × 0.029 × weight) × minutes.
    This one keeps the running multiplier 18 in place of 0.035, uses km/h
    speed and multiplies height by 100 instead of converting it to metres.
    The whole sum is scaled by hours × 60 (344250.36 kcal for 85 kg,
    185 cm, 3h45m). The earlier program scaled only the height term and
    printed 1530.36 kcal for the same walk, so the two outputs differ.
    This form stays until the intended formula is confirmed.
    """
    return (
        CALORIES_MEAN_SPEED_MULTIPLIER * weight_kg
        + mean_speed_kmh**2
        / (height_cm * CM_IN_M)
        * CALORIES_SPEED_HEIGHT_MULTIPLIER
        * weight_kg
    ) * duration_hours * MIN_IN_HOURS


def swimming_calories(mean_speed_kmh: float, weight_kg: float, duration_hours: float) -> float:
    """Calories burned swimming.

    (speed + 1.1) × 2 × weight × hours
    """
    return (
        (mean_speed_kmh + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
        * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
        * weight_kg
        * duration_hours
    )
