"""Entry point — prints the reports of the example workouts.

Usage:
    python -m workout_tracker
"""

from __future__ import annotations

import logging

from workout_tracker.config import LOG_FORMAT, LOG_LEVEL
from workout_tracker.examples import example_workouts
from workout_tracker.report import read_data

logger = logging.getLogger(__name__)


def main() -> int:
    """Print one report per example workout, separated by blank lines."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    workouts = example_workouts()
    logger.info("Reporting %d example workouts", len(workouts))
    for workout in workouts:
        print(read_data(workout))
    return 0
