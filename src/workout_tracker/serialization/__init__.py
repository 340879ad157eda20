"""Serialization module — export summaries to tabular formats."""

from workout_tracker.serialization.table import SUMMARY_COLUMNS, to_frame, to_record

__all__ = ["SUMMARY_COLUMNS", "to_frame", "to_record"]
