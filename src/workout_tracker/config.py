"""Environment-variable-based configuration for the report entry point."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("WORKOUT_TRACKER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
