"""Runtime configuration defaults for preferences, logging and display."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("MAPPIA_DB_PATH", "data/mappia.db")

# The terminal belongs to the TUI, so logs go to a file.
DEBUG_LOG_PATH = os.environ.get("MAPPIA_DEBUG_LOG", "/tmp/mappia-debug.log")
LOG_LEVEL = os.environ.get("MAPPIA_LOG_LEVEL", "INFO").upper()

SLIDER_INTERVAL_SECONDS = 3.0
CURRENCY_SYMBOL = "$"
