"""Centralized constants for typestats.

All magic numbers and defaults live here so every layer
imports from a single source of truth.
"""

# ---------- Units ----------
CHARS_PER_WORD = 5  # wpm = cpm / 5

# ---------- Periods ----------
PERIODS = ("day", "week", "month", "year")
DEFAULT_PERIOD = "month"
DEFAULT_LESSON_TYPE = "auto"
DATE_AFTER_FORMAT = "%Y/%m/%d"

# ---------- Graph ----------
GRAPH_MAX_WIDTH = 110
CONSOLE_PADDING = 23  # room for the label and value columns

# ---------- Export ----------
CSV_FILENAME = "stats.csv"
