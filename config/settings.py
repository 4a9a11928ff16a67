"""
Configuration settings for the menu report.

Centralized configuration for input locations, report text and logging.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
MENU_PATH = Path("menu.csv")
RATINGS_DIR = Path("ratings")
RATINGS_SUFFIX = ".csv"
IMAGE_DIR = "img"  # Relative to the generated page

# Report text
REPORT_TITLE = "Year of the YYL"
REPORT_INTRO = (
    "In 2015, three boys decided to embark on an epic challenge: eat all 40 items on "
    "the Yin Yin menu, in order, in less than a year. Three men emerged, victorious."
)

# Statistics
FLUSH_FINAL_WEEK = False  # Count the last week of a series towards the busiest week
STRICT_SCALE = False  # Fail instead of dropping values outside the first rating's scale
ISO_YEAR_AWARE_WEEKS = False  # Tell weeks apart by (ISO year, week) instead of week number alone

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = None  # Optional path; logs always go to stderr
