"""Configuration settings for the console chat responder and grade tracker."""

import os
import logging
from typing import Final

# Debug flag: 1 = debug mode (verbose logging), 0 = production mode
DEBUG: Final[int] = int(os.environ.get("CHAT_GRADER_DEBUG", "0"))

# --- File Paths ---
# Define log file path within a /logs subdirectory. An empty value disables file logging.
LOG_DIR: Final[str] = "logs"
LOG_FILE: Final[str] = os.environ.get("CHAT_GRADER_LOG_FILE", os.path.join(LOG_DIR, "chat_grader.log"))

# --- Chat Responder Settings ---

# Name the bot introduces itself with
BOT_NAME: Final[str] = os.environ.get("CHAT_GRADER_BOT_NAME", "PyBot").strip() or "PyBot"

# --- Grade Tracker Settings ---

# Maximum number of students a single grade book can hold
MAX_STUDENTS: Final[int] = int(os.environ.get("GRADEBOOK_MAX_STUDENTS", "50"))

if MAX_STUDENTS <= 0:
    raise ValueError(f"GRADEBOOK_MAX_STUDENTS must be a positive integer, got {MAX_STUDENTS}")

# Lowest score (inclusive) for each letter grade band, highest band first
GRADE_BANDS: Final[tuple] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)
FAILING_GRADE: Final[str] = "F"
MIN_GRADE: Final[float] = 0.0
MAX_GRADE: Final[float] = 100.0

# Report layout: "table" renders a rich table, "plain" the fixed-width text layout
REPORT_STYLES: Final[tuple] = ("table", "plain")
REPORT_STYLE: Final[str] = os.environ.get("GRADEBOOK_REPORT_STYLE", "table").strip().lower()

if REPORT_STYLE not in REPORT_STYLES:
    raise ValueError(f"GRADEBOOK_REPORT_STYLE must be one of {', '.join(REPORT_STYLES)}, got '{REPORT_STYLE}'")

# --- Logging Configuration ---
# LOG_LEVEL is used for file logging, console logging is only enabled in DEBUG mode
LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
# Structured log format: timestamp, level, logger, module.function:line, message
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s'

# Basic check
if __name__ == "__main__":
    print(f"Debug Mode: {'On' if DEBUG else 'Off'}")
    print(f"Log Level: {logging.getLevelName(LOG_LEVEL)}")
    print(f"Log File: {LOG_FILE or '(disabled)'}")
    print(f"Bot Name: {BOT_NAME}")
    print(f"Max Students: {MAX_STUDENTS}")
    print(f"Report Style: {REPORT_STYLE}")
