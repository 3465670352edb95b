"""
shared_utils/core/constants.py

Package-wide fixed constants.

These are part of the package's contract and are NOT configurable via
environment variables.
"""

# ── Data URLs ──────────────────────────────────────────────────────────────────

#: Every data URL must start with this literal scheme prefix.
DATA_URL_PREFIX: str = "data:"

#: Label returned when no subtype can be read from a MIME type.
UNKNOWN_FILE_LABEL: str = "FILE"

# ── Dates ──────────────────────────────────────────────────────────────────────

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3_600
SECONDS_PER_DAY: int = 86_400

#: English month abbreviations, index 1..12 (strftime("%b") follows the process locale).
MONTH_ABBREVIATIONS: tuple = (
    "", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
