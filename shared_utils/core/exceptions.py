"""
shared_utils/core/exceptions.py

Custom exception hierarchy for the package.

Expected "unsupported / malformed" inputs are reported with None or False.
These exceptions cover the remaining cases where returning a sentinel would
hide a real failure from the caller.
"""


class SharedUtilsError(Exception):
    """Root of every error raised by this package."""


# ── File exceptions ────────────────────────────────────────────────────────────

class Base64DecodeError(SharedUtilsError):
    """Raised when a payload is not valid base64 or does not decode to UTF-8 text."""


# ── Date exceptions ────────────────────────────────────────────────────────────

class InvalidDateError(SharedUtilsError):
    """Raised when a date string cannot be parsed as ISO-8601."""
