"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest; no import needed.
"""

import base64

import pytest

from shared_utils.core.config import settings


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


# ── Data URL fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def b64():
    """Base64-encode a UTF-8 string the way a browser FileReader would."""
    return _b64


@pytest.fixture
def sample_text() -> str:
    return "Hello, World!"


@pytest.fixture
def text_data_url(sample_text) -> str:
    """A text/plain data URL whose payload decodes to ``sample_text``."""
    return f"data:text/plain;base64,{_b64(sample_text)}"


@pytest.fixture
def png_data_url() -> str:
    """The 8-byte PNG signature as a data URL."""
    return "data:image/png;base64,iVBORw0KGgo="


# ── Settings fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def utc_local_timezone(monkeypatch):
    """
    Pin the display timezone to UTC so format_date output is deterministic
    regardless of the machine running the suite.
    """
    monkeypatch.setattr(settings, "local_timezone", "UTC")
    return settings
