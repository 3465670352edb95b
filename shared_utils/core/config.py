"""
shared_utils/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the host application injects these at runtime.
"""

from typing import Optional

from dateutil import tz
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Package ────────────────────────────────────────────────────────────────
    app_name: str = "shared-utils"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Dates ──────────────────────────────────────────────────────────────────
    local_timezone: Optional[str] = None   # IANA name for format_date; None = system local

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("local_timezone")
    @classmethod
    def timezone_must_exist(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and tz.gettz(v) is None:
            raise ValueError(f"Unknown timezone: {v!r}")
        return v


# Single shared instance; import this everywhere.
settings = Settings()
