# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Beaker Configuration — Environment-driven settings.

All configuration is loaded from environment variables (or .env file).
"""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field


class BeakerSettings(BaseSettings):
    """Store-wide configuration loaded from environment."""

    # --- Time series ---
    RETENTION_SECONDS: int = Field(
        default=300,
        ge=1,
        description="Sliding window retention for every time series (5 min)",
    )

    # --- Coordinator ---
    MAILBOX_MAXSIZE: int = Field(
        default=0,
        ge=0,
        description="Max pending coordinator requests; 0 means unbounded",
    )

    # --- Platform ---
    LOG_LEVEL: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def retention_us(self) -> int:
        """Retention expressed in timestamp units (microseconds)."""
        return self.RETENTION_SECONDS * 1_000_000


# Global singleton
settings = BeakerSettings()
