from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    precision: int = Field(
        default_factory=lambda: os.getenv('SPANWATCH_PRECISION', '3'), ge=0, validate_default=True
    )
    log_level: LogLevel = Field(
        default_factory=lambda: os.getenv('SPANWATCH_LOG_LEVEL', 'WARNING'), validate_default=True
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v

# ---------- Singleton access ----------

_settings_singleton: Optional[Settings] = None

def get_settings(force_refresh: bool = False) -> Settings:
    """
    Return a cached Settings instance built from SPANWATCH_* env vars.
    """
    global _settings_singleton
    if force_refresh or _settings_singleton is None:
        _settings_singleton = Settings()
    return _settings_singleton


__all__ = ["LogLevel", "Settings", "get_settings"]
