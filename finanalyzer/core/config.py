"""
Client configuration models and helpers.

Centralizes settings so the request layer and the polling state machine share
a consistent configuration surface. Values are read from ``ANALYZER_*``
environment variables or a local ``.env`` file.
"""

from functools import lru_cache

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyzerSettings(BaseSettings):
    """Root settings object for the analyzer client."""

    api_base_url: AnyHttpUrl = Field(
        "http://localhost:8000",
        description="Base URL of the remote document analysis service.",
    )
    poll_interval_seconds: float = Field(
        2.0,
        gt=0,
        description="Fixed period between job status checks.",
    )
    request_timeout_seconds: float = Field(30.0, gt=0)
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_prefix="ANALYZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def base_url(self) -> str:
        """Base URL without the trailing slash pydantic appends."""
        return str(self.api_base_url).rstrip("/")


@lru_cache()
def get_settings() -> AnalyzerSettings:
    """Return a cached settings object."""
    return AnalyzerSettings()


__all__ = ["AnalyzerSettings", "get_settings"]
