"""
Configuration management for FitFlow.

Settings are loaded from environment variables (and a local ``.env`` file)
with fallbacks to the defaults used by the command line front end.
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .analytics.interface import HeartRateImpulseMode

# Load .env from the current working directory
load_dotenv()


class Settings(BaseSettings):
    """Application settings for fitness trend computation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
        populate_by_name=True
    )

    # Logging
    log_level: str = Field(default="INFO", alias="FITFLOW_LOG_LEVEL")

    # Trend defaults
    heart_rate_impulse_mode: HeartRateImpulseMode = Field(
        default=HeartRateImpulseMode.HRSS, alias="FITFLOW_HEART_RATE_IMPULSE_MODE"
    )
    power_meter_enable: bool = Field(default=False, alias="FITFLOW_POWER_METER_ENABLE")
    swim_enable: bool = Field(default=False, alias="FITFLOW_SWIM_ENABLE")
    skip_activity_types: List[str] = Field(default_factory=list, alias="FITFLOW_SKIP_ACTIVITY_TYPES")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get complete application settings."""
    return settings
