"""Configuration for the EventCounters decoder"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Environment-based settings with Pydantic validation"""

    # Service identification
    service_name: str = Field(default="eventcounters-decoder", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Log file path (console only when unset)")
    enable_metadata_logging: bool = Field(default=False, description="Log parsed metadata of decoded counters")

    # Replay input
    events_file: Optional[Path] = Field(default=None, description="JSON-lines file of raw counter events")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('log_file')
    @classmethod
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v
