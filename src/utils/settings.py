"""Lightweight settings layer wrapping environment variables with validation.

Complements AppConfig; use get_settings() wherever env-driven behavior is needed
(log format, upstream base URL, fetch timeout, metrics endpoint toggle).
Variables are read with the PFAMCC_ prefix, e.g. PFAMCC_LOG_LEVEL=DEBUG.
"""
from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment settings for the connector service."""

    model_config = SettingsConfigDict(
        env_prefix='PFAMCC_',
        env_file='.env',
        case_sensitive=False,
        extra='ignore',
    )

    log_level: str = Field("INFO")
    json_logging: bool = Field(False)
    # Expose debug text of user-facing errors in API responses
    debug: bool = Field(False)
    # Upstream Pfam host (no trailing slash)
    pfam_base_url: str = Field("https://pfam.xfam.org")
    default_accession: str = Field("PF01352")
    fetch_timeout_s: float = Field(30.0, gt=0)
    enable_metrics_endpoint: bool = Field(False)
    enable_timing: bool = Field(True)
    # API compression & payload tuning
    api_enable_gzip: bool = Field(False)
    api_gzip_min_size: int = Field(1024, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
