"""Configuration management for s3-explorer."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "s3-explorer"

    # Listing behaviour
    cache_ttl_seconds: float = Field(default=300.0, gt=0)
    max_pages: Optional[int] = Field(default=None, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1, le=1000)
    default_region: str = "us-east-1"

    model_config = {
        "env_prefix": "S3_EXPLORER_",
        "case_sensitive": False,
    }


settings = Settings()
