"""
Configuration management using Pydantic Settings
Handles environment variables and validation
"""
from functools import lru_cache
from typing import Optional

from pydantic import ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.genderapi.io"


class Settings(BaseSettings):
    """Client settings with GENDERAPI_* environment variable support"""

    # Environment
    environment: str = Field(default="development")

    # Service
    api_key: Optional[SecretStr] = Field(default=None)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    request_timeout: Optional[float] = Field(
        default=None, gt=0, description="Seconds; unset leaves the transport default in place"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")  # json or text

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    def get_api_key(self) -> Optional[str]:
        """Get the configured API key, if any"""
        return self.api_key.get_secret_value() if self.api_key else None

    model_config = ConfigDict(
        env_prefix="GENDERAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def model_dump(self, **kwargs):
        """Override to mask the API key when serializing"""
        data = super().model_dump(**kwargs)

        if data.get("api_key"):
            value = data["api_key"]
            if hasattr(value, "get_secret_value"):
                value = value.get_secret_value()
            value = str(value)
            # Keep first 4 chars for identification
            if len(value) > 4:
                data["api_key"] = value[:4] + "*" * (len(value) - 4)
            else:
                data["api_key"] = "*" * len(value)

        return data


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
