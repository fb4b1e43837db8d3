"""
Zoom client configuration settings.

Credentials and connection options are loaded from environment variables
(optionally via a .env file) with defaults for everything except the
API key and secret.
"""

import os
from typing import Dict, Optional

from dotenv import load_dotenv  # type: ignore
from pydantic import BaseModel, Field, field_validator  # type: ignore

ZOOM_BASE_URL = "https://api.zoom.us/v2"
DEFAULT_TIMEOUT = 30.0


class ZoomSettings(BaseModel):
    """Connection settings for the Zoom REST API."""

    api_key: str = Field(default="", description="Zoom API key (JWT issuer)")
    api_secret: str = Field(default="", description="Zoom API secret used to sign tokens", repr=False)
    base_url: str = Field(default=ZOOM_BASE_URL, description="Base API URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Request timeout in seconds")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL doesn't end with trailing slash."""
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ZoomSettings":
        """
        Load settings from environment variables.

        Args:
            env_file: Optional path to a .env file loaded before reading the environment

        Returns:
            ZoomSettings instance with values from environment
        """
        load_dotenv(env_file)
        return cls(
            api_key=os.getenv("ZOOM_KEY", ""),
            api_secret=os.getenv("ZOOM_SECRET", ""),
            base_url=os.getenv("ZOOM_BASE_URL", ZOOM_BASE_URL),
            timeout=float(os.getenv("ZOOM_TIMEOUT", str(DEFAULT_TIMEOUT))),
            log_level=os.getenv("ZOOM_LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict:
        return self.model_dump(exclude={"api_secret"})


# Global settings instance
_settings: Optional[ZoomSettings] = None


def get_settings() -> ZoomSettings:
    """
    Get settings singleton.

    Returns:
        ZoomSettings instance
    """
    global _settings
    if _settings is None:
        _settings = ZoomSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
