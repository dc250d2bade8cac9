"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from dekigokoro import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://dekigokoro.io/api/v1"


class DekigokoroConfig(BaseModel):
    """Configuration for Dekigokoro API client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    max_connections: int = 100
    max_keepalive_connections: int = 20
    user_agent: str = f"dekigokoro-python/{__version__}"


class Settings(BaseSettings):
    """Process-level settings read from the environment or a .env file."""

    token: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    logfire_token: str = ""
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="DEKIGOKORO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def client_config(self) -> DekigokoroConfig:
        """Build a per-client config from these settings."""
        return DekigokoroConfig(
            base_url=self.base_url,
            timeout_seconds=self.timeout_seconds,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    logger.debug(f"Loaded settings (base_url={settings.base_url})")
    return settings
