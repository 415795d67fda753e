"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TRAFFIC_ROUTES_API_KEY=...
- TRAFFIC_ROUTES_TIMEOUT_SECONDS=5
- TRAFFIC_LOG_LEVEL=DEBUG
- etc.

Nothing in the package reads these at import time; adapters receive
their config section explicitly.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoutesConfig(BaseSettings):
    """Routing provider configuration.

    Environment variables prefixed with TRAFFIC_ROUTES_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAFFIC_ROUTES_")

    api_key: SecretStr = SecretStr("")
    base_url: str = "https://routes.googleapis.com/directions/v2:computeRoutes"
    field_mask: str = "routes.duration,routes.distanceMeters,routes.staticDuration"
    language_code: str = "en-US"
    units: str = "IMPERIAL"
    timeout_seconds: float = 10.0


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with TRAFFIC_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAFFIC_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.routes.base_url)
        print(config.observability.level)

    Environment variables prefixed with TRAFFIC_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAFFIC_")

    routes: RoutesConfig = Field(default_factory=RoutesConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
