"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TC_CLASSIFY_HOME_COUNTRY=India
- TC_CLASSIFY_EXTRA_DOMESTIC_KEYWORDS='["ooty", "munnar"]'
- TC_CATALOG_DEFAULT_LIMIT=100
- TC_CATALOG_DATA_FILE=/path/to/packages.json
- TC_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClassificationConfig(BaseSettings):
    """Destination classification configuration.

    Environment variables prefixed with TC_CLASSIFY_.
    """

    model_config = SettingsConfigDict(env_prefix="TC_CLASSIFY_")

    home_country: str = "India"
    fallback_region: str = "Global"
    extra_domestic_keywords: List[str] = Field(default_factory=list)


class CatalogConfig(BaseSettings):
    """Catalog loading configuration.

    Environment variables prefixed with TC_CATALOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TC_CATALOG_")

    default_limit: int = Field(default=50, ge=1)
    default_status: str = "published"
    data_file: Optional[Path] = None
    display_policy: Literal["first_non_empty", "last_non_empty"] = "first_non_empty"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TC_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TC_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.catalog.default_limit)
        print(config.classification.home_country)

    Environment variables prefixed with TC_.
    """

    model_config = SettingsConfigDict(env_prefix="TC_")

    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
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


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
