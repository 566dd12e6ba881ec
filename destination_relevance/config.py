"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the engine's tunable
values. The defaults are the calibrated product constants; the alias and
radius-override tables are static module data and do not live here.

Configuration can be overridden via environment variables:
- DRE_RADIUS_URBAN_CORE_KM=20
- DRE_SCORING_ADJACENT_DAY_WEIGHT=0.5
- DRE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RadiusConfig(BaseSettings):
    """Default anchor radii.

    Environment variables prefixed with DRE_RADIUS_.
    """

    model_config = SettingsConfigDict(env_prefix="DRE_RADIUS_")

    urban_core_km: float = Field(default=18.0, gt=0)
    regional_core_km: float = Field(default=55.0, gt=0)
    taper_ratio: float = Field(default=1.6, gt=1.0)


class ScoringConfig(BaseSettings):
    """Scoring weights and text-matching thresholds.

    Environment variables prefixed with DRE_SCORING_.
    """

    model_config = SettingsConfigDict(env_prefix="DRE_SCORING_")

    adjacent_day_weight: float = Field(default=0.55, gt=0, le=1)
    taper_falloff: float = Field(default=0.7, ge=0, le=1)
    lodging_dedup_km: float = Field(default=10.0, ge=0)
    exact_token_score: float = Field(default=0.7, gt=0, le=1)
    substring_token_score: float = Field(default=0.5, gt=0, le=1)
    min_substring_length: int = Field(default=4, ge=1)


class MapConfig(BaseSettings):
    """Anchor map rendering configuration.

    Environment variables prefixed with DRE_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="DRE_MAP_")

    zoom_start: int = 9
    tiles: str = "OpenStreetMap"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with DRE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DRE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.radius.urban_core_km)
        print(config.scoring.adjacent_day_weight)

    Environment variables prefixed with DRE_.
    """

    model_config = SettingsConfigDict(env_prefix="DRE_")

    radius: RadiusConfig = Field(default_factory=RadiusConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
