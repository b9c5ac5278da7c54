"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for settings that would
otherwise be hardcoded in the loader, the route formatting and the
logging setup.

Configuration can be overridden via environment variables:
- ROADGRAPH_GRAPH_DATA_DIR=/path/to/data
- ROADGRAPH_GRAPH_ROADS_FILE=maryland.csv
- ROADGRAPH_ROUTING_DISTANCE_UNIT=km
- ROADGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road file configuration.

    Environment variables prefixed with ROADGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_GRAPH_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    roads_file: str = "roads.csv"
    delimiter: str = ","
    has_header: bool = False

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value

    @property
    def roads_path(self) -> Path:
        """Full path to the road file."""
        return self.data_dir / self.roads_file


class RoutingConfig(BaseSettings):
    """Route formatting configuration.

    Environment variables prefixed with ROADGRAPH_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_ROUTING_")

    distance_unit: str = "mi"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROADGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.roads_path)
        print(config.routing.distance_unit)

    Environment variables prefixed with ROADGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
