"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, route map rendering and logging.

Configuration can be overridden via environment variables:
- RP_GRAPH_DATA_DIR=/path/to/data
- RP_MAP_ENABLED=true
- RP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with RP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_GRAPH_")

    data_dir: Path = Path("data")
    stations_file: str = "stations.csv"
    connections_file: str = "connections.csv"

    @property
    def stations_path(self) -> Path:
        """Full path to stations CSV file."""
        return self.data_dir / self.stations_file

    @property
    def connections_path(self) -> Path:
        """Full path to connections CSV file."""
        return self.data_dir / self.connections_file


class RenderingConfig(BaseSettings):
    """Route map configuration.

    Environment variables prefixed with RP_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_MAP_")

    enabled: bool = False
    output_file: Path = Path("route.html")
    zoom_start: int = 6


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.stations_path)

    Environment variables prefixed with RP_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
