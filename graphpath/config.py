"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- GRAPHPATH_GRAPH_DATA_DIR=/path/to/data
- GRAPHPATH_GRAPH_EDGES_FILE=roads.csv
- GRAPHPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with GRAPHPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_GRAPH_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    edges_file: str = "edges.csv"
    nodes_file: str = "nodes.csv"

    @property
    def edges_path(self) -> Path:
        """Full path to the edges CSV file."""
        return self.data_dir / self.edges_file

    @property
    def nodes_path(self) -> Path:
        """Full path to the nodes CSV file."""
        return self.data_dir / self.nodes_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GRAPHPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edges_path)
        print(config.observability.level)

    Environment variables prefixed with GRAPHPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
