"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
the route data location, the weight attribute, the options of each
centrality measure, the report targets and logging.

Configuration can be overridden via environment variables:
- AIRNET_GRAPH_DATA_DIR=/path/to/data
- AIRNET_GRAPH_WEIGHT_ATTRIBUTE=Passengers
- AIRNET_CENTRALITY_EIGENVECTOR_DISCONNECTED=raise
- AIRNET_REPORT_TARGETS='["ORD", "ATL"]'
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Route data configuration.

    Environment variables prefixed with AIRNET_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRNET_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    data_file: str = "airport.txt"
    weight_attribute: str = "Flights"

    @property
    def data_path(self) -> Path:
        """Full path to the route data file."""
        return self.data_dir / self.data_file


class CentralityConfig(BaseSettings):
    """Options of the four centrality measures.

    Environment variables prefixed with AIRNET_CENTRALITY_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRNET_CENTRALITY_")

    closeness_weighted: bool = True
    closeness_wf_improved: bool = True
    betweenness_weighted: bool = True
    betweenness_normalized: bool = True
    betweenness_endpoints: bool = False
    eigenvector_weighted: bool = True
    eigenvector_max_iter: int = Field(default=100, gt=0)
    eigenvector_tolerance: float = Field(default=1.0e-6, gt=0)
    eigenvector_disconnected: Literal["largest_component", "raise"] = (
        "largest_component"
    )
    parallel: bool = False  # Run the measures in a thread pool


class ReportConfig(BaseSettings):
    """Report configuration.

    Environment variables prefixed with AIRNET_REPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRNET_REPORT_")

    targets: List[str] = Field(
        default_factory=lambda: ["ORD", "CMI", "FLL", "ATL", "DCA", "PDX"]
    )
    precision: int = Field(default=6, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with AIRNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRNET_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.data_path)
        print(config.centrality.eigenvector_max_iter)

    Environment variables prefixed with AIRNET_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRNET_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    centrality: CentralityConfig = Field(default_factory=CentralityConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


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
