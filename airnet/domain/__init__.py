"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AirNetError,
    ConfigurationError,
    ConvergenceError,
    DataSourceError,
    DisconnectedGraphError,
    NegativeWeightError,
    NodeNotFoundError,
    ParseError,
    ZeroWeightError,
)
from .models import (
    CentralityMeasure,
    CentralityReport,
    CentralityResult,
    Edge,
    Node,
    RouteRecord,
    WeightAttribute,
)

__all__ = [
    # Models
    "WeightAttribute",
    "CentralityMeasure",
    "RouteRecord",
    "Node",
    "Edge",
    "CentralityResult",
    "CentralityReport",
    # Errors
    "AirNetError",
    "ParseError",
    "DataSourceError",
    "NegativeWeightError",
    "ZeroWeightError",
    "ConvergenceError",
    "DisconnectedGraphError",
    "NodeNotFoundError",
    "ConfigurationError",
]
