"""Typed domain errors for the route-network centrality engine.

Ingestion errors (ParseError, DataSourceError) abort a whole run.
Algorithm errors (NegativeWeightError, ZeroWeightError, ConvergenceError,
DisconnectedGraphError) abort only the measure that raised them.
NodeNotFoundError is raised by lookups and is meant to be handled
by the caller.

All errors inherit from AirNetError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AirNetError(Exception):
    """Base error for the route-network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ParseError(AirNetError):
    """A route record field could not be parsed as a finite number.

    Attributes:
        line_number: Line of the source file (1-based, header is line 1)
        field_name: Name of the offending column
        value: Raw value that failed to parse
    """

    line_number: Optional[int] = None
    field_name: str = ""
    value: Optional[str] = None


@dataclass
class DataSourceError(AirNetError):
    """The route data source could not be read.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NegativeWeightError(AirNetError):
    """A shortest-path measure met an edge with a negative weight."""

    source: str = ""
    target: str = ""
    weight: float = 0.0


@dataclass
class ZeroWeightError(AirNetError):
    """Betweenness met a zero-weight route between two distinct airports.

    Two airports joined by a zero-length route are equally far from
    every other airport, so shortest-path counts through them depend on
    search order.
    """

    source: str = ""
    target: str = ""


@dataclass
class ConvergenceError(AirNetError):
    """Power iteration did not stabilise within the iteration cap.

    Attributes:
        iterations: Number of iterations performed
        tolerance: Tolerance that was not reached
    """

    iterations: int = 0
    tolerance: float = 0.0


@dataclass
class DisconnectedGraphError(AirNetError):
    """Eigenvector centrality was requested on a disconnected graph."""

    components: int = 0


@dataclass
class NodeNotFoundError(AirNetError):
    """Airport identifier not found in the graph or in a score mapping.

    Attributes:
        identifier: The identifier that was looked up
    """

    identifier: str = ""


@dataclass
class ConfigurationError(AirNetError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
