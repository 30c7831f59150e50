"""Immutable domain models for the route-network centrality engine.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
business concepts of the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .errors import AirNetError, NodeNotFoundError

logger = logging.getLogger(__name__)


class WeightAttribute(Enum):
    """Route attribute used as the edge weight.

    Values are the column names of the route data file.
    """

    ROUTE_COUNT = "Numtimes"
    PASSENGERS = "Passengers"
    SEATS = "Seats"
    FLIGHTS = "Flights"
    DISTANCE = "Distance"

    @classmethod
    def parse(cls, value: Union[str, "WeightAttribute", None]) -> "WeightAttribute":
        """Resolve a user-supplied selector, defaulting to FLIGHTS.

        Accepts the column name ("Passengers"), the member name
        ("PASSENGERS") or a dashed alias ("passenger-count"), in any case.
        Unknown values fall back to FLIGHTS.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.FLIGHTS

        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        alias = _WEIGHT_ALIASES.get(key)
        if alias is not None:
            return alias

        logger.warning(
            "Unknown weight attribute, using default",
            extra={"requested": value, "default": cls.FLIGHTS.value},
        )
        return cls.FLIGHTS


_WEIGHT_ALIASES: Dict[str, WeightAttribute] = {
    "route_count": WeightAttribute.ROUTE_COUNT,
    "passenger_count": WeightAttribute.PASSENGERS,
    "seat_count": WeightAttribute.SEATS,
    "flight_count": WeightAttribute.FLIGHTS,
}


class CentralityMeasure(Enum):
    """The four supported centrality measures."""

    DEGREE = auto()
    CLOSENESS = auto()
    BETWEENNESS = auto()
    EIGENVECTOR = auto()

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One row of the route data file.

    Attributes:
        origin: Origin airport code (e.g. 'ORD')
        destination: Destination airport code
        route_count: Number of times the route appears in the period
        passengers: Passenger count
        seats: Seat count
        flights: Flight count
        distance: Route distance
        origin_population: Population of the origin city
        destination_population: Population of the destination city
    """

    origin: str
    destination: str
    route_count: float = 0.0
    passengers: float = 0.0
    seats: float = 0.0
    flights: float = 0.0
    distance: float = 0.0
    origin_population: float = 0.0
    destination_population: float = 0.0

    def weight(self, attribute: WeightAttribute) -> float:
        """Return the value of the selected weight attribute."""
        return getattr(self, _RECORD_FIELDS[attribute])


_RECORD_FIELDS: Dict[WeightAttribute, str] = {
    WeightAttribute.ROUTE_COUNT: "route_count",
    WeightAttribute.PASSENGERS: "passengers",
    WeightAttribute.SEATS: "seats",
    WeightAttribute.FLIGHTS: "flights",
    WeightAttribute.DISTANCE: "distance",
}


@dataclass(frozen=True, slots=True)
class Node:
    """An airport with its scalar attribute (city population)."""

    identifier: str
    attribute: float = 0.0


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected, weighted route between two airports."""

    source: str
    target: str
    weight: float = 1.0

    @property
    def endpoints(self) -> frozenset[str]:
        """Unordered endpoint pair; (A, B) and (B, A) compare equal."""
        return frozenset((self.source, self.target))

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def other(self, identifier: str) -> str:
        """Return the endpoint opposite to ``identifier``."""
        return self.target if identifier == self.source else self.source


@dataclass(frozen=True)
class CentralityResult:
    """Scores of one centrality measure, keyed by airport code.

    Attributes:
        measure: Which centrality produced the scores
        scores: Read-only mapping of airport code to score
    """

    measure: CentralityMeasure
    scores: Mapping[str, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def get(self, identifier: str) -> float:
        """Return the score of ``identifier``.

        Raises:
            NodeNotFoundError: If the airport has no score.
        """
        try:
            return self.scores[identifier]
        except KeyError:
            raise NodeNotFoundError(
                f"No {self.measure.label} centrality for node: {identifier}",
                identifier=identifier,
            )

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.scores

    def __len__(self) -> int:
        return len(self.scores)

    def top(self, k: int = 10) -> List[Tuple[str, float]]:
        """Return the ``k`` best-ranked airports, highest score first."""
        ranked = sorted(self.scores.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:k]


@dataclass(frozen=True)
class CentralityReport:
    """Outcome of one run: a result or an error for each measure.

    Attributes:
        weight_attribute: Attribute used for edge weights
        node_count: Number of airports in the graph
        edge_count: Number of routes (parallel routes included)
        results: Successful results by measure
        errors: Per-measure failures; other measures remain usable
    """

    weight_attribute: WeightAttribute
    node_count: int
    edge_count: int
    results: Mapping[CentralityMeasure, CentralityResult] = field(
        default_factory=dict
    )
    errors: Mapping[CentralityMeasure, AirNetError] = field(default_factory=dict)

    def result(self, measure: CentralityMeasure) -> CentralityResult:
        """Return the result of ``measure``, re-raising its error if it failed."""
        error = self.errors.get(measure)
        if error is not None:
            raise error
        return self.results[measure]

    def score(self, measure: CentralityMeasure, identifier: str) -> float:
        """Look up one score.

        Raises:
            NodeNotFoundError: If the airport is unknown.
            AirNetError: The stored error if ``measure`` failed.
        """
        return self.result(measure).get(identifier)

    def failed(self, measure: CentralityMeasure) -> Optional[AirNetError]:
        return self.errors.get(measure)

    @property
    def is_complete(self) -> bool:
        """Check if every measure produced a result."""
        return not self.errors and len(self.results) == len(CentralityMeasure)
