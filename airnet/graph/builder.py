"""Graph construction from route records.

Every record adds its two airports to a NodeRegistry (first-seen
population wins) and one edge weighted by the selected attribute.
Records are never merged, so a route listed twice gives two parallel
edges.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Union

from ..domain.errors import ParseError
from ..domain.models import Edge, RouteRecord, WeightAttribute
from .model import Graph
from .registry import NodeRegistry

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Accumulates route records and produces an immutable Graph.

    The registry belongs to the builder; ``build`` hands the collected
    nodes to the Graph, and the builder can then be discarded.
    """

    def __init__(
        self,
        weight: Union[WeightAttribute, str, None] = WeightAttribute.FLIGHTS,
        registry: Optional[NodeRegistry] = None,
    ) -> None:
        self.weight = WeightAttribute.parse(weight)
        self.registry = registry if registry is not None else NodeRegistry()
        self._edges: List[Edge] = []

    def add_record(self, record: RouteRecord, line_number: Optional[int] = None) -> None:
        """Add one route.

        Raises:
            ParseError: If the selected weight or a population is not a
                finite number. Nothing is added in that case.
        """
        weight = _as_finite(
            record.weight(self.weight), self.weight.value, line_number
        )
        origin_population = _as_finite(
            record.origin_population, "Origin_population", line_number
        )
        destination_population = _as_finite(
            record.destination_population, "Destination_population", line_number
        )

        self.registry.register(record.origin, origin_population)
        self.registry.register(record.destination, destination_population)
        self._edges.append(Edge(record.origin, record.destination, weight))

    def build(self) -> Graph:
        graph = Graph(self.registry.nodes(), self._edges)
        logger.info(
            "Graph built",
            extra={
                "nodes": graph.number_of_nodes,
                "edges": graph.number_of_edges,
                "weight": self.weight.value,
            },
        )
        return graph


def build_graph(
    records: Iterable[RouteRecord],
    weight: Union[WeightAttribute, str, None] = WeightAttribute.FLIGHTS,
) -> Graph:
    """Build the route graph from ``records``.

    Args:
        records: Route records, processed in the given order.
        weight: Attribute used as edge weight; unknown values fall back
            to flight count.

    Returns:
        The immutable graph.

    Raises:
        ParseError: If any record carries a malformed number. No partial
            graph is returned.
    """
    builder = GraphBuilder(weight)
    for record in records:
        builder.add_record(record)
    return builder.build()


def _as_finite(value: object, field_name: str, line_number: Optional[int]) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ParseError(
            f"Field {field_name} is not numeric: {value!r}",
            cause=e,
            line_number=line_number,
            field_name=field_name,
            value=str(value),
        )
    if not math.isfinite(number):
        raise ParseError(
            f"Field {field_name} is not finite: {value!r}",
            line_number=line_number,
            field_name=field_name,
            value=str(value),
        )
    return number
