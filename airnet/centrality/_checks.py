from __future__ import annotations

from ..domain.errors import NegativeWeightError, ZeroWeightError
from ..graph.model import Graph


def require_non_negative(graph: Graph) -> None:
    """Raise NegativeWeightError if any route has a negative weight."""
    for edge in graph.edges:
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Negative weight {edge.weight} on route {edge.source}-{edge.target}",
                source=edge.source,
                target=edge.target,
                weight=edge.weight,
            )


def require_positive_lengths(graph: Graph) -> None:
    """Raise ZeroWeightError if a route between two airports has zero length.

    Self-loops never lie on a shortest path and are not checked.
    """
    for edge in graph.edges:
        if edge.weight == 0 and not edge.is_self_loop:
            raise ZeroWeightError(
                f"Zero weight on route {edge.source}-{edge.target}; "
                f"betweenness needs positive route lengths",
                source=edge.source,
                target=edge.target,
            )
