"""Eigenvector centrality by power iteration.

The adjacency matrix A sums parallel routes and leaves self-loops out.
``networkx`` iterates on (A + I), which keeps the dominant eigenvector
of A but stops the iteration from oscillating on bipartite graphs. The
shift only damps that oscillation while the weights are around 1, so A
is first divided by its largest entry; scaling A leaves the
eigenvectors unchanged.
"""

from __future__ import annotations

import logging
from typing import Dict, Literal

import networkx as nx

from ..domain.errors import ConfigurationError, ConvergenceError, DisconnectedGraphError
from ..graph.model import Graph
from ._checks import require_non_negative

logger = logging.getLogger(__name__)

DisconnectedPolicy = Literal["largest_component", "raise"]

DEFAULT_MAX_ITER = 100
DEFAULT_TOLERANCE = 1.0e-6


def eigenvector_centrality(
    graph: Graph,
    weighted: bool = True,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOLERANCE,
    disconnected: DisconnectedPolicy = "largest_component",
) -> Dict[str, float]:
    """Compute eigenvector centrality for every airport.

    Args:
        graph: The route graph.
        weighted: Use summed route weights as adjacency entries;
            otherwise the number of parallel routes.
        max_iter: Iteration cap.
        tol: Convergence threshold, per airport.
        disconnected: ``"largest_component"`` iterates on the largest
            connected component and gives every other airport 0.0;
            ``"raise"`` refuses disconnected graphs.

    Returns:
        Scores keyed by airport code. Scores inside the iterated
        component are non-negative and their squares sum to 1.

    Raises:
        ConvergenceError: If the vector has not stabilised after ``max_iter``.
        DisconnectedGraphError: If the graph is disconnected and
            ``disconnected == "raise"``.
        NegativeWeightError: If ``weighted`` and a route weight is negative.
    """
    if disconnected not in ("largest_component", "raise"):
        raise ConfigurationError(
            f"Unknown disconnected-graph policy: {disconnected!r}",
            setting_name="eigenvector_disconnected",
            expected_type="'largest_component' | 'raise'",
        )
    if weighted:
        require_non_negative(graph)
    if graph.number_of_nodes == 0:
        return {}

    components = graph.connected_components()
    scores: Dict[str, float] = {identifier: 0.0 for identifier in graph.node_ids}
    if len(components) > 1:
        if disconnected == "raise":
            raise DisconnectedGraphError(
                f"Eigenvector centrality needs a connected graph, "
                f"got {len(components)} components",
                components=len(components),
            )
        logger.info(
            "Graph is disconnected, using largest component",
            extra={
                "components": len(components),
                "component_size": len(components[0]),
            },
        )

    adjacency = _scaled_adjacency(graph, components[0], weighted)
    try:
        scores.update(
            nx.eigenvector_centrality(adjacency, max_iter=max_iter, tol=tol, weight="weight")
        )
    except nx.PowerIterationFailedConvergence as e:
        raise ConvergenceError(
            f"Power iteration did not converge in {max_iter} iterations",
            cause=e,
            iterations=max_iter,
            tolerance=tol,
        ) from e
    return scores


def _scaled_adjacency(graph: Graph, members: frozenset[str], weighted: bool) -> nx.Graph:
    """Adjacency view of ``members`` with the largest entry scaled to 1."""
    adjacency = graph.adjacency_graph(weighted, members)
    largest = max((w for _, _, w in adjacency.edges(data="weight")), default=0.0)
    if largest > 0.0:
        for _, _, data in adjacency.edges(data=True):
            data["weight"] /= largest
    return adjacency
