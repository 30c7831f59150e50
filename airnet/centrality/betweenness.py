"""Betweenness centrality.

Path counts are taken on the collapsed graph: among parallel routes
only the lightest can lie on a shortest path, and it counts as one
path. Self-loops never lie on a shortest path.

Weighted runs need strictly positive route lengths. A zero-weight
route between two airports raises ``ZeroWeightError``; use
``weighted=False`` or another weight attribute for such data.
"""

from __future__ import annotations

import logging
from typing import Dict

import networkx as nx

from ..graph.model import Graph
from ._checks import require_non_negative, require_positive_lengths

logger = logging.getLogger(__name__)


def betweenness_centrality(
    graph: Graph,
    weighted: bool = True,
    normalized: bool = True,
    endpoints: bool = False,
) -> Dict[str, float]:
    """Compute betweenness centrality for every airport.

    Args:
        graph: The route graph.
        weighted: Use edge weights as path lengths; otherwise hops.
        normalized: Divide by the number of airport pairs that can have
            the airport strictly inside a path.
        endpoints: Also count paths that start or end at the airport.

    Returns:
        Scores keyed by airport code. Disconnected pairs contribute 0.

    Raises:
        NegativeWeightError: If ``weighted`` and a route weight is negative.
        ZeroWeightError: If ``weighted`` and a route between two distinct
            airports has weight 0.
    """
    if weighted:
        require_non_negative(graph)
        require_positive_lengths(graph)

    scores = nx.betweenness_centrality(
        graph.path_graph(weighted),
        normalized=normalized,
        weight="weight" if weighted else None,
        endpoints=endpoints,
    )
    logger.debug(
        "Betweenness computed",
        extra={"nodes": graph.number_of_nodes, "weighted": weighted},
    )
    return scores
