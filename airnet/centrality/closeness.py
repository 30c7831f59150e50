"""Closeness centrality.

For airport v with r airports reachable (v included) at distances
d(v, u), the score is (r - 1) / sum(d). With the Wasserman-Faust
correction the score is further multiplied by (r - 1) / (n - 1), which
keeps airports in small components from looking central.
"""

from __future__ import annotations

import logging
from typing import Dict

import networkx as nx

from ..graph.model import Graph
from ._checks import require_non_negative

logger = logging.getLogger(__name__)


def closeness_centrality(
    graph: Graph, weighted: bool = True, wf_improved: bool = True
) -> Dict[str, float]:
    """Compute closeness centrality for every airport.

    Args:
        graph: The route graph.
        weighted: Use edge weights as distances (minimum weight among
            parallel routes); otherwise every route counts as 1.
        wf_improved: Scale by the share of the graph that is reachable.

    Returns:
        Scores keyed by airport code. Isolated airports score 0.

    Raises:
        NegativeWeightError: If ``weighted`` and a route weight is negative.
    """
    if weighted:
        require_non_negative(graph)

    scores = nx.closeness_centrality(
        graph.path_graph(weighted),
        distance="weight" if weighted else None,
        wf_improved=wf_improved,
    )
    logger.debug(
        "Closeness computed",
        extra={"nodes": graph.number_of_nodes, "weighted": weighted},
    )
    return scores
