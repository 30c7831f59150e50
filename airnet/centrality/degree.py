"""Degree centrality."""

from __future__ import annotations

from typing import Dict

import networkx as nx

from ..graph.model import Graph


def degree_centrality(graph: Graph) -> Dict[str, float]:
    """Fraction of the other airports each airport has a direct route to.

    Parallel routes to the same neighbor count once and self-loops are
    ignored. A graph with a single airport scores 0.
    """
    if graph.number_of_nodes <= 1:
        return {identifier: 0.0 for identifier in graph.node_ids}
    return nx.degree_centrality(graph.path_graph(weighted=False))
