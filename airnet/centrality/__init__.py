"""Centrality measures over the route graph.

Each measure is a pure function ``Graph -> dict[str, float]`` that only
reads the graph, so the four of them can run in any order or
concurrently.
"""

from .betweenness import betweenness_centrality
from .closeness import closeness_centrality
from .degree import degree_centrality
from .eigenvector import eigenvector_centrality

__all__ = [
    "degree_centrality",
    "closeness_centrality",
    "betweenness_centrality",
    "eigenvector_centrality",
]
