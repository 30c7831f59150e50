"""Graph-related utilities for representing the route network.

This subpackage contains the node registry, the immutable route graph and
the builder that turns route records into a graph. The graph hands
``networkx`` views to the centrality measures.
"""

from .builder import GraphBuilder, build_graph
from .model import Graph
from .registry import NodeRegistry

__all__ = ["Graph", "GraphBuilder", "NodeRegistry", "build_graph"]
