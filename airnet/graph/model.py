"""Immutable, undirected, weighted route multigraph.

Parallel routes between the same two airports are kept as distinct
edges. Self-loops are kept as edges but a node is never its own
neighbor. Two weighted views collapse parallel edges for algorithms
that need a single weight per pair:

- ``shortest_edge_weights`` / ``path_graph``: minimum weight per
  neighbor (path search)
- ``summed_weights`` / ``adjacency_graph``: total weight per neighbor
  (adjacency matrix)

The ``networkx`` views are built with nodes and edges in sorted order,
so algorithms running on them see the same graph for any record order.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

import networkx as nx

from ..domain.errors import NodeNotFoundError
from ..domain.models import Edge, Node

WeightMap = Mapping[str, float]


class Graph:
    """Read-only view over airports and routes.

    Instances are never mutated after construction; every algorithm
    can share one Graph without locking.
    """

    __slots__ = ("_nodes", "_edges", "_incident", "_min_weights", "_sum_weights")

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        node_map: Dict[str, Node] = {}
        for node in nodes:
            node_map.setdefault(node.identifier, node)

        incident: Dict[str, List[Edge]] = {identifier: [] for identifier in node_map}
        min_weights: Dict[str, Dict[str, float]] = {n: {} for n in node_map}
        parallel: Dict[str, Dict[str, List[float]]] = {n: {} for n in node_map}

        edge_list: List[Edge] = []
        for edge in edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in node_map:
                    raise NodeNotFoundError(
                        f"Edge endpoint is not a registered node: {endpoint}",
                        identifier=endpoint,
                    )
            edge_list.append(edge)
            incident[edge.source].append(edge)
            if edge.is_self_loop:
                continue
            incident[edge.target].append(edge)

            for u, v in ((edge.source, edge.target), (edge.target, edge.source)):
                current = min_weights[u].get(v)
                if current is None or edge.weight < current:
                    min_weights[u][v] = edge.weight
                parallel[u].setdefault(v, []).append(edge.weight)

        self._nodes = MappingProxyType(node_map)
        self._edges = tuple(edge_list)
        self._incident = {k: tuple(v) for k, v in incident.items()}
        self._min_weights = {k: MappingProxyType(v) for k, v in min_weights.items()}
        # fsum is exactly rounded, so totals do not depend on record order
        self._sum_weights = {
            u: MappingProxyType({v: math.fsum(ws) for v, ws in by_neighbor.items()})
            for u, by_neighbor in parallel.items()
        }

    def __repr__(self) -> str:
        return f"Graph(nodes={self.number_of_nodes}, edges={self.number_of_edges})"

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> Mapping[str, Node]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def node_ids(self) -> Tuple[str, ...]:
        """Airport codes in first-seen order."""
        return tuple(self._nodes)

    @property
    def number_of_nodes(self) -> int:
        return len(self._nodes)

    @property
    def number_of_edges(self) -> int:
        return len(self._edges)

    def has_node(self, identifier: str) -> bool:
        return identifier in self._nodes

    def node(self, identifier: str) -> Node:
        """Return the node for ``identifier``.

        Raises:
            NodeNotFoundError: If the airport is not in the graph.
        """
        self._require(identifier)
        return self._nodes[identifier]

    def neighbors(self, identifier: str) -> FrozenSet[str]:
        """Distinct adjacent airports, excluding the airport itself."""
        self._require(identifier)
        return frozenset(self._min_weights[identifier])

    def degree(self, identifier: str) -> int:
        """Structural degree: number of distinct neighbors."""
        self._require(identifier)
        return len(self._min_weights[identifier])

    def edges_between(self, u: str, v: str) -> Tuple[Edge, ...]:
        self._require(u)
        self._require(v)
        pair = frozenset((u, v))
        return tuple(e for e in self._incident[u] if e.endpoints == pair)

    def shortest_edge_weights(self, identifier: str, weighted: bool = True) -> WeightMap:
        """Minimum parallel-edge weight per neighbor (1.0 when unweighted)."""
        self._require(identifier)
        weights = self._min_weights[identifier]
        if weighted:
            return weights
        return {neighbor: 1.0 for neighbor in weights}

    def summed_weights(self, identifier: str, weighted: bool = True) -> WeightMap:
        """Total parallel-edge weight per neighbor (edge count when unweighted)."""
        self._require(identifier)
        if weighted:
            return self._sum_weights[identifier]
        counts: Dict[str, float] = {}
        for edge in self._incident[identifier]:
            if not edge.is_self_loop:
                neighbor = edge.other(identifier)
                counts[neighbor] = counts.get(neighbor, 0.0) + 1.0
        return counts

    def path_graph(self, weighted: bool = True) -> nx.Graph:
        """Simple ``networkx`` graph for path search.

        Each airport pair keeps its lightest route as the ``weight``
        attribute (1.0 when unweighted); self-loops are left out.
        """
        return self._to_networkx(self._nodes, lambda u: self.shortest_edge_weights(u, weighted))

    def adjacency_graph(
        self, weighted: bool = True, identifiers: Optional[Iterable[str]] = None
    ) -> nx.Graph:
        """Simple ``networkx`` graph of summed parallel-route weights.

        Args:
            weighted: Sum route weights; otherwise count parallel routes.
            identifiers: Restrict the view to these airports.
        """
        keep = self._nodes if identifiers is None else set(identifiers)
        for identifier in keep:
            self._require(identifier)
        return self._to_networkx(keep, lambda u: self.summed_weights(u, weighted))

    def connected_components(self) -> List[FrozenSet[str]]:
        """Connected components, largest first.

        Ties are broken by the smallest airport code in each component,
        so the ordering does not depend on input order.
        """
        components = [
            frozenset(members)
            for members in nx.connected_components(self.path_graph(weighted=False))
        ]
        components.sort(key=lambda c: (-len(c), min(c)))
        return components

    def is_connected(self) -> bool:
        if not self._nodes:
            return False
        return nx.is_connected(self.path_graph(weighted=False))

    def subgraph(self, identifiers: Iterable[str]) -> "Graph":
        """Return the graph induced by ``identifiers``."""
        keep = set(identifiers)
        for identifier in keep:
            self._require(identifier)
        return Graph(
            (node for node in self._nodes.values() if node.identifier in keep),
            (e for e in self._edges if e.source in keep and e.target in keep),
        )

    @staticmethod
    def _to_networkx(
        identifiers: Iterable[str], weights: Callable[[str], WeightMap]
    ) -> nx.Graph:
        keep = sorted(identifiers)
        members = set(keep)
        view = nx.Graph()
        view.add_nodes_from(keep)
        for u in keep:
            for v, weight in sorted(weights(u).items()):
                if u < v and v in members:
                    view.add_edge(u, v, weight=weight)
        return view

    def _require(self, identifier: str) -> None:
        if identifier not in self._nodes:
            raise NodeNotFoundError(
                f"Node not in graph: {identifier}",
                identifier=identifier,
            )
