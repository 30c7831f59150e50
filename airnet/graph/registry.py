"""Node registry: one entry per distinct airport code."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from ..domain.models import Node


class NodeRegistry:
    """Deduplicates airport codes, first-seen attribute wins.

    The registry is an ordinary value owned by whoever builds the graph.
    Iteration follows registration order.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}

    def register(self, identifier: str, attribute: float) -> None:
        if identifier not in self._nodes:
            self._nodes[identifier] = Node(identifier, float(attribute))

    def get(self, identifier: str) -> Optional[Node]:
        return self._nodes.get(identifier)

    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes.values())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)
