"""Centrality ports - Abstraction over a single centrality measure."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol

if TYPE_CHECKING:
    from ..graph.model import Graph


class CentralityAlgorithmPort(Protocol):
    """A read-only computation from a graph to per-airport scores.

    Implementations: the functions in the ``airnet.centrality`` package,
    bound to their options by CentralityService.
    """

    def __call__(self, graph: Graph) -> Mapping[str, float]:
        """Score every airport of ``graph``.

        Raises:
            AirNetError: Measure-specific failure; it must not affect
                other measures.
        """
        ...
