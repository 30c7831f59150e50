"""Ports - Protocols the core depends on.

Adapters implement these; services only see the protocols.
"""

from .centrality import CentralityAlgorithmPort
from .records import RouteRecordSourcePort

__all__ = ["CentralityAlgorithmPort", "RouteRecordSourcePort"]
