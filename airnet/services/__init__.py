"""Services layer - Application orchestration.

Available services:
- CentralityService: Builds the route graph and runs the four measures
"""

from .centrality_service import CentralityService

__all__ = ["CentralityService"]
