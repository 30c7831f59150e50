"""Route record adapters - Implementations of RouteRecordSourcePort.

Available implementations:
- CSVRouteRepository: Loads route records from a CSV file
"""

from .csv_repository import CSVRouteRepository

__all__ = ["CSVRouteRepository"]
