"""Route record ports - Abstractions for loading route data.

The core only needs an ordered sequence of typed route records; where
they come from (CSV file, database, test fixture) is up to the adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteRecord


class RouteRecordSourcePort(Protocol):
    """Port for loading route records.

    Implementation: adapters/records/csv_repository.py

    Loading is all-or-nothing: a single malformed record fails the
    whole load, so no graph is ever built from partial data.
    """

    def load(self) -> Sequence[RouteRecord]:
        """Load every route record, in source order.

        Returns:
            The records as typed values.

        Raises:
            ParseError: If any record has a malformed field.
            DataSourceError: If the source cannot be read.
        """
        ...
