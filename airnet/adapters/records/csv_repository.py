"""CSV route repository adapter.

Reads the route data file (one route per row, header on the first
line) into typed RouteRecord values:

    Origin_airport,Destination_airport,Numtimes,Passengers,Seats,
    Flights,Distance,Origin_population,Destination_population

Loading is fail-fast: the first malformed row raises ParseError and
nothing is returned.
"""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import DataSourceError, ParseError
from ...domain.models import RouteRecord

ORIGIN_COLUMN = "Origin_airport"
DESTINATION_COLUMN = "Destination_airport"

# CSV column -> RouteRecord field
NUMERIC_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("Numtimes", "route_count"),
    ("Passengers", "passengers"),
    ("Seats", "seats"),
    ("Flights", "flights"),
    ("Distance", "distance"),
    ("Origin_population", "origin_population"),
    ("Destination_population", "destination_population"),
)

REQUIRED_COLUMNS = (ORIGIN_COLUMN, DESTINATION_COLUMN) + tuple(
    column for column, _ in NUMERIC_COLUMNS
)


@dataclass
class CSVRouteRepository:
    """Route record source backed by a CSV file.

    This adapter implements RouteRecordSourcePort.

    Attributes:
        config: Graph configuration (data directory and file name)
        path: Explicit file path, overriding the configured one
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _records: Optional[Tuple[RouteRecord, ...]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def source_path(self) -> Path:
        return self.path if self.path is not None else self.config.data_path

    def load(self) -> Sequence[RouteRecord]:
        """Load all route records from the CSV file.

        Returns:
            The records in file order.

        Raises:
            ParseError: If a row is missing a column or has a malformed number.
            DataSourceError: If the file cannot be read.
        """
        if self._records is not None:
            return self._records

        self._logger.debug("Loading routes", extra={"path": str(self.source_path)})

        try:
            with self.source_path.open(newline="", encoding="utf-8") as f:
                records = self._read_records(csv.DictReader(f))
        except OSError as e:
            raise DataSourceError(
                f"Failed to read route data {self.source_path}",
                cause=e,
                file_path=str(self.source_path),
            )
        except csv.Error as e:
            raise ParseError(f"Malformed CSV in {self.source_path}", cause=e)

        self._records = tuple(records)
        self._logger.info("Routes loaded", extra={"records": len(self._records)})
        return self._records

    def _read_records(self, reader: csv.DictReader) -> List[RouteRecord]:
        header = [name.strip() for name in (reader.fieldnames or [])]
        missing = [column for column in REQUIRED_COLUMNS if column not in header]
        if missing:
            raise ParseError(
                f"Missing column(s): {', '.join(missing)}",
                line_number=1,
                field_name=missing[0],
            )
        reader.fieldnames = header

        records: List[RouteRecord] = []
        for row in reader:
            records.append(self._parse_row(row, reader.line_num))
        return records

    def _parse_row(self, row: Dict[str, Optional[str]], line_number: int) -> RouteRecord:
        origin = (row.get(ORIGIN_COLUMN) or "").strip()
        destination = (row.get(DESTINATION_COLUMN) or "").strip()
        for column, value in ((ORIGIN_COLUMN, origin), (DESTINATION_COLUMN, destination)):
            if not value:
                raise ParseError(
                    f"Line {line_number}: empty {column}",
                    line_number=line_number,
                    field_name=column,
                    value=value,
                )

        values: Dict[str, float] = {}
        for column, attribute in NUMERIC_COLUMNS:
            raw = (row.get(column) or "").strip()
            try:
                number = float(raw)
            except ValueError as e:
                raise ParseError(
                    f"Line {line_number}: {column} is not a number: {raw!r}",
                    cause=e,
                    line_number=line_number,
                    field_name=column,
                    value=raw,
                )
            if not math.isfinite(number):
                raise ParseError(
                    f"Line {line_number}: {column} is not finite: {raw!r}",
                    line_number=line_number,
                    field_name=column,
                    value=raw,
                )
            values[attribute] = number

        return RouteRecord(origin=origin, destination=destination, **values)

    def clear_cache(self) -> None:
        """Clear cached records."""
        self._records = None
        self._logger.debug("Route cache cleared")
