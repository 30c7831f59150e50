"""High-level pipeline for the route-network analysis.

The pipeline is organized in several stages:

1. Record loading (from the route data CSV file).
2. Graph construction (airports and routes).
3. Centrality computation (degree, closeness, betweenness, eigenvector).
4. Report rendering for a list of target airports.

This module wires these stages together and renders the text report.
Each step delegates work to dedicated, testable modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import NodeNotFoundError
from .domain.models import CentralityMeasure, CentralityReport
from .ports.records import RouteRecordSourcePort
from .services import CentralityService


def render_report(
    report: CentralityReport,
    targets: Sequence[str],
    precision: int = 6,
) -> str:
    """Render the scores of ``targets`` as text.

    Airports missing from the graph are reported as not found, and a
    measure that failed is reported once with its error; neither stops
    the rest of the report.
    """
    lines: List[str] = [
        f"Number of nodes/unique airport codes={report.node_count}",
        f"Total number of flights/edges={report.edge_count} "
        f"using weight from {report.weight_attribute.value}",
    ]

    for measure in CentralityMeasure:
        error = report.failed(measure)
        if error is not None:
            lines.append(f" {measure.label} centrality unavailable: {error}")
            continue

        result = report.result(measure)
        for target in targets:
            try:
                score = result.get(target)
            except NodeNotFoundError:
                lines.append(f" {measure.label} centrality for {target} = not found")
                continue
            lines.append(f" {measure.label} centrality for {target} ={score:.{precision}f}")

    return "\n".join(lines)


def analyze_routes(
    data_file: Optional[Union[str, Path]] = None,
    weight: Optional[str] = None,
    targets: Optional[Sequence[str]] = None,
    *,
    config: Optional[AppConfig] = None,
    record_source: Optional[RouteRecordSourcePort] = None,
) -> str:
    """Run the whole pipeline and return the report text.

    This helper is designed to be reused from other front-ends
    (CLI, notebooks, tests, etc.).

    Args:
        data_file: Route data file; defaults to the configured one.
        weight: Weight attribute; defaults to the configured one.
        targets: Airports to report; defaults to the configured ones.
        config: Configuration override.
        record_source: Record source override (skips the CSV file).

    Raises:
        ParseError: If the route data is malformed.
        DataSourceError: If the route data cannot be read.
    """
    config = config or get_config()
    container = Container.create_default(config)

    if record_source is not None:
        container.register(RouteRecordSourcePort, lambda: record_source)
    elif data_file is not None:
        from .adapters.records import CSVRouteRepository

        path = Path(data_file)
        container.register(
            RouteRecordSourcePort,
            lambda: CSVRouteRepository(config.graph, path=path),
        )

    service: CentralityService = container.resolve(CentralityService)
    if weight is not None:
        service = CentralityService(
            record_source=service.record_source,
            config=service.config,
            weight=weight,
        )

    report = service.analyze()
    return render_report(
        report,
        targets if targets is not None else config.report.targets,
        precision=config.report.precision,
    )
