"""Centrality service - Main orchestrator.

Loads route records, builds the graph once, then runs the four
centrality measures over it. A failing measure is recorded in the
report and does not affect the others; ingestion failures abort the
whole run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Dict, Optional, Tuple, Union

from ..centrality import (
    betweenness_centrality,
    closeness_centrality,
    degree_centrality,
    eigenvector_centrality,
)
from ..config import CentralityConfig
from ..domain.errors import AirNetError
from ..domain.models import (
    CentralityMeasure,
    CentralityReport,
    CentralityResult,
    WeightAttribute,
)
from ..graph.builder import build_graph
from ..graph.model import Graph
from ..ports.centrality import CentralityAlgorithmPort
from ..ports.records import RouteRecordSourcePort

Outcome = Tuple[CentralityMeasure, Union[CentralityResult, AirNetError]]


@dataclass
class CentralityService:
    """Main service for ranking airports.

    This service orchestrates the full run:
    1. Record loading (fail-fast)
    2. Graph construction
    3. Degree, closeness, betweenness and eigenvector centrality

    Attributes:
        record_source: Supplies the route records
        config: Options of the centrality measures
        weight: Attribute used as edge weight
    """

    record_source: RouteRecordSourcePort
    config: CentralityConfig = field(default_factory=CentralityConfig)
    weight: Union[WeightAttribute, str, None] = WeightAttribute.FLIGHTS

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.weight = WeightAttribute.parse(self.weight)

    def build(self) -> Graph:
        """Load the records and build the route graph.

        Raises:
            ParseError: If any record is malformed.
            DataSourceError: If the records cannot be read.
        """
        records = self.record_source.load()
        return build_graph(records, self.weight)

    def algorithms(self) -> Dict[CentralityMeasure, CentralityAlgorithmPort]:
        """Bind each measure to its configured options."""
        cfg = self.config
        return {
            CentralityMeasure.DEGREE: degree_centrality,
            CentralityMeasure.CLOSENESS: partial(
                closeness_centrality,
                weighted=cfg.closeness_weighted,
                wf_improved=cfg.closeness_wf_improved,
            ),
            CentralityMeasure.BETWEENNESS: partial(
                betweenness_centrality,
                weighted=cfg.betweenness_weighted,
                normalized=cfg.betweenness_normalized,
                endpoints=cfg.betweenness_endpoints,
            ),
            CentralityMeasure.EIGENVECTOR: partial(
                eigenvector_centrality,
                weighted=cfg.eigenvector_weighted,
                max_iter=cfg.eigenvector_max_iter,
                tol=cfg.eigenvector_tolerance,
                disconnected=cfg.eigenvector_disconnected,
            ),
        }

    def analyze(self, graph: Optional[Graph] = None) -> CentralityReport:
        """Run all four measures.

        Args:
            graph: A prebuilt graph; built from the record source if omitted.

        Returns:
            CentralityReport with one result or one error per measure.

        Raises:
            ParseError: If ingestion fails; no measure is computed.
            DataSourceError: If the records cannot be read.
        """
        if graph is None:
            graph = self.build()

        self._logger.info(
            "Starting centrality analysis",
            extra={
                "nodes": graph.number_of_nodes,
                "edges": graph.number_of_edges,
                "parallel": self.config.parallel,
            },
        )

        algorithms = self.algorithms()
        if self.config.parallel:
            with ThreadPoolExecutor(max_workers=len(algorithms)) as pool:
                futures = [
                    pool.submit(self._run, measure, algorithm, graph)
                    for measure, algorithm in algorithms.items()
                ]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [
                self._run(measure, algorithm, graph)
                for measure, algorithm in algorithms.items()
            ]

        results: Dict[CentralityMeasure, CentralityResult] = {}
        errors: Dict[CentralityMeasure, AirNetError] = {}
        for measure, outcome in outcomes:
            if isinstance(outcome, AirNetError):
                errors[measure] = outcome
            else:
                results[measure] = outcome

        return CentralityReport(
            weight_attribute=self.weight,
            node_count=graph.number_of_nodes,
            edge_count=graph.number_of_edges,
            results=results,
            errors=errors,
        )

    def _run(
        self,
        measure: CentralityMeasure,
        algorithm: CentralityAlgorithmPort,
        graph: Graph,
    ) -> Outcome:
        try:
            scores = algorithm(graph)
        except AirNetError as e:
            self._logger.warning(
                "Centrality measure failed",
                extra={"measure": measure.label, "error": str(e)},
            )
            return measure, e

        self._logger.info(
            "Centrality measure computed",
            extra={"measure": measure.label, "nodes": len(scores)},
        )
        return measure, CentralityResult(measure, scores)
