"""Tests for CentralityService and the dependency container."""

from dataclasses import dataclass
from typing import Sequence

import pytest

from airnet.config import AppConfig, CentralityConfig
from airnet.container import Container
from airnet.domain.errors import (
    ConvergenceError,
    DisconnectedGraphError,
    NodeNotFoundError,
    ParseError,
    ZeroWeightError,
)
from airnet.domain.models import CentralityMeasure, RouteRecord, WeightAttribute
from airnet.ports.records import RouteRecordSourcePort
from airnet.services import CentralityService


@dataclass
class StaticRecordSource:
    records: Sequence[RouteRecord]
    calls: int = 0

    def load(self) -> Sequence[RouteRecord]:
        self.calls += 1
        return self.records


class FailingRecordSource:
    def load(self):
        raise ParseError("Line 2: Flights is not a number", line_number=2)


TRIANGLE = [
    RouteRecord("A", "B", passengers=7.0, flights=2.0),
    RouteRecord("B", "C", passengers=7.0, flights=2.0),
    RouteRecord("A", "C", passengers=1.0, flights=10.0),
]


def test_analyze_runs_all_four_measures():
    service = CentralityService(StaticRecordSource(TRIANGLE))

    report = service.analyze()

    assert report.is_complete
    assert report.node_count == 3
    assert report.edge_count == 3
    assert report.weight_attribute is WeightAttribute.FLIGHTS
    assert report.score(CentralityMeasure.DEGREE, "B") == 1.0
    assert report.score(CentralityMeasure.CLOSENESS, "B") == pytest.approx(0.5)
    assert report.score(CentralityMeasure.BETWEENNESS, "B") == pytest.approx(1.0)
    assert report.score(CentralityMeasure.EIGENVECTOR, "B") > 0


def test_analyze_uses_selected_weight():
    service = CentralityService(StaticRecordSource(TRIANGLE), weight="Passengers")

    report = service.analyze()

    # With passenger weights the direct A-C route (1) is the shortest.
    assert report.weight_attribute is WeightAttribute.PASSENGERS
    assert report.score(CentralityMeasure.BETWEENNESS, "B") == 0.0


def test_failing_measure_does_not_affect_others():
    config = CentralityConfig(eigenvector_max_iter=1, eigenvector_tolerance=1e-15)
    records = TRIANGLE + [RouteRecord("C", "D", flights=1.0)]
    service = CentralityService(StaticRecordSource(records), config=config)

    report = service.analyze()

    assert isinstance(report.failed(CentralityMeasure.EIGENVECTOR), ConvergenceError)
    assert report.score(CentralityMeasure.DEGREE, "C") == 1.0
    assert CentralityMeasure.CLOSENESS in report.results
    assert CentralityMeasure.BETWEENNESS in report.results


def test_zero_weight_route_only_fails_betweenness():
    records = [
        RouteRecord("S", "X", passengers=1.0),
        RouteRecord("S", "Y", passengers=1.0),
        RouteRecord("X", "Y", passengers=0.0),
    ]

    report = CentralityService(StaticRecordSource(records), weight="Passengers").analyze()

    assert isinstance(report.failed(CentralityMeasure.BETWEENNESS), ZeroWeightError)
    assert report.score(CentralityMeasure.CLOSENESS, "X") == report.score(
        CentralityMeasure.CLOSENESS, "Y"
    )
    assert report.score(CentralityMeasure.EIGENVECTOR, "S") > 0


def test_disconnected_policy_from_config():
    config = CentralityConfig(eigenvector_disconnected="raise")
    records = TRIANGLE + [RouteRecord("X", "Y", flights=1.0)]

    report = CentralityService(StaticRecordSource(records), config=config).analyze()

    assert isinstance(report.failed(CentralityMeasure.EIGENVECTOR), DisconnectedGraphError)
    assert report.score(CentralityMeasure.DEGREE, "X") == 0.25


def test_unknown_node_lookup_is_recoverable():
    report = CentralityService(StaticRecordSource(TRIANGLE)).analyze()

    with pytest.raises(NodeNotFoundError):
        report.score(CentralityMeasure.CLOSENESS, "ORD")


def test_parse_error_aborts_the_run():
    service = CentralityService(FailingRecordSource())

    with pytest.raises(ParseError):
        service.analyze()


def test_parallel_and_sequential_runs_agree():
    records = TRIANGLE + [RouteRecord("C", "D", flights=3.0), RouteRecord("D", "A", flights=1.0)]
    sequential = CentralityService(StaticRecordSource(records)).analyze()
    parallel = CentralityService(
        StaticRecordSource(records), config=CentralityConfig(parallel=True)
    ).analyze()

    for measure in CentralityMeasure:
        assert parallel.result(measure).scores == sequential.result(measure).scores


def test_analyze_accepts_prebuilt_graph():
    source = StaticRecordSource(TRIANGLE)
    service = CentralityService(source)
    graph = service.build()

    service.analyze(graph)

    assert source.calls == 1


class TestContainer:
    """Test suite for the dependency container."""

    def test_default_bindings_resolve_service(self):
        config = AppConfig()
        config.graph.weight_attribute = "Seats"
        container = Container.create_default(config)

        service = container.resolve(CentralityService)

        assert service.weight is WeightAttribute.SEATS
        assert container.resolve(CentralityService) is service

    def test_record_source_can_be_swapped(self):
        container = Container.create_default(AppConfig())
        container.register(RouteRecordSourcePort, lambda: StaticRecordSource(TRIANGLE))

        report = container.resolve(CentralityService).analyze()

        assert report.node_count == 3

    def test_non_singleton_factory(self):
        container = Container(config=AppConfig())
        container.register(list, list, singleton=False)

        assert container.resolve(list) is not container.resolve(list)

    def test_unregistered_type_raises_key_error(self):
        with pytest.raises(KeyError):
            Container(config=AppConfig()).resolve(dict)