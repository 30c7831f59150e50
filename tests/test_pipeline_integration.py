"""Integration tests for the full pipeline and the command line."""

from pathlib import Path

import pytest

from airnet.cli import main
from airnet.config import AppConfig, reset_config
from airnet.domain.errors import ConvergenceError, ParseError
from airnet.domain.models import (
    CentralityMeasure,
    CentralityReport,
    CentralityResult,
    RouteRecord,
    WeightAttribute,
)
from airnet.pipeline import analyze_routes, render_report

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "airport.txt"

HEADER = (
    "Origin_airport,Destination_airport,Numtimes,Passengers,Seats,"
    "Flights,Distance,Origin_population,Destination_population"
)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_render_report_lists_targets_and_unknown_airports():
    report = CentralityReport(
        weight_attribute=WeightAttribute.FLIGHTS,
        node_count=2,
        edge_count=1,
        results={
            measure: CentralityResult(measure, {"ORD": 1.0, "ATL": 0.5})
            for measure in CentralityMeasure
            if measure is not CentralityMeasure.EIGENVECTOR
        },
        errors={
            CentralityMeasure.EIGENVECTOR: ConvergenceError(
                "Power iteration did not converge in 100 iterations"
            )
        },
    )

    text = render_report(report, ["ORD", "XYZ"], precision=3)

    assert "Number of nodes/unique airport codes=2" in text
    assert "Total number of flights/edges=1 using weight from Flights" in text
    assert " degree centrality for ORD =1.000" in text
    assert " closeness centrality for XYZ = not found" in text
    assert " eigenvector centrality unavailable: Power iteration" in text


def test_analyze_routes_on_sample_data():
    text = analyze_routes(DATA_FILE, weight="Passengers", targets=["ORD", "CMI", "SFO"])

    assert "Number of nodes/unique airport codes=6" in text
    assert "Total number of flights/edges=12 using weight from Passengers" in text
    assert " degree centrality for ORD =1.000000" in text
    assert " betweenness centrality for CMI =0.000000" in text
    assert " degree centrality for SFO = not found" in text


def test_analyze_routes_on_sample_data_with_default_weight():
    text = analyze_routes(DATA_FILE)

    assert "using weight from Flights" in text
    assert "unavailable" not in text
    for target in ("ORD", "CMI", "FLL", "ATL", "DCA", "PDX"):
        assert f" eigenvector centrality for {target} =" in text


def test_analyze_routes_with_record_source():
    class Source:
        def load(self):
            return [RouteRecord("A", "B", flights=2.0), RouteRecord("B", "C", flights=2.0)]

    text = analyze_routes(record_source=Source(), targets=["B"], config=AppConfig())

    assert " degree centrality for B =1.000000" in text
    assert " betweenness centrality for B =1.000000" in text


def test_analyze_routes_aborts_on_parse_error(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(HEADER + "\nORD,ATL,1,2,3,four,5,6,7\n", encoding="utf-8")

    with pytest.raises(ParseError):
        analyze_routes(path)


def test_cli_prints_report(capsys):
    exit_code = main([str(DATA_FILE), "Distance", "--targets", "ORD", "PDX"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert f"Using data file:  {DATA_FILE}" in out
    assert "using weight from Distance" in out
    assert " closeness centrality for PDX =" in out


def test_cli_options(capsys):
    exit_code = main(
        [str(DATA_FILE), "--unweighted", "--endpoints", "--parallel", "--strict-connectivity"]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "using weight from Flights" in out
    assert " betweenness centrality for ATL =" in out


def test_cli_reports_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text(HEADER + "\nORD,ATL,1,2,3,4,5,x,7\n", encoding="utf-8")

    exit_code = main([str(path)])

    assert exit_code == 1
    assert "Origin_population" in capsys.readouterr().err


def test_cli_reports_missing_file(tmp_path, capsys):
    exit_code = main([str(tmp_path / "missing.csv")])

    assert exit_code == 1
    assert "Failed to read route data" in capsys.readouterr().err
