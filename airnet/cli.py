"""Command-line entry point.

Example usage::

    airnet airport.txt                       # weight from flight count
    airnet airport.txt Passengers --targets ORD ATL
    python -m airnet airport.txt Distance --unweighted
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, get_config
from .domain.errors import DataSourceError, ParseError
from .domain.models import WeightAttribute
from .pipeline import analyze_routes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airnet",
        description="Rank airports of a route network by centrality.",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        help="Route data CSV file (default: configured data file)",
    )
    parser.add_argument(
        "weight",
        nargs="?",
        help="Weight attribute: "
        + " | ".join(member.value for member in WeightAttribute)
        + " (default: Flights)",
    )
    parser.add_argument("--targets", nargs="+", metavar="CODE", help="Airports to report")
    parser.add_argument(
        "--unweighted",
        action="store_true",
        help="Ignore route weights in closeness, betweenness and eigenvector",
    )
    parser.add_argument(
        "--endpoints",
        action="store_true",
        help="Count path endpoints in betweenness",
    )
    parser.add_argument(
        "--strict-connectivity",
        action="store_true",
        help="Fail eigenvector centrality on a disconnected graph",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Compute the four measures in parallel threads",
    )
    parser.add_argument("--log-level", help="Logging level (default: configured)")
    return parser


def _apply_options(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    update = {}
    if args.unweighted:
        update.update(
            closeness_weighted=False,
            betweenness_weighted=False,
            eigenvector_weighted=False,
        )
    if args.endpoints:
        update["betweenness_endpoints"] = True
    if args.strict_connectivity:
        update["eigenvector_disconnected"] = "raise"
    if args.parallel:
        update["parallel"] = True
    if not update:
        return config
    return config.model_copy(
        update={"centrality": config.centrality.model_copy(update=update)}
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _apply_options(get_config(), args)

    logging.basicConfig(
        level=(args.log_level or config.observability.level).upper(),
        format=config.observability.format,
    )

    data_file = args.data_file or config.graph.data_path
    print(f"Using data file:  {data_file}")

    try:
        report = analyze_routes(
            data_file,
            weight=args.weight,
            targets=args.targets,
            config=config,
        )
    except (ParseError, DataSourceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
