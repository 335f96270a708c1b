"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import json
import logging
import math
import re
import sys
from typing import Any, Dict, List, Optional

from routegraph.errors import InputValidationError
from routegraph.logging import get_logger, set_global_log_level
from routegraph.optimizer import RouteOptimizer

logger = get_logger(__name__)

DEFAULT_EDGES = ["AB1", "AC4", "AD10", "BE3", "CD4", "CF2", "DE1", "EB3", "EA2", "FD1"]


def _split_edges(raw: List[str]) -> List[str]:
    """Accept ``AB1,AC4`` as well as ``AB1 AC4``."""
    return [item for chunk in raw for item in re.split(r"[,\s]+", chunk) if item]


def _split_route(raw: str) -> List[str]:
    """Accept ``A-B-E``, ``A,B,E`` and ``ABE``."""
    parts = [p for p in re.split(r"[-,\s]+", raw) if p]
    if len(parts) == 1 and len(parts[0]) > 1:
        return list(parts[0])
    return parts


def _bound(value: str) -> float:
    return math.inf if value.lower() in ("inf", "infinity") else float(value)


def _emit(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def _run_cost(optimizer: RouteOptimizer, args: argparse.Namespace) -> None:
    route = _split_route(args.route)
    result = optimizer.calculate_route_cost(route)
    _emit({"route": route, "cost": result.cost if result.found else str(result)})


def _run_routes(optimizer: RouteOptimizer, args: argparse.Namespace) -> None:
    routes = optimizer.get_all_possible_routes(
        args.start,
        args.end,
        max_stops=args.max_stops,
        max_cost=args.max_cost,
        reuse_route=args.reuse,
        max_routes=args.max_routes,
    )
    _emit({"count": len(routes), "routes": routes})


def _run_cheapest(optimizer: RouteOptimizer, args: argparse.Namespace) -> None:
    result = optimizer.get_cheapest_route(args.start, args.end)
    # JSON has no infinity; an unreachable end reports a null cost
    cost = None if math.isinf(result.cost) else result.cost
    _emit({"cost": cost, "route": result.route})


_COMMANDS = {
    "cost": _run_cost,
    "routes": _run_routes,
    "cheapest": _run_cheapest,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Query routes over a weighted directed graph.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{cost,routes,cheapest}",
        help="Available commands",
    )

    cost_parser = subparsers.add_parser("cost", help="Cost of a literal route")
    cost_parser.add_argument("route", help="Route as A-B-E, A,B,E or ABE")

    routes_parser = subparsers.add_parser(
        "routes", help="All routes between two nodes"
    )
    routes_parser.add_argument("start", help="Start node")
    routes_parser.add_argument("end", help="End node")
    routes_parser.add_argument(
        "--max-stops", type=_bound, default=math.inf, help="Maximum edges per route"
    )
    routes_parser.add_argument(
        "--max-cost",
        type=_bound,
        default=math.inf,
        help="Routes must cost strictly less than this",
    )
    routes_parser.add_argument(
        "--reuse",
        action="store_true",
        help="Allow revisiting nodes (needs --max-stops or --max-cost)",
    )
    routes_parser.add_argument(
        "--max-routes", type=int, default=None, help="Stop after this many routes"
    )

    cheapest_parser = subparsers.add_parser(
        "cheapest", help="Cheapest route between two nodes"
    )
    cheapest_parser.add_argument("start", help="Start node")
    cheapest_parser.add_argument("end", help="End node")

    for p in (cost_parser, routes_parser, cheapest_parser):
        p.add_argument(
            "--edges",
            "-e",
            nargs="+",
            default=DEFAULT_EDGES,
            help="Edge descriptors such as AB1 AC4 (comma or space separated)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        optimizer = RouteOptimizer.from_edges(_split_edges(args.edges))
        _COMMANDS[args.command](optimizer, args)
    except InputValidationError as e:
        logger.error(f"Invalid input for '{args.command}': {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
