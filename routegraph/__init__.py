"""routegraph: route costs, route enumeration and cheapest routes on a small directed graph.

Nodes are single uppercase letters; edges are directed and carry a positive cost.

Primary API:
    RouteGraph - Graph model with the three route queries
    RouteOptimizer - Build from edge descriptors ("AB1"), blocking and async queries
    RouteCost, NO_SUCH_ROUTE - Result of a route cost query
    CheapestRoute - Result of a cheapest-route query
    InputValidationError - Raised on malformed input

Example:
    from routegraph import RouteOptimizer

    optimizer = RouteOptimizer.from_edges(["AB1", "AC4", "BC2", "CA3"])
    optimizer.calculate_route_cost(["A", "B", "C"]).cost  # 3
    optimizer.get_all_possible_routes("A", "C", max_stops=2)  # [["A", "B", "C"], ["A", "C"]]
    optimizer.get_cheapest_route("A", "A")  # CheapestRoute(cost=6, route=["A", "B", "C", "A"])
"""

from __future__ import annotations

from routegraph import cli, logging
from routegraph.config import SEARCH_CONFIG, RouteSearchConfig
from routegraph.errors import InputValidationError
from routegraph.lib.algorithms.base import NO_SUCH_ROUTE, CheapestRoute, RouteCost
from routegraph.lib.graph import RouteGraph
from routegraph.optimizer import RouteOptimizer

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Model
    "RouteGraph",
    "RouteOptimizer",
    # Results
    "RouteCost",
    "NO_SUCH_ROUTE",
    "CheapestRoute",
    # Errors
    "InputValidationError",
    # Configuration
    "RouteSearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "cli",
    "logging",
]
