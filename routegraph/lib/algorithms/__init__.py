"""Route algorithms over a RouteGraph: route cost, route enumeration, cheapest route."""

from routegraph.lib.algorithms.base import (
    NO_SUCH_ROUTE,
    CheapestRoute,
    Cost,
    NodeID,
    Route,
    RouteCost,
)
from routegraph.lib.algorithms.path_utils import closest_unvisited_node, reconstruct_path
from routegraph.lib.algorithms.route_cost import route_cost
from routegraph.lib.algorithms.routes import find_routes
from routegraph.lib.algorithms.spf import cheapest_route, spf

__all__ = [
    "NO_SUCH_ROUTE",
    "CheapestRoute",
    "Cost",
    "NodeID",
    "Route",
    "RouteCost",
    "closest_unvisited_node",
    "reconstruct_path",
    "route_cost",
    "find_routes",
    "cheapest_route",
    "spf",
]
