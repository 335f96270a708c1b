from __future__ import annotations

from typing import TYPE_CHECKING

from routegraph.lib.algorithms.base import NO_SUCH_ROUTE, Cost, Route, RouteCost

if TYPE_CHECKING:
    from routegraph.lib.graph import RouteGraph


def route_cost(graph: RouteGraph, route: Route) -> RouteCost:
    """
    Sum the edge costs along a literal route.

    The route must already be validated. Every consecutive pair of nodes must be
    joined by a direct edge; the first missing edge ends the walk.

    Args:
        graph: The graph to evaluate against.
        route: Node IDs in travel order (at least one).

    Returns:
        RouteCost with the total, or NO_SUCH_ROUTE if the first node is not in
        the graph or some hop has no direct edge. A single-node route costs 0.
    """
    outgoing_adjacencies = graph._adj

    current = route[0]
    if current not in outgoing_adjacencies:
        return NO_SUCH_ROUTE

    total: Cost = 0
    for next_node in route[1:]:
        edge_attr = outgoing_adjacencies[current].get(next_node)
        if edge_attr is None:
            return NO_SUCH_ROUTE
        total += edge_attr["cost"]
        current = next_node

    return RouteCost(total)
