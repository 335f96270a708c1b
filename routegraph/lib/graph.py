from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional

import networkx as nx

from routegraph.errors import InputValidationError
from routegraph.config import SEARCH_CONFIG
from routegraph.lib.algorithms.base import CheapestRoute, Cost, NodeID, Route, RouteCost
from routegraph.lib.algorithms.route_cost import route_cost
from routegraph.lib.algorithms.routes import find_routes
from routegraph.lib.algorithms.spf import cheapest_route
from routegraph.logging import get_logger
from routegraph.validation import (
    is_valid_cheapest_route_query,
    is_valid_route,
    is_valid_route_limit,
    is_valid_route_search,
)

logger = get_logger(__name__)


class RouteGraph(nx.DiGraph):
    """
    A weighted, directed graph of single-letter nodes with route queries.

    Adjacency is the insertion-ordered dict-of-dicts inherited from
    networkx.DiGraph; each edge carries its weight under the ``cost``
    attribute. There is at most one edge per ordered pair of nodes: adding
    an edge again overwrites its cost.

    The graph is meant to be built first and queried afterwards. Queries do
    not tolerate structural changes while they run.

    Inherits from:
        networkx.DiGraph
    """

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[NodeID, Mapping[NodeID, Cost]]) -> RouteGraph:
        """
        Build a graph from a mapping such as ``{"A": {"B": 1, "C": 4}, "B": {}}``.

        Args:
            adjacency: Source node -> (target node -> cost).

        Returns:
            RouteGraph: A new graph with the edges added in mapping order.
        """
        graph = cls()
        for src_node, targets in adjacency.items():
            graph.add_node(src_node)
            for dst_node, cost in targets.items():
                graph.add_edge(src_node, dst_node, cost)
        return graph

    def add_edge(
        self, u_for_edge: NodeID, v_for_edge: NodeID, cost: Cost, **attr: Any
    ) -> None:
        """
        Add (or overwrite) the directed edge u_for_edge -> v_for_edge.

        Missing nodes are created, source first. No validation is done here;
        callers that take untrusted input validate before calling.

        Args:
            u_for_edge (NodeID): The source node.
            v_for_edge (NodeID): The target node.
            cost (Cost): The edge weight.
            **attr: Additional edge attributes.
        """
        super().add_edge(u_for_edge, v_for_edge, cost=cost, **attr)

    def adjacency_costs(self) -> Dict[NodeID, Dict[NodeID, Cost]]:
        """
        Return the graph as source node -> (target node -> cost).

        Every node appears as a key, including nodes without outgoing edges.
        """
        return {
            node: {nbr: attr["cost"] for nbr, attr in nbrs.items()}
            for node, nbrs in self._adj.items()
        }

    #
    # Route queries
    #
    def calculate_route_cost(self, route: Route) -> RouteCost:
        """
        Calculate the cost of a literal route.

        Args:
            route: Node IDs in travel order, e.g. ``["A", "B", "E"]``.

        Returns:
            RouteCost: The total cost, or NO_SUCH_ROUTE if some hop has no
            direct edge or the first node is not in the graph.

        Raises:
            InputValidationError: If route is not a non-empty list of valid nodes.
        """
        if not is_valid_route(route):
            raise InputValidationError("Input is not a valid list of nodes")

        result = route_cost(self, route)
        logger.debug("Cost of route %s: %s", "-".join(route), result)
        return result

    def get_all_possible_routes(
        self,
        start: NodeID,
        end: NodeID,
        max_stops: Cost = math.inf,
        max_cost: Cost = math.inf,
        reuse_route: bool = False,
        max_routes: Optional[int] = None,
    ) -> List[List[NodeID]]:
        """
        Get all possible routes between start and end nodes.

        Args:
            start: The start node.
            end: The end node.
            max_stops: Maximum number of edges per route (default: unbounded).
            max_cost: Routes must cost strictly less than this (default: unbounded).
            reuse_route: Allow routes to revisit nodes and continue past ``end``.
                Requires at least one finite bound.
            max_routes: Stop after this many routes; defaults to
                ``SEARCH_CONFIG.max_routes`` (unbounded unless configured).

        Returns:
            List[List[NodeID]]: Routes in traversal order (possibly empty).

        Raises:
            InputValidationError: If the inputs are not valid, or start/end are
                not nodes of the graph.
        """
        if not is_valid_route_search(start, end, max_stops, max_cost, reuse_route):
            raise InputValidationError("Input is not valid!")

        max_routes = SEARCH_CONFIG.resolve_max_routes(max_routes)
        if not is_valid_route_limit(max_routes):
            raise InputValidationError("max_routes must be a positive integer")

        self._check_endpoints(start, end)

        routes, truncated = find_routes(
            self,
            start,
            end,
            max_stops=max_stops,
            max_cost=max_cost,
            reuse_route=reuse_route,
            max_routes=max_routes,
        )
        if truncated:
            logger.warning(
                "Route search %s->%s stopped at the limit of %d routes",
                start,
                end,
                max_routes,
            )
        logger.debug("Found %d routes from %s to %s", len(routes), start, end)
        return routes

    def get_cheapest_route(self, start: NodeID, end: NodeID) -> CheapestRoute:
        """
        Get the cheapest route between start and end nodes.

        When ``start == end`` the result is the cheapest cycle through the node.

        Args:
            start: The start node.
            end: The end node.

        Returns:
            CheapestRoute: Cost and route, e.g. ``CheapestRoute(cost=4, route=["A", "B", "C"])``.
            If end is unreachable the cost is ``math.inf`` and the route is None.

        Raises:
            InputValidationError: If the inputs are not valid, or start/end are
                not nodes of the graph.
        """
        if not is_valid_cheapest_route_query(start, end):
            raise InputValidationError("Input is not valid!")

        self._check_endpoints(start, end)

        result = cheapest_route(self, start, end)
        logger.debug("Cheapest route %s->%s: %s", start, end, result)
        return result

    def _check_endpoints(self, start: NodeID, end: NodeID) -> None:
        if start not in self:
            raise InputValidationError(f"Start node '{start}' not found")
        if end not in self:
            raise InputValidationError(f"End node '{end}' not found")
