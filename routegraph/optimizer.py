"""RouteOptimizer: build a RouteGraph from edge descriptors and query it.

Edge descriptors are strings of two node letters followed by a positive
integer cost, e.g. ``"AB1"`` or ``"CF12"``.

Example:
    optimizer = RouteOptimizer.from_edges(["AB1", "AC4", "BC2"])
    optimizer.calculate_route_cost(["A", "B", "C"])  # RouteCost(cost=3)
    await optimizer.get_cheapest_route_async("A", "C")
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from routegraph.errors import InputValidationError
from routegraph.lib.algorithms.base import CheapestRoute, Cost, NodeID, Route, RouteCost
from routegraph.lib.graph import RouteGraph
from routegraph.logging import get_logger
from routegraph.validation import is_valid_edge_list

logger = get_logger(__name__)


def parse_edge(edge: str) -> Tuple[NodeID, NodeID, int]:
    """Split a validated descriptor such as ``"CF12"`` into ``("C", "F", 12)``."""
    return edge[0], edge[1], int(edge[2:])


class RouteOptimizer:
    """Route queries over a graph, in blocking and ``async`` flavors.

    The async methods are coroutines wrapping the blocking call: they return
    the same value, or raise the same InputValidationError, when awaited.
    """

    def __init__(self, graph: Optional[RouteGraph] = None) -> None:
        self.graph = graph if graph is not None else RouteGraph()

    @classmethod
    def from_edges(cls, edges: Sequence[str]) -> RouteOptimizer:
        """Create a RouteOptimizer from edge descriptors.

        Args:
            edges: Descriptors such as ``["AB1", "AC4", "BC2"]``, added in order.

        Returns:
            RouteOptimizer: Wrapping a new graph with those edges.

        Raises:
            InputValidationError: If edges is empty, not a list/tuple, or
                contains any malformed descriptor.
        """
        if not is_valid_edge_list(edges):
            raise InputValidationError("Input is not a valid list of edges")

        graph = RouteGraph()
        for edge in edges:
            graph.add_edge(*parse_edge(edge))

        logger.debug(
            "Built graph with %d nodes and %d edges",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return cls(graph)

    def calculate_route_cost(self, route: Route) -> RouteCost:
        return self.graph.calculate_route_cost(route)

    async def calculate_route_cost_async(self, route: Route) -> RouteCost:
        return self.calculate_route_cost(route)

    def get_all_possible_routes(
        self,
        start: NodeID,
        end: NodeID,
        max_stops: Cost = math.inf,
        max_cost: Cost = math.inf,
        reuse_route: bool = False,
        max_routes: Optional[int] = None,
    ) -> List[List[NodeID]]:
        return self.graph.get_all_possible_routes(
            start, end, max_stops, max_cost, reuse_route, max_routes
        )

    async def get_all_possible_routes_async(
        self,
        start: NodeID,
        end: NodeID,
        max_stops: Cost = math.inf,
        max_cost: Cost = math.inf,
        reuse_route: bool = False,
        max_routes: Optional[int] = None,
    ) -> List[List[NodeID]]:
        return self.get_all_possible_routes(
            start, end, max_stops, max_cost, reuse_route, max_routes
        )

    def get_cheapest_route(self, start: NodeID, end: NodeID) -> CheapestRoute:
        return self.graph.get_cheapest_route(start, end)

    async def get_cheapest_route_async(
        self, start: NodeID, end: NodeID
    ) -> CheapestRoute:
        return self.get_cheapest_route(start, end)
