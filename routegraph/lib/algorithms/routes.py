from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from routegraph.lib.algorithms.base import Cost, NodeID

if TYPE_CHECKING:
    from routegraph.lib.graph import RouteGraph


def find_routes(
    graph: RouteGraph,
    start: NodeID,
    end: NodeID,
    max_stops: Cost,
    max_cost: Cost,
    reuse_route: bool = False,
    max_routes: Optional[int] = None,
) -> Tuple[List[List[NodeID]], bool]:
    """
    Enumerate routes from ``start`` to ``end`` by depth-limited backtracking.

    A branch is cut as soon as it has more than ``max_stops`` edges or its cost
    reaches ``max_cost``; the cut is applied before checking for ``end``. The
    start node itself (zero stops) never counts as a route, even when
    ``start == end``. Without ``reuse_route`` a route ends at its first arrival
    at ``end``; with it, the search continues through ``end`` and may pass any
    node or edge more than once.

    Neighbors are explored in the order their edges were added, which fixes the
    order of the returned routes. The search keeps its own stack of frames, so
    deep bounds are not limited by the interpreter's recursion limit.

    Args:
        graph: The graph to search. Inputs must already be validated.
        start: Start node.
        end: End node.
        max_stops: Maximum number of edges per route (``math.inf`` for no limit).
        max_cost: Exclusive upper bound on route cost (``math.inf`` for no limit).
        reuse_route: Whether routes may continue past ``end`` and revisit nodes.
        max_routes: Stop after recording this many routes (None for no cap).

    Returns:
        A tuple of (routes, truncated):
          - routes: Recorded routes, each a list of node IDs.
          - truncated: True if the search stopped early at ``max_routes``.
    """
    outgoing_adjacencies = graph._adj
    routes_found: List[List[NodeID]] = []

    # Each frame: [node, route up to and including node, depth, cost, neighbor iterator]
    stack: List[List[Any]] = []

    def _enter(
        node: NodeID, route: Tuple[NodeID, ...], depth: int, cost: Cost
    ) -> bool:
        """Visit a node; return False once the route cap is hit."""
        route = route + (node,)

        if depth > max_stops or cost >= max_cost:
            return True

        if node == end and depth > 0:
            routes_found.append(list(route))
            if max_routes is not None and len(routes_found) >= max_routes:
                return False
            if not reuse_route:
                return True

        stack.append(
            [node, route, depth, cost, iter(outgoing_adjacencies[node].items())]
        )
        return True

    if not _enter(start, (), 0, 0):
        return routes_found, True

    while stack:
        _, route, depth, cost, neighbors = stack[-1]
        nxt: Optional[Tuple[NodeID, Dict[str, Any]]] = next(neighbors, None)
        if nxt is None:
            # backtrack
            stack.pop()
            continue

        neighbor_id, edge_attr = nxt
        if not _enter(neighbor_id, route, depth + 1, cost + edge_attr["cost"]):
            return routes_found, True

    return routes_found, False
