from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, List, Tuple

from routegraph.lib.algorithms.base import CheapestRoute, Cost, NodeID
from routegraph.lib.algorithms.path_utils import (
    closest_unvisited_node,
    reconstruct_path,
)

if TYPE_CHECKING:
    from routegraph.lib.graph import RouteGraph


def spf(
    graph: RouteGraph,
    src_node: NodeID,
    dst_node: NodeID,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, NodeID]]:
    """
    Dijkstra-style relaxation from ``src_node`` with a linear-scan frontier.

    The distance map starts with ``dst_node`` at infinity, merged with the
    direct edges out of ``src_node``. The source itself gets no distance of its
    own, so when ``src_node == dst_node`` the destination is only reached
    through a cycle back to it.

    Args:
        graph: Directed graph to search. Both nodes must be in it.
        src_node: Source node.
        dst_node: Destination node.

    Returns:
        A tuple of (distances, parents):
          - distances: Best known cost from src_node to each recorded node.
          - parents: Best known predecessor of each recorded node.
    """
    outgoing_adjacencies = graph._adj

    distances: Dict[NodeID, Cost] = {dst_node: math.inf}
    parents: Dict[NodeID, NodeID] = {}
    for neighbor_id, edge_attr in outgoing_adjacencies[src_node].items():
        distances[neighbor_id] = edge_attr["cost"]
        parents[neighbor_id] = src_node

    visited: List[NodeID] = []
    node_id = closest_unvisited_node(distances, visited)

    while node_id is not None:
        distance = distances[node_id]

        for neighbor_id, edge_attr in outgoing_adjacencies[node_id].items():
            new_distance = distance + edge_attr["cost"]
            if neighbor_id not in distances or new_distance < distances[neighbor_id]:
                distances[neighbor_id] = new_distance
                parents[neighbor_id] = node_id

        visited.append(node_id)
        node_id = closest_unvisited_node(distances, visited)

    return distances, parents


def cheapest_route(
    graph: RouteGraph, src_node: NodeID, dst_node: NodeID
) -> CheapestRoute:
    """
    Find the cheapest route from ``src_node`` to ``dst_node``.

    Args:
        graph: Directed graph to search. Both nodes must be in it.
        src_node: Source node.
        dst_node: Destination node.

    Returns:
        CheapestRoute with the cost (``math.inf`` if unreachable) and the route
        (None if unreachable).
    """
    distances, parents = spf(graph, src_node, dst_node)
    return CheapestRoute(
        cost=distances[dst_node],
        route=reconstruct_path(parents, src_node, dst_node),
    )
