from __future__ import annotations

from typing import Collection, Dict, List, Optional

from routegraph.lib.algorithms.base import Cost, NodeID


def closest_unvisited_node(
    distances: Optional[Dict[NodeID, Cost]],
    visited: Optional[Collection[NodeID]],
) -> Optional[NodeID]:
    """
    Select the next frontier node for the cheapest-route search.

    Scans ``distances`` in key order and returns the unvisited node with the
    smallest recorded distance. Comparison is strict, so the first minimum in
    key order wins ties.

    Args:
        distances: Recorded distance from the start node to each node.
        visited: Nodes already finalized.

    Returns:
        The closest unvisited node, or None if there is none (or the inputs are missing).
    """
    if distances is None or not isinstance(visited, (list, tuple, set, frozenset)):
        return None

    closest: Optional[NodeID] = None
    for node, distance in distances.items():
        if node in visited:
            continue
        if closest is None or distance < distances[closest]:
            closest = node

    return closest


def reconstruct_path(
    parents: Optional[Dict[NodeID, NodeID]],
    start: Optional[NodeID],
    end: Optional[NodeID],
) -> Optional[List[NodeID]]:
    """
    Walk a parent map backward from ``end`` to ``start``.

    The walk takes at least one step through the parent chain before it checks
    for ``start``, so ``start == end`` yields the cycle that leads back to the
    start node rather than a single-node path.

    Args:
        parents: Best known predecessor of each node.
        start: The start node.
        end: The end node.

    Returns:
        Nodes ordered from start to end, or None if ``end`` has no parent
        (unreachable), the chain never reaches ``start``, or an argument is missing.
    """
    if parents is None or not start or not end:
        return None

    if parents.get(end) is None:
        return None

    path = [end]
    node = end
    # A chain from SPF reaches start within len(parents) steps
    for _ in range(len(parents)):
        node = parents.get(node)
        if node is None:
            return None
        path.append(node)
        if node == start:
            path.reverse()
            return path

    return None
