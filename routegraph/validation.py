"""Input format checks for graph construction and queries.

Every check returns a bool; callers decide which error to raise.
"""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any

from routegraph.config import SEARCH_CONFIG


def is_valid_node(node: Any) -> bool:
    """Return True if ``node`` is a single uppercase letter (e.g. ``"A"``)."""
    if not node or not isinstance(node, str):
        return False
    return re.fullmatch(SEARCH_CONFIG.node_pattern, node) is not None


def is_valid_edge(edge: Any) -> bool:
    """Return True if ``edge`` is an edge descriptor such as ``"AB1"`` or ``"CF12"``."""
    if not edge or not isinstance(edge, str):
        return False
    return re.fullmatch(SEARCH_CONFIG.edge_pattern, edge) is not None


def _is_sequence(value: Any) -> bool:
    # Strings are sequences too, but never a list of nodes or edges
    return isinstance(value, (list, tuple))


def is_valid_route(nodes: Any) -> bool:
    """Return True if ``nodes`` is a non-empty list/tuple of valid nodes."""
    if not nodes or not _is_sequence(nodes):
        return False
    return all(is_valid_node(node) for node in nodes)


def is_valid_edge_list(edges: Any) -> bool:
    """Return True if ``edges`` is a non-empty list/tuple of valid edge descriptors."""
    if not edges or not _is_sequence(edges):
        return False
    return all(is_valid_edge(edge) for edge in edges)


def _is_positive_bound(value: Any) -> bool:
    if not value or isinstance(value, bool) or not isinstance(value, Real):
        return False
    return value > 0


def is_valid_route_limit(max_routes: Any) -> bool:
    """Return True if ``max_routes`` is None (no cap) or a positive int."""
    if max_routes is None:
        return True
    if isinstance(max_routes, bool) or not isinstance(max_routes, int):
        return False
    return max_routes > 0


def is_valid_route_search(
    start: Any,
    end: Any,
    max_stops: Any,
    max_cost: Any,
    reuse_route: bool,
) -> bool:
    """Check arguments of a route enumeration.

    Both bounds must be positive numbers (``math.inf`` means unbounded). When
    routes may reuse nodes, at least one bound must be finite, otherwise the
    search would never terminate.
    """
    if not is_valid_node(start) or not is_valid_node(end):
        return False

    if not _is_positive_bound(max_stops) or not _is_positive_bound(max_cost):
        return False

    if reuse_route and math.isinf(max_stops) and math.isinf(max_cost):
        return False

    return True


def is_valid_cheapest_route_query(start: Any, end: Any) -> bool:
    """Check arguments of a cheapest-route query."""
    return is_valid_node(start) and is_valid_node(end)
