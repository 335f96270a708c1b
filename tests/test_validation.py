"""Tests for input format checks."""

import math

import pytest

from routegraph.validation import (
    is_valid_cheapest_route_query,
    is_valid_edge,
    is_valid_edge_list,
    is_valid_node,
    is_valid_route,
    is_valid_route_limit,
    is_valid_route_search,
)


@pytest.mark.parametrize("node", ["A", "M", "Z"])
def test_valid_nodes(node):
    assert is_valid_node(node)


@pytest.mark.parametrize("node", ["a", "AB", "1", "", " ", "A ", None, 1, ["A"]])
def test_invalid_nodes(node):
    assert not is_valid_node(node)


@pytest.mark.parametrize("edge", ["AB1", "CF12", "AA9", "ZY100"])
def test_valid_edges(edge):
    assert is_valid_edge(edge)


@pytest.mark.parametrize(
    "edge", ["AB0", "AB01", "AB", "ab1", "A1", "ABC1", "AB-1", "AB1.5", "", None, 123]
)
def test_invalid_edges(edge):
    assert not is_valid_edge(edge)


def test_edge_list():
    assert is_valid_edge_list(["AB1", "BC2"])
    assert is_valid_edge_list(("AB1",))
    assert not is_valid_edge_list([])
    assert not is_valid_edge_list(None)
    assert not is_valid_edge_list("AB1")
    # One bad descriptor rejects the whole list
    assert not is_valid_edge_list(["AB1", "BC0", "CD3"])


def test_route():
    assert is_valid_route(["A"])
    assert is_valid_route(("A", "B", "A"))
    assert not is_valid_route([])
    assert not is_valid_route(None)
    assert not is_valid_route("AB")
    assert not is_valid_route(["A", "b"])


class TestRouteSearch:
    def test_defaults_are_valid(self):
        assert is_valid_route_search("A", "B", math.inf, math.inf, False)

    def test_reuse_needs_a_bound(self):
        assert not is_valid_route_search("A", "B", math.inf, math.inf, True)
        assert is_valid_route_search("A", "B", 3, math.inf, True)
        assert is_valid_route_search("A", "B", math.inf, 30, True)

    @pytest.mark.parametrize("bound", [0, -1, -math.inf, None, "3", False, math.nan])
    def test_bad_bounds(self, bound):
        assert not is_valid_route_search("A", "B", bound, math.inf, False)
        assert not is_valid_route_search("A", "B", math.inf, bound, False)

    def test_fractional_bounds_allowed(self):
        assert is_valid_route_search("A", "B", 2.5, 0.5, True)

    def test_bad_nodes(self):
        assert not is_valid_route_search("a", "B", 3, 3, False)
        assert not is_valid_route_search("A", None, 3, 3, False)


def test_cheapest_route_query():
    assert is_valid_cheapest_route_query("A", "A")
    assert not is_valid_cheapest_route_query("A", "")
    assert not is_valid_cheapest_route_query("AB", "A")


@pytest.mark.parametrize("limit", [None, 1, 500])
def test_valid_route_limits(limit):
    assert is_valid_route_limit(limit)


@pytest.mark.parametrize("limit", [0, -3, "3", True, False, 1.5, 2.0, math.inf])
def test_invalid_route_limits(limit):
    assert not is_valid_route_limit(limit)
