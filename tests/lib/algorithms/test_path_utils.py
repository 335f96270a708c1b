import math

from routegraph.lib.algorithms.path_utils import closest_unvisited_node, reconstruct_path


class TestClosestUnvisitedNode:
    def test_smallest_distance(self):
        assert closest_unvisited_node({"A": 3, "B": 1, "C": 5}, []) == "B"

    def test_skips_visited(self):
        assert closest_unvisited_node({"A": 3, "B": 1, "C": 5}, ["B"]) == "A"

    def test_all_visited(self):
        assert closest_unvisited_node({"A": 3, "B": 1, "C": 5}, ["A", "B", "C"]) is None

    def test_empty_distances(self):
        assert closest_unvisited_node({}, []) is None

    def test_first_minimum_wins_ties(self):
        """Strict comparison keeps the first of equal distances in key order."""
        assert closest_unvisited_node({"C": 2, "A": 2, "B": 2}, []) == "C"

    def test_infinite_distance_is_still_selectable(self):
        assert closest_unvisited_node({"E": math.inf, "B": 3}, ["B"]) == "E"

    def test_missing_inputs(self):
        assert closest_unvisited_node(None, []) is None
        assert closest_unvisited_node({"A": 1}, None) is None
        assert closest_unvisited_node({"A": 1}, "A") is None


class TestReconstructPath:
    def test_reference_parents(self):
        parents = {"A": "E", "B": "E", "C": "A", "D": "F", "E": "B", "F": "C"}
        assert reconstruct_path(parents, "E", "D") == ["E", "A", "C", "F", "D"]

    def test_end_without_parent(self):
        assert reconstruct_path({"B": "A", "C": "A"}, "A", "D") is None

    def test_empty_parents(self):
        assert reconstruct_path({}, "A", "D") is None

    def test_direct_neighbor(self):
        """One hop from start, even when start itself has a parent."""
        assert reconstruct_path({"B": "A", "A": "E", "E": "B"}, "A", "B") == ["A", "B"]

    def test_cycle_back_to_start(self):
        assert reconstruct_path({"B": "E", "A": "E", "E": "B"}, "E", "E") == [
            "E",
            "B",
            "E",
        ]

    def test_self_loop(self):
        assert reconstruct_path({"A": "A"}, "A", "A") == ["A", "A"]

    def test_chain_not_reaching_start(self):
        assert reconstruct_path({"C": "B", "B": "C"}, "A", "C") is None
        assert reconstruct_path({"C": "B"}, "A", "C") is None

    def test_missing_inputs(self):
        assert reconstruct_path(None, "A", "B") is None
        assert reconstruct_path({"B": "A"}, None, "B") is None
        assert reconstruct_path({"B": "A"}, "A", "") is None
