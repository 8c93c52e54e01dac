"""Tests for the straight-line heuristic."""

import pytest

from weatherroute.pathfinding.graph import RoadGraph
from weatherroute.pathfinding.heuristic import estimate, straight_line_distance


class TestStraightLineDistance:
    """Tests for Euclidean distance."""

    def test_same_point(self):
        assert straight_line_distance(3, 4, 3, 4) == pytest.approx(0.0)

    def test_pythagorean(self):
        assert straight_line_distance(0, 0, 3, 4) == pytest.approx(5.0)

    def test_symmetric(self):
        assert straight_line_distance(1, 7, -2, 3) == straight_line_distance(-2, 3, 1, 7)


class TestEstimate:
    """Tests for the node-to-node estimate."""

    @pytest.fixture
    def graph(self):
        g = RoadGraph()
        g.add_node("A", 200, 150)
        g.add_node("E", 600, 150)
        g.add_node("D", 500, 300)
        return g

    def test_scaled_by_fifty(self, graph):
        # 400 units apart
        assert estimate(graph, "A", "E") == pytest.approx(8.0)

    def test_diagonal(self, graph):
        # (100, 150) offset
        assert estimate(graph, "D", "E") == pytest.approx((100**2 + 150**2) ** 0.5 / 50)

    def test_symmetric(self, graph):
        assert estimate(graph, "A", "D") == estimate(graph, "D", "A")

    def test_zero_at_goal(self, graph):
        assert estimate(graph, "E", "E") == 0.0
