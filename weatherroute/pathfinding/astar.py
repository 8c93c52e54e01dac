"""A* pathfinding with weather impact on arrival."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import NodeNotFoundError
from .graph import RoadGraph
from .heuristic import estimate
from .queue import PriorityQueue

logger = logging.getLogger(__name__)


@dataclass
class SegmentInfo:
    """Information about a path segment."""

    from_node: str
    to_node: str
    distance: float  # Edge cost
    impact: float  # Weather impact of to_node
    cost: float  # distance + impact


@dataclass
class PathResult:
    """Result of pathfinding."""

    path: list[str]
    found: bool
    total_distance: float = 0.0
    total_impact: float = 0.0
    total_cost: float = 0.0  # Equals the search's final gScore for the goal
    segments: list[SegmentInfo] = field(default_factory=list)
    nodes_expanded: int = 0

    @property
    def num_segments(self) -> int:
        return len(self.segments)


class PathFinder:
    """
    Find routes in a road network using A* search.

    The cost of stepping onto a node is the edge cost plus that node's
    weather impact. The start node's impact is never charged.
    """

    def __init__(self, graph: RoadGraph, impacts: Mapping[str, float] | None = None):
        """
        Initialize pathfinder.

        Args:
            graph: RoadGraph instance
            impacts: Weather impact per node name; missing names count as 0
        """
        self.graph = graph
        self.impacts = impacts if impacts is not None else {}

    def impact(self, name: str) -> float:
        """Weather impact charged when arriving at a node."""
        return self.impacts.get(name, 0.0)

    def search(self, start: str, goal: str) -> tuple[list[str] | None, dict[str, float], int]:
        """
        Run A* from start to goal.

        Returns:
            (path or None, gScore table, number of expanded nodes)
        """
        frontier = PriorityQueue()
        came_from: dict[str, str] = {}
        g_score = {start: 0.0}
        f_score = {start: estimate(self.graph, start, goal)}
        frontier.enqueue(start, f_score[start])
        expanded = 0

        while frontier:
            current, priority = frontier.dequeue()

            # Superseded by a cheaper entry for the same node
            if priority > f_score[current]:
                continue

            if current == goal:
                path = [goal]
                while path[-1] in came_from:
                    path.append(came_from[path[-1]])
                path.reverse()
                return path, g_score, expanded

            expanded += 1
            for neighbor in self.graph.neighbors(current):
                tentative = (
                    g_score[current]
                    + self.graph.edge_cost(current, neighbor)
                    + self.impact(neighbor)
                )
                if neighbor not in g_score or tentative < g_score[neighbor]:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + estimate(self.graph, neighbor, goal)
                    frontier.enqueue(neighbor, f_score[neighbor])

        return None, g_score, expanded

    def find_path(self, start: str, goal: str) -> PathResult:
        """
        Find the cheapest route between two nodes.

        Args:
            start: Starting node name
            goal: Ending node name

        Returns:
            PathResult with path, per-segment breakdown and totals.
            found is False when goal cannot be reached.

        Raises:
            NodeNotFoundError: if start or goal is not in the graph
        """
        for name in (start, goal):
            if not self.graph.has_node(name):
                raise NodeNotFoundError(name)

        # Handle same node
        if start == goal:
            return PathResult(path=[start], found=True)

        path, g_score, expanded = self.search(start, goal)
        if path is None:
            logger.info("No path found between %s and %s", start, goal)
            return PathResult(path=[], found=False, nodes_expanded=expanded)

        logger.debug(
            "Found %s after expanding %d node(s)", format_route(path), expanded
        )
        result = self._build_result(path)
        result.total_cost = g_score[goal]
        result.nodes_expanded = expanded
        return result

    def find_path_with_waypoints(
        self, start: str, goal: str, waypoints: list[str]
    ) -> PathResult:
        """
        Find route through specified waypoints.

        Each waypoint's impact is charged once, when the route arrives there.

        Args:
            start: Starting node
            goal: Ending node
            waypoints: List of intermediate nodes to pass through

        Returns:
            PathResult with complete path
        """
        all_points = [start] + list(waypoints) + [goal]
        full_path: list[str] = []
        total_cost = 0.0
        expanded = 0

        for i in range(len(all_points) - 1):
            result = self.find_path(all_points[i], all_points[i + 1])
            expanded += result.nodes_expanded
            if not result.found:
                return PathResult(path=[], found=False, nodes_expanded=expanded)

            # Avoid duplicating waypoints in the path
            if full_path:
                full_path.extend(result.path[1:])
            else:
                full_path.extend(result.path)
            total_cost += result.total_cost

        combined = self._build_result(full_path)
        combined.total_cost = total_cost
        combined.nodes_expanded = expanded
        return combined

    def _build_result(self, path: list[str]) -> PathResult:
        total_distance = 0.0
        total_impact = 0.0
        segments = []

        for i in range(len(path) - 1):
            distance = self.graph.edge_cost(path[i], path[i + 1])
            impact = self.impact(path[i + 1])
            total_distance += distance
            total_impact += impact
            segments.append(SegmentInfo(
                from_node=path[i],
                to_node=path[i + 1],
                distance=distance,
                impact=impact,
                cost=distance + impact,
            ))

        return PathResult(
            path=path,
            found=True,
            total_distance=total_distance,
            total_impact=total_impact,
            total_cost=total_distance + total_impact,
            segments=segments,
        )


def format_cost(value: float | None) -> str:
    """Format a cost with one decimal."""
    if value is None:
        return ""
    return f"{value:.1f}"


def format_route(path: list[str]) -> str:
    """Join node names with arrows."""
    return " → ".join(path)
