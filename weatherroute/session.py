"""Editing session owning one road network and its weather impacts."""

import logging
import math
import threading
from dataclasses import dataclass

from . import config
from .pathfinding.astar import PathFinder, PathResult
from .pathfinding.errors import InvalidImpactError, NodeNotFoundError
from .pathfinding.graph import RoadGraph

logger = logging.getLogger(__name__)


@dataclass
class NodeInfo:
    """Node row for listings."""

    name: str
    x: float
    y: float
    impact: float


def _check_impact(impact: float) -> float:
    try:
        impact = float(impact)
    except (TypeError, ValueError):
        raise InvalidImpactError(f"Weather impact is not a number: {impact!r}") from None
    if not math.isfinite(impact) or impact < 0:
        raise InvalidImpactError(
            f"Weather impact must be finite and non-negative, got {impact}"
        )
    return impact


class RouteSession:
    """
    A road network together with the weather impact of each node.

    All operations hold one lock, so a route search never observes a
    half-applied edit.
    """

    def __init__(self):
        self.graph = RoadGraph()
        self.impacts: dict[str, float] = {}
        self._lock = threading.RLock()

    @classmethod
    def demo(cls) -> "RouteSession":
        """Create a session holding the five-node demo network."""
        session = cls()
        for name, (x, y, impact) in config.DEMO_NODES.items():
            session.add_node(name, x, y, impact)
        for from_node, to_node, cost in config.DEMO_EDGES:
            session.add_edge(from_node, to_node, cost)
        return session

    def add_node(self, name: str, x: float, y: float, impact: float = 0.0) -> NodeInfo:
        """Add a node and its weather impact."""
        impact = _check_impact(impact)
        with self._lock:
            node = self.graph.add_node(name, x, y)
            self.impacts[name] = impact
        return NodeInfo(name=node.name, x=node.x, y=node.y, impact=impact)

    def set_impact(self, name: str, impact: float) -> None:
        """Change the weather impact of an existing node."""
        impact = _check_impact(impact)
        with self._lock:
            if not self.graph.has_node(name):
                raise NodeNotFoundError(name)
            self.impacts[name] = impact

    def remove_node(self, name: str) -> None:
        """Remove a node with its edges and its weather impact."""
        with self._lock:
            self.graph.remove_node(name)
            self.impacts.pop(name, None)

    def add_edge(self, from_node: str, to_node: str, cost: float) -> None:
        with self._lock:
            self.graph.add_edge(from_node, to_node, cost)

    def remove_edge(self, from_node: str, to_node: str) -> None:
        with self._lock:
            self.graph.remove_edge(from_node, to_node)

    def find_path(
        self, start: str, goal: str, via: list[str] | None = None
    ) -> PathResult:
        """
        Find the cheapest route, optionally passing through waypoints.

        Raises:
            NodeNotFoundError: if start, goal or a waypoint is unknown
        """
        with self._lock:
            finder = PathFinder(self.graph, self.impacts)
            if via:
                for name in via:
                    if not self.graph.has_node(name):
                        raise NodeNotFoundError(name)
                return finder.find_path_with_waypoints(start, goal, via)
            return finder.find_path(start, goal)

    def path_exists(self, start: str, goal: str) -> bool:
        with self._lock:
            return self.graph.is_reachable(start, goal)

    def describe_nodes(self) -> list[NodeInfo]:
        """List nodes with coordinates and weather impact."""
        with self._lock:
            return [
                NodeInfo(name=node.name, x=node.x, y=node.y, impact=self.impacts.get(name, 0.0))
                for name, node in self.graph.nodes.items()
            ]

    def describe_edges(self) -> list[tuple[str, str, float]]:
        """List every edge once as (from, to, cost)."""
        with self._lock:
            return self.graph.edges()

    def reset(self) -> None:
        """Remove every node, edge and weather impact."""
        with self._lock:
            self.graph.clear()
            self.impacts.clear()
        logger.debug("Session reset")

    def __len__(self) -> int:
        return len(self.graph)
