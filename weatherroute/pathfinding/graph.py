"""Undirected road network with planar node coordinates."""

import logging
import math
from dataclasses import dataclass

import networkx as nx

from .errors import (
    DuplicateNodeError,
    EdgeNotFoundError,
    InvalidEdgeError,
    InvalidNodeError,
    NodeNotFoundError,
)

logger = logging.getLogger(__name__)


def _coordinate(value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidNodeError(f"Coordinate is not a number: {value!r}") from None
    if not math.isfinite(value):
        raise InvalidNodeError(f"Coordinate must be finite, got {value}")
    return value


@dataclass(frozen=True)
class Node:
    """A named point of the road network."""

    name: str
    x: float
    y: float


class RoadGraph:
    """
    Graph representation of a road network.

    Nodes are named points with (x, y) editor coordinates, edges are
    undirected connections weighted by a non-negative travel cost.
    Weather impact is not stored here; see RouteSession.
    """

    def __init__(self):
        """Initialize empty graph."""
        self.graph = nx.Graph()

    def add_node(self, name: str, x: float, y: float) -> Node:
        """
        Add a node at (x, y).

        Raises:
            DuplicateNodeError: if a node with this name already exists
            InvalidNodeError: if a coordinate is not a finite number
        """
        if name in self.graph:
            raise DuplicateNodeError(name)
        node = Node(name=name, x=_coordinate(x), y=_coordinate(y))
        self.graph.add_node(name, x=node.x, y=node.y)
        logger.debug("Added node %s at (%s, %s)", name, node.x, node.y)
        return node

    def remove_node(self, name: str) -> None:
        """
        Remove a node and every edge touching it.

        Raises:
            NodeNotFoundError: if the node does not exist
        """
        self._require_node(name)
        degree = self.graph.degree(name)
        self.graph.remove_node(name)
        logger.debug("Removed node %s and %d edge(s)", name, degree)

    def add_edge(self, from_node: str, to_node: str, cost: float) -> None:
        """
        Connect two distinct nodes, replacing any existing cost.

        Raises:
            NodeNotFoundError: if either endpoint does not exist
            InvalidEdgeError: on a self-loop or a negative/non-finite cost
        """
        self._require_node(from_node)
        self._require_node(to_node)
        if from_node == to_node:
            raise InvalidEdgeError(f"Cannot connect {from_node} to itself")
        try:
            cost = float(cost)
        except (TypeError, ValueError):
            raise InvalidEdgeError(f"Edge cost is not a number: {cost!r}") from None
        if not math.isfinite(cost) or cost < 0:
            raise InvalidEdgeError(
                f"Edge cost must be finite and non-negative, got {cost}"
            )

        self.graph.add_edge(from_node, to_node, weight=cost)
        logger.debug("Set edge %s - %s to %s", from_node, to_node, cost)

    def remove_edge(self, from_node: str, to_node: str) -> None:
        """
        Disconnect two nodes.

        Raises:
            NodeNotFoundError: if either endpoint does not exist
            EdgeNotFoundError: if the nodes are not connected
        """
        self._require_node(from_node)
        self._require_node(to_node)
        if not self.graph.has_edge(from_node, to_node):
            raise EdgeNotFoundError(from_node, to_node)
        self.graph.remove_edge(from_node, to_node)
        logger.debug("Removed edge %s - %s", from_node, to_node)

    def neighbors(self, name: str) -> list[str]:
        """Get adjacent node names, in the order the edges were added."""
        self._require_node(name)
        return list(self.graph.neighbors(name))

    def edge_cost(self, from_node: str, to_node: str) -> float:
        """Get the cost of the edge between two connected nodes."""
        if not self.graph.has_edge(from_node, to_node):
            raise EdgeNotFoundError(from_node, to_node)
        return self.graph[from_node][to_node]["weight"]

    def has_node(self, name: str) -> bool:
        """Check if a node exists in the graph."""
        return name in self.graph

    def has_edge(self, from_node: str, to_node: str) -> bool:
        """Check if two nodes are connected."""
        return self.graph.has_edge(from_node, to_node)

    def node(self, name: str) -> Node:
        """Get the Node stored under a name."""
        self._require_node(name)
        data = self.graph.nodes[name]
        return Node(name=name, x=data["x"], y=data["y"])

    def position(self, name: str) -> tuple[float, float]:
        """Get the (x, y) coordinates of a node."""
        node = self.node(name)
        return node.x, node.y

    def get_nodes(self) -> list[str]:
        """Get list of all node names, in insertion order."""
        return list(self.graph.nodes())

    @property
    def nodes(self) -> dict[str, Node]:
        """Snapshot of name -> Node."""
        return {name: self.node(name) for name in self.get_nodes()}

    @property
    def adjacency(self) -> dict[str, dict[str, float]]:
        """Snapshot of name -> {neighbor: cost}."""
        return {
            name: {other: data["weight"] for other, data in nbrs.items()}
            for name, nbrs in self.graph.adjacency()
        }

    def edges(self) -> list[tuple[str, str, float]]:
        """
        List every edge once as (from, to, cost) with from < to.

        Sorted by endpoint names so listings are stable.
        """
        rows = []
        for a, b, cost in self.graph.edges(data="weight"):
            if b < a:
                a, b = b, a
            rows.append((a, b, cost))
        return sorted(rows)

    def is_reachable(self, start: str, goal: str) -> bool:
        """Check if goal can be reached from start, ignoring costs."""
        self._require_node(start)
        self._require_node(goal)
        return nx.has_path(self.graph, start, goal)

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self.graph.clear()

    def _require_node(self, name: str) -> None:
        if name not in self.graph:
            raise NodeNotFoundError(name)

    def __contains__(self, name: object) -> bool:
        return name in self.graph

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self.graph)
