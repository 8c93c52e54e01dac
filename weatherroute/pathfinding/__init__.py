"""Pathfinding module for weather-aware road routes."""

from .astar import PathFinder, PathResult, SegmentInfo
from .errors import (
    DuplicateNodeError,
    EdgeNotFoundError,
    EmptyQueueError,
    GraphError,
    InvalidEdgeError,
    InvalidImpactError,
    InvalidNodeError,
    NodeNotFoundError,
)
from .graph import Node, RoadGraph
from .queue import PriorityQueue

__all__ = [
    "RoadGraph",
    "Node",
    "PathFinder",
    "PathResult",
    "SegmentInfo",
    "PriorityQueue",
    "GraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "InvalidEdgeError",
    "InvalidImpactError",
    "InvalidNodeError",
    "EmptyQueueError",
]
