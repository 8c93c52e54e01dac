"""Straight-line cost estimate between two nodes."""

import math

from ..config import HEURISTIC_SCALE
from .graph import RoadGraph


def straight_line_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Euclidean distance between two points of the editor plane.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Distance in editor units
    """
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def estimate(graph: RoadGraph, a: str, b: str) -> float:
    """
    Estimate the remaining travel cost from node a to node b.

    Straight-line distance scaled down by HEURISTIC_SCALE. This does not
    bound the real cost from below for arbitrary coordinates, so the
    search is guided by it rather than guaranteed optimal.
    """
    ax, ay = graph.position(a)
    bx, by = graph.position(b)
    return straight_line_distance(ax, ay, bx, by) / HEURISTIC_SCALE
