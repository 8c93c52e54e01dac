"""
Weather Route Planner - Main entry point.

Usage:
    python -m weatherroute.main A E
    python -m weatherroute.main A E --via C --remove B
    python -m weatherroute.main --empty S T --node S 0 0 0 --node T 100 0 1 --edge S T 4
    python -m weatherroute.main --help
"""

import argparse
import logging
import sys

from . import config
from .pathfinding import GraphError, PathResult
from .pathfinding.astar import format_cost, format_route
from .session import RouteSession


def format_breakdown(result: PathResult) -> str:
    """
    Render the per-segment table of a found route.

    Example:
        Segment          Distance  Weather impact  Total cost
        A → B                 4.0             1.0         5.0
        Total                 4.0             1.0         5.0
    """
    lines = [f"{'Segment':<16}{'Distance':>10}{'Weather impact':>16}{'Total cost':>12}"]
    for seg in result.segments:
        label = format_route([seg.from_node, seg.to_node])
        lines.append(
            f"{label:<16}{format_cost(seg.distance):>10}"
            f"{format_cost(seg.impact):>16}{format_cost(seg.cost):>12}"
        )
    lines.append(
        f"{'Total':<16}{format_cost(result.total_distance):>10}"
        f"{format_cost(result.total_impact):>16}{format_cost(result.total_cost):>12}"
    )
    return "\n".join(lines)


def format_result(start: str, goal: str, result: PathResult) -> str:
    """Format a route query outcome for display."""
    if not result.found:
        return f"No path found between {start} and {goal}!"
    if start == goal and len(result.path) == 1:
        return (
            f"Start and goal nodes are the same: {start}\n"
            f"Total cost: {format_cost(result.total_cost)}"
        )
    return f"Path found: {format_route(result.path)}\n\n{format_breakdown(result)}"


def build_session(args: argparse.Namespace) -> RouteSession:
    """Create the network described by the command line."""
    session = RouteSession() if args.empty else RouteSession.demo()
    for name, x, y, impact in args.node or []:
        session.add_node(name, float(x), float(y), float(impact))
    for from_node, to_node, cost in args.edge or []:
        session.add_edge(from_node, to_node, float(cost))
    for name in args.remove or []:
        session.remove_node(name)
    return session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Weather Route Planner - A* routes with per-node weather impact"
    )
    parser.add_argument("start", help="Start node name")
    parser.add_argument("goal", help="Goal node name")
    parser.add_argument(
        "--via",
        action="append",
        metavar="NODE",
        help="Waypoint to pass through (repeatable, in order)",
    )
    parser.add_argument(
        "--node",
        action="append",
        nargs=4,
        metavar=("NAME", "X", "Y", "IMPACT"),
        help="Add a node (repeatable)",
    )
    parser.add_argument(
        "--edge",
        action="append",
        nargs=3,
        metavar=("FROM", "TO", "COST"),
        help="Add or update an edge (repeatable)",
    )
    parser.add_argument(
        "--remove",
        action="append",
        metavar="NODE",
        help="Remove a node before searching (repeatable)",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Start from an empty network instead of the demo network",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log search details to stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    try:
        session = build_session(args)
        result = session.find_path(args.start, args.goal, via=args.via)
    except (GraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_result(args.start, args.goal, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
