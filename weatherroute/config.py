"""
Configuration constants for weatherroute.

Search tuning, the demo network and logging settings live here.
"""

import logging
import os

# =============================================================================
# Search Configuration
# =============================================================================

# Straight-line distance is divided by this to estimate remaining cost.
# Coordinates are editor units, costs are travel units.
HEURISTIC_SCALE = 50.0

# =============================================================================
# Demo Network
# =============================================================================

# name -> (x, y, weather impact)
DEMO_NODES = {
    "A": (200, 150, 0),
    "B": (350, 250, 1),
    "C": (400, 100, 3),
    "D": (500, 300, 0.5),
    "E": (600, 150, 2),
}

# (from, to, cost)
DEMO_EDGES = [
    ("A", "B", 4),
    ("B", "C", 2),
    ("C", "D", 5),
    ("D", "E", 3),
    ("B", "D", 7),
    ("A", "C", 6),
]

# =============================================================================
# Logging Configuration
# =============================================================================


def resolve_log_level(name: str | None) -> str:
    """Upper-case a level name, falling back to WARNING for names logging does not know."""
    name = (name or "WARNING").upper()
    if not isinstance(logging.getLevelName(name), int):
        return "WARNING"
    return name


LOG_LEVEL = resolve_log_level(os.environ.get("WEATHERROUTE_LOG_LEVEL"))
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
