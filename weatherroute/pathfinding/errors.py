"""Errors raised by the road graph and the route search."""


class GraphError(Exception):
    """Base class for road network errors."""


class DuplicateNodeError(GraphError):
    """A node with this name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Node already exists: {name}")
        self.name = name


class NodeNotFoundError(GraphError, KeyError):
    """The named node is not part of the graph."""

    def __init__(self, name: str):
        super().__init__(f"Node not found: {name}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class EdgeNotFoundError(GraphError, KeyError):
    """The two nodes are not connected."""

    def __init__(self, from_node: str, to_node: str):
        super().__init__(f"No edge between {from_node} and {to_node}")
        self.from_node = from_node
        self.to_node = to_node

    def __str__(self) -> str:
        return self.args[0]


class InvalidNodeError(GraphError, ValueError):
    """Node coordinates that are not finite numbers."""


class InvalidEdgeError(GraphError, ValueError):
    """Self-loop, or a cost that is negative or not finite."""


class InvalidImpactError(GraphError, ValueError):
    """Weather impact that is negative or not finite."""


class EmptyQueueError(GraphError, IndexError):
    """Dequeue from an empty priority queue."""
