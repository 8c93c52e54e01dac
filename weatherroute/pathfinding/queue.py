"""Min-priority queue for the search frontier."""

import heapq
import itertools
from typing import Any

from .errors import EmptyQueueError


class PriorityQueue:
    """
    Binary-heap priority queue over (value, priority) pairs.

    Entries with equal priority come out in insertion order. There is no
    decrease-key: re-enqueueing a value leaves the older entry in place
    and the consumer is expected to skip it when it surfaces.
    """

    def __init__(self):
        self._heap: list[tuple[float, int, Any]] = []
        self._counter = itertools.count()

    def enqueue(self, value: Any, priority: float) -> None:
        """Add a value with the given priority."""
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def dequeue(self) -> tuple[Any, float]:
        """
        Remove and return the (value, priority) pair with lowest priority.

        Raises:
            EmptyQueueError: if the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("dequeue from an empty priority queue")
        priority, _, value = heapq.heappop(self._heap)
        return value, priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
