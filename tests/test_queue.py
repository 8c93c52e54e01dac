"""Tests for the frontier priority queue."""

import pytest

from weatherroute.pathfinding.errors import EmptyQueueError
from weatherroute.pathfinding.queue import PriorityQueue


class TestPriorityQueue:
    """Tests for PriorityQueue."""

    def test_lowest_priority_first(self):
        pq = PriorityQueue()
        pq.enqueue("C", 3.0)
        pq.enqueue("A", 1.0)
        pq.enqueue("B", 2.0)
        assert [pq.dequeue() for _ in range(3)] == [("A", 1.0), ("B", 2.0), ("C", 3.0)]

    def test_ties_in_insertion_order(self):
        pq = PriorityQueue()
        for name in ["D", "B", "C", "A"]:
            pq.enqueue(name, 5.0)
        assert [pq.dequeue()[0] for _ in range(4)] == ["D", "B", "C", "A"]

    def test_duplicates_kept(self):
        pq = PriorityQueue()
        pq.enqueue("A", 10.0)
        pq.enqueue("A", 4.0)
        assert len(pq) == 2
        assert pq.dequeue() == ("A", 4.0)
        assert pq.dequeue() == ("A", 10.0)

    def test_len_and_bool(self):
        pq = PriorityQueue()
        assert not pq
        assert len(pq) == 0
        pq.enqueue("A", 0)
        assert pq
        assert len(pq) == 1

    def test_empty_dequeue(self):
        pq = PriorityQueue()
        with pytest.raises(EmptyQueueError):
            pq.dequeue()

    def test_empty_is_index_error(self):
        pq = PriorityQueue()
        pq.enqueue("A", 1)
        pq.dequeue()
        with pytest.raises(IndexError):
            pq.dequeue()
