"""Bounded container types used by the graph algorithms."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Optional


def _check_capacity(kind: str, capacity: Optional[int]) -> Optional[int]:
    if capacity is not None and capacity <= 0:
        raise ValueError(f"{kind} size must be greater than 0")
    return capacity


class Queue:
    """First-in, first-out queue with an optional capacity limit."""

    def __init__(self, capacity: Optional[int] = None) -> None:
        self._capacity = _check_capacity("Queue", capacity)
        self._items: deque[int] = deque()

    def push(self, value: int) -> None:
        """Append a value at the back; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("Queue is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the value at the front; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """Last-in, first-out stack with an optional capacity limit."""

    def __init__(self, capacity: Optional[int] = None) -> None:
        self._capacity = _check_capacity("Stack", capacity)
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put a value on top; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("Stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)


class PriorityQueue:
    """Min-priority queue; values of equal priority leave in insertion order."""

    def __init__(self, capacity: Optional[int] = None) -> None:
        self._capacity = _check_capacity("PriorityQueue", capacity)
        self._heap: list[tuple[int, int, int]] = []
        self._counter = itertools.count()

    def push(self, value: int, priority: int) -> None:
        """Insert a value with the given priority; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("PriorityQueue is full")
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def pop(self) -> int:
        """Remove and return the value with the lowest priority."""
        if not self._heap:
            raise IndexError("PriorityQueue is empty")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._heap) >= self._capacity

    def __len__(self) -> int:
        return len(self._heap)


class UnionFind:
    """Disjoint-set forest with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("UnionFind size must not be negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def find(self, vertex: int) -> int:
        """Return the representative of the set holding vertex."""
        root = vertex
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[vertex] != root:
            self._parent[vertex], vertex = root, self._parent[vertex]
        return root

    def unite(self, u: int, v: int) -> None:
        """Merge the sets holding u and v."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        elif self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1