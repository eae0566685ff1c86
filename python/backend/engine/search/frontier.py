"""Frontier and visited-set structures used by the search loop."""

from __future__ import annotations

import heapq
import itertools

from backend.models.board import PuzzleState
from backend.models.node import SearchNode


class Frontier:
    """Min-heap of nodes keyed on ``priority``.

    Equal priorities are dequeued in insertion order (FIFO): every push is
    stamped with a monotonically increasing sequence number.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()
        self.max_size = 0

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority, next(self._counter), node))
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)

    def pop(self) -> SearchNode:
        """Remove and return the lowest-priority node.

        Raises ``IndexError`` when the frontier is empty.
        """
        return heapq.heappop(self._heap)[2]

    def peek(self) -> SearchNode:
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class VisitedSet:
    """Board configurations already expanded, compared by value."""

    def __init__(self) -> None:
        self._seen: set[PuzzleState] = set()

    def add(self, state: PuzzleState) -> None:
        self._seen.add(state)

    def __contains__(self, state: object) -> bool:
        return state in self._seen

    def __len__(self) -> int:
        return len(self._seen)
