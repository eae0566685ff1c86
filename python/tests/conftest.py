from __future__ import annotations

from collections import deque

import pytest

from backend.models.board import GOAL, PuzzleState


@pytest.fixture(scope="session")
def goal_distances() -> dict[PuzzleState, int]:
    """Breadth-first distance from every solvable board to ``GOAL``.

    Moves are reversible, so a BFS outward from the goal gives the true
    shortest distance for all 181,440 boards in its parity class.
    """
    distances = {GOAL: 0}
    queue = deque([GOAL])
    while queue:
        state = queue.popleft()
        d = distances[state] + 1
        for nxt in state.successors():
            if nxt not in distances:
                distances[nxt] = d
                queue.append(nxt)
    return distances
