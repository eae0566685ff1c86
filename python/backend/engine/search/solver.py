"""8-puzzle solver: one best-first loop for uniform-cost and A* search."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from backend.engine.search.frontier import Frontier, VisitedSet
from backend.models.board import GOAL, PuzzleState
from backend.models.node import SearchNode
from backend.models.result import Algorithm, SearchResult, SearchStats, SearchStatus

logger = logging.getLogger(__name__)

Heuristic = Callable[[PuzzleState, PuzzleState], int]

PROGRESS_EVERY = 20_000


def zero_heuristic(state: PuzzleState, goal: PuzzleState) -> int:
    return 0


def manhattan_heuristic(state: PuzzleState, goal: PuzzleState) -> int:
    return state.manhattan_distance(goal)


_HEURISTICS: dict[Algorithm, Heuristic] = {
    Algorithm.UCS: zero_heuristic,
    Algorithm.ASTAR: manhattan_heuristic,
}


class PuzzleSolver:
    """Best-first graph search ordered on ``cost + heuristic``.

    With ``zero_heuristic`` this is uniform-cost search; with
    ``manhattan_heuristic`` it is A*. Stale frontier entries are skipped at
    pop time via the visited set instead of being removed on rediscovery.
    """

    def __init__(
        self,
        goal: PuzzleState | Iterable[int] = GOAL,
        heuristic: Heuristic = zero_heuristic,
        name: str = Algorithm.UCS,
        trace: bool = False,
    ) -> None:
        if not isinstance(goal, PuzzleState):
            goal = PuzzleState.from_flat(goal)
        self.goal = goal
        self.heuristic = heuristic
        self.name = str(name)
        self.trace = trace

    @classmethod
    def for_algorithm(
        cls,
        algorithm: Algorithm,
        goal: PuzzleState | Iterable[int] = GOAL,
        trace: bool = False,
    ) -> PuzzleSolver:
        algorithm = Algorithm(algorithm)
        return cls(goal, _HEURISTICS[algorithm], name=algorithm, trace=trace)

    # -- search ---------------------------------------------------------------

    def search(self, initial: PuzzleState | Iterable[int]) -> SearchResult:
        """Run the search to completion from *initial*.

        Returns a ``SOLVED`` result holding the goal node, or an
        ``EXHAUSTED`` result when the goal is unreachable.
        """
        if not isinstance(initial, PuzzleState):
            initial = PuzzleState.from_flat(initial)

        goal = self.goal
        h = self.heuristic
        stats = SearchStats()
        expanded_nodes: list[SearchNode] = []

        logger.info("Starting %s search from %s", self.name, initial.cells)
        start = time.perf_counter()

        frontier = Frontier()
        visited = VisitedSet()
        frontier.push(SearchNode(initial, heuristic=h(initial, goal)))
        stats.generated = 1

        while frontier:
            current = frontier.pop()
            if current.state in visited:
                continue

            stats.expanded += 1
            if self.trace:
                expanded_nodes.append(current)
            if stats.expanded % PROGRESS_EVERY == 0:
                logger.debug(
                    "%s: %d expanded, %d in frontier, depth %d",
                    self.name, stats.expanded, len(frontier), current.cost,
                )

            if current.state.is_goal(goal):
                return self._finish(
                    SearchStatus.SOLVED, initial, stats, frontier, start,
                    current, expanded_nodes,
                )

            visited.add(current.state)
            for move, state in current.state.moves():
                if state in visited:
                    continue
                frontier.push(current.child(move, state, h(state, goal)))
                stats.generated += 1

        return self._finish(
            SearchStatus.EXHAUSTED, initial, stats, frontier, start,
            None, expanded_nodes,
        )

    def _finish(
        self,
        status: SearchStatus,
        initial: PuzzleState,
        stats: SearchStats,
        frontier: Frontier,
        start: float,
        node: SearchNode | None,
        expanded_nodes: list[SearchNode],
    ) -> SearchResult:
        stats.elapsed = time.perf_counter() - start
        stats.unexpanded = len(frontier)
        stats.max_frontier = frontier.max_size
        logger.info(
            "%s search %s: %s moves, %d expanded, %d unexpanded, %.3fs",
            self.name,
            status,
            node.cost if node is not None else "no",
            stats.expanded,
            stats.unexpanded,
            stats.elapsed,
        )
        return SearchResult(
            status=status,
            algorithm=self.name,
            initial=initial,
            goal=self.goal,
            stats=stats,
            node=node,
            expanded_nodes=expanded_nodes,
        )


def solve(
    initial: PuzzleState | Iterable[int],
    algorithm: Algorithm = Algorithm.ASTAR,
    goal: PuzzleState | Iterable[int] = GOAL,
    trace: bool = False,
) -> SearchResult:
    """Solve *initial* with the chosen algorithm."""
    return PuzzleSolver.for_algorithm(algorithm, goal, trace=trace).search(initial)
