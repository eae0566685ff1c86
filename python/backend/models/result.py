"""Outcome of a single search run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.board import Direction, PuzzleState
from backend.models.node import SearchNode


class Algorithm(StrEnum):
    UCS = "ucs"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return {
            Algorithm.UCS: "Uniform Cost Search",
            Algorithm.ASTAR: "A* Search with Manhattan Distance",
        }[self]


class SearchStatus(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    expanded: int = 0
    unexpanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)


@dataclass
class SearchResult:
    """Structured search outcome handed to the reporters.

    ``node`` is the goal node on success and ``None`` once the frontier has
    been exhausted. ``expanded_nodes`` is only filled when tracing is on.
    """

    status: SearchStatus
    algorithm: str
    initial: PuzzleState
    goal: PuzzleState
    stats: SearchStats
    node: SearchNode | None = None
    expanded_nodes: list[SearchNode] = field(default_factory=list)

    @property
    def algorithm_label(self) -> str:
        try:
            return Algorithm(self.algorithm).label
        except ValueError:
            return self.algorithm

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def path(self) -> list[PuzzleState]:
        if self.node is None:
            return []
        return [n.state for n in self.node.path()]

    @property
    def moves(self) -> list[Direction]:
        if self.node is None:
            return []
        return [n.move for n in self.node.path() if n.move is not None]

    @property
    def move_count(self) -> int | None:
        return None if self.node is None else self.node.cost
