"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import GOAL, PuzzleState


class BoardGenerator:
    """Creates solvable boards by walking random legal moves from the goal."""

    @staticmethod
    def scramble(
        state: PuzzleState, num_shuffles: int = 100, rng: random.Random | None = None
    ) -> PuzzleState:
        """Return *state* after *num_shuffles* random moves.

        The walk never immediately undoes its previous move, so short walks
        still wander away from the start.
        """
        rng = rng or random.Random()
        prev: PuzzleState | None = None

        for _ in range(num_shuffles):
            neighbors = state.successors()
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, state = state, rng.choice(neighbors)
        return state

    @staticmethod
    def generate(
        goal: PuzzleState = GOAL, num_shuffles: int = 100, seed: int | None = None
    ) -> PuzzleState:
        """Return a random board that can reach *goal* and is not *goal*.

        Raises ``ValueError`` if *num_shuffles* is below 1, since a walk of no
        moves can only return *goal*.
        """
        if num_shuffles < 1:
            raise ValueError(f"num_shuffles must be at least 1, got {num_shuffles}.")
        rng = random.Random(seed)
        while True:
            state = BoardGenerator.scramble(goal, num_shuffles, rng)
            if state != goal:
                return state
