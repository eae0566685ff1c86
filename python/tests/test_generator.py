"""Board generator tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.generator import BoardGenerator
from backend.models.board import GOAL, PuzzleState


def test_generated_boards_are_solvable_and_not_goal() -> None:
    for seed in range(20):
        board = BoardGenerator.generate(seed=seed)
        assert board != GOAL
        assert board.is_solvable()


def test_generate_is_reproducible_with_seed() -> None:
    assert BoardGenerator.generate(seed=7) == BoardGenerator.generate(seed=7)


def test_generate_for_custom_goal_stays_in_its_parity_class() -> None:
    goal = PuzzleState((0, 1, 2, 3, 4, 5, 6, 7, 8))
    board = BoardGenerator.generate(goal, seed=3)
    assert board != goal
    assert board.is_solvable(goal)


def test_scramble_single_move_is_a_successor() -> None:
    state = BoardGenerator.scramble(GOAL, num_shuffles=1, rng=random.Random(0))
    assert state in GOAL.successors()


def test_scramble_does_not_undo_previous_move() -> None:
    # Two moves from a corner blank can never return to the start, because
    # the walk refuses to step straight back.
    for seed in range(10):
        state = BoardGenerator.scramble(GOAL, num_shuffles=2, rng=random.Random(seed))
        assert state != GOAL


def test_scramble_zero_shuffles_returns_input() -> None:
    assert BoardGenerator.scramble(GOAL, num_shuffles=0) == GOAL


@pytest.mark.timeout(5)
@pytest.mark.parametrize("num_shuffles", [0, -3])
def test_generate_rejects_walks_that_cannot_leave_the_goal(num_shuffles: int) -> None:
    with pytest.raises(ValueError, match="num_shuffles must be at least 1"):
        BoardGenerator.generate(GOAL, num_shuffles=num_shuffles, seed=1)
