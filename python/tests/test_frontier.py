"""Frontier, visited set, and search node tests."""

from __future__ import annotations

import pytest

from backend.engine.search.frontier import Frontier, VisitedSet
from backend.models.board import GOAL, Direction, PuzzleState
from backend.models.node import SearchNode

_NEAR = PuzzleState((1, 2, 3, 4, 5, 6, 7, 0, 8))


# -- frontier -----------------------------------------------------------------


def test_pops_lowest_priority_first() -> None:
    frontier = Frontier()
    for cost, h in [(3, 0), (1, 1), (0, 5), (1, 0)]:
        frontier.push(SearchNode(GOAL, cost=cost, heuristic=h))

    order = [frontier.pop().priority for _ in range(4)]
    assert order == [1, 2, 3, 5]


def test_equal_priorities_are_fifo() -> None:
    frontier = Frontier()
    nodes = [SearchNode(GOAL, cost=c, heuristic=4 - c) for c in range(5)]
    for node in nodes:
        frontier.push(node)

    assert [frontier.pop() for _ in range(5)] == nodes


def test_nodes_never_compared_directly() -> None:
    # Identical priority and distinct states must not fall through to
    # comparing SearchNode objects.
    frontier = Frontier()
    frontier.push(SearchNode(GOAL))
    frontier.push(SearchNode(_NEAR))
    assert frontier.pop().state == GOAL


def test_len_bool_and_max_size() -> None:
    frontier = Frontier()
    assert not frontier
    assert len(frontier) == 0

    frontier.push(SearchNode(GOAL))
    frontier.push(SearchNode(_NEAR))
    assert frontier
    assert len(frontier) == 2
    assert frontier.peek().state == GOAL

    frontier.pop()
    frontier.pop()
    assert not frontier
    assert frontier.max_size == 2


def test_pop_on_empty_raises() -> None:
    with pytest.raises(IndexError):
        Frontier().pop()


# -- visited set --------------------------------------------------------------


def test_visited_set_uses_value_equality() -> None:
    visited = VisitedSet()
    visited.add(PuzzleState((1, 2, 3, 4, 5, 6, 7, 8, 0)))

    assert GOAL in visited
    assert _NEAR not in visited
    # LEFT from _NEAR derives the goal; same cells, same configuration.
    assert _NEAR.moves()[-1][1] in visited
    visited.add(GOAL)
    assert len(visited) == 1


# -- search node --------------------------------------------------------------


def test_child_accumulates_cost_and_links_parent() -> None:
    root = SearchNode(_NEAR, heuristic=1)
    direction, state = _NEAR.moves()[-1]
    child = root.child(direction, state, heuristic=0)

    assert child.cost == 1
    assert child.priority == 1
    assert child.parent is root
    assert child.move is direction
    assert root.priority == 1


def test_path_is_root_first() -> None:
    root = SearchNode(GOAL)
    a = root.child(Direction.DOWN, GOAL.moves()[0][1], 0)
    b = a.child(Direction.UP, GOAL, 0)

    path = b.path()
    assert path == [root, a, b]
    assert [n.cost for n in path] == [0, 1, 2]
    assert root.path() == [root]


def test_node_is_frozen() -> None:
    node = SearchNode(GOAL)
    with pytest.raises(AttributeError):
        node.cost = 3  # type: ignore[misc]
