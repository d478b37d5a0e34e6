"""Shared fixtures for the test suite."""

import pytest

from connect4_minimax.game.state import apply_move, init_game
from connect4_minimax.utils import EMPTY, FORBIDDEN, FULL, Player


def replay(moves, width=7, height=6, first_player=Player.COMPUTER):
    """Play ``moves`` (columns) from an empty board, alternating turns."""
    state = init_game(width, height, first_player)
    for column in moves:
        apply_move(state, column)
    return state


def assert_columns_consistent(board):
    """Every column reads FORBIDDEN*, at most one EMPTY, then pieces."""
    for column in range(board.width):
        values = [board.cell(column, row) for row in range(board.height)]
        empties = [row for row, value in enumerate(values) if value == EMPTY]
        assert len(empties) <= 1

        if empties:
            target = empties[0]
            assert board.drop_targets[column] == target
            assert all(value == FORBIDDEN for value in values[:target])
            assert all(value > EMPTY for value in values[target + 1:])
        else:
            assert board.drop_targets[column] == FULL
            assert all(value > EMPTY for value in values)


@pytest.fixture
def play():
    return replay


@pytest.fixture
def check_columns():
    return assert_columns_consistent
