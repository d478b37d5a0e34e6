"""Tests for GameState and the move engine."""

import random

import pytest

from connect4_minimax.game.state import (apply_move, init_game, is_legal_drop, landing_row,
                                         try_apply, undo_move)
from connect4_minimax.utils import Player


def test_init_game():
    state = init_game()
    assert state.turn == Player.COMPUTER
    assert state.moves_played == 0
    assert state.board.available_columns() == list(range(7))

    human_first = init_game(6, 5, Player.HUMAN)
    assert human_first.turn == Player.HUMAN
    assert human_first.board.width == 6


def test_apply_move_flips_turn_and_counts():
    state = init_game()
    row = apply_move(state, 3)

    assert row == 5
    assert state.board.cell(3, 5) == Player.COMPUTER.value
    assert state.turn == Player.HUMAN
    assert state.moves_played == 1

    apply_move(state, 3)
    assert state.board.cell(3, 4) == Player.HUMAN.value
    assert state.turn == Player.COMPUTER
    assert state.moves_played == 2


def test_apply_then_undo_round_trip(check_columns):
    """apply_move followed by undo_move gives back the exact same state."""
    rng = random.Random(7)
    state = init_game()

    for _ in range(30):
        columns = state.board.available_columns()
        if not columns:
            break
        for column in columns:
            before = state.copy()
            snapshot = state.to_bytes()

            row = apply_move(state, column)
            undo_move(state, column, row)

            assert state == before
            assert state.to_bytes() == snapshot
        apply_move(state, rng.choice(columns))
        check_columns(state.board)


def test_undo_everything_returns_to_start():
    moves = [3, 3, 2, 4, 0, 6, 6, 6, 6, 6, 6]
    state = init_game()
    history = [(column, apply_move(state, column)) for column in moves]

    for column, row in reversed(history):
        undo_move(state, column, row)

    assert state == init_game()


def test_try_apply_rejects_illegal_columns():
    state = init_game(width=3, height=2)
    apply_move(state, 0)
    apply_move(state, 0)
    snapshot = state.to_bytes()

    assert try_apply(state, 0) is None
    assert try_apply(state, -1) is None
    assert try_apply(state, 3) is None
    assert state.to_bytes() == snapshot

    assert try_apply(state, 2) == 1
    assert state.moves_played == 3


def test_legal_drop_and_landing_row(play):
    state = play([1, 1])
    assert landing_row(state, 1) == 3
    assert is_legal_drop(state, 1, 3)
    assert not is_legal_drop(state, 1, 5)
    assert landing_row(state, 9) is None


def test_copy_is_independent(play):
    state = play([0, 1])
    clone = state.copy()
    apply_move(clone, 2)

    assert state.moves_played == 2
    assert state.turn == Player.COMPUTER
    assert state.board.landing_row(2) == 5
    assert state != clone


def test_apply_move_to_full_column_changes_nothing(play):
    state = play([0] * 6)
    snapshot = state.to_bytes()

    with pytest.raises(ValueError):
        apply_move(state, 0)

    assert state.to_bytes() == snapshot
    assert state.moves_played == 6
    assert state.turn == Player.COMPUTER
    assert state.board.drop_targets[1] == 5
