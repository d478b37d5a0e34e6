"""Tests for the ConnectFourGame manager."""

import pytest

from connect4_minimax.ai.minimax import MinimaxPlayer, WIN_POSITION
from connect4_minimax.ai.random_player import RandomPlayer
from connect4_minimax.game.controller import ConnectFourGame
from connect4_minimax.utils import GameMode, GameResult, Player


def test_new_game():
    game = ConnectFourGame(GameMode.HARD, depth=2)
    assert isinstance(game.computer, MinimaxPlayer)
    assert game.get_current_player() == Player.COMPUTER
    assert game.is_computer_turn()
    assert game.get_valid_moves() == list(range(7))
    assert game.get_result() == GameResult.IN_PROGRESS


def test_modes_pick_players():
    assert isinstance(ConnectFourGame(GameMode.EASY).computer, RandomPlayer)
    assert isinstance(ConnectFourGame(GameMode.HELL, depth=3).computer, MinimaxPlayer)
    assert ConnectFourGame(GameMode.TWO_PLAYER).computer is None


def test_make_move_and_history():
    game = ConnectFourGame(GameMode.TWO_PLAYER, first_player=Player.HUMAN)
    assert game.make_move(3)
    assert game.make_move(3)
    assert game.history == [(3, 5), (3, 4)]
    assert game.get_current_player() == Player.HUMAN


def test_illegal_moves_are_refused():
    game = ConnectFourGame(GameMode.TWO_PLAYER, width=3, height=2)
    assert game.make_move(0)
    assert game.make_move(0)
    assert not game.make_move(0)
    assert not game.make_move(-1)
    assert not game.make_move(3)
    assert len(game.history) == 2


def test_undo():
    game = ConnectFourGame(GameMode.TWO_PLAYER)
    assert not game.undo_move()

    game.make_move(2)
    game.make_move(4)
    assert game.undo_move()
    assert game.history == [(2, 5)]
    assert game.state.board.landing_row(4) == 5
    assert game.get_current_player() == Player.HUMAN


def test_computer_blocks():
    game = ConnectFourGame(GameMode.HARD, depth=2)
    for column in (0, 4, 0, 5, 1, 6):
        assert game.make_move(column)

    assert game.computer_move() == (3, 5)
    assert game.last_rating() == WIN_POSITION
    assert game.get_current_player() == Player.HUMAN


def test_easy_computer_plays_legal_moves():
    game = ConnectFourGame(GameMode.EASY, seed=5, width=4, height=4)
    while not game.is_game_over():
        if game.is_computer_turn():
            column, row = game.computer_move()
            assert 0 <= column < 4
            assert game.history[-1] == (column, row)
        else:
            game.make_move(game.get_valid_moves()[0])

    assert game.get_result().is_game_over()


def test_computer_move_without_computer():
    game = ConnectFourGame(GameMode.TWO_PLAYER)
    with pytest.raises(RuntimeError):
        game.computer_move()


def test_winner_ends_game():
    game = ConnectFourGame(GameMode.TWO_PLAYER)
    for column in (0, 1, 0, 1, 0, 1, 0):
        game.make_move(column)

    assert game.is_game_over()
    assert game.get_winner() == Player.COMPUTER
    assert game.get_result() == GameResult.COMPUTER_WIN
    assert not game.make_move(2)


def test_no_computer_move_after_game_over():
    game = ConnectFourGame(GameMode.EASY, seed=1)
    for column in (0, 1, 0, 1, 0, 1, 0):
        game.make_move(column)

    with pytest.raises(RuntimeError):
        game.computer_move()


def test_draw():
    game = ConnectFourGame(GameMode.TWO_PLAYER, width=3, height=3)
    for column in (0, 1, 2, 0, 1, 2, 0, 1, 2):
        assert game.make_move(column)

    assert game.get_result() == GameResult.DRAW
    assert game.is_game_over()
    assert game.get_winner() is None


def test_reset():
    game = ConnectFourGame(GameMode.TWO_PLAYER)
    game.make_move(0)
    game.reset()
    assert game.history == []
    assert game.state.moves_played == 0
