"""
connect4_minimax - Connect Four with a fixed-depth minimax computer opponent

This package provides the board and game-state model, win detection, the
move engine, the minimax search with its win-frequency fallback and a
console front end for playing against it.
"""

__version__ = '0.1.0'

from connect4_minimax.utils import GameMode, GameResult, Player
from connect4_minimax.game.board import Board
from connect4_minimax.game.state import (GameState, init_game, apply_move, undo_move,
                                         try_apply, is_legal_drop, landing_row)
from connect4_minimax.game.rules import find_winner, is_draw, get_result
from connect4_minimax.ai.minimax import MinimaxPlayer, determine_best_move
from connect4_minimax.ai.random_player import random_legal_column
from connect4_minimax.game.controller import ConnectFourGame

__all__ = [
    'Board', 'GameState', 'Player', 'GameResult', 'GameMode',
    'init_game', 'apply_move', 'undo_move', 'try_apply', 'is_legal_drop', 'landing_row',
    'find_winner', 'is_draw', 'get_result',
    'MinimaxPlayer', 'determine_best_move', 'random_legal_column',
    'ConnectFourGame',
]
