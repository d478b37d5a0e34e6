"""
connect4_minimax.game - Board, game state and rules

ConnectFourGame lives in connect4_minimax.game.controller and is not
imported here, since it depends on the ai package, which depends on this one.
"""

from connect4_minimax.game.board import Board
from connect4_minimax.game.state import GameState, init_game, apply_move, undo_move, try_apply
from connect4_minimax.game.rules import find_winner, is_draw

__all__ = ['Board', 'GameState', 'init_game', 'apply_move', 'undo_move', 'try_apply',
           'find_winner', 'is_draw']
