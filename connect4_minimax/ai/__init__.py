"""
connect4_minimax/ai/__init__.py - Computer players

Minimax search with a win-frequency fallback for the hard modes and a
random player for easy mode.
"""

from connect4_minimax.ai.minimax import (MinimaxPlayer, SearchContext, SearchCancelled,
                                         SearchTimeout, determine_best_move)
from connect4_minimax.ai.random_player import RandomPlayer, random_legal_column
from connect4_minimax.ai.victory_tally import VictoryTally

__all__ = ['MinimaxPlayer', 'SearchContext', 'SearchCancelled', 'SearchTimeout',
           'determine_best_move', 'RandomPlayer', 'random_legal_column', 'VictoryTally']
