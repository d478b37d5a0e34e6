"""
random_player.py - Easy-mode opponent that drops pieces at random
"""

import random
from typing import Optional

from connect4_minimax.game.state import GameState


def random_legal_column(state: GameState, rng: Optional[random.Random] = None) -> int:
    """
    Pick one of the columns that still take a piece, uniformly.

    Args:
        state: Current game state
        rng: Random generator to draw from (module-level random if None)

    Raises:
        ValueError: if the board is full
    """
    columns = state.board.available_columns()
    if not columns:
        raise ValueError("No legal moves: the board is full")
    return (rng or random).choice(columns)


class RandomPlayer:
    """Player object with the same get_move interface as MinimaxPlayer."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def get_move(self, state: GameState) -> int:
        return random_legal_column(state, self.rng)
