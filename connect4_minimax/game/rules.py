"""
rules.py - Win and draw detection

find_winner scans the whole board for CONNECT_N pieces in a row. It is
called at every node of the search, so it works on a plain list copy of
the cells and stops climbing a column at the first cell without a piece:
nothing above such a cell can be occupied.
"""

from typing import Optional

from connect4_minimax.game.state import GameState
from connect4_minimax.utils import (CONNECT_N, DIRECTIONS, EMPTY, MIN_MOVES_FOR_WIN,
                                    GameResult, Player)


def find_winner(state: GameState) -> Optional[Player]:
    """
    Find a player with CONNECT_N pieces in a row.

    Columns are scanned left to right, each from the bottom up, and every
    piece is checked along the eight directions in DIRECTIONS order. The
    first player found is returned.

    Args:
        state: The game state to inspect (not modified)

    Returns:
        The winning player, or None if nobody has won
    """
    if state.moves_played < MIN_MOVES_FOR_WIN:
        return None

    board = state.board
    width = board.width
    height = board.height
    cells = board.cells.tolist()
    steps = CONNECT_N - 1

    for x in range(width):
        for y in range(height - 1, -1, -1):
            owner = cells[y * width + x]
            if owner <= EMPTY:
                break

            for dx, dy in DIRECTIONS:
                nx, ny = x, y
                for _ in range(steps):
                    nx += dx
                    ny += dy
                    if not (0 <= nx < width and 0 <= ny < height):
                        break
                    if cells[ny * width + nx] != owner:
                        break
                else:
                    return Player(owner)

    return None


def is_draw(state: GameState) -> bool:
    """A full board with no winner."""
    return state.board.is_full() and find_winner(state) is None


def get_result(state: GameState) -> GameResult:
    """Classify a state for the game driver."""
    winner = find_winner(state)
    if winner == Player.HUMAN:
        return GameResult.HUMAN_WIN
    if winner == Player.COMPUTER:
        return GameResult.COMPUTER_WIN
    if state.board.is_full():
        return GameResult.DRAW
    return GameResult.IN_PROGRESS
