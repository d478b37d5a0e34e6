"""
utils.py - Constants, enumerations and helpers shared across the package

This module provides the board dimensions, cell encodings, player and
result enumerations, the direction table used for win detection and the
text renderer used by the console front end.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# A line of CONNECT_N cannot exist before this many alternating moves
MIN_MOVES_FOR_WIN = 2 * CONNECT_N - 1

# Cell encodings that are not a player
FORBIDDEN = -1  # above the current column height, not reachable yet
EMPTY = 0       # the single cell a dropped piece would land in

# Drop target sentinel for a column with no room left
FULL = -1


class Player(Enum):
    """Enumeration of the two players; the value is the cell encoding."""
    HUMAN = 1
    COMPUTER = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.HUMAN:
            return Player.COMPUTER
        return Player.HUMAN

    def __str__(self):
        return str(self.value)


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    HUMAN_WIN = auto()
    COMPUTER_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class GameMode(Enum):
    """Play modes offered by the console."""
    EASY = "easy"              # computer picks a random column
    HARD = "hard"              # computer searches with minimax
    HELL = "hell"              # minimax, and the board is never redrawn
    TWO_PLAYER = "two-player"

    def uses_search(self) -> bool:
        return self in (GameMode.HARD, GameMode.HELL)


# (dx, dy) unit vectors in scan order: N, NE, E, SE, S, SW, W, NW.
# Row 0 is the top of the board, so "up" is a negative dy.
DIRECTIONS: List[Tuple[int, int]] = [
    (0, -1), (1, -1), (1, 0), (1, 1),
    (0, 1), (-1, 1), (-1, 0), (-1, -1),
]


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Occupied cells show the player number and the playable cell of each
    column shows 0; cells that cannot be reached yet are left blank. Column numbers are printed above and below,
    row numbers down the left edge.

    Args:
        grid: 2-D array of cell values, shape (rows, cols)

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    numbers = "".join(f"   {col}" for col in range(cols))
    separator = " " + "+---" * cols + "+"

    result = [numbers]
    for row in range(rows):
        result.append(separator)
        line = str(row)
        for col in range(cols):
            cell = int(grid[row, col])
            if cell == FORBIDDEN:
                line += "|   "
            else:
                line += f"| {cell} "
        line += "|"
        result.append(line)
    result.append(separator)
    result.append(numbers)

    return "\n".join(result)


def parse_moves(text: str) -> List[int]:
    """
    Parse a comma separated list of column numbers, e.g. "3,3,4".

    Raises:
        ValueError: if an entry is not an integer
    """
    text = text.strip()
    if not text:
        return []
    return [int(part) for part in text.split(",") if part.strip()]
