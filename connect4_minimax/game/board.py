"""
board.py - Board representation and drop-target bookkeeping

This module implements the Board class: a fixed-size grid of cells plus,
for every column, the row a dropped piece would land in. Gravity means only
one cell per column is ever reachable, so cells above it are kept FORBIDDEN
and the drop targets are updated incrementally on every place/remove rather
than rescanned.
"""

from typing import List, Optional

import numpy as np

from connect4_minimax.debug import debug
from connect4_minimax.utils import (ROWS, COLS, EMPTY, FORBIDDEN, FULL, Player,
                                    render_board_ascii)


class Board:
    """
    A connect-four board of ``width`` columns and ``height`` rows.

    Cells live in a flat row-major numpy array; row 0 is the top of the
    board and row ``height - 1`` the bottom. Reading any column top to
    bottom gives FORBIDDEN cells, at most one EMPTY cell, then pieces.
    ``drop_targets[column]`` is the row of that EMPTY cell, or FULL.
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        """Initialize a board with only the bottom row reachable."""
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.reset()

    def reset(self):
        """Reset the board to its starting state."""
        self.cells = np.full(self.width * self.height, FORBIDDEN, dtype=np.int8)
        bottom = self.height - 1
        self.cells[bottom * self.width:] = EMPTY
        self.drop_targets: List[int] = [bottom] * self.width

    def index(self, column: int, row: int) -> int:
        """Position of (column, row) in the flat cell array."""
        return row * self.width + column

    def cell(self, column: int, row: int) -> int:
        """Value stored at (column, row)."""
        return int(self.cells[self.index(column, row)])

    @property
    def grid(self) -> np.ndarray:
        """2-D (height, width) view of the cells."""
        return self.cells.reshape(self.height, self.width)

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board instance with the same cells and drop targets
        """
        new_board = Board.__new__(Board)
        new_board.width = self.width
        new_board.height = self.height
        new_board.cells = self.cells.copy()
        new_board.drop_targets = list(self.drop_targets)
        return new_board

    def place(self, column: int, player: Player) -> int:
        """
        Drop a piece for ``player`` into ``column``.

        The cell above the landing cell becomes reachable, or the column
        becomes FULL when the top row was filled.

        Returns:
            The row the piece landed in

        Raises:
            ValueError: if the column is full
        """
        row = self.drop_targets[column]
        if row == FULL:
            raise ValueError(f"Column {column} is full")
        self.cells[self.index(column, row)] = player.value

        if row > 0:
            self.cells[self.index(column, row - 1)] = EMPTY
            self.drop_targets[column] = row - 1
        else:
            self.drop_targets[column] = FULL

        return row

    def remove(self, column: int, row: int):
        """
        Take back the piece at (column, row).

        Must be the piece most recently placed in that column; this is not
        checked.
        """
        self.cells[self.index(column, row)] = EMPTY
        if row > 0:
            self.cells[self.index(column, row - 1)] = FORBIDDEN
        self.drop_targets[column] = row

    def is_legal_drop(self, column: int, row: Optional[int]) -> bool:
        """
        Check whether (column, row) is the cell a piece dropped in
        ``column`` would land in right now.

        Args:
            column: Column index, may be out of range
            row: Row index, FULL or None

        Returns:
            True if the drop is legal, False otherwise
        """
        if not (0 <= column < self.width):
            debug.debug(f"Illegal drop: column {column} out of range", "board")
            return False

        if row is None or row == FULL:
            debug.debug(f"Illegal drop: column {column} is full", "board")
            return False

        return self.drop_targets[column] == row

    def landing_row(self, column: int) -> Optional[int]:
        """
        Row a piece dropped in ``column`` would land in.

        Returns:
            The row index, or None if the column is full or out of range
        """
        if not (0 <= column < self.width):
            return None

        row = self.drop_targets[column]
        return None if row == FULL else row

    def available_columns(self) -> List[int]:
        """Columns that still take a piece, in ascending order."""
        return [col for col, row in enumerate(self.drop_targets) if row != FULL]

    def is_full(self) -> bool:
        return all(row == FULL for row in self.drop_targets)

    def count_pieces(self, player: Optional[Player] = None) -> int:
        """Number of pieces on the board, optionally for one player only."""
        if player is None:
            return int(np.count_nonzero(self.cells > EMPTY))
        return int(np.count_nonzero(self.cells == player.value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and self.drop_targets == other.drop_targets
                and np.array_equal(self.cells, other.cells))

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
