"""
state.py - Game state and the move engine

A GameState bundles the board with whose turn it is and how many moves
have been played. The move engine functions here are the only code that
mutates a state: apply_move/undo_move are the unchecked pair the search
uses for make/unmake, try_apply is the checked path for human input.
"""

from typing import Optional

from connect4_minimax.debug import debug
from connect4_minimax.game.board import Board
from connect4_minimax.utils import ROWS, COLS, Player


class GameState:
    """Board, player to move and move counter of one game."""

    def __init__(self, board: Board, turn: Player = Player.COMPUTER, moves_played: int = 0):
        self.board = board
        self.turn = turn
        self.moves_played = moves_played

    def copy(self) -> 'GameState':
        return GameState(self.board.copy(), self.turn, self.moves_played)

    def to_bytes(self) -> bytes:
        """Serialized snapshot, used to compare states exactly."""
        header = bytes([self.turn.value]) + self.moves_played.to_bytes(2, "little")
        targets = b"".join(row.to_bytes(2, "little", signed=True)
                           for row in self.board.drop_targets)
        return header + targets + self.board.cells.tobytes()

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (self.turn == other.turn and self.moves_played == other.moves_played
                and self.board == other.board)

    def __repr__(self) -> str:
        return (f"GameState({self.board.width}x{self.board.height}, "
                f"turn={self.turn.name}, moves_played={self.moves_played})")


def init_game(width: int = COLS, height: int = ROWS,
              first_player: Player = Player.COMPUTER) -> GameState:
    """Fresh state for a new game; the computer moves first unless told otherwise."""
    debug.debug(f"New {width}x{height} game, {first_player.name} to move", "game")
    return GameState(Board(width, height), first_player, 0)


def apply_move(state: GameState, column: int) -> int:
    """
    Drop a piece for the player to move into ``column``.

    The turn passes to the opponent and the move counter goes up by one.
    A full column raises ValueError from Board.place before anything
    changes.

    Returns:
        The row the piece landed in, needed to undo the move
    """
    row = state.board.place(column, state.turn)
    state.turn = state.turn.other()
    state.moves_played += 1
    return row


def undo_move(state: GameState, column: int, row: int):
    """
    Exact inverse of apply_move(state, column) that returned ``row``.
    """
    state.board.remove(column, row)
    state.turn = state.turn.other()
    state.moves_played -= 1


def try_apply(state: GameState, column: int) -> Optional[int]:
    """
    Checked variant of apply_move for untrusted input.

    Returns:
        The landing row, or None if the column is out of range or full;
        the state is left untouched in that case
    """
    row = state.board.landing_row(column)
    if row is None or not state.board.is_legal_drop(column, row):
        debug.debug(f"Rejected move in column {column} for {state.turn.name}", "game")
        return None

    return apply_move(state, column)


def is_legal_drop(state: GameState, column: int, row: Optional[int]) -> bool:
    return state.board.is_legal_drop(column, row)


def landing_row(state: GameState, column: int) -> Optional[int]:
    return state.board.landing_row(column)
