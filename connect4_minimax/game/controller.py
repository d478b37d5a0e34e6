"""
controller.py - High-level game manager used by the console front end

ConnectFourGame owns one GameState for the life of a game, validates human
moves through the checked move path, asks the configured computer player
for its column and keeps a move history for undo.
"""

from typing import List, Optional, Tuple

from connect4_minimax.ai.minimax import MAX_DEPTH, MinimaxPlayer
from connect4_minimax.ai.random_player import RandomPlayer
from connect4_minimax.debug import debug
from connect4_minimax.game.rules import find_winner, get_result
from connect4_minimax.game.state import GameState, init_game, try_apply, undo_move
from connect4_minimax.utils import ROWS, COLS, GameMode, GameResult, Player


class ConnectFourGame:
    """
    High-level game manager.

    In the single-player modes the human plays Player.HUMAN and the
    computer Player.COMPUTER; in two-player mode both sides are entered
    by hand.
    """

    def __init__(self, mode: GameMode = GameMode.HARD, depth: int = MAX_DEPTH,
                 width: int = COLS, height: int = ROWS,
                 first_player: Player = Player.COMPUTER,
                 seed: Optional[int] = None, time_limit: Optional[float] = None):
        """
        Initialize a new game.

        Args:
            mode: Play mode, decides which computer player is used
            depth: Search depth for the minimax modes
            width: Number of columns
            height: Number of rows
            first_player: Player making the first move
            seed: Random seed for the easy-mode player
            time_limit: Optional per-move time budget for the search
        """
        self.mode = mode
        self.width = width
        self.height = height
        self.first_player = first_player

        if mode.uses_search():
            self.computer = MinimaxPlayer(depth, time_limit=time_limit)
        elif mode == GameMode.EASY:
            self.computer = RandomPlayer(seed)
        else:
            self.computer = None

        self.reset()

    def reset(self):
        """Reset the game to initial state."""
        debug.debug(f"Resetting {self.mode.value} game", "game")
        self.state: GameState = init_game(self.width, self.height, self.first_player)
        self.history: List[Tuple[int, int]] = []

    def make_move(self, column: int) -> bool:
        """
        Make a move for the player whose turn it is.

        Args:
            column: Column to drop a piece into

        Returns:
            True if the move was made, False if it was illegal
        """
        if self.is_game_over():
            debug.debug("Move refused: the game is over", "game")
            return False

        row = try_apply(self.state, column)
        if row is None:
            return False

        self.history.append((column, row))
        debug.debug(f"Move {self.state.moves_played}: column {column}, row {row}", "game")
        return True

    def computer_move(self) -> Tuple[int, int]:
        """
        Let the computer play its move.

        Returns:
            The (column, row) the computer played

        Raises:
            RuntimeError: in two-player mode, or when the game is over
        """
        if self.computer is None:
            raise RuntimeError("There is no computer player in two-player mode")
        if self.is_game_over():
            raise RuntimeError("The game is over")

        column = self.computer.get_move(self.state)
        row = self.state.board.landing_row(column)
        self.make_move(column)
        return column, row

    def undo_move(self) -> bool:
        """
        Undo the last move.

        Returns:
            True if a move was undone, False if there was none
        """
        if not self.history:
            debug.debug("No moves to undo", "game")
            return False

        column, row = self.history.pop()
        undo_move(self.state, column, row)
        debug.debug(f"Undid move at ({column}, {row})", "game")
        return True

    def is_computer_turn(self) -> bool:
        return self.computer is not None and self.state.turn == Player.COMPUTER

    def last_rating(self) -> Optional[int]:
        """Rating of the computer's last searched move, if any."""
        return getattr(self.computer, "last_rating", None)

    def is_game_over(self) -> bool:
        return self.get_result().is_game_over()

    def get_winner(self) -> Optional[Player]:
        return find_winner(self.state)

    def get_result(self) -> GameResult:
        return get_result(self.state)

    def get_current_player(self) -> Player:
        return self.state.turn

    def get_valid_moves(self) -> List[int]:
        return self.state.board.available_columns()

    def render(self) -> str:
        return self.state.board.render()
