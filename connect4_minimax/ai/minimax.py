"""
minimax.py - Fixed-depth minimax search for the computer player

Two mutually recursive methods do the work. evaluate_position scores a
position: a computer win, a human win, or NEUTRAL once the depth budget
is spent, and otherwise hands over to choose_best_move. choose_best_move
plays every available column in turn, scores the result one ply deeper,
keeps the highest raw rating and undoes the move again.

All ratings are read from the computer's point of view. Raw ratings are
maximised at every ply, whoever moves there; the result is passed up
unchanged when the computer moved and negated when the human moved.

NEUTRAL is the lowest rating on purpose, so any decisive line beats it.
When the top-level score is still NEUTRAL the search found nothing
decisive and the column with the most recorded computer wins is played
instead (see victory_tally.py).
"""

import time
from typing import List, Optional, Tuple

from connect4_minimax.ai.victory_tally import VictoryTally
from connect4_minimax.debug import debug
from connect4_minimax.game.rules import find_winner
from connect4_minimax.game.state import GameState, apply_move, undo_move
from connect4_minimax.utils import Player

# Ratings, from the computer's point of view
WIN_POSITION = 1000
LOSE_POSITION = 0
NEUTRAL_POSITION = -1000

# Plies searched below the current position
MAX_DEPTH = 8


class SearchCancelled(RuntimeError):
    """Raised when a search is abandoned before it completes."""


class SearchTimeout(SearchCancelled):
    """Raised when a search runs past its deadline."""


class SearchContext:
    """
    State belonging to one top-level decision.

    Holds the depth limit, the win tally filled in during the search, a
    node counter and an optional deadline. A new context is made for every
    call to determine_best_move, so nothing leaks between decisions or
    between games.
    """

    def __init__(self, width: int, max_depth: int = MAX_DEPTH,
                 deadline: Optional[float] = None):
        self.max_depth = max_depth
        self.tally = VictoryTally(width)
        self.deadline = deadline
        self.nodes_evaluated = 0

    def check_deadline(self):
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise SearchTimeout(f"Search stopped after {self.nodes_evaluated} nodes")


class MinimaxPlayer:
    """
    Computer player that searches a fixed number of plies ahead.

    There is no pruning, so the cost grows with width ** depth; the
    default depth of 8 is slow in Python on a full 7x6 board.
    """

    def __init__(self, depth: int = MAX_DEPTH, time_limit: Optional[float] = None):
        """
        Initialize the minimax player.

        Args:
            depth: Number of plies to search (at least 1)
            time_limit: Optional time budget in seconds per decision; the
                search raises SearchTimeout when it runs out
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.depth = depth
        self.time_limit = time_limit

        # Details of the last decision, for reporting
        self.nodes_evaluated = 0
        self.last_rating: Optional[int] = None
        self.last_tally: List[int] = []
        self.last_fallback = False

    def new_context(self, state: GameState) -> SearchContext:
        deadline = None
        if self.time_limit is not None:
            deadline = time.monotonic() + self.time_limit
        return SearchContext(state.board.width, self.depth, deadline)

    def get_move(self, state: GameState) -> int:
        """Column the computer plays in ``state``."""
        return self.determine_best_move(state)

    def determine_best_move(self, state: GameState) -> int:
        """
        Choose a column for the player to move in ``state``.

        The state is used for simulation and is back in its original
        condition when this returns.

        Returns:
            The chosen column

        Raises:
            ValueError: if the board is full
            SearchTimeout: if a time limit is set and runs out
        """
        if state.board.is_full():
            raise ValueError("No legal moves: the board is full")

        self.last_rating = None
        context = self.new_context(state)
        started = time.perf_counter()

        best_column, rating = self.choose_best_move(state, 0, context)

        columns = state.board.available_columns()
        fallback = rating == NEUTRAL_POSITION
        if fallback:
            best_column = context.tally.best_column(columns)
        elif best_column is None:
            # every reply ends in a drawn board rated below NEUTRAL
            best_column = columns[0]

        self.nodes_evaluated = context.nodes_evaluated
        self.last_rating = rating
        self.last_tally = list(context.tally.counts)
        self.last_fallback = fallback
        context.tally.reset()

        debug.info(f"Chose column {best_column} (rating {rating}"
                   f"{', by win tally' if fallback else ''}) after "
                   f"{self.nodes_evaluated} nodes in {time.perf_counter() - started:.3f}s", "ai")
        debug.debug(f"Win tally: {self.last_tally}", "ai")

        return best_column

    def choose_best_move(self, state: GameState, depth: int,
                         context: SearchContext) -> Tuple[Optional[int], int]:
        """
        Try every available column and keep the highest raw rating.

        Columns are tried in ascending order and the first one reaching the
        maximum is kept. Every move rated as a computer win is recorded in
        the tally, whoever made it.

        A drawn (full) board reached inside the search has no column to
        try; it keeps the initial rating, one below NEUTRAL_POSITION, and
        returns None as the column.

        Args:
            state: Position to move from; restored before returning
            depth: Plies already played below the top-level position
            context: Search context of the current decision

        Returns:
            (column, score) with the score read from the computer's side
        """
        mover = state.turn
        best_column = None
        max_rating = NEUTRAL_POSITION - 1

        for column in state.board.available_columns():
            context.check_deadline()

            row = apply_move(state, column)
            try:
                rating = self.evaluate_position(state, depth + 1, context)
            finally:
                undo_move(state, column, row)

            if rating == WIN_POSITION:
                context.tally.record(column)

            if rating > max_rating:
                best_column = column
                max_rating = rating

        if mover == Player.COMPUTER:
            return best_column, max_rating
        return best_column, -max_rating

    def evaluate_position(self, state: GameState, depth: int, context: SearchContext) -> int:
        """
        Rate a position reached ``depth`` plies into the search.

        Returns:
            WIN_POSITION or LOSE_POSITION for a finished game,
            NEUTRAL_POSITION at the depth limit, otherwise the score of the
            best move from here
        """
        context.nodes_evaluated += 1

        winner = find_winner(state)
        if winner == Player.COMPUTER:
            return WIN_POSITION
        if winner == Player.HUMAN:
            return LOSE_POSITION
        if depth >= context.max_depth:
            return NEUTRAL_POSITION

        _, rating = self.choose_best_move(state, depth, context)
        return rating


def determine_best_move(state: GameState, depth: int = MAX_DEPTH) -> int:
    """Column chosen by a MinimaxPlayer searching ``depth`` plies."""
    return MinimaxPlayer(depth).determine_best_move(state)
