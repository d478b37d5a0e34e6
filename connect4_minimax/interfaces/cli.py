"""
cli.py - Command-line interface for playing and analysing games

Commands:
    play       play a game in easy, hard, hell or two-player mode
    analyze    replay a list of moves and show what the search would do
    benchmark  time move making, win detection and searches
    rules      explain how to play
"""

import argparse
import random
import sys
import time
from typing import List, Optional

from connect4_minimax.ai.minimax import MAX_DEPTH, MinimaxPlayer, SearchTimeout
from connect4_minimax.debug import debug, DebugLevel
from connect4_minimax.game.controller import ConnectFourGame
from connect4_minimax.game.rules import find_winner
from connect4_minimax.game.state import GameState, apply_move, init_game, try_apply
from connect4_minimax.utils import ROWS, COLS, GameMode, GameResult, Player, parse_moves

# Special commands returned by get_human_move
QUIT = -1
UNDO = -2
RESTART = -3

PLAYER_NAMES = {Player.HUMAN: "Player A", Player.COMPUTER: "Player B"}

RULES = """\
Take turns dropping pieces into the columns of the board. A piece falls to
the lowest free cell of its column. Cells that show 0 are the ones you can
play right now; blank cells are not reachable yet.

The first player to line up four pieces horizontally, vertically or
diagonally wins. If the board fills up first, the game is a tie.

During play, enter a column number to move, u to undo, r to restart
or q to quit. Your pieces are shown as 1 and the computer's as 2; in a
two-player game Player A uses 1 and Player B uses 2.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four against a minimax opponent')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level')
    parser.add_argument('--log-file', default=None, help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    def add_board_args(sub):
        sub.add_argument('--width', type=int, default=COLS, help='Number of columns')
        sub.add_argument('--height', type=int, default=ROWS, help='Number of rows')
        sub.add_argument('--depth', type=int, default=MAX_DEPTH, help='Search depth in plies')
        sub.add_argument('--first', choices=['computer', 'human'], default='computer',
                         help='Who moves first')

    play_parser = subparsers.add_parser('play', help='Play a game interactively')
    add_board_args(play_parser)
    play_parser.add_argument('--mode', choices=[mode.value for mode in GameMode],
                             default=GameMode.HARD.value, help='Game mode')
    play_parser.add_argument('--time-limit', type=float, default=None,
                             help='Seconds the computer may think per move')
    play_parser.add_argument('--seed', type=int, default=None,
                             help='Random seed for easy mode')
    play_parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    analyze_parser = subparsers.add_parser('analyze', help='Analyse a position')
    add_board_args(analyze_parser)
    analyze_parser.add_argument('--moves', type=str, default='',
                                help='Comma separated columns played from the start, e.g. 3,3,4')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of iterations for benchmarking')
    benchmark_parser.add_argument('--depth', type=int, default=4,
                                  help='Search depth used for the search benchmark')

    subparsers.add_parser('rules', help='Explain how to play')

    return parser


class SimpleCLI:
    """Command-line front end for the game."""

    def __init__(self):
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command named on the command line."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'analyze':
            return self.analyze_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        elif self.args.command == 'rules':
            print(RULES)
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def first_player(self) -> Player:
        return Player.HUMAN if self.args.first == 'human' else Player.COMPUTER

    def play_game(self) -> None:
        """Play a game interactively until the user stops."""
        mode = GameMode(self.args.mode)
        self.game = ConnectFourGame(mode, depth=self.args.depth,
                                    width=self.args.width, height=self.args.height,
                                    first_player=self.first_player(),
                                    seed=self.args.seed, time_limit=self.args.time_limit)

        while True:
            if not self.play_round():
                return
            if not self.ask_yes_no("\nWould you like to play again? (y/n) "):
                return
            self.game.reset()

    def play_round(self) -> bool:
        """
        Play one game to the end.

        Returns:
            False if the user quit, True if the game finished
        """
        game = self.game
        hell = game.mode == GameMode.HELL

        print(f"Starting a new game ({game.mode.value} mode).")
        print(f"Enter a column number (0-{game.width - 1}) to make a move.")
        print("Other commands: 'q' to quit, 'u' to undo, 'r' to restart.")
        if not hell:
            print(game.render())

        while not game.is_game_over():
            if game.is_computer_turn():
                self.play_computer_turn(hell)
                continue

            move = self.get_human_move()
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return False
            if move == UNDO:
                self.undo_to_human_turn()
                continue
            if move == RESTART:
                game.reset()
                print("Game restarted.")
                if not hell:
                    print(game.render())
                continue

            mover = game.get_current_player()
            if not game.make_move(move):
                print("Illegal input, try again.")
                continue

            column, row = game.history[-1]
            if game.mode == GameMode.TWO_PLAYER:
                print(f"{PLAYER_NAMES[mover]} makes a move ({column},{row}).")
            if not hell:
                print(game.render())

        self.announce_result()
        return True

    def play_computer_turn(self, hell: bool) -> None:
        game = self.game
        if game.mode.uses_search():
            print("Computer is thinking...")
        rating = None
        try:
            column, row = game.computer_move()
            rating = game.last_rating()
        except SearchTimeout:
            # Out of time: fall back to the first open column
            column = game.get_valid_moves()[0]
            row = game.state.board.landing_row(column)
            game.make_move(column)
            debug.warning(f"Search timed out, played column {column}", "cli")

        if game.mode.uses_search():
            print(f"It makes the move ({column}, {row}) "
                  f"({'timed out' if rating is None else rating})")
        else:
            print(f"Computer makes a move ({column},{row}).")
        if not hell:
            print(game.render())

    def undo_to_human_turn(self) -> None:
        """Undo the last move, and the computer's reply before it if needed."""
        game = self.game
        if not game.undo_move():
            print("No moves to undo.")
            return
        while game.is_computer_turn() and game.history:
            game.undo_move()
        print("Move undone.")
        if game.mode != GameMode.HELL:
            print(game.render())

    def announce_result(self) -> None:
        result = self.game.get_result()
        print("Game over!")
        if result == GameResult.DRAW:
            print("Tie.")
        elif self.game.mode == GameMode.TWO_PLAYER:
            winner = self.game.get_winner()
            print(f"{PLAYER_NAMES[winner]} wins.")
        elif result == GameResult.HUMAN_WIN:
            print("You win.")
        else:
            print("You lose.")

    def get_human_move(self) -> Optional[int]:
        """
        Get a move from human player input.

        Returns:
            Column index, a special command code, or None on invalid input
        """
        game = self.game
        prompt = "Your move"
        if game.mode == GameMode.TWO_PLAYER:
            prompt = f"{PLAYER_NAMES[game.get_current_player()]} makes a move"

        try:
            user_input = input(f"{prompt} (columns 0-{game.width - 1}, q/u/r): ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'u':
            return UNDO
        elif user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or special command.")
            return None

    def ask_yes_no(self, hint: str) -> bool:
        while True:
            try:
                answer = input(hint).strip().lower()
            except EOFError:
                return False
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False

    def build_position(self) -> GameState:
        """
        Replay the --moves list from an empty board.

        Raises:
            ValueError: on a malformed list or an illegal move
        """
        state = init_game(self.args.width, self.args.height, self.first_player())
        for number, column in enumerate(parse_moves(self.args.moves), start=1):
            if find_winner(state) is not None:
                raise ValueError(f"Move {number}: the game is already over")
            if try_apply(state, column) is None:
                raise ValueError(f"Move {number}: column {column} is not playable")
        return state

    def analyze_position(self) -> int:
        """Show a position, its winner, and the column the search picks."""
        try:
            state = self.build_position()
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print(state.board.render())
        print(f"Moves played: {state.moves_played}, {state.turn.name} to move")

        winner = find_winner(state)
        if winner is not None:
            print(f"Winner: {winner.name}")
            return 0
        if state.board.is_full():
            print("Board is full: draw")
            return 0

        print(f"Valid moves: {state.board.available_columns()}")
        player = MinimaxPlayer(self.args.depth)
        column = player.determine_best_move(state)
        print(f"Best move: column {column} (row {state.board.landing_row(column)})")
        print(f"Rating: {player.last_rating}"
              f"{' (chosen by win tally)' if player.last_fallback else ''}")
        print(f"Win tally: {player.last_tally}")
        print(f"Nodes evaluated: {player.nodes_evaluated}")
        return 0

    def benchmark(self) -> None:
        """Benchmark move making, win detection and search."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} iterations...")

        # Move making on random games
        debug.start_timer("moves")
        state = init_game()
        moves_made = 0
        for _ in range(iterations):
            columns = state.board.available_columns()
            if not columns or find_winner(state) is not None:
                state = init_game()
                continue
            apply_move(state, random.choice(columns))
            moves_made += 1
        moves_time = debug.end_timer("moves") or 0.0
        print(f"Making {moves_made} moves (with win checks): {moves_time:.6f} seconds total")

        # Win detection on random mid-game positions
        positions = []
        for _ in range(iterations):
            state = init_game()
            for _ in range(random.randint(7, 20)):
                columns = state.board.available_columns()
                if not columns or find_winner(state) is not None:
                    break
                apply_move(state, random.choice(columns))
            positions.append(state)

        debug.start_timer("win_check")
        for state in positions:
            find_winner(state)
        win_check_time = debug.end_timer("win_check") or 0.0
        print(f"Performing {len(positions)} win checks: {win_check_time:.6f} seconds total, "
              f"{win_check_time / max(len(positions), 1) * 1000:.6f} ms per check")

        # Searches from the empty board
        player = MinimaxPlayer(self.args.depth)
        started = time.perf_counter()
        column = player.determine_best_move(init_game())
        elapsed = time.perf_counter() - started
        print(f"Depth {self.args.depth} search from the empty board: column {column}, "
              f"{player.nodes_evaluated} nodes in {elapsed:.3f} seconds")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
