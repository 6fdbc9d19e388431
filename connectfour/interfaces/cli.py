"""
cli.py - Terminal front end for Connect Four

Two players share one terminal: the board is printed after every move,
a preview line names whose disk drops next, and a column number drops it.
A benchmark command plays random games through the engine for timing.
"""

import argparse
import sys
from typing import List, Optional, Union

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.game.engine import GameEngine
from connectfour.utils import COLS, COLUMN_FULL

QUIT = "quit"
RESTART = "restart"


class SimpleCLI:
    """Command-line interface that owns one GameEngine."""

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and apply the logging options."""
        parser = argparse.ArgumentParser(description='Connect Four for two players')
        parser.add_argument('--seed', type=int, default=None,
                            help='Seed for choosing the starting player')
        parser.add_argument('--debug', action='store_true',
                            help='Shortcut for --debug-level debug')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        parser.add_argument('--log-file', default=None,
                            help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a game with two players at this terminal')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time random games')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of games to play')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        debug.configure(log_file=self.args.log_file)
        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line."""
        if self.args is None:
            self.parse_args(argv)

        if self.engine is None:
            self.engine = GameEngine(np.random.default_rng(self.args.seed))

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play games until a player quits."""
        print("Connect 4")
        print(f"Enter a column number (0-{COLS - 1}) to drop a disk, "
              "'r' to restart, 'q' to quit.")
        print(self.engine.render())

        while True:
            if not self.engine.is_in_progress():
                print(f"{self.engine.winner().color} wins!")
                if not self.ask_restart():
                    return
                continue

            if self.engine.board.is_full():
                # Draws are not detected by the engine, the game just stalls
                print("Board is full, nobody connected four.")
                if not self.ask_restart():
                    return
                continue

            player = self.engine.next_player()
            print(f"{player.color} ({player}) to move")
            move = self.get_human_move("Column: ")

            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return
            elif move == RESTART:
                self.restart()
                continue

            row = self.engine.drop_disk(move)
            if row == COLUMN_FULL:
                print(f"Column {move} is full, pick another one.")
                continue

            print(self.engine.render())

    def restart(self) -> None:
        self.engine.restart()
        print("Game restarted.")
        print(self.engine.render())

    def ask_restart(self) -> bool:
        """Ask whether to play again, restarting the engine if so."""
        while True:
            answer = self.read_line("Play again? (r to restart, q to quit): ")
            if answer in (None, 'q'):
                print("Quitting game.")
                return False
            if answer == 'r':
                self.restart()
                return True
            print("Please enter 'r' or 'q'.")

    def read_line(self, prompt: str) -> Optional[str]:
        """Read one line of input, None at end of input."""
        try:
            return input(prompt).strip().lower()
        except EOFError:
            return None

    def get_human_move(self, prompt: str) -> Union[int, str, None]:
        """
        Get a move from the player at the terminal.

        Returns:
            Column index, QUIT or RESTART, or None if the input was not usable
        """
        user_input = self.read_line(prompt)

        if user_input is None or user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or 'r'/'q'.")
            return None

        if not 0 <= move < COLS:
            print(f"Column must be between 0 and {COLS - 1}.")
            return None
        return move

    def benchmark(self) -> None:
        """Play random games through the engine and report timings."""
        iterations = self.args.iterations
        rng = self.engine.rng
        print(f"Running benchmark with {iterations} games...")

        wins = {}
        stalled = 0
        total_moves = 0

        debug.start_timer("game_simulation")
        for _ in range(iterations):
            self.engine.restart()
            while self.engine.is_in_progress() and not self.engine.board.is_full():
                open_columns = [c for c in range(COLS) if not self.engine.board.is_column_full(c)]
                self.engine.drop_disk(open_columns[int(rng.integers(0, len(open_columns)))])
                total_moves += 1

            winner = self.engine.winner()
            if winner is None:
                stalled += 1
            else:
                wins[winner] = wins.get(winner, 0) + 1
        elapsed = debug.end_timer("game_simulation", "cli")

        for player, count in sorted(wins.items(), key=lambda item: item[0].value):
            print(f"{player.color} won {count} games")
        print(f"Full boards without a winner: {stalled}")
        if iterations and total_moves:
            print(f"Played {iterations} games ({total_moves} moves) in {elapsed:.6f} seconds, "
                  f"{elapsed / total_moves * 1000:.6f} ms per move")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
