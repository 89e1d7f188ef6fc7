"""
cli.py - Command-line interface for playing Connect Four

This module provides the text driver: it asks for the two player names,
prints the board every turn, reads column choices and reports the result.
All rule decisions are left to ConnectFourGame.
"""

import argparse
import sys
from typing import List, Optional

from connect_four.debug import debug, DebugLevel
from connect_four.game.rules import ConnectFourGame
from connect_four.utils import COLS, Cell, MoveResult

INVALID_INPUT = f"Invalid input. Please enter a number between 1 and {COLS}."


def parse_column(text: str) -> Optional[int]:
    """
    Convert a 1-based column typed by a player into a 0-based index.

    Args:
        text: Raw user input

    Returns:
        The 0-based column (not range-checked), or None if the text is
        not an integer
    """
    try:
        return int(text.strip()) - 1
    except ValueError:
        return None


class SimpleCLI:
    """Simple command-line interface for a two-player game."""

    def __init__(self):
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> bool:
        """
        Parse command-line arguments and configure logging.

        Returns:
            False if logging could not be set up as requested
        """
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        play_parser.add_argument('--player1', type=str, help='Name of player 1 (X)')
        play_parser.add_argument('--player2', type=str, help='Name of player 2 (O)')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        play_parser.add_argument('--debug-level', type=str, default=None,
                                 choices=[level.name.lower() for level in DebugLevel],
                                 help='Logging level')
        play_parser.add_argument('--log-file', type=str, default=None,
                                 help='Also write log messages to this file')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

        if getattr(self.args, 'log_file', None):
            try:
                debug.configure(log_file=self.args.log_file)
            except OSError as e:
                print(f"Cannot open log file {self.args.log_file}: {e.strerror}")
                return False

        return True

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit status
        """
        if not self.args and not self.parse_args(argv):
            return 1

        if self.args.command == 'play':
            try:
                self.play_game()
            except (EOFError, KeyboardInterrupt):
                print("\nGame aborted.")
                debug.warning("Input closed before the game finished", "cli")
                return 1
            return 0

        print("Please specify a command. Use --help for options.")
        return 1

    def prompt_names(self):
        """Ask for any player names not given on the command line."""
        player1 = self.args.player1
        if player1 is None:
            player1 = input("Enter Player 1 name (X): ")
        player2 = self.args.player2
        if player2 is None:
            player2 = input("Enter Player 2 name (O): ")
        return player1, player2

    def show_board(self) -> None:
        """Print the match header and the current board."""
        x_name = self.game.players[Cell.PLAYER_ONE].name
        o_name = self.game.players[Cell.PLAYER_TWO].name
        print(f"Connect Four Game - {x_name} (X) vs {o_name} (O)")
        print()
        print(self.game.render())
        print()

    def play_game(self) -> None:
        """Play one game interactively until it is won or drawn."""
        print("Welcome to Connect Four!")
        player1, player2 = self.prompt_names()
        self.game = ConnectFourGame(player1, player2)

        while not self.game.is_game_over():
            self.show_board()
            current = self.game.get_current_player()
            print(f"{current.name}'s Turn ({current.symbol})")
            self.play_turn(input(f"Enter column number (1-{COLS}): "))

        self.show_board()
        winner = self.game.get_winner()
        if winner is not None:
            print(f"Congratulations {winner.name}, you win!")
        else:
            print("Game Over! It's a Draw!")
        print("\nThanks for playing!")

    def play_turn(self, user_input: str) -> MoveResult:
        """
        Apply one line of user input to the game.

        Returns:
            The engine's MoveResult, or COLUMN_OUT_OF_RANGE for text that is
            not a number
        """
        column = parse_column(user_input)
        if column is None:
            debug.debug(f"Unparseable column input {user_input!r}", "cli")
            print(INVALID_INPUT)
            return MoveResult.COLUMN_OUT_OF_RANGE

        result = self.game.make_move(column)
        if result == MoveResult.COLUMN_OUT_OF_RANGE:
            print(INVALID_INPUT)
        elif result == MoveResult.COLUMN_FULL:
            print(f"Column {column + 1} is full. Choose another column.")
        return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
