"""
rules.py - Game engine and match management for Connect Four

ConnectFourGame owns one Board, the two players and the turn order. The
low-level operations (attempt_move, detect_win, is_board_full, advance_turn)
can be driven one by one; make_move runs them in the order the rules require.
The match status is always read from the board, whichever path was used.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.utils import (Cell, GameResult, MatchOutcome, MoveResult, Player,
                                Position)


class ConnectFourGame:
    """
    A single two-player game.

    Player one always moves first. After an accepted move the mover stays
    current until advance_turn is called, so a winning move reports the
    mover as the winner.
    """

    def __init__(self, player_one_name: str = "", player_two_name: str = ""):
        """
        Start a new game on an empty board.

        Args:
            player_one_name: Display name for the first player (X)
            player_two_name: Display name for the second player (O)
        """
        self.players = {
            Cell.PLAYER_ONE: Player(player_one_name, Cell.PLAYER_ONE),
            Cell.PLAYER_TWO: Player(player_two_name, Cell.PLAYER_TWO),
        }
        self.board = Board()
        self.current_mark = Cell.PLAYER_ONE
        debug.debug(f"New game: {player_one_name!r} (X) vs {player_two_name!r} (O)", "game")

    @property
    def move_count(self) -> int:
        """Number of discs placed so far."""
        return self.board.move_count

    # Engine operations

    def attempt_move(self, column: int) -> MoveResult:
        """
        Drop the current player's disc into ``column`` without passing the turn.

        Args:
            column: Column to place a disc (0-indexed)

        Returns:
            ACCEPTED, COLUMN_FULL, COLUMN_OUT_OF_RANGE, or GAME_OVER once the
            game has been won or drawn. Only ACCEPTED changes the state.
        """
        if self.get_result().is_game_over():
            debug.debug(f"Rejected move in column {column}: game is over", "game")
            return MoveResult.GAME_OVER

        return self.board.drop(column, self.current_mark)

    def detect_win(self) -> bool:
        """True if a line of four identical discs exists anywhere."""
        return self.board.has_four_in_a_row()

    def is_board_full(self) -> bool:
        """True once all cells have been filled."""
        return self.board.is_full()

    def advance_turn(self) -> None:
        """Pass the turn to the other player."""
        self.current_mark = self.current_mark.other()
        debug.trace(f"Turn passes to {self.current_mark.name}", "game")

    def get_current_player(self) -> Player:
        """The player whose mark is active."""
        return self.players[self.current_mark]

    def get_current_player_label(self) -> str:
        """Display name of the player whose mark is active."""
        return self.players[self.current_mark].name

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only view of the grid, top row first."""
        return self.board.snapshot()

    def get_state(self) -> np.ndarray:
        """A numpy copy of the grid."""
        return self.board.get_state()

    # Match management

    def make_move(self, column: int) -> MoveResult:
        """
        Play a full turn: place a disc, then settle win, draw or turn change.

        Args:
            column: Column to place a disc (0-indexed)

        Returns:
            The MoveResult of the placement
        """
        result = self.attempt_move(column)
        if not result.accepted:
            return result

        status = self.get_result()
        if status == GameResult.WON:
            winner = self.get_current_player()
            debug.info(f"{winner.symbol} ({winner.name!r}) wins with the disc at "
                       f"{self.board.last_move} after {self.move_count} moves", "game")
        elif status == GameResult.DRAWN:
            debug.info("Game ends in a draw", "game")
        else:
            self.advance_turn()

        return result

    def get_result(self) -> GameResult:
        """
        Get the lifecycle status, read from the board itself.

        Returns:
            WON if a line of four exists, DRAWN if the board is full without
            one, otherwise IN_PROGRESS
        """
        if self.detect_win():
            return GameResult.WON
        if self.is_board_full():
            return GameResult.DRAWN
        return GameResult.IN_PROGRESS

    def is_game_over(self) -> bool:
        """True once the game has been won or drawn."""
        return self.get_result().is_game_over()

    def get_outcome(self) -> Optional[MatchOutcome]:
        """
        Get the match outcome.

        The mover is never passed the turn after a winning disc, so the
        current player is the winner.

        Returns:
            Win for the current player, Draw, or None while in progress
        """
        status = self.get_result()
        if status == GameResult.WON:
            return MatchOutcome.win(self.get_current_player(), self.board.get_winning_line())
        if status == GameResult.DRAWN:
            return MatchOutcome.draw()
        return None

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if there is no winner yet or a draw
        """
        outcome = self.get_outcome()
        if outcome is None:
            return None
        return outcome.winner

    def get_winning_line(self) -> List[Position]:
        """Positions of the first line of four found, or an empty list."""
        return self.board.get_winning_line()

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still take a disc.

        Returns:
            List of column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return self.board.get_valid_moves()

    def render(self) -> str:
        """Render the board as text."""
        return self.board.render()
