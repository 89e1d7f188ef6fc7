"""
board.py - Board representation and core mechanics for Connect Four

This module implements the Board class, which owns the 6x7 grid, drops discs
with gravity, and answers the win and fullness queries the game engine needs.
Turn order is not tracked here; see rules.ConnectFourGame.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.utils import (ROWS, COLS, MAX_MOVES, Cell, MoveResult, Position,
                                find_winning_line, render_board_ascii)


class Board:
    """
    A Connect Four grid. Row 0 is the top row, row ROWS-1 the bottom.

    Cells hold Cell values as integers in a numpy array whose shape never
    changes after creation.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.trace("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=int)
        self.move_count = 0
        self.last_move: Optional[Position] = None

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a disc dropped into ``column`` would settle in.

        Args:
            column: The column to drop into (0-indexed, must be in range)

        Returns:
            The lowest empty row, or None if the column is full
        """
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == Cell.EMPTY.value:
                return row
        return None

    def drop(self, column: int, mark: Cell) -> MoveResult:
        """
        Drop a disc carrying ``mark`` into ``column``.

        Args:
            column: The column to place a disc (0-indexed)
            mark: The mark of the player moving

        Returns:
            MoveResult.ACCEPTED if the disc was placed, otherwise the reason
            it was refused (the board is then unchanged)
        """
        if not 0 <= column < COLS:
            debug.debug(f"Rejected move: column {column} out of range", "board")
            return MoveResult.COLUMN_OUT_OF_RANGE

        row = self.landing_row(column)
        if row is None:
            debug.debug(f"Rejected move: column {column} is full", "board")
            return MoveResult.COLUMN_FULL

        self.grid[row, column] = mark.value
        self.move_count += 1
        self.last_move = (row, column)
        debug.trace(f"Placed {mark.name} at ({row}, {column}), move {self.move_count}", "board")
        return MoveResult.ACCEPTED

    def has_four_in_a_row(self) -> bool:
        """Check whether any line of four identical discs exists."""
        debug.start_timer("win_check")
        found = bool(find_winning_line(self.grid))
        debug.end_timer("win_check", "board")
        return found

    def get_winning_line(self) -> List[Position]:
        """
        Get the positions of a winning line.

        Returns:
            List of (row, col) positions, or an empty list if there is no win
        """
        return find_winning_line(self.grid)

    def is_full(self) -> bool:
        """Check whether every cell has been filled."""
        return self.move_count == MAX_MOVES

    def get_valid_moves(self) -> List[int]:
        """Columns that can still take a disc."""
        return [col for col in range(COLS) if self.grid[0, col] == Cell.EMPTY.value]

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """
        Read-only view of the grid, row-major with the top row first.
        """
        return tuple(tuple(Cell(int(v)) for v in row) for row in self.grid)

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the 2D grid of Cell values
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as text, top row first."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
