"""
utils.py - Constants, enumerations and helper functions for Connect Four

This module holds the definitions shared by the board, the game engine and
the text interface: board dimensions, cell and result enumerations, the
player/outcome value types, line scanning and ASCII rendering.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win
MAX_MOVES = ROWS * COLS

Position = Tuple[int, int]


class Cell(Enum):
    """State of a single board cell; also used as a player's mark."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    def other(self) -> 'Cell':
        """Get the opposing mark."""
        if self == Cell.PLAYER_ONE:
            return Cell.PLAYER_TWO
        elif self == Cell.PLAYER_TWO:
            return Cell.PLAYER_ONE
        return Cell.EMPTY

    def __str__(self):
        if self == Cell.PLAYER_ONE:
            return "X"
        elif self == Cell.PLAYER_TWO:
            return "O"
        return "."


class MoveResult(Enum):
    """Outcome of attempting to drop a disc."""
    ACCEPTED = auto()
    COLUMN_FULL = auto()
    COLUMN_OUT_OF_RANGE = auto()
    GAME_OVER = auto()  # game already won or drawn

    @property
    def accepted(self) -> bool:
        return self == MoveResult.ACCEPTED


class GameResult(Enum):
    """Lifecycle status of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


@dataclass(frozen=True)
class Player:
    """A participant: display name plus the mark their discs carry."""
    name: str
    mark: Cell

    @property
    def symbol(self) -> str:
        return str(self.mark)


@dataclass(frozen=True)
class MatchOutcome:
    """Final result of a match: a win for ``winner`` or, with no winner, a draw."""
    winner: Optional[Player] = None
    winning_line: Tuple[Position, ...] = field(default_factory=tuple)

    @classmethod
    def win(cls, player: Player, line: List[Position]) -> 'MatchOutcome':
        return cls(winner=player, winning_line=tuple(line))

    @classmethod
    def draw(cls) -> 'MatchOutcome':
        return cls()

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self):
        if self.winner is None:
            return "Draw"
        return f"Win({self.winner.name})"


# Scan directions (row, col). Only one sense of each line is needed because
# every cell is used as a starting point.
SCAN_DIRECTIONS = (
    (0, 1),    # right
    (1, 0),    # down
    (1, 1),    # down-right
    (1, -1),   # down-left
)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def line_from(grid: np.ndarray, row: int, col: int, dr: int, dc: int) -> List[Position]:
    """
    Collect CONNECT_N same-mark positions starting at (row, col).

    Args:
        grid: The game board
        row: Starting row
        col: Starting column
        dr: Row step
        dc: Column step

    Returns:
        The positions of the line, or an empty list if the line is broken
        or runs off the board
    """
    mark = grid[row, col]
    if mark == Cell.EMPTY.value:
        return []

    positions = []
    for i in range(CONNECT_N):
        r, c = row + i * dr, col + i * dc
        if not is_valid_position(r, c) or grid[r, c] != mark:
            return []
        positions.append((r, c))
    return positions


def find_winning_line(grid: np.ndarray) -> List[Position]:
    """
    Scan the whole board for a line of CONNECT_N identical discs.

    Cells are visited top-left to bottom-right and each direction of
    SCAN_DIRECTIONS is tried in order; the first line found is returned.

    Args:
        grid: The game board

    Returns:
        Positions of the first winning line, or an empty list if none exists
    """
    for row in range(ROWS):
        for col in range(COLS):
            if grid[row, col] == Cell.EMPTY.value:
                continue
            for dr, dc in SCAN_DIRECTIONS:
                line = line_from(grid, row, col, dr, dc)
                if line:
                    return line
    return []


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as text, top row first, with 1-based column numbers.

    Args:
        grid: The game board

    Returns:
        ASCII representation of the board
    """
    lines = []
    for row in range(ROWS):
        lines.append(" ".join(str(Cell(int(v))) for v in grid[row]))
    lines.append(" ".join(str(col + 1) for col in range(COLS)))
    return "\n".join(lines)
