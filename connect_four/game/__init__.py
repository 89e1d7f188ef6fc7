"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation and the game engine
that manages players, turn order and the match outcome.
"""

from connect_four.game.board import Board
from connect_four.game.rules import ConnectFourGame

__all__ = ['Board', 'ConnectFourGame']
