import pytest

from connect_four.debug import debug, DebugLevel
from connect_four.game.rules import ConnectFourGame
from connect_four.utils import MoveResult

# Interleaved fill of all 42 cells that never forms a line of four.
# Columns are filled in pairs (a, b) with the pattern a, b, b, a so that
# every column alternates marks and neighbouring column pairs are offset.
DRAW_SEQUENCE = [0, 2, 2, 0] * 3 + [1, 3, 3, 1] * 3 + [4, 6, 6, 4] * 3 + [5] * 6


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def game():
    return ConnectFourGame("Alice", "Bob")


@pytest.fixture
def draw_sequence():
    return list(DRAW_SEQUENCE)


@pytest.fixture
def play():
    """Play columns through the full turn cycle, asserting each is accepted."""
    def _play(game, columns):
        for column in columns:
            assert game.make_move(column) == MoveResult.ACCEPTED
        return game
    return _play
