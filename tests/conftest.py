import pytest

from connectfour.game.board import ConnectFourBoard
from connectfour.game.observer import Observer


class RecordingObserver(Observer):
    """Remembers what the board looked like at each notification."""

    def __init__(self):
        self.boards = []
        self.snapshots = []

    def update(self, board):
        self.boards.append(board)
        self.snapshots.append((board.get_state(), board.get_moves_made(),
                               board.get_current_player(), board.get_game_status()))

    @property
    def calls(self):
        return len(self.boards)


def play(board, columns):
    """Play columns in order, asserting every one is accepted."""
    for column in columns:
        assert board.make_move(column) is True, f"move in column {column} was rejected"
    return board


@pytest.fixture
def board():
    return ConnectFourBoard()


@pytest.fixture
def recorder():
    return RecordingObserver()
