"""
session.py - Game session that owns the current Connect Four board

A board is good for one game only. ConnectFourGame creates the board, keeps
the observers that should follow the session from game to game and replaces
the board with a fresh one when a new game starts.
"""

from typing import List, Optional

from connectfour.debug import debug
from connectfour.game.board import ConnectFourBoard
from connectfour.game.observer import Observer
from connectfour.utils import ROWS, COLS, CONNECT_N, GameStatus, Player


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    This class is the owner of the board; views register with the session so
    they are re-attached to every new board it creates.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N):
        self.rows = rows
        self.cols = cols
        self.connect_n = connect_n
        self.games_started = 0
        self._observers: List[Observer] = []
        self.board = self._create_board()

    def _create_board(self) -> ConnectFourBoard:
        board = ConnectFourBoard(self.rows, self.cols, self.connect_n)
        for observer in self._observers:
            board.add_observer(observer)
        self.games_started += 1
        debug.debug(f"Started game {self.games_started} with {len(self._observers)} observer(s)",
                    "session")
        return board

    def add_observer(self, observer: Observer) -> None:
        """Follow the current board and every board created after it."""
        self._observers.append(observer)
        self.board.add_observer(observer)

    def new_game(self) -> ConnectFourBoard:
        """Discard the current board and start over on a new one."""
        debug.info("Starting a new game", "session")
        self.board = self._create_board()
        return self.board

    def try_move(self, column) -> bool:
        """
        Validate and play a column on the current board.

        Returns:
            True if the move was played, False if it was not legal
        """
        if not self.board.is_valid_move(column):
            debug.debug(f"Session ignoring illegal column {column!r}", "session")
            return False
        return self.board.make_move(column)

    def play_moves(self, columns) -> int:
        """
        Play a sequence of columns, stopping at the first illegal one.

        Returns:
            The number of moves played
        """
        played = 0
        for column in columns:
            if not self.try_move(column):
                break
            played += 1
        return played

    def is_game_over(self) -> bool:
        return self.board.get_game_status().is_game_over()

    def get_status(self) -> GameStatus:
        return self.board.get_game_status()

    def get_winner(self) -> Optional[Player]:
        """The winning player, or None if the game is unfinished or drawn."""
        winner = self.board.get_game_status().winner()
        return None if winner == Player.EMPTY else winner

    def get_current_player(self) -> Player:
        return self.board.get_current_player()

    def get_valid_moves(self) -> List[int]:
        return self.board.get_valid_moves()

    def render(self) -> str:
        return self.board.render()
