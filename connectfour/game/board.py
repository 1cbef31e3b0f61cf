"""
board.py - The authoritative Connect Four board model

This module implements ConnectFourBoard, which stores the grid, validates and
applies moves, derives the game status after each move and notifies
registered observers. A board lives for exactly one game; start a new game by
building a new board.
"""

import threading
from typing import List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.game.observer import Observer, ObserverRegistry
from connectfour.utils import (ROWS, COLS, CONNECT_N, Coord, Player, GameStatus,
                               check_win_at_position, get_column_height, render_board_ascii)


class ConnectFourBoard:
    """
    A Connect Four game board.

    Pieces drop to the lowest empty row of a column. Player ONE moves first,
    players alternate after every accepted move, and the game ends on the
    first run of connect_n or when the board is full.
    """

    ROWS = ROWS
    COLS = COLS

    def __init__(self, rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N):
        """
        Create an empty board.

        Args:
            rows: Number of rows
            cols: Number of columns
            connect_n: Length of a winning run

        Raises:
            ValueError: If a dimension is not positive or connect_n cannot
                fit on the board
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {rows}x{cols}")
        if connect_n < 1:
            raise ValueError(f"connect_n must be positive, got {connect_n}")
        if connect_n > max(rows, cols):
            raise ValueError(f"connect_n {connect_n} does not fit on a {rows}x{cols} board")

        self.rows = rows
        self.cols = cols
        self.connect_n = connect_n

        self.grid = np.full((rows, cols), Player.EMPTY.value, dtype=np.int8)
        self.move_history: List[int] = []
        self.current_player = Player.ONE
        self.game_status = GameStatus.IN_PROGRESS
        self.last_move: Optional[Coord] = None
        self.winning_line: List[Coord] = []

        self._observers = ObserverRegistry()
        self._lock = threading.RLock()
        self._notifying = False

        debug.debug(f"New {rows}x{cols} board, connect {connect_n}", "board")

    def is_valid_move(self, column) -> bool:
        """
        Check if a piece can be dropped in a column right now.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            True if the game is in progress, the column exists and it has room
        """
        if self.game_status.is_game_over():
            debug.debug(f"Invalid move: game is over ({self.game_status.name})", "board")
            return False

        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            debug.debug(f"Invalid move: column {column!r} is not an integer", "board")
            return False

        if not (0 <= column < self.cols):
            debug.debug(f"Invalid move: column {column} out of bounds", "board")
            return False

        if self.grid[0, column] != Player.EMPTY.value:
            debug.debug(f"Invalid move: column {column} is full", "board")
            return False

        return True

    def get_valid_moves(self) -> List[int]:
        """Columns that currently accept a piece."""
        if self.game_status.is_game_over():
            return []
        return [col for col in range(self.cols) if self.grid[0, col] == Player.EMPTY.value]

    def make_move(self, column) -> bool:
        """
        Drop the current player's piece into a column.

        Validation, placement, status update and observer notification happen
        as one step; concurrent callers wait for the move in flight.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            True if the move was applied, False if it was rejected (the board
            is left untouched and no observer is notified)

        Raises:
            RuntimeError: If called by an observer while it is being notified
        """
        with self._lock:
            if self._notifying:
                raise RuntimeError("make_move() called from inside an observer update")

            if not self.is_valid_move(column):
                debug.info(f"Rejected move in column {column!r} for {self.current_player}", "board")
                return False

            column = int(column)
            mover = self.current_player
            row = self._drop(column, mover)
            self._update_status(row, column, mover)

            self._notifying = True
            try:
                self._observers.notify(self)
            finally:
                self._notifying = False

        return True

    def _drop(self, column: int, player: Player) -> int:
        """Place a piece in the lowest empty row of a column and return the row."""
        row = self.rows - 1 - get_column_height(self.grid, column)
        self.grid[row, column] = player.value
        self.move_history.append(column)
        self.last_move = (row, column)
        debug.trace(f"{player} placed at ({row}, {column})", "board")
        return row

    def _update_status(self, row: int, column: int, mover: Player) -> None:
        debug.start_timer("win_check")
        line = check_win_at_position(self.grid, row, column, self.connect_n)
        debug.end_timer("win_check", "board")

        if line:
            self.winning_line = line
            self.game_status = GameStatus.win_for(mover)
            debug.info(f"{mover} wins after move at {self.last_move}", "board")
        elif self.get_moves_made() == self.rows * self.cols:
            self.game_status = GameStatus.DRAW
            debug.info("Game ends in a draw", "board")
        else:
            self.current_player = mover.other()
            debug.debug(f"Switching to {self.current_player}", "board")

    def get_contents(self, row: int, column: int) -> Player:
        """
        Get the occupant of a cell.

        Raises:
            IndexError: If (row, column) is off the board
        """
        for index in (row, column):
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                raise IndexError(f"Cell index {index!r} is not an integer")
        if not (0 <= row < self.rows and 0 <= column < self.cols):
            raise IndexError(f"Cell ({row}, {column}) is outside the {self.rows}x{self.cols} board")
        return Player(int(self.grid[row, column]))

    def get_current_player(self) -> Player:
        """The player to move; frozen at the last mover once the game is over."""
        return self.current_player

    def get_moves_made(self) -> int:
        return len(self.move_history)

    def get_game_status(self) -> GameStatus:
        return self.game_status

    def get_last_move(self) -> Optional[Coord]:
        return self.last_move

    def get_move_history(self) -> List[int]:
        """Columns played so far, in order."""
        return list(self.move_history)

    def get_winning_line(self) -> List[Coord]:
        """Cells of the winning run through the last move, or empty if no one has won."""
        return list(self.winning_line)

    def get_state(self) -> np.ndarray:
        """Copy of the grid as a numpy array of Player values."""
        return self.grid.copy()

    def add_observer(self, observer: Observer) -> None:
        """Register an observer to be told about every future accepted move."""
        self._observers.add(observer)

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"ConnectFourBoard(rows={self.rows}, cols={self.cols}, "
                f"moves={self.get_moves_made()}, status={self.game_status.name})")
