"""
utils.py - Constants, enumerations and helpers shared by the Connect Four model

The board dimensions here are defaults: a ConnectFourBoard may be built with
other sizes, so the helpers below read the size from the grid they are given.
"""

from enum import Enum, auto
from typing import Dict, List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

Coord = Tuple[int, int]  # (row, col), row 0 is the top of the board


class Player(Enum):
    """Cell occupant and player to move."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        if self == Player.TWO:
            return Player.ONE
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        return {Player.EMPTY: ".", Player.ONE: "X", Player.TWO: "O"}[self]

    def __str__(self) -> str:
        return {Player.EMPTY: "empty", Player.ONE: "Player One", Player.TWO: "Player Two"}[self]


class GameStatus(Enum):
    """Derived outcome of a game."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WINS = auto()
    PLAYER_TWO_WINS = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS

    def winner(self) -> Player:
        """The winning player, or Player.EMPTY for a draw or unfinished game."""
        if self == GameStatus.PLAYER_ONE_WINS:
            return Player.ONE
        if self == GameStatus.PLAYER_TWO_WINS:
            return Player.TWO
        return Player.EMPTY

    @staticmethod
    def win_for(player: Player) -> 'GameStatus':
        if player == Player.ONE:
            return GameStatus.PLAYER_ONE_WINS
        if player == Player.TWO:
            return GameStatus.PLAYER_TWO_WINS
        raise ValueError("EMPTY cannot win")

    def __str__(self) -> str:
        return {
            GameStatus.IN_PROGRESS: "In progress",
            GameStatus.PLAYER_ONE_WINS: "Player One wins",
            GameStatus.PLAYER_TWO_WINS: "Player Two wins",
            GameStatus.DRAW: "Draw",
        }[self]


class Direction(Enum):
    """Lines a winning run can follow."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """Check if (row, col) lies on the grid."""
    rows, cols = grid.shape
    return 0 <= row < rows and 0 <= col < cols


def get_column_height(grid: np.ndarray, col: int) -> int:
    """Number of pieces stacked in a column."""
    return int(np.count_nonzero(grid[:, col] != Player.EMPTY.value))


def get_line_through(grid: np.ndarray, row: int, col: int, direction: Direction) -> List[Coord]:
    """
    Collect the run of same-owner cells through (row, col) along a direction.

    Args:
        grid: The game grid
        row: Row of the anchor cell
        col: Column of the anchor cell
        direction: Line to follow, in both senses

    Returns:
        Coordinates of the run ordered along the direction vector, or an
        empty list if the anchor cell is empty
    """
    owner = grid[row, col]
    if owner == Player.EMPTY.value:
        return []

    dr, dc = DIRECTION_VECTORS[direction]

    before = []
    r, c = row - dr, col - dc
    while is_valid_position(grid, r, c) and grid[r, c] == owner:
        before.append((r, c))
        r -= dr
        c -= dc

    after = []
    r, c = row + dr, col + dc
    while is_valid_position(grid, r, c) and grid[r, c] == owner:
        after.append((r, c))
        r += dr
        c += dc

    return before[::-1] + [(row, col)] + after


def check_win_at_position(grid: np.ndarray, row: int, col: int,
                          connect_n: int = CONNECT_N) -> List[Coord]:
    """
    Find a winning run anchored through the piece at (row, col).

    Returns:
        The first run of at least connect_n cells found, checking horizontal,
        vertical and both diagonals in that order; empty if there is none
    """
    for direction in DIRECTION_VECTORS:
        line = get_line_through(grid, row, col, direction)
        if len(line) >= connect_n:
            return line
    return []


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as ASCII art with column numbers underneath.

    Args:
        grid: The game grid

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    border = "+" + "-" * (cols * 2 + 1) + "+"

    lines = [border]
    for row in range(rows):
        cells = " ".join(Player(int(value)).symbol for value in grid[row])
        lines.append(f"| {cells} |")
    lines.append(border)
    lines.append("  " + " ".join(str(col % 10) for col in range(cols)))

    return "\n".join(lines)
