"""
Tests for the shared helpers and enums.
"""

import numpy as np
import pytest

from connectfour.utils import (Direction, GameStatus, Player, check_win_at_position,
                               get_column_height, get_line_through, is_valid_position,
                               render_board_ascii)


def empty_grid(rows=6, cols=7):
    return np.zeros((rows, cols), dtype=np.int8)


class TestEnums:

    def test_other(self):
        assert Player.ONE.other() == Player.TWO
        assert Player.TWO.other() == Player.ONE
        with pytest.raises(ValueError):
            Player.EMPTY.other()

    def test_status(self):
        assert GameStatus.IN_PROGRESS.is_game_over() is False
        assert all(s.is_game_over() for s in GameStatus if s != GameStatus.IN_PROGRESS)
        assert GameStatus.win_for(Player.ONE) == GameStatus.PLAYER_ONE_WINS
        assert GameStatus.win_for(Player.TWO) == GameStatus.PLAYER_TWO_WINS
        assert GameStatus.PLAYER_TWO_WINS.winner() == Player.TWO
        assert GameStatus.DRAW.winner() == Player.EMPTY
        with pytest.raises(ValueError):
            GameStatus.win_for(Player.EMPTY)

    def test_labels(self):
        assert str(Player.ONE) == "Player One"
        assert str(GameStatus.DRAW) == "Draw"
        assert Player.TWO.symbol == "O"


class TestGridHelpers:

    def test_is_valid_position(self):
        grid = empty_grid()
        assert is_valid_position(grid, 0, 0)
        assert is_valid_position(grid, 5, 6)
        assert not is_valid_position(grid, 6, 0)
        assert not is_valid_position(grid, 0, -1)

    def test_column_height(self):
        grid = empty_grid()
        grid[5, 2] = grid[4, 2] = Player.ONE.value
        assert get_column_height(grid, 2) == 2
        assert get_column_height(grid, 3) == 0

    def test_line_through_empty_cell(self):
        assert get_line_through(empty_grid(), 3, 3, Direction.HORIZONTAL) == []

    def test_line_through_stops_at_other_player(self):
        grid = empty_grid()
        grid[5, 0:3] = Player.ONE.value
        grid[5, 3] = Player.TWO.value
        grid[5, 4] = Player.ONE.value
        assert get_line_through(grid, 5, 1, Direction.HORIZONTAL) == [(5, 0), (5, 1), (5, 2)]

    @pytest.mark.parametrize("cells", [
        [(5, 0), (5, 1), (5, 2), (5, 3)],
        [(5, 6), (4, 6), (3, 6), (2, 6)],
        [(5, 0), (4, 1), (3, 2), (2, 3)],
        [(0, 0), (1, 1), (2, 2), (3, 3)],
    ])
    def test_win_through_any_cell_of_the_run(self, cells):
        grid = empty_grid()
        for r, c in cells:
            grid[r, c] = Player.TWO.value
        for r, c in cells:
            assert sorted(check_win_at_position(grid, r, c)) == sorted(cells)

    def test_broken_run_is_not_a_win(self):
        grid = empty_grid()
        for c in (0, 1, 3, 4):
            grid[5, c] = Player.ONE.value
        assert check_win_at_position(grid, 5, 1) == []

    def test_longer_run_counts(self):
        grid = empty_grid()
        grid[5, 0:5] = Player.ONE.value
        assert len(check_win_at_position(grid, 5, 2)) == 5


class TestRenderAscii:

    def test_render(self):
        grid = empty_grid(2, 3)
        grid[1, 0] = Player.ONE.value
        grid[1, 1] = Player.TWO.value
        assert render_board_ascii(grid) == "\n".join([
            "+-------+",
            "| . . . |",
            "| X O . |",
            "+-------+",
            "  0 1 2",
        ])
