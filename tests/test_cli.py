"""
Tests for the console view and command-line driver.
"""

import argparse

import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import ConnectFourBoard
from connectfour.interfaces import cli
from connectfour.interfaces.cli import ConsoleView, SimpleCLI, parse_moves
from connectfour.utils import GameStatus, Player


@pytest.fixture(autouse=True)
def restore_debug_level():
    level = debug.level
    yield
    debug.configure(level=level)


def feed_input(monkeypatch, answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


class TestConsoleView:

    def test_refreshes_every_cell(self):
        board = ConnectFourBoard()
        view = ConsoleView(board)
        board.add_observer(view)

        board.make_move(0)
        board.make_move(6)

        assert view.updates == 2
        assert view.cells[5][0] == Player.ONE
        assert view.cells[5][6] == Player.TWO
        assert sum(cell != Player.EMPTY for row in view.cells for cell in row) == 2

    def test_status_bar(self):
        board = ConnectFourBoard()
        board.make_move(3)
        assert ConsoleView.status_bar(board) == \
            "1 moves made   Current player: Player Two   Status: In progress"

    def test_update_prints_board(self, capsys):
        board = ConnectFourBoard()
        board.add_observer(ConsoleView())
        board.make_move(1)
        out = capsys.readouterr().out
        assert "| . X . . . . . |" in out
        assert "Status: In progress" in out


class TestSimpleCLI:

    def test_play_until_win(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["3", "0", "3", "0", "3", "0", "3"])
        game_cli = SimpleCLI()
        game_cli.play_game()
        assert game_cli.game.get_status() == GameStatus.PLAYER_ONE_WINS
        assert "Game over: Player One wins!" in capsys.readouterr().out

    def test_bad_input_is_reprompted(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["abc", "9", "2", "q"])
        game_cli = SimpleCLI()
        game_cli.play_game()
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Column must be between 0 and 6." in out
        assert "Quitting game." in out
        assert game_cli.game.board.get_moves_made() == 1

    def test_full_column_is_reported(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["0", "0", "0"])
        game_cli = SimpleCLI(rows=2, cols=3, connect_n=3)
        game_cli.play_game()
        assert "Column 0 is full" in capsys.readouterr().out
        assert game_cli.game.board.get_moves_made() == 2

    def test_restart_starts_new_board(self, monkeypatch):
        feed_input(monkeypatch, ["4", "r", "q"])
        game_cli = SimpleCLI()
        first_board = game_cli.game.board
        game_cli.play_game()
        assert game_cli.game.board is not first_board
        assert game_cli.game.board.get_moves_made() == 0
        assert game_cli.view.updates == 1

    def test_end_of_input_quits(self, monkeypatch, capsys):
        feed_input(monkeypatch, [])
        SimpleCLI().play_game()
        assert "Quitting game." in capsys.readouterr().out

    def test_replay_skips_illegal_moves(self, capsys):
        game_cli = SimpleCLI()
        assert game_cli.replay([3, 0, 9, 3, 0, 3, 0, 3, 5]) == 7
        out = capsys.readouterr().out
        assert "Illegal move in column 9" in out
        assert "Game already over" in out
        assert game_cli.game.get_winner() == Player.ONE

    def test_replay_unfinished(self, capsys):
        SimpleCLI().replay([1, 2])
        assert "Game not finished." in capsys.readouterr().out


class TestMain:

    def test_parse_moves(self):
        assert parse_moves("3,0, 3,") == [3, 0, 3]

    def test_parse_moves_rejects_garbage(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_moves("3,x")

    def test_replay_command(self, capsys):
        assert cli.main(["replay", "--moves", "3,0,3,0,3,0,3"]) == 0
        assert "Player One wins" in capsys.readouterr().out

    def test_replay_requires_moves(self):
        with pytest.raises(SystemExit):
            cli.main(["replay"])

    def test_bad_board_size(self):
        with pytest.raises(SystemExit):
            cli.main(["replay", "--moves", "0", "--rows", "0"])

    def test_debug_flag(self):
        cli.main(["replay", "--moves", "1", "--debug"])
        assert debug.level == DebugLevel.DEBUG

    def test_debug_level_option(self):
        cli.main(["replay", "--moves", "1", "--debug_level", "error"])
        assert debug.level == DebugLevel.ERROR
