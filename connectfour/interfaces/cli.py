"""
cli.py - Command-line front end for Connect Four

ConsoleView is a text observer of the board. SimpleCLI drives a session
from the keyboard (two players sharing the terminal) or from a scripted list
of columns.
"""

import argparse
import sys
import time
from typing import List, Optional, Sequence

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import ConnectFourBoard
from connectfour.game.observer import Observer
from connectfour.game.session import ConnectFourGame
from connectfour.utils import ROWS, COLS, CONNECT_N, Player

QUIT = "q"
RESTART = "r"


class ConsoleView(Observer):
    """
    Prints the board and a status bar after every move.

    The view keeps its own copy of the cells it has shown and refreshes every
    cell from the board on each update, so it stays correct whoever made the
    move.
    """

    def __init__(self, board: Optional[ConnectFourBoard] = None):
        self.cells: List[List[Player]] = []
        self.updates = 0
        if board is not None:
            self.refresh(board)

    def update(self, board: ConnectFourBoard) -> None:
        self.updates += 1
        self.refresh(board)
        print(self.render(board))

    def refresh(self, board: ConnectFourBoard) -> None:
        self.cells = [[board.get_contents(row, col) for col in range(board.cols)]
                      for row in range(board.rows)]

    @staticmethod
    def status_bar(board: ConnectFourBoard) -> str:
        return (f"{board.get_moves_made()} moves made   "
                f"Current player: {board.get_current_player()}   "
                f"Status: {board.get_game_status()}")

    def render(self, board: ConnectFourBoard) -> str:
        return f"{board.render()}\n{self.status_bar(board)}"


class SimpleCLI:
    """Command-line interface for playing Connect Four."""

    def __init__(self, rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N):
        self.game = ConnectFourGame(rows, cols, connect_n)
        self.view = ConsoleView(self.game.board)
        self.game.add_observer(self.view)

    def play_game(self) -> None:
        """Play a game with two humans taking turns at the keyboard."""
        cols = self.game.cols
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{cols - 1}) to drop a piece.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        print(self.view.render(self.game.board))

        while not self.game.is_game_over():
            command = self.get_human_move()

            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return
            if command == RESTART:
                self.game.new_game()
                print("Game restarted.")
                print(self.view.render(self.game.board))
                continue

            if not self.game.try_move(command):
                print(f"Column {command} is full. Pick another one.")

        self.announce_result()

    def get_human_move(self):
        """
        Read one command from the player to move.

        Returns:
            A column index, QUIT, RESTART, or None if the input was not usable
        """
        player = self.game.get_current_player()
        try:
            user_input = input(f"{player} ({player.symbol}) move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

        if not 0 <= move < self.game.cols:
            print(f"Column must be between 0 and {self.game.cols - 1}.")
            return None
        return move

    def replay(self, columns: Sequence[int], delay: float = 0.0) -> int:
        """
        Play a scripted list of columns, one after another.

        Returns:
            The number of moves that were played
        """
        played = 0
        for column in columns:
            if self.game.is_game_over():
                print(f"Game already over, ignoring remaining moves from column {column}.")
                break
            if not self.game.try_move(column):
                print(f"Illegal move in column {column}, skipping.")
                continue
            played += 1
            if delay:
                time.sleep(delay)

        self.announce_result()
        return played

    def announce_result(self) -> None:
        if not self.game.is_game_over():
            print("Game not finished.")
            return
        winner = self.game.get_winner()
        if winner is None:
            print("Game over: it's a draw!")
        else:
            print(f"Game over: {winner} wins!")


def parse_moves(moves: str) -> List[int]:
    """Parse a comma-separated list of columns such as "3,0,3"."""
    try:
        return [int(part) for part in moves.split(',') if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid move list {moves!r}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Connect Four',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Two players at one keyboard
    python run.py play

    # Play out a scripted game
    python run.py replay --moves 3,0,3,0,3,0,3

    # Bigger board, connect five, with debug output
    python run.py play --rows 8 --cols 9 --connect 5 --debug
    """
    )
    parser.add_argument('command', choices=['play', 'replay'],
                        help='play (interactive game) or replay (scripted moves)')
    parser.add_argument('--rows', type=int, default=ROWS, help=f'Board rows (default: {ROWS})')
    parser.add_argument('--cols', type=int, default=COLS, help=f'Board columns (default: {COLS})')
    parser.add_argument('--connect', type=int, default=CONNECT_N,
                        help=f'Pieces in a row needed to win (default: {CONNECT_N})')
    parser.add_argument('--moves', type=parse_moves, default=[],
                        help='Comma-separated columns for the replay command')
    parser.add_argument('--delay', type=float, default=0.0,
                        help='Seconds to pause between replayed moves')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
                        choices=[level.name.lower() for level in DebugLevel],
                        default='warning',
                        help='Set debug level: none, error, warning, info, debug, trace')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write log messages to this file')
    return parser


def configure_debug(args) -> None:
    """Configure the debug manager from parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_debug(args)

    try:
        cli = SimpleCLI(args.rows, args.cols, args.connect)
    except ValueError as e:
        parser.error(str(e))

    if args.command == 'play':
        cli.play_game()
    elif args.command == 'replay':
        if not args.moves:
            parser.error("replay needs --moves")
        cli.replay(args.moves, args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())
