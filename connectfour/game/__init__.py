"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board model, the observer interface used to watch
it, the session that owns a board, and the Gymnasium environment.
"""

from connectfour.game.board import ConnectFourBoard
from connectfour.game.observer import Observer, CallbackObserver
from connectfour.game.session import ConnectFourGame

__all__ = ['ConnectFourBoard', 'Observer', 'CallbackObserver', 'ConnectFourGame']
