"""
connectfour - Connect Four game model

This package provides the authoritative Connect Four board (move validation,
gravity drop, turn alternation, win and draw detection) with synchronous
observer notification, plus a game session, a Gymnasium environment and a
console front end built on top of it.
"""

__version__ = '0.1.0'
