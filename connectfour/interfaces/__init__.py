"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the console front end. The Gymnasium environment is
imported separately from connectfour.game.env.
"""

__all__ = []
