"""
connectfour - Two-player Connect Four

This package provides the Connect Four game engine (board state, turn
order, win detection) and a terminal front end that drives it.
"""

# Version number
__version__ = '0.1.0'
