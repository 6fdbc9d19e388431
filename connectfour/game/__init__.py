"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation and the engine that
sequences turns and detects wins.
"""

from connectfour.game.board import Board
from connectfour.game.engine import GameEngine

__all__ = ['Board', 'GameEngine']
