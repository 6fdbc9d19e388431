"""
utils.py - Constants, enumerations and win scans for Connect Four

This module holds the fixed board geometry, the player and status
enumerations, and the directional four-in-a-row scans that the engine
runs after every placement.
"""

from enum import Enum, auto
from typing import List

import numpy as np

# Game constants
ROWS = 6
COLS = 7
SEQ_LEN = 4  # Number of disks in a row to win
COLUMN_FULL = -1  # Returned by a drop into a full column


class BoardBoundsError(ValueError):
    """Raised when a column or cell index falls outside the board."""


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Red
    TWO = 2    # Yellow

    def other(self) -> "Player":
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def color(self) -> str:
        return {Player.EMPTY: "Empty", Player.ONE: "Red", Player.TWO: "Yellow"}[self]

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        elif self == Player.ONE:
            return "R"
        else:
            return "Y"


class GameStatus(Enum):
    """The two states of a game."""
    IN_PROGRESS = auto()
    GAME_OVER = auto()


def is_valid_position(row: int, col: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def check_column(col: int) -> None:
    """Raise BoardBoundsError unless ``col`` is a valid column index."""
    if isinstance(col, bool) or not isinstance(col, (int, np.integer)):
        raise BoardBoundsError(f"Column must be an integer, got {col!r}")
    if not 0 <= col < COLS:
        raise BoardBoundsError(f"Column {col} out of range 0..{COLS - 1}")


def check_position(row: int, col: int) -> None:
    """Raise BoardBoundsError unless (row, col) lies on the board."""
    check_column(col)
    if isinstance(row, bool) or not isinstance(row, (int, np.integer)) or not 0 <= row < ROWS:
        raise BoardBoundsError(f"Position ({row}, {col}) is outside the board")


def has_vertical_match(grid: np.ndarray, row: int, col: int, player: Player) -> bool:
    """
    Check the four cells from ``row`` downwards in ``col``.

    Only attempted when three rows exist below the placed disk; disks only
    ever land on top of a column, so nothing above ``row`` can belong to the run.
    """
    if row + SEQ_LEN - 1 > ROWS - 1:
        return False

    count = 0
    for r in range(row, row + SEQ_LEN):
        count = 0 if grid[r, col] != player.value else count + 1
        if count == SEQ_LEN:
            return True
    return False


def has_horizontal_match(grid: np.ndarray, row: int, col: int, player: Player) -> bool:
    """Scan up to three cells either side of ``col`` in ``row``."""
    count = 0
    col_start = max(col - (SEQ_LEN - 1), 0)
    col_end = min(col + (SEQ_LEN - 1), COLS - 1)

    for c in range(col_start, col_end + 1):
        count = 0 if grid[row, c] != player.value else count + 1
        if count == SEQ_LEN:
            return True
    return False


def has_diagonal_match(grid: np.ndarray, row: int, col: int, player: Player, direction: int) -> bool:
    """
    Scan a diagonal through (row, col).

    Args:
        direction: 1 for the top-left to bottom-right diagonal,
                   -1 for the bottom-left to top-right diagonal

    Offsets that leave the board are skipped and do not reset the count.
    """
    count = 0
    for i in range(-(SEQ_LEN - 1), SEQ_LEN):
        r = row + i
        c = col + i * direction

        if is_valid_position(r, c):
            count = 0 if grid[r, c] != player.value else count + 1
            if count == SEQ_LEN:
                return True
    return False


def connected_four(grid: np.ndarray, row: int, col: int, player: Player) -> bool:
    """
    Check whether ``player`` has four in a row through the window around (row, col).

    Args:
        grid: The board grid
        row: Row of the most recently placed disk
        col: Column of the most recently placed disk
        player: Player whose disks are matched

    Returns:
        True if any of the four directional scans finds a run of four
    """
    if player == Player.EMPTY:
        return False

    return (has_vertical_match(grid, row, col, player)
            or has_horizontal_match(grid, row, col, player)
            or has_diagonal_match(grid, row, col, player, 1)
            or has_diagonal_match(grid, row, col, player, -1))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art, top row first, with column numbers below.
    """
    result: List[str] = []
    border = "+" + "-" * (COLS * 2 + 1) + "+"
    result.append(border)

    for row in range(ROWS):
        cells = " ".join(str(Player(int(grid[row, col]))) for col in range(COLS))
        result.append(f"| {cells} |")

    result.append(border)
    result.append("  " + " ".join(str(i) for i in range(COLS)))

    return "\n".join(result)
