"""
board.py - Board representation for Connect Four

This module implements the Board class: the fixed 6x7 grid of cells plus
the per-column fill pointers that track where the next disk lands. The
board is allocated once and reset in place between games.
"""

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, COLUMN_FULL, Player,
                               check_column, check_position, render_board_ascii)


class Board:
    """
    A Connect Four board.

    ``grid[row, col]`` holds a Player value, row 0 being the top row.
    ``next_avail_row[col]`` is the row the next disk in ``col`` lands on,
    counting down from ROWS - 1 to -1 once the column is full.
    """

    def __init__(self):
        """Allocate an empty board."""
        debug.debug("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)
        self.next_avail_row = np.full(COLS, ROWS - 1, dtype=np.int8)

    def reset(self):
        """Empty every cell and rewind every fill pointer, reusing the arrays."""
        debug.debug("Resetting board", "board")
        self.grid.fill(Player.EMPTY.value)
        self.next_avail_row.fill(ROWS - 1)

    def available_row(self, column: int) -> int:
        """
        Get the row the next disk in ``column`` would land on.

        Returns:
            Row index, or COLUMN_FULL (-1) if the column is full
        """
        check_column(column)
        return int(self.next_avail_row[column])

    def is_column_full(self, column: int) -> bool:
        return self.available_row(column) == COLUMN_FULL

    def place(self, column: int, player: Player) -> int:
        """
        Drop a disk for ``player`` into ``column``.

        Args:
            column: Column to drop into (0-indexed)
            player: Owner of the disk

        Returns:
            Row where the disk landed, or COLUMN_FULL if nothing was placed

        Raises:
            ValueError: If ``player`` is Player.EMPTY
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty disk")

        row = self.available_row(column)
        if row == COLUMN_FULL:
            return COLUMN_FULL

        self.grid[row, column] = player.value
        self.next_avail_row[column] -= 1
        debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
        return row

    def cell(self, row: int, col: int) -> Player:
        """Get the state of a single cell."""
        check_position(row, col)
        return Player(int(self.grid[row, col]))

    def disk_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def is_full(self) -> bool:
        return not np.any(self.next_avail_row >= 0)

    def get_state(self) -> np.ndarray:
        """Get a copy of the grid."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
