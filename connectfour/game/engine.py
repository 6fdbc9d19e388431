"""
engine.py - Turn sequencing and win detection for Connect Four

GameEngine is the object a front end holds on to: it owns the board,
alternates the two players, rejects drops into full columns and ends the
game when a disk completes four in a row.

A board that fills up without a winner leaves the game in progress. Draws
are not detected; callers that care can check ``engine.board.is_full()``.
"""

from typing import Optional

import numpy as np

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (ROWS, COLS, COLUMN_FULL, Player, GameStatus,
                               check_column, check_position, connected_four)


class GameEngine:
    """
    Two-player Connect Four engine on a fixed 6x7 board.

    The player about to drop a disk is always ``next_player()``. After a
    successful drop the mover becomes ``current_player()``, which is also the
    player credited with a win.
    """

    ROWS = ROWS
    COLS = COLS

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize the engine and start a game.

        Args:
            rng: Random source used to pick the starting player. Anything with
                a numpy-style ``integers(low, high)`` method works.
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.board: Optional[Board] = None
        self._current_player = Player.ONE
        self._next_player = Player.TWO
        self._status = GameStatus.IN_PROGRESS
        self._winner: Optional[Player] = None
        self.new_game()

    def new_game(self) -> None:
        """Allocate the board and start the first game."""
        debug.debug("Starting new game", "engine")
        self.board = Board()
        self._start()

    def restart(self) -> None:
        """Clear the board in place and start over with a random first player."""
        self.board.reset()
        self._start()

    def _start(self) -> None:
        starter = Player.ONE if int(self.rng.integers(0, 2)) == 0 else Player.TWO
        self._next_player = starter
        self._current_player = starter.other()
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        debug.info(f"New game, {starter.color} moves first", "engine")

    def _switch_player(self) -> None:
        self._current_player = self._next_player
        self._next_player = self._current_player.other()

    def drop_disk(self, column: int) -> int:
        """
        Drop the next player's disk into ``column``.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            Row where the disk landed, or COLUMN_FULL (-1) if the column was
            full, in which case nothing changes and the turn does not pass

        Raises:
            BoardBoundsError: If ``column`` is not a valid column index
        """
        check_column(column)

        if self._status == GameStatus.GAME_OVER:
            debug.warning(f"Disk dropped in column {column} after the game ended", "engine")

        if self.board.is_column_full(column):
            debug.trace(f"Column {column} is full", "engine")
            return COLUMN_FULL

        self._switch_player()
        row = self.board.place(column, self._current_player)
        debug.debug(f"{self._current_player.color} dropped into column {column}, landed on row {row}", "engine")

        debug.start_timer("win_check")
        won = self.connected_four(row, column)
        debug.end_timer("win_check", "engine")

        if won and self._winner is None:
            self._status = GameStatus.GAME_OVER
            self._winner = self._current_player
            debug.info(f"{self._current_player.color} wins with a disk at ({row}, {column})", "engine")

        return row

    def connected_four(self, row: int, col: int, player: Optional[Player] = None) -> bool:
        """
        Check for four in a row around (row, col).

        Args:
            row: Row of the disk to scan from
            col: Column of the disk to scan from
            player: Player to match, defaults to the current player

        Returns:
            True if a vertical, horizontal or diagonal run of four is found
        """
        check_position(row, col)
        if player is None:
            player = self._current_player
        return connected_four(self.board.grid, row, col, player)

    def is_in_progress(self) -> bool:
        return self._status == GameStatus.IN_PROGRESS

    def status(self) -> GameStatus:
        return self._status

    def current_player(self) -> Player:
        return self._current_player

    def next_player(self) -> Player:
        return self._next_player

    def winner(self) -> Optional[Player]:
        """The player who completed four in a row, or None while the game runs."""
        return self._winner

    def cell(self, row: int, col: int) -> Player:
        return self.board.cell(row, col)

    def available_row(self, column: int) -> int:
        return self.board.available_row(column)

    def render(self) -> str:
        return self.board.render()
