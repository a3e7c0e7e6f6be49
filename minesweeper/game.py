"""Minesweeper board state and rules."""

from __future__ import annotations

import random
from collections.abc import Iterator

MINE = -1

_NEIGHBOUR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)
)


class Minesweeper:
    """A rectangular minefield with reveal, flag and win tracking.

    Cells hold the number of adjacent mines, or ``-1`` for a mine.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mines: int,
        rng: random.Random | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        if mines < 0:
            raise ValueError("mine count cannot be negative")
        if mines > width * height:
            raise ValueError("more mines than cells on the board")
        self.width = width
        self.height = height
        self.mines = mines
        self._rng = rng if rng is not None else random.Random()
        self._board: list[list[int]] = []
        self._revealed: list[list[bool]] = []
        self._flagged: list[list[bool]] = []
        self._game_over = False
        self._game_won = False
        self.initialize_board()

    @property
    def game_over(self) -> bool:
        """True once a mine has been revealed."""
        return self._game_over

    @property
    def game_won(self) -> bool:
        """True once every safe cell has been revealed."""
        return self._game_won

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx, dy in _NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny):
                yield nx, ny

    def initialize_board(self) -> None:
        """Clear all state, scatter mines at random and number the cells."""
        self._board = [[0] * self.width for _ in range(self.height)]
        self._revealed = [[False] * self.width for _ in range(self.height)]
        self._flagged = [[False] * self.width for _ in range(self.height)]
        self._game_over = False
        self._game_won = False

        for _ in range(self.mines):
            while True:
                x = self._rng.randint(0, self.width - 1)
                y = self._rng.randint(0, self.height - 1)
                if self._board[y][x] != MINE:
                    break
            self._board[y][x] = MINE

        for y, row in enumerate(self._board):
            for x, value in enumerate(row):
                if value != MINE:
                    row[x] = self.count_adjacent_mines(x, y)

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines in the 3x3 block centred on (x, y), the cell included."""
        count = sum(
            1 for nx, ny in self._neighbours(x, y) if self._board[ny][nx] == MINE
        )
        return count

    def reveal(self, x: int, y: int) -> None:
        """Uncover a cell, flooding outward from cells with no adjacent mines."""
        if not self._in_bounds(x, y) or self._revealed[y][x] or self._flagged[y][x]:
            return

        if self._board[y][x] == MINE:
            self._revealed[y][x] = True
            self._game_over = True
            for row_board, row_revealed in zip(self._board, self._revealed):
                for px, value in enumerate(row_board):
                    if value == MINE:
                        row_revealed[px] = True
            return

        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            if self._revealed[cy][cx] or self._flagged[cy][cx]:
                continue
            self._revealed[cy][cx] = True
            if self._board[cy][cx] == 0:
                pending.extend(
                    (nx, ny)
                    for nx, ny in self._neighbours(cx, cy)
                    if not self._revealed[ny][nx] and not self._flagged[ny][nx]
                )

        self.check_win()

    def toggle_flag(self, x: int, y: int) -> None:
        """Flag or unflag a hidden cell; revealed or outside cells are ignored."""
        if self._in_bounds(x, y) and not self._revealed[y][x]:
            self._flagged[y][x] = not self._flagged[y][x]

    def check_win(self) -> None:
        """Mark the game won when exactly the safe cells are revealed."""
        revealed_count = sum(sum(row) for row in self._revealed)
        if revealed_count == self.width * self.height - self.mines:
            self._game_won = True

    def is_revealed(self, x: int, y: int) -> bool:
        """Whether (x, y) is uncovered; False outside the board."""
        return self._in_bounds(x, y) and self._revealed[y][x]

    def is_flagged(self, x: int, y: int) -> bool:
        """Whether (x, y) carries a flag; False outside the board."""
        return self._in_bounds(x, y) and self._flagged[y][x]

    def is_mine(self, x: int, y: int) -> bool:
        """Whether (x, y) holds a mine; False outside the board."""
        return self._in_bounds(x, y) and self._board[y][x] == MINE

    def number(self, x: int, y: int) -> int:
        """The cell value: adjacent mine count, -1 for a mine, 0 outside."""
        if not self._in_bounds(x, y):
            return 0
        return self._board[y][x]

    def reset(self) -> None:
        """Start a fresh game on a newly generated board."""
        self.initialize_board()