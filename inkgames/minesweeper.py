"""Minesweeper on a 14x10 board with 18 mines."""

from __future__ import annotations

import random
from itertools import product

ROWS = 14
COLS = 10
MINES = 18
MINE = 9

HIDDEN = 0
REVEALED = 1
FLAGGED = 2


def _neighbours(row, col):
    for dr, dc in product((-1, 0, 1), repeat=2):
        if dr or dc:
            r, c = row + dr, col + dc
            if 0 <= r < ROWS and 0 <= c < COLS:
                yield r, c


class Minesweeper:
    """Mines are laid on the first reveal, never around the revealed cell."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self):
        self.grid = [[0] * COLS for _ in range(ROWS)]
        self.state = [[HIDDEN] * COLS for _ in range(ROWS)]
        self.cursor = (0, 0)
        self.lost = False
        self.won = False
        self.placed_mines = False

    @property
    def finished(self):
        return self.lost or self.won

    def count_adjacent(self, row, col):
        return sum(self.grid[r][c] == MINE for r, c in _neighbours(row, col))

    def place_mines(self, safe_row, safe_col):
        """Lay the mines away from the 3x3 block around the safe cell and number the rest."""
        placed = 0
        while placed < MINES:
            r = self.rng.randrange(ROWS)
            c = self.rng.randrange(COLS)
            if self.grid[r][c] == MINE:
                continue
            if abs(r - safe_row) <= 1 and abs(c - safe_col) <= 1:
                continue
            self.grid[r][c] = MINE
            placed += 1
        for r, c in product(range(ROWS), range(COLS)):
            if self.grid[r][c] != MINE:
                self.grid[r][c] = self.count_adjacent(r, c)
        self.placed_mines = True

    def flood_reveal(self, row, col):
        """Reveal a cell and, through empty cells, everything connected to it."""
        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            if not (0 <= r < ROWS and 0 <= c < COLS) or self.state[r][c] != HIDDEN:
                continue
            self.state[r][c] = REVEALED
            if self.grid[r][c] == 0:
                pending.extend(_neighbours(r, c))

    def check_win(self):
        self.won = all(
            self.grid[r][c] == MINE or self.state[r][c] == REVEALED
            for r, c in product(range(ROWS), range(COLS))
        )
        return self.won

    def move_cursor(self, dx, dy):
        row, col = self.cursor
        self.cursor = (min(ROWS - 1, max(0, row + dy)), min(COLS - 1, max(0, col + dx)))

    def toggle_flag(self):
        """Flag or unflag the hidden cell under the cursor."""
        if self.finished:
            return
        row, col = self.cursor
        if self.state[row][col] == HIDDEN:
            self.state[row][col] = FLAGGED
        elif self.state[row][col] == FLAGGED:
            self.state[row][col] = HIDDEN

    def reveal(self):
        """Reveal the cell under the cursor, or start over once the game has ended."""
        if self.finished:
            self.reset()
            return
        row, col = self.cursor
        if not self.placed_mines:
            self.place_mines(row, col)
        if self.state[row][col] == FLAGGED:
            return
        if self.grid[row][col] == MINE:
            self.lost = True
            for r, c in product(range(ROWS), range(COLS)):
                if self.grid[r][c] == MINE:
                    self.state[r][c] = REVEALED
        else:
            self.flood_reveal(row, col)
            self.check_win()

    def _symbol(self, row, col):
        state = self.state[row][col]
        if state == FLAGGED:
            return "F"
        if state == HIDDEN:
            return "#"
        value = self.grid[row][col]
        if value == MINE:
            return "*"
        return str(value) if value else "."

    def render(self):
        """The board as text, followed by a status line when the game is over."""
        lines = ["".join(self._symbol(r, c) for c in range(COLS)) for r in range(ROWS)]
        if self.lost:
            lines.append("GAME OVER")
        elif self.won:
            lines.append("You win!")
        return "\n".join(lines)