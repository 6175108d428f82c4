"""Sudoku puzzles made by filling a random grid and removing 45 cells."""

from __future__ import annotations

import random
from itertools import product

REMOVED_CELLS = 45


def is_valid(board, row, col, value):
    """Whether value may go at (row, col) without clashing in its row, column or box."""
    if any(board[row][i] == value or board[i][col] == value for i in range(9)):
        return False
    br, bc = row // 3 * 3, col // 3 * 3
    return all(board[br + y][bc + x] != value for y, x in product(range(3), repeat=2))


def _solve_from(board, index, rng):
    if index == 81:
        return True
    row, col = divmod(index, 9)
    if board[row][col] != 0:
        return _solve_from(board, index + 1, rng)
    values = list(range(1, 10))
    for i in range(9):
        j = rng.randrange(i, 9)
        values[i], values[j] = values[j], values[i]
    for value in values:
        if is_valid(board, row, col, value):
            board[row][col] = value
            if _solve_from(board, index + 1, rng):
                return True
            board[row][col] = 0
    return False


def solve(board, rng=None):
    """Fill the zeros of board in place, trying digits in random order.

    Return whether a solution was found; the board is unchanged if not.
    """
    return _solve_from(board, 0, rng if rng is not None else random.Random())


class Sudoku:
    """A puzzle whose free cells are cycled through 0-9 with the cursor."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.make_puzzle()

    def make_puzzle(self):
        self.puzzle = [[0] * 9 for _ in range(9)]
        solve(self.puzzle, self.rng)
        self.solution = [row[:] for row in self.puzzle]
        remaining = REMOVED_CELLS
        while remaining > 0:
            row = self.rng.randrange(9)
            col = self.rng.randrange(9)
            if self.puzzle[row][col] != 0:
                self.puzzle[row][col] = 0
                remaining -= 1
        self.fixed = [[value != 0 for value in row] for row in self.puzzle]
        self.cursor = (0, 0)
        self.completed = False

    def move_cursor(self, dx, dy):
        row, col = self.cursor
        self.cursor = (min(8, max(0, row + dy)), min(8, max(0, col + dx)))

    def confirm(self):
        """Cycle the free cell under the cursor, or start a new puzzle once solved."""
        if self.completed:
            self.make_puzzle()
            return
        row, col = self.cursor
        if self.fixed[row][col]:
            return
        self.puzzle[row][col] = (self.puzzle[row][col] + 1) % 10
        self.completed = self.puzzle == self.solution

    def render(self):
        """The grid as text, followed by a line once the puzzle is complete."""
        lines = ["".join(str(v) if v else "." for v in row) for row in self.puzzle]
        if self.completed:
            lines.append("Puzzle complete!")
        return "\n".join(lines)