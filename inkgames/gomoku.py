"""Gomoku (five in a row) against a greedy computer opponent."""

from __future__ import annotations

from itertools import product

SIZE = 13
EMPTY = 0
PLAYER = 1
AI = 2

# (column step, row step) for horizontal, vertical and both diagonals.
_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))

_SYMBOLS = {EMPTY: ".", PLAYER: "X", AI: "O"}


class Gomoku:
    """A 13x13 board where the player (1) plays against the computer (2)."""

    def __init__(self):
        self.size = SIZE
        self.reset()

    def reset(self):
        """Clear the board and centre the cursor."""
        self.grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.cursor = (SIZE // 2, SIZE // 2)
        self.winner = EMPTY
        self.draw = False

    @property
    def finished(self):
        return bool(self.winner) or self.draw

    @staticmethod
    def _inside(row, col):
        return 0 <= row < SIZE and 0 <= col < SIZE

    def _run(self, row, col, drow, dcol, stone):
        count = 0
        for step in range(1, 5):
            r, c = row + drow * step, col + dcol * step
            if not self._inside(r, c) or self.grid[r][c] != stone:
                break
            count += 1
        return count

    def has_five(self, row, col, stone):
        """Whether the stone at (row, col) is part of five or more in a line."""
        for dcol, drow in _DIRECTIONS:
            count = 1 + self._run(row, col, drow, dcol, stone) + self._run(row, col, -drow, -dcol, stone)
            if count >= 5:
                return True
        return False

    def score_position(self, row, col, me, opponent):
        """Heuristic value of an empty cell; -1 for an occupied one."""
        if self.grid[row][col] != EMPTY:
            return -1
        score = 1
        for dcol, drow in _DIRECTIONS:
            cells = [
                self.grid[row + drow * s][col + dcol * s]
                for s in range(-4, 5)
                if s != 0 and self._inside(row + drow * s, col + dcol * s)
            ]
            mine = cells.count(me)
            theirs = cells.count(opponent)
            score += mine * mine * 10 + theirs * theirs * 8
        return score

    def ai_move(self):
        """Place the computer's stone on the best-scoring cell."""
        best = -1
        target = None
        for row, col in product(range(SIZE), repeat=2):
            score = self.score_position(row, col, AI, PLAYER)
            if score > best:
                best = score
                target = (row, col)

        if target is not None:
            row, col = target
            self.grid[row][col] = AI
            if self.has_five(row, col, AI):
                self.winner = AI
                return

        if not any(EMPTY in line for line in self.grid):
            self.draw = True

    def move_cursor(self, dx, dy):
        row, col = self.cursor
        self.cursor = (min(SIZE - 1, max(0, row + dy)), min(SIZE - 1, max(0, col + dx)))

    def place(self, row, col):
        """Place the player's stone and let the computer answer."""
        if self.finished:
            raise ValueError("the game is over")
        if not self._inside(row, col):
            raise ValueError(f"cell ({row}, {col}) is off the board")
        if self.grid[row][col] != EMPTY:
            raise ValueError(f"cell ({row}, {col}) is occupied")
        self.grid[row][col] = PLAYER
        if self.has_five(row, col, PLAYER):
            self.winner = PLAYER
            return
        self.ai_move()

    def confirm(self):
        """Place at the cursor, or start over once the game has ended."""
        if self.finished:
            self.reset()
            return
        row, col = self.cursor
        if self.grid[row][col] == EMPTY:
            self.place(row, col)

    def status(self):
        if self.winner == PLAYER:
            return "You win!"
        if self.winner == AI:
            return "AI wins!"
        if self.draw:
            return "Draw!"
        return "Your turn"

    def render(self):
        """The board as text followed by the status line."""
        lines = ["".join(_SYMBOLS[v] for v in line) for line in self.grid]
        lines.append(self.status())
        return "\n".join(lines)