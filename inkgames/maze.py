"""A randomly carved maze where each exit reached starts a new level."""

from __future__ import annotations

import random

WIDTH = 17
HEIGHT = 17
WALL = 0
OPEN = 1

_CARVE_STEPS = ((0, -2), (2, 0), (0, 2), (-2, 0))


class Maze:
    """A perfect maze on a 17x17 grid, carved by randomized depth-first search."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.width = WIDTH
        self.height = HEIGHT
        self.level = 1
        self.generate()

    def _carve(self, x, y):
        self.cells[y][x] = OPEN
        steps = list(_CARVE_STEPS)
        for i in range(len(steps)):
            j = self.rng.randrange(i, len(steps))
            steps[i], steps[j] = steps[j], steps[i]
        for dx, dy in steps:
            nx, ny = x + dx, y + dy
            if nx <= 0 or ny <= 0 or nx >= WIDTH - 1 or ny >= HEIGHT - 1:
                continue
            if self.cells[ny][nx] == WALL:
                self.cells[y + dy // 2][x + dx // 2] = OPEN
                self._carve(nx, ny)

    def generate(self):
        """Carve a fresh maze and put the player at the start."""
        self.cells = [[WALL] * WIDTH for _ in range(HEIGHT)]
        self._carve(1, 1)
        self.player = (1, 1)
        self.exit = (WIDTH - 2, HEIGHT - 2)
        ex, ey = self.exit
        self.cells[ey][ex] = OPEN

    def can_move_to(self, x, y):
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return False
        return self.cells[y][x] == OPEN

    def move(self, dx, dy):
        """Step the player; return whether the player moved."""
        x, y = self.player
        nx, ny = x + dx, y + dy
        if (nx, ny) == (x, y) or not self.can_move_to(nx, ny):
            return False
        self.player = (nx, ny)
        if self.player == self.exit:
            self.level += 1
            self.generate()
        return True

    def render(self):
        """The level line followed by the maze as text."""
        lines = [f"Level {self.level}"]
        for y, row in enumerate(self.cells):
            chars = []
            for x, cell in enumerate(row):
                if (x, y) == self.player:
                    chars.append("@")
                elif (x, y) == self.exit:
                    chars.append("E")
                else:
                    chars.append(" " if cell == OPEN else "#")
            lines.append("".join(chars))
        return "\n".join(lines)