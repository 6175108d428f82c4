"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

STEP_INTERVAL_MS = 180


class GameOfLife:
    """A bounded (non-wrapping) Life grid with an editing cursor."""

    def __init__(self, width=40, height=28):
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.grid = [[False] * width for _ in range(height)]
        self.cursor = (width // 2, height // 2)
        self.generation = 0
        self.running = False
        self.last_step = 0

    def _neighbors(self, x, y):
        return sum(
            self.grid[ny][nx]
            for ny in range(max(0, y - 1), min(self.height, y + 2))
            for nx in range(max(0, x - 1), min(self.width, x + 2))
            if (nx, ny) != (x, y)
        )

    def step(self):
        """Advance one generation."""
        self.grid = [
            [
                n == 3 or (alive and n == 2)
                for x, alive in enumerate(line)
                for n in (self._neighbors(x, y),)
            ]
            for y, line in enumerate(self.grid)
        ]
        self.generation += 1

    def clear(self):
        self.grid = [[False] * self.width for _ in range(self.height)]
        self.generation = 0

    def move_cursor(self, dx, dy):
        x, y = self.cursor
        self.cursor = (min(self.width - 1, max(0, x + dx)), min(self.height - 1, max(0, y + dy)))

    def toggle_cell(self):
        x, y = self.cursor
        self.grid[y][x] = not self.grid[y][x]

    def toggle_running(self):
        self.running = not self.running

    def tick(self, now_ms):
        """Step if running and the interval has passed; return whether it stepped."""
        if self.running and now_ms - self.last_step > STEP_INTERVAL_MS:
            self.last_step = now_ms
            self.step()
            return True
        return False

    def render(self):
        """The generation counter followed by the grid as text."""
        lines = [f"Gen: {self.generation}"]
        lines.extend("".join("#" if alive else "." for alive in line) for line in self.grid)
        return "\n".join(lines)