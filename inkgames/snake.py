"""Snake on a 20x24 grid, stepping every 170 ms."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass

COLS = 20
ROWS = 24
STEP_MS = 170
FOOD_SCORE = 10
_SPAWN_TRIES = 500


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class SnakeGame:
    """The snake grows by one cell for each piece of food it eats."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.last_step = 0
        self.reset()

    def reset(self):
        cx, cy = COLS // 2, ROWS // 2
        self.snake = deque(Point(cx - i, cy) for i in range(3))
        self.direction = (1, 0)
        self.next_direction = (1, 0)
        self.score = 0
        self.running = True
        self.game_over = False
        self.spawn_food()

    def is_occupied(self, x, y):
        return Point(x, y) in self.snake

    def spawn_food(self):
        """Put food on a random free cell, or at the origin if none is found."""
        for _ in range(_SPAWN_TRIES):
            x = self.rng.randrange(COLS)
            y = self.rng.randrange(ROWS)
            if not self.is_occupied(x, y):
                self.food = Point(x, y)
                return
        self.food = Point(0, 0)

    def steer(self, dx, dy):
        """Queue a turn; turning straight back is ignored. Return whether it was taken."""
        if (abs(dx), abs(dy)) not in ((1, 0), (0, 1)):
            raise ValueError(f"not a direction: ({dx}, {dy})")
        if (dx, dy) == (-self.direction[0], -self.direction[1]):
            return False
        self.next_direction = (dx, dy)
        return True

    def confirm(self):
        """Restart after a game over, otherwise pause or resume."""
        if self.game_over:
            self.reset()
        else:
            self.running = not self.running

    def step(self):
        """Move the snake one cell."""
        if not self.running or self.game_over:
            return
        self.direction = self.next_direction
        head = self.snake[0]
        new_head = Point(head.x + self.direction[0], head.y + self.direction[1])
        if (
            not (0 <= new_head.x < COLS and 0 <= new_head.y < ROWS)
            or self.is_occupied(new_head.x, new_head.y)
        ):
            self.game_over = True
            self.running = False
            return
        self.snake.appendleft(new_head)
        if new_head == self.food:
            self.score += FOOD_SCORE
            self.spawn_food()
        else:
            self.snake.pop()

    def tick(self, now_ms):
        """Step once the interval has passed; return whether a step was taken."""
        if now_ms - self.last_step >= STEP_MS:
            self.last_step = now_ms
            self.step()
            return True
        return False

    def render(self):
        """The score line, the grid as text and a status line if not playing."""
        rows = [["."] * COLS for _ in range(ROWS)]
        rows[self.food.y][self.food.x] = "*"
        for i, p in enumerate(self.snake):
            rows[p.y][p.x] = "O" if i == 0 else "o"
        lines = [f"Score: {self.score}"]
        lines.extend("".join(row) for row in rows)
        if self.game_over:
            lines.append("GAME OVER")
        elif not self.running:
            lines.append("PAUSED")
        return "\n".join(lines)