# inkgames

A collection of small games written as plain Python state machines. Each
game keeps its own board and reacts to simple actions: move the cursor,
confirm, step. Each one can describe itself as text with `render()`.

The package has no dependencies outside the standard library. Games that
need chance take an optional random number generator (`rng`). Pass a
seeded `random.Random` to get a repeatable game.

## Games

| Module                  | Class         | Game                                                        |
|-------------------------|---------------|-------------------------------------------------------------|
| `inkgames.gomoku`       | `Gomoku`      | Five in a row on a 13×13 board against a greedy computer     |
| `inkgames.chess`        | `ChessGame`   | Simplified chess; white by hand, black by the computer      |
| `inkgames.life`         | `GameOfLife`  | Conway's Game of Life on a bounded, non-wrapping grid       |
| `inkgames.maze`         | `Maze`        | Randomly carved 17×17 mazes, a new level at each exit       |
| `inkgames.minesweeper`  | `Minesweeper` | 14×10 field with 18 mines; the first reveal is always safe  |
| `inkgames.snake`        | `SnakeGame`   | Snake on a 20×24 grid, one step every 170 ms                |
| `inkgames.solitaire`    | `Solitaire`   | Klondike-style patience with auto-play to the foundations   |
| `inkgames.sudoku`       | `Sudoku`      | Generated puzzles with 45 cells removed                     |
| `inkgames.diptych`      | `Diptych`     | A puzzle adventure across two linked worlds                 |

## Examples

### Gomoku

The player's stones are `X` and the computer's are `O`. `place()` puts a
stone down and the computer answers at once. It raises `ValueError` for
an occupied cell, a cell off the board, or a game that is over.

```python
from inkgames.gomoku import Gomoku

game = Gomoku()
game.place(6, 6)
print(game.status())   # "Your turn", "You win!", "AI wins!" or "Draw!"
print(game.render())
```

### Chess

There is no check, castling, en passant or promotion. The game ends when
a king is captured, or when black has no move left. When black moves, it
plays its first capture, or a random move if it has none.

```python
import random

from inkgames.chess import ChessGame

game = ChessGame(random.Random(1))
game.confirm()            # select the pawn under the cursor (row 6, column 4)
game.move_cursor(0, -2)
game.confirm()            # move it two squares forward
game.tick()               # black answers
print(game.status())
print(game.render())
```

`legal_moves(white)` lists every valid `Move` for one side.

### Game of Life

```python
from inkgames.life import GameOfLife

life = GameOfLife(40, 28)
life.toggle_cell()
life.step()
print(life.render())
```

After `toggle_running()`, `tick(now_ms)` steps the grid each time more
than 180 ms have passed.

### Maze and Minesweeper

```python
import random

from inkgames.maze import Maze
from inkgames.minesweeper import Minesweeper

maze = Maze(random.Random(2))
maze.move(1, 0)        # returns whether the player moved
print(maze.render())

field = Minesweeper(random.Random(7))
field.move_cursor(3, 4)
field.reveal()
field.toggle_flag()
print(field.render())
```

### Snake

Snake runs on a clock. Pass the current time in milliseconds to `tick()`.
It moves once the step interval has passed. `steer()` ignores a turn
straight back, and `confirm()` pauses, resumes, or restarts after a game
over.

```python
import random

from inkgames.snake import SnakeGame

snake = SnakeGame(random.Random(3))
snake.steer(0, 1)
snake.tick(200)
print(snake.render())
```

### Solitaire and Sudoku

In Solitaire only the top card of a column is ever moved. The stock is
dealt through once and is not recycled.

```python
import random

from inkgames.solitaire import Solitaire
from inkgames.sudoku import Sudoku

cards = Solitaire(random.Random(5))
cards.draw_card()
cards.auto_play()
cards.select_column(1)
cards.play()
print(cards.render())

puzzle = Sudoku(random.Random(9))
puzzle.move_cursor(1, 0)
puzzle.confirm()       # cycles a free cell through 0-9
print(puzzle.render())
```

`inkgames.sudoku` also provides `is_valid(board, row, col, value)`. It
also provides `solve(board, rng)`, which fills a board's zeros in place.

## Diptych

Diptych is played in two worlds at once, Light and Shadow, and you move
both figures together. Each shard is split into two halves, one in each
world. Push the halves until they line up, then step onto them to mend
the shard.

Back splits the Light figure away for five steps. Confirm splits the
Shadow figure, unless you stand next to someone to talk to or a sign to
read. Mend all five shards and return to the Watcher.

```python
from inkgames.diptych import Diptych

game = Diptych()
game.press_confirm()   # leave the title screen
game.move(1, 0)
game.press_back()      # split the Light figure
print(game.render())
```

Holding Back for 1300 ms or more ends the game. Report the hold with
`hold_back(held_ms)`; the game then sets `finished`.

The room layouts, walls and entities live in `inkgames.diptych_world`
(`World`, `Tile`, `EntityType`, `build_room`).

## What this package does not do

There is no window, graphics, input handling or event loop. You drive
each game from your own code and read its state or its `render()` text.
There is no command-line program. Games are not saved: every state lives
only in memory.

## Running the tests

Install the `test` extra to get pytest, then run `pytest`. The tests live
in `tests/`.