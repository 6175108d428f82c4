"""Small puzzle and board games as text-rendered state machines.

Gomoku, chess, Game of Life, maze, Minesweeper, Snake, Solitaire, Sudoku
and Diptych, each in its own module.
"""

__version__ = "0.1.0"