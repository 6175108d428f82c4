[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inkgames"
version = "0.1.0"
description = "Small puzzle and board games as text-rendered state machines: Gomoku, chess, Life, maze, Minesweeper, Snake, Solitaire, Sudoku and Diptych"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "games",
    "puzzle",
    "gomoku",
    "chess",
    "minesweeper",
    "sudoku",
    "solitaire",
    "snake",
    "maze",
    "game-of-life",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inkgames"]

[tool.pytest.ini_options]
addopts = "-ra"
