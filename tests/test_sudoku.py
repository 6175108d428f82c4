import random

import pytest

from inkgames.sudoku import REMOVED_CELLS, Sudoku, is_valid, solve


def _groups(board):
    rows = board
    cols = [[board[r][c] for r in range(9)] for c in range(9)]
    boxes = [
        [board[br + y][bc + x] for y in range(3) for x in range(3)]
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    ]
    return rows + cols + boxes


def _is_complete(board):
    return all(sorted(group) == list(range(1, 10)) for group in _groups(board))


@pytest.fixture
def game():
    return Sudoku(random.Random(11))


def test_is_valid_detects_clashes():
    board = [[0] * 9 for _ in range(9)]
    board[0][0] = 5
    assert not is_valid(board, 0, 8, 5)
    assert not is_valid(board, 8, 0, 5)
    assert not is_valid(board, 2, 2, 5)
    assert is_valid(board, 3, 3, 5)
    assert is_valid(board, 0, 8, 4)


def test_solve_empty_board():
    board = [[0] * 9 for _ in range(9)]
    assert solve(board, random.Random(1))
    assert _is_complete(board)


def test_solve_keeps_givens():
    board = [[0] * 9 for _ in range(9)]
    board[4][4] = 7
    board[0][8] = 3
    assert solve(board, random.Random(2))
    assert board[4][4] == 7 and board[0][8] == 3
    assert _is_complete(board)


def test_solve_unsolvable_board():
    board = [[0] * 9 for _ in range(9)]
    board[0][:8] = list(range(1, 9))
    board[1][8] = 9
    snapshot = [row[:] for row in board]
    assert not solve(board, random.Random(3))
    assert board == snapshot


def test_puzzle_shape(game):
    assert _is_complete(game.solution)
    assert sum(v == 0 for row in game.puzzle for v in row) == REMOVED_CELLS
    for r in range(9):
        for c in range(9):
            assert game.fixed[r][c] == (game.puzzle[r][c] != 0)
            if game.puzzle[r][c]:
                assert game.puzzle[r][c] == game.solution[r][c]


def test_cursor_is_clamped(game):
    game.move_cursor(-1, -1)
    assert game.cursor == (0, 0)
    for _ in range(12):
        game.move_cursor(1, 1)
    assert game.cursor == (8, 8)


def _free_cell(game):
    return next((r, c) for r in range(9) for c in range(9) if not game.fixed[r][c])


def _fixed_cell(game):
    return next((r, c) for r in range(9) for c in range(9) if game.fixed[r][c])


def test_confirm_cycles_free_cell(game):
    game.cursor = _free_cell(game)
    r, c = game.cursor
    game.confirm()
    assert game.puzzle[r][c] == 1
    for _ in range(9):
        game.confirm()
    assert game.puzzle[r][c] == 0


def test_confirm_ignores_fixed_cell(game):
    game.cursor = _fixed_cell(game)
    r, c = game.cursor
    before = game.puzzle[r][c]
    game.confirm()
    assert game.puzzle[r][c] == before


def test_completion_and_restart(game):
    r, c = _free_cell(game)
    game.puzzle = [row[:] for row in game.solution]
    game.puzzle[r][c] = (game.solution[r][c] - 1) % 10
    game.cursor = (r, c)
    game.confirm()
    assert game.completed
    assert game.render().endswith("Puzzle complete!")
    game.confirm()
    assert not game.completed
    assert game.cursor == (0, 0)
    assert sum(v == 0 for row in game.puzzle for v in row) == REMOVED_CELLS


def test_render_matches_puzzle(game):
    lines = game.render().splitlines()
    assert len(lines) == 9
    for line, row in zip(lines, game.puzzle):
        assert [0 if ch == "." else int(ch) for ch in line] == row