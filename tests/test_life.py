import pytest

from inkgames.life import GameOfLife


def alive_cells(game):
    return {(x, y) for y, line in enumerate(game.grid) for x, alive in enumerate(line) if alive}


def seed(game, cells):
    for x, y in cells:
        game.grid[y][x] = True


def test_defaults():
    game = GameOfLife()
    assert (game.width, game.height) == (40, 28)
    assert game.cursor == (20, 14)
    assert game.generation == 0
    assert not game.running


def test_invalid_size():
    with pytest.raises(ValueError):
        GameOfLife(0, 5)


def test_blinker_oscillates():
    game = GameOfLife(5, 5)
    horizontal = {(1, 2), (2, 2), (3, 2)}
    seed(game, horizontal)
    game.step()
    assert alive_cells(game) == {(2, 1), (2, 2), (2, 3)}
    game.step()
    assert alive_cells(game) == horizontal
    assert game.generation == 2


def test_block_is_stable():
    game = GameOfLife(6, 6)
    block = {(0, 0), (1, 0), (0, 1), (1, 1)}
    seed(game, block)
    game.step()
    assert alive_cells(game) == block


def test_lone_cell_dies():
    game = GameOfLife(4, 4)
    seed(game, {(2, 2)})
    game.step()
    assert alive_cells(game) == set()


def test_edges_do_not_wrap():
    game = GameOfLife(5, 5)
    seed(game, {(0, 1), (0, 2), (0, 3)})
    game.step()
    assert alive_cells(game) == {(0, 2), (1, 2)}


def test_toggle_cell_at_cursor():
    game = GameOfLife(5, 5)
    game.move_cursor(1, -1)
    game.toggle_cell()
    assert alive_cells(game) == {(3, 1)}
    game.toggle_cell()
    assert alive_cells(game) == set()


def test_cursor_clamps():
    game = GameOfLife(5, 4)
    for _ in range(10):
        game.move_cursor(1, 1)
    assert game.cursor == (4, 3)
    for _ in range(10):
        game.move_cursor(-1, -1)
    assert game.cursor == (0, 0)


def test_clear_resets_generation():
    game = GameOfLife(5, 5)
    seed(game, {(1, 1), (2, 2)})
    game.step()
    game.clear()
    assert game.generation == 0
    assert alive_cells(game) == set()


def test_tick_only_when_running_and_interval_passed():
    game = GameOfLife(5, 5)
    assert not game.tick(1000)
    game.toggle_running()
    assert game.running
    assert not game.tick(180)
    assert game.tick(181)
    assert game.generation == 1
    assert not game.tick(300)
    assert game.tick(400)
    assert game.generation == 2


def test_render():
    game = GameOfLife(3, 2)
    seed(game, {(1, 0)})
    assert game.render().splitlines() == ["Gen: 0", ".#.", "..."]