import pytest

from inkgames.diptych import (
    EXIT_HOLD_MS,
    PICKUP_LINES,
    SPLIT_STEPS,
    Diptych,
    Screen,
    SplitMode,
)
from inkgames.diptych_world import GRID, EntityType, build_room

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)


def _play():
    game = Diptych()
    game.press_confirm()
    return game


def _walk(game, *steps):
    for dx, dy in steps:
        game.move(dx, dy)


def _collect_first_shard(game):
    _walk(game, *[UP] * 8)
    _walk(game, *[UP] * 6)
    game.press_back()
    _walk(game, RIGHT, RIGHT, RIGHT)
    resonate = game.message
    game.press_back()
    _walk(game, UP, RIGHT, RIGHT, RIGHT, RIGHT, DOWN)
    return resonate


def test_intro_then_play():
    game = Diptych()
    assert game.screen is Screen.INTRO
    assert not game.prevent_auto_sleep()
    assert game.move(*RIGHT) is False
    game.press_confirm()
    assert game.screen is Screen.PLAY
    assert game.message == "Talk to the Watcher. Split, push, mend."
    assert game.prevent_auto_sleep()


def test_invalid_direction_raises():
    game = _play()
    with pytest.raises(ValueError):
        game.move(1, 1)


def test_coupled_move_keeps_bodies_together():
    game = _play()
    _walk(game, RIGHT, DOWN)
    assert game.light_pos == game.shadow_pos
    assert game.steps == 2


def test_watcher_blocks_and_talks():
    game = _play()
    game.move(*LEFT)
    start = game.light_pos
    game.move(*LEFT)
    assert game.message == "Blocked above."
    assert game.light_pos == start
    game.press_confirm()
    assert game.screen is Screen.DIALOGUE
    assert game.dialogue[0] == "Little traveler, you cast two bodies and one will."
    for _ in range(len(game.dialogue) - 1):
        game.press_confirm()
        assert game.screen is Screen.DIALOGUE
    game.press_confirm()
    assert game.screen is Screen.PLAY


def test_back_leaves_dialogue():
    game = _play()
    game.open_watcher_dialogue()
    game.press_back()
    assert game.screen is Screen.PLAY
    assert game.split_mode is SplitMode.NONE


def test_light_split_spends_tether_and_snaps_back():
    game = _play()
    anchor = game.light_pos
    game.press_back()
    assert game.split_mode is SplitMode.LIGHT
    assert game.message == "Light split: 5 steps."
    game.move(*RIGHT)
    assert game.message == f"Light split: {SPLIT_STEPS - 1} steps."
    assert game.shadow_pos == anchor
    _walk(game, *[RIGHT] * (SPLIT_STEPS - 1))
    assert game.split_steps == 0
    assert game.message == "Tether spent. Move again to snap back."
    assert game.light_pos != anchor
    game.move(*RIGHT)
    assert game.light_pos == anchor
    assert game.split_mode is SplitMode.NONE
    assert game.message == "The tether snaps back."


def test_shadow_split_and_snap_back_first():
    game = _play()
    game.press_confirm()
    assert game.split_mode is SplitMode.SHADOW
    assert game.message == "Shadow split: 5 steps."
    game.press_back()
    assert game.message == "Snap back first."
    assert game.split_mode is SplitMode.SHADOW
    game.move(*DOWN)
    assert game.light_pos != game.shadow_pos
    game.press_confirm()
    assert game.split_mode is SplitMode.NONE
    assert game.light_pos == game.shadow_pos


def test_transition_up_enters_shard_room():
    game = _play()
    _walk(game, *[UP] * 8)
    assert game.room == (0, -1)
    assert game.light_pos == (7, GRID - 2)
    assert game.shadow_pos == game.light_pos
    kinds = {e.kind for e in game.light.entities}
    assert EntityType.HALF_LIGHT in kinds


def test_blocked_transition():
    game = _play()
    game.room = (1, 2)
    game.light, game.shadow = build_room(1, 2)
    game.light_pos = game.shadow_pos = (0, 7)
    game.try_transition(-1, 0)
    assert game.message == "The path is blocked."
    assert game.room == (1, 2)


def test_sign_is_read():
    game = _play()
    _walk(game, *[RIGHT] * 8)
    assert game.room == (1, 0)
    game.move(*RIGHT)
    game.press_confirm()
    assert game.message == "Back splits Light for five steps."
    assert game.split_mode is SplitMode.NONE


def test_collecting_a_shard():
    game = _play()
    resonate = _collect_first_shard(game)
    assert resonate == "The halves resonate. Walk onto them."
    assert game.screen is Screen.PICKUP
    assert game.is_collected(0)
    assert game.shard_count() == 1
    assert game.pickup_message == PICKUP_LINES[0]
    assert game.light_pos == game.shadow_pos
    assert all(e.kind is not EntityType.HALF_LIGHT for e in game.light.entities)
    assert all(e.kind is not EntityType.HALF_SHADOW for e in game.shadow.entities)
    assert "SHARD MENDED" in game.render()
    game.press_confirm()
    assert game.screen is Screen.PLAY


def test_sage_dialogue_counts_shards():
    game = _play()
    game.open_sage_dialogue()
    assert game.dialogue[-1] == "0/5 shards carry your name."
    assert game.pending_victory is False


def test_watcher_with_all_shards_leads_to_victory():
    game = _play()
    game.collected = set(range(5))
    game.open_watcher_dialogue()
    assert game.pending_victory
    for _ in range(len(game.dialogue)):
        game.press_confirm()
    assert game.screen is Screen.VICTORY
    assert "The rift closes." in game.render()
    game.press_back()
    assert game.finished


def test_victory_confirm_explores():
    game = _play()
    game.collected = set(range(5))
    game.open_watcher_dialogue()
    for _ in range(len(game.dialogue)):
        game.press_confirm()
    game.press_confirm()
    assert game.screen is Screen.PLAY
    assert game.message == "Free to explore."


def test_hold_back_exits():
    game = _play()
    assert game.hold_back(EXIT_HOLD_MS - 1) is False
    assert not game.finished
    assert game.hold_back(EXIT_HOLD_MS) is True
    assert game.finished
    assert game.hold_back(EXIT_HOLD_MS) is False


def test_render_play_status():
    game = _play()
    text = game.render()
    assert "~ Light World ~" in text
    assert "Shards 0/5" in text
    assert "(0,0)" in text
    assert text.count("@") == 2


def test_reset_restores_intro():
    game = _play()
    _walk(game, RIGHT, RIGHT)
    game.reset()
    assert game.screen is Screen.INTRO
    assert game.steps == 0
    assert game.message == "Talk to the Watcher."
    assert game.shard_count() == 0