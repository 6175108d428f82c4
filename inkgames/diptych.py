"""Diptych: one traveller walking two parallel worlds to mend five shards."""

from __future__ import annotations

from enum import Enum

from .diptych_world import (
    GRID,
    TOTAL_SHARDS,
    EntityType,
    Tile,
    build_room,
    inside,
    snap_door,
)

SPLIT_STEPS = 5
EXIT_HOLD_MS = 1300
START = (7, 7)
SNAP_TEXT = "The tether snaps back."
HINT = "D-pad | Back=Light | OK=Shadow"

PICKUP_LINES = (
    "1/5 - A quiet star wakes.",
    "2/5 - The dark learns its name.",
    "3/5 - Two roads remember one sky.",
    "4/5 - The rift begins to sing.",
    "5/5 - Return to the Watcher.",
)

_TILE_SYMBOLS = {Tile.EMPTY: ".", Tile.WALL: "#", Tile.TREE: "T"}
_ENTITY_SYMBOLS = {
    EntityType.NPC: "N",
    EntityType.SIGN: "S",
    EntityType.HALF_LIGHT: "^",
    EntityType.HALF_SHADOW: "v",
}
_ADJACENT = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Screen(Enum):
    INTRO = 0
    PLAY = 1
    DIALOGUE = 2
    PICKUP = 3
    VICTORY = 4


class SplitMode(Enum):
    NONE = 0
    LIGHT = 1
    SHADOW = 2


class Diptych:
    """The game state: two worlds, two bodies, an optional tether split."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.screen = Screen.INTRO
        self.room = (0, 0)
        self.light_pos = START
        self.shadow_pos = START
        self.split_mode = SplitMode.NONE
        self.split_steps = 0
        self.split_anchor = START
        self.collected = set()
        self.steps = 0
        self.pending_victory = False
        self.back_consumed = False
        self.finished = False
        self.message = "Talk to the Watcher."
        self.pickup_message = ""
        self.dialogue = []
        self.dialogue_line = 0
        self.light, self.shadow = build_room(0, 0, frozenset(self.collected))

    # --- shards -----------------------------------------------------------

    def is_collected(self, shard_id):
        return shard_id in self.collected

    def shard_count(self):
        return len(self.collected)

    def _collect_aligned_shard(self, shard_id, x, y):
        self.collected.add(shard_id)
        self.light_pos = self.shadow_pos = (x, y)
        self.light.remove_entity(self.light.find_entity_at(x, y, EntityType.HALF_LIGHT))
        self.shadow.remove_entity(self.shadow.find_entity_at(x, y, EntityType.HALF_SHADOW))
        index = max(0, min(TOTAL_SHARDS - 1, self.shard_count() - 1))
        self.pickup_message = PICKUP_LINES[index]
        self.screen = Screen.PICKUP
        self.steps += 1

    def _update_alignment_message(self):
        light_half = next(
            ((e.x, e.y) for e in self.light.entities if e.kind is EntityType.HALF_LIGHT), None
        )
        shadow_half = next(
            ((e.x, e.y) for e in self.shadow.entities if e.kind is EntityType.HALF_SHADOW), None
        )
        if light_half is not None and light_half == shadow_half:
            self.message = "The halves resonate. Walk onto them."
        else:
            self.message = ""

    # --- movement ---------------------------------------------------------

    def move(self, dx, dy):
        """Move in play; return whether the move was handled."""
        if (abs(dx), abs(dy)) not in ((1, 0), (0, 1)):
            raise ValueError(f"not a direction: ({dx}, {dy})")
        if self.screen is not Screen.PLAY:
            return False
        if self.split_mode is SplitMode.NONE:
            self.move_coupled(dx, dy)
        else:
            self.move_split(dx, dy)
        return True

    def move_coupled(self, dx, dy):
        """Move both bodies together, pushing halves or leaving the room."""
        nlx, nly = self.light_pos[0] + dx, self.light_pos[1] + dy
        nsx, nsy = self.shadow_pos[0] + dx, self.shadow_pos[1] + dy

        if not inside(nlx, nly) or not inside(nsx, nsy):
            self.try_transition(dx, dy)
            return

        light_index = self.light.find_entity_at(nlx, nly, EntityType.HALF_LIGHT)
        shadow_index = self.shadow.find_entity_at(nsx, nsy, EntityType.HALF_SHADOW)
        if light_index is not None and shadow_index is not None:
            light_half = self.light.entities[light_index]
            shadow_half = self.shadow.entities[shadow_index]
            if (light_half.x, light_half.y, light_half.ident) == (
                shadow_half.x,
                shadow_half.y,
                shadow_half.ident,
            ):
                self._collect_aligned_shard(light_half.ident, nlx, nly)
                return

        light_ok = self.light.try_walk_or_push(EntityType.HALF_LIGHT, nlx, nly, dx, dy, False)
        shadow_ok = self.shadow.try_walk_or_push(EntityType.HALF_SHADOW, nsx, nsy, dx, dy, False)
        if not light_ok or not shadow_ok:
            if not light_ok and not shadow_ok:
                self.message = "Blocked in both worlds."
            elif not light_ok:
                self.message = "Blocked above."
            else:
                self.message = "Blocked below."
            return

        self.light.try_walk_or_push(EntityType.HALF_LIGHT, nlx, nly, dx, dy, True)
        self.shadow.try_walk_or_push(EntityType.HALF_SHADOW, nsx, nsy, dx, dy, True)
        self.light_pos = (nlx, nly)
        self.shadow_pos = (nsx, nsy)
        self.steps += 1
        self._update_alignment_message()

    def move_split(self, dx, dy):
        """Move only the split body; once the tether is spent, snap back."""
        if self.split_steps <= 0:
            self.snap_split()
            return

        solo_light = self.split_mode is SplitMode.LIGHT
        world = self.light if solo_light else self.shadow
        half_type = EntityType.HALF_LIGHT if solo_light else EntityType.HALF_SHADOW
        x, y = self.light_pos if solo_light else self.shadow_pos
        nx, ny = x + dx, y + dy

        if not world.try_walk_or_push(half_type, nx, ny, dx, dy, False):
            self.message = "Blocked above." if solo_light else "Blocked below."
            return

        world.try_walk_or_push(half_type, nx, ny, dx, dy, True)
        if solo_light:
            self.light_pos = (nx, ny)
        else:
            self.shadow_pos = (nx, ny)
        self.split_steps -= 1
        self.steps += 1

        self._update_alignment_message()
        if not self.message:
            name = "Light" if solo_light else "Shadow"
            self.message = f"{name} split: {self.split_steps} steps."
        if self.split_steps <= 0:
            self.message = "Tether spent. Move again to snap back."

    def try_transition(self, dx, dy):
        """Walk into the neighbouring room if its doorway is free in both worlds."""
        rx, ry = self.room
        lx, ly = self.light_pos
        entry_x, entry_y = lx, ly
        if dx > 0:
            rx, entry_x, entry_y = rx + 1, 1, snap_door(ly)
        elif dx < 0:
            rx, entry_x, entry_y = rx - 1, GRID - 2, snap_door(ly)
        elif dy > 0:
            ry, entry_x, entry_y = ry + 1, snap_door(lx), 1
        elif dy < 0:
            ry, entry_x, entry_y = ry - 1, snap_door(lx), GRID - 2

        light, shadow = build_room(rx, ry, frozenset(self.collected))
        if (
            light.tiles[entry_y][entry_x].walkable
            and shadow.tiles[entry_y][entry_x].walkable
            and not light.has_blocking_entity(entry_x, entry_y)
            and not shadow.has_blocking_entity(entry_x, entry_y)
        ):
            self.light, self.shadow = light, shadow
            self.room = (rx, ry)
            self.light_pos = self.shadow_pos = (entry_x, entry_y)
            self.steps += 1
            self.message = ""
        else:
            self.message = "The path is blocked."

    # --- tether -----------------------------------------------------------

    def snap_split(self, text=SNAP_TEXT):
        """Return the split body to its anchor and end the split."""
        if self.split_mode is SplitMode.LIGHT:
            self.light_pos = self.split_anchor
        elif self.split_mode is SplitMode.SHADOW:
            self.shadow_pos = self.split_anchor
        self.split_mode = SplitMode.NONE
        self.split_steps = 0
        self.message = text

    def toggle_light_split(self):
        if self.split_mode is SplitMode.LIGHT:
            self.snap_split()
            return
        if self.split_mode is not SplitMode.NONE:
            self.message = "Snap back first."
            return
        self.split_mode = SplitMode.LIGHT
        self.split_steps = SPLIT_STEPS
        self.split_anchor = self.light_pos
        self.message = "Light split: 5 steps."

    def toggle_shadow_split(self):
        if self.split_mode is SplitMode.SHADOW:
            self.snap_split()
            return
        if self.split_mode is not SplitMode.NONE:
            self.message = "Snap back first."
            return
        self.split_mode = SplitMode.SHADOW
        self.split_steps = SPLIT_STEPS
        self.split_anchor = self.shadow_pos
        self.message = "Shadow split: 5 steps."

    # --- talking ----------------------------------------------------------

    def start_adjacent_dialogue_or_sign(self):
        """Talk to an adjacent character or read a sign; return whether one was found."""
        lx, ly = self.light_pos
        for dx, dy in _ADJACENT:
            ax, ay = lx + dx, ly + dy
            if not inside(ax, ay):
                continue
            index = self.light.find_entity_at(ax, ay)
            if index is None:
                continue
            entity = self.light.entities[index]
            if entity.kind is EntityType.NPC:
                if entity.ident == 1:
                    self.open_sage_dialogue()
                else:
                    self.open_watcher_dialogue()
                return True
            if entity.kind is EntityType.SIGN:
                self.message = entity.text or "..."
                return True
        return False

    def open_watcher_dialogue(self):
        count = self.shard_count()
        self.pending_victory = False
        if count >= TOTAL_SHARDS:
            self.dialogue = [
                "All five shards answer your step.",
                "Come near. Let the seam remember how to close.",
                "A scar is not a wound. It is proof that something endured.",
            ]
            self.pending_victory = True
        elif count >= 3:
            self.dialogue = [
                f"{count}/5 shards mended.",
                "The dark no longer hunts the light. It walks beside it.",
                "Do not fear the tether. It is proof you can return.",
                "The broken stars still call from the map.",
            ]
        elif count >= 1:
            self.dialogue = [
                f"{count}/5 shards mended.",
                "Each shard remembers a shape you have not yet become.",
                "Split, push, return. Even the lost can be guided home.",
            ]
        else:
            self.dialogue = [
                "Little traveler, you cast two bodies and one will.",
                "Light is not mercy. Shadow is not sin. Both are doors.",
                "Each world holds half of what was broken.",
                "Push the halves together. Step onto them as one.",
                "Back loosens Light. Confirm loosens Shadow.",
            ]
        self.dialogue_line = 0
        self.screen = Screen.DIALOGUE

    def open_sage_dialogue(self):
        if self.shard_count() >= TOTAL_SHARDS:
            self.dialogue = [
                "The last bell has rung.",
                "Return to the Watcher. Let the silence become whole.",
            ]
        else:
            self.dialogue = [
                "A wall is only a question asked in stone.",
                "Answer with patience. Push only what can be brought back.",
                f"{self.shard_count()}/5 shards carry your name.",
            ]
        self.dialogue_line = 0
        self.pending_victory = False
        self.screen = Screen.DIALOGUE

    def advance_dialogue(self):
        if self.dialogue_line + 1 < len(self.dialogue):
            self.dialogue_line += 1
            return
        if self.pending_victory:
            self.screen = Screen.VICTORY
            self.pending_victory = False
        else:
            self.screen = Screen.PLAY

    # --- buttons ----------------------------------------------------------

    def press_back(self):
        """A short press of Back on the current screen."""
        consumed = self.back_consumed
        self.back_consumed = False
        if self.screen is Screen.PICKUP:
            self.screen = Screen.PLAY
        elif consumed or self.screen is Screen.INTRO:
            return
        elif self.screen is Screen.DIALOGUE:
            self.screen = Screen.PLAY
            self.pending_victory = False
        elif self.screen is Screen.VICTORY:
            self.finished = True
        elif self.screen is Screen.PLAY:
            self.toggle_light_split()

    def press_confirm(self):
        """A press of Confirm on the current screen."""
        if self.screen is Screen.INTRO:
            self.screen = Screen.PLAY
            self.message = "Talk to the Watcher. Split, push, mend."
        elif self.screen is Screen.PICKUP:
            self.screen = Screen.PLAY
        elif self.screen is Screen.DIALOGUE:
            self.advance_dialogue()
        elif self.screen is Screen.VICTORY:
            self.screen = Screen.PLAY
            self.message = "Free to explore."
        elif self.split_mode is SplitMode.NONE and self.start_adjacent_dialogue_or_sign():
            return
        else:
            self.toggle_shadow_split()

    def hold_back(self, held_ms):
        """Back held for held_ms; a long enough hold leaves the game. Return whether it did."""
        if held_ms >= EXIT_HOLD_MS and not self.back_consumed:
            self.back_consumed = True
            self.finished = True
            return True
        return False

    def prevent_auto_sleep(self):
        return self.screen is Screen.PLAY

    # --- text rendering ---------------------------------------------------

    @staticmethod
    def _world_lines(world, pos):
        rows = [[_TILE_SYMBOLS[tile] for tile in row] for row in world.tiles]
        for entity in world.entities:
            symbol = _ENTITY_SYMBOLS.get(entity.kind)
            if symbol is not None:
                rows[entity.y][entity.x] = symbol
        x, y = pos
        rows[y][x] = "@"
        return ["".join(row) for row in rows]

    def _status(self):
        if self.split_mode is not SplitMode.NONE:
            name = "Light split" if self.split_mode is SplitMode.LIGHT else "Shadow split"
            center = f"{name}: {self.split_steps}"
        else:
            center = self.message or HINT
        rx, ry = self.room
        return f"Shards {self.shard_count()}/{TOTAL_SHARDS} | {center} | ({rx},{ry})"

    def render(self):
        """The current screen as text."""
        if self.screen is Screen.INTRO:
            return "\n".join(["DIPTYCH", "Two canvases. One truth.", "Confirm to begin"])
        if self.screen is Screen.VICTORY:
            return "\n".join(
                [
                    "The rift closes.",
                    "Five shards. Mended.",
                    "The worlds become one.",
                    f"{self.steps} steps",
                    "Confirm to explore",
                ]
            )
        lines = ["DIPTYCH", "~ Light World ~"]
        lines.extend(self._world_lines(self.light, self.light_pos))
        lines.append("".join("*" if self.is_collected(i) else "o" for i in range(TOTAL_SHARDS)))
        lines.append("~ Shadow World ~")
        lines.extend(self._world_lines(self.shadow, self.shadow_pos))
        lines.append(self._status())
        if self.screen is Screen.DIALOGUE and self.dialogue:
            lines.extend(
                [
                    "...",
                    self.dialogue[self.dialogue_line],
                    f"{self.dialogue_line + 1}/{len(self.dialogue)} OK",
                ]
            )
        elif self.screen is Screen.PICKUP:
            lines.extend(["SHARD MENDED", self.pickup_message, "Confirm"])
        return "\n".join(lines)