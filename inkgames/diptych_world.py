"""Rooms of the Diptych world: tiles, entities and the fixed room layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

GRID = 15
TOTAL_SHARDS = 5
MAX_ENTITIES = 4
DOOR_LO = 5
DOOR_HI = 9


class Tile(Enum):
    EMPTY = 0
    WALL = 1
    TREE = 2

    @property
    def walkable(self):
        return self is Tile.EMPTY


class EntityType(Enum):
    NONE = 0
    NPC = 1
    SIGN = 2
    HALF_LIGHT = 3
    HALF_SHADOW = 4


@dataclass
class Entity:
    kind: EntityType = EntityType.NONE
    x: int = 0
    y: int = 0
    ident: int = 0
    text: str | None = None


@dataclass(frozen=True)
class ShardDef:
    """Room of a shard and where its light and shadow halves start."""

    rx: int
    ry: int
    lx: int
    ly: int
    sx: int
    sy: int


SHARDS = (
    ShardDef(0, -1, 10, 7, 11, 7),
    ShardDef(-1, 0, 8, 7, 10, 7),
    ShardDef(1, 1, 9, 5, 9, 3),
    ShardDef(2, -1, 9, 7, 12, 7),
    ShardDef(0, 2, 10, 7, 13, 7),
)

# Light-world and shadow-world walls for each shard room.
_SHARD_WALLS = (
    (
        ((4, 4), (5, 4), (6, 4), (4, 10), (5, 10), (6, 10)),
        ((10, 7), (4, 5), (5, 5), (6, 5), (4, 9), (5, 9), (6, 9)),
    ),
    (
        ((10, 7), (5, 5), (6, 5), (7, 5), (11, 9), (12, 9)),
        ((8, 7), (5, 9), (6, 9), (7, 9), (11, 5), (12, 5)),
    ),
    (
        ((9, 3), (5, 8), (6, 8), (7, 8), (11, 6), (12, 6)),
        ((9, 5), (5, 6), (6, 6), (7, 6), (11, 8), (12, 8)),
    ),
    (
        ((12, 7), (5, 5), (6, 5), (7, 5), (8, 5), (4, 10), (5, 10), (6, 10)),
        ((9, 7), (5, 9), (6, 9), (7, 9), (8, 9), (4, 4), (5, 4), (6, 4)),
    ),
    (
        ((13, 7), (4, 5), (5, 5), (6, 5), (7, 5), (4, 10), (5, 10), (6, 10), (7, 10)),
        ((10, 7), (4, 9), (5, 9), (6, 9), (7, 9), (4, 4), (5, 4), (6, 4), (7, 4)),
    ),
)


def inside(x, y):
    """Whether (x, y) lies on the room grid."""
    return 0 <= x < GRID and 0 <= y < GRID


def snap_door(value):
    """Clamp a coordinate into the doorway span."""
    return max(DOOR_LO, min(DOOR_HI, value))


def _empty_tiles():
    return [[Tile.EMPTY] * GRID for _ in range(GRID)]


@dataclass
class World:
    """One of the two parallel canvases of a room."""

    tiles: list = field(default_factory=_empty_tiles)
    entities: list = field(default_factory=list)

    def add_entity(self, kind, x, y, ident=0, text=None):
        """Add an entity; return False when the world already holds the maximum."""
        if len(self.entities) >= MAX_ENTITIES:
            return False
        self.entities.append(Entity(kind, x, y, ident, text))
        return True

    def add_perimeter(self):
        """Wall the edges, leaving a doorway in the middle of each side."""
        for i in range(GRID):
            if DOOR_LO <= i <= DOOR_HI:
                continue
            self.tiles[0][i] = Tile.WALL
            self.tiles[GRID - 1][i] = Tile.WALL
            self.tiles[i][0] = Tile.WALL
            self.tiles[i][GRID - 1] = Tile.WALL

    def add_walls(self, points):
        """Place walls at the given (x, y) points that lie on the grid."""
        for x, y in points:
            if inside(x, y):
                self.tiles[y][x] = Tile.WALL

    def find_entity_at(self, x, y, kind=EntityType.NONE):
        """Index of the first entity at (x, y), of the given kind unless NONE; None if absent."""
        for index, entity in enumerate(self.entities):
            if entity.x == x and entity.y == y and (kind is EntityType.NONE or entity.kind is kind):
                return index
        return None

    def has_blocking_entity(self, x, y):
        return self.find_entity_at(x, y, EntityType.NPC) is not None

    def remove_entity(self, index):
        """Remove the entity at index; None or an index out of range does nothing."""
        if index is None or not 0 <= index < len(self.entities):
            return
        del self.entities[index]

    def try_walk_or_push(self, half_type, nx, ny, dx, dy, execute=True):
        """Whether a step onto (nx, ny) is possible, pushing a shard half there if any.

        With execute set, a pushed half is actually moved.
        """
        if not inside(nx, ny):
            return False
        half = self.find_entity_at(nx, ny, half_type)
        if half is not None:
            px, py = nx + dx, ny + dy
            if not inside(px, py) or not self.tiles[py][px].walkable:
                return False
            blocking = self.find_entity_at(px, py)
            if blocking is not None and blocking != half:
                return False
            if execute:
                self.entities[half].x = px
                self.entities[half].y = py
            return True
        return self.tiles[ny][nx].walkable and not self.has_blocking_entity(nx, ny)


def build_room(rx, ry, collected=()):
    """Build the light and shadow worlds of room (rx, ry).

    Shards whose ids are in collected get no halves.
    """
    light = World()
    shadow = World()

    if (rx, ry) == (0, 0):
        light.add_entity(EntityType.NPC, 5, 7)
        light.tiles[2][2] = Tile.TREE
        light.tiles[12][12] = Tile.TREE
        shadow.tiles[3][3] = Tile.TREE
        shadow.tiles[11][11] = Tile.TREE
        return light, shadow

    if (rx, ry) == (1, 0):
        for row in light.tiles:
            row[9] = Tile.WALL
        light.add_entity(EntityType.SIGN, 3, 7, 0, "Back splits Light for five steps.")
        return light, shadow

    if (rx, ry) == (2, 0):
        for row in shadow.tiles:
            row[9] = Tile.WALL
        light.add_entity(EntityType.SIGN, 3, 7, 0, "Confirm splits Shadow unless someone speaks.")
        return light, shadow

    if (rx, ry) == (4, 0):
        light.add_entity(EntityType.NPC, 7, 6, 1)
        return light, shadow

    for ident, shard in enumerate(SHARDS):
        if (shard.rx, shard.ry) != (rx, ry):
            continue
        light_walls, shadow_walls = _SHARD_WALLS[ident]
        light.add_walls(light_walls)
        shadow.add_walls(shadow_walls)
        if ident not in collected:
            light.add_entity(EntityType.HALF_LIGHT, shard.lx, shard.ly, ident)
            shadow.add_entity(EntityType.HALF_SHADOW, shard.sx, shard.sy, ident)
        return light, shadow

    light.add_perimeter()
    shadow.add_perimeter()
    return light, shadow