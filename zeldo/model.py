"""Game state: geometry helpers, entities and the initial world."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from zeldo.constants import (
    ARCHES_ASSETS,
    COLISION_ASSETS,
    MAP_ASSETS,
    MAP_BLUR_ASSETS,
    SKIN_ASSETS,
    Direction,
    SpriteId,
)

TILE = 514
MAP_SCALE = 1.98
PLAYER_SCALE = 2.5
START_POS = (830.0, 550.0)
START_MAP_X = 2238.0
START_MAP_Y = 2853.0
START_LIFE = 120
START_DMG = 2
SBIRE_LIFE = 2


@dataclass
class Vector:
    """A 2D point or size."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class IntRect:
    """An integer rectangle, used for texture areas."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class FloatRect:
    """A floating-point rectangle, used for on-screen bounds."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span(self) -> tuple[float, float, float, float]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            max(self.left, right),
            min(self.top, bottom),
            max(self.top, bottom),
        )

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; right and bottom edges excluded."""
        min_x, max_x, min_y, max_y = self._span()
        return min_x <= x < max_x and min_y <= y < max_y

    def intersects(self, other: FloatRect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        a_min_x, a_max_x, a_min_y, a_max_y = self._span()
        b_min_x, b_max_x, b_min_y, b_max_y = other._span()
        return max(a_min_x, b_min_x) < min(a_max_x, b_max_x) and max(
            a_min_y, b_min_y
        ) < min(a_max_y, b_max_y)


class Clock:
    """Measures time elapsed since creation or the last restart."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._start = now()

    def elapsed_ms(self) -> int:
        """Whole milliseconds elapsed."""
        return int((self._now() - self._start) * 1000)

    def restart(self) -> int:
        """Restart the clock and return the milliseconds that had elapsed."""
        elapsed = self.elapsed_ms()
        self._start = self._now()
        return elapsed


@dataclass
class SpriteState:
    """Position, scale, texture area and flag of one sprite."""

    asset: str = ""
    pos: Vector = field(default_factory=Vector)
    scale: Vector = field(default_factory=lambda: Vector(1.0, 1.0))
    rect: IntRect | None = None
    active: bool = False
    clock: Clock = field(default_factory=Clock)
    texture_size: tuple[int, int] = (0, 0)

    def bounds(self) -> FloatRect:
        """On-screen bounds of the sprite."""
        if self.rect is not None:
            width, height = self.rect.width, self.rect.height
        else:
            width, height = self.texture_size
        return FloatRect(
            self.pos.x, self.pos.y, width * self.scale.x, height * self.scale.y
        )


@dataclass
class Player:
    """The hero in one of its four skins."""

    asset: str
    life: int = 0
    dmg: int = 0
    scale: Vector = field(default_factory=lambda: Vector(PLAYER_SCALE, PLAYER_SCALE))
    pos: Vector = field(default_factory=lambda: Vector(*START_POS))
    rect: IntRect = field(default_factory=lambda: IntRect(7, 216, 24, 28))
    facing: Direction = Direction.LEFT
    is_moving: bool = False
    clock: Clock = field(default_factory=Clock)
    map_x: float = START_MAP_X
    map_y: float = START_MAP_Y


@dataclass
class MapLayer:
    """One layer of the scrolling map."""

    asset: str
    rect: IntRect
    pos: Vector
    scale: Vector = field(default_factory=lambda: Vector(MAP_SCALE, MAP_SCALE))


@dataclass
class Fight:
    """State of the sword attack animation."""

    click: bool = False
    rect: IntRect = field(default_factory=lambda: IntRect(140, 10, 40, 42))
    check: int = 0


@dataclass
class Sbire:
    """The enemy's statistics."""

    life: int = 0
    dmg: int = 0


@dataclass
class Music:
    """Background music settings."""

    volume: float = 100.0
    level: float = 100.0


def _default_sprites() -> dict[SpriteId, SpriteState]:
    return {sprite_id: SpriteState() for sprite_id in SpriteId}


def _default_maps() -> list[MapLayer]:
    left = TILE * 4
    top = TILE * 5
    return [
        MapLayer(MAP_ASSETS, IntRect(left, top, 512, 511), Vector(480.0, 0.0)),
        MapLayer(MAP_BLUR_ASSETS, IntRect(left, top, 256, 511), Vector(0.0, 0.0)),
        MapLayer(
            MAP_BLUR_ASSETS,
            IntRect(int(TILE * 4.5), top, 256, 511),
            Vector(1456.0, 0.0),
        ),
        MapLayer(COLISION_ASSETS, IntRect(left, top, 513, 512), Vector(480.0, 0.0)),
        MapLayer(ARCHES_ASSETS, IntRect(left, top, 513, 512), Vector(480.0, 0.0)),
    ]


@dataclass
class GameState:
    """Everything the game tracks between frames."""

    sprites: dict[SpriteId, SpriteState] = field(default_factory=_default_sprites)
    players: list[Player] = field(
        default_factory=lambda: [Player(asset) for asset in SKIN_ASSETS]
    )
    maps: list[MapLayer] = field(default_factory=_default_maps)
    fight: Fight = field(default_factory=Fight)
    sbire: Sbire = field(default_factory=Sbire)
    music: Music = field(default_factory=Music)
    skin: int = 0
    mouse: tuple[int, int] = (0, 0)

    def player(self) -> Player:
        """The player for the chosen skin."""
        return self.players[self.skin]

    def shift_maps(self, dx: int, dy: int) -> None:
        """Scroll every map layer by the given texture offset."""
        for layer in self.maps:
            layer.rect.left += dx
            layer.rect.top += dy


def init_life(state: GameState) -> None:
    """Give the hero and the enemy their starting statistics."""
    state.sbire.life = SBIRE_LIFE
    for player in state.players:
        player.life = START_LIFE
        player.dmg = START_DMG


def new_game_state() -> GameState:
    """A freshly set-up game state."""
    state = GameState()
    init_life(state)
    return state


def reset_to_start(state: GameState) -> None:
    """Put players, map and quest flags back to the start of a new game."""
    for player in state.players:
        player.pos = Vector(*START_POS)
        player.map_x = START_MAP_X
        player.map_y = START_MAP_Y
        player.facing = Direction.LEFT
        player.life = START_LIFE
    lefts = (TILE * 4, TILE * 4, int(TILE * 4.5), TILE * 4, TILE * 4)
    for layer, left in zip(state.maps, lefts):
        layer.rect.left = left
        layer.rect.top = 515 * 5
    sprites = state.sprites
    sprites[SpriteId.QUEST_PNJ_2].active = False
    sprites[SpriteId.BACK_START].active = True
    sprites[SpriteId.BASIC_HEART].active = True
    sprites[SpriteId.PENDENTIF].active = False
    sprites[SpriteId.QUEST_BOX].pos = Vector(620.0, 540.0)


def resize_low_window(sprite: SpriteState) -> Vector:
    """Scale a sprite's position from 1920x1080 down to 1080x720."""
    sprite.pos.y = (720 * sprite.pos.y) / 1080
    sprite.pos.x = (1080 * sprite.pos.x) / 1920
    return sprite.pos


def resize_high_window(sprite: SpriteState) -> Vector:
    """Scale a sprite's position from 1080x720 up to 1920x1080."""
    sprite.pos.y = (1080 * sprite.pos.y) / 720
    sprite.pos.x = (1920 * sprite.pos.x) / 1080
    return sprite.pos