"""Player walking, walk animation and screen-by-screen map scrolling."""

from __future__ import annotations

from zeldo.collision import (
    CLEAR_DOWN,
    CLEAR_LEFT,
    CLEAR_RIGHT,
    CLEAR_UP,
    PixelSource,
    map_collision_x,
    map_collision_y,
)
from zeldo.constants import Direction, Key
from zeldo.model import TILE, GameState

SCREEN_STEP = 5.0
MAP_STEP = 2.52
FRAME_MS = 130
FRAME_WIDTH = 24
FRAME_WRAP = 144
FIRST_FRAME = 7

_FACING_FRAMES = {
    Direction.RIGHT: (276, 23),
    Direction.LEFT: (216, 23),
    Direction.UP: (184, 30),
    Direction.DOWN: (243, 32),
}


def scroll_map(state: GameState) -> None:
    """Scroll to the next screen when the player reaches an edge."""
    player = state.player()
    pos = player.pos
    main = state.maps[0].rect
    if pos.y >= 950 and main.top < 3116:
        state.shift_maps(0, TILE)
        pos.y = 1.0
        player.map_y += 36.358497
    if pos.y <= 0 and main.top > 5:
        state.shift_maps(0, -TILE)
        pos.y = 932.0
        player.map_y -= 43.958497
    if pos.x <= 480 and main.left > 0:
        state.shift_maps(-TILE, 0)
        pos.x = 1428.0
        player.map_x -= 36.118652
    if pos.x >= 1430 and main.left < 3110:
        state.shift_maps(TILE, 0)
        pos.x = 482.0
        player.map_x += 35.52002


def animate_player(state: GameState) -> None:
    """Pick the frame row for the facing direction, or advance the walk cycle."""
    player = state.player()
    if not player.is_moving:
        player.rect.top, player.rect.height = _FACING_FRAMES[player.facing]
        return
    if player.clock.elapsed_ms() > FRAME_MS:
        player.rect.left += FRAME_WIDTH
        if player.rect.left >= FRAME_WRAP:
            player.rect.left = FIRST_FRAME
        player.clock.restart()


def move_player(state: GameState, key: Key | None, image: PixelSource) -> None:
    """Turn and step the player for a pressed key; no key stops walking."""
    player = state.player()
    main = state.maps[0].rect
    if key is Key.D:
        player.is_moving = True
        player.facing = Direction.RIGHT
        if (
            player.pos.x <= 1450
            and main.left < 4110
            and map_collision_x(state, image) == CLEAR_RIGHT
        ):
            player.pos.x += SCREEN_STEP
            player.map_x += MAP_STEP
    elif key is Key.Q:
        player.is_moving = True
        player.facing = Direction.LEFT
        if (
            player.pos.x >= 450
            and main.left > -1
            and map_collision_x(state, image) == CLEAR_LEFT
        ):
            player.pos.x -= SCREEN_STEP
            player.map_x -= MAP_STEP
    elif key is Key.Z:
        player.is_moving = True
        player.facing = Direction.UP
        if (
            player.pos.y >= 0
            and main.top > 0
            and map_collision_y(state, image) == CLEAR_UP
        ):
            player.pos.y -= SCREEN_STEP
            player.map_y -= MAP_STEP
    elif key is Key.S:
        player.is_moving = True
        player.facing = Direction.DOWN
        if (
            player.pos.y <= 950
            and main.top < 4116
            and map_collision_y(state, image) == CLEAR_DOWN
        ):
            player.pos.y += SCREEN_STEP
            player.map_y += MAP_STEP
    else:
        player.is_moving = False


def handle_player_key(state: GameState, key: Key | None, image: PixelSource) -> None:
    """Animate the player, then apply the key to its movement."""
    animate_player(state)
    move_player(state, key, image)