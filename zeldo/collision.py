"""Walkability checks against the collision image of the map.

White pixels in the collision image are walkable ground. The player may
step in a direction only when a small probe area next to its feet is
entirely white.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from zeldo.constants import Direction
from zeldo.model import GameState

CLEAR_UP = 1
CLEAR_DOWN = 2
CLEAR_LEFT = 3
CLEAR_RIGHT = 4
BLOCKED = 0


class PixelSource(Protocol):
    """Anything that can report the colour of a pixel, like a pygame Surface."""

    def get_at(self, pos: tuple[int, int]) -> Sequence[int]:
        ...


def is_white(color: Sequence[int]) -> bool:
    """True if the colour's red, green and blue channels are all 255."""
    return color[0] == 255 and color[1] == 255 and color[2] == 255


def _pixel_is_white(image: PixelSource, x: int, y: int) -> bool:
    try:
        color = image.get_at((x, y))
    except IndexError:
        return False
    return is_white(color)


def _area_clear(image: PixelSource, left: int, top: int, width: int, height: int) -> bool:
    return all(
        _pixel_is_white(image, x, y)
        for y in range(top, top + height)
        for x in range(left, left + width)
    )


def collision_up(image: PixelSource, x: Any, y: Any) -> bool:
    """True if the 6x4 area above the feet of a player at (x, y) is walkable."""
    return _area_clear(image, int(x) + 11, int(y) + 19, 6, 4)


def collision_down(image: PixelSource, x: Any, y: Any) -> bool:
    """True if the 6x4 area below the feet of a player at (x, y) is walkable."""
    return _area_clear(image, int(x) + 11, int(y) + 31, 6, 4)


def collision_left(image: PixelSource, x: Any, y: Any) -> bool:
    """True if the 4x9 area left of a player at (x, y) is walkable."""
    return _area_clear(image, int(x) - 5, int(y) + 22, 4, 9)


def collision_right(image: PixelSource, x: Any, y: Any) -> bool:
    """True if the 4x9 area right of a player at (x, y) is walkable."""
    return _area_clear(image, int(x) + 23, int(y) + 22, 4, 9)


def map_collision_y(state: GameState, image: PixelSource) -> int:
    """CLEAR_UP or CLEAR_DOWN if the player may move where it faces, else BLOCKED."""
    player = state.player()
    if player.facing is Direction.UP and collision_up(image, player.map_x, player.map_y):
        return CLEAR_UP
    if player.facing is Direction.DOWN and collision_down(
        image, player.map_x, player.map_y
    ):
        return CLEAR_DOWN
    return BLOCKED


def map_collision_x(state: GameState, image: PixelSource) -> int:
    """CLEAR_LEFT or CLEAR_RIGHT if the player may move where it faces, else BLOCKED."""
    player = state.player()
    if player.facing is Direction.LEFT and collision_left(
        image, player.map_x, player.map_y
    ):
        return CLEAR_LEFT
    if player.facing is Direction.RIGHT and collision_right(
        image, player.map_x, player.map_y
    ):
        return CLEAR_RIGHT
    return BLOCKED