"""Choosing the hero's skin with the selection arrow."""

from __future__ import annotations

from zeldo.constants import Key, SpriteId
from zeldo.hitbox import hits_button
from zeldo.model import GameState, Vector

ARROW_Y = 300.0
HOVER_DX = 2
HOVER_DY = 35

# Arrow x position above each link sprite, in the order the hover checks run.
_HOVER_TARGETS = (
    (SpriteId.GREEN_LINK, 330.0),
    (SpriteId.RED_LINK, 1130.0),
    (SpriteId.BLUE_LINK, 730.0),
    (SpriteId.PURPLE_LINK, 1530.0),
)

_LEFT_OF = {730.0: 330.0, 1130.0: 730.0, 1530.0: 1130.0}
_RIGHT_OF = {330.0: 730.0, 730.0: 1130.0, 1130.0: 1530.0}
_SKIN_AT = {330.0: 0, 730.0: 2, 1130.0: 1, 1530.0: 3}

_LEFT_KEYS = (Key.Q, Key.LEFT)
_RIGHT_KEYS = (Key.D, Key.RIGHT)


def _place_arrow(state: GameState, x: float) -> None:
    state.sprites[SpriteId.SELECT_ARROW].pos = Vector(x, ARROW_Y)


def hover_select(state: GameState, mouse: tuple[float, float]) -> Vector:
    """Move the arrow above the link under the mouse; return its position."""
    for sprite_id, arrow_x in _HOVER_TARGETS:
        bounds = state.sprites[sprite_id].bounds()
        if hits_button(bounds, mouse, HOVER_DX, HOVER_DY):
            _place_arrow(state, arrow_x)
    return state.sprites[SpriteId.SELECT_ARROW].pos


def move_arrow(state: GameState, key: Key | None) -> float:
    """Step the arrow one link left or right for a pressed key; return its x."""
    arrow = state.sprites[SpriteId.SELECT_ARROW]
    if key in _LEFT_KEYS and arrow.pos.x in _LEFT_OF:
        _place_arrow(state, _LEFT_OF[arrow.pos.x])
    elif key in _RIGHT_KEYS and arrow.pos.x in _RIGHT_OF:
        _place_arrow(state, _RIGHT_OF[arrow.pos.x])
    return state.sprites[SpriteId.SELECT_ARROW].pos.x


def choose_skin(state: GameState, key: Key | None, mouse_pressed: bool) -> int | None:
    """Pick the skin under the arrow on Enter or a click; return it, or None."""
    if key is not Key.ENTER and not mouse_pressed:
        return None
    skin = _SKIN_AT.get(state.sprites[SpriteId.SELECT_ARROW].pos.x)
    if skin is not None:
        state.skin = skin
    return skin