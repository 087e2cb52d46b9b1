"""The inventory window and the item labels shown on hover."""

from __future__ import annotations

from zeldo.constants import SpriteId
from zeldo.model import GameState, SpriteState

SWORD_TEXT = 4
SHIELD_TEXT = 5
PENDENTIF_TEXT = 6


def toggle_inventory(state: GameState) -> bool:
    """Open or close the inventory and return whether it is now open."""
    inventory = state.sprites[SpriteId.INV]
    inventory.active = not inventory.active
    return inventory.active


def _hovers(sprite: SpriteState, mouse: tuple[int, int]) -> bool:
    x, y = mouse
    return (
        sprite.pos.x - 10 <= x <= sprite.pos.x + 40
        and sprite.pos.y - 10 <= y <= sprite.pos.y + 40
    )


def hovered_item_texts(state: GameState, mouse: tuple[int, int]) -> list[int]:
    """Indices of the item labels to show for the mouse position."""
    state.mouse = mouse
    sprites = state.sprites
    texts = []
    if _hovers(sprites[SpriteId.SWORD], mouse):
        texts.append(SWORD_TEXT)
    if _hovers(sprites[SpriteId.SHIELD], mouse):
        texts.append(SHIELD_TEXT)
    pendant = sprites[SpriteId.PENDENTIF]
    if _hovers(pendant, mouse) and pendant.active:
        texts.append(PENDENTIF_TEXT)
    return texts