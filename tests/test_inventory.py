from zeldo.constants import SpriteId
from zeldo.inventory import (
    PENDENTIF_TEXT,
    SHIELD_TEXT,
    SWORD_TEXT,
    hovered_item_texts,
    toggle_inventory,
)
from zeldo.model import Vector, new_game_state


def _state():
    state = new_game_state()
    state.sprites[SpriteId.SWORD].pos = Vector(740.0, 400.0)
    state.sprites[SpriteId.SHIELD].pos = Vector(805.0, 400.0)
    state.sprites[SpriteId.PENDENTIF].pos = Vector(868.0, 400.0)
    return state


def test_toggle_inventory_round_trip():
    state = new_game_state()
    assert toggle_inventory(state) is True
    assert state.sprites[SpriteId.INV].active is True
    assert toggle_inventory(state) is False
    assert state.sprites[SpriteId.INV].active is False


def test_hover_sword_and_records_mouse():
    state = _state()
    assert hovered_item_texts(state, (740, 400)) == [SWORD_TEXT]
    assert state.mouse == (740, 400)


def test_hover_edges():
    state = _state()
    assert hovered_item_texts(state, (730, 390)) == [SWORD_TEXT]
    assert hovered_item_texts(state, (781, 400)) == []


def test_hover_shield():
    state = _state()
    assert hovered_item_texts(state, (805, 400)) == [SHIELD_TEXT]


def test_pendant_label_needs_pendant():
    state = _state()
    assert hovered_item_texts(state, (868, 400)) == []
    state.sprites[SpriteId.PENDENTIF].active = True
    assert hovered_item_texts(state, (868, 400)) == [PENDENTIF_TEXT]


def test_overlapping_items_in_order():
    state = _state()
    state.sprites[SpriteId.PENDENTIF].active = True
    state.sprites[SpriteId.SHIELD].pos = Vector(740.0, 400.0)
    state.sprites[SpriteId.PENDENTIF].pos = Vector(740.0, 400.0)
    assert hovered_item_texts(state, (750, 410)) == [
        SWORD_TEXT,
        SHIELD_TEXT,
        PENDENTIF_TEXT,
    ]