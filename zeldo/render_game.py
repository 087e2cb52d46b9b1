"""Drawing the world screen: map, characters, quests, hearts and inventory."""

from __future__ import annotations

import pygame

from zeldo.combat import take_heart
from zeldo.constants import SpriteId
from zeldo.inventory import hovered_item_texts
from zeldo.model import GameState, IntRect, Vector
from zeldo.resources import Resources
from zeldo.texts import TextSpec, place_quest_box_top, text_specs

HEART_Y = 25.0
HEART_XS = (50.0, 105.0, 160.0, 215.0)
HEART_PICKUP_POS = (1257.0, 460.0)

ZELDO_SPOT = (2570, 2575)
FIRST_PNJ_SPOT = (2056, 2575)
SECOND_PNJ_SPOT = (3084, 2061)
HEART_SPOT = (3084, 2575)

QUEST_START = 1
QUEST_BROTHER = 2
QUEST_END = 3

_TEXTS = text_specs()


def heart_slots(life: int, heart_pickup_active: bool) -> list[tuple[float, bool]]:
    """Hearts to draw as (x, full) in drawing order: full ones, then empty ones."""
    first, second, third, fourth = HEART_XS
    slots: list[tuple[float, bool]] = []
    if life > 0:
        slots.append((first, True))
    if life > 40:
        slots.append((second, True))
    if life > 80:
        slots.append((third, True))
    if not heart_pickup_active:
        slots.append((fourth, True))
    if life <= 0:
        slots.append((first, False))
    if life <= 40:
        slots.append((second, False))
    if life <= 80:
        slots.append((third, False))
    if life < 160 and not heart_pickup_active:
        slots.append((fourth, False))
    return slots


def _at(state: GameState, spot: tuple[int, int]) -> bool:
    rect = state.maps[0].rect
    return (rect.left, rect.top) == spot


def _first_pnj_texts(state: GameState) -> list[int]:
    if not _at(state, FIRST_PNJ_SPOT):
        return []
    sprites = state.sprites
    sprites[SpriteId.QUEST_BOX].pos = Vector(620.0, 540.0)
    near = state.player().pos.y >= 687
    texts = []
    if near and not sprites[SpriteId.QUEST_PNJ_2].active:
        texts.append(QUEST_START)
    if near and sprites[SpriteId.QUEST_PNJ_2].active:
        sprites[SpriteId.PENDENTIF].active = False
        texts.append(QUEST_END)
    return texts


def _second_pnj_texts(state: GameState) -> list[int]:
    if not _at(state, SECOND_PNJ_SPOT) or state.player().pos.y > 217:
        return []
    state.sprites[SpriteId.QUEST_PNJ_2].active = True
    state.sprites[SpriteId.PENDENTIF].active = True
    place_quest_box_top(state)
    return [QUEST_BROTHER]


def visible_quest_texts(state: GameState) -> list[int]:
    """Quest texts to show this frame, updating the quest flags on the way."""
    return _first_pnj_texts(state) + _second_pnj_texts(state)


def _crop_scaled(
    image: pygame.Surface, rect: IntRect, scale: Vector
) -> pygame.Surface:
    area = pygame.Surface((max(rect.width, 0), max(rect.height, 0)), pygame.SRCALPHA)
    area.blit(image, (0, 0), pygame.Rect(rect.left, rect.top, rect.width, rect.height))
    size = (max(0, round(rect.width * scale.x)), max(0, round(rect.height * scale.y)))
    return pygame.transform.scale(area, size)


def _blit(surface: pygame.Surface, image: pygame.Surface, x: float, y: float) -> None:
    surface.blit(image, (int(x), int(y)))


def _draw_sprite(
    surface: pygame.Surface,
    state: GameState,
    resources: Resources,
    sprite_id: SpriteId,
    pos: tuple[float, float] | None = None,
) -> None:
    sprite = state.sprites[sprite_id]
    x, y = (sprite.pos.x, sprite.pos.y) if pos is None else pos
    _blit(surface, resources.sprite_image(state, sprite_id), x, y)


def _draw_layer(
    surface: pygame.Surface, state: GameState, resources: Resources, index: int
) -> None:
    layer = state.maps[index]
    image = _crop_scaled(resources.image(layer.asset), layer.rect, layer.scale)
    _blit(surface, image, layer.pos.x, layer.pos.y)


def _draw_text(surface: pygame.Surface, resources: Resources, spec: TextSpec) -> None:
    font = resources.font(spec.size)
    x, y = spec.pos
    for line in spec.string.split("\n"):
        if line:
            _blit(surface, font.render(line, True, spec.color), x, y)
        y += font.get_linesize()


def _draw_quest(
    surface: pygame.Surface, state: GameState, resources: Resources, texts: list[int]
) -> None:
    for index in texts:
        _draw_sprite(surface, state, resources, SpriteId.QUEST_BOX)
        _draw_text(surface, resources, _TEXTS[index])


def _draw_player(surface: pygame.Surface, state: GameState, resources: Resources) -> None:
    player = state.player()
    rect = state.fight.rect if state.fight.click else player.rect
    image = _crop_scaled(resources.image(player.asset), rect, player.scale)
    _blit(surface, image, player.pos.x, player.pos.y)


def _draw_hearts(surface: pygame.Surface, state: GameState, resources: Resources) -> None:
    pickup_active = state.sprites[SpriteId.BASIC_HEART].active
    for x, full in heart_slots(state.player().life, pickup_active):
        sprite_id = SpriteId.BASIC_HEART if full else SpriteId.EMPTY_HEART
        _draw_sprite(surface, state, resources, sprite_id, (x, HEART_Y))


def _draw_inventory(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> None:
    sprites = state.sprites
    if not sprites[SpriteId.INV].active:
        return
    _draw_sprite(surface, state, resources, SpriteId.INV)
    if sprites[SpriteId.PENDENTIF].active:
        _draw_sprite(surface, state, resources, SpriteId.PENDENTIF)
    _draw_sprite(surface, state, resources, SpriteId.SWORD)
    _draw_sprite(surface, state, resources, SpriteId.SHIELD)
    for index in hovered_item_texts(state, state.mouse):
        _draw_text(surface, resources, _TEXTS[index])


def draw_game(surface: pygame.Surface, state: GameState, resources: Resources) -> None:
    """Draw one frame of the world screen onto the surface."""
    sprites = state.sprites
    for index in (1, 2, 0):
        _draw_layer(surface, state, resources, index)
    if _at(state, ZELDO_SPOT):
        _draw_sprite(surface, state, resources, SpriteId.ZELDO_PNJ)
        if not sprites[SpriteId.BACK_START].active:
            _draw_sprite(surface, state, resources, SpriteId.GREEN_SBIRE)
    if _at(state, HEART_SPOT):
        if sprites[SpriteId.BASIC_HEART].active:
            _draw_sprite(
                surface, state, resources, SpriteId.BASIC_HEART, HEART_PICKUP_POS
            )
        take_heart(state)
    if _at(state, FIRST_PNJ_SPOT):
        _draw_sprite(surface, state, resources, SpriteId.QUEST_PNJ_1)
    _draw_quest(surface, state, resources, _first_pnj_texts(state))
    if _at(state, SECOND_PNJ_SPOT):
        _draw_sprite(surface, state, resources, SpriteId.QUEST_PNJ_2)
    _draw_player(surface, state, resources)
    _draw_hearts(surface, state, resources)
    _draw_layer(surface, state, resources, 4)
    _draw_quest(surface, state, resources, _second_pnj_texts(state))
    _draw_inventory(surface, state, resources)