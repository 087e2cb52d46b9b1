"""Drawing the title, option, selection, pause, new game and game-over screens.

Every function draws onto the given surface and returns the sprites it drew,
in drawing order.
"""

from __future__ import annotations

import pygame

from zeldo.constants import SpriteId
from zeldo.model import GameState
from zeldo.resources import Resources
from zeldo.texts import TextSpec, text_specs

BLUE = (0, 0, 255)

_NAVI_TEXT = text_specs()[0]


def _draw(
    surface: pygame.Surface,
    state: GameState,
    resources: Resources,
    sprite_id: SpriteId,
    drawn: list[SpriteId],
) -> None:
    sprite = state.sprites[sprite_id]
    image = resources.sprite_image(state, sprite_id)
    surface.blit(image, (int(sprite.pos.x), int(sprite.pos.y)))
    drawn.append(sprite_id)


def _draw_layer(
    surface: pygame.Surface, state: GameState, resources: Resources, index: int
) -> None:
    layer = state.maps[index]
    rect = layer.rect
    area = pygame.Surface((max(rect.width, 0), max(rect.height, 0)), pygame.SRCALPHA)
    area.blit(
        resources.image(layer.asset),
        (0, 0),
        pygame.Rect(rect.left, rect.top, rect.width, rect.height),
    )
    size = (
        max(0, round(rect.width * layer.scale.x)),
        max(0, round(rect.height * layer.scale.y)),
    )
    surface.blit(pygame.transform.scale(area, size), (int(layer.pos.x), int(layer.pos.y)))


def _draw_text(surface: pygame.Surface, resources: Resources, spec: TextSpec) -> None:
    font = resources.font(spec.size)
    x, y = spec.pos
    for line in spec.string.split("\n"):
        if line:
            surface.blit(font.render(line, True, spec.color), (int(x), int(y)))
        y += font.get_linesize()


def _pick(state: GameState, plain: SpriteId, highlighted: SpriteId) -> SpriteId:
    return highlighted if state.sprites[plain].active else plain


def _draw_navi(
    surface: pygame.Surface,
    state: GameState,
    resources: Resources,
    drawn: list[SpriteId],
) -> None:
    if state.sprites[SpriteId.NAVI_SPRITE].active:
        _draw(surface, state, resources, SpriteId.DIALOGUE_BOX, drawn)
        _draw_text(surface, resources, _NAVI_TEXT)
    _draw(surface, state, resources, SpriteId.NAVI_SPRITE, drawn)
    _draw(surface, state, resources, SpriteId.HELP_BUBBLE, drawn)


def draw_start_game(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the title screen with its buttons and the helper fairy."""
    drawn: list[SpriteId] = []
    for sprite_id in (
        SpriteId.BACK_START,
        SpriteId.START_BUTTON,
        SpriteId.MENU_BUT,
        SpriteId.QUIT_BUTTON,
        SpriteId.LOGO,
    ):
        _draw(surface, state, resources, sprite_id, drawn)
    _draw_navi(surface, state, resources, drawn)
    return drawn


def draw_menu_button(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the volume buttons and the back button of the option menu."""
    drawn: list[SpriteId] = []
    for sprite_id in (SpriteId.SONG_MOINS, SpriteId.SONG_PLUS, SpriteId.BACK_MENU):
        _draw(surface, state, resources, sprite_id, drawn)
    return drawn


def draw_menu_in_game(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the option menu opened from the pause screen."""
    _draw_layer(surface, state, resources, 1)
    _draw_layer(surface, state, resources, 2)
    drawn = draw_menu_button(surface, state, resources)
    _draw_navi(surface, state, resources, drawn)
    return drawn


def draw_select_skin(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the skin selection screen."""
    surface.fill(BLUE)
    drawn: list[SpriteId] = []
    for sprite_id in (
        SpriteId.SELECT_BACK,
        SpriteId.GREEN_LINK,
        SpriteId.BLUE_LINK,
        SpriteId.RED_LINK,
        SpriteId.PURPLE_LINK,
        SpriteId.BACK_MENU,
        SpriteId.SELECT_ARROW,
    ):
        _draw(surface, state, resources, sprite_id, drawn)
    return drawn


def draw_menu_pause(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the pause screen, highlighting the hovered buttons."""
    _draw_layer(surface, state, resources, 1)
    _draw_layer(surface, state, resources, 2)
    drawn: list[SpriteId] = []
    for plain, highlighted in (
        (SpriteId.RESUME_BUTTON, SpriteId.RESUME_BUTTON_2),
        (SpriteId.MENU_PAUSE, SpriteId.MENU_PAUSE_2),
        (SpriteId.QUIT_BUTTON_IN_GAME, SpriteId.QUIT_BUTTON_IN_GAME_2),
        (SpriteId.SAVE_BUTTON, SpriteId.SAVE_BUTTON_2),
    ):
        _draw(surface, state, resources, _pick(state, plain, highlighted), drawn)
    _draw(surface, state, resources, SpriteId.BACK_MENU, drawn)
    return drawn


def draw_new_game(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the new game / load game screen."""
    surface.fill(BLUE)
    drawn: list[SpriteId] = []
    for sprite_id in (SpriteId.SELECT_BACK, SpriteId.BACK_MENU, SpriteId.LOGO):
        _draw(surface, state, resources, sprite_id, drawn)
    for plain, highlighted in (
        (SpriteId.LOAD_GAME, SpriteId.LOAD_GAME_2),
        (SpriteId.NEW_GAME, SpriteId.NEW_GAME_2),
    ):
        _draw(surface, state, resources, _pick(state, plain, highlighted), drawn)
    return drawn


def draw_game_over(
    surface: pygame.Surface, state: GameState, resources: Resources
) -> list[SpriteId]:
    """Draw the restart and quit buttons of the game-over screen."""
    drawn: list[SpriteId] = []
    for plain, highlighted in (
        (SpriteId.RESTART, SpriteId.RESTART_2),
        (SpriteId.QUIT_BUTTON_IN_GAME, SpriteId.QUIT_BUTTON_IN_GAME_2),
    ):
        _draw(surface, state, resources, _pick(state, plain, highlighted), drawn)
    return drawn