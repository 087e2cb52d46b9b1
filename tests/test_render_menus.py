from pathlib import Path

import pygame
import pytest

from zeldo.constants import SKIN_ASSETS, SpriteId
from zeldo.layout_game import all_specs
from zeldo.model import GameState
from zeldo.render_menus import (
    BLUE,
    draw_game_over,
    draw_menu_button,
    draw_menu_in_game,
    draw_menu_pause,
    draw_new_game,
    draw_select_skin,
    draw_start_game,
)
from zeldo.resources import Resources, create_state

RED = (255, 0, 0, 255)


def _make_assets(root: Path) -> None:
    assets = {spec.asset for spec in all_specs().values()}
    assets |= {layer.asset for layer in GameState().maps}
    assets |= set(SKIN_ASSETS)
    for asset in assets:
        path = root / asset
        path.parent.mkdir(parents=True, exist_ok=True)
        image = pygame.Surface((20, 20), pygame.SRCALPHA)
        image.fill(RED)
        pygame.image.save(image, str(path))


@pytest.fixture
def env(tmp_path):
    _make_assets(tmp_path)
    resources = Resources(tmp_path)
    state = create_state(resources)
    surface = pygame.Surface((1920, 1080))
    yield surface, state, resources
    resources.close()


def test_start_game_without_navi_dialogue(env):
    surface, state, resources = env
    state.sprites[SpriteId.NAVI_SPRITE].active = False
    assert draw_start_game(surface, state, resources) == [
        SpriteId.BACK_START,
        SpriteId.START_BUTTON,
        SpriteId.MENU_BUT,
        SpriteId.QUIT_BUTTON,
        SpriteId.LOGO,
        SpriteId.NAVI_SPRITE,
        SpriteId.HELP_BUBBLE,
    ]


def test_start_game_with_navi_dialogue(env):
    surface, state, resources = env
    state.sprites[SpriteId.NAVI_SPRITE].active = True
    drawn = draw_start_game(surface, state, resources)
    assert drawn.index(SpriteId.DIALOGUE_BOX) == drawn.index(SpriteId.LOGO) + 1
    assert drawn[-2:] == [SpriteId.NAVI_SPRITE, SpriteId.HELP_BUBBLE]


def test_menu_button_order(env):
    surface, state, resources = env
    assert draw_menu_button(surface, state, resources) == [
        SpriteId.SONG_MOINS,
        SpriteId.SONG_PLUS,
        SpriteId.BACK_MENU,
    ]


def test_menu_in_game_includes_navi(env):
    surface, state, resources = env
    state.sprites[SpriteId.NAVI_SPRITE].active = True
    drawn = draw_menu_in_game(surface, state, resources)
    assert drawn[:3] == [SpriteId.SONG_MOINS, SpriteId.SONG_PLUS, SpriteId.BACK_MENU]
    assert SpriteId.DIALOGUE_BOX in drawn
    assert drawn[-1] == SpriteId.HELP_BUBBLE


def test_select_skin_fills_blue_and_draws_arrow_last(env):
    surface, state, resources = env
    drawn = draw_select_skin(surface, state, resources)
    assert drawn[0] == SpriteId.SELECT_BACK
    assert drawn[-1] == SpriteId.SELECT_ARROW
    assert surface.get_at((1900, 1070)) == pygame.Color(*BLUE)


@pytest.mark.parametrize(
    "active, expected",
    [(False, SpriteId.RESUME_BUTTON), (True, SpriteId.RESUME_BUTTON_2)],
)
def test_pause_highlights_resume(env, active, expected):
    surface, state, resources = env
    state.sprites[SpriteId.RESUME_BUTTON].active = active
    drawn = draw_menu_pause(surface, state, resources)
    assert drawn[0] == expected
    assert drawn[-1] == SpriteId.BACK_MENU
    assert len(drawn) == 5


def test_new_game_highlights_load(env):
    surface, state, resources = env
    state.sprites[SpriteId.LOAD_GAME].active = True
    state.sprites[SpriteId.NEW_GAME].active = False
    drawn = draw_new_game(surface, state, resources)
    assert SpriteId.LOAD_GAME_2 in drawn
    assert SpriteId.NEW_GAME in drawn
    assert SpriteId.LOAD_GAME not in drawn
    assert surface.get_at((1900, 1070)) == pygame.Color(*BLUE)


def test_game_over_draws_restart_pixels(env):
    surface, state, resources = env
    state.sprites[SpriteId.RESTART].active = True
    drawn = draw_game_over(surface, state, resources)
    assert drawn == [SpriteId.RESTART_2, SpriteId.QUIT_BUTTON_IN_GAME]
    restart = state.sprites[SpriteId.RESTART_2].pos
    assert surface.get_at((int(restart.x) + 5, int(restart.y) + 5)) == pygame.Color(*RED)