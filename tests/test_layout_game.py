from zeldo.constants import (
    BASIC_HEART_ASSETS,
    GREEN_SBIRE_ASSETS,
    SpriteId,
)
from zeldo.layout import menu_specs
from zeldo.layout_game import all_specs, game_specs


def test_all_specs_cover_every_sprite():
    assert set(all_specs()) == set(SpriteId)


def test_game_and_menu_specs_do_not_overlap():
    assert set(game_specs()).isdisjoint(menu_specs())


def test_all_specs_keep_menu_entries():
    specs = all_specs()
    for sprite_id, spec in menu_specs().items():
        assert specs[sprite_id] == spec


def test_heart_starts_active():
    spec = game_specs()[SpriteId.BASIC_HEART]
    assert spec.active is True
    assert spec.asset == BASIC_HEART_ASSETS
    assert game_specs()[SpriteId.EMPTY_HEART].active is False


def test_sbire_spec_from_source():
    spec = game_specs()[SpriteId.GREEN_SBIRE]
    assert spec.asset == GREEN_SBIRE_ASSETS
    assert spec.pos == (998.0, 372.0)
    assert spec.rect == (0, 0, 28, 36)
    assert spec.scale == (2.5, 2.5)


def test_pressed_variants_share_position():
    specs = game_specs()
    pairs = [
        (SpriteId.RESUME_BUTTON, SpriteId.RESUME_BUTTON_2),
        (SpriteId.SAVE_BUTTON, SpriteId.SAVE_BUTTON_2),
        (SpriteId.MENU_PAUSE, SpriteId.MENU_PAUSE_2),
        (SpriteId.QUIT_BUTTON_IN_GAME, SpriteId.QUIT_BUTTON_IN_GAME_2),
        (SpriteId.RESTART, SpriteId.RESTART_2),
    ]
    for first, second in pairs:
        assert specs[first].pos == specs[second].pos
        assert specs[first].asset != specs[second].asset


def test_resume_button_position():
    assert game_specs()[SpriteId.RESUME_BUTTON].pos == (830.0, 200.0)


def test_to_state_gives_independent_states():
    spec = all_specs()[SpriteId.GREEN_SBIRE]
    first = spec.to_state()
    second = spec.to_state()
    first.pos.y += 5
    first.rect.top = 80
    assert second.pos.y == spec.pos[1]
    assert second.rect.top == spec.rect[1]