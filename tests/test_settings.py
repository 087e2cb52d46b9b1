import pytest

from zeldo.constants import SpriteId
from zeldo.model import Vector, new_game_state
from zeldo.settings import (
    apply_mute,
    decrease_volume,
    increase_volume,
    toggle_mute,
    toggle_window_mode,
)


@pytest.fixture
def state():
    return new_game_state()


def test_toggle_mute_flips(state):
    assert toggle_mute(state) is True
    assert state.sprites[SpriteId.SONG_UNMUTE].active is True
    assert toggle_mute(state) is False
    assert state.sprites[SpriteId.SONG_UNMUTE].active is False


def test_apply_mute_when_muted_silences(state):
    toggle_mute(state)
    assert apply_mute(state, False) is True
    assert state.music.level == 0.0
    assert state.music.volume == 100.0


def test_apply_mute_when_unmuted_restores_volume(state):
    state.music.volume = 60.0
    state.music.level = 0.0
    assert apply_mute(state, True) is False
    assert state.music.level == state.music.volume


def test_decrease_once(state):
    assert decrease_volume(state, 100.0) == 80.0
    assert state.music.volume == state.music.level == 80.0


def test_decrease_stops_at_zero(state):
    levels = [decrease_volume(state) for _ in range(7)]
    assert levels[-1] == 0.0
    assert levels[-2] == 0.0
    assert all(a >= b for a, b in zip(levels, levels[1:]))


def test_decrease_clamps_negative(state):
    state.music.volume = 40.0
    assert decrease_volume(state, -5.0) == 0.0
    assert state.music.volume == 40.0


def test_increase_at_max_unchanged(state):
    assert increase_volume(state, 100.0) == 100.0


def test_increase_clamps_over_max(state):
    assert increase_volume(state, 130.0) == 100.0


def test_decrease_then_increase_round_trip(state):
    decrease_volume(state)
    decrease_volume(state)
    increase_volume(state)
    assert increase_volume(state) == 100.0
    assert state.music.volume == 100.0


def test_toggle_window_mode_round_trip(state):
    state.sprites[SpriteId.BUTTON_WINDOW].active = True
    state.sprites[SpriteId.LOGO].pos = Vector(1920.0, 1080.0)
    state.sprites[SpriteId.QUIT_BUTTON].pos = Vector(1700.0, 950.0)
    assert toggle_window_mode(state) == (1080, 720)
    logo = state.sprites[SpriteId.LOGO].pos
    assert (logo.x, logo.y) == pytest.approx((1080.0, 720.0))
    assert state.sprites[SpriteId.BUTTON_WINDOW].active is False
    assert toggle_window_mode(state) == (1920, 1080)
    quit_pos = state.sprites[SpriteId.QUIT_BUTTON].pos
    assert (quit_pos.x, quit_pos.y) == pytest.approx((1700.0, 950.0))
    assert state.sprites[SpriteId.BUTTON_WINDOW].active is True


def test_toggle_window_mode_from_small(state):
    state.sprites[SpriteId.BUTTON_WINDOW].active = False
    state.sprites[SpriteId.LOGO].pos = Vector(1080.0, 720.0)
    assert toggle_window_mode(state) == (1920, 1080)
    logo = state.sprites[SpriteId.LOGO].pos
    assert (logo.x, logo.y) == pytest.approx((1920.0, 1080.0))