"""Sound and window settings from the option menus."""

from __future__ import annotations

from zeldo.constants import SpriteId
from zeldo.model import GameState, resize_high_window, resize_low_window

VOLUME_STEP = 20.0
VOLUME_MAX = 100.0
VOLUME_MIN = 0.0
LOW_WINDOW = (1080, 720)
HIGH_WINDOW = (1920, 1080)


def toggle_mute(state: GameState) -> bool:
    """Switch the mute flag and return whether sound is now muted."""
    button = state.sprites[SpriteId.SONG_UNMUTE]
    button.active = not button.active
    return button.active


def apply_mute(state: GameState, was_muted: bool) -> bool:
    """Set the music level from the mute flag; return whether it is muted now.

    When sound comes back after being muted the caller restarts the music.
    """
    if not state.sprites[SpriteId.SONG_UNMUTE].active:
        state.music.level = state.music.volume
        return False
    state.music.level = VOLUME_MIN
    return True


def decrease_volume(state: GameState, current: float | None = None) -> float:
    """Lower the music by one step from its current level; return the new level."""
    level = state.music.level if current is None else current
    if level < VOLUME_MIN:
        level = VOLUME_MIN
    if level != VOLUME_MIN:
        level -= VOLUME_STEP
        state.music.volume = level
    state.music.level = level
    return level


def increase_volume(state: GameState, current: float | None = None) -> float:
    """Raise the music by one step from its current level; return the new level."""
    level = state.music.level if current is None else current
    if level > VOLUME_MAX:
        level = VOLUME_MAX
    if level != VOLUME_MAX:
        level += VOLUME_STEP
        state.music.volume = level
    state.music.level = level
    return level


def toggle_window_mode(state: GameState) -> tuple[int, int]:
    """Switch between the large and small window; return the new window size."""
    button = state.sprites[SpriteId.BUTTON_WINDOW]
    if button.active:
        resize = resize_low_window
        size = LOW_WINDOW
    else:
        resize = resize_high_window
        size = HIGH_WINDOW
    for sprite in state.sprites.values():
        resize(sprite)
    button.active = not button.active
    return size