"""Start positions, scales and texture areas of the in-game sprites."""

from __future__ import annotations

from zeldo.constants import (
    BASIC_HEART_ASSETS,
    EMPTY_HEART_ASSETS,
    GAME_OVER_ASSETS,
    GREEN_SBIRE_ASSETS,
    INVENTORY,
    MENU_PAUSE_2_ASSETS,
    MENU_PAUSE_ASSETS,
    PENDENTIF_ASSETS,
    QUIT_BUTTON_GAME_2_ASSETS,
    QUIT_BUTTON_GAME_ASSETS,
    RESTART_2_ASSETS,
    RESTART_ASSETS,
    RESUME_BUTTON_2_ASSETS,
    RESUME_BUTTON_ASSETS,
    SAVE_BUTTON_2_ASSETS,
    SAVE_BUTTON_ASSETS,
    SHIELD_ASSETS,
    SWORD_ASSETS,
    SpriteId,
)
from zeldo.layout import SpriteSpec, menu_specs


def _pause_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.RESUME_BUTTON: SpriteSpec(RESUME_BUTTON_ASSETS, (830.0, 200.0)),
        SpriteId.RESUME_BUTTON_2: SpriteSpec(RESUME_BUTTON_2_ASSETS, (830.0, 200.0)),
        SpriteId.MENU_PAUSE: SpriteSpec(MENU_PAUSE_ASSETS, (830.0, 400.0)),
        SpriteId.MENU_PAUSE_2: SpriteSpec(MENU_PAUSE_2_ASSETS, (830.0, 400.0)),
        SpriteId.SAVE_BUTTON: SpriteSpec(SAVE_BUTTON_ASSETS, (830.0, 600.0)),
        SpriteId.SAVE_BUTTON_2: SpriteSpec(SAVE_BUTTON_2_ASSETS, (830.0, 600.0)),
        SpriteId.QUIT_BUTTON_IN_GAME: SpriteSpec(
            QUIT_BUTTON_GAME_ASSETS, (830.0, 800.0)
        ),
        SpriteId.QUIT_BUTTON_IN_GAME_2: SpriteSpec(
            QUIT_BUTTON_GAME_2_ASSETS, (830.0, 800.0)
        ),
        SpriteId.GREEN_SBIRE: SpriteSpec(
            GREEN_SBIRE_ASSETS, (998.0, 372.0), (2.5, 2.5), (0, 0, 28, 36)
        ),
    }


def _inventory_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.INV: SpriteSpec(INVENTORY, (650.0, 315.0), (1.5, 1.5)),
        SpriteId.PENDENTIF: SpriteSpec(PENDENTIF_ASSETS, (868.0, 400.0)),
        SpriteId.SWORD: SpriteSpec(SWORD_ASSETS, (740.0, 400.0), (1.3, 1.3)),
        SpriteId.SHIELD: SpriteSpec(SHIELD_ASSETS, (805.0, 400.0)),
    }


def _hud_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.BASIC_HEART: SpriteSpec(
            BASIC_HEART_ASSETS, (500.0, 25.0), (0.18, 0.18), active=True
        ),
        SpriteId.EMPTY_HEART: SpriteSpec(
            EMPTY_HEART_ASSETS, (200.0, 100.0), (0.18, 0.18)
        ),
    }


def _game_over_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.GAME_OVER: SpriteSpec(GAME_OVER_ASSETS, (550.0, 400.0)),
        SpriteId.RESTART: SpriteSpec(RESTART_ASSETS, (500.0, 700.0)),
        SpriteId.RESTART_2: SpriteSpec(RESTART_2_ASSETS, (500.0, 700.0)),
    }


def game_specs() -> dict[SpriteId, SpriteSpec]:
    """Specs of the pause, enemy, inventory, HUD and game-over sprites."""
    specs: dict[SpriteId, SpriteSpec] = {}
    specs.update(_pause_specs())
    specs.update(_inventory_specs())
    specs.update(_hud_specs())
    specs.update(_game_over_specs())
    return specs


def all_specs() -> dict[SpriteId, SpriteSpec]:
    """Specs of every sprite in the game, keyed by identifier."""
    specs = menu_specs()
    specs.update(game_specs())
    return {sprite_id: specs[sprite_id] for sprite_id in SpriteId}