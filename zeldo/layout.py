"""Start positions, scales and texture areas of the menu and title sprites."""

from __future__ import annotations

from dataclasses import dataclass

from zeldo.constants import (
    ALL_BUTTON_ASSETS,
    BLUE_LINK_ASSETS,
    CROSS_ASSETS,
    DIALOGUE_BOX_ASSETS,
    GREEN_LINK_ASSETS,
    HELP_ASSETS,
    LOAD_GAME_2_ASSETS,
    LOAD_GAME_ASSETS,
    MAIN_BACKGROUND,
    MENU_BACKGROUND,
    MENU_BUTTON_ASSETS,
    NAVI_ASSETS,
    NEW_GAME_2_ASSETS,
    NEW_GAME_ASSETS,
    PURPLE_LINK_ASSETS,
    QUEST_PNJ_1_ASSETS,
    QUEST_PNJ_2_ASSETS,
    QUIT_BUTTON_ASSETS,
    RED_LINK_ASSETS,
    SELECT_ARROW_ASSETS,
    SONG_ASSETS,
    START_BACKGROUND,
    START_BUTTON_ASSETS,
    ZELDO_PNJ_ASSETS,
    ZELDO_SPRITE,
    SpriteId,
)
from zeldo.model import IntRect, SpriteState, Vector

LINK_RECT = (917, 211, 16, 27)
LINK_SCALE = 10.0


@dataclass(frozen=True)
class SpriteSpec:
    """How a sprite starts out: asset, position, scale, texture area and flag.

    ``rect`` is ``(left, top, width, height)`` or None for the whole texture.
    """

    asset: str
    pos: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)
    rect: tuple[int, int, int, int] | None = None
    active: bool = False

    def to_state(self) -> SpriteState:
        """A fresh, independent sprite state built from this spec."""
        return SpriteState(
            asset=self.asset,
            pos=Vector(*self.pos),
            scale=Vector(*self.scale),
            rect=IntRect(*self.rect) if self.rect is not None else None,
            active=self.active,
        )


def link_spec(asset: str, x: float, y: float) -> SpriteSpec:
    """One of the hero portraits shown on the skin selection screen."""
    return SpriteSpec(
        asset=asset,
        pos=(float(x), float(y)),
        scale=(LINK_SCALE, LINK_SCALE),
        rect=LINK_RECT,
    )


def _title_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.BACK_START: SpriteSpec(MAIN_BACKGROUND),
        SpriteId.START_BUTTON: SpriteSpec(
            START_BUTTON_ASSETS, (650.0, 800.0), (4.0, 4.0), (0, 0, 64, 32)
        ),
        SpriteId.MENU_BUT: SpriteSpec(
            MENU_BUTTON_ASSETS, (1050.0, 800.0), (4.0, 4.0), (0, 0, 64, 26)
        ),
        SpriteId.LOGO: SpriteSpec(ZELDO_SPRITE, (635.0, 150.0), (3.0, 3.0)),
        SpriteId.QUIT_BUTTON: SpriteSpec(
            QUIT_BUTTON_ASSETS, (1700.0, 950.0), (0.2, 0.2)
        ),
        SpriteId.LOAD_GAME: SpriteSpec(LOAD_GAME_ASSETS, (1050.0, 700.0), (1.2, 1.2)),
        SpriteId.LOAD_GAME_2: SpriteSpec(
            LOAD_GAME_2_ASSETS, (1050.0, 700.0), (1.2, 1.2)
        ),
        SpriteId.NEW_GAME: SpriteSpec(NEW_GAME_ASSETS, (550.0, 700.0), (1.2, 1.2)),
        SpriteId.NEW_GAME_2: SpriteSpec(NEW_GAME_2_ASSETS, (550.0, 700.0), (1.2, 1.2)),
    }


def _option_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.MENU_BAC: SpriteSpec(MENU_BACKGROUND, (1.0, 1.0), (1.78, 1.78)),
        SpriteId.SONG_UNMUTE: SpriteSpec(
            SONG_ASSETS, (900.0, 800.0), (2.0, 2.0), (40, 260, 70, 60)
        ),
        SpriteId.SONG_MUTE: SpriteSpec(
            SONG_ASSETS, (910.0, 800.0), (2.0, 2.0), (210, 260, 60, 60)
        ),
        SpriteId.NAVI_SPRITE: SpriteSpec(
            NAVI_ASSETS, (1700.0, 50.0), (7.0, 7.0), (277, 11, 23, 16)
        ),
        SpriteId.HELP_BUBBLE: SpriteSpec(HELP_ASSETS, (1580.0, -35.0), (0.3, 0.3)),
        SpriteId.DIALOGUE_BOX: SpriteSpec(
            DIALOGUE_BOX_ASSETS, (450.0, 30.0), (4.0, 4.0), (0, 0, 270, 60)
        ),
        SpriteId.SONG_PLUS: SpriteSpec(
            SONG_ASSETS, (1040.0, 600.0), (2.0, 2.0), (170, 260, 45, 60)
        ),
        SpriteId.SONG_MOINS: SpriteSpec(
            SONG_ASSETS, (820.0, 600.0), (2.0, 2.0), (103, 260, 60, 60)
        ),
        SpriteId.VOLUME_BAR: SpriteSpec(
            ALL_BUTTON_ASSETS, (920.0, 400.0), (2.25, 2.25), (41, 0, 50, 43)
        ),
        SpriteId.BACK_MENU: SpriteSpec(
            ALL_BUTTON_ASSETS, (50.0, 50.0), (2.5, 2.5), (171, 85, 45, 40)
        ),
        SpriteId.BUTTON_WINDOW: SpriteSpec(
            CROSS_ASSETS, (920.0, 400.0), (2.0, 2.0), active=True
        ),
    }


def _selection_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.SELECT_BACK: SpriteSpec(START_BACKGROUND, scale=(3.32, 2.82)),
        SpriteId.GREEN_LINK: link_spec(GREEN_LINK_ASSETS, 300, 400),
        SpriteId.RED_LINK: link_spec(RED_LINK_ASSETS, 1100, 400),
        SpriteId.BLUE_LINK: link_spec(BLUE_LINK_ASSETS, 700, 400),
        SpriteId.PURPLE_LINK: link_spec(PURPLE_LINK_ASSETS, 1500, 400),
        SpriteId.SELECT_ARROW: SpriteSpec(
            SELECT_ARROW_ASSETS, (330.0, 300.0), (0.1, 0.1)
        ),
    }


def _quest_specs() -> dict[SpriteId, SpriteSpec]:
    return {
        SpriteId.QUEST_PNJ_1: SpriteSpec(
            QUEST_PNJ_1_ASSETS, (878.0, 717.0), (2.8, 2.8), (18, 0, 18, 25)
        ),
        SpriteId.QUEST_PNJ_2: SpriteSpec(
            QUEST_PNJ_2_ASSETS, (735.0, 137.0), (2.5, 2.5), (0, 0, 30, 35)
        ),
        SpriteId.ZELDO_PNJ: SpriteSpec(
            ZELDO_PNJ_ASSETS, (1308.0, 520.0), (2.7, 2.7), (0, 0, 28, 55)
        ),
        SpriteId.QUEST_BOX: SpriteSpec(
            DIALOGUE_BOX_ASSETS, (620.0, 540.0), (3.0, 2.4), (0, 0, 270, 60)
        ),
    }


def menu_specs() -> dict[SpriteId, SpriteSpec]:
    """Specs of the title, option, selection and tutorial sprites and the quest characters."""
    specs: dict[SpriteId, SpriteSpec] = {}
    specs.update(_title_specs())
    specs.update(_option_specs())
    specs.update(_selection_specs())
    specs.update(_quest_specs())
    return specs