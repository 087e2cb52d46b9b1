"""Identifiers, asset paths and fixed numbers shared by the game."""

from __future__ import annotations

from enum import Enum, IntEnum

EXIT_OK = 0
EXIT_KO = 84

TOTAL_TEXT = 7


class SpriteId(IntEnum):
    """Index of every sprite the game keeps in its sprite table."""

    BACK_START = 0
    START_BUTTON = 1
    MENU_BUT = 2
    LOGO = 3
    QUIT_BUTTON = 4
    MENU_BAC = 5
    SONG_UNMUTE = 6
    SONG_MUTE = 7
    SONG_PLUS = 8
    SONG_MOINS = 9
    VOLUME_BAR = 10
    BACK_MENU = 11
    GREEN_LINK = 12
    BLUE_LINK = 13
    RED_LINK = 14
    PURPLE_LINK = 15
    SELECT_BACK = 16
    SELECT_ARROW = 17
    BUTTON_WINDOW = 18
    RESUME_BUTTON = 19
    RESUME_BUTTON_2 = 20
    SAVE_BUTTON = 21
    SAVE_BUTTON_2 = 22
    QUIT_BUTTON_IN_GAME = 23
    QUIT_BUTTON_IN_GAME_2 = 24
    MENU_PAUSE = 25
    MENU_PAUSE_2 = 26
    NEW_GAME = 27
    NEW_GAME_2 = 28
    LOAD_GAME = 29
    LOAD_GAME_2 = 30
    NAVI_SPRITE = 31
    HELP_BUBBLE = 32
    DIALOGUE_BOX = 33
    QUEST_PNJ_1 = 34
    QUEST_PNJ_2 = 35
    ZELDO_PNJ = 36
    GREEN_SBIRE = 37
    QUEST_BOX = 38
    INV = 39
    PENDENTIF = 40
    BASIC_HEART = 41
    EMPTY_HEART = 42
    GAME_OVER = 43
    RESTART = 44
    RESTART_2 = 45
    SWORD = 46
    SHIELD = 47


TOTAL_SPRITE = len(SpriteId)


class Direction(Enum):
    """Direction the player is facing."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


class Key(Enum):
    """Keyboard keys the game reacts to."""

    Z = "z"
    Q = "q"
    S = "s"
    D = "d"
    I = "i"  # noqa: E741
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"


MAIN_BACKGROUND = "assets/background-for-rpg.png"
MENU_BACKGROUND = "assets/back_flou.png"
START_BACKGROUND = "assets/background_start.png"
START_BUTTON_ASSETS = "assets/start_button.png"
MENU_BUTTON_ASSETS = "assets/menu_button.png"
QUIT_BUTTON_ASSETS = "assets/quit_button.png"
ZELDO_SPRITE = "assets/zeldo_sprite.png"
SONG_ASSETS = "assets/song.png"
ALL_BUTTON_ASSETS = "assets/allbutton.png"
NAVI_ASSETS = "assets/navi.png"
HELP_ASSETS = "assets/help_bubble.png"
DIALOGUE_BOX_ASSETS = "assets/dialogue_box.png"
SONG_MAIN_MENU = "song/song.ogg"
GREEN_LINK_ASSETS = "assets/green_link.png"
BLUE_LINK_ASSETS = "assets/blue_link.png"
RED_LINK_ASSETS = "assets/red_link.png"
PURPLE_LINK_ASSETS = "assets/purple_link.png"
SELECT_ARROW_ASSETS = "assets/select.png"
CROSS_ASSETS = "assets/cross.png"
MAP_ASSETS = "assets/map.png"
MAP_BLUR_ASSETS = "assets/map_blur.png"
RESUME_BUTTON_ASSETS = "assets/resume_button.png"
RESUME_BUTTON_2_ASSETS = "assets/resume_button2.png"
QUIT_BUTTON_GAME_ASSETS = "assets/quit_button_in_game.png"
QUIT_BUTTON_GAME_2_ASSETS = "assets/quit_button_in_game2.png"
SAVE_BUTTON_ASSETS = "assets/save_button.png"
SAVE_BUTTON_2_ASSETS = "assets/save_button2.png"
MENU_PAUSE_ASSETS = "assets/menu.png"
MENU_PAUSE_2_ASSETS = "assets/menu2.png"
NEW_GAME_ASSETS = "assets/new_game.png"
NEW_GAME_2_ASSETS = "assets/new_game2.png"
LOAD_GAME_ASSETS = "assets/load_game.png"
LOAD_GAME_2_ASSETS = "assets/load_game2.png"
QUEST_PNJ_1_ASSETS = "assets/old_man_1.png"
QUEST_PNJ_2_ASSETS = "assets/old_man_2.png"
ZELDO_PNJ_ASSETS = "assets/zelda.png"
COLISION_ASSETS = "assets/colision_sprite.png"
GREEN_SBIRE_ASSETS = "assets/enemy.png"
INVENTORY = "assets/inventory.png"
PENDENTIF_ASSETS = "assets/pendentif.png"
BASIC_HEART_ASSETS = "assets/full_heart.png"
EMPTY_HEART_ASSETS = "assets/empty_heart.png"
GAME_OVER_ASSETS = "assets/game_over.png"
RESTART_ASSETS = "assets/restart.png"
RESTART_2_ASSETS = "assets/restart_2.png"
SWORD_ASSETS = "assets/sword.png"
SHIELD_ASSETS = "assets/shield.png"
ARCHES_ASSETS = "assets/arches.png"
FONT_ASSETS = "text/ZeldaOracles.ttf"

SKIN_ASSETS = (
    GREEN_LINK_ASSETS,
    RED_LINK_ASSETS,
    BLUE_LINK_ASSETS,
    PURPLE_LINK_ASSETS,
)