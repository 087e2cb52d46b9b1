"""The game's screens, their event handling and the main loop."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import Callable

import pygame

from zeldo.combat import (
    despawn_sbire,
    sbire_contact,
    start_attack,
    update_fight,
    update_sbire,
)
from zeldo.constants import EXIT_KO, EXIT_OK, Key, SpriteId
from zeldo.hitbox import hits_button, is_hovered
from zeldo.inventory import toggle_inventory
from zeldo.model import START_LIFE, GameState, Vector, reset_to_start
from zeldo.movement import handle_player_key, scroll_map
from zeldo.render_game import draw_game
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
from zeldo.resources import FRAMERATE, WINDOW_SIZE, Resources, create_state, create_window
from zeldo.savefile import SAVE_PATH, SaveError, load_game, save_game
from zeldo.selection import choose_skin, hover_select, move_arrow
from zeldo.settings import (
    apply_mute,
    decrease_volume,
    increase_volume,
    toggle_mute,
    toggle_window_mode,
)
from zeldo.texts import NAVI_FRAME_MS, navi_frame_step

BLACK = (0, 0, 0)
BUTTON_HOVER_LEFT = 128
BACK_HOVER_LEFT = 301
BACK_IDLE_LEFT = 171
PAUSE_QUIT_POS = (830.0, 800.0)
GAME_OVER_QUIT_POS = (1100.0, 700.0)

_KEYS = {
    pygame.K_z: Key.Z,
    pygame.K_q: Key.Q,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_i: Key.I,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class Screen(Enum):
    """The screens the game can show."""

    START = auto()
    MENU = auto()
    SELECT = auto()
    GAME = auto()
    PAUSE = auto()
    NEW_GAME = auto()
    MENU_IN_GAME = auto()
    GAME_OVER = auto()


class App:
    """Runs the game: dispatches events to the current screen and draws it."""

    def __init__(
        self, state: GameState, resources: Resources, surface: pygame.Surface
    ) -> None:
        self.state = state
        self.resources = resources
        self.surface = surface
        self.screen = Screen.START
        self.running = True
        self.mouse: tuple[int, int] = (0, 0)
        self.save_path = SAVE_PATH
        self.window_size = WINDOW_SIZE
        self._was_muted = False
        self._handlers: dict[Screen, Callable[[Key | None, bool], None]] = {
            Screen.START: self._on_start,
            Screen.MENU: self._on_menu,
            Screen.SELECT: self._on_select,
            Screen.GAME: self._on_game,
            Screen.PAUSE: self._on_pause,
            Screen.NEW_GAME: self._on_new_game,
            Screen.MENU_IN_GAME: self._on_menu_in_game,
            Screen.GAME_OVER: self._on_game_over,
        }

    def switch_to(self, screen: Screen) -> None:
        """Show another screen, doing what entering it requires."""
        sprites = self.state.sprites
        if screen is Screen.SELECT:
            sprites[SpriteId.NAVI_SPRITE].active = False
            reset_to_start(self.state)
        elif screen is Screen.MENU:
            sprites[SpriteId.NAVI_SPRITE].active = False
            self._was_muted = False
        elif screen is Screen.MENU_IN_GAME:
            self._was_muted = False
        elif screen is Screen.PAUSE:
            self._place_quit_buttons(PAUSE_QUIT_POS)
        elif screen is Screen.GAME_OVER:
            self.state.player().life = START_LIFE
            self._place_quit_buttons(GAME_OVER_QUIT_POS)
        self.screen = screen

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event on the current screen."""
        if event.type == pygame.QUIT:
            self.running = False
            return
        pos = getattr(event, "pos", None)
        if pos is not None:
            self.mouse = (int(pos[0]), int(pos[1]))
            self.state.mouse = self.mouse
        key = _KEYS.get(event.key) if event.type == pygame.KEYDOWN else None
        pressed = event.type == pygame.MOUSEBUTTONDOWN
        self._handlers[self.screen](key, pressed)

    def update(self) -> None:
        """Advance the per-frame logic of the current screen."""
        if self.screen is Screen.START:
            self._animate_navi()
        elif self.screen is Screen.MENU:
            self._apply_mute()
        elif self.screen is Screen.MENU_IN_GAME:
            self._animate_navi()
            self._apply_mute()
        elif self.screen is Screen.GAME:
            update_sbire(self.state)
            scroll_map(self.state)
            update_fight(self.state)
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(self.state.music.level / 100)

    def draw(self) -> None:
        """Draw the current screen onto the surface."""
        surface, state, resources = self.surface, self.state, self.resources
        if self.screen is Screen.START:
            draw_start_game(surface, state, resources)
        elif self.screen in (Screen.MENU, Screen.MENU_IN_GAME):
            surface.fill(BLUE)
            self._draw_sprite(SpriteId.MENU_BAC)
            muted = state.sprites[SpriteId.SONG_UNMUTE].active
            self._draw_sprite(SpriteId.SONG_MUTE if muted else SpriteId.SONG_UNMUTE)
            if self.screen is Screen.MENU:
                draw_menu_button(surface, state, resources)
            else:
                draw_menu_in_game(surface, state, resources)
        elif self.screen is Screen.SELECT:
            draw_select_skin(surface, state, resources)
        elif self.screen is Screen.GAME:
            surface.fill(BLACK)
            draw_game(surface, state, resources)
        elif self.screen is Screen.PAUSE:
            surface.fill(BLUE)
            self._draw_sprite(SpriteId.SELECT_BACK)
            draw_menu_pause(surface, state, resources)
        elif self.screen is Screen.NEW_GAME:
            draw_new_game(surface, state, resources)
        elif self.screen is Screen.GAME_OVER:
            surface.fill(BLACK)
            self._draw_sprite(SpriteId.GAME_OVER)
            draw_game_over(surface, state, resources)

    def run(self) -> None:
        """Play until the window is closed."""
        self._play_music()
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
                if not self.running:
                    break
            if not self.running:
                break
            self.update()
            self.draw()
            pygame.display.flip()
            clock.tick(FRAMERATE)

    def _place_quit_buttons(self, pos: tuple[float, float]) -> None:
        for sprite_id in (SpriteId.QUIT_BUTTON_IN_GAME, SpriteId.QUIT_BUTTON_IN_GAME_2):
            self.state.sprites[sprite_id].pos = Vector(*pos)

    def _draw_sprite(self, sprite_id: SpriteId) -> None:
        sprite = self.state.sprites[sprite_id]
        image = self.resources.sprite_image(self.state, sprite_id)
        self.surface.blit(image, (int(sprite.pos.x), int(sprite.pos.y)))

    def _play_music(self) -> None:
        if not pygame.mixer.get_init() or not self.resources.song.is_file():
            return
        try:
            pygame.mixer.music.load(str(self.resources.song))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass

    def _animate_navi(self) -> None:
        navi = self.state.sprites[SpriteId.NAVI_SPRITE]
        if navi.rect is not None and navi.clock.elapsed_ms() > NAVI_FRAME_MS:
            navi.rect = navi_frame_step(navi.rect)
            navi.clock.restart()

    def _apply_mute(self) -> None:
        muted = apply_mute(self.state, self._was_muted)
        if self._was_muted and not muted:
            self._play_music()
        self._was_muted = muted

    def _hit(self, sprite_id: SpriteId, dx: float, dy: float) -> bool:
        return hits_button(self.state.sprites[sprite_id].bounds(), self.mouse, dx, dy)

    def _hover(self, sprite_id: SpriteId) -> bool:
        return is_hovered(self.state.sprites[sprite_id].bounds(), self.mouse)

    def _contains(self, sprite_id: SpriteId) -> bool:
        return self.state.sprites[sprite_id].bounds().contains(*self.mouse)

    def _return_to(self, screen: Screen, pressed: bool, hide_navi: bool) -> bool:
        if pressed and self._hit(SpriteId.BACK_MENU, 18, 35):
            if hide_navi:
                self.state.sprites[SpriteId.NAVI_SPRITE].active = False
            self.switch_to(screen)
            return True
        return False

    def _animate_back_button(self) -> None:
        rect = self.state.sprites[SpriteId.BACK_MENU].rect
        if rect is not None:
            rect.left = (
                BACK_HOVER_LEFT if self._contains(SpriteId.BACK_MENU) else BACK_IDLE_LEFT
            )

    def _click_navi(self, pressed: bool) -> None:
        if pressed and self._hit(SpriteId.NAVI_SPRITE, 2, 35):
            self.state.sprites[SpriteId.NAVI_SPRITE].active = True

    def _sound_buttons(self, pressed: bool) -> None:
        if not pressed:
            return
        if self._hit(SpriteId.SONG_UNMUTE, 2, 35):
            toggle_mute(self.state)
        if self._hit(SpriteId.SONG_PLUS, 2, 0):
            increase_volume(self.state)
        if self._hit(SpriteId.SONG_MOINS, 0, 0):
            decrease_volume(self.state)

    def _window_button(self, pressed: bool) -> None:
        if not (pressed and self._hover(SpriteId.BUTTON_WINDOW)):
            return
        self.window_size = toggle_window_mode(self.state)
        display = pygame.display.get_surface() if pygame.display.get_init() else None
        if display is not None and display is self.surface:
            self.surface = pygame.display.set_mode(self.window_size)

    def _on_start(self, key: Key | None, pressed: bool) -> None:
        sprites = self.state.sprites
        for sprite_id, target in (
            (SpriteId.START_BUTTON, Screen.NEW_GAME),
            (SpriteId.MENU_BUT, Screen.MENU),
        ):
            rect = sprites[sprite_id].rect
            if self._contains(sprite_id):
                if rect is not None:
                    rect.left = BUTTON_HOVER_LEFT
                if pressed:
                    if sprite_id is SpriteId.MENU_BUT and rect is not None:
                        rect.left = 0
                    self.switch_to(target)
                    return
            elif rect is not None:
                rect.left = 0
        self._click_navi(pressed)
        if pressed and self._hit(SpriteId.QUIT_BUTTON, 18, 35):
            self.running = False

    def _on_menu(self, key: Key | None, pressed: bool) -> None:
        if self._return_to(Screen.START, pressed, True):
            return
        self._animate_back_button()
        self._sound_buttons(pressed)
        self._window_button(pressed)

    def _on_menu_in_game(self, key: Key | None, pressed: bool) -> None:
        if self._return_to(Screen.PAUSE, pressed, True):
            return
        self._animate_back_button()
        self._sound_buttons(pressed)
        self._click_navi(pressed)
        self._window_button(pressed)

    def _on_select(self, key: Key | None, pressed: bool) -> None:
        hover_select(self.state, self.mouse)
        if self._return_to(Screen.START, pressed, True):
            return
        self._animate_back_button()
        move_arrow(self.state, key)
        if choose_skin(self.state, key, pressed) is not None:
            self.switch_to(Screen.GAME)

    def _on_new_game(self, key: Key | None, pressed: bool) -> None:
        if self._return_to(Screen.START, pressed, True):
            return
        self._animate_back_button()
        self._window_button(pressed)
        sprites = self.state.sprites
        hovered = self._hover(SpriteId.NEW_GAME)
        sprites[SpriteId.NEW_GAME].active = hovered
        if hovered and pressed:
            self.switch_to(Screen.SELECT)
            return
        hovered = self._hover(SpriteId.LOAD_GAME)
        sprites[SpriteId.LOAD_GAME].active = hovered
        if hovered and pressed:
            self._load()

    def _load(self) -> None:
        try:
            load_game(self.state, self.save_path)
        except SaveError as exc:
            print(exc)
            self.switch_to(Screen.NEW_GAME)
            return
        self.switch_to(Screen.GAME)

    def _save(self) -> None:
        try:
            path = save_game(self.state, self.save_path)
        except SaveError as exc:
            print(exc)
            return
        print(f"information saved successfully in the file: {path.name}.")

    def _on_pause(self, key: Key | None, pressed: bool) -> None:
        if self._return_to(Screen.GAME, pressed, False):
            return
        self._animate_back_button()
        sprites = self.state.sprites
        for sprite_id in (
            SpriteId.RESUME_BUTTON,
            SpriteId.SAVE_BUTTON,
            SpriteId.MENU_PAUSE,
            SpriteId.QUIT_BUTTON_IN_GAME,
        ):
            hovered = self._hover(sprite_id)
            sprites[sprite_id].active = hovered
            if not (hovered and pressed):
                continue
            if sprite_id is SpriteId.SAVE_BUTTON:
                self._save()
                continue
            target = {
                SpriteId.RESUME_BUTTON: Screen.GAME,
                SpriteId.MENU_PAUSE: Screen.MENU_IN_GAME,
                SpriteId.QUIT_BUTTON_IN_GAME: Screen.START,
            }[sprite_id]
            self.switch_to(target)
            return

    def _on_game(self, key: Key | None, pressed: bool) -> None:
        state = self.state
        image = self.resources.image(state.maps[3].asset)
        handle_player_key(state, key, image)
        if key is Key.I:
            toggle_inventory(state)
        if key is Key.ESCAPE:
            self.switch_to(Screen.PAUSE)
            return
        if sbire_contact(state):
            self.switch_to(Screen.GAME_OVER)
            return
        if not state.fight.click:
            start_attack(state, pressed)
        despawn_sbire(state)

    def _on_game_over(self, key: Key | None, pressed: bool) -> None:
        sprites = self.state.sprites
        hovered = self._hover(SpriteId.RESTART)
        sprites[SpriteId.RESTART].active = hovered
        if hovered and pressed:
            reset_to_start(self.state)
            self.switch_to(Screen.GAME)
            return
        hovered = self._hover(SpriteId.QUIT_BUTTON_IN_GAME)
        sprites[SpriteId.QUIT_BUTTON_IN_GAME].active = hovered
        if hovered and pressed:
            self.switch_to(Screen.START)


def main(argv: list[str] | None = None) -> int:
    """Start the game; it takes no arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        return EXIT_KO
    pygame.init()
    try:
        surface = create_window()
        with Resources(".") as resources:
            state = create_state(resources)
            App(state, resources, surface).run()
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return EXIT_KO
    finally:
        pygame.quit()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())