"""Loading images and fonts, opening the window and building the start state."""

from __future__ import annotations

from pathlib import Path

import pygame

from zeldo.constants import FONT_ASSETS, SONG_MAIN_MENU, SpriteId
from zeldo.layout_game import all_specs
from zeldo.model import GameState, IntRect, Vector, new_game_state

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "The_Legend_Of_Zeldo"
FRAMERATE = 60
MUSIC_VOLUME = 100.0


def _crop_scaled(
    image: pygame.Surface, rect: IntRect | None, scale: Vector
) -> pygame.Surface:
    if rect is None:
        area = image
    else:
        area = pygame.Surface(
            (max(rect.width, 0), max(rect.height, 0)), pygame.SRCALPHA
        )
        area.blit(image, (0, 0), pygame.Rect(rect.left, rect.top, rect.width, rect.height))
    width, height = area.get_size()
    size = (max(0, round(width * scale.x)), max(0, round(height * scale.y)))
    if size == (width, height):
        return area
    return pygame.transform.scale(area, size)


class Resources:
    """Images and fonts of the game, loaded from a root directory and cached."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self.song = self.root / SONG_MAIN_MENU
        self._images: dict[str, pygame.Surface] = {}
        self._sprites: dict[tuple, pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}
        pygame.font.init()

    def __enter__(self) -> Resources:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def image(self, asset: str) -> pygame.Surface:
        """The whole image stored at the asset path."""
        cached = self._images.get(asset)
        if cached is not None:
            return cached
        path = self.root / asset
        if not path.is_file():
            raise FileNotFoundError(f"missing asset: {path}")
        image = pygame.image.load(str(path))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self._images[asset] = image
        return image

    def sprite_image(self, state: GameState, sprite_id: SpriteId) -> pygame.Surface:
        """The sprite's texture area, scaled as it is shown on screen."""
        sprite = state.sprites[sprite_id]
        rect = sprite.rect
        key = (
            sprite.asset,
            None if rect is None else (rect.left, rect.top, rect.width, rect.height),
            sprite.scale.x,
            sprite.scale.y,
        )
        cached = self._sprites.get(key)
        if cached is None:
            cached = _crop_scaled(self.image(sprite.asset), rect, sprite.scale)
            self._sprites[key] = cached
        return cached

    def font(self, size: int) -> pygame.font.Font:
        """The game font at the given size; the default font if it is missing."""
        cached = self._fonts.get(size)
        if cached is None:
            path = self.root / FONT_ASSETS
            cached = pygame.font.Font(str(path) if path.is_file() else None, size)
            self._fonts[size] = cached
        return cached

    def close(self) -> None:
        """Release every loaded image and font."""
        self._images.clear()
        self._sprites.clear()
        self._fonts.clear()


def create_window() -> pygame.Surface:
    """Open the game window and return its surface."""
    pygame.display.init()
    surface = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(WINDOW_TITLE)
    return surface


def create_state(resources: Resources) -> GameState:
    """A new game state with every sprite set up from its spec and image."""
    state = new_game_state()
    state.sprites = {
        sprite_id: spec.to_state() for sprite_id, spec in all_specs().items()
    }
    for sprite in state.sprites.values():
        sprite.texture_size = resources.image(sprite.asset).get_size()
    state.fight.check = 0
    state.fight.click = False
    state.music.volume = MUSIC_VOLUME
    state.music.level = MUSIC_VOLUME
    return state