import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from zeldo.constants import (  # noqa: E402
    ARCHES_ASSETS,
    COLISION_ASSETS,
    MAP_ASSETS,
    MAP_BLUR_ASSETS,
    SKIN_ASSETS,
    SWORD_ASSETS,
    SpriteId,
)
from zeldo.layout_game import all_specs  # noqa: E402
from zeldo.model import START_LIFE  # noqa: E402
from zeldo.resources import (  # noqa: E402
    WINDOW_SIZE,
    WINDOW_TITLE,
    Resources,
    create_state,
    create_window,
)

SIZE = (100, 100)
SWORD_COLOR = (10, 200, 30)


def _all_assets():
    assets = {spec.asset for spec in all_specs().values()}
    assets.update(SKIN_ASSETS)
    assets.update({MAP_ASSETS, MAP_BLUR_ASSETS, COLISION_ASSETS, ARCHES_ASSETS})
    return assets


@pytest.fixture
def root(tmp_path):
    for asset in _all_assets():
        path = tmp_path / asset
        path.parent.mkdir(parents=True, exist_ok=True)
        surface = pygame.Surface(SIZE)
        surface.fill(SWORD_COLOR if asset == SWORD_ASSETS else (128, 128, 128))
        pygame.image.save(surface, str(path))
    return tmp_path


def test_image_loads_and_caches(root):
    resources = Resources(root)
    image = resources.image(SWORD_ASSETS)
    assert image.get_size() == SIZE
    assert tuple(image.get_at((5, 5)))[:3] == SWORD_COLOR
    assert resources.image(SWORD_ASSETS) is image


def test_missing_image_raises(tmp_path):
    resources = Resources(tmp_path)
    with pytest.raises(FileNotFoundError):
        resources.image("assets/nothing.png")


def test_close_clears_cache(root):
    resources = Resources(root)
    first = resources.image(SWORD_ASSETS)
    resources.close()
    assert resources.image(SWORD_ASSETS) is not first


def test_create_state_sets_texture_sizes(root):
    state = create_state(Resources(root))
    assert set(state.sprites) == set(SpriteId)
    assert all(sprite.texture_size == SIZE for sprite in state.sprites.values())
    assert state.player().life == START_LIFE
    assert state.fight.click is False


def test_create_state_uses_specs(root):
    state = create_state(Resources(root))
    for sprite_id, spec in all_specs().items():
        sprite = state.sprites[sprite_id]
        assert (sprite.pos.x, sprite.pos.y) == spec.pos
        assert sprite.active == spec.active


def test_sprite_image_matches_bounds_without_rect(root):
    resources = Resources(root)
    state = create_state(resources)
    image = resources.sprite_image(state, SpriteId.SWORD)
    bounds = state.sprites[SpriteId.SWORD].bounds()
    assert image.get_size() == (round(bounds.width), round(bounds.height))
    assert tuple(image.get_at((0, 0)))[:3] == SWORD_COLOR


def test_sprite_image_matches_bounds_with_rect(root):
    resources = Resources(root)
    state = create_state(resources)
    image = resources.sprite_image(state, SpriteId.GREEN_SBIRE)
    bounds = state.sprites[SpriteId.GREEN_SBIRE].bounds()
    assert image.get_size() == (round(bounds.width), round(bounds.height))


def test_font_is_cached_and_renders(tmp_path):
    resources = Resources(tmp_path)
    font = resources.font(20)
    assert resources.font(20) is font
    assert font.size("Sword")[0] > 0


def test_create_window():
    surface = create_window()
    try:
        assert surface.get_size() == WINDOW_SIZE
        assert pygame.display.get_caption()[0] == WINDOW_TITLE
    finally:
        pygame.display.quit()