"""Sword attacks, the green enemy's patrol, damage and heart pickup."""

from __future__ import annotations

from zeldo.constants import Direction, SpriteId
from zeldo.model import FloatRect, GameState, IntRect
from zeldo.movement import animate_player

ATTACK_FRAME_MS = 50
ATTACK_STEP = 40
ATTACK_END = 418
ATTACK_FIRST = 140
SBIRE_FRAME_MS = 100
SBIRE_TOP = 372
SBIRE_BOTTOM = 707
SBIRE_SPOT = (2570, 2575)
HEART_LIFE = 160

# Facing -> (frame top, frame height, x offset, y offset) of the attack.
_ATTACK = {
    Direction.RIGHT: (88, 34, 0.0, 3 * 2.5),
    Direction.LEFT: (52, 35, 15 * 2.5, 3 * 2.5),
    Direction.UP: (10, 42, 15 * 2.5, 10 * 2.5),
    Direction.DOWN: (122, 42, 6 * 2.5, 1 * 2.5),
}


def _at_sbire_spot(state: GameState) -> bool:
    rect = state.maps[0].rect
    return (rect.left, rect.top) == SBIRE_SPOT


def start_attack(state: GameState, mouse_pressed: bool) -> None:
    """Prepare the attack frames for the facing; a mouse press starts the swing."""
    if state.fight.click:
        return
    player = state.player()
    top, height, dx, dy = _ATTACK[player.facing]
    state.fight.rect.top = top
    state.fight.rect.height = height
    if mouse_pressed:
        player.pos.x -= dx
        player.pos.y -= dy
        state.fight.click = True


def end_attack(state: GameState) -> None:
    """Move the player back from its attack offset."""
    player = state.player()
    _, _, dx, dy = _ATTACK[player.facing]
    player.pos.x += dx
    player.pos.y += dy


def update_attack(state: GameState) -> None:
    """Advance the swing animation; finish it after the last frame."""
    player = state.player()
    fight = state.fight
    if player.clock.elapsed_ms() <= ATTACK_FRAME_MS:
        return
    fight.rect.left += ATTACK_STEP
    if fight.rect.left >= ATTACK_END:
        fight.rect.left = ATTACK_FIRST
        end_attack(state)
        fight.click = False
        animate_player(state)
        return
    player.clock.restart()


def check_hitbox(state: GameState) -> bool:
    """Mark the enemy as beaten if the player is within reach; return whether it was."""
    sbire = state.sprites[SpriteId.GREEN_SBIRE].pos
    player = state.player().pos
    left = sbire.x - 70
    top = sbire.y - 70
    hit = (
        player.x >= left
        and player.x + 24 * 2.5 <= left + 28 * 2.5 + 70
        and player.y >= top
        and player.y + 32 <= top + 36 * 2.5 + 70
    )
    if hit:
        state.sprites[SpriteId.BACK_START].active = True
    return hit


def update_fight(state: GameState) -> None:
    """Run one frame of an attack in progress."""
    if state.fight.click:
        update_attack(state)
        check_hitbox(state)


def _sbire_down(state: GameState) -> None:
    sbire = state.sprites[SpriteId.GREEN_SBIRE]
    if sbire.clock.elapsed_ms() <= SBIRE_FRAME_MS:
        return
    if sbire.pos.y != SBIRE_BOTTOM:
        sbire.pos.y += 5
    if sbire.pos.y == SBIRE_BOTTOM:
        sbire.active = True
        sbire.rect = IntRect(0, 80, 28, 36)
    sbire.clock.restart()


def _sbire_up(state: GameState) -> None:
    sbire = state.sprites[SpriteId.GREEN_SBIRE]
    if sbire.clock.elapsed_ms() <= SBIRE_FRAME_MS:
        return
    if sbire.pos.y != SBIRE_TOP:
        sbire.pos.y -= 5
    if sbire.pos.y <= SBIRE_TOP:
        sbire.active = False
        sbire.rect = IntRect(0, 0, 28, 36)
    sbire.clock.restart()


def update_sbire(state: GameState) -> None:
    """Walk the enemy up and down its path while its screen is shown."""
    if not _at_sbire_spot(state):
        return
    sbire = state.sprites[SpriteId.GREEN_SBIRE]
    if not sbire.active:
        _sbire_down(state)
    if sbire.active:
        _sbire_up(state)


def _player_bounds(state: GameState) -> FloatRect:
    player = state.player()
    rect = state.fight.rect if state.fight.click else player.rect
    return FloatRect(
        player.pos.x,
        player.pos.y,
        rect.width * player.scale.x,
        rect.height * player.scale.y,
    )


def sbire_contact(state: GameState) -> bool:
    """Hurt the player on contact with a living enemy; True once life runs out."""
    if state.sprites[SpriteId.BACK_START].active:
        return False
    sbire = state.sprites[SpriteId.GREEN_SBIRE].bounds()
    if sbire.intersects(_player_bounds(state)) and _at_sbire_spot(state):
        player = state.player()
        player.life -= 1
        return player.life <= 0
    return False


def despawn_sbire(state: GameState) -> None:
    """Bring the enemy back to life whenever the player leaves its screen."""
    if not _at_sbire_spot(state):
        state.sprites[SpriteId.BACK_START].active = False


def take_heart(state: GameState) -> bool:
    """Pick up the extra heart when the player stands on it; return whether it was."""
    player = state.player()
    heart = state.sprites[SpriteId.BASIC_HEART]
    if 1200 <= player.pos.x <= 1260 and player.pos.y >= 405 and heart.active:
        heart.active = False
        player.life = HEART_LIFE
        return True
    return False