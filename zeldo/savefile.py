"""Saving and loading the game to a small line-based text file."""

from __future__ import annotations

import re
from pathlib import Path

from zeldo.constants import SpriteId
from zeldo.model import GameState, Vector

SAVE_PATH = Path("save.txt")
SAVE_LINES = 11

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class SaveError(Exception):
    """Raised when a save file cannot be written or read."""


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def format_save(state: GameState) -> str:
    """The save file contents for the given state."""
    player = state.player()
    sprites = state.sprites
    values = [
        str(state.skin),
        f"{player.pos.x:.6f}",
        f"{player.pos.y:.6f}",
        str(state.maps[0].rect.left),
        str(state.maps[0].rect.top),
        str(int(sprites[SpriteId.QUEST_PNJ_2].active)),
        f"{player.map_x:.6f}",
        f"{player.map_y:.6f}",
        str(int(sprites[SpriteId.BASIC_HEART].active)),
        str(player.life),
        str(int(sprites[SpriteId.PENDENTIF].active)),
    ]
    return "".join(f"{value}\n" for value in values)


def parse_save(state: GameState, text: str) -> None:
    """Apply the contents of a save file to the state."""
    if text.count("\n") != SAVE_LINES:
        raise SaveError("Failed to open file.")
    fields = [token for token in text.split("\n") if token]
    if len(fields) < SAVE_LINES:
        raise SaveError("Failed to open file.")
    skin = _atoi(fields[0])
    if not 0 <= skin < len(state.players):
        raise SaveError(f"invalid skin {skin}")
    state.skin = skin
    player = state.player()
    player.pos = Vector(_atof(fields[1]), _atof(fields[2]))
    left = _atoi(fields[3])
    top = _atoi(fields[4])
    for index in (0, 1, 4):
        state.maps[index].rect.left = left
        state.maps[index].rect.top = top
    state.maps[2].rect.left = left + 256
    state.maps[2].rect.top = top
    state.sprites[SpriteId.QUEST_PNJ_2].active = _atoi(fields[5]) != 0
    player.map_x = _atof(fields[6])
    player.map_y = _atof(fields[7])
    state.sprites[SpriteId.BASIC_HEART].active = _atoi(fields[8]) != 0
    player.life = _atoi(fields[9])
    state.sprites[SpriteId.PENDENTIF].active = _atoi(fields[10]) != 0


def save_game(state: GameState, path: str | Path = SAVE_PATH) -> Path:
    """Write the state to a save file and return its path."""
    target = Path(path)
    try:
        target.write_text(format_save(state))
    except OSError as exc:
        raise SaveError("Failed to open file.") from exc
    return target


def load_game(state: GameState, path: str | Path = SAVE_PATH) -> None:
    """Read a save file and apply it to the state."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise SaveError("Failed to open file.") from exc
    parse_save(state, text)