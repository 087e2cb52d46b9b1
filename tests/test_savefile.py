import pytest

from zeldo.constants import SpriteId
from zeldo.model import Vector, new_game_state, reset_to_start
from zeldo.savefile import SaveError, format_save, load_game, parse_save, save_game


def _fresh():
    state = new_game_state()
    reset_to_start(state)
    return state


def test_format_fresh_state():
    lines = format_save(_fresh()).split("\n")
    assert len(lines) == 12
    assert lines[-1] == ""
    assert lines[0] == "0"
    assert lines[1] == "830.000000"
    assert lines[2] == "550.000000"
    assert lines[3] == "2056"
    assert lines[4] == "2575"
    assert lines[6] == "2238.000000"
    assert lines[9] == "120"


def test_round_trip():
    state = _fresh()
    state.skin = 2
    player = state.player()
    player.pos = Vector(600.5, 300.25)
    player.map_x = 1000.5
    player.map_y = 2000.75
    player.life = 80
    state.shift_maps(514, 0)
    state.sprites[SpriteId.QUEST_PNJ_2].active = True
    state.sprites[SpriteId.BASIC_HEART].active = False
    state.sprites[SpriteId.PENDENTIF].active = True
    text = format_save(state)

    loaded = _fresh()
    parse_save(loaded, text)
    assert loaded.skin == 2
    restored = loaded.player()
    assert (restored.pos.x, restored.pos.y) == (600.5, 300.25)
    assert (restored.map_x, restored.map_y) == (1000.5, 2000.75)
    assert restored.life == 80
    assert loaded.maps[0].rect.left == state.maps[0].rect.left
    assert loaded.sprites[SpriteId.QUEST_PNJ_2].active
    assert not loaded.sprites[SpriteId.BASIC_HEART].active
    assert loaded.sprites[SpriteId.PENDENTIF].active
    assert format_save(loaded) == text


def test_parse_updates_layers_like_source():
    state = _fresh()
    collision_before = (state.maps[3].rect.left, state.maps[3].rect.top)
    source = _fresh()
    source.shift_maps(514, 514)
    parse_save(state, format_save(source))
    left = source.maps[0].rect.left
    top = source.maps[0].rect.top
    for index in (0, 1, 4):
        assert (state.maps[index].rect.left, state.maps[index].rect.top) == (left, top)
    assert state.maps[2].rect.left == left + 256
    assert (state.maps[3].rect.left, state.maps[3].rect.top) == collision_before


def test_parse_rejects_wrong_line_count():
    state = _fresh()
    text = format_save(state)
    with pytest.raises(SaveError):
        parse_save(state, text + "1\n")
    with pytest.raises(SaveError):
        parse_save(state, "")


def test_parse_rejects_bad_skin():
    state = _fresh()
    lines = format_save(state).split("\n")
    lines[0] = "7"
    with pytest.raises(SaveError):
        parse_save(state, "\n".join(lines))


def test_parse_is_lenient_with_numbers():
    state = _fresh()
    lines = format_save(state).split("\n")
    lines[9] = "42xyz"
    parse_save(state, "\n".join(lines))
    assert state.player().life == 42


def test_save_and_load_file(tmp_path):
    state = _fresh()
    state.player().life = 40
    path = save_game(state, tmp_path / "save.txt")
    assert path.read_text() == format_save(state)
    loaded = _fresh()
    load_game(loaded, path)
    assert loaded.player().life == 40


def test_load_missing_file(tmp_path):
    with pytest.raises(SaveError):
        load_game(_fresh(), tmp_path / "missing.txt")


def test_save_into_missing_directory(tmp_path):
    with pytest.raises(SaveError):
        save_game(_fresh(), tmp_path / "nowhere" / "save.txt")