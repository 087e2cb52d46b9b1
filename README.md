# zeldo

*The Legend of Zeldo* is a small top-down action role-playing game built on
pygame. You pick one of four coloured heroes, explore a map made of
scrolling screens, help an old man find his brother and fight the green
minion that guards the way.

## Installing

```
pip install .
```

## Assets

The package holds the game's code only. It ships no pictures, music or font.
The game loads them from the directory it is started in:

- `./assets/*.png` for every sprite, the map layers and the collision map
  (`./assets/colision_sprite.png`, where white pixels are walkable ground);
- `./song/song.ogg` for the background music;
- `./text/ZeldaOracles.ttf` for the texts.

A missing picture stops the game with an error message and exit status 84.
Without the music file the game runs silently; without the font it uses
pygame's default font.

## Playing

```
zeldo
```

The command takes no arguments; given any, it exits at once with status 84.
It opens a 1920×1080 window titled `The_Legend_Of_Zeldo`.

- **Start screen**: *Start* opens the new game / load game screen, *Menu*
  opens the settings, the quit button closes the window. Click the fairy to
  read the help text.
- **Settings**: mute and unmute the music, change the volume in steps of 20
  between 0 and 100, and switch the window between 1920×1080 and 1080×720.
  The back button returns to the start screen.
- **Character selection**: move the arrow with the mouse or with `Q`/`D`
  (or the left and right arrow keys), confirm with `Enter` or a click.
- **In game**:
  - `Z`, `Q`, `S`, `D` move the hero; walking off an edge scrolls to the
    next screen of the map.
  - `I` opens and closes the inventory. Hover over the sword, the shield or
    the pendant to see its name.
  - A mouse click swings the sword. A hit on the minion beats it until you
    leave its screen.
  - `Escape` opens the pause menu, where you can resume, save, open the
    settings or quit to the start screen.

Touching the minion costs life. When life runs out, the game-over screen lets
you restart from the beginning or quit to the start screen. A heart lying on
one screen of the map raises life to 160 when you pick it up.

## Saving

*Save* in the pause menu writes the progress to `./save.txt`. *Load game* on
the new game screen reads it back; if the file is missing or malformed, a
message is printed and the new game screen stays open. The file is plain text
with eleven lines, one value each: skin, screen position x and y, map tile
left and top, quest progress, map position x and y, heart pickup still
present, life, and pendant held.

The same format is available to code through `zeldo.savefile`:
`format_save(state)` and `parse_save(state, text)` work on strings,
`save_game(state, path)` and `load_game(state, path)` on files, and all of
them raise `SaveError` on failure.

## Tests

```
pip install ".[test]"
pytest
```