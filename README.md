# solong

A small top-down puzzle game. You move a player around a map that is walled in
on every side. You pick up every collectible and then walk onto the exit. Each
step is counted and printed to the terminal as `moves count : N`.

## Installing

```
pip install .
```

## Playing

```
solong maps/level.ber
```

The game loads its sprites from a `textures/` directory under the current
working directory. That directory must contain these five files:

- `wall.xpm`
- `collectible.xpm`
- `player.xpm`
- `floor.xpm`
- `exit.xpm`

Each image must be at least 45×45 pixels. Only the top-left 45×45 area is used.

Each tile is drawn as the floor image with a sprite laid over it. In a sprite,
every pixel that has the same colour as the sprite's top-left pixel is
see-through, so the floor shows there.

Controls:

- The arrow keys move the player. A move takes effect when the key is released.
- Escape, or closing the window, quits the game.

The exit acts as an obstacle until every collectible has been picked up. After
that, stepping onto it ends the game.

## Map files

A map is a plain-text file whose name ends in `.ber`. The extension must come
after a non-empty name. Each line of the file is one row of tiles:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only when all of the following hold:

- Every row has the same length. One trailing newline at the end of the file is allowed.
- The map uses only the characters in the table above.
- It has exactly one `P`, exactly one `E` and at least one `C`.
- It is enclosed by walls on all four sides.
- From the start, the player can reach the exit and every collectible without passing through the exit.

Example:

```
1111111
1P0C0E1
1111111
```

When something is wrong, the program prints `Error` followed by a short reason
and then stops. The possible reasons are:

- `Invalid number of arguments`
- `Asset file missing`
- `Wrong file extension`
- `Invalid map`
- `Map not playable`
- `Invalid asset`

The message `Invalid asset` is printed to standard output. All the others are
printed to standard error.

## Using it as a library

- `solong.level.load_level(path)` reads and validates a map. It returns a
  `Level` (with `rows`, `width` and `height`) or raises `MapError`. Each check
  is also available on its own:
  - `check_extension`
  - `read_map`
  - `check_rectangular`
  - `check_characters`
  - `check_walls`
  - `flood_fill`
  - `check_playable`
- `solong.level.missing_textures(directory)` lists the texture files in a
  directory that cannot be opened.
- `solong.game.Game.from_level(level)` starts a game. Drive it with
  `Game.move(Direction.UP)` and the other `Direction` values.
  - Each move returns a `MoveOutcome`: `BLOCKED`, `MOVED` or `WON`.
  - `Game.moves` counts the steps taken.
  - `Game.tile(x, y)` reads the current map.
- `solong.xpm.load_xpm(path)` reads an XPM image into an `XpmImage`. It raises
  `XpmError` when the file cannot be read or is malformed.
  - `XpmImage.pixel(x, y)` returns the pixel as `0xRRGGBB`.
  - Pixels whose colour is `None` come back as `0xFF000000`.
- `solong.colors.color_by_name(name)` looks up an X11 colour name, ignoring
  case, and returns its RGB value.
- `solong.render.Renderer` draws a `Game` with pygame.
  - `Renderer.draw()` paints the map.
  - `Renderer.handle_key(key)` applies one key press.
  - `Renderer.run()` runs the event loop.

## What it does not do

- The game plays one map per run.
- It has no menus and no way to restart a level.
- It does not show the move count inside the window.
- It has no keys other than the arrow keys and Escape.

## Running the tests

```
pip install ".[test]"
pytest
```