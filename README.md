# solongmaze

Building blocks for a small tile-based maze game in which the player walks a
walled map, picks up every collectible and then leaves through the exit door.
The package holds the tile sprite handling, the game's error type, and a set
of text, line-reading and container helpers.

## Installing

```
pip install .
```

This pulls in `pygame`, which `solongmaze.sprites` uses to load images.

## What is in the package

### Tiles and sprites — `solongmaze.sprites`

Map cells are the characters `0` (floor), `1` (wall), `C` (collectible),
`E` (exit) and `P` (player). `tile_name(cell, player_position, exit_position)`
returns the image file that shows a cell:

- `1` → `wall.xpm`, `C` → `collectible.xpm`, anything else unlisted → `floor.xpm`
- `P` → one of `mario-w.xpm`, `mario-d.xpm`, `mario-s.xpm`, `mario-a.xpm`
  for player positions 0 to 3 (facing up, right, down, left)
- `E` → one of `exit-close.xpm`, `exit-open.xpm`, `exit-up.xpm`,
  `exit-right.xpm`, `exit-down.xpm`, `exit-left.xpm` for exit positions 0 to 5

A position out of range raises `ValueError`.

`image_path(name, asset_dir)` joins a file name to the asset directory
(`./assets.d/img.d` by default). `load_sprites(asset_dir)` loads every tile
image with pygame into a `Sprites` object and raises `FileNotFoundError` if
one is missing; `Sprites.image_for(cell, player_position, exit_position)`
returns the loaded image for a cell.

```python
from solongmaze.sprites import tile_name

tile_name("E", 2, 1)   # 'exit-open.xpm'
```

### Errors — `solongmaze.errors`

`SoLongError(message, exit_code=1)` carries the message to show and the exit
code; `MapError` is its subclass for bad map files. `report(error, stream)`
writes the message (to standard output by default) and returns the exit code,
or returns 1 when given `None`.

### Helpers

- `solongmaze.ftprintf` — `render(fmt, *args)` and `printf(fmt, *args)` with
  `%c %s %d %i %u %x %X %p %%`, plus the single-value formatters
  `format_char`, `format_str`, `format_int`, `format_uint`, `format_hex`,
  `format_pointer`.
- `solongmaze.nextline` — `LineReader(stream, buffer_size)` reads a stream
  line by line through a fixed-size buffer (`next_line()` or iteration);
  `read_lines(path)` yields the lines of a text file, newlines kept.
- `solongmaze.vector` — `Vector`, an ordered container of distinct objects
  compared by identity, with `add`, `add_at`, `get`, `index_of`, `remove`,
  `detach`, `find`, `filter`, `for_each`, `clone` and `destruct`.
- `solongmaze.values` — `ValueNode` and `ValueKind`, with `char_node`,
  `int_node`, `long_node` and `str_node` that check their values.
- `solongmaze.linkedlist` — `LinkedList` with front and back insertion,
  `last`, `pop_front`, `for_each`, `clear` and `mapped`.
- `solongmaze.textops` — C-style string functions (`strlcpy`, `strlcat`,
  `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`, `strtrim`, `split`,
  and others) returning indices or `None` instead of pointers.
- `solongmaze.chars` — ASCII classification (`isalpha`, `isdigit`, …),
  `toupper`, `tolower`, `atoi` and `itoa`.
- `solongmaze.fdio` — `put_char`, `put_str`, `put_endl`, `put_number` to a
  text stream.

## What the package does not do

There is no command to start a game and no game window. The package does not
read or check map files, does not track the player, collectibles or exit
door, and does not handle keys: it supplies the tile images, the error type
and the helpers above, but not the playable game itself.

## Tests

```
pip install .[test]
pytest
```