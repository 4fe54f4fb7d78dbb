# tuxjump

The game-independent core of a jump'n'run platformer, in pure Python with
no third-party dependencies.

## Modules

- `tuxjump.lisp`: reader and printer for the s-expression format used by
  level, sprite and configuration data. Symbols become `Symbol` (a `str`
  subclass that never equals a plain string), strings `str`, integers `int`,
  reals `float`, `#t`/`#f` `bool`, nil `None`, and lists chains of `Cons`
  cells; a `#?( ... )` form starts with a `PatternCons`. Dotted pairs and
  `;` comments are understood. `read(stream)` reads one expression from a
  `CharStream` and raises `EOFError` at the end of input or
  `LispParseError` on malformed input; `read_from_string`, `read_from_file`
  and `read_from_gzfile` read the first expression of a string, a text file
  or a gzip file. `dumps` / `dump` print a value back. List helpers:
  `make_list`, `iterate`, `cxr`, `list_length`, `list_nth_cdr`, `list_nth`.
- `tuxjump.pattern`: `compile_pattern(obj)` turns `#?(any)`, `#?(symbol)`,
  `#?(string)`, `#?(integer)`, `#?(real)`, `#?(boolean)`, `#?(list)` and
  `#?(or ...)` forms into `PatternVar`s and returns the pattern with its
  variable count; `match_pattern` and `match_string` return
  `(matched, captures)`. Bad patterns raise `PatternError`.
- `tuxjump.config`: `LispReader` looks up `(name value ...)` entries
  (`read_int`, `read_float`, `read_string`, `read_bool`, `read_lisp`,
  `read_int_vector`, `read_string_vector`, `read_char_vector`), returning
  `None` when a name is absent and raising `LispTypeError` on a value of
  the wrong type (`read_int` returns `None` instead). `LispWriter` builds a
  list `(name (key value) ...)` through its `write_*` methods and
  `create_lisp()`.
- `tuxjump.physic`: `Physic`, velocity and acceleration with optional
  gravity. `apply(frame_ratio, x, y, gravity)` returns the new `(x, y)`.
- `tuxjump.scene`: `PlayerStatus` (score, coins, lives, bonus, score
  multiplier), `BonusType`, `bonus_to_string` and `string_to_bonus`.
- `tuxjump.sprite`: `Sprite.from_lisp` builds a sprite definition from
  `((name ...) (images ...) (fps ...) (x-hotspot ...) (y-hotspot ...))`;
  `frame_at(ticks)` gives the frame shown at a time in milliseconds and
  `draw_position` the top-left corner for a hotspot. Missing name or images
  raise `SpriteError`.
- `tuxjump.particles`: `SnowParticleSystem` and `CloudParticleSystem` on a
  wrapping virtual rectangle; `simulate` moves the particles and
  `visible(scroll_x, scroll_y, layer)` yields the on-screen ones with their
  screen positions. A `random.Random` can be passed for repeatable runs.
- `tuxjump.menuitem`: `MenuItem`, `MenuItemKind`, the `Key` codes and
  `key_name`.
- `tuxjump.menu`: `Menu` (entries, cursor, `handle_key`, `action`, `check`,
  text and number input, toggles, string selection, `width`/`height`) and
  `MenuStack`, the shown menu and the menus to return to.
- `tuxjump.menus`: `build_menus(show_fps, screen_width, screen_height)`
  creates the game's standard menus as a `GameMenus` sharing one stack.
- `tuxjump.files`: `faccessible`, `fwriteable`, `fcreatedir`, `dsubdirs` and
  `dfiles`, which look in a user directory first and a data directory second.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from tuxjump.lisp import read_from_string, dumps
from tuxjump.config import LispReader

data = read_from_string('(sprite (name "tux") (fps 20) (images "a.png" "b.png"))')
reader = LispReader(data.cdr)
print(reader.read_string("name"))           # tux
print(reader.read_string_vector("images"))  # ['a.png', 'b.png']
print(dumps(data))
```

```python
from tuxjump.lisp import read_from_string
from tuxjump.pattern import match_string

print(match_string("(pos #?(integer) #?(integer))", read_from_string("(pos 3 4)")))
# (True, [3, 4])
```

```python
from tuxjump.menus import build_menus
from tuxjump.menuitem import Key

menus = build_menus(show_fps=False)
menus.stack.set_current(menus.main)
menus.main.handle_key(Key.RETURN)
menus.main.action()
print(menus.main.check())                     # 0, the "Start Game" entry
print(menus.stack.current is menus.load_game) # True
```

## What it does not do

The package holds game state and logic only. It opens no window, draws
nothing, loads no images, plays no sound and runs no game loop; menus,
sprites and particle systems report positions, sizes and frame indices for
a renderer to use. It has no command-line program.