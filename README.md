# solong

Building blocks for a small top-down maze game. The player walks a
rectangular tile map, picks up every collectible and leaves through the
exit. This package checks maps and loads XPM textures into pixel
buffers.

## Maps

A map is a sequence of rows, given as strings. These characters may
appear in a row (`solong.mapcheck.Tile`):

| Char | Meaning     |
|------|-------------|
| `0`  | floor       |
| `1`  | wall        |
| `C`  | collectible |
| `E`  | exit        |
| `P`  | player      |

A map is valid when all of these hold:

- it has at least one row;
- every row is as wide as the first;
- it uses only the characters above;
- it has exactly one player and exactly one exit;
- it has at least one collectible;
- walls close it in on all four sides;
- the player can reach every collectible and the exit.

```python
from solong.mapcheck import validate_map, MapError

grid = [
    "1111111",
    "1P0C0E1",
    "1111111",
]
try:
    info = validate_map(grid)
except MapError as err:
    print("bad map:", err)
else:
    print(info.width, info.height, info.collectibles, info.player)
```

`validate_map` returns a `MapInfo` with `width`, `height`,
`collectibles` (how many there are) and `player` (its `(x, y)`
position). A broken rule raises `MapError`, a `ValueError`. Its message
names the rule, for example `"Map not rectangular!"` or
`"Wrong map. Exit or collectible not reachable."`.

The checks can also be run one at a time:

- `validate_format(grid)` checks the shape, the characters, the counts
  and the walls, but not reachability. It returns the `MapInfo`.
- `flood_fill(grid, start)` returns a copy of the grid. In the copy every
  cell reachable from `start` without crossing a wall is replaced by
  `F`.
- `validate_path(grid, start)` raises `MapError` if a collectible or the
  exit is left unflooded.

## Textures

`solong.xpm` reads XPM images into `Image` objects that hold 32-bit
pixels:

```python
from solong.xpm import xpm_file_to_image, xpm_to_image

image = xpm_file_to_image("textures/wall.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))

image = xpm_to_image([
    "2 1 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
])
assert image.pixel(0, 0) == 0xFF0000
assert image.pixel(1, 0) == 0xFF000000
```

- `xpm_to_image(data)` takes the XPM's strings already split out:
  header, colour lines, then pixel rows.
- `xpm_file_to_image(path)` reads a file. It blanks out `/* */` and `//`
  comments that are not inside quotes, then takes each double-quoted
  string in turn.
- `parse_xpm(lines)` does the parsing for both.

A colour is given after the `c` key. It can be a `#rrggbb` value or an
X11 colour name such as `forest green` or `gray50`. Names match without
regard to case. An unknown name gives black (`0`). `None` gives a
transparent pixel, stored as `0xFF000000`. A pixel whose characters
match no colour line also gives `0`.

An `Image` has `width`, `height`, `bits_per_pixel` (32), `endian`,
`size_line` (bytes per row) and the raw `data`. `pixel(x, y)` raises
`IndexError` outside the image.

Malformed XPM data raises `XpmError`, a `ValueError`. Examples are a
missing or non-positive header, a colour line without a `c` value, or
too few rows. A file that cannot be read raises the usual `OSError`.

Helpers in the same module:

- `text_rgb(name, end=None)` turns colour text into `0xRRGGBB`.
- `color_code(chars)` turns a pixel's characters into its lookup key.
- `strip_comments(text)` and `quoted_lines(text)` are the file-reading
  steps.

`solong.colornames.find_color(name)` looks up a colour name. It returns
`None` for an unknown name. `COLOR_NAMES` is the read-only table.

## Other helpers

- `solong.wordtab.split_words(text)` splits text on runs of spaces and
  tabs.
- `find_substring(text, find, limit)` and
  `find_unquoted(text, find, limit)` return the offset of `find`, or
  `-1`. They return `-1` at once when `find` is longer than `limit`.
  `find_unquoted` skips matches inside double quotes.
- `solong.colorvalue.good_color(color, depth, shifts)` packs a
  `0xRRGGBB` colour into a pixel value for displays shallower than 24
  bits. At a depth of 24 or more it returns the colour unchanged. Get
  the `ChannelShifts` from the visual's colour masks with
  `mask_shifts(red_mask, green_mask, blue_mask)`.

## What it does not do

This package has no window, rendering, keyboard handling or game loop.
It does not read map files from disk. It checks grids you pass to it and
decodes textures into pixel buffers. Drawing them is up to the caller.

## Tests

```
pip install -e .[test]
pytest
```