# cubkit

Tools for the `.cub` scene files of a small raycasting game. The package also
provides the image helpers such a game needs: an in-memory pixel image, an XPM
texture reader and the X11 colour-name table.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Checking a scene file

```
cubkit maps/level1.cub
```

The command takes exactly one argument. With any other number it prints a
usage line. The argument must end in `.cub` and have a name before the
extension. The command then does the following:

1. It reads the file and collects the texture (`NO`, `SO`, `WE`, `EA`) and
   colour (`F`, `C`) declarations. A line counts as a declaration when it
   starts with the identifier and a space, after any leading spaces or tabs.
   An element declared twice is an error.
2. It takes the first line that begins with a space or a tab as the start of
   the map. All six elements must have been declared by then, and a file with
   no such line is an error.
3. From that line on, it rejects empty lines and any character other than
   `1`, `0`, `N`, `S`, `W`, `E`, space, tab and newline.

An accepted file prints `Parsing completed successfully!` and exits with
status 0. On any error the command prints a message and exits with status 1.

## Library use

- `cubkit.cubfile` covers argument and line-level checks:
  - `has_cub_extension` and `check_arguments` check the command line.
  - `parse_color` turns `"220,100,0"` into `0xDC6400`. Each component must be
    in 0–255.
  - `read_lines` reads a file into lines that keep their newlines.
  - `trim`, `is_whitespace` and `is_blank` test and clean up single lines.
  - `contains_invalid_characters`, `find_map_end`, `validate_after_map` and
    `extract_map` work on the map lines.
  - Errors are raised as `CubError`.
- `cubkit.scene` locates the elements and the map:
  - `SceneElements` records the declarations and their text through
    `register`. `all_loaded` reports whether all six are present.
  - `scan_elements` reads a file into a `SceneElements`.
  - `find_map_start` returns the index of the first map line.
  - `parse_texture_colors` runs the same steps as the command and returns that
    index.
- `cubkit.mapcheck` validates a grid of map rows:
  - `check_map_elements` allows only `0`/`1` plus exactly one player start
    (`N`, `S`, `E` or `W`) and returns it as a `Player`.
  - `check_map_walls` requires `1` along every border. Short rows are padded
    with spaces.
  - `check_map` runs both checks and returns a `GameMap`.
  - Errors are raised as `MapError`, a subclass of `CubError`.
- `cubkit.xpm` reads XPM textures into an `Image`:
  - `image_from_file` reads a file and `image_from_data` takes the strings
    directly.
  - `strip_comments`, `quoted_lines` and `parse_xpm` expose the individual
    steps.
  - The colour `None` becomes `0xFF000000`.
  - Malformed input raises `XpmError`.
- `cubkit.image`: `Image(width, height, bits_per_pixel=32, big_endian=False)`
  stores rows padded to 32 bits. It supports 8, 16, 24 or 32 bits per pixel
  and provides `put_pixel`, `get_pixel` and `row`.
- `cubkit.pixelformat`: `ColorFormat.from_masks(red_mask, green_mask,
  blue_mask, depth)` describes a visual. Its `pixel_value` converts a
  `0xRRGGBB` colour for that visual. At depth 24 and above the colour is
  returned unchanged.
- `cubkit.colors`: `lookup_color(name, suffix=None)` resolves X11 colour
  names, ignoring case, and reads `#`-prefixed values as hexadecimal. For
  example, `lookup_color("light", "blue")` gives `0xADD8E6`. `"none"` gives -1
  and an unknown name gives 0.
- `cubkit.text`: `split_words`, `find` and `find_unquoted` are the string
  helpers used by the XPM reader.

```python
from cubkit.xpm import image_from_data

img = image_from_data([
    "2 1 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
])
assert img.get_pixel(0, 0) == 0xFF0000
assert img.get_pixel(1, 0) == 0x0000FF
```

## What it does not do

cubkit checks files and decodes images; it is not the game itself.

- It opens no window and draws nothing to a screen.
- It does no raycasting.
- It handles no keyboard or mouse input.
- The `cubkit` command does not open the texture paths named in a scene file.
- The command does not check the values of the `F` and `C` colours.
- The command does not run the wall and player checks in `cubkit.mapcheck`.
  Call those from Python on the map rows.