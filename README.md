# fdfview

Reads `.fdf` height maps into a grid of heights and colours.

A map file is plain text. Each line is one row of the grid. Each token
separated by spaces is the height of one point. A token may carry a colour
after a comma, written as `0x` followed by lower-case hex digits, for example
`10,0xff0000`. A point without a colour is white (`0xffffff`).

```
0 0 0 0
0 10 10 0
0 10,0xff0000 10 0
0 0 0 0
```

## Installing

```
pip install .
```

The package has no runtime dependencies.

## Loading a map

```python
from fdfview.parse import load_map, parse_map, MapError

height_map = load_map("maps/pyramid.fdf")
print(height_map.lines, height_map.columns)
print(height_map.heights[1][2], hex(height_map.colors[2][1]))

grid = parse_map(["0 0 0\n", "0 10,0xff0000 0\n"])
assert grid.heights == [[0, 0, 0], [0, 10, 0]]
assert grid.colors[1][1] == 0xFF0000
```

- `load_map(path)` accepts only names of at least five characters that end
  in `.fdf` (see `is_fdf_path`). It reads the file with `read_lines` and
  parses it with `parse_map`. A missing file raises the usual `OSError`.
- `parse_map(lines)` returns a `HeightMap` with `heights` and `colors`, both
  indexed `[line][column]`, and the properties `lines` and `columns`.
  `columns` is taken from the last row.
- `MapError`, a `ValueError`, is raised in three cases: the input is empty,
  the first line is blank, or a row has fewer values than the last row.
- `parse_color(token)` returns the colour of one token.

Heights are read with `fdfview.text.atoi`. It skips leading whitespace,
accepts one sign and stops at the first non-digit. The result is a 32-bit
signed integer.

## Other helpers

- `fdfview.reader`:
  - `LineReader(stream, buffer_size=4096)` returns one line per call to
    `next_line()`, keeping the newline. It also works as an iterator. It
    handles both text and binary streams.
  - `read_lines(path)` returns every line of a text file.
- `fdfview.text`: string helpers. These are `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strjoin`, `strnstr`, `strncmp`, `strchr`, `strrchr`
  and `strchr_index`.
- `fdfview.chars`: ASCII classification and case conversion. These are
  `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and
  `tolower`. They accept a one-character string or an integer code.
- `fdfview.memory`: operations on bytearrays. These are `memset`, `bzero`,
  `memcpy`, `memmove`, `memchr`, `memcmp` and `calloc`.
- `fdfview.linked`: `LinkedList` of `Node`s. Its methods are `push_front`,
  `push_back`, `pop_front`, `last`, `clear`, `iterate` and `map`. It also
  supports `len()` and iteration.
- `fdfview.printfd`: printf-style formatting with the conversions
  `c s d i u x X p %`. It provides `format_conversion` and `format_text`, and
  the stream writers `printfd`, `put_char`, `put_str`, `put_endl` and
  `put_number`.

## What it does not do

The package does not open a window and does not draw anything. There is no
projection, rotation or zoom of the wireframe, and no keyboard or mouse
control. It installs no command. It stops at turning a map file into a
`HeightMap`.

## Tests

```
pip install .[test]
pytest
```