# innex

A small toolkit for walking through UTF-8 text files with a cursor, splitting
them into characters, lines or tokens, plus a few supporting helpers:
binary search, 4×4 transform matrices and a greeting command.

Requires Python 3.10 or later and has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `innex.wordtype`

`word_type(word)` classifies a single character as `"alpha"`, `"num"` or
`"other"`. Anything that is not exactly one character raises `ValueError`.

### `innex.bin_search`

Binary search over a sorted sequence. Each function raises `ValueError` when
the sequence is empty.

- `bin_search(arr, target)`: index of an element equal to `target`, or `None`.
- `nomore_tar(arr, target)`: index of an element equal to `target` as soon as
  one is met, otherwise of the largest element below it, or `None`.
- `noless_tar(arr, target)`: index of an element equal to `target` as soon as
  one is met, otherwise of the smallest element above it, or `None`.

### `innex.pano`

`Pano` is an enum of cursor positions: `PREV`, `AT`, `NEXT` and `ON`.

### `innex.travel`

- `Content` holds the lines of one or more files (read with `read_file`, which
  appends) and indexes the whole text by a single running character index.
  Line breaks take no index: the last character of a line is followed directly
  by the first character of the next. `len(content)` is the number of
  characters; `content[i]` raises `IndexError` outside that range.
  - `index_belong(index)`: line number holding `index`, or `None`.
  - `get_line_inside(index)`: the line holding character `index`, or `None`.
  - `get_line_outside(index)`: line number `index`, or `None`.
  - `get_mul(head, tail)`: the characters from `head` up to, not including,
    `tail`.
  - `get_token(index)`: the run of characters of the same `word_type`
    starting at `index`; `None` when out of range or on a space.
- `TravelMode` is `WORD`, `LINE` or `TOKEN`.
- `Travel(mode=TravelMode.WORD)` walks a `Content` with `get_next()`, which
  returns one character, the rest of the current line, or one token, and
  advances past it. It returns `None` at the end of the content. In token mode
  it also returns `None`, without advancing, when the cursor rests on a space.

### `innex.token_stream`

`TokenStream` loads a file with `load_file`, appending each character as a
token. `topano(tar)` sets the direction and `move_to(offset)` moves the cursor,
clamped to the tokens held: `Pano.ON` moves forward, `Pano.PREV` backward, and
any other direction raises `ValueError`. A negative offset raises `ValueError`
and moving with no tokens raises `IndexError`. `get_token()` returns the token
under the cursor, or `None`.

### `innex.ana`

Data holders for text analysis:

- `TecorMode` (`EDGE`, `LETTERS`, `WORDS`) and `Tecor`, a cursor holding
  `[row, column]` positions `begin`, `end`, `at`, `side` and the line lengths
  `ends`; `rec(begin, end)` sets its range.
- `Wopol` reads a file with `read(filename)`, replacing what it held, into
  `contents` (one list of characters per line) and sets its `tec` to span from
  the start to the end of the last line.
- `TokenState` (`INIT`, `ANA`) and `Token`, a piece of text with a state and
  a tag.
- `Mean`, a named meaning with a type, an `action` callable and a list of
  input meanings.

### `innex.matrix`

- `HMatrix` is a 4×4 homogeneous matrix, all zeros until `set_position`,
  `set_rot_x`, `set_rot_y` or `set_rot_z` (angles in radians) is called.
  Matrices compose with `a @ b`, and `transform(point)` applies one to an
  `(x, y, z)` point.
- `Position(x, y, z)` holds a point and its translation matrix in `mat`.
- `Rotation(rox, roy, roz)` holds three angles and, in `mat`, the rotation
  that applies X, then Y, then Z.

### `innex.greeter`

`greet(name)` returns `"Hello, <name>! You've been greeted from Python!"`.

## Example

```python
from innex.bin_search import bin_search, noless_tar
from innex.travel import Content, Travel, TravelMode
from innex.wordtype import word_type

word_type("a")            # "alpha"
word_type("7")            # "num"

bin_search([1, 3, 5, 7], 5)   # 2
noless_tar([1, 3, 5, 7], 4)   # 2

content = Content()
content.read_file("notes.txt")
print(len(content), content.get_line_inside(0))

travel = Travel(TravelMode.LINE)
travel.read_file("notes.txt")
for line in iter(travel.get_next, None):
    print(line)
```

## Command line

```
innex-greet Alice
```

prints the greeting for the given name. Without an argument the name is read
from the first line of standard input; an empty name prints nothing.

## What it does not do

There is no graphical window: the greeting is available only as the function
and the command above. `innex.ana` holds data only; nothing in the package
parses or evaluates text with `Mean` or `Token`.