# gmacs

The building blocks of a small Emacs-like text editor for the terminal:
text buffers, cursor motion, modes, named commands, a buffer listing with
name completion, and decoding of raw terminal input.

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

### `gmacs.width`

Measures text in terminal cells. East Asian wide characters take two cells.
Characters that take no cell, such as control characters, count as zero.

- `char_width(ch)` gives the width of one character. It raises `ValueError`
  when given anything other than a single character.
- `string_width(text)` gives the width of a whole string.
- `truncate_to_width(text, max_width)` cuts text to fit. A wide character
  that would straddle the limit is dropped.

### `gmacs.buffer`

`Buffer(name)` is a list of lines with a cursor. Its attributes are:

- `name`
- `lines`, which always holds at least one line
- `cursor`, a frozen `Position(row, col)`; columns count characters
- `modified`
- `filepath`
- `major_mode`
- `minor_modes`

Its methods are:

- `Buffer.from_file(path)` reads a UTF-8 file. It names the buffer after the
  last `/`-separated part of the path. It drops a trailing newline and
  strips `\r` from line ends. It raises `OSError` if the file cannot be read.
- `set_cursor(row, col)` moves the cursor, clamped to the text.
- `insert_char(ch)` inserts one character at the cursor. A `"\n"` splits the
  line.
- `insert_string(text)` inserts text that may span several lines.
- `delete_backward()` and `delete_forward()` remove one character. At a line
  boundary they join lines instead.
- `clear()` empties the buffer.
- `enable_minor_mode(mode)` adds a mode, ignoring a duplicate name. The list
  is kept ordered by descending `priority`.
- `disable_minor_mode(name)` removes the mode with that name.

### `gmacs.cursor`

Emacs-style motion on a single buffer:

- `forward_char` and `backward_char` wrap across lines.
- `next_line` and `previous_line` keep the display column. A wide character
  that would straddle that column is not crossed.
- `beginning_of_line` and `end_of_line`.

The helpers `display_column(line, col)` and
`column_at_display_width(line, target_width)` convert between character
indexes and display columns.

### `gmacs.modes`

- `FundamentalMode` is the default major mode. It has no file pattern, its
  `indent` always returns 0, and it has no syntax highlighting.
- `AutoAMode` is a demonstration minor mode with priority 10. Once it is
  `enable`d for a buffer, `process_newline(buffer)` inserts an `a` at the
  cursor.

### `gmacs.commands`

- `Command(name, function)` pairs a name with a function. `execute(editor)`
  calls the function with the editor.
- `CommandRegistry` holds commands by name. It starts with the built-ins
  `version`, `list-commands` and `clear-buffer`. Its methods are `register`,
  `register_function`, `get` (which returns `None` when the name is
  unknown) and `names` (which returns the names in sorted order). It also
  supports `in` and `len()`.
- `quit_editor`, `delete_backward_char` and `delete_char` are ready-made
  command functions.

Command functions expect an editor object with these members:

- a `current_buffer` attribute
- `set_message(text)`
- `quit()`

### `gmacs.buffer_list`

- `format_buffer_list(buffers, current)` returns the `*Buffer List*` header
  followed by one row per buffer, with the current buffer first.
- `format_buffer_line(buffer, is_current)` formats a single row. Its flag
  columns show `.` for the current buffer, `%` for special `*...*` buffers
  other than `*scratch*`, and `*` for a buffer with changes.
- `buffer_size(buffer)` gives the size of a buffer in characters.
- `buffer_mode_name(buffer)` gives the mode label shown in a row.
- `complete_name(text, names)` returns a `Completion` with the fields
  `text`, `matches` and `message`, and the property `changed`:
  - A single match completes fully.
  - Several matches complete to their common prefix when it is longer than
    the input.
  - Otherwise the result carries a `"Matches: ..."` message.
- `common_prefix(names)` gives the longest prefix shared by all the names.

### `gmacs.keys`

`parse_input(data)` turns one chunk of terminal bytes into a list of
`KeyEvent` values. Each `KeyEvent` has the fields `key`, `rune`, `ctrl`,
`meta` and `raw`.

- An ANSI sequence such as `b"\x1b[A"` becomes one event whose `key` is the
  whole sequence.
- Other multi-byte input is decoded as UTF-8, one event per character.
  Bytes that cannot be decoded are dropped.
- A single byte becomes one of:
  - a control key, with `ctrl=True` and a lower-case `key`
  - Enter, with `rune` set to `"\n"`
  - Escape, with `key` set to `"\x1b"`
  - Backspace
  - a printable character

## Example

```python
from gmacs.buffer import Buffer
from gmacs.cursor import backward_char

buf = Buffer("*scratch*")
for ch in "hello\nworld":
    buf.insert_char(ch)
backward_char(buf)
print(buf.lines)    # ['hello', 'world']
print(buf.cursor)   # Position(row=1, col=4)
```

```python
from gmacs.keys import parse_input

events = parse_input(b"\x18")   # [KeyEvent(key='x', ctrl=True, raw=b'\x18', ...)]
```

## What this package does not do

It is a library of editor parts, not a runnable editor. It has none of the
following:

- a command to start an editor
- an editor object, event loop or key-binding dispatcher
- a minibuffer
- windows, splitting or scrolling
- screen rendering or terminal raw-mode handling

The command functions work with any object you supply that has the members
listed above. There is also no way to save a buffer back to a file.