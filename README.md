# powertools

A small toolbox of text and formatting helpers. At its centre is a
**writer** that formats with a single placeholder, `$`, and writes each
value according to its type.

```python
from powertools.writer import pp

pp("$ goats on the $ enjoying grass", 10, "hill")
```

## Modules

- `powertools.textformat`: `split_time` (milliseconds to a `PTime`
  holding hours, minutes, seconds and milliseconds), `format_float`,
  `clamp`, text comparison (`compare_text`, `compare_text_ignore_case`
  returning -1, 0 or 1), `is_string` (does a text equal any of the
  candidates), `is_flag` (`true`, `1`, `yes` or `on`, in any case), and
  MAC address packing with `mac_to_int` and `int_to_mac`. Both MAC
  functions raise `ValueError` for input that does not fit six bytes.
- `powertools.writer`: the abstract `Writer` class with `write_char`,
  `write_text`, `write_spaces`, `write_lf`, `write_crlf`, `write`,
  `sprintf`, `sprint_lf` and `sprint_crlf`, and three writers:
  - `ConsoleWriter` writes to a text stream (standard output unless
    another stream is given). Before each log line it writes a trailer
    such as `[000001] `, with the elapsed time added when
    `flag_write_time` is set. The first trailer is preceded by a header
    line with the date, time and process id; `ConsoleWriter.set_write_header`
    turns that header on or off.
  - `CallbackWriter` passes its output, encoded as UTF-8, to a function
    together with a connection object, once both are set.
  - `NullWriter` discards its output and counts the UTF-8 bytes in
    `count_bytes_written`.

  `pp(...)` writes one line through the current log writer:
  `pp()`, `pp(fmt, *values)` or `pp(space, fmt, *values)` to indent.
  `set_log_writer` installs another writer and returns the previous one;
  `get_log_writer` returns the current one.
- `powertools.strings`: all text types share the search, comparison and
  conversion methods of `AbstractText`: `find`, `find_backwards`,
  `find_first_of`, `find_first_not_of`, `starts_with`, `contains`,
  `equals`, `equals_ignore_case`, `to_int`, `to_float`, `to_bool`,
  `get_view`, `find_view`, `file_extension` and `is_file_extension`.
  - `StringView` is a read-only piece of text; `StringView.up_to_line_end`
    cuts a text at its first CR or LF. A view made without text is invalid
    and false.
  - `TextBuffer` is a growable text that is also a `Writer`, with
    `assign`, `append`, `clear`, `insert_at`, `remove_chars`,
    `remove_first_found_char`, `remove_from_end_crlf` and
    `fill_with_random_letters`. It supports `+=`, `<<` and indexing.
  - `FixedText` is a `TextBuffer` with a fixed capacity (128 by default);
    it keeps at most `capacity - 1` characters and drops the rest.
- `powertools.containers`:
  - `OrderedMap` keeps insertion order and compares keys with `==`, so
    keys need not be hashable. `insert` leaves an existing key untouched
    and returns `False`; `add` inserts or replaces; `replace` only
    replaces; `at` raises `KeyError` for a missing key.
  - `Stack`: `push`, `pop` (returns `False` when already empty), `top`
    (raises `IndexError` when empty) and `is_empty`.
  - `Bits`: bit flags in an unsigned integer of fixed width (32 by
    default), with `set_flag`, `toggle_flag`, `clear_bits`,
    `set_bit_number`, `is_flag`, `and_flag` and the rest.
- `powertools.graphics`: `Color`, `Point`, `Size`, the `GraphicType`
  enumeration and the `GraphicObject` hierarchy (`Circle`, `Rectangle`,
  `Line`). Each object writes itself through `to_writer` and simulates
  drawing with `draw`, which logs one line per property.
  `create_random_object` returns a default circle, line or rectangle.
- `powertools.json_events`: the `Handler` callback interface for
  event-style JSON scanning (every event is ignored by default), and
  `SimpleHandler`, which logs each event indented by nesting depth.
- `powertools.fileutil`: `from_file` (the whole file, or `""` if it
  cannot be read), `to_file` (returns `False` if the file cannot be
  written) and `get_program` (the part of a path after its last slash
  or backslash).

## Formatting with `$`

Each `$` in a format string takes the next argument. A value is written
by its type:

- `True` and `False` as `true` and `false`
- floats with two decimals
- `None` as `nullptr`
- objects with a `to_writer(writer)` method through that method
- objects with a `to_string()` method through its result
- anything else as its `str()`

A `$` left over when the arguments run out is written as it stands, and
a format with no arguments is written unchanged.

```python
from powertools.strings import TextBuffer

s = TextBuffer()
s.sprintf("name:$, age:$", "Hugo", 99)
print(s)          # name:Hugo, age:99
```

Any writer can serve as the log writer, which makes log output easy to
capture:

```python
from powertools.strings import TextBuffer
from powertools.writer import pp, set_log_writer

log = TextBuffer()
previous = set_log_writer(log)
pp(4, "ratio:$", 1.5)
set_log_writer(previous)
print(repr(str(log)))   # '    ratio:1.50\n'
```

## What it does not do

- There is no JSON scanner or document model. `Handler` and
  `SimpleHandler` only receive events; your own code has to call them.
- There is no command-line program; the package is a library.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```