# iniconf

A small library for reading, editing and writing INI-style configuration
data. It keeps sections and keys in the order they were loaded or added,
keeps comments attached to the file, its sections and its keys, and writes
everything back out in that order.

## Installation

```
pip install iniconf
```

The package has no dependencies outside the standard library.

## Usage

```python
from iniconf.document import IniFile

ini = IniFile(unicode=True, multi_key=False, multi_line=True, case_sensitive=False)
ini.load_data(b"""; settings for the demo
[server]
host = localhost
port = 8080
debug = yes
""")

ini.get_value("server", "host", None)          # "localhost"
ini.get_long_value("server", "port", 0)        # 8080
ini.get_bool_value("server", "debug", False)   # True

ini.set_value("server", "timeout", "30", None, False)
ini.set_long_value("server", "mask", 255, None, True, False)   # stored as "0xff"
ini.delete("server", "debug", False)

ini.save_file("settings.ini", True)
```

### Loading and saving

`IniFile` reads from a path (`load_file`), a binary or text stream
(`load_stream`), or bytes or text (`load_data`). Loading more data into a
document that already holds some merges it in. It writes to a path
(`save_file`), a binary or text stream (`save`), or returns bytes
(`to_bytes`).

- With `unicode=True` the data is UTF-8: a leading byte-order mark is
  skipped on load, and one is written on save when `add_signature` is true
  (the default for `save_file`). Otherwise the locale's preferred encoding
  is used. `set_unicode` changes this only before anything is loaded.
- Data that cannot be decoded or encoded raises `iniconf.document.IniError`.
  Missing or unreadable files raise the usual `OSError`.
- The attribute `spaces` (default true) chooses between `key = value` and
  `key=value`; `newline` (default `os.linesep`) sets the line ending used
  when writing. Output always ends with an empty line.

### Reading values

- `get_value(section, key, default)` returns the first value of a key.
- `get_long_value` accepts decimal or `0x` hexadecimal; `get_double_value`
  accepts what C's `strtod` would; `get_bool_value` treats values starting
  with `t`, `y`, `1` or `on` as true and `f`, `n`, `0` or `of` as false
  (ignoring case). Missing, empty or unreadable values give the default.
- `get_all_sections`, `get_all_keys`, `get_all_values` and `get_section`
  return `iniconf.names.Entry` objects (`item`, `comment`, `order`);
  `get_section_size` counts keys. These return `None` when the section or
  key does not exist.

Section and key names are matched ignoring ASCII case unless
`case_sensitive=True`. Keys before any section header belong to the
section named `""`.

### Changing values

`set_value`, `set_long_value`, `set_double_value` and `set_bool_value`
return `iniconf.document.SetResult.INSERTED` or `SetResult.UPDATED`.
Passing `None` as the key or value to `set_value` creates an empty section.
`set_double_value` writes six decimal places; `set_bool_value` writes
`true` or `false`. `delete(section, key, remove_empty)` removes a key (all
of its values) or, with `key=None`, a whole section, and returns whether
anything was found.

### Comments

A comment at the very start of the first loaded data becomes the file
comment (`file_comment`). A comment just before a section header belongs
to that section, and one just before a key belongs to that key. A comment
can only be given to a section or key when it is first created, and its
text must start with `;` or `#`, otherwise `ValueError` is raised.

### Multi-line values

With `multi_line=True`, a value such as

```
text = <<<END
first line
second line
END
```

is loaded as `"first line\nsecond line"`. Values that start or end with
whitespace or contain line breaks are saved the same way, using the tag
`END_OF_TEXT`.

### Repeated keys

With `multi_key=True`, each `set_value` adds another value for the key;
`get_all_values` returns them all and `has_multiple` tells whether more
than one exists. Passing `force_replace=True` replaces all of them with one
value while keeping the original position and comment.

### Lower-level modules

- `iniconf.parser` — `IniParser` yields `ParsedEntry` items from INI text.
- `iniconf.writer` — `render_ini` renders `SectionBlock`/`KeyBlock` data.
- `iniconf.values` — parsing and formatting of integers, floats, booleans.
- `iniconf.converter` — `Converter` for the storage encoding.
- `iniconf.names` — name folding and ordering rules.

## What it does not do

This is a library only: it has no command-line tool, and it does not
search for configuration files on its own; callers pass the path, stream
or data to load.