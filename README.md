# joshu

Library pieces for a terminal file manager: pasting (copying and moving)
files and directory trees with progress reports, ordering directory
listings, parsing key names, and fitting names and text into a fixed
number of terminal columns.

## Modules

- `joshu.fileops`: `IoWorkerThread(kind, paths, dest, options)` pastes
  several paths into the directory `dest`. `kind` is `FileOp.COPY` or
  `FileOp.CUT`. `start(report)` first counts files and bytes, then calls
  `report` (or nothing, if it is `None`) with snapshots of an
  `IoWorkerProgress` (`kind`, `files_processed`, `total_files`,
  `bytes_processed`, `total_bytes`) and returns the final progress. It raises
  `OSError` on the first failure. With `IoWorkerOptions(overwrite=False)`, a
  name that already exists at the destination gets a `_0`, `_1`, ... suffix.
  `recursive_copy` and `recursive_cut` do the work for a single path.
  A cut first tries a plain rename and falls back to copy-and-remove only
  when the destination is on another file system.
- `joshu.observer`: `IoWorkerObserver(thread, src, dest)` holds a worker
  thread. `set_progress` stores the latest progress, `update_msg` builds a
  message such as `Copying (2/5) (1.00 K/4.00 K) completed` in `msg`, and
  `join` waits for the thread.
- `joshu.sorting`: `SortOption` orders paths. It puts directories first
  (`directories_first`), can be case sensitive (`case_sensitive`) and can
  reverse the result (`reverse`). It applies a chain of `SortType` criteria
  (`natural`, `lexical`, `size`, `ext`, `mtime`) held in `SortTypes`.
  `set_sort_method` moves a criterion to the front, `compare(f1, f2)` returns
  a negative, zero or positive number, and `sort(paths)` returns a new list.
  `natural_compare(a, b)` compares strings with digit runs read as numbers.
- `joshu.display`: `DisplayOption` holds display settings, including
  `column_ratio` (default `(1, 3, 4)`) and the derived `default_layout` and
  `no_preview_layout`. Its `filter_func()` returns `filter_hidden`, or
  `no_filter` when `show_hidden` is set.
- `joshu.keys`: `str_to_key`, `str_to_mouse` and `str_to_event` parse names
  such as `q`, `ctrl+a`, `alt+x`, `arrow_up`, `page_down`, `f5`,
  `scroll_up`. Each returns `None` for an unknown name. `key_to_string`,
  `mouse_to_string` and `event_to_string` turn events back into text. The
  event types are `Key`, `KeyKind`, `MouseEvent`, `MouseButton` and
  `UnsupportedEvent`.
- `joshu.textwidth`: `display_width(text)` gives the number of terminal
  columns. `truncate(text, width)` cuts text without splitting grapheme
  clusters.
- `joshu.labels`: `trim_file_label(name, width)` shortens a file name with
  `…` and keeps its extension where it fits. `factor_labels_for_entry(left,
  right, width)` splits a row between a name and its detail label.
- `joshu.multiline`: `MultilineText(text, area_width)` wraps one line into
  rows (`LineInfo` items), with `height()` and `line_strings()`.
- `joshu.tabbar`: `tab_label(name, curr, length, width)` gives labels like
  `2/3: docs`.
- `joshu.formatting`: `file_size_to_string` (e.g. `2.00 K`) and
  `mtime_to_string` (UTC, `YYYY-MM-DD HH:MM`).
- `joshu.unixmode`: `is_executable(mode)` and `mode_to_string(mode)`
  (e.g. `-rwxr-xr-x`).
- `joshu.naming`: `rename_filename_conflict(path)` returns the path, or the
  first free `<name>_<n>` beside it.
- `joshu.devicons`: `icon_for(name, is_dir)` returns a Nerd Font glyph. It
  looks at the exact name first, then at the extension.
- `joshu.selection`: `SelectOption(toggle, all, reverse)`.

## Install

```
pip install .
```

## Examples

```python
from joshu.formatting import file_size_to_string
from joshu.unixmode import mode_to_string
from joshu.labels import trim_file_label
from joshu.keys import str_to_key, key_to_string

file_size_to_string(2048)            # '2.00 K'
mode_to_string(0o100755)             # '-rwxr-xr-x'
trim_file_label("foo.ext", 6)        # 'f….ext'
key_to_string(str_to_key("ctrl+a"))  # 'ctrl+a'
```

The next example copies a file into an existing directory and follows the
progress:

```python
from pathlib import Path
from joshu.fileops import FileOp, IoWorkerOptions, IoWorkerThread
from joshu.sorting import SortOption

worker = IoWorkerThread(FileOp.COPY, [Path("notes.txt")], Path("backup"), IoWorkerOptions())
final = worker.start(lambda p: print(p.files_processed, "/", p.total_files))
print(final.bytes_processed)

print(SortOption().sort(Path("backup").iterdir()))
```

To run a paste in the background, start `worker.start` in a
`threading.Thread` and wrap that thread in an `IoWorkerObserver`.

## What it does not do

The package has no interactive terminal interface, no command to run, no
key-map, theme or configuration file loading, and no file previews. It
provides the pieces listed above for a program that has these.

## Tests

```
pip install .[test]
pytest
```