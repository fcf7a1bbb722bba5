# fluchooser

This package holds the logic behind a graphical file chooser. It does not depend on any GUI toolkit. Its parts are:

- a current directory, listed and filtered through shell-style patterns
- sorting and selection of entries, with single and multiple selection modes
- back and forward history
- a list of favourite directories kept in a text file
- completion of file names, as when the user presses Tab
- creating, renaming and deleting files and folders

It also has two smaller helpers:

- a lookup of items in a flat menu description
- a progress value and a progress meter that estimates the remaining time

The package has no dependencies outside the standard library. The `test` extra installs pytest.

## Modules

- `fluchooser.patterns`
  - `filename_match(name, pattern, case_sensitive)` matches a name against a glob. It supports `?`, `*`, `[a-z]`, `[^x]` / `[!x]`, `{a,b|c}` and `\` quoting. Matching is case-sensitive by default, except on Windows.
  - `parse_filter(pattern)` turns a string such as `"Images (*.{png,jpg})|Text (*.txt)"` into `(label, extensions)` choices. It always includes an `"All Files (*)"` choice.
  - `strip_patterns(text)` splits what the user typed on `|` or `;`.
  - `is_probably_a_pattern(text)` tells whether the text looks like a pattern.
  - `expand_extensions(pattern)` turns `"png,jpg"` into `["*.png", "*.jpg"]`.
- `fluchooser.paths`
  - `win2unix` and `cleanup_path` normalise paths. `cleanup_path` drops `./`, collapses `//` and resolves `../`.
  - `parent_dir` and `split_dir_file` take paths apart.
  - `format_size(size, is_dir)` gives a readable size, such as `"1.5 KB"`.
  - `format_date(stamp)` turns a `ctime` string or a POSIX timestamp into a date such as `"3/19/2003 7:23 AM"`.
- `fluchooser.entries`
  - `Entry`, `EntryType` and `SortMethod` describe the entries of a listing.
  - `FileTypeRegistry` maps extensions to a description and an icon. `ContextHandlerRegistry` holds the context-menu actions, filtered by entry type and extension.
  - `sort_entries` sorts by name, size, date or type and always puts directories first. `toggle_sort` switches the sort column or reverses the order. `common_prefix` finds the case-insensitive prefix that names share.
- `fluchooser.navigation`
  - `History` holds back and forward history.
  - `Favorites` keeps a list of favourite directories, one per line, in a file.
- `fluchooser.chooser`
  - `FileChooser` and `SelectionType`.
  - A `FileChooser` changes directory with `cd`, `up`, `back`, `forward` and `reload`.
  - It selects entries with `select`, `select_all` and `unselect_all`. `select` takes ctrl and shift modifiers.
  - `ok` and `cancel` accept or drop the choice. `value`, `values` and `count` report it.
  - `new_folder`, `rename` and `trash` change the file system. A `confirm` callable is asked before anything is deleted.
  - `add_to_favorites` remembers the current directory, and `complete` completes a partial file name.
  - By default the favourites are kept in `~/.fluchooser.favorites`.
- `fluchooser.menu`
  - `MenuItem` is one slot of a flat menu.
  - `find_in_menu(items, name)` finds an item by its label.
  - `full_find_in_menu(items, fullname)` finds an item by a path such as `"File/&Open"`. It ignores `&` and `_` shortcut markers.
- `fluchooser.progress`
  - `Progress` holds a value on a range and shows it as a percentage.
  - `ProgressMeter` adds elapsed and remaining time text and a cancel flag.
  - `secs_to_hms` splits seconds into hours, minutes and seconds.

## Example

```python
import tempfile
from pathlib import Path

from fluchooser.chooser import FileChooser, SelectionType

folder = tempfile.mkdtemp()
Path(folder, "notes.txt").write_text("hello")

chooser = FileChooser(folder, "Text (*.txt)", SelectionType.SINGLE)
chooser.select("notes.txt")
if chooser.ok():
    print(chooser.value())   # full path of notes.txt
```

## What this package does not do

Nothing is drawn on screen. There are no widgets, dialogs, icons or event loop. A front end has to show the entries and buttons, and pass the user's actions to `FileChooser`. Icons appear only as the values stored in `FileTypeRegistry` and on `Entry.icon`. On Windows, drives and special folders are not listed. There is no recycle bin: `trash` deletes for good.