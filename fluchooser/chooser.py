"""The file chooser: directory listing, filtering, selection and file actions."""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Any, Callable, Iterator

from .entries import (
    MY_COMPUTER_TEXT,
    ContextHandlerRegistry,
    Entry,
    EntryType,
    FileTypeRegistry,
    SortMethod,
    common_prefix,
    sort_entries,
)
from .navigation import FAVORITES_FILENAME, Favorites, History
from .paths import (
    cleanup_path,
    format_date,
    format_size,
    parent_dir,
    win2unix,
)
from .patterns import (
    expand_extensions,
    filename_match,
    is_probably_a_pattern,
    parse_filter,
    strip_patterns,
)

FAVORITES_PATH = "\t!@#$%^&*(Favorites)-=+"
DIRECTORY_TEXT = "Directory"
DEFAULT_FOLDER_NAME = "New Folder"
CREATE_FOLDER_ERROR = ("Could not create directory '%s'. "
                       "You may not have permission to perform this operation.")
DELETE_FILE_ERROR = "An error ocurred while trying to delete '%s'."
FILE_EXISTS_ERROR = "File '%s' already exists!"
RENAME_ERROR = "Unable to rename '%s' to '%s'"

_ON_WINDOWS = os.name == "nt"


class SelectionType(enum.IntFlag):
    """What the chooser lets the user pick."""

    SINGLE = 0
    MULTI = 1
    DIRECTORY = 4
    DEACTIVATE_FILES = 8
    SAVING = 16
    STDFILE = 32


def _is_absolute(path: str) -> bool:
    if _ON_WINDOWS:
        return path[1:2] == ":" or path.startswith("/")
    return path.startswith("/")


def _recursive_scan(directory: str) -> Iterator[str]:
    """Every path below ``directory``, children before parents, then itself."""
    try:
        names = os.listdir(directory)
    except OSError:
        names = []
    for name in names:
        name = name.rstrip("/\\")
        if name in (".", ".."):
            continue
        full = f"{directory}/{name}"
        if os.path.isdir(full) and not os.path.islink(full):
            yield from _recursive_scan(full)
        yield full
    yield directory


def _remove(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


class FileChooser:
    """A file chooser: browses directories and keeps track of the user's choice."""

    def __init__(self, pathname: str | None = None, pattern: str | None = None,
                 selection_type: SelectionType = SelectionType.SINGLE, title: str = "",
                 *, home: str | None = None, favorites: Favorites | None = None,
                 registry: FileTypeRegistry | None = None,
                 context_handlers: ContextHandlerRegistry | None = None,
                 confirm: Callable[[str], bool] | None = None,
                 callback: Callable[["FileChooser"], Any] | None = None,
                 show_hidden: bool = False, case_sensitive: bool | None = None,
                 custom_sort: Callable[[str, str], int] | None = None) -> None:
        self.title = title
        self.selection_type = SelectionType(selection_type)
        home = win2unix(home if home is not None else os.path.expanduser("~"))
        self.home = home if home.endswith("/") else home + "/"
        self.user_desktop = self.home + "/Desktop/"
        self.user_docs = "/tmp/"

        if favorites is None:
            favorites = Favorites(Path(self.home) / FAVORITES_FILENAME)
            favorites.load()
        self.favorites = favorites

        if registry is None:
            registry = FileTypeRegistry()
        if registry.find(None) is None:
            registry.add(None, DIRECTORY_TEXT, "folder_closed")
        self.registry = registry
        self.context_handlers = context_handlers or ContextHandlerRegistry()

        self.confirm = confirm or (lambda question: True)
        self.callback = callback
        self.show_hidden = show_hidden
        self.case_sensitive = (not _ON_WINDOWS) if case_sensitive is None else case_sensitive
        self.custom_sort = custom_sort
        self.sort_method = SortMethod.NAME

        self.history = History()
        self.entries: list[Entry] = []
        self.current_dir = ""
        self.filename = ""
        self.last_selected: Entry | None = None
        self.preview_file = ""
        self.raw_pattern: str | None = None
        self.filters: list[tuple[str, str]] = []
        self.filter_index = 0
        self._walking_history = False
        self._tab_completion = False

        self.set_pattern(pattern)
        self.cd(None)
        self.history.clear()
        self.cd(pathname)

        if (pathname and not pathname.startswith("/")
                and pathname[1:2] != ":" and not pathname.startswith("~")):
            self.filename = pathname

    # ------------------------------------------------------------------ helpers

    @property
    def in_favorites(self) -> bool:
        """Whether the chooser is showing the favourites list."""
        return self.current_dir == FAVORITES_PATH

    def _find(self, name: str) -> Entry:
        for entry in self.entries:
            if entry.filename == name:
                return entry
        raise KeyError(name)

    def _files_deactivated(self) -> bool:
        return bool(self.selection_type & SelectionType.DEACTIVATE_FILES)

    def _do_callback(self) -> None:
        if self.callback is not None:
            self.callback(self)

    def _add_to_history(self) -> None:
        if self.current_dir and not self._walking_history:
            self.history.visit(self.current_dir)
        self._walking_history = False

    # ------------------------------------------------------------------ filters

    def set_pattern(self, pattern: str | None) -> None:
        """Set the filter choices from a specification such as ``"Text (*.txt)"``."""
        self.raw_pattern = pattern
        self.filters = parse_filter(pattern)
        self.filter_index = 0

    # --------------------------------------------------------------- navigation

    def cd(self, path: str | None) -> None:
        """Change to ``path`` and list it.

        ``path`` may be absolute, relative to the current directory, start
        with ``~``, name a file to select, or end in a glob pattern that
        filters the listing. ``None`` or an empty string means the process's
        working directory.
        """
        if not path:
            try:
                path = os.getcwd()
            except OSError:
                path = "./"

        if path.startswith("~"):
            if path[1:2] in ("/", "\\"):
                path = self.home + path[2:]
            else:
                path = self.home + path[1:]

        self.last_selected = None
        self.preview_file = ""
        current_file = self.filename

        if path == FAVORITES_PATH:
            self.current_dir = FAVORITES_PATH
            self._add_to_history()
            self.entries = []
            for favorite in self.favorites:
                entry = Entry(favorite, EntryType.FAVORITE)
                entry.update_description(self.registry)
                self.entries.append(entry)
            return
        if path in (".", "./", ".\\"):
            pass
        elif path in ("..", "../", "..\\"):
            if self.in_favorites:
                self.back()
                return
            if self.current_dir != "/":
                self.current_dir = parent_dir(self.current_dir)
        elif _is_absolute(path):
            self.current_dir = path
        else:
            self.current_dir += path

        self.current_dir = cleanup_path(self.current_dir)

        if os.path.isdir(self.current_dir) or self.current_dir == "/":
            if not self.current_dir.endswith("/"):
                self.current_dir += "/"
            saving = bool(self.selection_type & SelectionType.SAVING)
            if not _is_absolute(self.filename) and not saving:
                self.filename = ""
            if not saving:
                current_file = ""

        if not self.current_dir.endswith("/"):
            slash = self.current_dir.rfind("/")
            if slash != -1:
                current_file = self.current_dir[slash + 1:]
                self.current_dir = self.current_dir[:slash + 1]
        if not self.current_dir.endswith("/"):
            self.current_dir += "/"

        self._add_to_history()
        pending_cd = self._list(current_file)
        if pending_cd is not None:
            self.cd(pending_cd)

    def _list(self, current_file: str) -> str | None:
        """Read the current directory; return a directory to enter afterwards."""
        current_patterns = expand_extensions(self.filters[self.filter_index][1])
        user_patterns: list[str] = []
        if not self._tab_completion or current_file != "*":
            user_patterns = strip_patterns(current_file)

        try:
            names = sorted(os.listdir(self.current_dir))
        except OSError:
            names = []

        only_dirs = (self.selection_type & SelectionType.DIRECTORY
                     and not self.selection_type & SelectionType.STDFILE
                     and not self._files_deactivated())
        dirs: list[Entry] = []
        files: list[Entry] = []
        last_dir: str | None = None
        last_file: str | None = None

        for name in names:
            name = name.rstrip("/")
            if name in (".", "..", "./", "../", ".\\", "..\\"):
                continue
            fullpath = self.current_dir + name
            is_dir = os.path.isdir(fullpath)
            is_current = current_file == name

            if not _ON_WINDOWS and not is_current and not self.show_hidden and name.startswith("."):
                continue
            if only_dirs and not is_dir:
                continue

            globs = user_patterns or current_patterns
            if not any(filename_match(name, glob) for glob in globs):
                if not is_dir or self._tab_completion:
                    continue

            entry = Entry(name, EntryType.DIR if is_dir else EntryType.FILE)
            try:
                info = os.stat(fullpath)
                entry.size, entry.mtime = info.st_size, info.st_mtime
            except OSError:
                pass
            entry.filesize = format_size(entry.size, is_dir)
            entry.date = format_date(entry.mtime)
            entry.update_description(self.registry)

            if is_dir:
                dirs.append(entry)
                last_dir = name
            else:
                files.append(entry)
                last_file = name

            if is_current:
                self.filename = name
                entry.selected = True
                self.last_selected = entry
                if entry.entry_type == EntryType.FILE:
                    self.preview_file = self.current_dir + name

        self.entries = sort_entries(dirs + files, self.sort_method,
                                    self.case_sensitive, self.custom_sort)

        pending = None
        if self._tab_completion:
            self._tab_completion = False
            pending = self._finish_completion(current_file, len(dirs), len(files),
                                              last_dir, last_file)
        return pending

    def _finish_completion(self, current_file: str, num_dirs: int, num_files: int,
                           last_dir: str | None, last_file: str | None) -> str | None:
        prefix = common_prefix([entry.filename for entry in self.entries])
        absolute = _is_absolute(self.filename)
        pending = None
        if num_dirs == 1 and last_dir is not None and current_file == last_dir + "*":
            pending = last_dir

        if num_dirs == 1 and num_files == 0 and last_dir is not None:
            self.filename = self.current_dir + last_dir + "/" if absolute else last_dir
        elif num_files == 1 and num_dirs == 0 and last_file is not None:
            self.filename = self.current_dir + last_file if absolute else last_file
        elif len(prefix) >= len(current_file):
            self.filename = self.current_dir + prefix if absolute else prefix

        if current_file == "*" and not _is_absolute(self.filename):
            self.filename = ""
        return pending

    def back(self) -> None:
        """Go to the previous directory in the history."""
        path = self.history.back()
        if path is not None:
            self._walking_history = True
            self.cd(path)

    def forward(self) -> None:
        """Go to the next directory in the history."""
        path = self.history.forward()
        if path is not None:
            self._walking_history = True
            self.cd(path)

    def up(self) -> None:
        """Go to the parent directory."""
        self.cd("../")

    def reload(self) -> None:
        """List the current directory again."""
        self.cd(self.current_dir)

    def complete(self, text: str) -> str:
        """Complete ``text`` against the current directory, as on <Tab>.

        Returns the completed filename text.
        """
        self.filename = text
        self._tab_completion = True
        self.cd(text + "*")
        return self.filename

    # ---------------------------------------------------------------- selection

    def select(self, name: str, ctrl: bool = False, shift: bool = False) -> Entry:
        """Click on the entry called ``name``, with optional modifier keys.

        Raises ``KeyError`` when no entry has that name.
        """
        entry = self._find(name)
        kind = self.selection_type
        if kind & SelectionType.MULTI:
            if ctrl:
                entry.selected = not entry.selected
                self.last_selected = entry
            elif shift:
                if self.last_selected is None:
                    entry.selected = True
                    self.last_selected = entry
                elif self.last_selected in self.entries:
                    last_index = self.entries.index(self.last_selected)
                    this_index = self.entries.index(entry)
                    step = -1 if this_index > last_index else 1
                    for other in self.entries[this_index:last_index:step]:
                        other.selected = not other.selected
                    self.last_selected = entry
            else:
                self.unselect_all()
                entry.selected = True
                self.last_selected = entry

            if (not kind & (SelectionType.DIRECTORY | SelectionType.STDFILE)
                    and (ctrl or shift)):
                for other in self.entries:
                    if other.entry_type == EntryType.DIR:
                        other.selected = False
        else:
            self.unselect_all()
            entry.selected = True
            self.last_selected = entry

        if entry.entry_type == EntryType.FILE:
            self.preview_file = self.current_dir + entry.filename

        if (kind & (SelectionType.DIRECTORY | SelectionType.STDFILE)
                or entry.entry_type == EntryType.FILE):
            self.filename = entry.filename
        elif not kind & SelectionType.SAVING:
            self.filename = ""
        return entry

    def unselect_all(self) -> None:
        """Clear the selection."""
        for entry in self.entries:
            entry.selected = False
        self.last_selected = None
        self.preview_file = ""

    def select_all(self) -> None:
        """Select every entry; only in multiple selection mode."""
        if not self.selection_type & SelectionType.MULTI:
            return
        self.preview_file = ""
        for entry in self.entries:
            entry.selected = True
            self.preview_file = entry.filename
            self.filename = entry.filename
        self.last_selected = None

    # ------------------------------------------------------------------- result

    def value(self) -> str | None:
        """The chosen filename text, or ``None`` if it is empty."""
        if not self.filename:
            return None
        if _ON_WINDOWS and len(self.filename) > 1 and self.filename[1] == ":":
            self.filename = self.filename[0].lower() + self.filename[1:]
        return self.filename

    def _selected_entries(self) -> list[Entry]:
        return [entry for entry in self.entries
                if entry.selected
                and not (_ON_WINDOWS and entry.filename == MY_COMPUTER_TEXT)]

    def values(self) -> list[str]:
        """Full paths of every selected entry, in listing order."""
        return [self.current_dir + entry.filename for entry in self._selected_entries()]

    def count(self) -> int:
        """How many items are chosen."""
        if self.selection_type & SelectionType.MULTI:
            return len(self._selected_entries())
        return 1 if self.filename else 0

    def ok(self) -> bool:
        """Press "Ok". Return ``True`` when the choice is accepted."""
        kind = self.selection_type
        if not kind & (SelectionType.DIRECTORY | SelectionType.STDFILE):
            selected = [entry for entry in self.entries if entry.selected]
            if len(selected) == 1:
                name = selected[0].filename
                if os.path.isdir(self.current_dir + name):
                    self.cd(name)
                    return False

        if kind & SelectionType.DIRECTORY or (
                kind & SelectionType.STDFILE
                and os.path.isdir(self.current_dir + self.filename)):
            if not kind & SelectionType.MULTI:
                if self.filename:
                    self.cd(self.filename)
                self.filename = self.current_dir
            self._do_callback()
            return True

        if not self.filename:
            return False
        if is_probably_a_pattern(self.filename):
            self.cd(self.filename)
            return False
        if _is_absolute(self.filename) and os.path.isdir(self.filename):
            self.filename = ""
            return False
        self.filename = self.current_dir + self.filename
        self._do_callback()
        return True

    def cancel(self) -> None:
        """Press "Cancel": forget the choice."""
        self.filename = ""
        self.unselect_all()
        self._do_callback()

    # ------------------------------------------------------------- file actions

    def new_folder(self) -> str:
        """Create a new, uniquely named folder here and return its name.

        Raises ``OSError`` when the folder cannot be created.
        """
        names = {entry.filename for entry in self.entries}
        name = DEFAULT_FOLDER_NAME
        number = 1
        while name in names:
            name = f"{DEFAULT_FOLDER_NAME}{number}"
            number += 1
        try:
            os.mkdir(self.current_dir + name, 0o775)
        except OSError as exc:
            raise OSError(CREATE_FOLDER_ERROR % name) from exc
        entry = Entry(name, EntryType.DIR)
        entry.filesize = format_size(0, True)
        entry.update_description(self.registry)
        self.entries.append(entry)
        return name

    def rename(self, old: str, new: str) -> None:
        """Rename the entry ``old`` to ``new``.

        An empty new name leaves everything unchanged. Raises
        ``FileExistsError`` when ``new`` exists and ``OSError`` when the
        rename fails.
        """
        entry = self._find(old)
        if not new or new == old:
            return
        old_path = self.current_dir + old
        new_path = self.current_dir + new
        if os.path.exists(new_path):
            raise FileExistsError(FILE_EXISTS_ERROR % new_path)
        try:
            os.rename(old_path, new_path)
        except OSError as exc:
            raise OSError(RENAME_ERROR % (old_path, new_path)) from exc
        entry.filename = new
        entry.update_description(self.registry)

    def trash(self) -> int:
        """Delete the selected entries after asking ``confirm``.

        Directories are removed with everything in them. In the favourites
        view the selected favourites are forgotten instead. Returns how many
        entries were removed; raises ``OSError`` if a file cannot be deleted.
        """
        selected = [entry for entry in self.entries if entry.selected]
        if not selected:
            return 0
        if len(selected) == 1:
            question = f"Really delete '{selected[0].filename}'?"
        else:
            question = f"Really delete these {len(selected)} files?"
        if not self.confirm(question):
            return 0

        if self.in_favorites:
            for entry in selected:
                if entry.filename in self.favorites:
                    self.favorites.remove(entry.filename)
            self.favorites.save()
            self.cd(FAVORITES_PATH)
            return len(selected)

        removed = 0
        for entry in selected:
            path = self.current_dir + entry.filename
            if entry.entry_type == EntryType.DIR:
                try:
                    for target in list(_recursive_scan(path)):
                        _remove(target)
                except OSError:
                    self.cd("./")
                    return removed
                removed += 1
                continue
            try:
                _remove(path)
            except OSError as exc:
                self.cd("./")
                raise OSError(DELETE_FILE_ERROR % path) from exc
            removed += 1

        self.cd("./")
        return removed

    def add_to_favorites(self) -> None:
        """Remember the current directory as a favourite."""
        self.favorites.add(self.current_dir)