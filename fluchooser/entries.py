"""Directory entries, file type and context-menu registries, and sorting."""

from __future__ import annotations

import enum
import functools
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence

DIRECTORY_MARKER = "\t"
DETAIL_TEXT = ("Name", "Size", "Date", "Type")

if os.name == "nt":
    MY_COMPUTER_TEXT = "My Computer"
    MY_DOCUMENTS_TEXT = "My Documents"
else:
    MY_COMPUTER_TEXT = "Home"
    MY_DOCUMENTS_TEXT = "Temporary"


class EntryType(enum.IntFlag):
    """Kinds of entry shown in the chooser; usable as a bit mask."""

    NONE = 1
    DIR = 2
    FILE = 4
    FAVORITE = 8
    DRIVE = 16
    MYDOCUMENTS = 32
    MYCOMPUTER = 64


class SortMethod(enum.IntFlag):
    """Sort column, optionally combined with ``REVERSE``."""

    NAME = 1
    SIZE = 2
    DATE = 4
    TYPE = 8
    REVERSE = 16


@dataclass
class FileTypeInfo:
    """A registered file type: its extensions, description and icon."""

    extensions: str
    description: str
    icon: Any = None


@dataclass
class FileTypeRegistry:
    """Known file types, looked up by extension without regard to case."""

    types: list[FileTypeInfo] = field(default_factory=list)
    default_icon: Any = None

    @staticmethod
    def _key(extension: str | None) -> str:
        return (extension if extension is not None else DIRECTORY_MARKER).upper()

    def add(self, extensions: str | None, description: str, icon: Any = None) -> FileTypeInfo:
        """Register a type; ``None`` extensions mean directories.

        ``extensions`` may hold several extensions separated by spaces or
        commas. Registering the same extension string again replaces the
        description and icon.
        """
        key = self._key(extensions)
        for info in self.types:
            if info.extensions == key:
                info.icon = icon
                info.description = description
                return info
        info = FileTypeInfo(key, description, icon)
        self.types.append(info)
        return info

    def find(self, extension: str | None) -> FileTypeInfo | None:
        """The type registered for ``extension``; ``None`` looks up directories."""
        key = self._key(extension)
        for info in self.types:
            tokens = info.extensions.replace(",", " ").split(" ")
            if key in (token for token in tokens if token):
                return info
        return None


@dataclass
class ContextHandler:
    """A user supplied action offered in an entry's context menu."""

    entry_types: int
    ext: str
    name: str
    callback: Callable[[str | None, EntryType], Any]


@dataclass
class ContextHandlerRegistry:
    """Context-menu handlers in the order they were added."""

    handlers: list[ContextHandler] = field(default_factory=list)

    def add(self, entry_types: int, ext: str | None, name: str,
            callback: Callable[[str | None, EntryType], Any] | None) -> ContextHandler | None:
        """Register a handler; one without a callback is ignored."""
        if callback is None:
            return None
        handler = ContextHandler(int(entry_types), (ext or "").lower(), name, callback)
        self.handlers.append(handler)
        return handler

    def handlers_for(self, entry_type: EntryType, filename: str | None) -> list[ContextHandler]:
        """Handlers that apply to an entry of ``entry_type`` named ``filename``.

        For files a handler with an extension only applies when the file's
        extension matches it, ignoring case.
        """
        ext = None
        if filename:
            dot = filename.rfind(".")
            if dot != -1:
                ext = filename[dot + 1:].lower()
        result = []
        for handler in self.handlers:
            if not handler.entry_types & int(entry_type):
                continue
            if entry_type == EntryType.FILE and handler.ext and handler.ext != ext:
                continue
            result.append(handler)
        return result


@dataclass
class Entry:
    """One file, directory or special item in a listing."""

    filename: str
    entry_type: EntryType = EntryType.FILE
    size: int = 0
    mtime: float = 0.0
    filesize: str = ""
    date: str = ""
    description: str = ""
    icon: Any = None
    altname: str = ""
    selected: bool = False

    def update_description(self, registry: FileTypeRegistry) -> None:
        """Set the description and icon from the entry's kind and extension."""
        info = None
        if self.entry_type == EntryType.MYCOMPUTER:
            self.icon = "computer"
            self.description = MY_COMPUTER_TEXT
        elif self.entry_type == EntryType.MYDOCUMENTS:
            self.icon = "documents"
            self.description = MY_DOCUMENTS_TEXT
        elif self.entry_type == EntryType.DRIVE:
            pass
        elif self.entry_type in (EntryType.DIR, EntryType.FAVORITE):
            info = registry.find(None)
        else:
            dot = self.filename.rfind(".")
            if dot != -1:
                ext = self.filename[dot + 1:]
                info = registry.find(ext)
                if info is None:
                    self.description = ext
        if info is not None:
            self.icon = info.icon
            self.description = info.description
        if self.icon is None and self.entry_type == EntryType.FILE:
            self.icon = registry.default_icon
        if self.entry_type == EntryType.FAVORITE:
            self.icon = "little_favorites"

    def tooltip(self) -> str:
        """The text shown when hovering over the entry."""
        name, size, _, kind = DETAIL_TEXT
        text = f"{name}: {self.filename}"
        if self.entry_type == EntryType.FILE:
            text += f"\n{size}: {self.filesize}"
        return text + f"\n{kind}: {self.description}"


def sort_entries(entries: Iterable[Entry], method: SortMethod = SortMethod.NAME,
                 case_sensitive: bool = os.name != "nt",
                 custom: Callable[[str, str], int] | None = None) -> list[Entry]:
    """Sort entries, keeping every non-file entry ahead of the files.

    ``custom`` is a ``cmp``-style function on names used for name sorting.
    """
    reverse = bool(method & SortMethod.REVERSE)
    column = SortMethod(method & ~SortMethod.REVERSE)

    if column == SortMethod.SIZE:
        key: Callable[[Entry], Any] = lambda e: e.size
    elif column == SortMethod.DATE:
        key = lambda e: e.mtime
    elif column == SortMethod.TYPE:
        key = lambda e: e.description
    elif custom is not None:
        to_key = functools.cmp_to_key(custom)
        key = lambda e: to_key(e.filename)
    elif not case_sensitive:
        key = lambda e: e.filename.lower()
    else:
        key = lambda e: e.filename

    items = list(entries)
    dirs = [e for e in items if e.entry_type != EntryType.FILE]
    files = [e for e in items if e.entry_type == EntryType.FILE]
    return (sorted(dirs, key=key, reverse=reverse)
            + sorted(files, key=key, reverse=reverse))


def toggle_sort(method: SortMethod, column: SortMethod) -> SortMethod:
    """Choose ``column``, or flip the direction if it is already chosen."""
    if method & column:
        return SortMethod(method ^ SortMethod.REVERSE)
    return SortMethod(column)


def common_prefix(names: Sequence[str]) -> str:
    """Prefix of the first name shared, ignoring case, by all the others.

    A name shorter than the prefix does not cut it short.
    """
    names = list(names)
    if not names:
        return ""
    first = names[0]
    out: list[str] = []
    for index, ch in enumerate(first):
        for other in names[1:]:
            if index < len(other) and other[index].upper() != ch.upper():
                return "".join(out)
        out.append(ch)
    return "".join(out)