"""Directory history and the persistent list of favourite directories."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

FAVORITES_FILENAME = ".fluchooser.favorites"


@dataclass
class History:
    """Back/forward history of visited directories."""

    paths: list[str] = field(default_factory=list)
    index: int = -1

    @property
    def current(self) -> str | None:
        """The directory the history currently points at."""
        if 0 <= self.index < len(self.paths):
            return self.paths[self.index]
        return None

    def visit(self, path: str) -> None:
        """Record a visit to ``path``.

        An empty path, or the directory already current, is not recorded.
        Visiting a new directory discards everything after the current one.
        """
        if not path:
            return
        if not self.paths:
            self.paths.append(path)
            self.index = 0
            return
        if self.paths[self.index] == path:
            return
        del self.paths[self.index + 1:]
        self.paths.append(path)
        self.index += 1

    def back(self) -> str | None:
        """Step back one directory and return it, or ``None`` at the start."""
        if not self.can_go_back():
            return None
        self.index -= 1
        return self.paths[self.index]

    def forward(self) -> str | None:
        """Step forward one directory and return it, or ``None`` at the end."""
        if not self.can_go_forward():
            return None
        self.index += 1
        return self.paths[self.index]

    def clear(self) -> None:
        """Forget every visited directory."""
        self.paths.clear()
        self.index = -1

    def can_go_back(self) -> bool:
        """Whether there is a directory before the current one."""
        return self.index > 0

    def can_go_forward(self) -> bool:
        """Whether there is a directory after the current one."""
        return 0 <= self.index < len(self.paths) - 1


def _default_favorites_file() -> Path:
    return Path(os.path.expanduser("~")) / FAVORITES_FILENAME


@dataclass
class Favorites:
    """Favourite directories, kept in a plain text file, one per line."""

    filename: Path = field(default_factory=_default_favorites_file)
    paths: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.filename = Path(self.filename)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        return path in self.paths

    def load(self) -> list[str]:
        """Read the favourites file, skipping blank lines and duplicates.

        A missing or unreadable file leaves the list as it is.
        """
        try:
            text = self.filename.read_text()
        except OSError:
            return self.paths
        for line in text.splitlines():
            if line and line not in self.paths:
                self.paths.append(line)
        return self.paths

    def save(self) -> bool:
        """Write the favourites file; return whether it could be written."""
        try:
            with self.filename.open("w") as handle:
                for path in self.paths:
                    handle.write(f"{path}\n")
        except OSError:
            return False
        return True

    def add(self, path: str) -> None:
        """Add ``path`` unless already present, then save the file."""
        if path not in self.paths:
            self.paths.append(path)
        self.save()

    def remove(self, path: str) -> None:
        """Remove ``path`` and save the file.

        Raises ``ValueError`` when ``path`` is not a favourite.
        """
        self.paths.remove(path)
        self.save()