"""Path clean-up and the formatting of file sizes and dates."""

from __future__ import annotations

import os
import time

_MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11,
}


def win2unix(path: str) -> str:
    """Replace every backslash in ``path`` with a forward slash."""
    return path.replace("\\", "/")


def cleanup_path(path: str) -> str:
    """Normalise a path.

    Backslashes become slashes, ``./`` is dropped, ``//`` collapses to ``/``
    and ``../`` removes the preceding component. On Windows a drive letter
    is upper-cased.
    """
    chars = list(win2unix(path))
    n = len(chars)

    def at(index: int) -> str:
        return chars[index] if index < n else ""

    out: list[str] = []
    i = 0
    while i < n:
        if chars[i] == "." and at(i + 1) == "/":
            i += 2
        elif chars[i] == "/" and at(i + 1) == "/":
            i += 1
        elif os.name == "nt" and at(i + 1) == ":":
            chars[i] = chars[i].upper()

        if i + 2 < n and "".join(chars[i:i + 3]) == "../" and "".join(out) != "/":
            if out:
                out.pop()
            slash = "".join(out).rfind("/")
            del out[slash + 1:]
            i += 3

        if i < n:
            out.append(chars[i])
        i += 1

    return "".join(out)


def format_date(stamp: str | float | int | None) -> str:
    """Format a ``ctime`` style date as ``M/D/YYYY H:MM AM|PM``.

    ``stamp`` may also be a POSIX timestamp. ``None`` gives an empty string.
    """
    if stamp is None:
        return ""
    if isinstance(stamp, (int, float)):
        stamp = time.ctime(stamp)

    fields = stamp.split()
    if len(fields) < 5:
        raise ValueError(f"not a ctime date: {stamp!r}")
    _, month_name, day_text, clock, year_text = fields[:5]
    try:
        day = int(day_text)
        year = int(year_text)
        hour_text, minute_text = clock.split(":")[:2]
        hour = int(hour_text)
        minute = int(minute_text)
    except ValueError as exc:
        raise ValueError(f"not a ctime date: {stamp!r}") from exc

    pm = hour >= 12
    if hour == 0:
        hour = 12
    if hour >= 13:
        hour -= 12
    month = _MONTHS.get(month_name, 12)

    return f"{month}/{day}/{year:02d} {hour}:{minute:02d} {'PM' if pm else 'AM'}"


def format_size(size: int, is_dir: bool = False) -> str:
    """Human readable size; empty for a directory reporting zero bytes."""
    if is_dir and size == 0:
        return ""
    if size >> 30:
        return f"{size / (1 << 30):.1f} GB"
    if size >> 20:
        return f"{size / (1 << 20):.1f} MB"
    if size >> 10:
        return f"{size / (1 << 10):.1f} KB"
    return f"{int(size)} bytes"


def parent_dir(path: str) -> str:
    """The directory above ``path``, which should end in ``/``.

    The root stays the root. A path with no slash left gives an empty string.
    """
    if path == "/" or not path:
        return path
    stripped = path[:-1]
    slash = stripped.rfind("/")
    return stripped[:slash + 1]


def split_dir_file(path: str) -> tuple[str, str]:
    """Split ``path`` into a directory ending in ``/`` and a trailing name."""
    if path.endswith("/"):
        return path, ""
    slash = path.rfind("/")
    if slash == -1:
        return path + "/", ""
    return path[:slash + 1], path[slash + 1:]