"""Lookup of items in a flat menu description by label or by full path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass
class MenuItem:
    """One slot of a flat menu.

    A submenu item is followed by its children and closed by an item whose
    ``label`` is ``None``.
    """

    label: str | None = None
    submenu: bool = False


def find_in_menu(items: Sequence[MenuItem], name: str | None) -> int | None:
    """Index of the first item labelled exactly ``name``, or ``None``.

    Items without a label or with an empty label are never matched.
    """
    if name is None:
        return None
    for index, item in enumerate(items):
        if item.label and item.label == name:
            return index
    return None


def _strip_flags(fullname: str) -> str:
    """Drop shortcut markers: ``&`` and ``_`` vanish, ``&&`` becomes ``&``."""
    out: list[str] = []
    for index, ch in enumerate(fullname):
        if ch == "&" and fullname[index + 1:index + 2] == "&":
            out.append("&")
        elif ch in ("&", "_"):
            continue
        else:
            out.append(ch)
    return "".join(out)


def full_find_in_menu(items: Sequence[MenuItem], fullname: str | None) -> int | None:
    """Index of the item named by a ``/`` separated path such as ``"File/Open"``.

    Shortcut markers in the path are ignored. Returns ``None`` when the path
    does not lead to an item.
    """
    if fullname is None:
        return None
    if fullname.startswith("/"):
        fullname = fullname[1:]
    path = _strip_flags(fullname)

    which = 0
    while path:
        name, slash, rest = path.partition("/")
        is_submenu = bool(slash)
        while True:
            if which >= len(items):
                return None
            item = items[which]
            if item.label is not None and item.label == name:
                if not is_submenu:
                    return which
                if not item.submenu:
                    return None
                which += 1
                path = rest
                break
            if item.submenu:
                while which < len(items) and items[which].label is not None:
                    which += 1
                which += 1
            else:
                which += 1
    return None