"""Filename patterns: glob matching and parsing of filter strings."""

from __future__ import annotations

import os
import re

ALL_FILES_LABEL = "All Files (*)"
PATTERN_CHARS = "*;|[]?"

_FILTER_SPLIT = re.compile(r"[\t|;]")
_USER_SPLIT = re.compile(r"[|;]")


def _at(text: str, index: int) -> str:
    """Character at ``index`` or an empty string past the end."""
    return text[index] if index < len(text) else ""


def _match(s: str, si: int, p: str, pi: int, fold: bool) -> bool:
    while True:
        c = _at(p, pi)
        pi += 1

        if c == "?":
            if si >= len(s):
                return False
            si += 1

        elif c == "*":
            if pi >= len(p):
                return True
            while not _match(s, si, p, pi, fold):
                if si >= len(s):
                    return False
                si += 1
            return True

        elif c == "[":
            if si >= len(s):
                return False
            ch = s[si]
            reverse = _at(p, pi) in ("^", "!") and pi < len(p)
            if reverse:
                pi += 1
            matched = False
            last = ""
            while pi < len(p):
                if p[pi] == "-" and last:
                    pi += 1
                    if pi >= len(p):
                        break
                    if last <= ch <= p[pi]:
                        matched = True
                    last = ""
                elif ch == p[pi]:
                    matched = True
                last = p[pi]
                pi += 1
                if _at(p, pi) == "]":
                    break
            if matched == reverse:
                return False
            si += 1
            pi = min(pi + 1, len(p) + 1)

        elif c == "{":
            while True:
                if _match(s, si, p, pi, fold):
                    return True
                depth = 0
                retry = False
                while True:
                    d = _at(p, pi)
                    pi += 1
                    if d == "\\":
                        if pi < len(p):
                            pi += 1
                    elif d == "{":
                        depth += 1
                    elif d == "}":
                        if depth == 0:
                            return False
                        depth -= 1
                    elif d in ("|", ","):
                        if depth == 0:
                            retry = True
                            break
                        return False
                    elif d == "":
                        return False
                if not retry:
                    return False

        elif c in ("|", ","):
            # skip the remaining alternatives of an enclosing {..|..}
            depth = 0
            while pi < len(p) and depth >= 0:
                d = p[pi]
                pi += 1
                if d == "\\":
                    if pi < len(p):
                        pi += 1
                elif d == "{":
                    depth += 1
                elif d == "}":
                    depth -= 1

        elif c == "}":
            pass

        elif c == "":
            return si >= len(s)

        else:
            if c == "\\" and pi < len(p):
                pi += 1
            literal = p[pi - 1]
            if si >= len(s):
                return False
            if fold:
                if s[si].lower() != literal.lower():
                    return False
            elif s[si] != literal:
                return False
            si += 1


def filename_match(name: str, pattern: str, case_sensitive: bool = os.name != "nt") -> bool:
    """Match ``name`` against a glob pattern.

    Supports ``?``, ``*``, ``[set]`` (with ranges and ``^``/``!`` negation),
    ``{alt1|alt2,alt3}`` alternatives and ``\\`` quoting.
    """
    return _match(name, 0, pattern, 0, not case_sensitive)


def is_probably_a_pattern(text: str) -> bool:
    """Whether ``text`` contains any character typical of a glob pattern."""
    return any(ch in PATTERN_CHARS for ch in text)


def parse_filter(pattern: str | None) -> list[tuple[str, str]]:
    """Parse a filter specification into ``(label, extensions)`` choices.

    Accepts tab, ``|`` or ``;`` separated items of the form
    ``"Description (*.ext)"``, ``"*.ext"`` or ``"*.{ext1,ext2}"``.
    Malformed items are skipped. An "all files" choice is always present.
    """
    if not pattern:
        pattern = "*"

    choices: list[tuple[str, str]] = []
    added_all = False
    for token in _FILTER_SPLIT.split(pattern):
        if not token:
            continue
        token = token.lstrip()

        if token == "*":
            added_all = True
            choices.append((ALL_FILES_LABEL, "*"))
            continue

        if token.startswith("*"):
            rest = token
        else:
            paren = token.find("(")
            if paren == -1:
                continue
            rest = token[paren + 1:]

        if not rest.startswith("*"):
            continue
        rest = rest[1:]
        if not rest.startswith("."):
            continue
        rest = rest[1:]
        if rest.startswith("{"):
            rest = rest[1:]

        rest = rest.split("}", 1)[0]
        rest = rest.split(")", 1)[0]

        if rest:
            choices.append((token, rest))

    if not added_all:
        choices.append((ALL_FILES_LABEL, "*"))
    return choices


def strip_patterns(text: str) -> list[str]:
    """Split user input on ``|`` or ``;`` into glob patterns.

    Returns an empty list when the text looks like a plain filename
    rather than a pattern.
    """
    if not text:
        return []
    patterns = []
    for token in _USER_SPLIT.split(text):
        if not token:
            continue
        if token.startswith(" "):
            token = token[1:]
        patterns.append(token)

    if is_probably_a_pattern(text):
        return patterns
    if len(patterns) == 1:
        return []
    return patterns


def expand_extensions(pattern: str) -> list[str]:
    """Turn a comma separated extension list such as ``"cpp,h"`` into globs."""
    globs: list[str] = []
    remaining = pattern
    while remaining:
        piece, sep, rest = remaining.partition(",")
        globs.append(piece if piece == "*" else "*." + piece)
        if not sep:
            break
        remaining = rest
    return globs