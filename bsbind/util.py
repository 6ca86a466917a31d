"""Shared identifier helpers for the translator."""

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")


def lower_first(s: str) -> str:
    """Lowercase the first character of a string."""
    return (s[0].lower() + s[1:]) if s else ""


def upper_first(s: str) -> str:
    """Uppercase the first character of a string."""
    return (s[0].upper() + s[1:]) if s else ""


def strip_quotes(name: str) -> str:
    """Remove one pair of surrounding quotes: `"my-mod"` -> `my-mod`."""
    if len(name) >= 2 and name[0] == name[-1] and name[0] in ("'", '"'):
        return name[1:-1]
    return name


def normalize_ident(name: str) -> str:
    """Turn a declared name into a usable identifier.

    Strips quoting and maps every character that cannot appear in an
    identifier (`-`, `/`, `.`, `@`, ...) to `_`. Idempotent.
    """
    return _DISALLOWED.sub("_", strip_quotes(name))


def dedupe(items: list[str]) -> list[str]:
    """Drop repeated items, keeping the first occurrence of each in order."""
    return list(dict.fromkeys(items))
