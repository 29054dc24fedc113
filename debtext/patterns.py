"""Conversion of copyright-file glob patterns to regular expressions."""

from __future__ import annotations

import re


class InvalidGlobError(ValueError):
    """A glob pattern holds an invalid escape sequence."""


def glob_to_regex(glob: str) -> re.Pattern[str]:
    """Compile ``glob`` into a regular expression matching whole paths.

    ``*`` matches any run of characters, ``?`` matches one character, and a
    backslash escapes ``*``, ``?`` or another backslash.
    """
    parts = ["^"]
    chars = iter(glob)
    for c in chars:
        if c == "*":
            parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "\\":
            escaped = next(chars, None)
            if escaped is None:
                raise InvalidGlobError("invalid escape sequence: \\")
            if escaped not in "?*\\":
                raise InvalidGlobError(f"invalid escape sequence: \\{escaped}")
            parts.append(re.escape(escaped))
        else:
            parts.append(re.escape(c))
    parts.append(r"\Z")
    return re.compile("".join(parts))