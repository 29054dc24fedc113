"""Tokenizer for deb822 text."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator

from .common import (
    is_indent,
    is_newline,
    is_valid_initial_key_char,
    is_valid_key_char,
)


class SyntaxKind(enum.IntEnum):
    """Kinds of tokens and composite syntax nodes."""

    KEY = 0
    VALUE = 1
    COLON = 2
    INDENT = 3
    NEWLINE = 4
    WHITESPACE = 5
    COMMENT = 6
    ERROR = 7
    ROOT = 8
    PARAGRAPH = 9
    ENTRY = 10
    EMPTY_LINE = 11


Token = tuple[SyntaxKind, str]


def _find(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Index of the first character at or after ``start`` matching ``predicate``."""
    return next(
        (i for i in range(start, len(text)) if predicate(text[i])),
        len(text),
    )


def _lex(text: str, start_of_line: bool) -> Iterator[Token]:
    colon_count = 0 if start_of_line else 1
    indent = 0
    pos = 0

    while pos < len(text):
        c = text[pos]
        if c == ":" and colon_count == 0:
            colon_count += 1
            pos += 1
            yield SyntaxKind.COLON, ":"
        elif is_newline(c):
            pos += 1
            start_of_line = True
            colon_count = 0
            indent = 0
            yield SyntaxKind.NEWLINE, c
        elif is_indent(c):
            end = _find(text, pos, lambda ch: not is_indent(ch))
            whitespace = text[pos:end]
            pos = end
            if start_of_line:
                indent = len(whitespace)
                yield SyntaxKind.INDENT, whitespace
            else:
                yield SyntaxKind.WHITESPACE, whitespace
        elif c == "#" and start_of_line:
            end = _find(text, pos, is_newline)
            comment = text[pos:end]
            pos = end
            colon_count = 0
            yield SyntaxKind.COMMENT, comment
        elif is_valid_initial_key_char(c) and start_of_line and indent == 0:
            end = _find(text, pos, lambda ch: not is_valid_key_char(ch))
            key = text[pos:end]
            pos = end
            start_of_line = False
            yield SyntaxKind.KEY, key
        elif not start_of_line or indent > 0:
            end = _find(text, pos, is_newline)
            value = text[pos:end]
            pos = end
            yield SyntaxKind.VALUE, value
        else:
            pos += 1
            yield SyntaxKind.ERROR, c


def lex(text: str) -> Iterator[Token]:
    """Tokenize ``text`` as a deb822 document."""
    return _lex(text, True)


def lex_inline(text: str) -> Iterator[Token]:
    """Tokenize ``text`` as if it followed a field name and colon."""
    return _lex(text, False)