"""Lossy deb822 parser.

Whitespace and comments in the input are discarded; only field names and
values are kept.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import IO, overload

from .lex import SyntaxKind, Token, lex


class Deb822Error(ValueError):
    """Base class for errors raised while parsing deb822 text."""


class UnexpectedTokenError(Deb822Error):
    """A token appeared where it is not allowed."""

    def __init__(self, kind: SyntaxKind, text: str) -> None:
        super().__init__(f"Unexpected token: {text}")
        self.kind = kind
        self.text = text


class UnexpectedEofError(Deb822Error):
    """The input ended before it was complete."""

    def __init__(self) -> None:
        super().__init__("Unexpected end-of-file")


class ExpectedEofError(Deb822Error):
    """The input continued where it should have ended."""

    def __init__(self) -> None:
        super().__init__("Expected end-of-file")


def _value_lines(value: str) -> list[str]:
    """Split ``value`` into lines, dropping a final empty line and trailing CRs."""
    if not value:
        return []
    parts = value.split("\n")
    if value.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass
class Field:
    """A single field of a paragraph."""

    name: str
    value: str

    def __str__(self) -> str:
        lines = _value_lines(self.value)
        if len(lines) > 1:
            return f"{self.name}:\n" + "".join(f" {line}\n" for line in lines)
        return f"{self.name}: {self.value}\n"


@dataclass
class Paragraph:
    """An ordered collection of fields."""

    fields: list[Field] = field(default_factory=list)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the first field called ``name``, or ``default``."""
        return next((f.value for f in self.fields if f.name == name), default)

    def insert(self, name: str, value: str) -> None:
        """Append a field, even if one with the same name already exists."""
        self.fields.append(Field(name, value))

    def set(self, name: str, value: str) -> None:
        """Update the first field called ``name``, or append a new one."""
        for existing in self.fields:
            if existing.name == name:
                existing.value = value
                return
        self.insert(name, value)

    def remove(self, name: str) -> None:
        """Remove every field called ``name``."""
        self.fields = [f for f in self.fields if f.name != name]

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(name, value)`` pairs in order."""
        return ((f.name, f.value) for f in self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __contains__(self, name: object) -> bool:
        return any(f.name == name for f in self.fields)

    def __str__(self) -> str:
        return "".join(str(f) for f in self.fields)

    @classmethod
    def parse(cls, text: str) -> Paragraph:
        """Parse text holding exactly one paragraph."""
        try:
            doc = Deb822.parse(text)
        except Deb822Error as exc:
            raise ExpectedEofError() from exc
        if len(doc) == 0:
            raise UnexpectedEofError()
        if len(doc) > 1:
            raise ExpectedEofError()
        return doc[0]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Paragraph:
        """Build a paragraph from ``(name, value)`` pairs."""
        return cls([Field(name, value) for name, value in pairs])


class _Tokens:
    """Token stream with one token of lookahead."""

    def __init__(self, tokens: Iterator[Token]) -> None:
        self._it = tokens
        self._peeked: list[Token] = []

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._peeked:
            return self._peeked.pop()
        return next(self._it)

    def peek(self) -> Token | None:
        if not self._peeked:
            try:
                self._peeked.append(next(self._it))
            except StopIteration:
                return None
        return self._peeked[0]

    def peek_kind(self) -> SyntaxKind | None:
        token = self.peek()
        return None if token is None else token[0]


def _parse_field(key: str, tokens: _Tokens) -> Field:
    current = Field(key, "")

    colon = next(tokens, None)
    if colon is None:
        raise UnexpectedEofError()
    if colon[0] != SyntaxKind.COLON:
        raise UnexpectedTokenError(*colon)

    while tokens.peek_kind() == SyntaxKind.WHITESPACE:
        next(tokens)

    for kind, text in tokens:
        if kind == SyntaxKind.VALUE:
            current.value = text
        elif kind == SyntaxKind.NEWLINE:
            break
        else:
            raise UnexpectedTokenError(kind, text)

    current.value += "\n"

    while tokens.peek_kind() == SyntaxKind.INDENT:
        next(tokens)
        while (token := tokens.peek()) is not None:
            kind, text = token
            if kind == SyntaxKind.VALUE:
                current.value += text
                next(tokens)
            elif kind == SyntaxKind.COMMENT:
                next(tokens)
            elif kind == SyntaxKind.NEWLINE:
                current.value += text
                next(tokens)
                break
            elif kind == SyntaxKind.KEY:
                break
            else:
                raise UnexpectedTokenError(kind, key)

    if current.value.endswith(("\n", "\r")):
        current.value = current.value[:-1]
    return current


@dataclass
class Deb822:
    """A deb822 document: a sequence of paragraphs."""

    paragraphs: list[Paragraph] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Deb822:
        """Parse a deb822 document, discarding whitespace and comments."""
        tokens = _Tokens(lex(text))
        paragraphs: list[Paragraph] = []
        current: list[Field] = []

        for kind, token_text in tokens:
            if kind in (SyntaxKind.INDENT, SyntaxKind.COLON, SyntaxKind.ERROR,
                        SyntaxKind.VALUE):
                raise UnexpectedTokenError(kind, token_text)
            if kind == SyntaxKind.KEY:
                current.append(_parse_field(token_text, tokens))
            elif kind == SyntaxKind.COMMENT:
                for inner_kind, _ in tokens:
                    if inner_kind == SyntaxKind.NEWLINE:
                        break
            elif kind == SyntaxKind.NEWLINE and current:
                paragraphs.append(Paragraph(current))
                current = []

        if current:
            paragraphs.append(Paragraph(current))
        return cls(paragraphs)

    @classmethod
    def from_reader(cls, reader: IO[str]) -> Deb822:
        """Read a whole text stream and parse it."""
        return cls.parse(reader.read())

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[Paragraph]:
        return iter(self.paragraphs)

    @overload
    def __getitem__(self, index: int) -> Paragraph: ...

    @overload
    def __getitem__(self, index: slice) -> list[Paragraph]: ...

    def __getitem__(self, index: int | slice) -> Paragraph | list[Paragraph]:
        return self.paragraphs[index]

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self.paragraphs)