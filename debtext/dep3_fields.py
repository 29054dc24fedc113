"""Field values used in patch headers (DEP-3)."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

_COMMIT_PREFIX = "commit:"


def _split_commit(text: str) -> tuple[str, bool]:
    """Strip a ``commit:`` prefix, reporting whether it was present."""
    if text.startswith(_COMMIT_PREFIX):
        return text[len(_COMMIT_PREFIX):], True
    return text, False


@dataclass(frozen=True)
class Forwarded:
    """The value of a patch header's Forwarded field.

    ``reference`` points at where the patch was sent; when it is None,
    ``needed`` tells apart "no" (not sent yet) from "not-needed".
    """

    reference: str | None = None
    needed: bool = True

    NO: ClassVar[Forwarded]
    NOT_NEEDED: ClassVar[Forwarded]

    @classmethod
    def parse(cls, text: str) -> Forwarded:
        """Parse a Forwarded field value."""
        if text == "no":
            return cls.NO
        if text == "not-needed":
            return cls.NOT_NEEDED
        return cls(reference=text)

    def __str__(self) -> str:
        if self.reference is not None:
            return self.reference
        return "no" if self.needed else "not-needed"


Forwarded.NO = Forwarded()
Forwarded.NOT_NEEDED = Forwarded(needed=False)


class OriginCategory(enum.Enum):
    """The category given in a patch header's Origin field."""

    BACKPORT = "backport"
    VENDOR = "vendor"
    UPSTREAM = "upstream"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str) -> OriginCategory:
        """Parse a category name; raises ValueError for unknown names."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError("invalid origin category") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Origin:
    """The source of a patch: a commit or another reference."""

    value: str
    commit: bool = False

    @classmethod
    def parse(cls, text: str) -> Origin:
        """Parse an Origin value, recognising a ``commit:`` prefix."""
        value, commit = _split_commit(text)
        return cls(value, commit)

    def __str__(self) -> str:
        return f"{_COMMIT_PREFIX}{self.value}" if self.commit else self.value


@dataclass(frozen=True)
class AppliedUpstream:
    """The value of an Applied-Upstream field: a commit or another reference."""

    value: str
    commit: bool = False

    @classmethod
    def parse(cls, text: str) -> AppliedUpstream:
        """Parse an Applied-Upstream value, recognising a ``commit:`` prefix."""
        value, commit = _split_commit(text)
        return cls(value, commit)

    def __str__(self) -> str:
        return f"{_COMMIT_PREFIX}{self.value}" if self.commit else self.value


def parse_origin(text: str) -> tuple[OriginCategory | None, Origin]:
    """Parse an Origin field value, with an optional ``<category>, `` prefix."""
    head, _, rest = text.partition(", ")
    try:
        category: OriginCategory | None = OriginCategory(head)
    except ValueError:
        category, rest = None, text
    return category, Origin.parse(rest)


def format_origin(category: OriginCategory | None, origin: Origin) -> str:
    """Format an Origin field value, the inverse of :func:`parse_origin`."""
    prefix = f"{category}, " if category is not None else ""
    return f"{prefix}{origin}"