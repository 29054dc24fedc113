"""Patch headers (DEP-3) read into and written from plain fields."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from urllib.parse import urlsplit

from .convert import deb822_field, from_paragraph, to_paragraph
from .dep3_fields import (
    AppliedUpstream,
    Forwarded,
    Origin,
    OriginCategory,
    format_origin,
    parse_origin,
)
from .lossy import Deb822Error, Paragraph

_DATE_FORMAT = "%Y-%m-%d"


class PatchHeaderError(ValueError):
    """The text is not a valid patch header."""


def _deserialize_date(text: str) -> datetime.date:
    return datetime.datetime.strptime(text, _DATE_FORMAT).date()


def _serialize_date(date: datetime.date) -> str:
    return date.strftime(_DATE_FORMAT)


def _deserialize_url(text: str) -> str:
    if not urlsplit(text).scheme:
        raise ValueError(f"invalid URL: {text!r}")
    return text


def _serialize_origin(value: tuple[OriginCategory | None, Origin]) -> str:
    category, origin = value
    return format_origin(category, origin)


@dataclass
class PatchHeader:
    """The header of a patch, as described by DEP-3."""

    origin: tuple[OriginCategory | None, Origin] | None = deb822_field(
        "Origin", default=None, deserialize=parse_origin, serialize=_serialize_origin
    )
    forwarded: Forwarded | None = deb822_field("Forwarded", default=None)
    author: str | None = deb822_field("Author", default=None)
    reviewed_by: str | None = deb822_field("Reviewed-by", default=None)
    bug_debian: str | None = deb822_field(
        "Bug-Debian", default=None, deserialize=_deserialize_url
    )
    last_update: datetime.date | None = deb822_field(
        "Last-Update",
        default=None,
        deserialize=_deserialize_date,
        serialize=_serialize_date,
    )
    applied_upstream: AppliedUpstream | None = deb822_field(
        "Applied-Upstream", default=None
    )
    bug: str | None = deb822_field("Bug", default=None, deserialize=_deserialize_url)
    description: str | None = deb822_field("Description", default=None)

    @classmethod
    def parse(cls, text: str) -> PatchHeader:
        """Parse a patch header.

        ``From`` stands in for a missing ``Author`` and ``Subject`` for a
        missing ``Description``. Raises PatchHeaderError on bad input.
        """
        try:
            paragraph = Paragraph.parse(text)
        except Deb822Error as exc:
            raise PatchHeaderError(str(exc)) from exc
        try:
            header = from_paragraph(cls, paragraph)
        except ValueError as exc:
            raise PatchHeaderError(str(exc)) from exc
        if header.author is None:
            header.author = paragraph.get("From")
        if header.description is None:
            header.description = paragraph.get("Subject")
        return header

    def __str__(self) -> str:
        return str(to_paragraph(self, Paragraph))