"""Parsing and formatting of machine-readable copyright files (DEP-5)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .convert import deb822_field, from_paragraph, to_paragraph
from .license import License
from .lossy import Deb822, Deb822Error, Paragraph
from .patterns import glob_to_regex

CURRENT_FORMAT = "https://www.debian.org/doc/packaging-manuals/copyright-format/1.0/"
KNOWN_FORMATS = (CURRENT_FORMAT,)


class CopyrightParseError(ValueError):
    """The text is not a valid machine-readable copyright file."""


class NotMachineReadableError(CopyrightParseError):
    """The text does not start with a ``Format:`` field."""

    def __init__(self) -> None:
        super().__init__("Not machine readable")


def _split_lines(text: str) -> list[str]:
    return text.split("\n")


def _join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def _path_text(filename: str | os.PathLike[str]) -> str:
    return filename if isinstance(filename, str) else os.fspath(filename)


@dataclass
class Header:
    """The header paragraph of a copyright file."""

    format: str = deb822_field("Format", default=CURRENT_FORMAT)
    files_excluded: list[str] | None = deb822_field(
        "Files-Excluded",
        default=None,
        deserialize=_split_lines,
        serialize=_join_lines,
    )
    source: str | None = deb822_field("Source", default=None)
    upstream_contact: str | None = deb822_field("Upstream-Contact", default=None)

    def __str__(self) -> str:
        return str(to_paragraph(self, Paragraph))


@dataclass
class FilesParagraph:
    """A paragraph describing the copyright and license of a set of files."""

    files: list[str] = deb822_field(
        "Files", deserialize=_split_lines, serialize=_join_lines
    )
    license: License = deb822_field("License")
    copyright: list[str] = deb822_field(
        "Copyright", deserialize=_split_lines, serialize=_join_lines
    )
    comment: str | None = deb822_field("Comment", default=None)

    def matches(self, filename: str | os.PathLike[str]) -> bool:
        """Return True if ``filename`` matches one of the file patterns."""
        name = _path_text(filename)
        return any(glob_to_regex(pattern).match(name) for pattern in self.files)

    def __str__(self) -> str:
        return str(to_paragraph(self, Paragraph))


@dataclass
class LicenseParagraph:
    """A stand-alone paragraph describing a license."""

    license: License = deb822_field("License")
    comment: str | None = deb822_field("Comment", default=None)

    def __str__(self) -> str:
        return str(to_paragraph(self, Paragraph))


@dataclass
class Copyright:
    """A machine-readable copyright file."""

    header: Header = field(default_factory=Header)
    files: list[FilesParagraph] = field(default_factory=list)
    licenses: list[LicenseParagraph] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Copyright:
        """Parse the text of a copyright file.

        Raises NotMachineReadableError if the text does not start with a
        ``Format:`` field, and CopyrightParseError for other problems.
        """
        if not text.startswith("Format:"):
            raise NotMachineReadableError()
        try:
            doc = Deb822.parse(text)
        except Deb822Error as exc:
            raise CopyrightParseError(str(exc)) from exc

        paragraphs = iter(doc)
        first = next(paragraphs, None)
        if first is None:
            raise CopyrightParseError("No paragraphs")

        try:
            header = from_paragraph(Header, first)
            files: list[FilesParagraph] = []
            licenses: list[LicenseParagraph] = []
            for para in paragraphs:
                if "Files" in para:
                    files.append(from_paragraph(FilesParagraph, para))
                elif "License" in para:
                    licenses.append(from_paragraph(LicenseParagraph, para))
                else:
                    raise CopyrightParseError(
                        "Paragraph is neither License nor Files"
                    )
        except CopyrightParseError:
            raise
        except ValueError as exc:
            raise CopyrightParseError(str(exc)) from exc

        return cls(header=header, files=files, licenses=licenses)

    def find_files(self, path: str | os.PathLike[str]) -> FilesParagraph | None:
        """Return the last files paragraph matching ``path``, if any."""
        matching = [p for p in self.files if p.matches(path)]
        return matching[-1] if matching else None

    def find_license_for_file(
        self, filename: str | os.PathLike[str]
    ) -> License | None:
        """Return the license that applies to ``filename``, if known."""
        files = self.find_files(filename)
        if files is None:
            return None
        if files.license.text is not None:
            return files.license
        if files.license.name is None:
            return None
        return self.find_license_by_name(files.license.name)

    def find_license_by_name(self, name: str) -> License | None:
        """Return the first stand-alone license called ``name``, if any."""
        return next(
            (p.license for p in self.licenses if p.license.name == name), None
        )

    def __str__(self) -> str:
        parts = [str(self.header)]
        parts.extend(f"\n{files}" for files in self.files)
        parts.extend(f"\n{lic}" for lic in self.licenses)
        return "".join(parts)