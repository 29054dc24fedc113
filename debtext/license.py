"""License values as found in copyright files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class License:
    """A license: a name, a text, or both."""

    name: str | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.name is None and self.text is None:
            raise ValueError("a license needs a name or a text")

    @classmethod
    def parse(cls, text: str) -> License:
        """Parse a License field value: a name line, optionally followed by text."""
        name, sep, rest = text.partition("\n")
        if not sep:
            return cls(name=text)
        if not name:
            return cls(text=rest)
        return cls(name=name, text=rest)

    def __str__(self) -> str:
        if self.text is None:
            return self.name or ""
        if self.name is None:
            return f"\n{self.text}"
        return f"{self.name}\n{self.text}"