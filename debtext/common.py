"""Character classes used by the deb822 lexer."""


def is_indent(c: str) -> bool:
    """Return True if ``c`` starts a continuation line (space or tab)."""
    return c in (" ", "\t")


def is_newline(c: str) -> bool:
    """Return True if ``c`` is a line terminator character."""
    return c in ("\n", "\r")


def is_valid_key_char(c: str) -> bool:
    """Return True if ``c`` may appear in a field name.

    Field names consist of printable US-ASCII characters other than
    space and colon.
    """
    return len(c) == 1 and "\x21" <= c <= "\x7e" and c != ":"


def is_valid_initial_key_char(c: str) -> bool:
    """Return True if ``c`` may start a field name (a valid key char, not ``-``)."""
    return c != "-" and is_valid_key_char(c)