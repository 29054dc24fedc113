"""Parsing and writing of deb822 documents, DEP-5 copyright files and DEP-3 patch headers."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "lex",
    "lossy",
    "convert",
    "patterns",
    "license",
    "copyright",
    "dep3_fields",
    "patch_header",
]