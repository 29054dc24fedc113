# debtext

Parsing and writing of deb822-style text. This covers Debian control files,
machine-readable `debian/copyright` files (DEP-5) and patch headers (DEP-3).

## Installation

```
pip install debtext
```

## Reading deb822 documents

```python
from debtext.lossy import Deb822

doc = Deb822.parse("""Package: hello
Version: 2.10
Description: A program that says hello
 Some more text

Package: world
Version: 1.0
""")

assert len(doc) == 2
first = doc[0]
assert first.get("Version") == "2.10"
assert first.get("Description") == "A program that says hello\nSome more text"

first.set("Version", "2.11")
print(str(doc))
```

A `Paragraph` offers these operations:

- `get(name, default=None)` returns the first field with that name.
- `set` replaces the first field with that name, or appends one if there is none.
- `insert` always appends a field.
- `remove` drops every field with that name.
- `items()` yields `(name, value)` pairs.
- `name in paragraph` tests whether a field is present.

When a paragraph is written back out, a value with several lines comes out as
continuation lines indented by one space.

Malformed input raises a subclass of `debtext.lossy.Deb822Error`: one of
`UnexpectedTokenError`, `UnexpectedEofError` or `ExpectedEofError`.
`Paragraph.parse` reads text that must hold exactly one paragraph.
`Deb822.from_reader` reads from any text stream.

The lower-level tokenizer is `debtext.lex.lex`. It yields `(SyntaxKind, text)`
pairs.

## Mapping paragraphs to dataclasses

`debtext.convert` maps dataclass fields onto paragraph keys:

```python
from dataclasses import dataclass
from debtext.convert import deb822_field, from_paragraph, to_paragraph, update_paragraph
from debtext.lossy import Paragraph

@dataclass
class Entry:
    name: str = deb822_field("Name")
    enabled: bool = deb822_field(
        "Enabled",
        deserialize=lambda s: s == "yes",
        serialize=lambda b: "yes" if b else "no",
    )

paragraph = Paragraph.parse("Name: foo\nEnabled: yes\n")
entry = from_paragraph(Entry, paragraph)
entry.name = "bar"
update_paragraph(entry, paragraph)
print(to_paragraph(entry, Paragraph))
```

The rules for mapping are as follows:

- A field without a `deb822_field` key uses its attribute name.
- A required field that is missing raises `ValueError`.
- `to_paragraph` leaves out fields whose value is `None`.
- `update_paragraph` removes the keys of fields whose value is `None`.

## Copyright files

```python
from pathlib import Path
from debtext.copyright import Copyright

copyright = Copyright.parse(Path("debian/copyright").read_text())
license = copyright.find_license_for_file("debian/rules")
if license is not None:
    print(license.name)
```

Finding the license for a file works like this:

- `find_files` returns the last `Files` paragraph whose patterns match the path.
- `find_license_for_file` returns the license text given in that paragraph.
- If that paragraph gives only a license name, it looks up the stand-alone
  license paragraph with that name instead.

Errors are reported as follows:

- Text that does not start with `Format:` raises `NotMachineReadableError`.
- Other problems raise `CopyrightParseError`.

`Files` patterns are matched with `debtext.patterns.glob_to_regex`. It supports
`*`, `?` and the escapes `\*`, `\?` and `\\`. Any other escape raises
`InvalidGlobError`.

Licenses are `debtext.license.License` values with a `name`, a `text`, or both.

## Patch headers

```python
from debtext.patch_header import PatchHeader
from debtext.dep3_fields import Forwarded

header = PatchHeader.parse("""Description: Fix a bug
Forwarded: not-needed
Last-Update: 2010-03-29
""")
assert header.forwarded == Forwarded.NOT_NEEDED
print(header.last_update)  # datetime.date(2010, 3, 29)
```

How fields are read:

- `Author` falls back to `From`, and `Description` falls back to `Subject`.
- `Origin` is read as a `(OriginCategory | None, Origin)` pair.
- `Bug` and `Bug-Debian` must be URLs that have a scheme.
- Invalid input raises `PatchHeaderError`.

## What this package does not do

Parsing drops comments and layout whitespace. Writing a document back
therefore gives normalised formatting rather than the original text. There is
no editing mode that keeps comments in place. There is no command-line tool;
everything is used as a library.

## Running the tests

```
pip install -e .[test]
pytest
```