import datetime

import pytest

from debtext.dep3_fields import AppliedUpstream, Forwarded, Origin, OriginCategory
from debtext.patch_header import PatchHeader, PatchHeaderError

EXAMPLE = """From: John Doe <john.doe@example.com>
Date: Mon, 1 Jan 2000 00:00:00 +0000
Subject: [PATCH] fix a bug
Bug-Debian: https://bugs.debian.org/123456
Bug: https://bugzilla.example.com/bug.cgi?id=123456
Forwarded: not-needed
"""


def test_example():
    header = PatchHeader.parse(EXAMPLE)
    assert header.description == "[PATCH] fix a bug"
    assert header.bug_debian == "https://bugs.debian.org/123456"
    assert header.bug == "https://bugzilla.example.com/bug.cgi?id=123456"
    assert header.author == "John Doe <john.doe@example.com>"
    assert header.forwarded == Forwarded.NOT_NEEDED


def test_upstream():
    text = """From: Ulrich Drepper <ulrich@example.com>
Subject: Fix regex problems with some multi-bytes characters
 
 * posix/bug-regex17.c: Add testcases.
 * posix/regcomp.c (re_compile_fastmap_iter): Rewrite COMPLEX_BRACKET
   handling.
 
Origin: upstream, http://sourceware.org/git/?p=glibc.git;a=commitdiff;h=bdb56bac
Bug: http://sourceware.org/bugzilla/show_bug.cgi?id=9697
Bug-Debian: http://bugs.debian.org/510219
"""
    header = PatchHeader.parse(text)

    assert header.origin == (
        OriginCategory.UPSTREAM,
        Origin("http://sourceware.org/git/?p=glibc.git;a=commitdiff;h=bdb56bac"),
    )
    assert header.forwarded is None
    assert header.author == "Ulrich Drepper <ulrich@example.com>"
    assert header.reviewed_by is None
    assert header.last_update is None
    assert header.applied_upstream is None
    assert header.bug == "http://sourceware.org/bugzilla/show_bug.cgi?id=9697"
    assert header.bug_debian == "http://bugs.debian.org/510219"
    lines = header.description.split("\n")
    assert lines[0] == "Fix regex problems with some multi-bytes characters"
    assert "* posix/bug-regex17.c: Add testcases." in lines
    assert "handling." in lines


def test_forwarded():
    text = """Description: Use FHS compliant paths by default
 Upstream is not interested in switching to those paths.
 .
 But we will continue using them in Debian nevertheless to comply with
 our policy.
Forwarded: http://lists.example.com/oct-2006/1234.html
Author: John Doe <john@example.com>
Last-Update: 2006-12-21
"""
    header = PatchHeader.parse(text)

    assert header.origin is None
    assert header.forwarded == Forwarded("http://lists.example.com/oct-2006/1234.html")
    assert header.author == "John Doe <john@example.com>"
    assert header.reviewed_by is None
    assert header.last_update == datetime.date(2006, 12, 21)
    assert header.applied_upstream is None
    assert header.description == (
        "Use FHS compliant paths by default\n"
        "Upstream is not interested in switching to those paths.\n"
        ".\n"
        "But we will continue using them in Debian nevertheless to comply with\n"
        "our policy."
    )


def test_not_forwarded():
    text = """Description: Workaround for broken symbol resolving on mips/mipsel
 The correct fix will be done in etch and it will require toolchain
 fixes.
Forwarded: not-needed
Origin: vendor, http://bugs.debian.org/cgi-bin/bugreport.cgi?msg=80;bug=265678
Bug-Debian: http://bugs.debian.org/265678
Author: Thiemo Seufer <thiemo@example.com>
"""
    header = PatchHeader.parse(text)

    assert header.origin == (
        OriginCategory.VENDOR,
        Origin("http://bugs.debian.org/cgi-bin/bugreport.cgi?msg=80;bug=265678"),
    )
    assert header.forwarded == Forwarded.NOT_NEEDED
    assert header.author == "Thiemo Seufer <thiemo@example.com>"
    assert header.reviewed_by is None
    assert header.last_update is None
    assert header.applied_upstream is None
    assert header.bug_debian == "http://bugs.debian.org/265678"
    assert header.description == (
        "Workaround for broken symbol resolving on mips/mipsel\n"
        "The correct fix will be done in etch and it will require toolchain\n"
        "fixes."
    )


def test_applied_upstream():
    text = """Description: Fix widget frobnication speeds
 Frobnicating widgets too quickly tended to cause explosions.
Forwarded: http://lists.example.com/2010/03/1234.html
Author: John Doe <john@example.com>
Applied-Upstream: 1.2, http://bzr.example.com/frobnicator/trunk/revision/123
Last-Update: 2010-03-29
"""
    header = PatchHeader.parse(text)

    assert header.origin is None
    assert header.forwarded == Forwarded("http://lists.example.com/2010/03/1234.html")
    assert header.author == "John Doe <john@example.com>"
    assert header.reviewed_by is None
    assert header.last_update == datetime.date(2010, 3, 29)
    assert header.applied_upstream == AppliedUpstream(
        "1.2, http://bzr.example.com/frobnicator/trunk/revision/123"
    )
    assert header.description == (
        "Fix widget frobnication speeds\n"
        "Frobnicating widgets too quickly tended to cause explosions."
    )


def test_str_field_order():
    header = PatchHeader(author="John Doe <john@example.com>", forwarded=Forwarded.NO)
    assert str(header) == "Forwarded: no\nAuthor: John Doe <john@example.com>\n"


def test_round_trip():
    header = PatchHeader(
        origin=(OriginCategory.BACKPORT, Origin("abc123", commit=True)),
        forwarded=Forwarded.NOT_NEEDED,
        author="Jane Doe <jane@example.com>",
        reviewed_by="John Doe <john@example.com>",
        bug_debian="https://bugs.debian.org/1",
        last_update=datetime.date(2020, 2, 3),
        applied_upstream=AppliedUpstream("def456", commit=True),
        bug="https://bugs.example.com/2",
        description="Fix a thing",
    )
    text = str(header)
    assert "Origin: backport, commit:abc123\n" in text
    assert "Last-Update: 2020-02-03\n" in text
    assert PatchHeader.parse(text) == header


def test_invalid_date():
    with pytest.raises(PatchHeaderError):
        PatchHeader.parse("Last-Update: 2006-13-40\n")


def test_invalid_url():
    with pytest.raises(PatchHeaderError):
        PatchHeader.parse("Bug: not a url\n")


def test_empty_text():
    with pytest.raises(PatchHeaderError):
        PatchHeader.parse("")


def test_two_paragraphs():
    with pytest.raises(PatchHeaderError):
        PatchHeader.parse("Author: a\n\nAuthor: b\n")