# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the byte-level display escaping."""

from __future__ import annotations

import pytest

from modump.config import DumpAction
from modump.reporting import format_key_line, format_pair_line, quote_escape, render_listing


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b"", b'""'),
        (b"plain text", b'"plain text"'),
        (b"line\nbreak", b'"line\\nbreak"'),
        (b"a\tb", b'"a\\tb"'),
        (b"nul\0inside", b'"nul\\0inside"'),
        (b'say "hi"', b'"say \\"hi\\""'),
        (b"back\\slash", b'"back\\\\slash"'),
        (b"\r\x7f\xff\xc3\xa9", b'"\r\x7f\xff\xc3\xa9"'),
    ],
)
def test_quote_escape(raw: bytes, expected: bytes) -> None:
    assert quote_escape(raw) == expected


def test_escaping_is_not_reversible() -> None:
    once = quote_escape(b"\n")
    assert quote_escape(once) == b'"\\"\\\\n\\""'


def test_line_formats() -> None:
    assert format_key_line(b"hello") == b'  "hello"'
    assert format_pair_line(b"hello", b"bonjour") == b'  "hello" -> "bonjour"'


def test_render_listing_follows_mapping_order() -> None:
    entries = {b"b": b"2", b"a": b"1"}

    assert list(render_listing(entries, DumpAction.KEYS)) == [b'  "b"', b'  "a"']
    assert list(render_listing(entries, DumpAction.PAIRS)) == [b'  "b" -> "2"', b'  "a" -> "1"']
