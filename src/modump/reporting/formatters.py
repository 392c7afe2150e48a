# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Byte-level formatters for catalog listings."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Final

from ..config import DumpAction

_QUOTE: Final[bytes] = b'"'
_INDENT: Final[bytes] = b"  "
_ARROW: Final[bytes] = b" -> "
_ESCAPES: Final[dict[int, bytes]] = {
    ord("\n"): b"\\n",
    ord("\t"): b"\\t",
    0: b"\\0",
    ord('"'): b'\\"',
    ord("\\"): b"\\\\",
}


def quote_escape(value: bytes) -> bytes:
    """Return ``value`` wrapped in double quotes with control characters escaped.

    Newline, tab, NUL, double quote and backslash become two-character escape
    sequences. Every other byte is copied verbatim, so non UTF-8 input passes
    through unchanged.

    Args:
        value: Raw bytes to display.

    Returns:
        bytes: Quoted display form of ``value``.
    """

    body = b"".join(_ESCAPES.get(byte, bytes((byte,))) for byte in value)
    return _QUOTE + body + _QUOTE


def format_key_line(key: bytes) -> bytes:
    return _INDENT + quote_escape(key)


def format_pair_line(key: bytes, value: bytes) -> bytes:
    return _INDENT + quote_escape(key) + _ARROW + quote_escape(value)


def render_listing(entries: Mapping[bytes, bytes], action: DumpAction) -> Iterator[bytes]:
    """Yield one display line per entry of ``entries`` for ``action``."""

    for key, value in entries.items():
        if action is DumpAction.KEYS:
            yield format_key_line(key)
        else:
            yield format_pair_line(key, value)


__all__ = ["format_key_line", "format_pair_line", "quote_escape", "render_listing"]
